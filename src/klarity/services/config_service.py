"""Configuration service for loading klarity.yml."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models.klarity_config import BoardConfig, KlarityConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and caching application configuration."""

    CONFIG_FILE = "klarity.yml"

    def __init__(self, project_root: Path) -> None:
        """Initialize the config service.

        Args:
            project_root: Path to the directory containing klarity.yml
        """
        self.project_root = project_root
        self._config: KlarityConfig | None = None
        self._config_error: str | None = None

    @property
    def has_config_error(self) -> bool:
        """Check if there was an error loading config."""
        return self._config_error is not None

    @property
    def config_error(self) -> str | None:
        """Get the config error message if any."""
        return self._config_error

    def get_config(self) -> KlarityConfig:
        """Get configuration, loading from file if not cached."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def get_board_config(self) -> BoardConfig:
        """Convenience method to get board configuration."""
        return self.get_config().board

    def get_board_path(self) -> Path:
        """Absolute location of the board file."""
        return self.project_root / self.get_config().board_file

    def reload(self) -> None:
        """Clear cached configuration, forcing reload on next access."""
        self._config = None
        self._config_error = None

    def _load_config(self) -> KlarityConfig:
        """Load configuration from file or return default."""
        config_path = self.project_root / self.CONFIG_FILE
        self._config_error = None

        if not config_path.exists():
            logger.debug("No %s found, using defaults", self.CONFIG_FILE)
            return KlarityConfig.default()

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)

            if data is None:
                self._config_error = f"{self.CONFIG_FILE} is empty"
                logger.warning(self._config_error)
                return KlarityConfig.default()

            if not isinstance(data, dict):
                self._config_error = f"{self.CONFIG_FILE} must contain a mapping"
                logger.warning(self._config_error)
                return KlarityConfig.default()

            config = KlarityConfig(**data)
            logger.info(
                "Loaded %s with %d columns", self.CONFIG_FILE, len(config.board.columns)
            )
            return config

        except yaml.YAMLError as e:
            self._config_error = f"Invalid YAML in {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return KlarityConfig.default()

        except ValidationError as e:
            self._config_error = f"Invalid {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return KlarityConfig.default()

        except UnicodeDecodeError as e:
            self._config_error = f"{self.CONFIG_FILE} is not valid UTF-8: {e}"
            logger.warning(self._config_error)
            return KlarityConfig.default()

        except OSError as e:
            self._config_error = f"Error loading {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return KlarityConfig.default()
