"""Runtime settings, read from KLARITY_* environment variables."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings for one klarity run.

    Command line flags are passed in as keyword arguments and win over the
    environment (e.g. KLARITY_PROJECT_ROOT, KLARITY_BOARD_FILE).
    """

    project_root: Path = Field(
        default=Path(),
        description="Directory holding klarity.yml; relative board paths start here",
    )

    board_file: Path | None = Field(
        default=None,
        description="Board document to open instead of the one named in klarity.yml",
    )

    verbose: int = Field(
        default=0,
        ge=0,
        description="0 is silent, 1 logs INFO, 2 or more logs DEBUG",
    )

    log_file: Path | None = Field(
        default=None,
        description="Also write log records to this file",
    )

    model_config = {
        "env_prefix": "KLARITY_",
    }
