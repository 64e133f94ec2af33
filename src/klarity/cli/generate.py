"""Generate command for creating default config."""

import logging
from pathlib import Path

import yaml

from ..models.klarity_config import KlarityConfig
from .output import info, success

logger = logging.getLogger(__name__)

CONFIG_FILE = "klarity.yml"

# Header comments for generated file
CONFIG_HEADER = """\
# klarity Board Configuration
#
# board_file: Relative path to the saved board (JSON)
#
# Columns:
#   - status: one of backlog, todo, in_progress, in_review, done
#   - Each status may appear only once; list order is display order
#   - wip_limit: optional work-in-progress limit (1 or more)
#   - collapsed: start the column collapsed (default false)
#
# Columns only shape a new board. Once a board is saved, its own
# columns are used.

"""


def generate_config_yaml(board_file: str = ".klarity/board.json") -> str:
    """Generate YAML config from the default KlarityConfig model.

    Uses KlarityConfig.default() as the single source of truth,
    ensuring generated config always matches internal defaults.
    """
    config = KlarityConfig.default()
    config_dict = config.model_dump(mode="json")
    config_dict["board_file"] = board_file

    # Write statuses by lowercase name and drop default-valued keys
    columns = []
    for col in config.board.columns:
        entry: dict = {"status": col.status.name.lower()}
        if col.wip_limit is not None:
            entry["wip_limit"] = col.wip_limit
        if col.collapsed:
            entry["collapsed"] = True
        columns.append(entry)
    config_dict["board"]["columns"] = columns

    yaml_content = yaml.dump(config_dict, default_flow_style=False, sort_keys=False)
    return CONFIG_HEADER + yaml_content


def run_generate(project_root: Path) -> int:
    """
    Generate default configuration.

    Args:
        project_root: Path to project root where klarity.yml will be created

    Returns:
        Exit code (0 = success, 1 = nothing to do)
    """
    config_path = project_root / CONFIG_FILE

    if config_path.exists():
        info(f"Config exists: {config_path}")
        print("Nothing to generate.")
        return 1

    if not project_root.exists():
        project_root.mkdir(parents=True)

    config_path.write_text(generate_config_yaml())
    logger.info("Generated %s", config_path)
    success(f"Generated config: {config_path}")
    return 0
