"""CLI entry point for klarity."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="klarity",
        description="Local-first Kanban board for notes and tasks",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Path to project root containing klarity.yml (default: current directory)",
    )
    parser.add_argument(
        "--board-file",
        type=Path,
        default=None,
        help="Board file to use instead of board_file from klarity.yml",
    )
    parser.add_argument(
        "--generate",
        action="store_true",
        help="Generate default klarity.yml in the project root and exit",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Replace the saved board with empty configured columns",
    )
    parser.add_argument(
        "--filter",
        default="",
        metavar="EXPR",
        help="Only show matching tasks (e.g. 'tag:backend priority:high login')",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def run(settings: Settings, filter_expression: str = "", reset: bool = False) -> int:
    """Load the board and print it. Returns a process exit code."""
    from .cli.board import render_state
    from .cli.output import warning
    from .models import SuccessState
    from .repositories import FileBoardStore
    from .services import BoardService, ConfigService, FilterService

    config_service = ConfigService(settings.project_root)
    config_service.get_config()
    if config_service.config_error:
        warning(config_service.config_error)

    board_path = settings.board_file or config_service.get_board_path()
    service = BoardService(FileBoardStore(board_path), config_service)

    if reset:
        service.reset_board()

    state = service.load_state()
    if service.recovered_from_unreadable:
        warning(f"Could not read {board_path}; run with --reset to start a new board")
    elif isinstance(state, SuccessState) and not service.store.exists():
        service.save_board()

    if filter_expression and isinstance(state, SuccessState):
        filter_service = FilterService()
        task_filter = filter_service.parse(filter_expression)
        state = state.model_copy(
            update={
                "columns": filter_service.apply_to_columns(state.columns, task_filter),
                "filter_expression": filter_expression,
            }
        )

    return render_state(state)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.project_root:
        settings_kwargs["project_root"] = args.project_root
    if args.board_file:
        settings_kwargs["board_file"] = args.board_file
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    # Setup logging based on verbosity
    setup_logging(settings.verbose, settings.log_file)

    # Handle --generate command
    if args.generate:
        from .cli.generate import run_generate

        raise SystemExit(run_generate(settings.project_root))

    raise SystemExit(run(settings, args.filter, args.reset))


if __name__ == "__main__":
    main()
