"""Tests for the command line entry point and board rendering."""

from datetime import datetime, timedelta
from pathlib import Path

import pytest
from pydantic import ValidationError

from klarity.__main__ import main, parse_args
from klarity.cli.board import format_column_title, format_task, render_state
from klarity.config import Settings
from klarity.models import (
    EmptyState,
    ErrorState,
    KanbanColumn,
    LoadingState,
    Subtask,
    SuccessState,
    TaskPriority,
    TaskStatus,
    TaskTag,
    TaskTimer,
)
from klarity.repositories import FileBoardStore
from klarity.services import BoardService


def run_main(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


@pytest.fixture
def board_path(tmp_path: Path) -> Path:
    return tmp_path / ".klarity" / "board.json"


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.project_root is None
        assert args.filter == ""
        assert args.reset is False
        assert args.verbose == 0

    def test_verbosity_counts(self):
        assert parse_args(["-vv"]).verbose == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "klarity" in capsys.readouterr().out


class TestSettings:
    def test_env_prefix(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("KLARITY_PROJECT_ROOT", str(tmp_path))
        monkeypatch.setenv("KLARITY_VERBOSE", "2")

        settings = Settings()

        assert settings.project_root == tmp_path
        assert settings.verbose == 2
        assert settings.board_file is None

    def test_negative_verbose_rejected(self):
        with pytest.raises(ValidationError):
            Settings(verbose=-1)


class TestMain:
    """End-to-end runs of main()."""

    def test_first_run_creates_board(self, tmp_path: Path, board_path: Path, capsys):
        assert run_main(["--project-root", str(tmp_path)]) == 0

        out = capsys.readouterr().out
        assert "Backlog (0)" in out
        assert "To Do (0/5)" in out
        assert board_path.exists()

    def test_board_file_override(self, tmp_path: Path):
        custom = tmp_path / "elsewhere" / "mine.json"

        assert run_main(["--project-root", str(tmp_path), "--board-file", str(custom)]) == 0

        assert custom.exists()

    def test_lists_saved_tasks(self, tmp_path: Path, board_path: Path, capsys):
        service = BoardService(FileBoardStore(board_path))
        service.load_board()
        task = service.create_task(TaskStatus.TODO, "Fix login bug")
        service.update_task(task.model_copy(update={"assignee": "alice"}))

        assert run_main(["--project-root", str(tmp_path)]) == 0

        out = capsys.readouterr().out
        assert "Fix login bug" in out
        assert "@alice" in out
        assert "To Do (1/5)" in out

    def test_filter(self, tmp_path: Path, board_path: Path, capsys):
        service = BoardService(FileBoardStore(board_path))
        service.load_board()
        urgent = service.create_task(TaskStatus.TODO, "Urgent thing")
        service.update_task(urgent.model_copy(update={"priority": TaskPriority.HIGH}))
        service.create_task(TaskStatus.TODO, "Someday thing")

        assert run_main(["--project-root", str(tmp_path), "--filter", "priority:high"]) == 0

        out = capsys.readouterr().out
        assert "Urgent thing" in out
        assert "Someday thing" not in out

    def test_unreadable_board_warns_and_is_kept(
        self, tmp_path: Path, board_path: Path, capsys
    ):
        board_path.parent.mkdir(parents=True)
        board_path.write_text("{ corrupted")

        assert run_main(["--project-root", str(tmp_path)]) == 0

        out = capsys.readouterr().out
        assert "Could not read" in out
        assert "--reset" in out
        assert "Board is empty" in out
        assert board_path.read_text() == "{ corrupted"

    def test_non_utf8_board_file(self, tmp_path: Path, capsys):
        custom = tmp_path / "binary.json"
        custom.write_bytes(b"\xff\xfe\x00garbage")

        assert run_main(["--project-root", str(tmp_path), "--board-file", str(custom)]) == 0

        out = capsys.readouterr().out
        assert "Could not read" in out
        assert "Board is empty" in out

    def test_reset(self, tmp_path: Path, board_path: Path, capsys):
        board_path.parent.mkdir(parents=True)
        board_path.write_text("{ corrupted")

        assert run_main(["--project-root", str(tmp_path), "--reset"]) == 0

        assert "In Review (0)" in capsys.readouterr().out
        assert board_path.read_text().startswith('{"columns":')

    def test_config_error_is_reported(self, tmp_path: Path, capsys):
        (tmp_path / "klarity.yml").write_text("board: [broken\n")

        assert run_main(["--project-root", str(tmp_path)]) == 0

        out = capsys.readouterr().out
        assert "Invalid YAML in klarity.yml" in out
        assert "Backlog (0)" in out

    def test_configured_columns(self, tmp_path: Path, capsys):
        (tmp_path / "klarity.yml").write_text(
            "board:\n  columns:\n    - status: todo\n    - status: done\n      collapsed: true\n"
        )

        assert run_main(["--project-root", str(tmp_path)]) == 0

        out = capsys.readouterr().out
        assert "Done (0) [collapsed]" in out
        assert "Backlog" not in out

    def test_generate(self, tmp_path: Path):
        assert run_main(["--project-root", str(tmp_path), "--generate"]) == 0
        assert (tmp_path / "klarity.yml").exists()
        assert run_main(["--project-root", str(tmp_path), "--generate"]) == 1


class TestRendering:
    """Tests for the plain-text board renderer."""

    def test_format_task_details(self, make_task, now: datetime):
        task = make_task(
            "task-1",
            title="Ship it",
            assignee="alice",
            points=3,
            tags=[TaskTag(label="release")],
            subtasks=[Subtask(id="s1", title="a", is_completed=True), Subtask(id="s2", title="b")],
            timer=TaskTimer(started_at=now - timedelta(minutes=5), is_paused=True),
            due_date=now - timedelta(hours=1),
        )

        line = format_task(task, now)

        assert "Ship it" in line
        assert "@alice" in line
        assert "3 pts" in line
        assert "#release" in line
        assert "[1/2]" in line
        assert "timer 00:05:00 paused" in line
        assert "OVERDUE" in line

    def test_format_plain_task(self, make_task, now: datetime):
        assert format_task(make_task("task-1", title="Plain"), now) == "o Plain"

    def test_format_column_title(self, make_task):
        column = KanbanColumn(
            status=TaskStatus.IN_PROGRESS,
            tasks=[make_task("a"), make_task("b")],
            wip_limit=3,
        )
        assert format_column_title(column) == "In Progress (2/3)"

    def test_render_states(self, capsys):
        assert render_state(SuccessState(columns=[KanbanColumn(status=TaskStatus.TODO)])) == 0
        assert render_state(EmptyState()) == 0
        assert render_state(ErrorState(message="disk gone")) == 1
        assert render_state(LoadingState()) == 1

        out = capsys.readouterr().out
        assert "(no tasks)" in out
        assert "Board is empty" in out
        assert "disk gone" in out

    def test_render_over_wip_limit(self, make_task, capsys):
        column = KanbanColumn(
            status=TaskStatus.TODO, tasks=[make_task("a"), make_task("b")], wip_limit=1
        )

        render_state(SuccessState(columns=[column]))

        assert "To Do is over its WIP limit" in capsys.readouterr().out
