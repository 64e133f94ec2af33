"""Tests for generate command."""

from pathlib import Path

import yaml

from klarity.cli.generate import CONFIG_FILE, generate_config_yaml, run_generate
from klarity.models import KlarityConfig, TaskStatus
from klarity.services import ConfigService


class TestGenerateConfigYaml:
    """Tests for generate_config_yaml function."""

    def test_generates_valid_yaml(self):
        """Generated YAML is valid and parseable."""
        parsed = yaml.safe_load(generate_config_yaml())

        assert parsed["version"] == 1
        assert parsed["board_file"] == ".klarity/board.json"
        assert "columns" in parsed["board"]

    def test_columns_use_lowercase_statuses(self):
        parsed = yaml.safe_load(generate_config_yaml())
        assert [c["status"] for c in parsed["board"]["columns"]] == [
            "backlog",
            "todo",
            "in_progress",
            "in_review",
            "done",
        ]

    def test_default_valued_keys_omitted(self):
        columns = yaml.safe_load(generate_config_yaml())["board"]["columns"]
        assert columns[0] == {"status": "backlog"}
        assert columns[1] == {"status": "todo", "wip_limit": 5}

    def test_custom_board_file(self):
        parsed = yaml.safe_load(generate_config_yaml("data/board.json"))
        assert parsed["board_file"] == "data/board.json"

    def test_includes_header_comments(self):
        assert generate_config_yaml().startswith("# klarity Board Configuration")

    def test_output_validates_as_config(self):
        """The generated file loads back as the default config."""
        parsed = yaml.safe_load(generate_config_yaml())
        assert KlarityConfig(**parsed) == KlarityConfig.default()


class TestRunGenerate:
    """Tests for run_generate function."""

    def test_creates_config(self, tmp_path: Path, capsys):
        assert run_generate(tmp_path) == 0

        assert (tmp_path / CONFIG_FILE).exists()
        assert "Generated config" in capsys.readouterr().out

    def test_creates_missing_project_root(self, tmp_path: Path):
        root = tmp_path / "new" / "project"
        assert run_generate(root) == 0
        assert (root / CONFIG_FILE).exists()

    def test_existing_config_untouched(self, tmp_path: Path, capsys):
        config_path = tmp_path / CONFIG_FILE
        config_path.write_text("version: 1\n")

        assert run_generate(tmp_path) == 1

        assert config_path.read_text() == "version: 1\n"
        assert "Nothing to generate." in capsys.readouterr().out

    def test_generated_config_loads_without_error(self, tmp_path: Path):
        run_generate(tmp_path)

        service = ConfigService(tmp_path)

        assert service.get_board_config().statuses == list(TaskStatus)
        assert not service.has_config_error
