"""Unit tests for the mdlinks CLI (Typer app and main entry point)."""

import pytest
from typer.testing import CliRunner

from mdlinks.api.link.cmd_check import cmd_check
from mdlinks.cli import main
from mdlinks.cli._create_app import _create_app
from mdlinks.cli._run_single_execution import _run_single_execution
from mdlinks.cli.display import Display
from mdlinks.utils import logger

pytestmark = pytest.mark.cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def docs(tmp_path):
    root = tmp_path / "docs"
    root.mkdir()
    (root / "a.md").write_text("# A\n", encoding="utf-8")
    (root / "index.md").write_text("[A](a.md)\n[Missing](missing.md)\n", encoding="utf-8")
    return root


@pytest.fixture
def no_log_setup(monkeypatch):
    monkeypatch.setattr(logger, "configure_logging", lambda *args, **kwargs: None)


def test_link_extract(runner, docs):
    result = runner.invoke(_create_app(), ["link", "extract", str(docs / "index.md")])

    assert result.exit_code == 0
    assert "target: a.md" in result.output
    assert "target: missing.md" in result.output


def test_link_extract_missing_file(runner, tmp_path):
    result = runner.invoke(_create_app(), ["link", "extract", str(tmp_path / "none.md")])

    assert result.exit_code == 1
    assert "File does not exist" in result.output


def test_link_check_reports_broken(runner, docs):
    result = runner.invoke(_create_app(), ["--display", "json", "link", "check", str(docs), "--offline"])

    assert result.exit_code == 1
    assert "====== RESULTS ======" in result.output
    assert '"broken_count": 1' in result.output
    assert "missing.md" in result.output


def test_link_check_clean_tree(runner, docs):
    (docs / "index.md").write_text("[A](a.md)\n", encoding="utf-8")

    result = runner.invoke(_create_app(), ["link", "check", str(docs), "--offline"])

    assert result.exit_code == 0
    assert "broken_count: 0" in result.output


def test_config_show(runner):
    result = runner.invoke(_create_app(), ["config", "show", "check"])

    assert result.exit_code == 0
    assert "concurrency_limit: 20" in result.output


def test_invalid_display_format(runner):
    result = runner.invoke(_create_app(), ["--display", "xml", "config", "show"])

    assert result.exit_code == 2


def test_no_command_shows_help(runner):
    result = runner.invoke(_create_app(), [])

    assert result.exit_code == 0
    assert "link" in result.output
    assert "config" in result.output


class RecordingDisplay(Display):
    """Display that keeps every message instead of printing it."""

    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def status(self, message, **kwargs):
        self.messages.append(("status", message))

    def success(self, message, **kwargs):
        self.messages.append(("success", message))

    def error(self, message, **kwargs):
        self.messages.append(("error", message))

    def warning(self, message, **kwargs):
        self.messages.append(("warning", message))

    def info(self, message, **kwargs):
        self.messages.append(("info", message))

    def table(self, rows, headers, **kwargs):
        self.messages.append(("table", str(len(rows))))

    def json_output(self, data, **kwargs):
        self.messages.append(("output", kwargs.get("format", "yaml")))


def test_output_warnings_are_displayed(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    display = RecordingDisplay()

    with pytest.raises(SystemExit) as exc_info:
        _run_single_execution(cmd_check, (str(empty),), {"offline": True}, display, "json")

    assert exc_info.value.code == 0
    assert ("warning", "No markdown files found") in display.messages
    kinds = [kind for kind, _ in display.messages]
    assert kinds.index("success") < kinds.index("warning") < kinds.index("output")


class TestMain:
    def test_version_flag(self, capsys, monkeypatch):
        monkeypatch.setattr("mdlinks.api.config.cmd_version.get_package_version", lambda: "0.1.0")

        assert main(["--version"]) == 0
        assert capsys.readouterr().out.startswith("mdlinks 0.1.0")

    def test_exit_code_follows_command(self, docs, no_log_setup):
        assert main(["link", "check", str(docs), "--offline"]) == 1
        (docs / "index.md").write_text("[A](a.md)\n", encoding="utf-8")
        assert main(["link", "check", str(docs), "--offline"]) == 0

    def test_usage_error(self, capsys, no_log_setup):
        assert main(["link", "check"]) == 2
        assert "Usage error" in capsys.readouterr().err

    def test_no_arguments(self, no_log_setup):
        assert main([]) == 0
