"""Tests for the command-line entry point and daemon loop."""

import json
from pathlib import Path

import pytest

from clipmate import main as cli
from clipmate.errors import HistoryPersistError
from clipmate.main import ClipmateApp, main
from clipmate.services.settings_service import SettingsService
from fixtures.clipboard import FakeClipboard


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run each CLI test from an empty directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def cli_clipboard(monkeypatch) -> FakeClipboard:
    """Fake clipboard handed to the app instead of the system clipboard."""
    clipboard = FakeClipboard()
    monkeypatch.setattr(cli, "SystemClipboard", lambda **kwargs: clipboard)
    return clipboard


def write_history(path: Path, *values: str) -> None:
    path.write_text(json.dumps({
        "items": [{"time": i + 1, "item_type": "TEXT", "data": v} for i, v in enumerate(values)],
        "image_counter": 0,
        "text_counter": len(values),
    }))


class TestCommandLine:
    """Test one-shot commands."""

    def test_history_lists_items(self, workdir: Path, capsys):
        history = workdir / ".clipboard_history.json"
        history.write_text(json.dumps({
            "items": [
                {"time": 1, "item_type": "TEXT", "data": "hello"},
                {"time": 2, "item_type": "IMAGE", "data": "abc.png"},
            ],
            "image_counter": 1,
            "text_counter": 1,
        }))

        assert main(["history"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out == ["1: hello TEXT", "2: abc.png IMAGE"]

    def test_history_with_custom_file(self, workdir: Path, capsys):
        custom = workdir / "custom.json"
        write_history(custom, "from custom")

        assert main(["--history-file", str(custom), "history"]) == 0

        assert capsys.readouterr().out.strip() == "1: from custom TEXT"

    def test_history_from_config(self, workdir: Path, capsys):
        custom = workdir / "configured.json"
        write_history(custom, "configured")
        config = workdir / "clipmate.yml"
        config.write_text(f"history:\n  path: {custom}\n")

        assert main(["--config", str(config), "history"]) == 0

        assert "1: configured TEXT" in capsys.readouterr().out

    def test_empty_history_prints_nothing(self, workdir: Path, capsys):
        assert main(["history"]) == 0

        assert capsys.readouterr().out == ""

    def test_restore_item(self, workdir: Path, cli_clipboard: FakeClipboard, capsys):
        write_history(workdir / ".clipboard_history.json", "A", "B", "C")

        assert main(["2"]) == 0

        assert cli_clipboard.set_texts == ["B"]
        assert "Clipboard set to item 2" in capsys.readouterr().out

    def test_restore_missing_item(self, workdir: Path, cli_clipboard: FakeClipboard, capsys):
        write_history(workdir / ".clipboard_history.json", "A", "B", "C")

        assert main(["4"]) == 0

        assert cli_clipboard.set_texts == []
        assert "Item 4 not found in clipboard history" in capsys.readouterr().out

    def test_invalid_item_number(self, workdir: Path):
        with pytest.raises(SystemExit) as exc_info:
            main(["abc"])

        assert exc_info.value.code == 2

    def test_no_arguments_prints_help(self, workdir: Path, capsys):
        assert main([]) == 0

        assert "usage: clipmate" in capsys.readouterr().out

    def test_corrupt_history_exits_with_error(self, workdir: Path):
        (workdir / ".clipboard_history.json").write_text("not json")

        assert main(["history"]) == 1


class TestDaemon:
    """Test the sampling loop driver."""

    @pytest.fixture
    def app(self, workdir: Path) -> ClipmateApp:
        return ClipmateApp(
            SettingsService(workdir / "settings.yml"),
            history_file=workdir / "history.json",
            clipboard=FakeClipboard(text="copied"),
        )

    def test_loop_stops_on_fatal_error(self, app: ClipmateApp, monkeypatch):
        calls = []

        def poll_once():
            calls.append(1)
            if len(calls) == 3:
                raise HistoryPersistError("disk full")

        monkeypatch.setattr(app.manager, "poll_once", poll_once)
        monkeypatch.setattr(cli.time, "sleep", lambda seconds: None)

        app._sampling_loop()

        assert len(calls) == 3
        assert app._failed.is_set()

    def test_loop_records_clipboard(self, app: ClipmateApp, monkeypatch):
        sleeps = []

        def sleep(seconds):
            sleeps.append(seconds)
            if len(sleeps) == 2:
                raise HistoryPersistError("stop")

        monkeypatch.setattr(cli.time, "sleep", sleep)

        app._sampling_loop()

        assert [item.data for item in app.manager.list()] == ["copied"]
        assert sleeps == [0.5, 0.5]

    def test_run_daemon_exits_after_failure(self, app: ClipmateApp, monkeypatch):
        def poll_once():
            raise HistoryPersistError("disk full")

        monkeypatch.setattr(app.manager, "poll_once", poll_once)

        assert app.run_daemon() == 1
