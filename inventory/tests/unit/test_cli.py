"""Unit tests for the demo command line."""

import pytest

from inventory.cli import build_parser, main, run_demos
from inventory.utils.log_manager import get_recent_logs
from inventory.services.config_service import LOG_DIR_ENV


class TestCli:
    """Test argument handling and demo dispatch."""

    def test_defaults(self):
        """Test every demo runs by default."""
        args = build_parser().parse_args([])

        assert args.demo == "all"
        assert args.data_file is None
        assert args.no_pause is False

    def test_rejects_unknown_demo(self):
        """Test unknown demo names are rejected."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["shapes"])

    def test_run_single_demo(self, tmp_path, config_service, capsys):
        """Test one demo runs without pausing or logging."""
        data_file = tmp_path / "data.json"

        code = main(["records", "--no-pause", "--no-log", "--data-file", str(data_file)], config_service)

        assert code == 0
        assert data_file.exists()
        out = capsys.readouterr().out
        assert "Inventory Records Management System" in out
        assert "Warehouse Inventory Management System" not in out

    def test_run_all_with_log(self, tmp_path, monkeypatch, config_service, capsys):
        """Test all demos run and the transcript is saved."""
        log_dir = tmp_path / "logs"
        monkeypatch.setenv(LOG_DIR_ENV, str(log_dir))
        monkeypatch.chdir(tmp_path)

        main(["--no-pause", "--data-file", str(tmp_path / "data.json")], config_service)

        out = capsys.readouterr().out
        assert "Warehouse Inventory Management System" in out
        assert "Healthcare Management System" in out
        assert "School Grading System" in out
        assert "Final account balance: $564.25" in out
        assert "Transcript saved to:" in out
        assert (tmp_path / "grade_report.txt").exists()
        logs = get_recent_logs(log_dir)
        assert len(logs) == 1
        assert "Healthcare Management System" in logs[0].read_text(encoding="utf-8")

    def test_pause(self, tmp_path, monkeypatch, config_service):
        """Test the run waits for Enter unless told not to."""
        prompts = []
        monkeypatch.setattr("builtins.input", lambda prompt="": prompts.append(prompt) or "")

        main(["healthcare", "--no-log"], config_service)

        assert prompts == ["Press Enter to exit..."]

    def test_crashing_demo_does_not_stop_others(self, capsys):
        """Test one failing demo is reported and the next still runs."""
        ran = []

        def boom():
            raise RuntimeError("unexpected")

        run_demos(["a", "b"], {"a": boom, "b": lambda: ran.append("b")})

        assert ran == ["b"]
        assert "Application error in a demo: RuntimeError: unexpected" in capsys.readouterr().out
