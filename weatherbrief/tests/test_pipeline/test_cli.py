"""Tests for CLI commands."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from weatherbrief.cli import main
from weatherbrief.models.reporting import ReportRun


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch, clean_env):
    """Run each command where no config/weatherbrief.yaml or .env exists."""
    monkeypatch.chdir(tmp_path)


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        assert main([]) == 1

    def test_config_show_masks_token(self, monkeypatch, capsys):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "secret-token")
        assert main(["config", "show"]) == 0
        out = capsys.readouterr().out
        data = json.loads(out)
        assert data["location"]["timezone"] == "Asia/Seoul"
        assert "secret-token" not in out

    def test_config_get(self, capsys):
        assert main(["config", "get", "location.name"]) == 0
        assert "서울" in capsys.readouterr().out

    def test_config_get_token_refused(self, capsys):
        assert main(["config", "get", "telegram.bot_token"]) == 1

    def test_config_get_section_masks_token(self, monkeypatch, capsys):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "secret-token")
        assert main(["config", "get", "telegram"]) == 0
        out = capsys.readouterr().out
        assert "secret-token" not in out
        assert json.loads(out)["bot_token"] == "***"

    def test_config_get_dunder_refused(self, monkeypatch, capsys):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "secret-token")
        assert main(["config", "get", "telegram.__dict__"]) == 1
        assert "secret-token" not in capsys.readouterr().out

    def test_bad_telegram_section(self, tmp_path: Path, capsys):
        path = tmp_path / "bad.yaml"
        path.write_text("telegram: abc\n", encoding="utf-8")
        assert main(["--config", str(path), "config", "show"]) == 1
        assert "[설정 오류]" in capsys.readouterr().err

    def test_config_get_unknown(self, capsys):
        assert main(["config", "get", "nope.key"]) == 1

    def test_explicit_config_file(self, tmp_path: Path, capsys):
        path = tmp_path / "custom.yaml"
        path.write_text("location:\n  name: 부산\n", encoding="utf-8")
        assert main(["--config", str(path), "config", "get", "location.name"]) == 0
        assert "부산" in capsys.readouterr().out

    def test_send_without_credentials(self, capsys):
        assert main(["send"]) == 1
        assert "[설정 오류]" in capsys.readouterr().err

    def test_send_reads_env_file(self, tmp_path: Path, capsys):
        (tmp_path / ".env").write_text(
            "TELEGRAM_BOT_TOKEN=t\nTELEGRAM_CHAT_ID=1\n", encoding="utf-8"
        )
        pipeline = MagicMock()
        pipeline.run.return_value = ReportRun(today_date="2026-02-26", message="report", sent=True)
        with patch("weatherbrief.cli.ReportPipeline", return_value=pipeline) as cls:
            assert main(["send"]) == 0
        config = cls.call_args.args[0]
        assert config.telegram.bot_token == "t"
        assert capsys.readouterr().out.strip() == "report"

    def test_send_failure_exit_code(self, monkeypatch, capsys):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "t")
        monkeypatch.setenv("TELEGRAM_CHAT_ID", "1")
        pipeline = MagicMock()
        pipeline.run.return_value = ReportRun(message="failed", errors=["boom"])
        with patch("weatherbrief.cli.ReportPipeline", return_value=pipeline):
            assert main(["send"]) == 1
        assert "failed" in capsys.readouterr().err

    def test_preview_with_date(self, capsys):
        pipeline = MagicMock()
        pipeline.build_report.return_value = ReportRun(today_date="2026-02-28", message="preview")
        with patch("weatherbrief.cli.ReportPipeline", return_value=pipeline):
            assert main(["preview", "--date", "2026-02-28"]) == 0
        pipeline.build_report.assert_called_once_with(today="2026-02-28")
        assert "preview" in capsys.readouterr().out

    def test_preview_bad_date(self, capsys):
        assert main(["preview", "--date", "28-02-2026"]) == 1
        assert "유효하지 않은 날짜 형식" in capsys.readouterr().err
