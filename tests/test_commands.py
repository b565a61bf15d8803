"""
Tests for the early-exit commands: --display-config, --setup, --install-completion.

Run with:
    pytest tests/test_commands.py -v
"""

import json

import pytest

from gai import DEFAULT_MODEL
from gai.cli.main import main
from gai.cli.commands import display_config, run_setup, run_install_completion
from gai.config import ConfigManager


@pytest.fixture(autouse=True)
def home(tmp_path, monkeypatch, clean_env, fake_openai):
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setattr("pathlib.Path.home", lambda: home)
    monkeypatch.setattr("gai.config._manager", ConfigManager())
    monkeypatch.setattr("gai.cli.main.load_env", lambda: None)
    return home


def _answers(monkeypatch, *answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


class TestDisplayConfig:

    def test_defaults(self, capsys):
        assert display_config() == 0
        out = capsys.readouterr().out
        assert "no .gairc found" in out
        assert DEFAULT_MODEL in out
        assert "OPENAI_API_KEY:   set" in out

    def test_shows_env_overrides(self, monkeypatch, capsys):
        monkeypatch.setenv("GAI_MODEL", "gpt-4o")
        display_config()
        assert "GAI_MODEL=gpt-4o" in capsys.readouterr().out

    def test_reachable_from_cli(self, fake_openai, capsys):
        assert main(['--display-config']) == 0
        assert "Current Configuration" in capsys.readouterr().out
        assert fake_openai.requests == []


class TestSetup:

    def test_saves_answers(self, home, monkeypatch):
        _answers(monkeypatch, "gpt-4o-mini", "0.4")
        assert run_setup() == 0

        saved = json.loads((home / ".gairc").read_text())
        assert saved["model"] == "gpt-4o-mini"
        assert saved["temperature"] == 0.4

    def test_defaults_on_enter(self, home, monkeypatch):
        _answers(monkeypatch, "", "")
        assert run_setup() == 0

        saved = json.loads((home / ".gairc").read_text())
        assert saved["model"] == DEFAULT_MODEL
        assert saved["temperature"] == 1.0

    def test_reprompts_on_invalid_temperature(self, home, monkeypatch, capsys):
        _answers(monkeypatch, "", "5", "0.9")
        assert run_setup() == 0

        assert "Invalid temperature" in capsys.readouterr().err
        assert json.loads((home / ".gairc").read_text())["temperature"] == 0.9

    def test_cancel(self, home, monkeypatch):
        def _interrupt(prompt=""):
            raise EOFError
        monkeypatch.setattr("builtins.input", _interrupt)

        assert run_setup() == 1
        assert not (home / ".gairc").exists()


class TestInstallCompletion:

    @pytest.mark.parametrize("shell, rc", [("/bin/zsh", ".zshrc"), ("/bin/bash", ".bashrc")])
    def test_posix_shells(self, shell, rc, monkeypatch, capsys):
        monkeypatch.setenv("SHELL", shell)
        assert run_install_completion() == 0
        out = capsys.readouterr().out
        assert 'eval "$(register-python-argcomplete gai)"' in out
        assert rc in out
