"""Shared fakes for git and the OpenAI SDK. No network or real repository needed."""

import subprocess
from types import SimpleNamespace

import pytest


class FakeGit:
    """Stands in for subprocess.run, answering the git commands gai issues.

    A bytes `diff` is decoded with the encoding and errors gai passes in.
    """

    def __init__(self, diff="", numstat="", in_repo=True, installed=True,
                 commit_returncode=0, commit_stderr=""):
        self.diff = diff
        self.numstat = numstat
        self.in_repo = in_repo
        self.installed = installed
        self.commit_returncode = commit_returncode
        self.commit_stderr = commit_stderr
        self.calls = []

    @property
    def commit_calls(self):
        return [c for c in self.calls if c[1:2] == ['commit']]

    def __call__(self, cmd, **kwargs):
        if not self.installed:
            raise FileNotFoundError(cmd[0])
        cmd = list(cmd)
        self.calls.append(cmd)
        args = cmd[1:]

        stdout, stderr, returncode = "", "", 0
        if args == ['--version']:
            stdout = "git version 2.45.0\n"
        elif args[:1] == ['rev-parse']:
            if self.in_repo:
                stdout = "true\n"
            else:
                stderr, returncode = "fatal: not a git repository\n", 128
        elif args == ['diff', '--staged', '--numstat']:
            stdout = self.numstat
        elif args == ['diff', '--staged']:
            stdout = self.diff
            if isinstance(stdout, bytes):
                stdout = stdout.decode(kwargs.get('encoding', 'utf-8'), kwargs.get('errors', 'strict'))
        elif args[:1] == ['commit']:
            returncode, stderr = self.commit_returncode, self.commit_stderr
            if returncode == 0:
                stdout = "[main 1a2b3c4] commit\n 1 file changed\n"
        else:
            raise AssertionError(f"unexpected git call: {cmd}")

        if returncode and kwargs.get('check'):
            raise subprocess.CalledProcessError(returncode, cmd, output=stdout, stderr=stderr)
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)


class FakeOpenAI:
    """Records clients and chat.completions.create calls made through the SDK."""

    def __init__(self):
        self.reply = "feat(auth): add login endpoint"
        self.error = None
        self.choices = None
        self.clients = []
        self.requests = []

    def __call__(self, **kwargs):
        self.clients.append(kwargs)
        return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=self._create)))

    def _create(self, **kwargs):
        self.requests.append(kwargs)
        if self.error is not None:
            raise self.error
        choices = self.choices
        if choices is None:
            choices = [SimpleNamespace(message=SimpleNamespace(role="assistant", content=self.reply))]
        return SimpleNamespace(
            choices=choices,
            model=kwargs["model"],
            usage=SimpleNamespace(total_tokens=42),
        )


@pytest.fixture
def fake_git(monkeypatch):
    """Return a factory installing a FakeGit as subprocess.run."""
    def _install(**kwargs):
        git = FakeGit(**kwargs)
        monkeypatch.setattr("gai.git.analyzer.subprocess.run", git)
        return git
    return _install


@pytest.fixture
def fake_openai(monkeypatch):
    fake = FakeOpenAI()
    monkeypatch.setattr("gai.llm.openai_client.openai.OpenAI", fake)
    return fake


@pytest.fixture
def clean_env(monkeypatch):
    """Remove gai-related environment variables, set a test API key, disable colors."""
    for name in ("GAI_MODEL", "GAI_TEMPERATURE", "OPENAI_BASE_URL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr("gai.output.COLORS_ENABLED", False)
