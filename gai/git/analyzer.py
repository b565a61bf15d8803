"""Git Analyzer - Read staged changes and create commits."""

import subprocess
from dataclasses import dataclass, field


@dataclass
class FileChange:
    """One staged file as reported by `git diff --staged --numstat`."""
    path: str
    additions: int
    deletions: int


@dataclass
class StagedChanges:
    """Everything staged for the next commit."""
    files: list[FileChange] = field(default_factory=list)
    diff: str = ""

    @property
    def total_files(self) -> int:
        return len(self.files)

    @property
    def is_empty(self) -> bool:
        return not self.diff.strip()


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitAnalyzer:
    """Thin wrapper around the git executable."""

    def __init__(self):
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str, errors: str = 'replace') -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors=errors
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_git_available(self) -> None:
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        try:
            inside = self._run_git('rev-parse', '--is-inside-work-tree')
        except GitError:
            raise GitError("Not inside a git repository")
        if inside.strip() != 'true':
            raise GitError("Not inside a git repository")

    def get_staged_diff(self) -> str:
        """Raw `git diff --staged` output, unmodified. Must be valid UTF-8."""
        try:
            return self._run_git('diff', '--staged', errors='strict')
        except UnicodeDecodeError:
            raise GitError("Failed to parse git diff output as UTF-8")

    def get_staged_changes(self) -> StagedChanges:
        return StagedChanges(files=self._get_staged_files(), diff=self.get_staged_diff())

    def _get_staged_files(self) -> list[FileChange]:
        output = self._run_git('diff', '--staged', '--numstat')

        files = []
        for line in output.splitlines():
            parts = line.split('\t')
            if len(parts) >= 3:
                # Binary files report "-" for both counts
                additions = int(parts[0]) if parts[0] != '-' else 0
                deletions = int(parts[1]) if parts[1] != '-' else 0
                files.append(FileChange(path=parts[2], additions=additions, deletions=deletions))

        return files

    def commit(self, message: str) -> str:
        """Create a commit with `message` exactly as given. Returns git's output."""
        try:
            result = subprocess.run(
                ['git', 'commit', '-m', message],
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace'
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

        if result.returncode != 0:
            detail = (result.stderr or result.stdout).strip()
            raise GitError(f"Commit failed: {detail}")
        return result.stdout
