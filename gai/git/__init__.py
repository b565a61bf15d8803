"""Git Operations Package"""

from gai.git.analyzer import GitAnalyzer, GitError, FileChange, StagedChanges

__all__ = [
    "GitAnalyzer",
    "GitError",
    "FileChange",
    "StagedChanges",
]
