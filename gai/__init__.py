"""
gai - AI Powered Git Commit Messages

Generate conventional commit messages from staged git changes.
"""

__version__ = "0.1.0"

DEFAULT_MODEL = "gpt-4.1-nano"
DEFAULT_TEMPERATURE = 1.0

# Conventional commit types, in the order they are presented to the model.
# Used by: prompts/builder.py (system prompt), cli/utils.py, output (colors)
COMMIT_TYPES = {
    'feat': 'A new feature for the user',
    'fix': 'A bug fix',
    'docs': 'Documentation only changes',
    'style': "Changes that don't affect code meaning (whitespace, formatting, semicolons)",
    'refactor': 'Code change that neither fixes a bug nor adds a feature',
    'test': 'Adding missing tests or correcting existing tests',
    'chore': 'Changes to build process, auxiliary tools, or maintenance',
    'perf': 'Performance improvements',
    'ci': 'Changes to CI configuration files and scripts',
    'build': 'Changes affecting the build system or external dependencies',
    'revert': 'Reverts a previous commit',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
