"""Prompt Builder - The fixed instructions sent with every diff."""

from dataclasses import dataclass

from gai import COMMIT_TYPES

# Two examples per type: bare and scoped
EXAMPLES = [
    "feat: add user authentication system",
    "feat(auth): implement password reset functionality",
    "fix: resolve memory leak in data processing",
    "fix(api): handle null response from external service",
    "docs: update API documentation",
    "docs(readme): add installation instructions",
    "style: fix indentation in user service",
    "style(css): update button hover effects",
    "refactor: extract validation logic into separate module",
    "refactor(utils): simplify date formatting functions",
    "test: add unit tests for payment processing",
    "test(integration): add API endpoint tests",
    "chore: update dependencies",
    "chore(deps): bump lodash from 4.17.19 to 4.17.21",
    "perf: improve database query efficiency",
    "perf(images): optimize image loading algorithm",
    "ci: add automated testing workflow",
    "ci(github): update deployment pipeline",
    "build: update webpack configuration",
    "build(npm): add new build script",
    'revert: revert "feat: add experimental feature"',
]

RULES = [
    "Keep description under 50 characters when possible",
    "Use imperative mood (add, fix, update, not added, fixed, updated)",
    "Don't end with a period",
    "Focus on WHAT changed, not HOW",
    "If multiple types of changes, pick the most significant one",
    "Use scope in parentheses when appropriate (component, file, or area affected)",
]


def _render_system_prompt() -> str:
    types_list = "\n".join(f"- **{name}**: {desc}" for name, desc in COMMIT_TYPES.items())
    examples = "\n".join(EXAMPLES)
    rules = "\n".join(f"- {rule}" for rule in RULES)
    return (
        "You are an expert at writing conventional git commit messages. "
        "Analyze code diffs and generate a single, concise commit message following the format: "
        "<type>[optional scope]: <description>\n\n"
        f"COMMIT TYPES:\n{types_list}\n\n"
        f"EXAMPLES:\n{examples}\n\n"
        f"RULES:\n{rules}"
    )


SYSTEM_PROMPT = _render_system_prompt()

USER_PROMPT_PREFIX = "Generate a conventional commit message for this diff:\n\n"


@dataclass
class PromptConfig:
    """User-provided context that shapes the prompt."""
    hint: str | None = None


class PromptBuilder:
    """Renders the user message for a staged diff.

    The diff is embedded verbatim; nothing is summarized or truncated.
    """

    def build(self, diff: str, config: PromptConfig | None = None) -> str:
        config = config or PromptConfig()
        sections = [
            USER_PROMPT_PREFIX + diff,
            self._build_hint_section(config),
        ]
        return "\n\n".join(filter(None, sections))

    def _build_hint_section(self, config: PromptConfig) -> str:
        if not config.hint or not config.hint.strip():
            return ""

        return f"""<context>
The developer provided this context about the changes:
"{config.hint.strip()}"

Use this to inform your message, but verify it matches what you see in the diff.
</context>"""
