"""Prompt Templates Package"""

from gai.prompts.builder import PromptBuilder, PromptConfig, SYSTEM_PROMPT, USER_PROMPT_PREFIX

__all__ = [
    "PromptBuilder",
    "PromptConfig",
    "SYSTEM_PROMPT",
    "USER_PROMPT_PREFIX",
]
