"""CLI Commands"""

import os
import sys

from gai import DEFAULT_MODEL, DEFAULT_TEMPERATURE
from gai.config import Config, load_config, save_config, get_config_path, ENV_MODEL, ENV_TEMPERATURE
from gai.llm import LLMError, validate_model, validate_temperature
from gai.output import bold, dim, info, print_success, print_error


def print_banner() -> int:
    """Shown when gai runs without an action flag."""
    print(bold("gai - AI Powered Git Commit Messages"))
    print(f"Use {info('--generate')} (-g) to create a commit message")
    print(f"Use {info('--commit')} (-c) to commit with the generated message")
    print(f"\nRun {dim('gai --help')} for more options")
    return 0


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .gairc found)")

    env_model = os.environ.get(ENV_MODEL)
    env_temp = os.environ.get(ENV_TEMPERATURE)
    if env_model or env_temp:
        print(f"  {dim('Environment overrides:')}")
        if env_model:
            print(f"    {ENV_MODEL}={env_model}")
        if env_temp:
            print(f"    {ENV_TEMPERATURE}={env_temp}")

    key_state = "set" if os.environ.get("OPENAI_API_KEY") else "missing"

    print()
    print(f"  {bold('Settings:')}")
    print(f"    model:            {info(config.model)}")
    print(f"    temperature:      {info(f'{config.temperature:g}')}")
    print(f"    max_file_display: {info(str(config.max_file_display))}")
    print(f"    OPENAI_API_KEY:   {info(key_state)}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .gairc (in current directory)")
    print(f"    Global: ~/.gairc")
    print(f"\n  {dim('Run')} gai --setup {dim('to configure')}\n")

    return 0


def run_setup() -> int:
    """Quick setup wizard."""
    display_config()
    print(f"{bold('Setup Wizard')}\n")

    try:
        while True:
            raw = input(f"Model (Enter for {DEFAULT_MODEL}): ").strip()
            try:
                model = validate_model(raw) if raw else DEFAULT_MODEL
                break
            except LLMError as e:
                print_error(str(e))

        while True:
            raw = input(f"Temperature 0.0-2.0 (Enter for {DEFAULT_TEMPERATURE:g}): ").strip()
            try:
                temperature = validate_temperature(raw) if raw else DEFAULT_TEMPERATURE
                break
            except LLMError as e:
                print_error(str(e))
    except (KeyboardInterrupt, EOFError):
        print()
        print(dim("Cancelled."))
        return 1

    path = save_config(Config(model=model, temperature=temperature), global_config=True)

    print_success(f"Saved to {path}")
    if not os.environ.get("OPENAI_API_KEY"):
        print(dim("Remember to set OPENAI_API_KEY in your environment or a .env file."))
    return 0


def run_install_completion() -> int:
    """Print shell tab completion setup."""
    shell = os.environ.get('SHELL', '')
    hook = 'eval "$(register-python-argcomplete gai)"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = '~/.zshrc' if 'zsh' in shell else '~/.bashrc'
        print(f"Add this line to {dim(os.path.expanduser(rc_file))}:\n")
        print(f"  {hook}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, add this to your $PROFILE:\n")
        print("  register-python-argcomplete --shell powershell gai | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {hook}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish gai | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
