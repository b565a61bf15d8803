"""CLI Main Entry Point"""

import sys
import time

from gai.config import load_config, load_env, resolve_settings
from gai.git import GitAnalyzer, GitError
from gai.llm import get_client, LLMError, validate_model, validate_temperature
from gai.prompts import PromptBuilder, PromptConfig
from gai.output import success, dim, bold, info, print_error, print_success, CHECK, RULE, Spinner, colorize_commit_type

from gai.cli.args import parse_args
from gai.cli.commands import display_config, print_banner, run_setup, run_install_completion
from gai.cli.utils import clean_commit_message, commit_command

NOTHING_TO_COMMIT = "Nothing to commit: no staged changes found. Use 'git add' to stage your changes."


def _generate_message(client, prompt, timings):
    """Run the single API call under a spinner."""
    t_gen = time.time()
    with Spinner(f"Generating with {client.name}..."):
        response = client.generate(prompt)
    timings['generate'] = time.time() - t_gen
    return response


def _display_file_list(changes, max_shown):
    """Show which files are staged, collapsing long lists."""
    if not changes.files:
        return
    print(bold("Staged changes:"))
    shown = changes.files[:max_shown]
    remaining = len(changes.files) - len(shown)
    for f in shown:
        print(dim(f"  {f.path} (+{f.additions} -{f.deletions})"))
    if remaining > 0:
        print(dim(f"  ... and {remaining} more files"))


def _display_message(message):
    """Display commit message between horizontal rules with a colored type."""
    lines = colorize_commit_type(message).split('\n')
    # Width from the raw message, colors add invisible characters
    width = max((len(line) for line in message.split('\n')), default=40)
    print(f"\n{dim(RULE * width)}")
    print(bold(lines[0]))
    for line in lines[1:]:
        print(line)
    print(dim(RULE * width))


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    if args.setup:
        return run_setup(), True
    return 0, False


def _get_model_and_temperature(args, config):
    """Resolve and validate settings before any git or network work.

    Raises:
        LLMError: if the resolved model or temperature is invalid
    """
    try:
        model, temperature = resolve_settings(config, args.model, args.temperature)
    except ValueError as e:
        raise LLMError(str(e))
    return validate_model(model), validate_temperature(temperature)


def _prepare_staged_changes(timings):
    """Get and validate staged changes from git.

    Returns:
        tuple: (analyzer, changes), or (None, None) after reporting the error
    """
    t0 = time.time()
    try:
        analyzer = GitAnalyzer()
        changes = analyzer.get_staged_changes()
    except GitError as e:
        print_error(str(e))
        return None, None
    finally:
        timings['git'] = time.time() - t0

    if changes.is_empty:
        print_error(NOTHING_TO_COMMIT)
        return None, None

    return analyzer, changes


def _print_verbose_stats(args, is_pipe, prompt, response, timings):
    """Print verbose timing and token statistics."""
    if not args.verbose or is_pipe:
        return
    print(dim(f"  Prompt: ~{len(prompt)//4} tokens ({len(prompt)} chars)"))
    print(dim(f"  Response: {response.tokens_used} tokens from {response.model}"))
    print(dim(f"  Timings: git={timings.get('git', 0):.2f}s, generate={timings.get('generate', 0):.2f}s"))


def _commit(analyzer, message, is_pipe):
    """Hand the message to git commit exactly as generated."""
    try:
        analyzer.commit(message)
    except GitError as e:
        print_error(str(e))
        return 1

    if is_pipe:
        print(message)
    else:
        print_success(f'Committed with message: "{message}"')
    return 0


def _generate_commit_flow(args, config, model, temperature):
    """Main flow: staged diff -> prompt -> completion -> message [-> commit].

    Returns:
        int: Exit code
    """
    is_pipe = not sys.stdout.isatty()
    timings = {}

    analyzer, changes = _prepare_staged_changes(timings)
    if changes is None:
        return 1

    if not is_pipe:
        _display_file_list(changes, config.max_file_display)

    prompt = PromptBuilder().build(changes.diff, PromptConfig(hint=args.hint))

    try:
        client = get_client(model=model, temperature=temperature)
        response = _generate_message(client, prompt, timings)
    except LLMError as e:
        print_error(str(e))
        return 1

    message = clean_commit_message(response.content)
    if not message:
        print_error("The model returned an empty commit message.")
        return 1

    if not is_pipe:
        print(f"{success(CHECK)} Generated with {info(client.name)}")
    _print_verbose_stats(args, is_pipe, prompt, response, timings)

    if args.commit:
        return _commit(analyzer, message, is_pipe)

    if is_pipe:
        print(message)
        return 0

    _display_message(message)
    print(f"\n{dim('To use this message:')}")
    print(commit_command(message))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    try:
        load_env()
    except ValueError as e:
        print_error(str(e))
        return 1
    args = parse_args(argv)

    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    if not (args.generate or args.commit):
        return print_banner()

    config = load_config()
    try:
        model, temperature = _get_model_and_temperature(args, config)
    except LLMError as e:
        print_error(str(e))
        return 1

    return _generate_commit_flow(args, config, model, temperature)
