"""CLI Argument Parsing"""

import argparse
import argcomplete

from gai import DEFAULT_MODEL, DEFAULT_TEMPERATURE, __version__
from gai.llm import LLMError, validate_model, validate_temperature


def _temperature(value: str) -> float:
    try:
        return validate_temperature(value)
    except LLMError as e:
        raise argparse.ArgumentTypeError(str(e))


def _model(value: str) -> str:
    try:
        return validate_model(value)
    except LLMError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gai',
        description='Generate AI-powered git commit messages from your diffs',
        epilog='Example: gai -g (print a message), gai -c (commit with it)'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Actions
    parser.add_argument('-g', '--generate', action='store_true', help='Generate a commit message from staged changes')
    parser.add_argument('-c', '--commit', action='store_true', help='Generate and immediately commit with the message')

    # Model options (defaults resolved later: CLI > env > .gairc)
    parser.add_argument('-m', '--model', type=_model, metavar='MODEL', help=f'Model to use (default: {DEFAULT_MODEL})')
    parser.add_argument('-t', '--temperature', type=_temperature, metavar='TEMP', help=f'Temperature for generation, 0.0-2.0 (default: {DEFAULT_TEMPERATURE:g})')
    parser.add_argument('--hint', type=str, metavar='TEXT', help='Add context: --hint "fixing the login bug"')

    # Output options
    parser.add_argument('--verbose', action='store_true', help='Show debug info (prompt size, tokens used, timings)')

    # Setup/config
    parser.add_argument('--setup', action='store_true', help='Configure defaults')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
