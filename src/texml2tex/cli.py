"""Command-line interface for texml2tex.

Reads a TeXML document from a file or standard input and writes the TeX
source to a file or standard output.

Examples
--------
Filter style::

    $ texml2tex < input.xml > output.tex

Explicit input and output files::

    $ texml2tex input.xml --out output.tex

Treat text in ``lstlisting`` as verbatim too::

    $ texml2tex input.xml --verbatim-env verbatim --verbatim-env lstlisting

Use environment variables for defaults::

    $ export TEXML2TEX_ENCODING=latin-1
    $ export TEXML2TEX_LOG_LEVEL=DEBUG
    $ texml2tex input.xml  # Uses environment defaults
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import IO, TYPE_CHECKING, Optional, get_args

from texml2tex import __version__
from texml2tex.api import convert
from texml2tex.constants import DEFAULT_VERBATIM_ENVIRONMENTS, ENV_VAR_PREFIX, LogLevelName
from texml2tex.exceptions import FileError, ParsingError, RenderingError, Texml2TexError, ValidationError
from texml2tex.logging_utils import configure_logging
from texml2tex.options.tex import TexRendererOptions
from texml2tex.options.texml import TexmlParserOptions
from texml2tex.utils.io_utils import write_content

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

_TRUE_VALUES = ("true", "1", "yes", "on")


def get_env_var_value(key: str) -> Optional[str]:
    """Get environment variable with TEXML2TEX_ prefix.

    Parameters
    ----------
    key : str
        The parameter name (e.g., 'encoding', 'log_level')

    Returns
    -------
    Optional[str]
        Environment variable value or None if not set

    """
    env_key = f"{ENV_VAR_PREFIX}{key.upper().replace('-', '_')}"
    return os.environ.get(env_key)


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply environment variables as defaults to parser arguments.

    Command-line arguments still take precedence. Boolean flags read the
    variable as the value of their destination, so
    ``TEXML2TEX_NEWLINE_HINTS=false`` has the same effect as ``--no-newline-hints``.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The argument parser to modify

    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version", "input"):
            continue
        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        if isinstance(action, (argparse._StoreTrueAction, argparse._StoreFalseAction)):
            action.default = env_value.lower() in _TRUE_VALUES
        elif isinstance(action, argparse._AppendAction):
            action.default = [item.strip() for item in env_value.split(",") if item.strip()]
        elif action.choices and env_value not in action.choices:
            logger.warning(
                f"Invalid choice for {ENV_VAR_PREFIX}{action.dest.upper()}: {env_value}. "
                f"Choices: {list(action.choices)}"
            )
        else:
            action.default = env_value


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the texml2tex command."""
    parser = argparse.ArgumentParser(
        prog="texml2tex",
        description="Convert a TeXML document to TeX source.",
        epilog=f"Environment variables with the {ENV_VAR_PREFIX} prefix provide defaults for the options.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="TeXML file to convert (default: read standard input)",
    )
    parser.add_argument("--out", "-o", dest="out", help="Write TeX to this file instead of standard output")
    parser.add_argument("--encoding", default=None, help="Encoding of the TeXML input (default: utf-8)")
    parser.add_argument(
        "--no-newline-hints",
        dest="newline_hints",
        action="store_false",
        default=True,
        help="Ignore nl1/nl2 newline hints on commands",
    )
    parser.add_argument(
        "--verbatim-env",
        dest="verbatim_env",
        action="append",
        default=None,
        metavar="NAME",
        help=f"Environment whose text is not escaped; repeatable (default: {', '.join(DEFAULT_VERBATIM_ENVIRONMENTS)})",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        choices=list(get_args(LogLevelName)),
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--rich",
        action="store_true",
        default=False,
        help="Syntax-highlight the TeX on the terminal (automatically disabled when output is piped)",
    )
    parser.add_argument(
        "--force-rich",
        dest="force_rich",
        action="store_true",
        default=False,
        help="Use rich output even when standard output is not a terminal",
    )
    parser.add_argument(
        "--rich-code-theme",
        dest="rich_code_theme",
        metavar="THEME",
        default="monokai",
        help="Pygments theme for rich output (default: monokai)",
    )
    parser.add_argument("--log-file", dest="log_file", help="Also write log messages to this file")
    parser.add_argument(
        "--trace", action="store_true", default=False, help="Include timestamps and logger names in log output"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    apply_env_vars_to_parser(parser)
    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def should_use_rich_output(args: argparse.Namespace, stream: Optional[IO[str]] = None) -> bool:
    """Determine if rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if rich output should be used

    Notes
    -----
    Rich output is used when:
    - The --rich flag is set
    - AND the TeX is not being written to a file
    - AND either --force-rich is set OR the stream is a TTY

    """
    if not args.rich or args.out:
        return False

    if args.force_rich:
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def render_rich_output(tex: str, theme: str = "monokai", console: Optional["Console"] = None) -> None:
    """Print TeX source with syntax highlighting.

    Parameters
    ----------
    tex : str
        TeX source to display
    theme : str, default "monokai"
        Pygments theme name
    console : rich.console.Console, optional
        Console to print to; a console on standard output is created when omitted

    """
    from rich.console import Console
    from rich.syntax import Syntax

    console = console or Console()
    console.print(Syntax(tex, "latex", theme=theme, word_wrap=True))


def _build_options(parsed_args: argparse.Namespace) -> tuple[TexmlParserOptions, TexRendererOptions]:
    parser_options = TexmlParserOptions()
    if parsed_args.encoding:
        parser_options = parser_options.create_updated(encoding=parsed_args.encoding)

    renderer_options = TexRendererOptions(newline_hints=parsed_args.newline_hints)
    if parsed_args.verbatim_env:
        renderer_options = renderer_options.create_updated(verbatim_environments=tuple(parsed_args.verbatim_env))
    return parser_options, renderer_options


def main(args: list[str] | None = None) -> int:
    """Run the texml2tex command.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        parser_options, renderer_options = _build_options(parsed_args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    source = sys.stdin.buffer if parsed_args.input == "-" else Path(parsed_args.input)

    try:
        tex = convert(source, parser_options=parser_options, renderer_options=renderer_options) or ""
        if parsed_args.out:
            logger.info("Writing TeX to %s", parsed_args.out)
            write_content(tex, parsed_args.out)
        elif should_use_rich_output(parsed_args):
            render_rich_output(tex, theme=parsed_args.rich_code_theme)
        else:
            sys.stdout.write(tex)
            sys.stdout.flush()
    except Texml2TexError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
