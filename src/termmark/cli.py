#  Copyright (c) 2026 termmark contributors
#
# src/termmark/cli.py
"""Command-line interface for termmark.

Renders a Markdown file, or standard input, to standard output::

    termmark README.md --width 72 --symbols ascii
    cat notes.md | termmark --theme link="bold green" --color always

Renderer arguments are generated from the field metadata of
:class:`TerminalRendererOptions`, so every option has the same name and help
text here as in the Python API.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import MISSING, fields
from typing import Any

from termmark import __version__
from termmark.api import parse, parse_file
from termmark.constants import EXIT_ERROR, EXIT_SUCCESS
from termmark.exceptions import TermmarkError
from termmark.logging_utils import configure_logging
from termmark.options import TerminalRendererOptions

logger = logging.getLogger(__name__)

_STDIN = "-"


def _theme_item(value: str) -> tuple[str, str]:
    """Parse an ``ELEMENT=STYLE`` theme argument."""
    element, separator, style = value.partition("=")
    if not separator or not element.strip():
        raise argparse.ArgumentTypeError(f"invalid theme item {value!r}, expected ELEMENT=STYLE")
    return element.strip(), style.strip()


def _add_renderer_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one argument per TerminalRendererOptions field."""
    group = parser.add_argument_group("rendering options")
    for field in fields(TerminalRendererOptions):
        metadata = field.metadata
        flag = f"--{field.name.replace('_', '-')}"
        kwargs: dict[str, Any] = {"dest": field.name, "help": metadata.get("help"), "default": None}

        if field.name == "theme":
            kwargs.update(action="append", type=_theme_item, metavar="ELEMENT=STYLE")
        else:
            if "type" in metadata:
                kwargs["type"] = metadata["type"]
            if "choices" in metadata:
                kwargs["choices"] = metadata["choices"]
            if field.default is not MISSING and field.default is not None:
                kwargs["help"] = f"{metadata.get('help')} (default: {field.default})"
        group.add_argument(flag, **kwargs)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser of the ``termmark`` command.

    Returns
    -------
    argparse.ArgumentParser
        Configured argument parser

    """
    parser = argparse.ArgumentParser(
        prog="termmark",
        description="Render Markdown as styled text for the terminal.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=_STDIN,
        metavar="FILE",
        help="Markdown file to render; '-' or no argument reads standard input",
    )
    parser.add_argument("--version", action="version", version=f"termmark {__version__}")

    _add_renderer_arguments(parser)

    parsing = parser.add_argument_group("parsing options")
    parsing.add_argument(
        "--no-typographer",
        dest="typographer",
        action="store_false",
        help="Keep straight quotes, dashes and ellipses as typed",
    )

    logging_group = parser.add_argument_group("logging options")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", default=None, help="Also write log messages to this file")
    return parser


def _collect_options(parsed_args: argparse.Namespace) -> dict[str, Any]:
    """Return the option keywords given on the command line."""
    options: dict[str, Any] = {}
    for field in fields(TerminalRendererOptions):
        value = getattr(parsed_args, field.name)
        if value is None:
            continue
        options[field.name] = dict(value) if field.name == "theme" else value

    if not parsed_args.typographer:
        options["typographer"] = False
    return options


def main(args: list[str] | None = None) -> int:
    """Execute the ``termmark`` command.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments, ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Exit code, 0 on success and 1 on configuration or input errors

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file)

    options = _collect_options(parsed_args)
    try:
        if parsed_args.input == _STDIN:
            logger.debug("Reading Markdown from standard input")
            output = parse(sys.stdin.read(), **options)
        else:
            output = parse_file(parsed_args.input, **options)
    except TermmarkError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    sys.stdout.write(output)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
