"""
Command-line interface for chat-codegen.

Usage:
    chat-codegen [--log-level LEVEL] <options file> <input file> <output file>

The options file is the JSON options document, the input file is the JSON
content document and the output file receives the generated C++ header.

Exit status:
    0  Header written, or a usage/file-open problem was reported on stdout.
       Missing arguments and unreadable files are reported, not failed.
    1  The options or content document was rejected (a GeneratorError).

Environment Variables:
    CHAT_CODEGEN_LOG_LEVEL: Log level (default: WARNING)
    CHAT_CODEGEN_LOG_FORMAT: "simple" or "detailed" (default: simple)
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from chat_codegen import __version__
from chat_codegen.config import configure_logging, load_config
from chat_codegen.generator import GeneratorError, MalformedDocumentError, generate_from_text

logger = logging.getLogger(__name__)

PROG = "chat-codegen"
USAGE = f"Usage: {PROG} [options file name] [input file name] [output file name]"


class FileOpenError(Exception):
    """One of the three files could not be opened.

    The message is the user-facing line printed by the CLI.
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


def read_options_file(path: str) -> str:
    """Return the text of the options file."""
    return _read_text(path, document="options", role="options file")


def read_input_file(path: str) -> str:
    """Return the text of the content (input) file."""
    return _read_text(path, document="content", role="input file")


def open_output_file(path: str) -> TextIO:
    """
    Open the output file for writing, truncating it.

    Newlines are written verbatim so the header is byte-identical on every
    platform.

    Raises:
        FileOpenError: If the file cannot be opened for writing.
    """
    try:
        return open(path, "w", encoding="utf-8", newline="")
    except OSError as e:
        raise FileOpenError(path, f'Error: could not open "{path}" file for writing.') from e


def _read_text(path: str, *, document: str, role: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedDocumentError(document, "file is not valid UTF-8", cause=e) from e
    except OSError as e:
        raise FileOpenError(path, f'Error: could not open "{path}" {role} for reading.') from e


def cmd_generate(args: argparse.Namespace) -> int:
    """
    Generate the header described by `args`.

    Files are opened in order: options, input, output.  The output file is
    opened (and truncated) before generation starts, so a rejected document
    leaves it empty.

    Returns:
        0 on success or when a file cannot be opened, 1 when a document is
        rejected.
    """
    try:
        options_text = read_options_file(args.options_file)
        content_text = read_input_file(args.input_file)
        with open_output_file(args.output_file) as output:
            output.write(generate_from_text(options_text, content_text))
    except FileOpenError as e:
        print(e)
        return 0
    except GeneratorError as e:
        logger.debug("Generation aborted.", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("Wrote %s", args.output_file)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser.

    Only the flags are declared.  The three file names are whatever strings
    remain after parsing (see :func:`main`), so a path that begins with a
    dash is still taken as a file name.
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage=f"{PROG} [--log-level LEVEL] OPTIONS_FILE INPUT_FILE OUTPUT_FILE",
        description="Generate a C++ header of chat messages from a JSON message table.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Log level (default: WARNING, or CHAT_CODEGEN_LOG_LEVEL env var)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args, rest = build_parser().parse_known_args(argv)
    files = [arg for arg in rest if arg != "--"]

    if len(files) < 3:
        print(USAGE)
        return 0
    args.options_file, args.input_file, args.output_file = files[:3]

    cfg = load_config()
    if args.log_level:
        cfg.logging.level = args.log_level.upper()
    configure_logging(cfg.logging)

    return cmd_generate(args)


if __name__ == "__main__":
    sys.exit(main())
