"""Command-line interface for cutr.

CLI argument parsing, logging configuration, and the ``main()`` entry point live here.  Selection parsing and
extraction are delegated to the positions and extract modules, file handling to the runner.  Errors are reported
through the exception classes in the exceptions module, each carrying its own exit code.
"""

import argparse
import logging
import os
import sys
import traceback
from typing import Optional

from cutr import __version__
from cutr.config import find_config_file, resolve_request
from cutr.exceptions import CliError, ExitCode
from cutr.runner import CutRunner


def setup_logging(verbosity_level: int) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbosity_level: 0=WARNING, 1=INFO, 2+=DEBUG
    """
    if verbosity_level == 0:
        level = logging.WARNING
    elif verbosity_level == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    argument_parser = argparse.ArgumentParser(
        prog="cutr",
        description="Select fields, bytes or characters from each line of the input files",
        exit_on_error=True,
    )
    argument_parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Input file(s); '-' or no file reads standard input",
    )
    argument_parser.add_argument(
        "-d",
        "--delim",
        dest="delimiter",
        default=None,
        metavar="DELIM",
        help="Field delimiter, a single byte (default: TAB)",
    )

    mode_group = argument_parser.add_mutually_exclusive_group()
    mode_group.add_argument("-f", "--fields", default=None, metavar="LIST", help="Selected fields")
    mode_group.add_argument("-b", "--bytes", default=None, metavar="LIST", help="Selected bytes")
    mode_group.add_argument("-c", "--chars", default=None, metavar="LIST", help="Selected characters")

    argument_parser.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="YAML file with default settings (default: $CUTR_CONFIG)",
    )
    argument_parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)",
    )
    argument_parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return argument_parser


def main(command_line_args: Optional[list[str]] = None) -> int:
    """Main entry point for command line execution.

    Args:
        command_line_args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code for the process
    """
    parsed_args = build_parser().parse_args(command_line_args)
    setup_logging(parsed_args.verbose)

    cli_values = {
        "files": parsed_args.files,
        "delimiter": parsed_args.delimiter,
        "fields": parsed_args.fields,
        "bytes": parsed_args.bytes,
        "chars": parsed_args.chars,
    }
    request = resolve_request(cli_values, find_config_file(parsed_args.config))
    logging.debug(f"Resolved request: {request}")

    return CutRunner(request).run()


def _silence_stdout() -> None:
    """Point stdout at /dev/null so the flush at interpreter exit cannot fail again."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError) as e:
        logging.debug(f"Could not redirect stdout: {e}")


def run() -> None:
    """Console script entry point: run :func:`main` and exit with its status."""
    try:
        sys.exit(main())
    except CliError as e:
        logging.error(e)
        sys.exit(e.exit_code)
    except BrokenPipeError:
        # Reader went away (e.g. "| head"); stop quietly
        _silence_stdout()
        sys.exit(ExitCode.OUTPUT)
    except OSError as e:
        logging.error(f"error writing output: {e.strerror or e}")
        sys.exit(ExitCode.OUTPUT)
    except Exception:
        logging.error("internal error (use -vv for traceback)")
        if "-vv" in sys.argv:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL)


if __name__ == "__main__":
    run()
