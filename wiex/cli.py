import asyncio
import sys
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version as dist_version

from wiex.config.config import load_config
from wiex.errors import ConfigError, WiexError
from wiex.logger import setup_logger
from wiex.models import InvocationRequest
from wiex.runner import Runner

WIEX_OPTIONS = ("--version", "--strict", "--verbose", "--help")

HELP_TEXT = """\
wiex: Windows Invoke Expression for WSL2

wiex invoke given windows .exe command by expanding $PATH with $WIEX_PATH

Usage:
\twiex [wiex options] [.exe command] [.exe options]

Options:
\t--version\tPrint version info and exit
\t--strict\tRaise error severity level
\t--verbose\tPrint info log
\t--help\t\tPrint help information
"""


@dataclass
class ParsedArgs:
    flags: set = field(default_factory=set)
    command: str | None = None
    command_args: list = field(default_factory=list)


def parse_args(argv: list[str]) -> ParsedArgs:
    parsed = ParsedArgs()
    for index, arg in enumerate(argv):
        if arg in WIEX_OPTIONS:
            parsed.flags.add(arg)
            continue
        # everything after the command belongs to it, flags included
        parsed.command = arg
        parsed.command_args = list(argv[index + 1:])
        break
    return parsed


def get_version() -> str:
    try:
        return dist_version("wiex")
    except PackageNotFoundError:
        return "0.0.0"


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = parse_args(argv)

    if "--version" in args.flags:
        print(f"v{get_version()}")
        return 0

    if "--help" in args.flags or args.command is None:
        print(HELP_TEXT)
        return 0

    try:
        config = load_config()
    except ConfigError as e:
        setup_logger().error(f"Error: {e}")
        return 1
    logger = setup_logger(config.log_dir)

    runner = Runner(config, logger, sys.stdout, sys.stderr)
    options = runner.options(strict="--strict" in args.flags, verbose="--verbose" in args.flags)
    request = InvocationRequest(command=args.command, command_args=tuple(args.command_args))

    try:
        result = asyncio.run(runner.run(request, options))
    except WiexError:
        # already logged where it was raised
        return 1
    except KeyboardInterrupt:
        logger.warning("interrupted")
        return 130
    except Exception as e:
        logger.error(f"wiex failed: {e}", exc_info=True)
        return 1

    if result.exit_code is None:
        return 0
    return result.exit_code


def run():
    sys.exit(main())
