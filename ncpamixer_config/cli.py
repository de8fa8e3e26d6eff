#!/usr/bin/env python3
import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .app import render_default, render_dump, render_error, render_keybinds, render_summary
from .config import Config
from .errors import ConfigError
from .keycodes import start_terminal_database
from .logging_setup import setup_logging
from .ui.highlighter import create_console

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ncpamixer-config",
        description="Inspect the ncpamixer configuration file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ncpamixer-config                       # Summary of the active config
  ncpamixer-config --keybinds            # Key name -> action table
  ncpamixer-config --dump --prefix theme.default.
  ncpamixer-config --get theme --default default
  ncpamixer-config --print-default > ~/.ncpamixer.conf
        """,
    )

    parser.add_argument(
        "--config", "-c",
        default="",
        metavar="PATH",
        help="Use this config file instead of the default location",
    )
    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version information",
    )
    parser.add_argument(
        "--keybinds", "-k",
        action="store_true",
        help="Show the keybinding table",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Show every stored key and value",
    )
    parser.add_argument(
        "--prefix",
        default=None,
        help="Only dump keys starting with PREFIX",
    )
    parser.add_argument(
        "--get",
        metavar="KEY",
        default=None,
        help="Print the value of KEY",
    )
    parser.add_argument(
        "--default",
        dest="fallback",
        default="",
        metavar="VALUE",
        help="Value printed by --get when KEY is missing",
    )
    parser.add_argument(
        "--print-default",
        action="store_true",
        help="Print the built-in default config and exit",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        return run(args)
    except KeyboardInterrupt:
        return 0


def run(args: argparse.Namespace) -> int:
    if args.version:
        print(f"ncpamixer-config version {__version__}")
        return 0

    setup_logging(args.log_level)
    console = create_console()

    if args.print_default:
        render_default(console)
        return 0

    config = Config()
    try:
        config.init(args.config)
    except ConfigError as error:
        logger.debug("Config initialisation failed", exc_info=True)
        render_error(create_console(stderr=True, highlight=False), str(error))
        return 1

    if args.get is not None:
        print(config.get_string(args.get, args.fallback))
        return 0

    if args.keybinds or not args.dump:
        start_terminal_database()

    if args.keybinds:
        render_keybinds(console, config)
    if args.dump:
        render_dump(console, config, args.prefix)
    if not (args.keybinds or args.dump):
        render_summary(console, config)

    return 0


if __name__ == "__main__":
    sys.exit(main())
