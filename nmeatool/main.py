#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from argparse import ArgumentParser
from importlib.metadata import version
from logging import getLogger
from sys import exit, argv, stdout

import coloredlogs

import nmeatool.cli

logger = getLogger(__name__)


def get_args(args=None):
    """
    Argument parsing
    :return: Argument parser object
    """

    pkg_version = version("nmeatool")

    parser = ArgumentParser(prog="nmeatool")
    parser.add_argument("--version", action="version", version="%(prog)s " + pkg_version)

    parser.add_argument("--debug",
                        help="enable debug logging",
                        action="store_true")

    # Set up subparsers, one for each command
    subparsers = parser.add_subparsers(help="sub command", dest="command")
    commands_list = nmeatool.cli.list_commands()
    for command_name in commands_list:
        command_class = commands_list[command_name]
        sub_parser = subparsers.add_parser(command_name, help=command_class.help)
        command_class.setup_args(sub_parser)

    return parser.parse_args(args or argv[1:])


# This is the entry point used in setup.py
def main(main_args=None):

    args = get_args(main_args)

    if args.debug:
        coloredlogs.DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
        coloredlogs.install(level="DEBUG")
    else:
        coloredlogs.DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
        coloredlogs.install(level="INFO")

    logger.debug("Command arguments: %s" % args)

    try:
        result = nmeatool.cli.run(args)

    except KeyboardInterrupt:
        stdout.write("\n")
        stdout.flush()
        logger.critical("User abort")
        result = 5

    except OSError as e:
        logger.critical(f"I/O error ({e})")
        result = 10

    if result != 0:
        logger.error("Command failed")

    logger.debug("Leaving main()")
    return result


if __name__ == "__main__":
    exit(main())
