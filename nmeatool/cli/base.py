# -*- coding: utf-8 -*-

from logging import getLogger
import sys

from ..parser import FieldParseError, TypeMismatchError
from ..registry import UnsupportedSentenceError, parse
from ..sentence import ChecksumError, FramingError

logger = getLogger(__name__)


class CliCommand(object):

    name = None
    help = None

    def __init__(self, args):
        self.args = args

    @staticmethod
    def setup_args(parser) -> None:
        pass

    def run(self):
        raise NotImplementedError


def list_commands():
    commands = {}
    for command_class in CliCommand.__subclasses__():
        commands[command_class.name] = command_class
    return commands


def run(args):
    commands = list_commands()
    if args.command is None or args.command not in commands:
        logger.critical("No command given. See --help")
        return 5
    return commands[args.command](args).run()


def add_input_arg(parser) -> None:
    parser.add_argument("-i", "--input",
                        help="NMEA log file to read, default stdin",
                        type=str,
                        action="store")


def read_lines(file_name: str or None):
    """Yield non-empty lines with line endings stripped"""
    if file_name is None:
        # Undecodable bytes must fail framing, not the whole command
        for raw_line in sys.stdin.buffer:
            line = raw_line.decode("ascii", errors="replace")
            if line.strip():
                yield line.rstrip("\r\n")
        return
    with open(file_name, "r", encoding="ascii", errors="replace", newline="") as f:
        for line in f:
            if line.strip():
                yield line.rstrip("\r\n")


def decode_lines(lines):
    """
    Decode every line, logging failures by severity
    :return: generator of (line number, sentence or None, exception or None)
    """
    for line_number, line in enumerate(lines, 1):
        try:
            yield line_number, parse(line), None
        except UnsupportedSentenceError as e:
            logger.debug(f"Line {line_number}: {e}")
            yield line_number, None, e
        except (FramingError, ChecksumError) as e:
            logger.warning(f"Line {line_number}: {e}")
            yield line_number, None, e
        except TypeMismatchError as e:
            logger.error(f"Line {line_number}: decoder registered for wrong type: {e}")
            yield line_number, None, e
        except FieldParseError as e:
            logger.warning(f"Line {line_number}: {e}")
            yield line_number, None, e
