# -*- coding: utf-8 -*-

from collections import Counter
from logging import getLogger
from os.path import isfile

from .base import CliCommand, add_input_arg, decode_lines, read_lines

logger = getLogger(__name__)


class StatsCommand(CliCommand):

    name = "stats"
    help = "count sentences per type and decoding failures"

    @staticmethod
    def setup_args(parser) -> None:
        add_input_arg(parser)

    def run(self):
        if self.args.input is not None and not isfile(self.args.input):
            logger.critical(f"Input file `{self.args.input}` not found")
            return 10

        prefixes = Counter()
        failures = Counter()
        for _, sentence, error in decode_lines(read_lines(self.args.input)):
            if error is None:
                prefixes[sentence.prefix] += 1
            else:
                failures[type(error).__name__] += 1

        for prefix, count in sorted(prefixes.items()):
            print(f"{prefix}\t{count}")
        for error_name, count in sorted(failures.items()):
            print(f"{error_name}\t{count}")

        if len(prefixes) == 0:
            logger.warning("No sentence decoded")
        return 0
