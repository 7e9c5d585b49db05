import argparse
import sys
from typing import NoReturn

EXIT_USAGE = 1
EXIT_FATAL = 2
EXIT_JOBS_FAILED = 3


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")

    def print_help_and_exit(self) -> NoReturn:
        """Print full help and exit non-zero, like any other usage request."""
        self.print_help(sys.stderr)
        self.exit(EXIT_USAGE)
