"""
minigrep: print the lines of a file that contain a query string.

Usage::

    minigrep QUERY FILE_PATH [/i | /s]

``/i`` ignores case and ``/s`` forces a case-sensitive search. Without either flag the search ignores case when the
``IGNORE_CASE`` environment variable is set, e.g. ``IGNORE_CASE=1 minigrep rust poem.txt``.
"""
import sys

import fire
from rich.console import Console

from minigrep.behaviour.search.pipelines import run
from minigrep.errors import ConfigError
from minigrep.errors import SourceReadError
from minigrep.structures.config import Config

err_console = Console(stderr=True)


def fail(message: str):
    err_console.print(message, markup=False, highlight=False, soft_wrap=True)
    sys.exit(1)


# Keep every argument a string; fire would otherwise turn a query like "42" into an int
@fire.decorators.SetParseFn(str)
def search(*args: str):
    """
    Prints the lines of a file that contain a query string.

    :param args: QUERY FILE_PATH and an optional /i or /s flag.
    """
    try:
        config = Config.build(args)
    except ConfigError as e:
        fail(f"Problem parsing arguments: {e}")
    try:
        run(config)
    except SourceReadError as e:
        fail(f"Application error: {e}")


def main():
    # Arguments go straight to Config.build so a query like "-v" or "--help" is searched for, not parsed as a flag
    search(*sys.argv[1:])


if __name__ == "__main__":
    fire.Fire(search)
