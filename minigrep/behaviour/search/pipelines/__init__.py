import sys
from typing import Iterator
from typing import Optional
from typing import TextIO

from minigrep.behaviour.search.pipeline_components.a01_gather import gather
from minigrep.behaviour.search.pipeline_components.a03_process.search import search
from minigrep.behaviour.search.pipeline_components.a03_process.search import search_case_insensitive
from minigrep.structures.config import Config
from minigrep.utils.log import logger


def grep(query: str, file_path: str, *, ignore_case: bool = False) -> Iterator[str]:
    # Gather the file
    file = gather(file_path)
    # Pick the matcher
    matcher = search_case_insensitive if ignore_case else search
    logger.debug(f"Searching {file.path} for {query!r} with {matcher.__name__}")
    return matcher(query, file.contents)


def run(config: Config, out: Optional[TextIO] = None) -> int:
    """
    Searches the file named by ``config`` and writes every matching line to ``out``.

    :param config: The parsed command line configuration.
    :param out: Where to write the matching lines. Defaults to ``sys.stdout``.
    :return: The number of lines written.
    :raises SourceReadError: If the file cannot be read.
    """
    if out is None:
        out = sys.stdout
    count = 0
    for line in grep(config.query, config.file_path, ignore_case=config.ignore_case):
        out.write(f"{line}\n")
        count += 1
    logger.info(f"Found {count} matching lines in {config.file_path}")
    return count
