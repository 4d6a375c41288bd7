from typing import Iterator

from minigrep.behaviour.search.pipeline_components.a02_split import split_lines


def search(query: str, contents: str) -> Iterator[str]:
    """
    Yields the lines of ``contents`` that contain ``query``, in order.

    This is a case-sensitive search. An empty query matches every line.

    >>> list(search("safe", "Rust is safe.\\nFast.\\nProductive."))
    ['Rust is safe.']
    """
    return (line for line in split_lines(contents) if query in line)


def search_case_insensitive(query: str, contents: str) -> Iterator[str]:
    """
    Yields the lines of ``contents`` that contain ``query``, ignoring case.

    Each line is lowercased on its own for the comparison; the yielded lines keep their original case.

    >>> list(search_case_insensitive("RuSt", "Rust:\\nReally productive.\\nTrust in rust."))
    ['Rust:', 'Trust in rust.']
    """
    query = query.lower()
    return (line for line in split_lines(contents) if query in line.lower())
