from typing import Iterator


def split_lines(contents: str) -> Iterator[str]:
    """
    Lazily splits text into lines.

    Lines are separated by ``\\n`` or ``\\r\\n``. A trailing separator does not produce an empty last line, and a
    lone ``\\r`` is kept as part of the line. Unlike ``str.splitlines``, no other characters are treated as line
    boundaries.
    """
    start = 0
    length = len(contents)
    while start < length:
        end = contents.find("\n", start)
        if end == -1:
            yield contents[start:]
            return
        stop = end - 1 if end > start and contents[end - 1] == "\r" else end
        yield contents[start:stop]
        start = end + 1
