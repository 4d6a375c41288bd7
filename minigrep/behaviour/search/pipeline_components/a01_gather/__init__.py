import pathlib

from minigrep.errors import SourceReadError
from minigrep.structures.text_file import TextFile
from minigrep.utils.log import logger


def gather(file: str | pathlib.Path) -> TextFile:
    # Read the whole file into a single TextFile
    path = pathlib.Path(file)
    try:
        # Decode the raw bytes so a lone "\r" is not turned into a newline
        contents = path.read_bytes().decode("utf-8")
    except OSError as e:
        raise SourceReadError(path, e.strerror or e) from e
    except UnicodeDecodeError as e:
        raise SourceReadError(path, "not valid UTF-8 text") from e
    text_file = TextFile(path=path, contents=contents)
    logger.debug(f"Read {text_file.size} bytes from {path}")
    return text_file
