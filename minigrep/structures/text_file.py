from pathlib import Path

from attrs import define


@define(frozen=True)
class TextFile:
    path: str | Path
    contents: str

    @property
    def size(self) -> int:
        return len(self.contents.encode("utf-8"))
