class MinigrepError(Exception):
    """Base class for errors raised by minigrep."""


class ConfigError(MinigrepError):
    """The command line arguments could not be turned into a Config."""


class SourceReadError(MinigrepError):
    """The file to search could not be read."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")
