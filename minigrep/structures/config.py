import os
from typing import Mapping
from typing import Optional
from typing import Sequence

from attrs import define

from minigrep.errors import ConfigError

IGNORE_CASE_VAR = "IGNORE_CASE"
CASE_INSENSITIVE_FLAG = "/i"
CASE_SENSITIVE_FLAG = "/s"


@define(frozen=True)
class Config:
    query: str
    file_path: str
    ignore_case: bool = False

    @classmethod
    def build(cls, args: Sequence[str], env: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Builds a Config from command line arguments.

        Expected arguments (without the program name)::

            QUERY FILE_PATH [/i | /s]

        ``/i`` turns case-insensitive matching on and ``/s`` turns it off. Any other third argument, or none at all,
        falls back to the presence of ``IGNORE_CASE`` in ``env``.

        :param args: The arguments following the program name.
        :param env: The environment to consult for ``IGNORE_CASE``. Defaults to ``os.environ``.
        :return: The parsed Config.
        :raises ConfigError: If the query or the file path is missing.
        """
        args = iter(args)
        query = next(args, None)
        if query is None:
            raise ConfigError("Didn't get a query string")
        file_path = next(args, None)
        if file_path is None:
            raise ConfigError("Didn't get a file path")

        flag = next(args, None)
        if flag == CASE_INSENSITIVE_FLAG:
            ignore_case = True
        elif flag == CASE_SENSITIVE_FLAG:
            ignore_case = False
        else:
            if env is None:
                env = os.environ
            ignore_case = IGNORE_CASE_VAR in env

        return cls(query=query, file_path=file_path, ignore_case=ignore_case)
