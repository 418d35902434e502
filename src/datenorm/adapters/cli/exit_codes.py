"""POSIX-style exit codes used by the CLI.

Signal codes (130, 141, 143) are listed for reference only; translating
signals is left to ``lib_cli_exit_tools``.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by ``datenorm`` commands.

    * 0: success
    * 1: generic failure, and ``match`` when the text does not conform
    * 13: EACCES
    * 22: EINVAL
    * 65: EX_DATAERR (input text could not be parsed or converted)
    * 78: EX_CONFIG
    * 128+N: signal N

    Example:
        >>> int(ExitCode.DATA_ERROR)
        65
        >>> ExitCode.NO_MATCH == ExitCode.GENERAL_ERROR
        True
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    NO_MATCH = 1
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    DATA_ERROR = 65
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
