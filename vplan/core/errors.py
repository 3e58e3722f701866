"""Exit codes for CLI commands.

Every rejected plan ends the process with one of these codes, so scripts
driving a build can tell a bad declaration from a missing keystore.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes. Values are stable.

    - 0: Success
    - 1: User error (unsupported ABI, nothing to package)
    - 2: Signing error (release keystore missing or unresolved)
    - 3: Config error (unreadable or malformed vplan.toml)
    - 5: I/O error (plan file could not be written)
    """

    OK = 0
    USER_ERROR = 1
    SIGNING_ERROR = 2
    CONFIG_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
