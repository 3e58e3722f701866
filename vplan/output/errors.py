"""Error presentation and exit code mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vplan.core.errors import ErrorCode
from vplan.output.console import Style
from vplan.variants.errors import (
    EmptyAbiSet,
    EmptyTarget,
    MissingCredential,
    UnsupportedAbi,
    UnsupportedFormat,
    ValidationError,
)

if TYPE_CHECKING:
    from vplan.output.console import ConsoleProtocol

__all__ = ["print_validation_error", "validation_error_exit_code"]


def print_validation_error(error: ValidationError, console: ConsoleProtocol, *, variant: str | None = None) -> None:
    """Print a rejected plan's reason followed by a dimmed hint."""
    prefix = f"{variant}: " if variant else ""
    match error:
        case MissingCredential():
            console.error(f"{prefix}missing signing credential ({error.message})")
        case UnsupportedAbi() | UnsupportedFormat() | EmptyAbiSet() | EmptyTarget():
            console.error(f"{prefix}{error.message}")
    console.print(f"hint: {error.hint}", Style.DIM)


def validation_error_exit_code(error: ValidationError) -> int:
    match error:
        case MissingCredential():
            return int(ErrorCode.SIGNING_ERROR)
        case UnsupportedAbi() | UnsupportedFormat() | EmptyAbiSet() | EmptyTarget():
            return int(ErrorCode.USER_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.USER_ERROR)
