"""Core types: declaration, exit codes, Result."""

from .config import ConfigError, Declaration, load_declaration
from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "ConfigError",
    "Declaration",
    "load_declaration",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
