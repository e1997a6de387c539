from .config import Settings, get_settings
from .exceptions import (
    DuplicateEmailError,
    InvalidInputError,
    NotFoundError,
    UploadRejectedError,
)
from .logging_config import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "DuplicateEmailError",
    "InvalidInputError",
    "NotFoundError",
    "UploadRejectedError",
    "setup_logging",
]
