"""Error types raised across component boundaries.

Only conditions a caller can act on are raised. Infrastructure read failures
(missing config file, unreadable desktop entry) are logged and degrade to
defaults instead.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    UNKNOWN_APPLICATION = "UNKNOWN_APPLICATION"
    SESSION_CLOSED = "SESSION_CLOSED"
    STORE_WRITE_FAILED = "STORE_WRITE_FAILED"
    INVALID_STYLE_ATTRIBUTE = "INVALID_STYLE_ATTRIBUTE"
    UNKNOWN_COMMAND = "UNKNOWN_COMMAND"


class LauncherError(Exception):
    def __init__(self, code: ErrorCode, message: str, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable

    def to_dict(self) -> dict[str, object]:
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "recoverable": self.recoverable,
            }
        }
