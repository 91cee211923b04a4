"""Custom exception hierarchy for region domains."""


class DomainError(Exception):
    """Base exception for all domain package errors."""


# --- Arguments ---
class InvalidArgumentError(DomainError, ValueError):
    """A required argument was missing or of the wrong type."""

    def __init__(self, argument: str, reason: str = "must not be None"):
        self.argument = argument
        self.reason = reason
        super().__init__(f"{argument} {reason}")


# --- Configuration ---
class ConfigError(DomainError):
    """Invalid or missing configuration."""


# --- Storage ---
class StorageError(DomainError):
    """Domain store could not be read or written."""


class CorruptRecordError(StorageError):
    """A stored domain record failed to parse."""

    def __init__(self, path: str, line_no: int, reason: str):
        self.path = path
        self.line_no = line_no
        self.reason = reason
        super().__init__(f"Corrupt record at {path}:{line_no}: {reason}")
