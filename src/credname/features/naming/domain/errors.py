"""
Summary: Error types raised while assembling credential names.
Why: Let callers catch naming failures without matching on message text.
"""

from collections.abc import Sequence


class CredentialNameError(ValueError):
    """Base class for credential name construction failures."""


class InvalidArgumentError(CredentialNameError):
    """Raised when a required name segment is given as ``None``."""

    def __init__(self, argument_name: str) -> None:
        super().__init__(f"{argument_name} must not be None")
        self.argument_name: str = argument_name


class IncompleteCredentialNameError(CredentialNameError):
    """Raised when a builder is finalized before every segment was set."""

    def __init__(self, type_name: str, missing_fields: Sequence[str]) -> None:
        missing = ", ".join(missing_fields)
        super().__init__(f"Cannot build {type_name}; missing required fields: {missing}")
        self.type_name: str = type_name
        self.missing_fields: tuple[str, ...] = tuple(missing_fields)
