from typing import Any


class ScytaleError(Exception):
    """Base exception for all scytale errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ScytaleError):
    """Raised when input validation fails."""

    pass


class InvalidKeyError(ValidationError):
    """Raised when a cipher key is rejected at construction time."""

    pass


class InvalidArgumentError(ValidationError):
    """Raised when an analysis argument is out of range."""

    pass


class TextTooLongError(ValidationError):
    """Raised when input text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class KeyFileError(ScytaleError):
    """Raised when a substitution key file cannot be loaded."""

    pass


class CipherNotFoundError(ScytaleError):
    """Raised when requested cipher is not registered."""

    def __init__(self, cipher_name: str):
        super().__init__(
            f"Cipher '{cipher_name}' not found",
            {"cipher_name": cipher_name},
        )
