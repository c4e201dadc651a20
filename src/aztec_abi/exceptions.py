"""Custom exception classes for aztec-abi library."""

from typing import Optional


class AbiError(Exception):
    """Base exception for ABI-related errors."""

    pass


class EncodingError(AbiError, ValueError):
    """Raised when an argument cannot be encoded against its declared type."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class UnsupportedValueShapeError(EncodingError, TypeError):
    """Raised when a value does not have a shape the declared type accepts."""

    pass


class ArrayLengthMismatchError(EncodingError):
    """Raised when an array value does not have the declared length."""

    pass


class MissingStructFieldError(EncodingError):
    """Raised when a struct value lacks one of the declared fields."""

    pass


class UnparsableIntegerError(EncodingError):
    """Raised when an integer value cannot be parsed or does not fit its width."""

    pass


class ArgumentCountMismatchError(EncodingError):
    """Raised when the number of arguments differs from the number of parameters."""

    pass


class UnknownFunctionError(AbiError, LookupError):
    """Raised when a function name or selector matches nothing in the artifact."""

    pass


class ArtifactParseError(AbiError, ValueError):
    """Raised when a contract artifact document is malformed."""

    pass


class ArtifactNotFoundError(AbiError, FileNotFoundError):
    """Raised when a contract artifact file is not found."""

    pass


class PxeError(AbiError):
    """Base exception for PXE JSON-RPC errors."""

    pass


class PxeConnectionError(PxeError, RuntimeError):
    """Raised when the PXE cannot be reached or answers with a bad HTTP status."""

    pass


class PxeRpcError(PxeError, ValueError):
    """Raised when the PXE answers with a JSON-RPC error or no result."""

    pass


class PxeNotReadyError(PxeConnectionError):
    """Raised when the PXE did not come online within the allowed attempts."""

    pass
