"""Error kinds raised by the people store and key parsing."""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for the people workflow; `code` identifies the kind."""

    code = "store_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidKey(StoreError):
    """Raised when a key is not a decimal integer."""

    code = "invalid_key"


class NotFound(StoreError):
    """Raised when no person is stored under the key."""

    code = "not_found"


class DecodeError(StoreError):
    """Raised when persisted data or a request body has the wrong shape."""

    code = "decode_error"


class EncodeError(StoreError):
    """Raised when the mapping cannot be serialized."""

    code = "encode_error"


class StorageIOError(StoreError):
    """Raised on read/write failures other than a missing file."""

    code = "io_error"
