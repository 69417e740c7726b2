"""
Exceptions raised by Recipe Keeper services.

Only storage failures cross the service boundary. Malformed persisted or
imported data is recovered, never raised.
"""


class RecipeKeeperError(Exception):
    """Base class for Recipe Keeper errors"""


class StorageError(RecipeKeeperError):
    """The underlying key-value storage could not be read or written"""

    def __init__(self, message: str, key: str = ""):
        super().__init__(message)
        self.key = key


class CodecError(RecipeKeeperError):
    """Persisted text could not be decoded"""
