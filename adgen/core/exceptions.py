"""
Error taxonomy for campaign generation

- ConfigurationError: invalid input, raised before any database access
- ConflictError: regeneration blocked because campaigns were already synced
- StorageError: the transaction failed; nothing was written
"""


class GenerationError(Exception):
    """Base class for campaign generation failures"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(GenerationError, ValueError):
    """Generation config is incomplete or malformed"""


class ConflictError(GenerationError):
    """Campaign set has synced campaigns and regeneration was not forced"""


class StorageError(GenerationError):
    """Database failure while generating; the transaction was rolled back"""
