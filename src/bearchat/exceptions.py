"""Exception types shared across layers."""


class BearChatError(Exception):
    """Base class for application errors."""


class ConfigurationError(BearChatError, ValueError):
    """Missing or invalid translation settings (credential, base URL, model)."""


class StorageError(BearChatError):
    """A key-value store read or write failed."""


class StorageQuotaExceededError(StorageError):
    """A write was rejected because the store is out of space."""
