"""Custom exceptions for aidocs."""


class AidocsError(Exception):
    """Base exception for aidocs operations."""


class FetchError(AidocsError):
    """Error while talking to a remote HTTP API."""


class ReleaseNotFoundError(FetchError):
    """Repository has no usable release."""


class CloneError(AidocsError):
    """git clone exited with a failure."""


class IndexingError(AidocsError):
    """Error while persisting nodes to the vector store."""
