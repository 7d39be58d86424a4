# polyfaq/exceptions.py

class PolyFAQError(Exception):
    """Base class for errors raised by the FAQ service."""


class CacheUnavailable(PolyFAQError):
    """Redis read/write failed. Recovered inside the cache gateway, never surfaced."""


class TranslationFailure(PolyFAQError):
    """The translation provider failed for one field. Recovered by falling back to the source text."""


class PersistenceError(PolyFAQError):
    """The FAQ store could not be read or written."""


class FAQValidationError(PolyFAQError):
    """Create request is missing a required field."""
