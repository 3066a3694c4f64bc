"""Exception types raised by the webster package."""


class WebsterError(Exception):
    """Base class for webster errors."""

    pass


class CorpusClosedError(WebsterError, ValueError):
    """Raised when reading from a corpus reader that has been closed."""

    pass


class EntrySealedError(WebsterError, RuntimeError):
    """Raised when a description block is added to a sealed entry."""

    pass


class ConfigError(WebsterError, ValueError):
    """Raised when a settings file is malformed."""

    pass


class IntegrityError(WebsterError, ValueError):
    """
    Raised by the dictionary check on the first inconsistent entry.

    kind is "mismatch" when the raw headword line differs from the joined
    alias form, or "duplicate" when a headword line was already seen.
    """

    def __init__(self, key: str, kind: str, display_key: str = ""):
        self.key = key
        self.kind = kind
        self.display_key = display_key
        if kind == "mismatch":
            message = f"{key!r} not equal to {display_key!r}"
        else:
            message = f"{key!r} seen twice"
        super().__init__(message)
