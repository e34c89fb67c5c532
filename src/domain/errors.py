"""Errors raised while classifying a single transaction."""


class ClassificationError(Exception):
    """Base error for a balance change set that cannot be classified.

    Attributes:
        digest: Digest of the offending transaction, when known.
    """

    def __init__(self, message: str, digest: str | None = None) -> None:
        super().__init__(message)
        self.digest = digest

    def with_digest(self, digest: str) -> "ClassificationError":
        """Attach a transaction digest if none was recorded yet."""
        if self.digest is None:
            self.digest = digest
        return self


class MalformedCoinTypeError(ClassificationError, ValueError):
    """Raised when a coin type identifier has fewer than three segments."""


class MissingOwnerError(ClassificationError):
    """Raised when a balance change is not owned by an address."""


class InvariantViolationError(ClassificationError):
    """Raised when a change set contradicts the shape it matched."""


__all__ = [
    "ClassificationError",
    "MalformedCoinTypeError",
    "MissingOwnerError",
    "InvariantViolationError",
]
