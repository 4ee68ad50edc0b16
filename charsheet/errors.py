"""Exceptions raised by the character sheet engine."""


class CharacterSheetError(Exception):
    """Base exception for recoverable character sheet failures."""


class RulesInvariantError(AssertionError):
    """Raised when a rules table or derived value breaks its declared range."""


class UnsupportedClassError(NotImplementedError):
    """Raised when a class has no implementation for the requested rule."""


class InsufficientFundsError(CharacterSheetError):
    """Raised when a purse cannot cover a withdrawal."""


class PersistenceError(CharacterSheetError):
    """Base exception for load and save failures."""


class RecordNotFoundError(PersistenceError):
    """Raised when a record document does not exist."""


class MalformedRecordError(PersistenceError):
    """Raised when a record document does not match the expected shape."""
