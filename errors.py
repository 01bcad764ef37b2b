"""Exception types shared by the generation and storage layers."""


class ArithMaticError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(ArithMaticError, ValueError):
    """Raised when a request cannot be served under the given settings.

    Covers unregistered categories, generators that refuse the settings,
    an empty pool of supported categories and negative batch sizes.
    """


class InvariantViolation(ArithMaticError):
    """Raised when a question card would break its own invariants.

    This signals a defect in a generator (or a double answer on a card),
    never a bad caller-supplied setting.
    """
