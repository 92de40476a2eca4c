"""Exceptions raised by the rules package."""


class InvalidHandError(ValueError):
    """Raised when a caller passes the wrong number of cards."""


class RankedHandInvariantError(AssertionError):
    """Raised when two ranked hands of one category have different variants.

    Only reachable with hand-built RankedHand values; the classifier never
    produces them.
    """
