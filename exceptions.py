class WarGameError(Exception):
    """Base exception for war card game errors."""

    pass


class DeckServiceError(WarGameError):
    """Raised when a call to the deck of cards service fails."""

    pass


class ResponseParsingError(DeckServiceError):
    """Error parsing a deck service response."""

    pass


class InvalidCardValueError(WarGameError, ValueError):
    """Raised when a card face value has no numeric rank."""

    pass


class MixedDeckError(WarGameError):
    """Raised when a pile would be built from cards of different decks."""

    pass


class EmptyPileError(WarGameError):
    """Raised when a pile has no card left to draw."""

    pass


class GameNotStartedError(WarGameError):
    """Raised when cards are drawn before a round has been set up."""

    pass
