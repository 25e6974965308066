from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict

from pydantic import ValidationError

from data.types.api_responses import CardPayload
from exceptions import InvalidCardValueError, ResponseParsingError

if TYPE_CHECKING:
    from game.deck import Deck

FACE_VALUES = {"JACK": 11, "QUEEN": 12, "KING": 13, "ACE": 14}
NUMERIC_VALUES = range(2, 11)


def numeric_value_of(value: str) -> int:
    """
    Convert a face label into the rank used to compare cards.

    Args:
        value (str): Face label as reported by the deck service ("2".."10",
            "JACK", "QUEEN", "KING", "ACE")

    Returns:
        int: 2-10 for numeric cards, 11-14 for JACK, QUEEN, KING, ACE

    Raises:
        InvalidCardValueError: If the label is not a known card value
    """
    try:
        number = int(value)
    except (TypeError, ValueError):
        number = None

    if number is not None:
        if number in NUMERIC_VALUES:
            return number
    elif value in FACE_VALUES:
        return FACE_VALUES[value]

    raise InvalidCardValueError(f"Unknown card value: {value!r}")


def beats(card: "Card", other: "Card") -> bool:
    """True if card ranks strictly higher than other. Ties never win."""
    return card.numeric_value > other.numeric_value


@dataclass(frozen=True)
class Card:
    """
    A single playing card drawn from a remote deck.

    Cards are immutable and keep a non-owning reference to the deck they were
    drawn from so they can be moved into piles of that deck.

    Attributes:
        deck (Deck): Deck the card belongs to
        code (str): Short identifier, e.g. "AS"
        image_url (str): URL of the card face image
        value (str): Face label, e.g. "KING" or "5"
        suit (str): Suit name, e.g. "SPADES"
        numeric_value (int): Rank derived from value
    """

    deck: "Deck" = field(repr=False, compare=False)
    code: str
    image_url: str
    value: str
    suit: str
    numeric_value: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "numeric_value", numeric_value_of(self.value))

    def beats(self, other: "Card") -> bool:
        return beats(self, other)

    @classmethod
    def from_json(cls, data: Dict[str, Any], deck: "Deck") -> "Card":
        """Build a card from one entry of a service 'cards' array.

        Raises:
            ResponseParsingError: If the entry lacks code, image, value or suit
        """
        try:
            payload = CardPayload(**data)
        except (TypeError, ValidationError) as e:
            raise ResponseParsingError(f"Invalid card payload: {str(e)}") from e
        return cls.from_payload(payload, deck)

    @classmethod
    def from_payload(cls, payload: CardPayload, deck: "Deck") -> "Card":
        return cls(
            deck=deck,
            code=payload.code,
            image_url=payload.image,
            value=payload.value,
            suit=payload.suit,
        )

    def __str__(self) -> str:
        return f"{self.value} of {self.suit}"
