from typing import TYPE_CHECKING, List

from exceptions import EmptyPileError
from loggers.deck_logger import DeckLogger

from .card import Card

if TYPE_CHECKING:
    from api.deck_client import DeckOfCardsClient
    from .deck import Deck


class Pile:
    """
    A named, server-side pile of cards belonging to one deck.

    Attributes:
        deck (Deck): Deck the pile belongs to
        name (str): Pile name, unique per deck
        remaining (int): Last known card count. Only adjusted locally after
            successful draws, never re-read from the service.
    """

    def __init__(
        self, client: "DeckOfCardsClient", deck: "Deck", name: str, remaining: int
    ):
        self._client = client
        self.deck = deck
        self.name = name
        self.remaining = remaining

    async def draw_many(self, count: int) -> List[Card]:
        """Draw up to count cards; an exhausted pile yields an empty list."""
        cards = await self._client.draw_from_pile(self, count)
        self.remaining = max(self.remaining - len(cards), 0)
        return cards

    async def draw(self) -> Card:
        """
        Draw the top card of the pile.

        Raises:
            EmptyPileError: If the service returned no card
        """
        cards = await self.draw_many(1)
        if not cards:
            DeckLogger.log_empty_pile(self.name)
            raise EmptyPileError(f"Pile '{self.name}' is empty")
        return cards[0]

    def is_empty(self) -> bool:
        return self.remaining == 0

    def __repr__(self) -> str:
        return f"Pile(name={self.name!r}, deck={self.deck.id!r}, remaining={self.remaining})"
