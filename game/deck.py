from typing import TYPE_CHECKING, List

from .card import Card

if TYPE_CHECKING:
    from api.deck_client import DeckOfCardsClient
    from .pile import Pile


class Deck:
    """A shuffled deck living on the deck of cards service.

    The deck only knows its server-issued id; every card operation goes
    through the client that created it.
    """

    def __init__(self, client: "DeckOfCardsClient", deck_id: str):
        self._client = client
        self.id = deck_id

    async def draw(self, count: int) -> List[Card]:
        """Draw up to count cards from the top of the deck."""
        return await self._client.draw_from_deck(self, count)

    async def create_pile(self, name: str, cards: List[Card]) -> "Pile":
        """Move cards drawn from this deck into a named pile."""
        return await self._client.create_pile_from_cards(name, cards)

    def __repr__(self) -> str:
        return f"Deck(id={self.id!r})"
