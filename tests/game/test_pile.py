from unittest.mock import AsyncMock, Mock

import pytest

from exceptions import EmptyPileError
from game.card import Card
from game.deck import Deck
from game.pile import Pile


@pytest.fixture
def client():
    return Mock(draw_from_pile=AsyncMock(return_value=[]))


@pytest.fixture
def pile(client):
    return Pile(client, Deck(client, "abc"), "human", 2)


class TestPile:
    @pytest.mark.asyncio
    async def test_draw_returns_first_card(self, client, pile):
        card = Card(pile.deck, "KH", "url", "KING", "HEARTS")
        client.draw_from_pile.return_value = [card]

        assert await pile.draw() is card
        client.draw_from_pile.assert_awaited_once_with(pile, 1)

    @pytest.mark.asyncio
    async def test_draw_decrements_remaining(self, client, pile):
        client.draw_from_pile.return_value = [Card(pile.deck, "KH", "url", "KING", "HEARTS")]

        await pile.draw()

        assert pile.remaining == 1
        assert not pile.is_empty()

    @pytest.mark.asyncio
    async def test_empty_response_is_empty_list(self, pile):
        """An exhausted pile is not an error for a multi-card draw."""
        assert await pile.draw_many(3) == []
        assert pile.remaining == 2

    @pytest.mark.asyncio
    async def test_single_draw_from_empty_pile_raises(self, pile):
        with pytest.raises(EmptyPileError):
            await pile.draw()

    def test_repr(self, pile):
        assert repr(pile) == "Pile(name='human', deck='abc', remaining=2)"
