from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from config import ApiConfig
from data.types.api_responses import DrawResponse, NewDeckResponse, PileAddResponse
from exceptions import MixedDeckError, ResponseParsingError
from game.card import Card
from game.deck import Deck
from game.pile import Pile
from loggers.api_logger import ApiLogger
from loggers.deck_logger import DeckLogger

from .api_client import APIClient

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class DeckOfCardsClient:
    """Client for the deck of cards service.

    Knows the service's endpoints and response shapes but nothing about the
    game played with the cards (how many decks, how many cards per draw).
    """

    def __init__(self, api: Optional[APIClient] = None):
        self.api = api or APIClient(ApiConfig().base_url)

    @classmethod
    def from_config(cls, config: ApiConfig) -> "DeckOfCardsClient":
        return cls(
            APIClient(
                config.base_url,
                timeout=config.timeout,
                max_attempts=config.max_attempts,
                retry_wait=config.retry_wait,
            )
        )

    async def create_shuffled_deck(self, deck_count: int = 1) -> Deck:
        """
        Shuffle deck_count standard decks into one new remote deck.

        Raises:
            ValueError: If deck_count is not positive
            DeckServiceError: If the request fails
            ResponseParsingError: If the response has no deck_id
        """
        self._validate_count("deck_count", deck_count)

        endpoint = f"deck/new/shuffle/?deck_count={int(deck_count)}"
        data = await self._fetch(endpoint, NewDeckResponse)

        DeckLogger.log_shuffle(data.deck_id, deck_count)
        return Deck(self, data.deck_id)

    async def draw_from_deck(self, deck: Deck, count: int) -> List[Card]:
        """Draw up to count cards from deck, in service order."""
        self._validate_count("count", count)

        endpoint = f"deck/{deck.id}/draw/?count={int(count)}"
        data = await self._fetch(endpoint, DrawResponse)

        DeckLogger.log_draw(f"deck {deck.id}", count, len(data.cards))
        return [Card.from_payload(c, deck) for c in data.cards]

    async def draw_from_pile(self, pile: Pile, count: int) -> List[Card]:
        """Draw up to count cards from a named pile, in service order."""
        self._validate_count("count", count)

        endpoint = f"deck/{pile.deck.id}/pile/{pile.name}/draw/?count={int(count)}"
        data = await self._fetch(endpoint, DrawResponse)

        DeckLogger.log_draw(f"pile '{pile.name}'", count, len(data.cards))
        return [Card.from_payload(c, pile.deck) for c in data.cards]

    async def create_pile_from_cards(self, pile_name: str, cards: List[Card]) -> Pile:
        """
        Add cards to the pile pile_name of their deck.

        Args:
            pile_name: Pile name, unique per deck
            cards: Non-empty list of cards, all from the same deck

        Returns:
            Pile: Pile carrying the service-reported remaining count

        Raises:
            ValueError: If cards is empty or pile_name is blank
            MixedDeckError: If cards come from more than one deck
            ResponseParsingError: If the response does not report the pile
        """
        if not pile_name:
            ApiLogger.log_input_validation_error("pile_name", pile_name)
            raise ValueError("Pile name cannot be empty")
        if not cards:
            ApiLogger.log_input_validation_error("cards", "[]")
            raise ValueError("Cannot create a pile without cards")

        deck = cards[0].deck
        if any(card.deck.id != deck.id for card in cards):
            deck_ids = sorted({card.deck.id for card in cards})
            DeckLogger.log_mixed_deck_error(pile_name, deck_ids)
            raise MixedDeckError(
                f"Pile '{pile_name}' cards must all come from deck {deck.id}"
            )

        cards_param = ",".join(card.code for card in cards)
        endpoint = f"deck/{deck.id}/pile/{pile_name}/add/?cards={cards_param}"
        data = await self._fetch(endpoint, PileAddResponse)

        if pile_name not in data.piles:
            error = ResponseParsingError(f"Response does not list pile '{pile_name}'")
            ApiLogger.log_parse_error(endpoint, error)
            raise error

        remaining = data.piles[pile_name].remaining
        DeckLogger.log_pile_created(deck.id, pile_name, remaining)
        return Pile(self, deck, pile_name, remaining)

    async def _fetch(self, endpoint: str, model: Type[ResponseModel]) -> ResponseModel:
        data: Any = await self.api.fetch_as_json(endpoint)
        try:
            return model(**data)
        except (TypeError, ValidationError) as e:
            ApiLogger.log_parse_error(endpoint, e)
            raise ResponseParsingError(
                f"Unexpected response from {endpoint}: {str(e)}"
            ) from e

    @staticmethod
    def _validate_count(name: str, count: int) -> None:
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            ApiLogger.log_input_validation_error(name, count)
            raise ValueError(f"{name} must be a positive integer")
