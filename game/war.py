from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, TypeVar

from data.enums import DrawOutcome, RoundStep
from data.types.step_result import StepResult
from exceptions import EmptyPileError, GameNotStartedError, WarGameError
from loggers.game_logger import GameLogger

from .card import Card
from .config import GameConfig
from .deck import Deck
from .pile import Pile

if TYPE_CHECKING:
    from api.deck_client import DeckOfCardsClient

T = TypeVar("T")


def split_by_parity(cards: Sequence[T]) -> Tuple[List[T], List[T]]:
    """Deal cards alternately: even positions first list, odd positions second."""
    return list(cards[0::2]), list(cards[1::2])


def evaluate(human_card: Card, computer_card: Card) -> DrawOutcome:
    """Compare two cards. Equal ranks are WAR; no war battle is played."""
    if human_card.beats(computer_card):
        return DrawOutcome.HUMAN_WINS
    if computer_card.beats(human_card):
        return DrawOutcome.COMPUTER_WINS
    return DrawOutcome.WAR


@dataclass(frozen=True)
class DrawResult:
    """One card from each pile and who won."""

    human_card: Card
    computer_card: Card
    outcome: DrawOutcome


class WarGame:
    """
    A round of war played on a remote deck.

    Setting up a round shuffles a deck, draws cards_per_draw cards and deals
    them alternately into a human and a computer pile on the service. Each
    draw then takes the top card of both piles and compares them. No score
    is kept between draws; the piles' remaining counts are the only state
    that changes.

    Every remote step is awaited before the next one starts.

    Attributes:
        deck (Deck): Remote deck of this round
        config (GameConfig): Rules used for the round
        human_pile (Optional[Pile]): Human pile once dealt
        computer_pile (Optional[Pile]): Computer pile once dealt

    Example:
        >>> result = await WarGame.start(DeckOfCardsClient())
        >>> game = result.unwrap()
        >>> draw = (await game.play()).unwrap()
        >>> print(draw.outcome.value)
    """

    def __init__(self, deck: Deck, config: Optional[GameConfig] = None):
        self.deck = deck
        self.config = config or GameConfig()
        self.human_pile: Optional[Pile] = None
        self.computer_pile: Optional[Pile] = None

    @classmethod
    async def create_new(
        cls, client: "DeckOfCardsClient", config: Optional[GameConfig] = None
    ) -> "WarGame":
        """Shuffle a deck and deal both piles. Errors propagate."""
        result = await cls.start(client, config)
        return result.unwrap()

    async def draw_cards(self) -> DrawResult:
        """
        Draw the top card of each pile, human first, and compare them.

        Raises:
            GameNotStartedError: If the piles have not been dealt
            EmptyPileError: If either pile is exhausted
        """
        if self.human_pile is None or self.computer_pile is None:
            raise GameNotStartedError("Piles have not been dealt yet")

        human_card = await self.human_pile.draw()
        computer_card = await self.computer_pile.draw()

        outcome = evaluate(human_card, computer_card)
        GameLogger.log_draw_result(str(human_card), str(computer_card), outcome.value)
        if outcome is DrawOutcome.WAR:
            GameLogger.log_war()

        return DrawResult(human_card, computer_card, outcome)

    @classmethod
    async def start(
        cls, client: "DeckOfCardsClient", config: Optional[GameConfig] = None
    ) -> StepResult["WarGame"]:
        """Set up a round step by step, reporting the step that failed."""
        GameLogger.log_round_start()
        config = config or GameConfig()

        step = RoundStep.SHUFFLE
        try:
            deck = await client.create_shuffled_deck(config.decks)
            game = cls(deck, config)

            step = RoundStep.DRAW_FROM_DECK
            cards = await deck.draw(config.cards_per_draw)
            human_cards, computer_cards = split_by_parity(cards)
            if not human_cards or not computer_cards:
                raise EmptyPileError(
                    f"Deck returned {len(cards)} card(s), both piles need at least one"
                )

            step = RoundStep.CREATE_PILES
            game.human_pile = await deck.create_pile(config.human_pile, human_cards)
            game.computer_pile = await deck.create_pile(
                config.computer_pile, computer_cards
            )
        except (WarGameError, ValueError) as e:
            GameLogger.log_step_failure(step.value, e)
            return StepResult.failure(step, _as_game_error(e))

        GameLogger.log_round_ready(
            game.human_pile.remaining, game.computer_pile.remaining
        )
        return StepResult.success(step, game)

    async def play(self) -> StepResult[DrawResult]:
        """Play one draw, returning the error instead of raising it."""
        try:
            result = await self.draw_cards()
        except WarGameError as e:
            GameLogger.log_step_failure(RoundStep.DRAW_FROM_PILES.value, e)
            return StepResult.failure(RoundStep.DRAW_FROM_PILES, e)
        return StepResult.success(RoundStep.DRAW_FROM_PILES, result)


def _as_game_error(error: Exception) -> WarGameError:
    if isinstance(error, WarGameError):
        return error
    wrapped = WarGameError(str(error))
    wrapped.__cause__ = error
    return wrapped
