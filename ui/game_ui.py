import logging
from typing import List, Optional

from api.deck_client import DeckOfCardsClient
from game.config import GameConfig
from game.war import DrawResult, WarGame

from .elements import Button, CardFace, Heading

logger = logging.getLogger(__name__)


class GameUI:
    """
    Terminal front end for a round of war.

    Owns the controls and reacts to the start and draw triggers by calling
    the game. Failures are logged and the UI falls back to its pre-round or
    pre-draw state.

    Attributes:
        client (DeckOfCardsClient): Client used to set up rounds
        config (GameConfig): Rules handed to every new round
        game (Optional[WarGame]): Current round, None before a round starts
    """

    def __init__(self, client: DeckOfCardsClient, config: Optional[GameConfig] = None):
        self.client = client
        self.config = config or GameConfig()
        self.game: Optional[WarGame] = None

        self.start_game_button = Button("Start round", "s")
        self.draw_cards_button = Button("Draw cards", "d")
        self.human_card_face = CardFace("Human")
        self.computer_card_face = CardFace("Computer")
        self.result_heading = Heading()

        self.clear_game_state()

    def clear_game_state(self) -> None:
        self.game = None
        self.draw_cards_button.hide()
        self.computer_card_face.hide()
        self.human_card_face.hide()
        self.result_heading.hide()

    async def start_new_game(self) -> bool:
        """Set up a new round. Returns False if setup failed."""
        if not self.start_game_button.clickable:
            return False

        self.start_game_button.hide()
        self.clear_game_state()

        result = await WarGame.start(self.client, self.config)
        if not result.ok:
            logger.error(f"Could not start round ({result.step.value}): {result.error}")
            self.start_game_button.show()
            return False

        self.game = result.value
        self.draw_cards_button.show()
        return True

    async def draw_cards(self) -> Optional[DrawResult]:
        """Draw one card per player and show the outcome.

        Ignored while a draw is already in flight or no round is running.
        """
        if self.game is None or not self.draw_cards_button.clickable:
            return None

        self.draw_cards_button.disable()
        self.result_heading.clear()
        try:
            result = await self.game.play()
        finally:
            self.draw_cards_button.enable()

        if not result.ok:
            logger.error(f"Draw failed: {result.error}")
            self.start_game_button.show()
            self.clear_game_state()
            return None

        self.show_cards_drawn_and_evaluate(result.value)
        if self.game.human_pile.is_empty() or self.game.computer_pile.is_empty():
            logger.info("A pile ran out of cards, round over")
            self.game = None
            self.draw_cards_button.hide()
            self.start_game_button.show()
        return result.value

    def show_cards_drawn_and_evaluate(self, draw: DrawResult) -> None:
        self.computer_card_face.show_card(draw.computer_card)
        self.human_card_face.show_card(draw.human_card)
        self.result_heading.show_text(draw.outcome.value)

    def render(self) -> List[str]:
        """Lines for every visible control, top to bottom."""
        controls = [
            self.human_card_face,
            self.computer_card_face,
            self.result_heading,
            self.start_game_button,
            self.draw_cards_button,
        ]
        lines = [control.render() for control in controls]
        return [line for line in lines if line]
