from dataclasses import dataclass


@dataclass
class GameConfig:
    """
    Rules for a round of war.

    Attributes:
        decks (int): Standard 52-card decks shuffled into one logical deck (default: 1)
        cards_per_draw (int): Cards drawn from the deck and split between piles (default: 52)
        human_pile (str): Name of the human player's pile (default: "human")
        computer_pile (str): Name of the computer player's pile (default: "computer")

    Raises:
        ValueError: If counts are not positive or pile names are empty or equal
    """

    decks: int = 1
    cards_per_draw: int = 52
    human_pile: str = "human"
    computer_pile: str = "computer"

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.decks <= 0:
            raise ValueError("Deck count must be positive")
        if self.cards_per_draw < 2:
            raise ValueError("Need at least 2 cards to fill both piles")
        if self.cards_per_draw > 52 * self.decks:
            raise ValueError(
                f"Cannot draw {self.cards_per_draw} cards from {self.decks} deck(s)"
            )
        if not self.human_pile or not self.computer_pile:
            raise ValueError("Pile names cannot be empty")
        if self.human_pile == self.computer_pile:
            raise ValueError("Pile names must be unique per deck")
