from enum import Enum


class DrawOutcome(str, Enum):
    """Result of comparing the human and the computer card."""

    HUMAN_WINS = "Human wins!"
    COMPUTER_WINS = "Computer wins!"
    WAR = "WAR!"  # tie, no automatic war battle follows


class RoundStep(str, Enum):
    """Remote steps a round goes through, in order."""

    SHUFFLE = "shuffle"
    DRAW_FROM_DECK = "draw-from-deck"
    CREATE_PILES = "create-piles"
    DRAW_FROM_PILES = "draw-from-piles"
