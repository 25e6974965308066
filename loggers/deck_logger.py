import logging

logger = logging.getLogger(__name__)


class DeckLogger:
    """Handles all logging operations for deck and pile actions."""

    @staticmethod
    def log_shuffle(deck_id: str, deck_count: int) -> None:
        """Log a freshly shuffled remote deck."""
        logger.info(f"Shuffled new deck {deck_id} ({deck_count} deck(s))")

    @staticmethod
    def log_draw(source: str, requested: int, received: int) -> None:
        """Log a draw; fewer cards than requested means the source ran dry."""
        if received < requested:
            logger.warning(
                f"Requested {requested} cards from {source}, only {received} returned"
            )
        else:
            logger.debug(f"Drew {received} card(s) from {source}")

    @staticmethod
    def log_pile_created(deck_id: str, name: str, remaining: int) -> None:
        """Log creation of a named pile."""
        logger.info(f"Pile '{name}' on deck {deck_id} holds {remaining} cards")

    @staticmethod
    def log_mixed_deck_error(pile_name: str, deck_ids: list) -> None:
        """Log an attempt to build a pile from several decks."""
        logger.error(
            f"Cannot build pile '{pile_name}' from cards of decks {', '.join(deck_ids)}"
        )

    @staticmethod
    def log_empty_pile(name: str) -> None:
        """Log a draw from an empty pile."""
        logger.error(f"Pile '{name}' has no cards left")
