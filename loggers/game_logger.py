import logging

logger = logging.getLogger(__name__)


class GameLogger:
    """Handles all logging operations for the round flow."""

    @staticmethod
    def log_round_start() -> None:
        """Log the start of a new round."""
        logger.info(f"\n{'='*50}")
        logger.info("Starting a new round...")
        logger.info(f"{'='*50}")

    @staticmethod
    def log_round_ready(human_remaining: int, computer_remaining: int) -> None:
        """Log the piles dealt for a round."""
        logger.info(
            f"Round ready - human: {human_remaining} cards, "
            f"computer: {computer_remaining} cards"
        )

    @staticmethod
    def log_draw_result(human_card: str, computer_card: str, outcome: str) -> None:
        """Log one compared draw."""
        logger.info(f"Human {human_card} vs Computer {computer_card}: {outcome}")

    @staticmethod
    def log_war() -> None:
        """Log a tie; no war battle is played."""
        logger.info("Cards tie - WAR declared, no extra battle is played")

    @staticmethod
    def log_step_failure(step: str, error: Exception) -> None:
        """Log a failed round step."""
        logger.error(f"Round step '{step}' failed: {str(error)}")
