import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from api.deck_client import DeckOfCardsClient
from config import ApiConfig
from game.config import GameConfig
from ui.game_ui import GameUI
from util import setup_logging

logger = logging.getLogger(__name__)

HELP = "Commands: [s] start round, [d] draw cards, [q] quit"


async def run(ui: GameUI, read_command: Callable[[], str] = input) -> None:
    """Read commands until quit or end of input, rendering after each one."""
    loop = asyncio.get_event_loop()

    while True:
        print("\n".join(ui.render()))
        try:
            command = await loop.run_in_executor(None, read_command)
        except EOFError:
            break

        command = command.strip().lower()
        if command == "q":
            break
        elif command == ui.start_game_button.command:
            await ui.start_new_game()
        elif command == ui.draw_cards_button.command:
            await ui.draw_cards()
        else:
            print(HELP)


def main(api_config: Optional[ApiConfig] = None) -> None:
    session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    setup_logging(session_id)

    client = DeckOfCardsClient.from_config(api_config or ApiConfig.from_env())
    ui = GameUI(client, GameConfig())

    print(HELP)
    try:
        asyncio.run(run(ui))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        client.api.close()


if __name__ == "__main__":
    main()
