import pytest

from main import run
from ui.game_ui import GameUI


def command_reader(*commands):
    remaining = list(commands)

    def read():
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


@pytest.mark.asyncio
async def test_run_plays_until_quit(deck_client, mock_api):
    ui = GameUI(deck_client)

    await run(ui, command_reader("s", "d", "q", "d"))

    assert ui.game is not None
    assert ui.game.human_pile.remaining == 25


@pytest.mark.asyncio
async def test_run_stops_at_end_of_input(deck_client, mock_api):
    ui = GameUI(deck_client)

    await run(ui, command_reader())

    mock_api.fetch_as_json.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_command_prints_help(deck_client, capsys):
    await run(GameUI(deck_client), command_reader("x"))

    assert "Commands:" in capsys.readouterr().out
