# tests\adapters\test_cli.py
import io

import pytest

from lingosync.adapters.cli import build_parser, render_tree, run_command
from lingosync.adapters.console_callbacks import ConsoleCallbacks
from lingosync.core.domain import messages
from lingosync.core.domain.models import Credentials, DayGroup, PageGroup, WordEntry

from tests.conftest import EMAIL, PASSWORD, TOKEN, route, sent_operations

def test_render_tree():
    tree = [
        DayGroup(date="2024-01-01", children=[
            PageGroup(title="A", url="http://a"),
            WordEntry(id=1, source_word="Haus", translated_word="house", source_language="de", target_language="en"),
            PageGroup(title="B"),
        ]),
        DayGroup(date="2023-12-31"),
    ]

    assert render_tree(tree) == [
        "2024-01-01",
        "  [A] http://a",
        "    #1 Haus (de) = house (en)",
        "  [B]",
        "2023-12-31",
    ]

def test_parser_maps_language_flags():
    args = build_parser().parse_args(["--offline", "translate", "Haus", "--from", "de", "--to", "en"])

    assert args.offline
    assert (args.command, args.text, args.source, args.target) == ("translate", "Haus", "de", "en")

def test_parser_requires_integer_bookmark_id():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["delete", "abc"])

@pytest.mark.asyncio
async def test_words_prints_refreshed_tree(orchestrator, mock_store, mock_transport, sample_days):
    mock_store.load_credentials.return_value = Credentials(email=EMAIL, password=PASSWORD, session_token=TOKEN)
    route(mock_transport, {"bookmarks_by_day": sample_days})
    out = io.StringIO()

    code = await run_command(build_parser().parse_args(["words"]), orchestrator, out=out)

    assert code == 0
    lines = out.getvalue().splitlines()
    assert lines[0] == "2024-01-01"
    assert "    #3 Hund (de) = Hund-en (en)" in lines
    assert lines[-1] == "2023-12-31"

@pytest.mark.asyncio
async def test_words_requires_login(orchestrator, mock_callbacks, mock_transport):
    code = await run_command(build_parser().parse_args(["words"]), orchestrator, out=io.StringIO())

    assert code == 1
    mock_callbacks.show_login_dialog.assert_called_once_with(messages.LOGIN_FIRST, "")
    mock_transport.send.assert_not_awaited()

@pytest.mark.asyncio
async def test_languages_prints_selection(orchestrator, mock_store, mock_transport):
    mock_store.load_credentials.return_value = Credentials(email=EMAIL, password=PASSWORD, session_token=TOKEN)
    route(mock_transport, {"learned_and_native_language": {"native": "en", "learned": "de"}})
    out = io.StringIO()

    await run_command(build_parser().parse_args(["languages"]), orchestrator, out=out)

    assert out.getvalue().strip() == "native: en  learning: de"
    assert sent_operations(mock_transport) == ["learned_and_native_language"]

def test_console_callbacks_without_color():
    out = io.StringIO()
    callbacks = ConsoleCallbacks(out=out, color=False)

    callbacks.set_translation("house")
    callbacks.display_error("Something went wrong", is_transient=True)
    callbacks.notify_words_changed(True)

    assert out.getvalue().splitlines() == ["house", "Error: Something went wrong"]
    assert callbacks.translation == "house"
    assert callbacks.words_changed is True
