# lingosync\adapters\cli.py
"""
Command line front-end for the session orchestrator.

Usage:
    lingosync login <email> <password>
    lingosync create-account <username> <email> <password>
    lingosync words                       # Refresh and print saved words
    lingosync translate <text> --from de --to en
    lingosync bookmark <text> <translation> --from de --to en --title T --url U
    lingosync delete <bookmark-id>
    lingosync languages                   # Refresh and print languages
    lingosync set-native <lang> | set-learning <lang>
    lingosync logout
"""
import argparse
import asyncio
import sys
from typing import List, Optional

import structlog
from dependency_injector import providers

from lingosync.adapters.console_callbacks import ConsoleCallbacks
from lingosync.adapters.http.network_monitor import StaticNetworkMonitor
from lingosync.core.domain import messages
from lingosync.core.domain.models import PageGroup, WordTree
from lingosync.core.use_cases.session_orchestrator import SessionOrchestrator
from lingosync.shared.container import Container
from lingosync.shared.logging_config import configure_logging
from lingosync.shared.telemetry import setup_telemetry

logger = structlog.get_logger()

def render_tree(tree: WordTree) -> List[str]:
    """Formats the saved words as indented text lines."""
    lines = []
    for day in tree:
        lines.append(day.date)
        for child in day.children:
            if isinstance(child, PageGroup):
                lines.append(f"  [{child.title}] {child.url}".rstrip())
            else:
                lines.append(
                    f"    #{child.id} {child.source_word} ({child.source_language}) = "
                    f"{child.translated_word} ({child.target_language})"
                )
    return lines

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lingosync", description="Language-learning word list client")
    parser.add_argument("--offline", action="store_true", help="Act as if no network is available")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--log-format", choices=["json", "console"], default=None)
    parser.add_argument("--no-color", action="store_true")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("login", help="Acquire a session")
    p.add_argument("email")
    p.add_argument("password")

    p = sub.add_parser("create-account", help="Register a new user")
    p.add_argument("username")
    p.add_argument("email")
    p.add_argument("password")

    sub.add_parser("logout", help="Forget the stored user")
    sub.add_parser("words", help="Refresh and print the saved words")
    sub.add_parser("languages", help="Refresh and print the selected languages")

    p = sub.add_parser("translate", help="Translate a word or phrase")
    p.add_argument("text")
    p.add_argument("--from", dest="source", required=True)
    p.add_argument("--to", dest="target", required=True)

    p = sub.add_parser("bookmark", help="Save a word with its context")
    p.add_argument("text")
    p.add_argument("translation")
    p.add_argument("--from", dest="source", required=True)
    p.add_argument("--to", dest="target", required=True)
    p.add_argument("--title", default="")
    p.add_argument("--url", default="")
    p.add_argument("--context", default="")

    p = sub.add_parser("delete", help="Delete a saved word")
    p.add_argument("bookmark_id", type=int)

    p = sub.add_parser("set-native", help="Change the native language")
    p.add_argument("language")

    p = sub.add_parser("set-learning", help="Change the learning language")
    p.add_argument("language")

    return parser

async def run_command(args: argparse.Namespace, orchestrator: SessionOrchestrator, out=sys.stdout) -> int:
    await orchestrator.state.load()
    command = args.command

    if command == "login":
        await orchestrator.acquire_session(args.email, args.password)
    elif command == "create-account":
        await orchestrator.create_account(args.username, args.email, args.password)
    elif command == "logout":
        await orchestrator.logout()
    elif command == "words":
        if not orchestrator.account.is_logged_in():
            orchestrator.callbacks.show_login_dialog(messages.LOGIN_FIRST, "")
            return 1
        await orchestrator.fetch_words()
        for line in render_tree(orchestrator.account.word_tree):
            print(line, file=out)
    elif command == "languages":
        await orchestrator.fetch_languages()
        account = orchestrator.account
        print(f"native: {account.native_language or '-'}  learning: {account.learning_language or '-'}", file=out)
    elif command == "translate":
        await orchestrator.translate(args.text, args.source, args.target)
    elif command == "bookmark":
        await orchestrator.bookmark_with_context(
            args.text, args.source, args.translation, args.target, args.title, args.url, args.context
        )
    elif command == "delete":
        await orchestrator.delete_word(args.bookmark_id)
    elif command == "set-native":
        await orchestrator.set_native_language(args.language)
    elif command == "set-learning":
        await orchestrator.set_learning_language(args.language)
    return 0

async def _main_async(args: argparse.Namespace) -> int:
    container = Container()
    container.callbacks.override(providers.Object(ConsoleCallbacks(color=not args.no_color)))
    if args.offline:
        container.network_monitor.override(providers.Object(StaticNetworkMonitor(online=False)))

    orchestrator = container.session_orchestrator()
    try:
        return await run_command(args, orchestrator)
    finally:
        await orchestrator.transport.close()
        close_monitor = getattr(orchestrator.network, "close", None)
        if close_monitor is not None:
            await close_monitor()
        orchestrator.runner.shutdown()

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(log_format=args.log_format, log_level=args.log_level)
    setup_telemetry()
    logger.debug("cli_command", command=args.command)
    return asyncio.run(_main_async(args))

if __name__ == "__main__":
    sys.exit(main())
