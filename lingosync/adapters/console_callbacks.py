# lingosync\adapters\console_callbacks.py
import sys
from typing import List, TextIO

import structlog

from lingosync.core.domain.models import DifficultyScore, LearnabilityScore, UrlContent

logger = structlog.get_logger()

# Colors for terminal output
class Colors:
    BLUE = '\033[94m'
    GREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

class ConsoleCallbacks:
    """
    Driven Adapter: prints orchestrator notifications to a terminal.
    Implements ISessionCallbacks for the CLI.
    """

    def __init__(self, out: TextIO = sys.stdout, color: bool = True):
        self.out = out
        self.color = color
        self.translation = None
        self.words_changed = None
        self.last_bookmark_id = None

    def _print(self, msg: str, color: str = Colors.ENDC) -> None:
        if self.color:
            msg = f"{color}{msg}{Colors.ENDC}"
        print(msg, file=self.out)

    def show_login_dialog(self, title: str, email: str) -> None:
        hint = f" ({email})" if email else ""
        self._print(f"{title}{hint}\n  -> lingosync login <email> <password>", Colors.WARNING)

    def show_create_account_dialog(self, message: str, username: str, email: str) -> None:
        self._print(f"{message} [{username} / {email}]\n  -> lingosync create-account <username> <email> <password>", Colors.WARNING)

    def on_login_succeeded(self) -> None:
        logger.info("login_succeeded")

    def set_translation(self, translation: str) -> None:
        self.translation = translation
        self._print(translation, Colors.BOLD)

    def highlight(self, word: str) -> None:
        self._print(f"* {word}", Colors.BLUE)

    def display_error(self, message: str, is_transient: bool) -> None:
        self._print(f"Error: {message}", Colors.FAIL)

    def display_message(self, message: str) -> None:
        self._print(message, Colors.GREEN)

    def notify_words_changed(self, changed: bool) -> None:
        self.words_changed = changed

    def on_bookmark_result(self, bookmark_id: str) -> None:
        self.last_bookmark_id = bookmark_id

    def set_difficulties(self, difficulties: List[DifficultyScore]) -> None:
        for d in difficulties:
            self._print(f"{d.id}: average={d.score_average:.2f} median={d.score_median:.2f}")

    def set_learnabilities(self, learnabilities: List[LearnabilityScore]) -> None:
        for item in learnabilities:
            self._print(f"{item.id}: score={item.score:.2f} count={item.count}")

    def set_contents(self, contents: List[UrlContent]) -> None:
        for c in contents:
            self._print(f"{c.id}: {c.content[:120]}")
