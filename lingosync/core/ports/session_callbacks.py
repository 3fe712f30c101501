# lingosync\core\ports\session_callbacks.py
from typing import List, Protocol

from lingosync.core.domain.models import DifficultyScore, LearnabilityScore, UrlContent

class ISessionCallbacks(Protocol):
    """
    Port for the notifications the session orchestrator sends to its caller
    (usually the UI layer). Every method is fire-and-forget.
    """

    def show_login_dialog(self, title: str, email: str) -> None:
        """Ask the user to (re-)enter credentials, pre-filling the email."""
        ...

    def show_create_account_dialog(self, message: str, username: str, email: str) -> None:
        """Re-open the create-account form with the attempted values."""
        ...

    def on_login_succeeded(self) -> None:
        ...

    def set_translation(self, translation: str) -> None:
        ...

    def highlight(self, word: str) -> None:
        """Mark a word as bookmarked before the server confirmed it."""
        ...

    def display_error(self, message: str, is_transient: bool) -> None:
        ...

    def display_message(self, message: str) -> None:
        ...

    def notify_words_changed(self, changed: bool) -> None:
        """
        Called after every word fetch attempt. False means the tree was not
        touched and any refresh indicator should stop.
        """
        ...

    def on_bookmark_result(self, bookmark_id: str) -> None:
        """Bookmark id of a new word, or "0" when a word was deleted."""
        ...

    def set_difficulties(self, difficulties: List[DifficultyScore]) -> None:
        ...

    def set_learnabilities(self, learnabilities: List[LearnabilityScore]) -> None:
        ...

    def set_contents(self, contents: List[UrlContent]) -> None:
        ...
