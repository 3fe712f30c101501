# lingosync\core\ports\account_store.py
from typing import Protocol

from lingosync.core.domain.models import Credentials, LanguagePair, WordTree

class IAccountStore(Protocol):
    """
    Port for the local key-value persistence of the account.
    Implementations could be a JSON directory, a keyring, or an app database.
    """

    async def load_credentials(self) -> Credentials:
        """Returns the stored credentials (all fields None when nothing is stored)."""
        ...

    async def save_credentials(self, credentials: Credentials) -> None:
        ...

    async def clear_credentials(self) -> None:
        ...

    async def load_languages(self) -> LanguagePair:
        ...

    async def save_languages(self, languages: LanguagePair) -> None:
        ...

    async def load_word_tree(self) -> WordTree:
        """
        Returns the cached copy of the saved words for offline display.
        An empty list when no copy was stored.
        """
        ...

    async def save_word_tree(self, tree: WordTree) -> None:
        ...
