# lingosync\core\use_cases\account_state.py
from typing import Optional

import structlog

from lingosync.core.domain.models import Account, LanguagePair, WordEntry, WordTree
from lingosync.core.ports.account_store import IAccountStore

logger = structlog.get_logger()

class AccountState:
    """
    Owns the in-memory Account and keeps it in step with the account store.

    Only the session orchestrator mutates it; everyone else reads
    `account` as a snapshot of already-settled state.
    """

    def __init__(self, store: IAccountStore, account: Optional[Account] = None):
        self.store = store
        self.account = account or Account()

    # --- Loading ---

    async def load(self) -> Account:
        """Restores credentials, languages and the cached word tree."""
        credentials = await self.store.load_credentials()
        languages = await self.store.load_languages()
        tree = await self.store.load_word_tree()

        session_token = credentials.session_token
        if session_token and not (credentials.email and credentials.password):
            # A token without credentials cannot be renewed; drop it.
            logger.warning("stored_session_without_credentials_dropped")
            session_token = None

        self.account = Account(
            email=credentials.email,
            password=credentials.password,
            session_token=session_token,
            native_language=languages.native,
            learning_language=languages.learning,
            word_tree=tree,
        )
        logger.info(
            "account_loaded",
            logged_in=self.account.is_logged_in(),
            in_session=self.account.is_in_session(),
            days=len(tree),
        )
        return self.account

    async def load_words_from_store(self) -> WordTree:
        """Replaces the tree with the cached copy (offline fallback)."""
        self.account.word_tree = await self.store.load_word_tree()
        logger.info("word_tree_restored_from_store", days=len(self.account.word_tree))
        return self.account.word_tree

    # --- Session ---

    async def start_session(self, email: str, password: str, session_token: str) -> None:
        self.account.start_session(email, password, session_token)
        await self.save_login_information()

    async def save_login_information(self) -> None:
        await self.store.save_credentials(self.account.to_credentials())

    async def clear_credentials(self) -> None:
        self.account.clear_credentials()
        await self.store.clear_credentials()
        logger.info("credentials_cleared")

    # --- Languages ---

    def set_languages(self, native: str, learning: str) -> None:
        self.account.native_language = native
        self.account.learning_language = learning

    async def save_languages(self) -> LanguagePair:
        languages = self.account.to_languages()
        await self.store.save_languages(languages)
        return languages

    # --- Words ---

    async def replace_word_tree(self, tree: WordTree) -> None:
        """Swaps in a freshly built tree and caches it for offline use."""
        self.account.word_tree = tree
        await self.store.save_word_tree(tree)

    async def remove_word(self, word_id: int) -> WordEntry:
        removed = self.account.remove_word(word_id)
        if removed is not None:
            await self.store.save_word_tree(self.account.word_tree)
        return removed

    # --- Reset ---

    async def reset(self) -> None:
        """Forgets everything about the current user, locally and in the store."""
        self.account = Account()
        await self.store.clear_credentials()
        await self.store.save_languages(LanguagePair())
        await self.store.save_word_tree([])
