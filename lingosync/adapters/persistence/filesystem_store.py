# lingosync/adapters/persistence/filesystem_store.py
import json
import os
from pathlib import Path
from typing import Any, Dict, List

import aiofiles
import structlog
from pydantic import TypeAdapter, ValidationError

from lingosync.core.domain.models import Credentials, DayGroup, LanguagePair, WordTree
from lingosync.shared.config import settings

logger = structlog.get_logger()

_TREE_ADAPTER = TypeAdapter(List[DayGroup])

class FileSystemAccountStore:
    """
    Concrete implementation of the Account Store using local JSON files.

    Layout:
        <base>/credentials.json   email, password, session token
        <base>/languages.json     native and learning language
        <base>/words.json         cached word tree for offline display
    """

    CREDENTIALS_FILE = "credentials.json"
    LANGUAGES_FILE = "languages.json"
    WORDS_FILE = "words.json"

    def __init__(self, base_path: str = settings.STORAGE_DIR):
        self.base_path = Path(base_path).expanduser()
        # Ensure the directory exists
        self.base_path.mkdir(parents=True, exist_ok=True)

    async def _load_file(self, name: str) -> Any:
        """Helper to load raw JSON data. Missing or unreadable files load as None."""
        path = self.base_path / name
        if not path.exists():
            return None

        try:
            async with aiofiles.open(path, mode='r', encoding='utf-8') as f:
                content = await f.read()
                return json.loads(content) if content else None
        except (OSError, ValueError) as e:
            logger.error("store_read_failed", file=name, error=str(e))
            return None

    async def _save_file(self, name: str, data: Any, private: bool = False) -> None:
        """Helper to write raw JSON data."""
        path = self.base_path / name
        path.parent.mkdir(parents=True, exist_ok=True)

        try:
            async with aiofiles.open(path, mode='w', encoding='utf-8') as f:
                await f.write(json.dumps(data, indent=2, ensure_ascii=False))
            if private:
                os.chmod(path, 0o600)
        except OSError as e:
            logger.error("store_write_failed", file=name, error=str(e))
            raise IOError(f"Could not save {name}")

    # --- Interface Implementation ---

    async def load_credentials(self) -> Credentials:
        data: Dict[str, Any] = await self._load_file(self.CREDENTIALS_FILE) or {}
        try:
            return Credentials(**data)
        except (TypeError, ValidationError) as e:
            logger.warning("stored_credentials_invalid", error=str(e))
            return Credentials()

    async def save_credentials(self, credentials: Credentials) -> None:
        await self._save_file(self.CREDENTIALS_FILE, credentials.model_dump(), private=True)
        logger.debug("credentials_saved", email=credentials.email)

    async def clear_credentials(self) -> None:
        await self.save_credentials(Credentials())

    async def load_languages(self) -> LanguagePair:
        data: Dict[str, Any] = await self._load_file(self.LANGUAGES_FILE) or {}
        try:
            return LanguagePair(**data)
        except (TypeError, ValidationError) as e:
            logger.warning("stored_languages_invalid", error=str(e))
            return LanguagePair()

    async def save_languages(self, languages: LanguagePair) -> None:
        await self._save_file(self.LANGUAGES_FILE, languages.model_dump())

    async def load_word_tree(self) -> WordTree:
        data = await self._load_file(self.WORDS_FILE)
        if data is None:
            return []
        try:
            return _TREE_ADAPTER.validate_python(data)
        except ValidationError as e:
            logger.warning("stored_word_tree_invalid", error=str(e))
            return []

    async def save_word_tree(self, tree: WordTree) -> None:
        await self._save_file(self.WORDS_FILE, _TREE_ADAPTER.dump_python(tree, mode="json"))
        logger.debug("word_tree_saved", days=len(tree))
