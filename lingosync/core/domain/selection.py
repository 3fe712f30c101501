# lingosync\core\domain\selection.py
from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass
class TranslationMemo:
    """
    Single-slot cache of the last translation request.

    The key is claimed when a request is dispatched; the value arrives with
    the response. A claimed key without a value means the request is still
    in flight, which is enough to suppress a duplicate request.
    """
    key: Optional[Tuple[str, str]] = None
    value: Optional[str] = None

    def matches(self, text: str, target_language: str) -> bool:
        return self.key is not None and self.key == (text, target_language)

    def claim(self, text: str, target_language: str) -> None:
        self.key = (text, target_language)
        self.value = None

    def store(self, text: str, target_language: str, value: str) -> None:
        # A newer claim wins over a late response
        if self.matches(text, target_language):
            self.value = value

    def release(self, text: str, target_language: str) -> None:
        if self.matches(text, target_language):
            self.clear()

    def clear(self) -> None:
        self.key = None
        self.value = None
