# lingosync\core\domain\word_tree.py
"""
Rebuilds the saved-words tree from a `bookmarks_by_day` payload.

The server sends an ordered list of days, each with an ordered list of
bookmarks. The tree keeps that order and puts a single PageGroup header in
front of every run of consecutive bookmarks sharing a page title.
"""
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from lingosync.core.domain.exceptions import PayloadMalformedError
from lingosync.core.domain.models import DayGroup, PageGroup, WordEntry, WordTree

# --- Wire format ---

class BookmarkPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    source_word: str = Field(..., alias="from")
    translated_words: List[str] = Field(..., alias="to", min_length=1)
    source_language: str = Field(..., alias="from_lang")
    target_language: str = Field(..., alias="to_lang")
    page_title: str = Field(..., alias="title")
    page_url: str = Field("", alias="url")
    context: str = ""

class DayPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    date: str
    bookmarks: List[BookmarkPayload] = Field(default_factory=list)

_DAYS_ADAPTER = TypeAdapter(List[DayPayload])

# --- Builder ---

def parse_days(raw: Any) -> List[DayPayload]:
    """Validates the raw JSON payload. Raises PayloadMalformedError."""
    try:
        return _DAYS_ADAPTER.validate_python(raw)
    except ValidationError as e:
        raise PayloadMalformedError("bookmarks_by_day", f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}")

def build_day(day: DayPayload) -> DayGroup:
    group = DayGroup(date=day.date)
    current_title = ""

    for bookmark in day.bookmarks:
        if bookmark.page_title != current_title:
            current_title = bookmark.page_title
            group.children.append(PageGroup(title=bookmark.page_title, url=bookmark.page_url))

        # Only the first translation candidate is kept
        group.children.append(WordEntry(
            id=bookmark.id,
            source_word=bookmark.source_word,
            translated_word=bookmark.translated_words[0],
            context=bookmark.context,
            source_language=bookmark.source_language,
            target_language=bookmark.target_language,
        ))

    return group

def build_word_tree(raw: Any) -> WordTree:
    """
    Transforms the raw day-grouped payload into a fresh word tree.

    Args:
        raw: The decoded JSON array returned by the server.

    Returns:
        A new list of DayGroup, one per day (empty days included).

    Raises:
        PayloadMalformedError: If the payload does not have the expected shape.
    """
    return [build_day(day) for day in parse_days(raw)]
