# lingosync\core\domain\models.py
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from lingosync.core.domain.exceptions import InvariantViolationError

# --- Word Tree ---

class PageGroup(BaseModel):
    """
    Header naming the page a run of saved words was bookmarked on.
    An empty url means "no source page".
    """
    kind: Literal["page"] = "page"
    title: str
    url: str = ""

class WordEntry(BaseModel):
    """
    A single saved word (bookmark) as returned by the server.
    """
    kind: Literal["word"] = "word"
    id: int = Field(..., description="Server-assigned bookmark id, unique across the tree")
    source_word: str
    translated_word: str
    context: str = ""
    source_language: str
    target_language: str

DayChild = Annotated[Union[PageGroup, WordEntry], Field(discriminator="kind")]

class DayGroup(BaseModel):
    """
    All words bookmarked on one calendar day, in server order.
    Children are heterogeneous: a PageGroup precedes the run of WordEntry
    values that belong to that page.
    """
    date: str
    children: List[DayChild] = Field(default_factory=list)

    @property
    def words(self) -> List[WordEntry]:
        return [c for c in self.children if isinstance(c, WordEntry)]

    @property
    def pages(self) -> List[PageGroup]:
        return [c for c in self.children if isinstance(c, PageGroup)]

WordTree = List[DayGroup]

# --- Persistence Records ---

class Credentials(BaseModel):
    """Login information as persisted by the account store."""
    email: Optional[str] = None
    password: Optional[str] = None
    session_token: Optional[str] = None

class LanguagePair(BaseModel):
    """The user's selected languages as persisted by the account store."""
    native: Optional[str] = None
    learning: Optional[str] = None

# --- Account ---

class Account(BaseModel):
    """
    The authenticated user's identity, session and saved words.

    Invariant: a session token only exists together with email and password.
    The languages are independent of each other.
    """
    email: Optional[str] = None
    password: Optional[str] = None
    session_token: Optional[str] = None
    native_language: Optional[str] = None
    learning_language: Optional[str] = None
    word_tree: List[DayGroup] = Field(default_factory=list)

    @model_validator(mode="after")
    def _session_requires_credentials(self) -> "Account":
        if self.session_token and not (self.email and self.password):
            raise InvariantViolationError("session token without email and password")
        return self

    # --- State queries ---

    def is_logged_in(self) -> bool:
        return bool(self.email) and bool(self.password)

    def is_in_session(self) -> bool:
        return bool(self.session_token)

    def is_language_set(self) -> bool:
        return bool(self.native_language) and bool(self.learning_language)

    # --- Mutations ---

    def start_session(self, email: str, password: str, session_token: str) -> None:
        """Stores email, password and token together."""
        if not (email and password):
            raise InvariantViolationError("cannot start a session without email and password")
        self.email = email
        self.password = password
        self.session_token = session_token

    def clear_credentials(self) -> None:
        self.email = None
        self.password = None
        self.session_token = None

    def find_word(self, word_id: int) -> Optional[WordEntry]:
        for day in self.word_tree:
            for child in day.children:
                if isinstance(child, WordEntry) and child.id == word_id:
                    return child
        return None

    def remove_word(self, word_id: int) -> Optional[WordEntry]:
        """
        Removes a word from the tree and returns it (None if unknown).
        A page header left without any word is dropped as well.
        """
        for day in self.word_tree:
            for index, child in enumerate(day.children):
                if isinstance(child, WordEntry) and child.id == word_id:
                    del day.children[index]
                    _drop_orphan_header(day, index)
                    return child
        return None

    def to_credentials(self) -> Credentials:
        return Credentials(email=self.email, password=self.password, session_token=self.session_token)

    def to_languages(self) -> LanguagePair:
        return LanguagePair(native=self.native_language, learning=self.learning_language)

def _drop_orphan_header(day: DayGroup, index: int) -> None:
    # The header owning the removed word sits right before it; it is orphaned
    # when the next child (if any) is not a word.
    header_index = index - 1
    if header_index < 0 or not isinstance(day.children[header_index], PageGroup):
        return
    following = day.children[index] if index < len(day.children) else None
    if not isinstance(following, WordEntry):
        del day.children[header_index]

# --- Batch Scoring ---

class _ScoreRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value):
        return str(value)

class TextItem(_ScoreRecord):
    """A text to be scored, keyed by a caller-chosen id."""
    content: str

class UrlItem(_ScoreRecord):
    """A web page whose main content should be extracted."""
    url: str

class DifficultyScore(_ScoreRecord):
    score_average: float
    score_median: float

class LearnabilityScore(_ScoreRecord):
    score: float
    count: int

class UrlContent(_ScoreRecord):
    content: str
    image: str = ""
