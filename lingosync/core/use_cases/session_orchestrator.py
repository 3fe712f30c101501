# lingosync/core/use_cases/session_orchestrator.py
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import structlog

from lingosync.core.domain import messages
from lingosync.core.domain.exceptions import (
    DomainError,
    InvalidInputError,
    NetworkUnavailableError,
    NoActiveSessionError,
    NotLoggedInError,
    PayloadMalformedError,
    SameLanguagePairError,
    ServerRejectedError,
    TransportFailureError,
)
from lingosync.core.domain.models import (
    Account,
    DifficultyScore,
    LearnabilityScore,
    TextItem,
    UrlContent,
    UrlItem,
)
from lingosync.core.domain.selection import TranslationMemo
from lingosync.core.domain.word_tree import build_word_tree
from lingosync.core.ports.background_runner import IBackgroundRunner
from lingosync.core.ports.http_transport import HttpRequest, HttpResponse, IHttpTransport
from lingosync.core.ports.network_monitor import INetworkMonitor
from lingosync.core.ports.session_callbacks import ISessionCallbacks
from lingosync.core.use_cases.account_state import AccountState
from lingosync.shared.config import Settings, settings
from lingosync.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

ACCEPTANCE_TOKEN = "OK"

# Language settings known to the server: account field -> endpoint
_LANGUAGE_ENDPOINTS = {
    "native_language": "native_language",
    "learning_language": "learned_language",
}

def _reshape_scores(operation: str, key: str, model, payload: Any) -> list:
    """CPU-bound reshaping of a batch scoring response. Runs off the event loop."""
    try:
        rows = payload[key]
        return [model.model_validate(row) for row in rows]
    except (KeyError, TypeError) as e:
        raise PayloadMalformedError(operation, f"missing '{key}' list: {e}")
    except ValueError as e:
        # pydantic.ValidationError is a ValueError
        raise PayloadMalformedError(operation, str(e).splitlines()[0])

class SessionOrchestrator:
    """
    Use Case: the client-side session and synchronization manager.

    Every public operation first evaluates login/network/session state.
    When the session is missing it acquires one and returns WITHOUT doing
    its own work: the acquisition success path refreshes languages and
    words, every other action has to be re-issued by the caller.

    All remote errors end here and are turned into callback notifications.
    """

    def __init__(
        self,
        state: AccountState,
        transport: IHttpTransport,
        network: INetworkMonitor,
        callbacks: ISessionCallbacks,
        runner: IBackgroundRunner,
        config: Settings = settings,
    ):
        self.state = state
        self.transport = transport
        self.network = network
        self.callbacks = callbacks
        self.runner = runner
        self.config = config

        self.memo = TranslationMemo()
        self._acquiring = False

    @property
    def account(self) -> Account:
        return self.state.account

    def rebind_callbacks(self, callbacks: ISessionCallbacks) -> None:
        """Routes notifications to a new receiver (e.g. a recreated UI)."""
        self.callbacks = callbacks

    # --- Lifecycle ---

    async def start(self) -> None:
        """
        Restores the persisted account and fetches whatever is missing.
        """
        with tracer.start_as_current_span("session.start"):
            account = await self.state.load()
            if not account.is_logged_in():
                return

            if not account.is_in_session():
                await self._renew_session()
            elif not account.is_language_set():
                await self.fetch_languages()
                await self.fetch_words()
            else:
                await self.fetch_words()

    async def logout(self) -> None:
        with tracer.start_as_current_span("session.logout"):
            await self.state.reset()
            self.memo.clear()
            logger.info("logged_out")
            self.callbacks.display_message(messages.LOGGED_OUT)
            self.callbacks.notify_words_changed(True)

    # --- Gates ---

    def _require_login(self) -> None:
        if not self.account.is_logged_in():
            raise NotLoggedInError()

    async def _require_network(self) -> None:
        if not await self.network.is_available():
            raise NetworkUnavailableError()

    def _require_session(self) -> None:
        if not self.account.is_in_session():
            raise NoActiveSessionError()

    @staticmethod
    def _require_input(value: Optional[str], field: str) -> None:
        if value is None or not value.strip():
            raise InvalidInputError(field)

    async def _ensure_ready(self, require_login: bool = True) -> None:
        if require_login:
            self._require_login()
        await self._require_network()
        self._require_session()

    def _session_params(self) -> Dict[str, str]:
        return {"session": self.account.session_token}

    async def _renew_session(self) -> None:
        await self.acquire_session(self.account.email, self.account.password)

    # --- Account & Session ---

    async def create_account(self, username: str, email: str, password: str) -> None:
        with tracer.start_as_current_span("session.create_account"):
            try:
                self._require_input(email, "email")
                self._require_input(password, "password")
            except InvalidInputError as e:
                logger.debug("create_account_ignored", field=e.field)
                return

            request = HttpRequest(
                operation="add_user",
                path=f"add_user/{quote(email, safe='@')}",
                form={"username": username, "password": password},
            )
            try:
                response = await self.transport.send(request)
                token = self._read_token(response)
            except (TransportFailureError, ServerRejectedError) as e:
                logger.warning("create_account_failed", email=email, error=str(e))
                message = (
                    messages.LANGUAGE_SERVER_ERROR
                    if isinstance(e, TransportFailureError) and e.is_connection_error
                    else messages.CREATE_ACCOUNT_EXISTING
                )
                self.callbacks.show_create_account_dialog(message, username, email)
                return

            logger.info("account_created", email=email)
            await self._on_session_acquired(email, password, token)

    async def acquire_session(self, email: str, password: str) -> None:
        """
        Logs in and stores a fresh session token.
        Silently does nothing while offline; a later operation will retry.
        """
        with tracer.start_as_current_span("session.acquire"):
            if self._acquiring:
                logger.info("session_acquisition_already_running")
                return
            if not email or not password:
                logger.debug("session_acquisition_skipped", reason="missing credentials")
                return
            # Claimed before the first await so concurrent callers see it
            self._acquiring = True
            try:
                if not await self.network.is_available():
                    logger.info("session_acquisition_skipped", reason="offline")
                    return

                response = await self.transport.send(HttpRequest(
                    operation="session",
                    path=f"session/{quote(email, safe='@')}",
                    form={"password": password},
                ))
                token = self._read_token(response)
            except (TransportFailureError, ServerRejectedError) as e:
                logger.warning("session_acquisition_failed", email=email, error=str(e))
                await self.state.clear_credentials()
                self.callbacks.show_login_dialog(messages.LOGIN_WRONG_CREDENTIALS, email)
                return
            finally:
                self._acquiring = False

            logger.info("session_acquired", email=email)
            await self._on_session_acquired(email, password, token)

    @staticmethod
    def _read_token(response: HttpResponse) -> str:
        token = response.text.strip().strip('"')
        if not token:
            raise ServerRejectedError(response.operation, response.text, expected="session token")
        return token

    async def _on_session_acquired(self, email: str, password: str, token: str) -> None:
        await self.state.start_session(email, password, token)
        self.callbacks.display_message(messages.LOGIN_SUCCESSFUL)
        self.callbacks.on_login_succeeded()

        # Only these two are replayed automatically after a login.
        await self.fetch_languages()
        await self.fetch_words()

    # --- Translation & Bookmarks ---

    async def translate(
        self,
        text: str,
        source_language: str,
        target_language: str,
        url: str = "",
        context: str = "",
    ) -> None:
        with tracer.start_as_current_span("session.translate") as span:
            span.set_attribute("app.source_language", source_language)
            span.set_attribute("app.target_language", target_language)

            try:
                await self._ensure_ready()
                self._require_input(text, "text")
                if source_language == target_language:
                    raise SameLanguagePairError(source_language)
            except NotLoggedInError:
                self.callbacks.show_login_dialog(messages.LOGIN_FIRST, "")
                return
            except NetworkUnavailableError:
                self.callbacks.display_error(messages.NO_INTERNET_CONNECTION, False)
                return
            except NoActiveSessionError:
                await self._renew_session()
                return
            except InvalidInputError:
                return
            except SameLanguagePairError:
                self.callbacks.display_error(messages.SAME_LANGUAGE, False)
                return

            if self.memo.matches(text, target_language):
                span.set_attribute("app.memo_hit", True)
                if self.memo.value is not None:
                    self.callbacks.set_translation(self.memo.value)
                return

            self.memo.claim(text, target_language)
            try:
                response = await self.transport.send(HttpRequest(
                    operation="translate",
                    path=f"translate/{source_language}/{target_language}",
                    params=self._session_params(),
                    form={"word": text.strip(), "url": url, "context": context},
                ))
            except TransportFailureError as e:
                # Best effort: nothing is shown to the user
                self.memo.release(text, target_language)
                logger.warning("translate_failed", error=str(e))
                return

            self.memo.store(text, target_language, response.text)
            self.callbacks.set_translation(response.text)

    async def bookmark_with_context(
        self,
        text: str,
        source_language: str,
        translation: str,
        target_language: str,
        page_title: str,
        page_url: str,
        context: str,
    ) -> None:
        with tracer.start_as_current_span("session.bookmark_with_context"):
            try:
                self._require_login()
                await self._require_network()
                self._require_input(text, "text")
                self._require_input(translation, "translation")
                self._require_session()
            except NotLoggedInError:
                self.callbacks.show_login_dialog(messages.LOGIN_FIRST, "")
                return
            except NetworkUnavailableError:
                self.callbacks.display_message(messages.NO_INTERNET_CONNECTION)
                return
            except InvalidInputError as e:
                logger.debug("bookmark_ignored", field=e.field)
                return
            except NoActiveSessionError:
                await self._renew_session()
                return

            self.callbacks.highlight(text)

            request = HttpRequest(
                operation="bookmark_with_context",
                path="bookmark_with_context/{}/{}/{}/{}".format(
                    source_language,
                    quote(text.strip(), safe=""),
                    target_language,
                    quote(translation, safe=""),
                ),
                params=self._session_params(),
                form={"title": page_title, "url": page_url, "context": context},
            )
            try:
                response = await self.transport.send(request)
            except TransportFailureError as e:
                logger.warning("bookmark_failed", error=str(e))
                self.callbacks.display_message(messages.LANGUAGE_SERVER_ERROR)
                return

            bookmark_id = response.text.strip()
            logger.info("bookmark_saved", bookmark_id=bookmark_id)
            self.callbacks.on_bookmark_result(bookmark_id)
            self.callbacks.display_message(messages.bookmark_saved(text, translation))
            await self.fetch_words()

    # --- Languages ---

    async def fetch_languages(self) -> None:
        with tracer.start_as_current_span("session.fetch_languages"):
            try:
                await self._ensure_ready()
            except (NotLoggedInError, NetworkUnavailableError):
                return
            except NoActiveSessionError:
                await self._renew_session()
                return

            try:
                response = await self.transport.send(HttpRequest(
                    operation="learned_and_native_language",
                    method="GET",
                    path="learned_and_native_language",
                    params=self._session_params(),
                ))
                native, learning = self._read_languages(response)
            except (TransportFailureError, PayloadMalformedError) as e:
                logger.warning("fetch_languages_failed", error=str(e))
                # Whatever is current gets written back, failure or not.
                await self.state.save_languages()
                return

            self.state.set_languages(native, learning)
            await self.state.save_languages()
            logger.info("languages_fetched", native=native, learning=learning)

    @staticmethod
    def _read_languages(response: HttpResponse):
        data = response.json()
        try:
            return str(data["native"]), str(data["learned"])
        except (KeyError, TypeError) as e:
            raise PayloadMalformedError(response.operation, f"missing language field: {e}")

    async def set_native_language(self, language: str) -> None:
        await self._set_language("native_language", language)

    async def set_learning_language(self, language: str) -> None:
        await self._set_language("learning_language", language)

    async def _set_language(self, field: str, language: str) -> None:
        with tracer.start_as_current_span(f"session.set_{field}") as span:
            span.set_attribute("app.lang_code", language or "")

            if language == getattr(self.account, field):
                return
            try:
                self._require_input(language, field)
                await self._ensure_ready()
            except (InvalidInputError, NotLoggedInError, NetworkUnavailableError):
                return
            except NoActiveSessionError:
                await self._renew_session()
                return

            try:
                response = await self.transport.send(HttpRequest(
                    operation=_LANGUAGE_ENDPOINTS[field],
                    path=f"{_LANGUAGE_ENDPOINTS[field]}/{language}",
                    params=self._session_params(),
                ))
            except TransportFailureError as e:
                logger.warning("set_language_failed", field=field, language=language, error=str(e))
                # Resets the stored value to the current one
                await self.state.save_languages()
                self.callbacks.display_message(messages.LANGUAGE_SERVER_ERROR)
                return

            if response.text.strip() == ACCEPTANCE_TOKEN:
                setattr(self.account, field, language)
                # A cached translation may be for the old language pair
                self.memo.clear()
                await self.state.save_languages()
                logger.info("language_changed", field=field, language=language)
            else:
                logger.warning("language_rejected", field=field, language=language, body=response.text[:80])
                await self.state.save_languages()
                self.callbacks.display_message(messages.LANGUAGE_COMBINATION_INVALID)

    # --- Saved Words ---

    async def fetch_words(self) -> bool:
        """
        Reloads the saved words from the server.

        Returns:
            True if a request was sent. False when not in session, or when
            offline (the cached copy is loaded instead).
        """
        with tracer.start_as_current_span("session.fetch_words") as span:
            if not self.account.is_in_session():
                return False
            if not await self.network.is_available():
                await self.state.load_words_from_store()
                return False

            try:
                response = await self.transport.send(HttpRequest(
                    operation="bookmarks_by_day",
                    method="GET",
                    path="bookmarks_by_day/with_context",
                    params=self._session_params(),
                ))
                tree = build_word_tree(response.json())
            except (TransportFailureError, PayloadMalformedError) as e:
                # Keep the previous tree on screen, just stop the refresh
                logger.warning("fetch_words_failed", error=str(e))
                self.callbacks.notify_words_changed(False)
                return True

            await self.state.replace_word_tree(tree)
            span.set_attribute("app.day_count", len(tree))
            logger.info("words_fetched", days=len(tree))
            self.callbacks.notify_words_changed(True)
            return True

    async def delete_word(self, word_id: int) -> None:
        with tracer.start_as_current_span("session.delete_word") as span:
            span.set_attribute("app.bookmark_id", word_id)
            try:
                self._require_session()
                await self._require_network()
            except (NoActiveSessionError, NetworkUnavailableError) as e:
                logger.info("delete_word_skipped", word_id=word_id, reason=e.message)
                return

            try:
                response = await self.transport.send(HttpRequest(
                    operation="delete_bookmark",
                    path=f"delete_bookmark/{word_id}",
                    params=self._session_params(),
                ))
            except TransportFailureError as e:
                logger.warning("delete_word_failed", word_id=word_id, error=str(e))
                self.callbacks.display_error(messages.BOOKMARK_DELETE_FAILED, False)
                return

            if response.text.strip() != ACCEPTANCE_TOKEN:
                logger.warning("delete_word_rejected", word_id=word_id, body=response.text[:80])
                self.callbacks.display_error(messages.BOOKMARK_DELETE_FAILED, True)
                return

            await self.state.remove_word(word_id)
            self.callbacks.on_bookmark_result("0")
            self.callbacks.display_message(messages.BOOKMARK_DELETED)
            await self.fetch_words()

    # --- Batch Scoring ---

    async def get_difficulty_for_text(self, language: str, texts: List[TextItem]) -> None:
        body = {
            "texts": [{"content": t.content, "id": t.id} for t in texts],
            "personalized": "true" if self.config.DIFFICULTY_PERSONALIZED else "false",
            "rank_boundary": str(self.config.DIFFICULTY_RANK_BOUNDARY),
        }
        request = HttpRequest(
            operation="get_difficulty_for_text",
            path=f"get_difficulty_for_text/{language}",
            json_body=body,
        )
        scores = await self._score(request, texts, "difficulties", DifficultyScore, needs_session=True)
        if scores is not None:
            self.callbacks.set_difficulties(scores)

    async def get_learnability_for_text(self, language: str, texts: List[TextItem]) -> None:
        request = HttpRequest(
            operation="get_learnability_for_text",
            path=f"get_learnability_for_text/{language}",
            json_body={"texts": [{"content": t.content, "id": t.id} for t in texts]},
        )
        scores = await self._score(request, texts, "learnabilities", LearnabilityScore, needs_session=True)
        if scores is not None:
            self.callbacks.set_learnabilities(scores)

    async def get_content_from_url(self, urls: List[UrlItem]) -> None:
        request = HttpRequest(
            operation="get_content_from_url",
            path="get_content_from_url",
            json_body={
                "urls": [{"url": u.url, "id": u.id} for u in urls],
                "timeout": self.config.CONTENT_EXTRACTION_TIMEOUT,
            },
            timeout=self.config.CONTENT_FETCH_TIMEOUT,
            retries=self.config.CONTENT_FETCH_RETRIES,
        )
        contents = await self._score(request, urls, "contents", UrlContent, needs_session=False)
        if contents is not None:
            self.callbacks.set_contents(contents)

    async def _score(self, request: HttpRequest, items: list, key: str, model, needs_session: bool) -> Optional[list]:
        """
        Sends a batch request and reshapes the response in the background.
        Returns None when nothing should be delivered.
        """
        with tracer.start_as_current_span(f"session.{request.operation}") as span:
            span.set_attribute("app.batch_size", len(items))
            if needs_session and not self.account.is_in_session():
                return None
            if not await self.network.is_available():
                return None
            if not items:
                return None

            if needs_session:
                request = request.model_copy(update={"params": self._session_params()})

            try:
                response = await self.transport.send(request)
                payload = response.json()
                return await self.runner.run(_reshape_scores, request.operation, key, model, payload)
            except DomainError as e:
                logger.warning("batch_request_failed", operation=request.operation, error=str(e))
                return None
