"""Drive a match request between a matchmaking service and its dialog."""

from __future__ import annotations

import enum
import logging
import queue
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

INVALID_REQUEST = 0


class MatchState(enum.Enum):
    """What a service update reports about a pending request."""

    WAITING = enum.auto()
    FOUND_MATCH = enum.auto()
    NO_MATCH_FOUND = enum.auto()


@dataclass(frozen=True)
class WaitingState:
    """Regularly reported while the request waits in the queue."""

    number_in_queue: int = 0


@dataclass(frozen=True)
class MatchFoundState:
    """Reported once a match has been found."""

    hostname: str
    port: int


@dataclass(frozen=True)
class MatchNotFoundState:
    """Reported when no match could be found."""

    reason: str


StateData = Union[WaitingState, MatchFoundState, MatchNotFoundState]
ServiceCallback = Callable[[MatchState, Any], None]
UserCancelCallback = Callable[[], None]


class MatchmakingService(ABC):
    """The service that searches for matches."""

    @abstractmethod
    def request_match(self, callback: ServiceCallback) -> int:
        """Start a request and return its id; ``callback`` receives state updates."""

    @abstractmethod
    def cancel_match_request(self, request_id: int) -> None:
        """Cancel a pending request; no further callbacks follow."""


class MatchmakingUI(ABC):
    """The dialog that shows the progress of a match request."""

    @abstractmethod
    def set_match_search_state(self, message: str) -> None:
        """Update the dialog's status message."""

    @abstractmethod
    def on_match_found(self, host: str, port: int) -> None:
        """End the dialog with the server that was found."""

    @abstractmethod
    def on_match_not_found(self, reason: str) -> None:
        """End the dialog because no match was found."""

    @abstractmethod
    def set_user_callback(self, callback: UserCancelCallback) -> None:
        """Install the callback run when the user presses cancel."""

    @abstractmethod
    def clear_user_callback(self) -> None:
        """Remove the cancel callback."""


class MatchmakingError(Exception):
    """Base class for matchmaking errors."""


class SessionAlreadyActiveError(MatchmakingError):
    """Raised when a request is started while another one is active."""


class InvalidRequestError(MatchmakingError):
    """Raised when the service refuses to start a request."""


@dataclass(frozen=True)
class _Session:
    request_id: int
    ui: MatchmakingUI


@dataclass(frozen=True)
class _Update:
    request_id: int
    state: MatchState
    data: Any


_STOP = object()


class Matchmaking:
    """Runs one match request at a time and keeps its dialog up to date.

    Service updates are handed to a background thread so that the dialog is
    never updated on the service's own thread.
    """

    def __init__(self, service: MatchmakingService) -> None:
        self._service = service
        self._session_lock = threading.RLock()
        self._session: Optional[_Session] = None
        self._updates: queue.Queue[object] = queue.Queue()
        self._closed = False
        self._worker = threading.Thread(
            target=self._process_updates, name="matchmaking-updates", daemon=True
        )
        self._worker.start()

    def start_match_request(self, ui: MatchmakingUI) -> None:
        """Ask the service for a match and track it with ``ui``."""
        with self._session_lock:
            if self._session is not None:
                raise SessionAlreadyActiveError("a match request is already active")
            ui.set_user_callback(self.process_cancel)
            request_id = self._service.request_match(self.process_service_update)
            if request_id == INVALID_REQUEST:
                raise InvalidRequestError("the service refused the match request")
            logger.debug("Session start - id: %s", request_id)
            self._session = _Session(request_id, ui)

    def process_service_update(self, state: MatchState, data: StateData) -> None:
        """Queue a state update from the service; ignored with no active request."""
        with self._session_lock:
            if self._session is None:
                return
            request_id = self._session.request_id
        self._updates.put(_Update(request_id, state, data))

    def process_cancel(self) -> None:
        """Cancel the active request at the service and end the session."""
        logger.debug("Cancel")
        with self._session_lock:
            if self._session is None:
                return
            self._service.cancel_match_request(self._session.request_id)
        self.process_done()

    def process_done(self) -> None:
        """End the active session, if any, and release the dialog's callback."""
        with self._session_lock:
            session, self._session = self._session, None
        if session is not None:
            logger.debug("Session done - id: %s", session.request_id)
            session.ui.clear_user_callback()

    def close(self) -> None:
        """End any session and stop the background thread."""
        if self._closed:
            return
        self._closed = True
        self.process_done()
        self._updates.put(_STOP)
        self._worker.join()

    def __enter__(self) -> Matchmaking:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _process_updates(self) -> None:
        logger.debug("Update worker started")
        while True:
            update = self._updates.get()
            if update is _STOP:
                break
            with self._session_lock:
                session = self._session
            if session is None:
                continue
            try:
                self._dispatch(session, update)  # type: ignore[arg-type]
            except Exception:
                logger.exception("Failed to process a matchmaking update")
        logger.debug("Update worker stopped")

    def _dispatch(self, session: _Session, update: _Update) -> None:
        if update.state is MatchState.WAITING:
            message = f"There's {update.data.number_in_queue} users waiting..."
            session.ui.set_match_search_state(message)
        elif update.state is MatchState.FOUND_MATCH:
            session.ui.on_match_found(update.data.hostname, update.data.port)
            self.process_done()
        elif update.state is MatchState.NO_MATCH_FOUND:
            session.ui.on_match_not_found(update.data.reason)
            self.process_done()