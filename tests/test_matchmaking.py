import threading

import pytest

from quizkit.matchmaking import (
    INVALID_REQUEST,
    InvalidRequestError,
    MatchFoundState,
    Matchmaking,
    MatchmakingService,
    MatchmakingUI,
    MatchNotFoundState,
    MatchState,
    SessionAlreadyActiveError,
    WaitingState,
)

REQUEST_ID = 123


class FakeService(MatchmakingService):
    def __init__(self, request_id=REQUEST_ID):
        self.request_id = request_id
        self.callback = None
        self.requests = 0
        self.cancelled = []

    def request_match(self, callback):
        self.requests += 1
        self.callback = callback
        return self.request_id

    def cancel_match_request(self, request_id):
        self.cancelled.append(request_id)


class RecordingUI(MatchmakingUI):
    def __init__(self):
        self.calls = []
        self.user_callback = None
        self._cond = threading.Condition()

    def _record(self, *call):
        with self._cond:
            self.calls.append(call)
            self._cond.notify_all()

    def names(self):
        return [call[0] for call in self.calls]

    def wait_for(self, predicate, timeout=5.0):
        with self._cond:
            assert self._cond.wait_for(lambda: predicate(self), timeout)

    def set_match_search_state(self, message):
        self._record("state", message)

    def on_match_found(self, host, port):
        self._record("found", host, port)

    def on_match_not_found(self, reason):
        self._record("not_found", reason)

    def set_user_callback(self, callback):
        self.user_callback = callback
        self._record("set_cb")

    def clear_user_callback(self):
        self._record("clear_cb")


def test_start_requests_match_and_cleans_up_on_close():
    service = FakeService()
    ui = RecordingUI()
    with Matchmaking(service) as matchmaking:
        matchmaking.start_match_request(ui)
        assert service.requests == 1
        assert ui.names() == ["set_cb"]
    assert ui.names() == ["set_cb", "clear_cb"]
    assert service.cancelled == []


def test_invalid_request_id_raises():
    service = FakeService(request_id=INVALID_REQUEST)
    ui = RecordingUI()
    with Matchmaking(service) as matchmaking:
        with pytest.raises(InvalidRequestError):
            matchmaking.start_match_request(ui)
    assert ui.names() == ["set_cb"]


def test_starting_twice_raises():
    service = FakeService()
    ui = RecordingUI()
    with Matchmaking(service) as matchmaking:
        matchmaking.start_match_request(ui)
        with pytest.raises(SessionAlreadyActiveError):
            matchmaking.start_match_request(ui)
        assert service.requests == 1
    assert ui.names() == ["set_cb", "clear_cb"]


def test_waiting_updates_reach_the_ui():
    service = FakeService()
    ui = RecordingUI()
    with Matchmaking(service) as matchmaking:
        matchmaking.start_match_request(ui)
        matchmaking.process_service_update(MatchState.WAITING, WaitingState(12))
        matchmaking.process_service_update(MatchState.WAITING, WaitingState(8))
        ui.wait_for(lambda u: len(u.calls) == 3)
    assert ui.calls == [
        ("set_cb",),
        ("state", "There's 12 users waiting..."),
        ("state", "There's 8 users waiting..."),
        ("clear_cb",),
    ]


def test_service_callback_feeds_updates():
    service = FakeService()
    ui = RecordingUI()
    with Matchmaking(service) as matchmaking:
        matchmaking.start_match_request(ui)
        service.callback(MatchState.WAITING, WaitingState(12))
        ui.wait_for(lambda u: "state" in u.names())
    assert ("state", "There's 12 users waiting...") in ui.calls


def test_cancel_cancels_at_service_and_clears_callback():
    service = FakeService()
    ui = RecordingUI()
    with Matchmaking(service) as matchmaking:
        matchmaking.start_match_request(ui)
        matchmaking.process_service_update(MatchState.WAITING, WaitingState(12))
        ui.wait_for(lambda u: "state" in u.names())
        matchmaking.process_cancel()
        assert service.cancelled == [REQUEST_ID]
        assert ui.names() == ["set_cb", "state", "clear_cb"]
    assert ui.names().count("clear_cb") == 1


def test_user_cancel_button_cancels_request():
    service = FakeService()
    ui = RecordingUI()
    with Matchmaking(service) as matchmaking:
        matchmaking.start_match_request(ui)
        ui.user_callback()
        assert service.cancelled == [REQUEST_ID]
        assert ui.names() == ["set_cb", "clear_cb"]


def test_match_found_ends_session_and_later_updates_are_ignored():
    service = FakeService()
    ui = RecordingUI()
    update = MatchFoundState(hostname="hostname1", port=12345)
    with Matchmaking(service) as matchmaking:
        matchmaking.start_match_request(ui)
        matchmaking.process_service_update(MatchState.FOUND_MATCH, update)
        matchmaking.process_service_update(MatchState.FOUND_MATCH, update)
        ui.wait_for(lambda u: "clear_cb" in u.names())
    assert ui.calls == [("set_cb",), ("found", "hostname1", 12345), ("clear_cb",)]


def test_match_not_found_ends_session_and_later_updates_are_ignored():
    service = FakeService()
    ui = RecordingUI()
    update = MatchNotFoundState(reason="Not Found...")
    with Matchmaking(service) as matchmaking:
        matchmaking.start_match_request(ui)
        matchmaking.process_service_update(MatchState.NO_MATCH_FOUND, update)
        matchmaking.process_service_update(MatchState.NO_MATCH_FOUND, update)
        ui.wait_for(lambda u: "clear_cb" in u.names())
    assert ui.calls == [("set_cb",), ("not_found", "Not Found..."), ("clear_cb",)]


def test_new_request_allowed_after_previous_one_finished():
    service = FakeService()
    ui = RecordingUI()
    with Matchmaking(service) as matchmaking:
        matchmaking.start_match_request(ui)
        matchmaking.process_done()
        matchmaking.start_match_request(ui)
        assert service.requests == 2
    assert ui.names() == ["set_cb", "clear_cb", "set_cb", "clear_cb"]


def test_updates_without_session_are_ignored():
    service = FakeService()
    ui = RecordingUI()
    with Matchmaking(service) as matchmaking:
        matchmaking.process_service_update(MatchState.WAITING, WaitingState(12))
        matchmaking.process_cancel()
    assert ui.calls == []
    assert service.cancelled == []


def test_close_is_idempotent():
    service = FakeService()
    ui = RecordingUI()
    matchmaking = Matchmaking(service)
    matchmaking.start_match_request(ui)
    matchmaking.close()
    matchmaking.close()
    assert ui.names() == ["set_cb", "clear_cb"]