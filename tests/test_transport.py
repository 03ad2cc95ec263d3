import threading

import requests

from itunes_search.src.errors import NetworkErrorKind
from itunes_search.src.models import ResultType
from itunes_search.src.services.search_result_controller import SearchResultController
from itunes_search.src.transport import MockNetworkSession, RequestsNetworkSession


class DummyResponse:
    def __init__(self, status_code, content=b""):
        self.status_code = status_code
        self.content = content


class DummySession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.sent = []
        self.closed = False

    def send(self, request, timeout=None):
        self.sent.append((request, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self):
        self.closed = True


def _prepared():
    return requests.Request("GET", "https://itunes.apple.com/search", params={"term": "x"}).prepare()


def _collect(session, request):
    received = []
    done = threading.Event()

    def handler(data, response, error):
        received.append((data, response, error))
        done.set()

    session.fetch(request, handler)
    assert done.wait(timeout=5)
    return received


def test_requests_session_passes_content_and_timeout():
    response = DummyResponse(200, b'{"results":[]}')
    dummy = DummySession(response=response)
    with RequestsNetworkSession(session=dummy, timeout=3, max_workers=1) as transport:
        received = _collect(transport, _prepared())
    assert received == [(b'{"results":[]}', response, None)]
    assert dummy.sent[0][1] == 3
    assert dummy.closed


def test_requests_session_ignores_http_status():
    response = DummyResponse(404, b"Not Found")
    with RequestsNetworkSession(session=DummySession(response=response), max_workers=1) as transport:
        received = _collect(transport, _prepared())
    assert received == [(b"Not Found", response, None)]


def test_requests_session_reports_request_errors():
    exc = requests.ConnectionError("offline")
    with RequestsNetworkSession(session=DummySession(exc=exc), max_workers=1) as transport:
        received = _collect(transport, _prepared())
    assert received == [(None, None, exc)]


def test_mock_session_replays_from_another_thread():
    caller = threading.current_thread()
    threads = []
    done = threading.Event()
    error = ValueError("x")
    session = MockNetworkSession(data=b"abc", error=error)

    def handler(data, response, err):
        threads.append((threading.current_thread(), data, response, err))
        done.set()

    request = _prepared()
    session.fetch(request, handler)
    assert done.wait(timeout=5)
    thread, data, response, err = threads[0]
    assert thread is not caller
    assert (data, response, err) == (b"abc", None, error)
    assert session.requests == [request]


def test_requests_session_reports_any_send_error():
    exc = ValueError("label too long")
    with RequestsNetworkSession(session=DummySession(exc=exc), max_workers=1) as transport:
        received = _collect(transport, _prepared())
    assert received == [(None, None, exc)]


class BrokenBodyResponse:
    status_code = 200

    @property
    def content(self):
        raise RuntimeError("connection reset while reading body")


def test_requests_session_reports_body_read_errors():
    with RequestsNetworkSession(session=DummySession(response=BrokenBodyResponse()), max_workers=1) as transport:
        received = _collect(transport, _prepared())
    data, response, error = received[0]
    assert (data, response) == (None, None)
    assert isinstance(error, RuntimeError)


def test_search_completes_when_send_raises_non_requests_error():
    done = threading.Event()
    controller = SearchResultController(base_url="https://itunes.apple.com/search")
    with RequestsNetworkSession(session=DummySession(exc=ValueError("bad host")), max_workers=1) as transport:
        future = controller.perform_search(
            "A", ResultType.SOFTWARE, transport, completion=lambda f: done.set()
        )
        assert done.wait(timeout=5)
    assert future.exception().kind is NetworkErrorKind.DATA_TASK_ERROR
