"""Fixtures compartidos: transporte simulado y aplicación Flask."""

import pytest

from itunes_search import create_app
from itunes_search.src.services.search_result_controller import SearchResultController
from itunes_search.src.transport import MockNetworkSession


WELL_FORMED = b'{"results":[{"title":"A","artist":"B"}]}'


@pytest.fixture
def controller():
    return SearchResultController(base_url="https://itunes.apple.com/search")


@pytest.fixture
def ok_session():
    return MockNetworkSession(data=WELL_FORMED, error=None)


@pytest.fixture
def make_client():
    def _make(session):
        app = create_app(session=session)
        app.config["TESTING"] = True
        return app.test_client()
    return _make
