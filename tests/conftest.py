"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from kcic_site.config import SiteSettings
from kcic_site.rate_limit import limiter
from tests.fixtures.sessions import ADMIN_SESSION, FakeSessionLookup


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()
    yield


@pytest.fixture()
def settings():
    return SiteSettings()


@pytest.fixture()
def make_client(settings):
    """Build a TestClient around an app with the given session lookup."""
    clients: list[TestClient] = []

    def _make(lookup=None) -> TestClient:
        from kcic_site.main import create_app

        app = create_app(settings=settings, session_lookup=lookup or FakeSessionLookup())
        c = TestClient(app, follow_redirects=False)
        c.__enter__()
        clients.append(c)
        return c

    yield _make
    for c in clients:
        c.__exit__(None, None, None)


@pytest.fixture()
def no_session():
    return FakeSessionLookup()


@pytest.fixture()
def client(make_client, no_session):
    """Anonymous visitor: the session lookup finds nothing."""
    return make_client(no_session)


@pytest.fixture()
def admin_lookup():
    return FakeSessionLookup(session=ADMIN_SESSION)


@pytest.fixture()
def admin_client(make_client, admin_lookup):
    """Signed-in admin."""
    return make_client(admin_lookup)
