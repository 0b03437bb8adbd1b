"""Shared test fixtures."""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from autolanguage.main import create_app
from autolanguage.models.schemas import RedirectConfig, RequestSignals


@pytest.fixture()
def config():
    """Two-language site with cookie and session preferences enabled."""
    return RedirectConfig(
        allowed=("en", "nl"),
        fallback="en",
        cookie_name="lang",
        session_key="lang",
    )


@pytest.fixture()
def no_signals():
    return RequestSignals()


def _session_app(config: RedirectConfig) -> FastAPI:
    app = create_app(config, session_secret="test-secret")

    @app.get("/remember/{lang}")
    async def remember(request: Request, lang: str) -> dict:
        request.session["lang"] = lang
        return {"lang": lang}

    return app


@pytest.fixture()
def make_client():
    """Factory for a TestClient around an app built from a given config."""
    clients: list[TestClient] = []

    def _make(config: RedirectConfig, with_session: bool = False) -> TestClient:
        app = _session_app(config) if with_session else create_app(config, session_secret="")
        c = TestClient(app, follow_redirects=False)
        clients.append(c)
        return c

    yield _make
    for c in clients:
        c.close()


@pytest.fixture()
def client(make_client, config):
    return make_client(config)
