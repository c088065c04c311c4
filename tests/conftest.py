"""Shared fixtures: a seeded store, the Flask app, and a requests transport into it."""

from urllib.parse import urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from board_server import create_app
from issueboard.cache import IssueCache
from issueboard.client import IssueClient
from issueboard.config import Config
from issueboard.store import IssueStore

BASE_URL = "http://board.test"


class FlaskTransport(BaseAdapter):
    """Routes requests.Session calls into a Flask test client (no sockets)."""

    def __init__(self, test_client):
        super().__init__()
        self.test_client = test_client
        self.calls = []  # (method, path) per request sent

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        url = urlsplit(request.url)
        path = url.path + (f"?{url.query}" if url.query else "")
        self.calls.append((request.method, url.path))

        headers = {
            k: v for k, v in request.headers.items()
            if k.lower() not in ("content-length", "host")
        }
        body = request.body
        if isinstance(body, str):
            body = body.encode("utf-8")

        resp = self.test_client.open(path, method=request.method, data=body, headers=headers)

        response = requests.Response()
        response.status_code = resp.status_code
        response.reason = resp.status
        response._content = resp.get_data()
        response.headers = CaseInsensitiveDict(dict(resp.headers.items()))
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


@pytest.fixture
def store():
    return IssueStore.seeded()


@pytest.fixture
def cfg():
    return Config()


@pytest.fixture
def app(store, cfg):
    return create_app(store=store, cfg=cfg)


@pytest.fixture
def http(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def transport(http):
    return FlaskTransport(http)


@pytest.fixture
def session(transport):
    s = requests.Session()
    s.mount(BASE_URL, transport)
    return s


@pytest.fixture
def issue_client(session):
    return IssueClient(BASE_URL, session=session)


@pytest.fixture
def cache(issue_client):
    return IssueCache(issue_client)
