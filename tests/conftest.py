import json
from unittest.mock import MagicMock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from reports.api.api_client import GitHubAPI


def _build_response(status_code, json_body=None, headers=None, text=""):
    response = requests.Response()
    response.status_code = status_code
    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
    else:
        response._content = text.encode("utf-8")
    response.headers = CaseInsensitiveDict(headers or {})
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response():
    """Factory for real requests.Response objects with canned content."""
    return _build_response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    connection_manager = MagicMock()
    connection_manager.get_session.return_value = session
    return GitHubAPI("test-token", connection_manager=connection_manager)


@pytest.fixture
def requested(session):
    """Return the (method, url) pairs sent through the mocked session so far."""
    def _requested():
        return [(c.args[0], c.args[1]) for c in session.request.call_args_list]
    return _requested
