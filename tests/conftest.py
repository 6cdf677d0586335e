import json
import logging
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import MagicMock
from urllib.parse import parse_qsl, urlsplit

import pytest
import requests

from wordnik_api import ClientSettings
from wordnik_api.client import WordnikClient

API_KEY = "test-key"


def make_response(status_code: int = 200, body: Any = None, text: Optional[str] = None,
                  headers: Optional[Dict[str, str]] = None) -> requests.Response:
    r = requests.Response()
    r.status_code = status_code
    r._content = (json.dumps(body) if text is None else text).encode("utf-8")
    r.encoding = "utf-8"
    r.headers.update(headers or {})
    return r


def split_url(url: str) -> Tuple[str, List[Tuple[str, str]]]:
    """Return (scheme://host/path, ordered query pairs) for a requested URL."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}", parse_qsl(parts.query)


@pytest.fixture
def session():
    s = MagicMock(spec=requests.Session)
    s.get.return_value = make_response(body=[])
    return s


@pytest.fixture
def client(session):
    return WordnikClient(API_KEY, session=session)


@pytest.fixture
def strict_client(session):
    return WordnikClient(settings=ClientSettings(api_key=API_KEY, raise_errors=True), session=session)


def requested(session) -> Tuple[str, List[Tuple[str, str]]]:
    """Split the URL of the last GET issued through *session*."""
    url = session.get.call_args.args[0]
    return split_url(url)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo the handler the CLI installs so caplog keeps seeing records."""
    logger = logging.getLogger("wordnik_api")
    yield
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
