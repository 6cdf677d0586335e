from unittest.mock import MagicMock

import pytest
import requests

from conftest import API_KEY, make_response, split_url
from wordnik_api.config import WORD_URL, WORDS_URL, ClientSettings
from wordnik_api.enums import PartOfSpeech
from wordnik_api.exceptions import (
    ConfigurationError,
    InvalidAPIKeyError,
    RequestError,
    ResponseFormatError,
)
from wordnik_api.transport import Transport


@pytest.fixture
def transport(session):
    return Transport(ClientSettings(api_key=API_KEY, timeout=3), session=session)


@pytest.mark.parametrize("key", [None, ""])
def test_missing_api_key_is_a_configuration_error(key):
    session = MagicMock(spec=requests.Session)
    with pytest.raises(ConfigurationError):
        Transport(ClientSettings(api_key=key), session=session)
    session.get.assert_not_called()


def test_build_url_puts_api_key_first(transport):
    url = transport.build_url("cat/definitions", {"limit": 2, "useCanonical": True})
    base, query = split_url(url)
    assert base == WORD_URL + "cat/definitions"
    assert query == [("api_key", API_KEY), ("limit", "2"), ("useCanonical", "true")]


def test_build_url_omits_none_values(transport):
    url = transport.build_url("cat/audio", {"limit": 1, "partOfSpeech": None})
    assert "partOfSpeech" not in url
    assert "None" not in url
    assert split_url(url)[1] == [("api_key", API_KEY), ("limit", "1")]


def test_build_url_serializes_enums_and_lists(transport):
    url = transport.build_url(
        "randomWords", {"includePartOfSpeech": [PartOfSpeech.NOUN, PartOfSpeech.PROPER_NOUN]}, WORDS_URL
    )
    assert url.startswith(WORDS_URL + "randomWords?")
    assert "includePartOfSpeech=noun,proper-noun" in url


def test_build_url_quotes_the_word(transport):
    url = transport.build_url("ice cream/definitions", {})
    assert url.startswith(WORD_URL + "ice%20cream/definitions?")


def test_request_sends_fixed_headers_without_redirects(transport, session):
    session.get.return_value = make_response(body={"value": 5})
    assert transport.request("cat/scrabbleScore", {}) == {"value": 5}

    kwargs = session.get.call_args.kwargs
    assert kwargs["headers"] == {"Accept": "application/json", "User-Agent": "WordnikAPI-EP/1.0.0"}
    assert kwargs["allow_redirects"] is False
    assert kwargs["timeout"] == 3


def test_request_401_raises_invalid_api_key(transport, session, caplog):
    session.get.return_value = make_response(401, body={"message": "unauthorized"})
    with caplog.at_level("ERROR", logger="wordnik_api.transport"):
        with pytest.raises(InvalidAPIKeyError) as exc:
            transport.request("cat/definitions", {})
    assert exc.value.status_code == 401
    assert "Invalid API key" in caplog.text


def test_request_server_error_raises_request_error(transport, session):
    session.get.return_value = make_response(500, body={"message": "boom"})
    with pytest.raises(RequestError) as exc:
        transport.request("cat/definitions", {})
    assert exc.value.status_code == 500
    assert not isinstance(exc.value, InvalidAPIKeyError)


def test_request_redirect_is_a_failure(transport, session):
    session.get.return_value = make_response(302, text="", headers={"Location": "https://example.com/"})
    with pytest.raises(RequestError) as exc:
        transport.request("cat/definitions", {})
    assert exc.value.status_code == 302


def test_request_network_error_hides_the_key(transport, session):
    session.get.side_effect = requests.ConnectionError(f"failed for url ...?api_key={API_KEY}")
    with pytest.raises(RequestError) as exc:
        transport.request("cat/definitions", {})
    assert API_KEY not in str(exc.value)
    assert isinstance(exc.value.__cause__, requests.ConnectionError)


def test_request_malformed_body_raises_format_error(transport, session):
    session.get.return_value = make_response(text="<html>not json</html>")
    with pytest.raises(ResponseFormatError):
        transport.request("cat/definitions", {})


def test_request_unencodable_endpoint_raises_request_error(transport, session):
    with pytest.raises(RequestError):
        transport.request("cat\udc80/definitions", {})
    session.get.assert_not_called()
