"""Tests for the HTTP embedding client."""

import pytest
import requests

from conftest import FakeResponse, FakeSession, embedding_response
from embedding import OpenAIEmbeddingClient
from shared.config import load_config
from shared.exceptions import APIError, DecodeError, EmptyResultError, TransportError

URL = "https://embeddings.example.test/v1/embeddings"


def make_client(*responses) -> OpenAIEmbeddingClient:
    return OpenAIEmbeddingClient(URL, "sk-test", "text-embedding-ada-002", session=FakeSession(*responses))


def test_request_body_and_headers():
    client = make_client(embedding_response([0.1, 0.2, 0.3]))

    client.embed("What is X?")

    call = client._session.calls[0]
    assert call["url"] == URL
    assert call["json"] == {"input": "What is X?", "model": "text-embedding-ada-002"}
    assert call["headers"]["Authorization"] == "Bearer sk-test"
    assert call["headers"]["Content-Type"] == "application/json"


def test_returns_first_embedding_in_order():
    response = FakeResponse(200, {"data": [{"embedding": [3, 1, 2]}, {"embedding": [9, 9, 9]}]})
    client = make_client(response)

    assert client.embed("q") == [3.0, 1.0, 2.0]


def test_from_config_uses_configured_endpoint_and_model(env):
    session = FakeSession(embedding_response([1.0]))
    client = OpenAIEmbeddingClient.from_config(load_config(), session=session)

    client.embed("hello")

    assert session.calls[0]["url"] == URL
    assert session.calls[0]["json"]["model"] == "text-embedding-ada-002"


def test_non_200_raises_api_error_with_status_and_body():
    client = make_client(FakeResponse(500, text='{"error": "boom"}'))

    with pytest.raises(APIError) as excinfo:
        client.embed("q")

    assert excinfo.value.status_code == 500
    assert excinfo.value.body == '{"error": "boom"}'


def test_transport_failure_raises_transport_error():
    client = make_client(requests.ConnectionError("name resolution failed"))

    with pytest.raises(TransportError) as excinfo:
        client.embed("q")

    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


@pytest.mark.parametrize("response", [
    FakeResponse(200, bad_json=True),
    FakeResponse(200, ["not", "an", "object"]),
    FakeResponse(200, {"object": "list"}),
    FakeResponse(200, {"data": [{"index": 0}]}),
    FakeResponse(200, {"data": [{"embedding": ["a", "b"]}]}),
    FakeResponse(200, {"data": [{"embedding": ["1.5", "2"]}]}),
    FakeResponse(200, {"data": [{"embedding": [True]}]}),
    FakeResponse(200, {"data": [{"embedding": [0.5, None]}]}),
])
def test_malformed_body_raises_decode_error(response):
    client = make_client(response)
    with pytest.raises(DecodeError):
        client.embed("q")


def test_empty_data_raises_empty_result_error():
    client = make_client(FakeResponse(200, {"data": []}))
    with pytest.raises(EmptyResultError):
        client.embed("q")


def test_close_closes_session():
    client = make_client(embedding_response([1.0]))
    client.close()
    assert client._session.closed
