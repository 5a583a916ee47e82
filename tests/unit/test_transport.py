import json

import httpx

from hop._http import BlockingTransport, BytesBody, HTTPConfig, JSONBody


def _transport(**config) -> BlockingTransport:
    return BlockingTransport(HTTPConfig(**config), ("authorization", "ptk_abc"))


def test_build_request_json_body() -> None:
    request = _transport().build_request("POST", "/v1/channels", {"project": "project_1"}, JSONBody({"a": 1}))

    assert str(request.url) == "https://api.hop.io/v1/channels?project=project_1"
    assert request.headers["authorization"] == "ptk_abc"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {"a": 1}


def test_build_request_bytes_body() -> None:
    request = _transport().build_request(
        "PUT", "/v1/projects/@this/secrets/KEY", body=BytesBody(b"value", content_type="text/plain")
    )

    assert request.content == b"value"
    assert request.headers["content-type"] == "text/plain"


def test_build_request_without_body_or_params() -> None:
    request = _transport(base_url="https://example.test/").build_request("GET", "/v1/pipe/rooms")

    assert str(request.url) == "https://example.test/v1/pipe/rooms"
    assert request.content == b""


def test_timeout_is_forwarded() -> None:
    request = _transport(timeout=2.5).build_request("GET", "/v1/channels")

    assert request.extensions["timeout"] == httpx.Timeout(2.5).as_dict()


def test_no_timeout_by_default() -> None:
    request = _transport().build_request("GET", "/v1/channels")

    assert request.extensions["timeout"] == {"connect": None, "read": None, "write": None, "pool": None}


def test_default_headers_are_merged() -> None:
    request = _transport(default_headers={"x-trace": "1"}).build_request("GET", "/v1/channels")

    assert request.headers["x-trace"] == "1"
    assert request.headers["user-agent"].startswith("hop-py/")
