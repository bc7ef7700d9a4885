"""Wire-level tests: BigQuery client over an httpx mock transport."""

import json
from urllib.parse import parse_qs

import httpx
import pytest

from edgelog.base.config import ClientConfig
from edgelog.base.http import HTTPClient
from edgelog.base.exceptions import NotAcknowledgedError
from edgelog.endpoints.bigquery import BigQuery


class Recorder:
    """Mock transport handler that records requests and replays canned replies."""

    def __init__(self, status: int = 200, payload=None, text: str | None = None):
        self.status = status
        self.payload = payload
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status, text=self.text)
        return httpx.Response(self.status, json=self.payload)


def _client(recorder: Recorder, **config) -> BigQuery:
    cfg = ClientConfig(base_url="https://api.example.test", **config)
    http = HTTPClient(cfg, transport=httpx.MockTransport(recorder))
    return BigQuery(cfg, http=http)


class TestWire:
    def test_list_issues_get(self):
        rec = Recorder(payload=[{"name": "a"}, {"name": "b"}])
        result = _client(rec).list("svc123", 3)
        req = rec.requests[0]
        assert req.method == "GET"
        assert req.url.path == "/service/svc123/version/3/logging/bigquery"
        assert [r.name for r in result] == ["a", "b"]

    def test_update_sends_form_body(self):
        rec = Recorder(payload={"name": "new-endpoint"})
        _client(rec).update("svc123", 3, "old-endpoint", "new-endpoint")
        req = rec.requests[0]
        assert req.method == "PUT"
        assert req.url.path == "/service/svc123/version/3/logging/bigquery/old-endpoint"
        assert req.headers["content-type"] == "application/x-www-form-urlencoded"
        assert parse_qs(req.content.decode()) == {"name": ["new-endpoint"]}

    def test_create_posts_all_fields(self):
        rec = Recorder(payload={"name": "my-bq"})
        _client(rec).create("svc123", 3, "my-bq", "proj", "logs", "requests", "u", "s")
        req = rec.requests[0]
        assert req.method == "POST"
        assert req.url.path == "/service/svc123/version/3/logging/gcs"
        body = parse_qs(req.content.decode())
        assert body == {
            "name": ["my-bq"],
            "project_id": ["proj"],
            "dataset": ["logs"],
            "table": ["requests"],
            "user": ["u"],
            "secret_key": ["s"],
        }

    def test_list_null_body_is_empty(self):
        rec = Recorder(text="null")
        assert _client(rec).list("svc123", 3) == []

    def test_delete_ok(self):
        rec = Recorder(payload={"status": "ok"})
        _client(rec).delete("svc123", 3, "my-bq")
        assert rec.requests[0].method == "DELETE"

    def test_delete_not_ok(self):
        rec = Recorder(payload={"status": "error"})
        with pytest.raises(NotAcknowledgedError):
            _client(rec).delete("svc123", 3, "my-bq")

    def test_api_key_header(self):
        rec = Recorder(payload=[])
        _client(rec, api_key="secret-token").list("svc123", 3)
        assert rec.requests[0].headers["Fastly-Key"] == "secret-token"

    def test_no_key_header_without_key(self, monkeypatch):
        monkeypatch.delenv("FASTLY_API_KEY", raising=False)
        rec = Recorder(payload=[])
        _client(rec).list("svc123", 3)
        assert "Fastly-Key" not in rec.requests[0].headers


class TestErrorPropagation:
    def test_http_status_error_unchanged(self):
        rec = Recorder(status=404, payload={"msg": "Record not found"})
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            _client(rec).get("svc123", 3, "missing")
        assert exc_info.value.response.status_code == 404

    def test_malformed_json_unchanged(self):
        rec = Recorder(text="<html>oops</html>")
        with pytest.raises(json.JSONDecodeError):
            _client(rec).list("svc123", 3)

    def test_transport_error_unchanged(self):
        def boom(request):
            raise httpx.ConnectError("refused", request=request)

        cfg = ClientConfig(base_url="https://api.example.test")
        bq = BigQuery(cfg, http=HTTPClient(cfg, transport=httpx.MockTransport(boom)))
        with pytest.raises(httpx.ConnectError):
            bq.list("svc123", 3)


class TestHTTPClient:
    def test_bigquery_close_releases_pool(self):
        cfg = ClientConfig(base_url="https://api.example.test")
        http = HTTPClient(cfg, transport=httpx.MockTransport(Recorder(payload=[])))
        with BigQuery(cfg, http=http) as bq:
            bq.list("svc123", 3)
        assert http.client.is_closed

    def test_context_manager_closes(self):
        cfg = ClientConfig(base_url="https://api.example.test")
        with HTTPClient(cfg, transport=httpx.MockTransport(Recorder(payload={}))) as http:
            pass
        assert http.client.is_closed
