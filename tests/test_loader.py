"""Fetching record payloads from files and URLs."""
import pytest
import requests

import datareview.ingestion.loader as loader
from datareview.ingestion.loader import RecordFetchError, fetch_records, parse_payload, resolve_source


def test_fetch_records_reads_bundled_sample(dummy_source):
    records = fetch_records(str(dummy_source))
    assert len(records) == 6
    assert records[0].finding("email").severity == "critical"
    assert records[2].street is None


def test_resolve_source_prefers_argument_then_environment(monkeypatch):
    assert resolve_source("explicit.json") == "explicit.json"
    assert resolve_source() == loader.DEFAULT_SOURCE
    monkeypatch.setenv("DATA_REVIEW_SOURCE", "https://example.test/api/data")
    assert resolve_source() == "https://example.test/api/data"


def test_fetch_records_from_url(monkeypatch):
    calls = {}

    class FakeResponse:
        def raise_for_status(self):
            return None

        def json(self):
            return {"records": [{"id": 1, "name": "Ann", "email": "a@x.com", "status": "active"}]}

    def fake_get(url, timeout=None):
        calls["url"] = url
        calls["timeout"] = timeout
        return FakeResponse()

    monkeypatch.setattr(loader.requests, "get", fake_get)
    monkeypatch.setenv("DATA_REVIEW_FETCH_TIMEOUT", "2.5")

    records = fetch_records("https://example.test/api/data")

    assert [record.name for record in records] == ["Ann"]
    assert calls == {"url": "https://example.test/api/data", "timeout": 2.5}


def test_fetch_records_propagates_http_errors(monkeypatch):
    class FailingResponse:
        def raise_for_status(self):
            raise requests.HTTPError("500 Server Error")

    monkeypatch.setattr(loader.requests, "get", lambda url, timeout=None: FailingResponse())

    with pytest.raises(requests.HTTPError):
        fetch_records("http://example.test/api/data")


@pytest.mark.parametrize("payload", [[], {"items": []}, {"records": {}}])
def test_parse_payload_rejects_wrong_shape(payload):
    with pytest.raises(RecordFetchError):
        parse_payload(payload)


def test_parse_payload_rejects_duplicate_ids():
    entry = {"id": 1, "name": "Ann", "email": "a@x.com", "status": "active"}
    with pytest.raises(RecordFetchError, match="Duplicate record id 1"):
        parse_payload({"records": [entry, dict(entry)]})


def test_parse_payload_accepts_empty_batch():
    assert parse_payload({"records": []}) == []
