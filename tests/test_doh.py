import pytest
import requests

from authcheck.evaluators.spf import SPFEvaluator
from authcheck.exceptions import EvaluationError, TransportError
from authcheck.utils.doh import query, strip_quotes, AnswerRecord


class FakeResponse:
    def __init__(self, payload=None, status_code=200, reason="OK", bad_json=False):
        self.payload = payload
        self.status_code = status_code
        self.reason = reason
        self.bad_json = bad_json

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self.bad_json:
            raise ValueError("Expecting value")
        return self.payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.error:
            raise self.error
        return self.response


def test_query_returns_txt_answers():
    session = FakeSession(FakeResponse({
        "Status": 0,
        "Answer": [
            {"name": "example.com", "type": 16, "data": '"v=spf1 -all"'},
            {"name": "example.com", "type": 16, "data": '"google-site-verification=abc"'},
        ],
    }))
    answers = query("example.com", "TXT", endpoint="https://doh.test/dns-query", session=session)
    assert answers == [
        AnswerRecord("example.com", 16, '"v=spf1 -all"'),
        AnswerRecord("example.com", 16, '"google-site-verification=abc"'),
    ]


def test_query_sends_dns_json_request():
    session = FakeSession(FakeResponse({"Status": 0}))
    query("_dmarc.example.com", "TXT", endpoint="https://doh.test/dns-query", session=session)
    call = session.calls[0]
    assert call["url"] == "https://doh.test/dns-query"
    assert call["params"] == {"name": "_dmarc.example.com", "type": "TXT"}
    assert call["headers"]["Accept"] == "application/dns-json"
    assert call["timeout"] is not None


def test_query_without_answer_section_is_empty():
    session = FakeSession(FakeResponse({"Status": 3}))
    assert query("missing.example.com", "TXT", session=session) == []


def test_query_skips_other_record_types():
    session = FakeSession(FakeResponse({
        "Answer": [
            {"name": "bh._domainkey.example.com", "type": 5, "data": "bh.provider.example."},
            {"name": "bh.provider.example", "type": 16, "data": '"v=DKIM1; p=MIGf"'},
        ],
    }))
    answers = query("bh._domainkey.example.com", "TXT", session=session)
    assert len(answers) == 1
    assert answers[0].name == "bh.provider.example"


def test_query_http_error():
    session = FakeSession(FakeResponse(status_code=503, reason="Service Unavailable"))
    with pytest.raises(TransportError) as exc:
        query("example.com", "TXT", session=session)
    assert "Service Unavailable" in str(exc.value)
    assert exc.value.status == 503


def test_query_malformed_json():
    session = FakeSession(FakeResponse(bad_json=True))
    with pytest.raises(TransportError):
        query("example.com", "TXT", session=session)


def test_query_connection_error():
    session = FakeSession(error=requests.ConnectionError("connection refused"))
    with pytest.raises(TransportError):
        query("example.com", "TXT", session=session)


def test_strip_quotes():
    assert strip_quotes('"v=spf1 -all"') == "v=spf1 -all"
    assert strip_quotes("v=spf1 -all") == "v=spf1 -all"
    assert strip_quotes('"v=DMARC1; p=none') == "v=DMARC1; p=none"
    assert strip_quotes('""quoted""') == '"quoted"'


def test_query_answer_not_a_list():
    session = FakeSession(FakeResponse({"Answer": "v=spf1 -all"}))
    with pytest.raises(TransportError, match="malformed JSON"):
        query("example.com", "TXT", session=session)


def test_query_answer_entries_not_objects():
    session = FakeSession(FakeResponse({"Answer": ["oops"]}))
    with pytest.raises(TransportError, match="malformed JSON"):
        query("example.com", "TXT", session=session)


def test_malformed_answer_is_fatal_for_spf(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda *args, **kwargs: FakeResponse({"Answer": ["oops"]}))
    with pytest.raises(EvaluationError):
        SPFEvaluator().evaluate("example.com")
