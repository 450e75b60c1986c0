# tests/test_gemini.py
from __future__ import annotations

from types import SimpleNamespace

import httpx
import pytest

from config import settings
from core.errors import MISSING_KEY_MESSAGE, ErrorKind, SuggestionError
from services import gemini


def _response(text):
    part = SimpleNamespace(text=text)
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


class _FakeClient:
    def __init__(self, result=None, exc=None):
        self.models = self
        self._result, self._exc = result, exc
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self._exc:
            raise self._exc
        return self._result


def test_missing_key_is_api_error(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", None)
    gemini._client.cache_clear()
    with pytest.raises(SuggestionError) as info:
        gemini.generate("hello")
    assert info.value.kind is ErrorKind.API
    assert info.value.message == MISSING_KEY_MESSAGE
    gemini._client.cache_clear()


def test_returns_first_candidate_text(monkeypatch):
    fake = _FakeClient(result=_response("Name: Soup"))
    monkeypatch.setattr(gemini, "_client", lambda: fake)

    assert gemini.generate("hello", model="models/x") == "Name: Soup"
    assert fake.calls[0]["model"] == "models/x"
    assert fake.calls[0]["contents"] == ["hello"]


def test_transport_failure_is_network_error(monkeypatch):
    fake = _FakeClient(exc=httpx.ConnectError("no route"))
    monkeypatch.setattr(gemini, "_client", lambda: fake)

    with pytest.raises(SuggestionError) as info:
        gemini.generate("hello")
    assert info.value.kind is ErrorKind.NETWORK


@pytest.mark.parametrize(
    "resp",
    [SimpleNamespace(candidates=[]), SimpleNamespace(candidates=None), _response(None)],
)
def test_unusable_payload_is_parsing_error(monkeypatch, resp):
    monkeypatch.setattr(gemini, "_client", lambda: _FakeClient(result=resp))
    with pytest.raises(SuggestionError) as info:
        gemini.generate("hello")
    assert info.value.kind is ErrorKind.PARSING
