import pytest
import requests

from choiben.core.config import settings
from choiben.schemas.suggestions import ScrapboxSuggestionRequest, SuggestionRequest
from choiben.services import provider, suggest
from choiben.services.suggest import SuggestionError


CONTENT = "## 英語\n- 単語（30分）\n- 文法\n"


@pytest.fixture
def calls(monkeypatch):
    calls = []

    def fake_post(path, payload):
        calls.append((path, payload))
        return {"success": True, "content": CONTENT, "response_type": "general"}

    monkeypatch.setattr(provider, "ai_backend_post", fake_post)
    return calls


def test_generate_general_todo(calls):
    resp = suggest.generate_general_todo(SuggestionRequest(time_available=60, weak_areas=["英語"]))
    assert resp.success is True
    assert resp.content == CONTENT
    assert resp.response_type == "general"
    path, payload = calls[0]
    assert path == "/api/ai/todo"
    assert payload["time_available"] == 60
    assert payload["weak_areas"] == ["英語"]


def test_generate_scrapbox_todo_quotes_project(calls):
    req = ScrapboxSuggestionRequest(time_available=30, daily_goal="単語を覚える")
    resp = suggest.generate_scrapbox_todo("my project", req)
    assert resp.response_type == "scrapbox"
    assert calls[0][0] == "/api/ai/scrapbox-todo/my%20project"


def test_generate_scrapbox_todo_requires_project(calls):
    req = ScrapboxSuggestionRequest(time_available=30, daily_goal="単語")
    with pytest.raises(ValueError):
        suggest.generate_scrapbox_todo("  ", req)
    assert calls == []


def test_suggest_and_parse(calls):
    result = suggest.suggest_and_parse(SuggestionRequest(time_available=90))
    assert [s.title for s in result.sections] == ["英語"]
    assert result.sections[0].total_time_hours == pytest.approx(1.5)


def test_transport_failure_raises(monkeypatch):
    def boom(path, payload):
        raise requests.ConnectionError("down")

    monkeypatch.setattr(provider, "ai_backend_post", boom)
    with pytest.raises(SuggestionError) as exc:
        suggest.generate_general_todo(SuggestionRequest(time_available=60))
    assert exc.value.message == "TODOの生成に失敗しました"


def test_missing_content_raises(monkeypatch):
    monkeypatch.setattr(provider, "ai_backend_post", lambda path, payload: {"success": True})
    with pytest.raises(SuggestionError):
        suggest.generate_general_todo(SuggestionRequest(time_available=60))


@pytest.mark.parametrize("minutes", [0, 481])
def test_time_available_bounds(minutes):
    with pytest.raises(ValueError):
        SuggestionRequest(time_available=minutes)


def test_scrapbox_requires_goal():
    with pytest.raises(ValueError):
        ScrapboxSuggestionRequest(time_available=30, daily_goal="   ")
    with pytest.raises(ValueError):
        ScrapboxSuggestionRequest(time_available=10, daily_goal="単語")


def test_provider_sends_bearer_token(monkeypatch):
    sent = {}

    class FakeResponse:
        def raise_for_status(self):
            pass

        def json(self):
            return {"content": ""}

    def fake_post(url, json, headers, timeout):
        sent.update(url=url, json=json, headers=headers)
        return FakeResponse()

    monkeypatch.setattr(settings, "API_SECRET_KEY", "s3cret")
    monkeypatch.setattr(settings, "AI_BACKEND_URL", "http://ai.test/")
    monkeypatch.setattr(provider.requests, "post", fake_post)
    assert provider.ai_backend_post("/api/ai/todo", {"time_available": 30}) == {"content": ""}
    assert sent["url"] == "http://ai.test/api/ai/todo"
    assert sent["headers"]["Authorization"] == "Bearer s3cret"
