"""
Tests for the chatbot HTTP API.
"""
import warnings
import pytest
from fastapi.testclient import TestClient
from sikshabot.core.config import settings
from sikshabot.main import create_app
from sikshabot.models.corpus import Corpus
from sikshabot.services.history_service import HistoryService
from sikshabot.services.intent_matcher import FALLBACK_RESPONSE, IntentMatcher


PREFIX = settings.api_prefix


@pytest.fixture
def history_service():
    return HistoryService(max_messages=10)


@pytest.fixture
def client(matcher, history_service):
    with TestClient(create_app(matcher=matcher, history_service=history_service)) as test_client:
        yield test_client


def test_message_returns_intent_reply(client):
    response = client.post(f"{PREFIX}/message", json={
        "message": "How do I register as a student?",
        "sessionId": "session_1"
    })
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": {
            "response": "Visit /register and choose Student.",
            "sessionId": "session_1"
        }
    }


def test_message_falls_back_for_unknown_text(client):
    response = client.post(f"{PREFIX}/message", json={"message": "xyzzy plugh"})
    assert response.status_code == 200
    body = response.json()
    assert body["data"]["response"] == FALLBACK_RESPONSE
    assert body["data"]["sessionId"] is None


@pytest.mark.parametrize("payload", [{"message": ""}, {"message": "   "}, {}])
def test_blank_message_is_rejected(client, payload):
    response = client.post(f"{PREFIX}/message", json=payload)
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Message is required"}


def test_message_records_history(client, history_service):
    client.post(f"{PREFIX}/message", json={"message": "hello there", "sessionId": "s1"})
    history = history_service.get_history("s1")
    assert [turn.role for turn in history] == ["user", "assistant"]
    assert history[1].content == "Namaste!"


def test_message_without_session_skips_history(client, history_service):
    client.post(f"{PREFIX}/message", json={"message": "hello there"})
    assert history_service.session_count() == 0


def test_clear_history(client, history_service):
    client.post(f"{PREFIX}/message", json={"message": "hello there", "sessionId": "s1"})
    response = client.post(f"{PREFIX}/clear", json={"sessionId": "s1"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Chat history cleared"}
    assert history_service.get_history("s1") == []


def test_clear_without_session_id(client):
    response = client.post(f"{PREFIX}/clear", json={})
    assert response.status_code == 200
    assert response.json()["success"] is True


def test_status_reports_rule_based_provider(client):
    response = client.get(f"{PREFIX}/status")
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": {"configured": True, "provider": "rule_based", "available": True}
    }


def test_status_with_empty_corpus(last_choice):
    app = create_app(matcher=IntentMatcher(Corpus(), rng=last_choice))
    with TestClient(app) as client:
        data = client.get(f"{PREFIX}/status").json()["data"]
    assert data["configured"] is False
    assert data["available"] is False


def test_suggestions_endpoint(client):
    response = client.get(f"{PREFIX}/suggestions")
    assert response.status_code == 200
    suggestions = response.json()["data"]["suggestions"]
    assert len(suggestions) == 5
    assert suggestions[0] == "How do I register as a student?"


def test_health_and_ping(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/ping").json() == {"status": "ok"}


def test_root_lists_endpoints(client):
    endpoints = client.get("/").json()["endpoints"]
    assert endpoints["message"] == f"{PREFIX}/message"


def test_startup_loads_bundled_corpus():
    with TestClient(create_app()) as client:
        response = client.post(f"{PREFIX}/message", json={"message": "How to upload courses?"})
    assert response.status_code == 200
    assert "Upload Course" in response.json()["data"]["response"]


@pytest.mark.parametrize("payload", [{"message": 5}, {"message": ["hi"]}, {"sessionId": {"id": 1}, "message": "hi"}])
def test_malformed_body_keeps_envelope(client, payload):
    response = client.post(f"{PREFIX}/message", json=payload)
    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Invalid request"
    assert "detail" not in body


def test_app_uses_lifespan_instead_of_startup_events(matcher):
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        app = create_app(matcher=matcher)
        with TestClient(app) as client:
            assert client.get("/ping").status_code == 200
    assert not [w for w in caught if "on_event" in str(w.message)]
