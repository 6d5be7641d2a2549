import pytest

from app.core.config import settings
from app.services.chat.errors import ProviderError, ProviderTimeoutError
from app.services.chat.gating import OFF_TOPIC_REPLY

from conftest import history_of


def test_chat_returns_response_and_intent(client, provider):
    resp = client.post("/api/chat", json={"message": "hello"})
    assert resp.status_code == 200
    assert resp.json() == {"response": provider.reply, "consultationIntent": False}


def test_chat_off_topic_never_calls_provider(client, provider):
    resp = client.post("/api/chat", json={"message": "what is the weather today"})
    assert resp.status_code == 200
    assert resp.json() == {"response": OFF_TOPIC_REPLY, "consultationIntent": False}
    assert provider.calls == []


def test_chat_passes_validated_history(client, provider):
    history = history_of(("user", "Tell me about DAS"), ("assistant", "Sure."), ("system", "dropped"))
    resp = client.post("/api/chat", json={"message": "and for hospitals?", "conversationHistory": history})
    assert resp.status_code == 200
    sent = provider.calls[0]["messages"]
    assert [m["role"] for m in sent] == ["system", "user", "assistant", "user"]


def test_chat_rejects_missing_message(client):
    resp = client.post("/api/chat", json={"conversationHistory": []})
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Invalid request"
    assert body["details"] == ["message must be a string"]


def test_chat_rejects_invalid_json(client):
    resp = client.post("/api/chat", content="not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid request"


@pytest.mark.parametrize(
    "error",
    [
        ProviderError("upstream exploded with sk-secret-key", status_code=429),
        ProviderTimeoutError(20),
        RuntimeError("sk-secret-key leaked in traceback"),
    ],
)
def test_provider_failures_return_generic_error(client, provider, error):
    provider.error = error
    resp = client.post("/api/chat", json={"message": "What is DAS?"})
    assert resp.status_code == 500
    assert resp.json() == {
        "error": "Internal server error",
        "message": "An error occurred. Please try again later.",
    }
    assert "sk-secret" not in resp.text
    assert "exploded" not in resp.text


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "service": settings.SERVICE_NAME}


def test_chat_rate_limit_does_not_affect_health(client, chat_limiter):
    chat_limiter.limit = 2
    for _ in range(2):
        assert client.post("/api/chat", json={"message": "hello"}).status_code == 200

    resp = client.post("/api/chat", json={"message": "hello"})
    assert resp.status_code == 429
    assert resp.json()["error"] == "Too many requests"
    assert client.get("/health").status_code == 200


def test_health_checks_do_not_consume_chat_quota(client, chat_limiter, health_limiter):
    chat_limiter.limit = 1
    health_limiter.limit = 1
    assert client.get("/health").status_code == 200
    assert client.get("/health").status_code == 429
    assert client.post("/api/chat", json={"message": "hello"}).status_code == 200


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["message"] == settings.APP_NAME
