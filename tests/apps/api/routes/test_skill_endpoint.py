"""Tests for the /skill endpoint."""
# pylint: disable=missing-function-docstring,redefined-outer-name

from __future__ import annotations

from http import HTTPStatus
from typing import Any

import pytest
from fastapi.testclient import TestClient

from voice_skill_engine.api_factory import create_app
from voice_skill_engine.apps.api.app import create_app as create_bare_app
from voice_skill_engine.apps.api.routes import skill
from voice_skill_engine.services import ServiceContainer, runtime


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def envelope(request: dict[str, Any], **extra: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "version": "1.0",
        "session": {
            "new": True,
            "sessionId": "session-1",
            "application": {"applicationId": "amzn1.ask.skill.test"},
            "attributes": {},
        },
        "context": {
            "System": {
                "application": {"applicationId": "amzn1.ask.skill.test"},
                "device": {"supportedInterfaces": {}},
            }
        },
        "request": {"requestId": "req-1", **request},
    }
    payload.update(extra)
    return payload


def test_hello_world_round_trip(client: TestClient) -> None:
    resp = client.post(
        "/skill",
        json=envelope({"type": "IntentRequest", "intent": {"name": "HelloWorldIntent"}}),
    )

    assert resp.status_code == HTTPStatus.OK
    body = resp.json()
    assert body["version"] == "1.0"
    assert body["response"]["outputSpeech"] == {"type": "PlainText", "text": "Hello World!"}
    assert body["sessionAttributes"] == {}


def test_session_attributes_are_echoed_back(client: TestClient) -> None:
    resp = client.post(
        "/skill",
        json=envelope(
            {
                "type": "IntentRequest",
                "intent": {
                    "name": "MyNameIsIntent",
                    "slots": {"name": {"name": "name", "value": "Sam"}},
                },
            }
        ),
    )

    assert resp.status_code == HTTPStatus.OK
    assert resp.json()["sessionAttributes"] == {"name": "Sam"}
    assert resp.json()["response"]["shouldEndSession"] is False


def test_unhandled_request_gets_apology(client: TestClient) -> None:
    resp = client.post(
        "/skill",
        json=envelope({"type": "IntentRequest", "intent": {"name": "UnknownIntent"}}),
    )

    assert resp.status_code == HTTPStatus.OK
    body = resp.json()
    assert body["response"]["outputSpeech"]["text"] == skill.UNHANDLED_MESSAGE
    assert body["response"]["shouldEndSession"] is False


def test_malformed_envelope_is_rejected(client: TestClient) -> None:
    resp = client.post("/skill", json={"version": "1.0"})

    assert resp.status_code == HTTPStatus.UNPROCESSABLE_ENTITY


def test_application_id_mismatch_is_forbidden(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(skill.config, "SKILL_APPLICATION_ID", "amzn1.ask.skill.other")

    resp = client.post("/skill", json=envelope({"type": "LaunchRequest"}))

    assert resp.status_code == HTTPStatus.FORBIDDEN


def test_application_id_match_is_accepted(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(skill.config, "SKILL_APPLICATION_ID", "amzn1.ask.skill.test")

    resp = client.post("/skill", json=envelope({"type": "LaunchRequest"}))

    assert resp.status_code == HTTPStatus.OK


def test_missing_dispatcher_returns_server_error() -> None:
    client = TestClient(create_bare_app(ServiceContainer(dispatcher=None)))

    resp = client.post("/skill", json=envelope({"type": "LaunchRequest"}))

    assert resp.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    runtime.clear_services()


def test_correlation_id_is_echoed(client: TestClient) -> None:
    resp = client.post(
        "/skill",
        json=envelope({"type": "LaunchRequest"}),
        headers={"X-Request-ID": "cid-123"},
    )

    assert resp.headers["X-Request-ID"] == "cid-123"
    assert resp.headers["X-Correlation-ID"] == "cid-123"


def test_non_ascii_application_id_is_forbidden(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(skill.config, "SKILL_APPLICATION_ID", "amzn1.ask.skill.ok")
    payload = envelope({"type": "LaunchRequest"})
    payload["context"]["System"]["application"]["applicationId"] = "amzn1.ask.skill.é"

    resp = client.post("/skill", json=payload)

    assert resp.status_code == HTTPStatus.FORBIDDEN


def test_non_ascii_configured_application_id_matches(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(skill.config, "SKILL_APPLICATION_ID", "amzn1.ask.skill.é")
    payload = envelope({"type": "LaunchRequest"})
    payload["context"]["System"]["application"]["applicationId"] = "amzn1.ask.skill.é"

    resp = client.post("/skill", json=payload)

    assert resp.status_code == HTTPStatus.OK
