"""Tests for the study plan endpoint contract."""

import json

import pytest
import requests
from fastapi.testclient import TestClient

import study_planner.main as main
from study_planner.config import ConfigError, Settings
from study_planner.llm.gateway_client import GatewayClient, GatewayStatusError
from study_planner.planner.fallback import FALLBACK_PLAN
from study_planner.planner.generator import StudyPlanGenerator

ROUTE = "/functions/v1/generate-study-plan"

VALID_INPUT = {
    "subjects": ["Math"],
    "examDate": "2099-01-01",
    "hoursPerDay": 4,
    "weakSubjects": [],
    "stressLevel": "medium",
}

GOOD_PLAN = {
    "overview": "Front-load algebra, keep Sunday light.",
    "weeklyPlan": [
        {"day": "Monday", "tasks": ["Algebra drills"], "studyHours": 3},
        {"day": "Sunday", "tasks": ["Rest"], "studyHours": 0},
    ],
    "focusTips": ["Pomodoro"],
    "burnoutWarnings": [],
    "motivation": "Keep going!",
}


class _FakeGateway:
    def __init__(self, data=None, error=None):
        self._data = data
        self._error = error
        self.calls = []

    def complete(self, messages, tools, tool_choice):
        self.calls.append((messages, tools, tool_choice))
        if self._error is not None:
            raise self._error
        return self._data


def _tool_response(arguments, name="generate_study_plan"):
    return {"choices": [{"message": {"tool_calls": [{"function": {"name": name, "arguments": arguments}}]}}]}


def _use_gateway(monkeypatch, gateway):
    monkeypatch.setattr(main, "generator", StudyPlanGenerator(Settings(lovable_api_key="k"), gateway=gateway))


def _post(body):
    with TestClient(main.app) as client:
        return client.post(ROUTE, json=body)


def test_options_returns_empty_body_with_cors_headers():
    with TestClient(main.app) as client:
        response = client.options(ROUTE)

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert "content-type" in response.headers["access-control-allow-headers"]


def test_empty_subjects_returns_400(monkeypatch):
    gateway = _FakeGateway(data=_tool_response(json.dumps(GOOD_PLAN)))
    _use_gateway(monkeypatch, gateway)

    response = _post({**VALID_INPUT, "subjects": []})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields: subjects and examDate"}
    assert response.headers["access-control-allow-origin"] == "*"
    assert gateway.calls == []


def test_missing_exam_date_returns_400(monkeypatch):
    _use_gateway(monkeypatch, _FakeGateway(data=_tool_response(json.dumps(GOOD_PLAN))))
    body = dict(VALID_INPUT)
    del body["examDate"]

    response = _post(body)

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields: subjects and examDate"


def test_successful_generation_returns_model_plan(monkeypatch):
    _use_gateway(monkeypatch, _FakeGateway(data=_tool_response(json.dumps(GOOD_PLAN))))

    response = _post(VALID_INPUT)

    assert response.status_code == 200
    assert response.json() == GOOD_PLAN
    assert response.headers["access-control-allow-origin"] == "*"


def test_upstream_429_passes_through(monkeypatch):
    _use_gateway(monkeypatch, _FakeGateway(error=GatewayStatusError(429, "slow down")))

    response = _post(VALID_INPUT)

    assert response.status_code == 429
    assert response.json() == {"error": "Rate limit exceeded. Please try again in a moment."}


def test_upstream_402_passes_through(monkeypatch):
    _use_gateway(monkeypatch, _FakeGateway(error=GatewayStatusError(402, "pay up")))

    response = _post(VALID_INPUT)

    assert response.status_code == 402
    assert response.json() == {"error": "Service temporarily unavailable. Please try again later."}


def test_upstream_500_returns_fallback(monkeypatch):
    _use_gateway(monkeypatch, _FakeGateway(error=GatewayStatusError(500, "boom")))

    response = _post(VALID_INPUT)

    assert response.status_code == 200
    assert response.json() == FALLBACK_PLAN.model_dump()


def test_unreachable_gateway_returns_literal_fallback(monkeypatch):
    class _DownSession:
        def post(self, *_args, **_kwargs):
            raise requests.ConnectionError("connection refused")

    config = Settings(lovable_api_key="k", gateway_url="http://127.0.0.1:9/v1/chat/completions")
    gateway = GatewayClient.from_settings(config, session=_DownSession())
    _use_gateway(monkeypatch, gateway)

    response = _post(VALID_INPUT)

    assert response.status_code == 200
    payload = response.json()
    assert payload == FALLBACK_PLAN.model_dump()
    assert payload["overview"].startswith("We encountered an issue generating your personalized plan.")
    assert [d["studyHours"] for d in payload["weeklyPlan"]] == [4, 4, 4, 4, 3, 4, 2]
    assert len(payload["focusTips"]) == 4
    assert len(payload["burnoutWarnings"]) == 2


def test_incomplete_tool_call_returns_fallback(monkeypatch):
    partial = {k: v for k, v in GOOD_PLAN.items() if k != "focusTips"}
    _use_gateway(monkeypatch, _FakeGateway(data=_tool_response(json.dumps(partial))))

    response = _post(VALID_INPUT)

    assert response.status_code == 200
    assert response.json() == FALLBACK_PLAN.model_dump()


def test_missing_api_key_returns_fallback(monkeypatch):
    monkeypatch.setattr(main, "generator", StudyPlanGenerator(Settings(lovable_api_key="")))

    response = _post(VALID_INPUT)

    assert response.status_code == 200
    assert response.json() == FALLBACK_PLAN.model_dump()


def test_non_json_body_returns_fallback(monkeypatch):
    _use_gateway(monkeypatch, _FakeGateway(data=_tool_response(json.dumps(GOOD_PLAN))))

    with TestClient(main.app) as client:
        response = client.post(ROUTE, content=b"not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 200
    assert response.json() == FALLBACK_PLAN.model_dump()


def test_bearer_key_enforced_when_configured(monkeypatch):
    monkeypatch.setattr(main.settings, "service_public_key", "pk-test")
    _use_gateway(monkeypatch, _FakeGateway(data=_tool_response(json.dumps(GOOD_PLAN))))

    with TestClient(main.app) as client:
        denied = client.post(ROUTE, json=VALID_INPUT)
        allowed = client.post(ROUTE, json=VALID_INPUT, headers={"Authorization": "Bearer pk-test"})

    assert denied.status_code == 401
    assert denied.json() == {"error": "Unauthorized"}
    assert allowed.status_code == 200
    assert allowed.json() == GOOD_PLAN


def test_strict_startup_refuses_to_start_without_key(monkeypatch):
    monkeypatch.setattr(main.settings, "lovable_api_key", "")
    monkeypatch.setattr(main.settings, "strict_startup", True)

    with pytest.raises(ConfigError):
        with TestClient(main.app):
            pass


@pytest.mark.parametrize(
    "body",
    [
        {**VALID_INPUT, "subjects": [], "stressLevel": 3},
        {"subjects": ["Math"], "examDate": "", "weakSubjects": None, "hoursPerDay": [4]},
        {"subjects": None, "examDate": "2099-01-01"},
        {"subjects": {"name": "Math"}, "examDate": "2099-01-01"},
        {"subjects": ["Math"], "examDate": None, "stressLevel": {"level": "high"}},
        {},
    ],
)
def test_missing_required_fields_win_over_malformed_fields(monkeypatch, body):
    gateway = _FakeGateway(data=_tool_response(json.dumps(GOOD_PLAN)))
    _use_gateway(monkeypatch, gateway)

    response = _post(body)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields: subjects and examDate"}
    assert gateway.calls == []


def test_malformed_optional_fields_reach_the_prompt(monkeypatch):
    gateway = _FakeGateway(data=_tool_response(json.dumps(GOOD_PLAN)))
    _use_gateway(monkeypatch, gateway)

    response = _post({**VALID_INPUT, "stressLevel": 3, "hoursPerDay": [4], "weakSubjects": None})

    assert response.status_code == 200
    assert response.json() == GOOD_PLAN
    assert len(gateway.calls) == 1
    user_prompt = gateway.calls[0][0][1]["content"]
    assert "Current stress level: 3" in user_prompt
    assert "Available study time: [4] hours per day" in user_prompt
    assert "Weak subjects that need extra attention: None specified" in user_prompt


@pytest.mark.parametrize("body", [[], None, "Math", 7])
def test_non_object_json_body_returns_fallback(monkeypatch, body):
    gateway = _FakeGateway(data=_tool_response(json.dumps(GOOD_PLAN)))
    _use_gateway(monkeypatch, gateway)

    with TestClient(main.app) as client:
        response = client.post(ROUTE, content=json.dumps(body), headers={"Content-Type": "application/json"})

    assert response.status_code == 200
    assert response.json() == FALLBACK_PLAN.model_dump()
    assert response.headers["access-control-allow-origin"] == "*"
    assert gateway.calls == []


def test_framework_responses_carry_cors_headers():
    with TestClient(main.app) as client:
        wrong_method = client.get(ROUTE)
        unknown_path = client.post("/nope", json=VALID_INPUT)

    assert wrong_method.status_code == 405
    assert wrong_method.headers["access-control-allow-origin"] == "*"
    assert "authorization" in wrong_method.headers["access-control-allow-headers"]
    assert unknown_path.status_code == 404
    assert unknown_path.headers["access-control-allow-origin"] == "*"


def test_unhandled_error_on_plan_route_returns_fallback_with_cors(monkeypatch):
    class _BrokenGenerator:
        def attempt_generate(self, _request):
            raise RuntimeError("generator exploded")

    monkeypatch.setattr(main, "generator", _BrokenGenerator())

    response = _post(VALID_INPUT)

    assert response.status_code == 200
    assert response.json() == FALLBACK_PLAN.model_dump()
    assert response.headers["access-control-allow-origin"] == "*"
