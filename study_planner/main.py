"""FastAPI application with a single study plan generation route."""

from contextlib import asynccontextmanager
import json
import logging

from fastapi import FastAPI, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from study_planner.config import ConfigError, settings
from study_planner.planner.contracts import FailureCode, err
from study_planner.planner.generator import StudyPlanGenerator
from study_planner.planner.resolve import resolve
from study_planner.schemas.plan import PlanRequest
from study_planner.utils.constants import CORS_HEADERS, MISSING_FIELDS_MESSAGE, PLAN_ROUTE

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        settings.require_gateway_key()
    except ConfigError as exc:
        if settings.strict_startup:
            raise
        logger.error("%s; every request will receive the fallback plan", exc)
    yield


app = FastAPI(title="Study Plan Generator", version="0.1.0", lifespan=lifespan)

generator = StudyPlanGenerator(settings)


@app.middleware("http")
async def cors_headers(request: Request, call_next):
    """Attach CORS headers to every response, including framework errors.

    An unhandled exception on the plan route still resolves to the fallback plan.
    """
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Unhandled error serving %s %s", request.method, request.url.path)
        if request.url.path != PLAN_ROUTE:
            raise
        return _fallback("Unhandled server error", code="upstream_error")
    for name, value in CORS_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


def _json(status_code: int, body: dict) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body, headers=CORS_HEADERS)


def _fallback(reason: str, code: FailureCode = "invalid_request") -> JSONResponse:
    status, body = resolve(err(code, reason))
    return _json(status, body)


def _authorized(request: Request) -> bool:
    if not settings.service_public_key:
        return True
    return request.headers.get("authorization", "") == f"Bearer {settings.service_public_key}"


@app.options(PLAN_ROUTE)
def plan_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@app.post(PLAN_ROUTE)
async def generate_study_plan(request: Request):
    """Generate a weekly study plan.

    Returns the model's plan, the fallback plan, or one of the explicit
    400/401/402/429 error bodies.
    """
    if not _authorized(request):
        return _json(401, {"error": "Unauthorized"})

    try:
        raw = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.error("Error reading study plan request: %s", exc)
        return _fallback("Unreadable request body")
    if not isinstance(raw, dict):
        logger.error("Study plan request body is not an object: %s", type(raw).__name__)
        return _fallback("Request body is not an object")

    if PlanRequest.missing_required(raw):
        return _json(400, {"error": MISSING_FIELDS_MESSAGE})

    plan_request = PlanRequest.model_validate(raw)

    result = await run_in_threadpool(generator.attempt_generate, plan_request)
    if not result["ok"]:
        logger.error("Error generating study plan: %s", result["failure"]["code"])
    status, body = resolve(result)
    return _json(status, body)
