import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool

from html_textify.config import get_settings
from html_textify.handlers.textify_handler import (
    InputTooLargeError,
    handle_textify_request,
    handle_wrap_request,
)
from html_textify.services.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="HTML Textify", version="0.1.0")


async def _json_body(request: Request, route: str):
    try:
        return await request.json()
    except Exception as exc:
        logger.warning("Invalid JSON payload", extra={"event": "invalid_json", "route": route})
        raise HTTPException(status_code=400, detail="invalid JSON payload") from exc


def _run(handler, payload, route: str) -> JSONResponse:
    try:
        return JSONResponse(handler(payload, settings))
    except InputTooLargeError as exc:
        logger.warning("Rejected oversized payload", extra={"event": "payload_too_large", "route": route})
        raise HTTPException(status_code=413, detail=str(exc)) from exc
    except ValueError as exc:
        logger.warning(
            "Rejected invalid request",
            extra={"event": "invalid_request", "route": route, "error": str(exc)},
        )
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "env": settings.app_env}


@app.post("/textify")
async def textify_endpoint(request: Request) -> JSONResponse:
    payload = await _json_body(request, "textify")
    return await run_in_threadpool(_run, handle_textify_request, payload, "textify")


@app.post("/wrap")
async def wrap_endpoint(request: Request) -> JSONResponse:
    payload = await _json_body(request, "wrap")
    return await run_in_threadpool(_run, handle_wrap_request, payload, "wrap")
