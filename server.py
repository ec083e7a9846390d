"""CopyDrive — System Prompt Service.

FastAPI backend that compiles a copy's project and copy context into a
system prompt for the copy-generation model, and stores it on the copy.

Usage:
    python server.py
    # POST http://localhost:8000/generate-system-prompt
"""

from __future__ import annotations

import asyncio
import json
import logging
from contextlib import asynccontextmanager

from fastapi import BackgroundTasks, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from pipeline import storage
from pipeline.system_prompt_generator import (
    AuthorizationError,
    SystemPromptError,
    SystemPromptGenerator,
    status_code_for_error,
)
from schemas.system_prompt import ErrorResponse, GenerateSystemPromptRequest

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)

GENERATE_PATHS = ("/generate-system-prompt", "/functions/v1/generate-system-prompt")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def _check_config() -> list[str]:
    """Check the LLM credential and storage settings. Returns list of warnings."""
    warnings = []
    provider = config.LLM_PROVIDER
    if not config.get_llm_api_key(provider):
        warnings.append(f"LLM_PROVIDER is '{provider}' but its API key is not set — every request will fail!")
    if not config.storage_configured():
        warnings.append("SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY not set — system prompts will not be persisted")
    if config.REQUIRE_AUTH and not config.storage_configured():
        warnings.append("REQUIRE_AUTH is on but Supabase is not configured — authenticated requests will fail")
    return warnings


@asynccontextmanager
async def lifespan(app: FastAPI):
    config_warnings = _check_config()
    if config_warnings:
        logger.warning("=" * 60)
        logger.warning("CONFIG WARNINGS:")
        for w in config_warnings:
            logger.warning("  • %s", w)
        logger.warning("=" * 60)
    else:
        logger.info("Config: LLM and storage configured (model=%s)", config.SYSTEM_PROMPT_MODEL)
    yield


app = FastAPI(title="CopyDrive System Prompt Service", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=[h.strip() for h in CORS_HEADERS["Access-Control-Allow-Headers"].split(",")],
)


def get_generator() -> SystemPromptGenerator:
    return SystemPromptGenerator()


def _error_response(exc: BaseException) -> JSONResponse:
    body = ErrorResponse(error=str(exc))
    return JSONResponse(
        body.model_dump(),
        status_code=status_code_for_error(exc),
        headers=CORS_HEADERS,
    )


def _authorize(authorization: str | None):
    """Verify the caller's bearer token with Supabase auth."""
    if not authorization:
        raise AuthorizationError("Missing authorization header")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        token = authorization
    token = token.strip()
    if not token or storage.verify_access_token(token) is None:
        raise AuthorizationError("Unauthorized")


async def _read_request(request: Request) -> GenerateSystemPromptRequest:
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SystemPromptError(f"Invalid JSON body: {exc}") from exc
    return GenerateSystemPromptRequest.model_validate(payload)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@app.options(GENERATE_PATHS[0])
@app.options(GENERATE_PATHS[1])
async def api_generate_system_prompt_options():
    return Response(content="ok", headers=CORS_HEADERS)


@app.post(GENERATE_PATHS[0])
@app.post(GENERATE_PATHS[1])
async def api_generate_system_prompt(request: Request, background_tasks: BackgroundTasks):
    """Compile the context, ask the model for a system prompt, persist in the background."""
    loop = asyncio.get_event_loop()
    generator = get_generator()
    try:
        if config.REQUIRE_AUTH:
            authorization = request.headers.get("authorization")
            await loop.run_in_executor(None, _authorize, authorization)

        req = await _read_request(request)
        logger.info(
            "Generating system prompt: copyType=%s copyId=%s projectId=%s",
            req.copy_type or "-", req.copy_id or "-", req.project_id or "-",
        )
        result = await loop.run_in_executor(None, generator.generate, req)
    except Exception as e:
        logger.error("Error generating system prompt: %s", e)
        return _error_response(e)

    if result.copy_id:
        background_tasks.add_task(generator.persist, result)

    return JSONResponse(result.to_response(), headers=CORS_HEADERS)


@app.get("/api/health")
async def api_health():
    """Check service health — LLM credential, storage, model."""
    return {
        "status": "ok",
        "llm_configured": bool(config.get_llm_api_key(config.LLM_PROVIDER)),
        "storage_configured": config.storage_configured(),
        "provider": config.LLM_PROVIDER,
        "model": config.SYSTEM_PROMPT_MODEL,
        "warnings": _check_config(),
    }


if __name__ == "__main__":
    import uvicorn

    print("\n  CopyDrive System Prompt Service")
    print(f"  Listening on http://{config.HOST}:{config.PORT}\n")
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level="info")
