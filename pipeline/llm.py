"""LLM client — multi-provider support (OpenAI-compatible gateway, Anthropic, Google).

The default provider is an OpenAI-compatible chat-completions gateway reached
through the OpenAI SDK with a custom base_url. Anthropic and Google can be
selected through config.LLM_PROVIDER.

Every call logs its token usage; get_usage_summary() aggregates them.

Error handling:
  - 400-level errors (bad request, auth) are NOT retried — they won't fix themselves.
  - 429 (rate limit), 5xx and connection/timeout errors ARE retried with exponential backoff.
  - Failures surface as LLMError with the upstream status code and body text.
"""

from __future__ import annotations

import logging
import socket
import threading
import time as _time
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

import config

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Usage tracking
# ---------------------------------------------------------------------------

_usage_lock = threading.Lock()
_usage_log: list[dict[str, Any]] = []


def _record_usage(provider: str, model: str, input_tokens: int, output_tokens: int):
    """Record a single LLM call's token usage."""
    entry = {
        "provider": provider,
        "model": model,
        "input_tokens": input_tokens,
        "output_tokens": output_tokens,
        "timestamp": _time.time(),
    }
    with _usage_lock:
        _usage_log.append(entry)
    logger.info(
        "Token usage: %s/%s — in=%d out=%d",
        provider, model, input_tokens, output_tokens,
    )


def reset_usage():
    with _usage_lock:
        _usage_log.clear()


def get_usage_summary() -> dict[str, Any]:
    """Return aggregated token totals."""
    with _usage_lock:
        entries = list(_usage_log)
    total_input = sum(e["input_tokens"] for e in entries)
    total_output = sum(e["output_tokens"] for e in entries)
    return {
        "total_input_tokens": total_input,
        "total_output_tokens": total_output,
        "total_tokens": total_input + total_output,
        "calls": len(entries),
    }


# ---------------------------------------------------------------------------
# Error helpers
# ---------------------------------------------------------------------------

class LLMError(Exception):
    """Clean error from an LLM call with a human-readable message."""

    def __init__(
        self,
        message: str,
        provider: str = "",
        model: str = "",
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        self.provider = provider
        self.model = model
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)


def _status_code(exc: BaseException) -> int | None:
    """HTTP status of an SDK error, whichever provider raised it."""
    for attr in ("status_code", "code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
    return None


def _response_text(exc: BaseException) -> str:
    response = getattr(exc, "response", None)
    text = getattr(response, "text", None)
    if isinstance(text, str) and text:
        return text
    body = getattr(exc, "body", None)
    if body:
        return str(body)
    return str(exc)


def _is_retryable(exc: BaseException) -> bool:
    """Return True if the error is transient and worth retrying.

    We retry on rate limits (429), server errors (5xx), and connection /
    timeout errors. Everything else (400, 401/403, 404, unknown) fails fast.
    """
    if isinstance(exc, LLMError):
        return False

    try:
        from openai import APIConnectionError, APITimeoutError
        if isinstance(exc, (APIConnectionError, APITimeoutError)):
            return True
    except ImportError:
        pass

    try:
        from anthropic import (
            APIConnectionError as AnthropicConnError,
            APITimeoutError as AnthropicTimeout,
        )
        if isinstance(exc, (AnthropicConnError, AnthropicTimeout)):
            return True
    except ImportError:
        pass

    if isinstance(exc, (ConnectionError, TimeoutError, socket.timeout, httpx.TransportError)):
        return True

    status = _status_code(exc)
    return status is not None and (status == 429 or status >= 500)


def _extract_error_message(exc: Exception, provider: str, model: str) -> str:
    """Pull out a clean, human-readable error message from an API exception."""
    status = _status_code(exc)
    if status is not None:
        body = _response_text(exc)
        if len(body) > 500:
            body = body[:500] + "..."
        return f"[{provider}/{model}] AI gateway returned {status}: {body}"

    if _is_retryable(exc):
        return f"[{provider}/{model}] Request to AI gateway failed: {exc.__class__.__name__}: {exc}"

    msg = str(exc)
    if len(msg) > 300:
        msg = msg[:300] + "..."
    return f"[{provider}/{model}] {msg}"


# ---------------------------------------------------------------------------
# Provider clients (lazy-init singletons)
# ---------------------------------------------------------------------------

_openai_client = None
_anthropic_client = None
_google_client = None


def reset_clients():
    """Drop cached clients so the next call picks up new config (tests)."""
    global _openai_client, _anthropic_client, _google_client
    _openai_client = None
    _anthropic_client = None
    _google_client = None


def _get_openai():
    global _openai_client
    if _openai_client is None:
        if not config.LLM_GATEWAY_API_KEY:
            raise LLMError(
                "LLM_GATEWAY_API_KEY not configured",
                provider="openai",
            )
        from openai import OpenAI
        _openai_client = OpenAI(
            api_key=config.LLM_GATEWAY_API_KEY,
            base_url=config.LLM_GATEWAY_URL,
            timeout=httpx.Timeout(config.LLM_TIMEOUT_SECONDS, connect=10.0),
            max_retries=0,  # tenacity handles retries
        )
    return _openai_client


def _get_anthropic():
    global _anthropic_client
    if _anthropic_client is None:
        if not config.ANTHROPIC_API_KEY:
            raise LLMError(
                "ANTHROPIC_API_KEY not configured",
                provider="anthropic",
            )
        import anthropic
        _anthropic_client = anthropic.Anthropic(
            api_key=config.ANTHROPIC_API_KEY,
            timeout=config.LLM_TIMEOUT_SECONDS,
            max_retries=0,
        )
    return _anthropic_client


def _get_google():
    global _google_client
    if _google_client is None:
        if not config.GOOGLE_API_KEY:
            raise LLMError(
                "GOOGLE_API_KEY not configured",
                provider="google",
            )
        from google import genai
        _google_client = genai.Client(api_key=config.GOOGLE_API_KEY)
    return _google_client


# ---------------------------------------------------------------------------
# Provider-specific call implementations
# ---------------------------------------------------------------------------

# Models that take max_completion_tokens instead of the legacy max_tokens.
_OPENAI_NEW_TOKEN_PARAM_PREFIXES = (
    "gpt-4o", "gpt-4.1", "gpt-4.5", "gpt-5", "o1", "o3", "o4",
)


def _uses_new_token_param(model: str) -> bool:
    # Gateway model ids carry a vendor prefix: "openai/gpt-5-mini"
    name = model.split("/", 1)[-1]
    return any(name.startswith(p) for p in _OPENAI_NEW_TOKEN_PARAM_PREFIXES)


def _call_openai(
    system_prompt: str,
    user_prompt: str,
    model: str,
    temperature: float,
    max_tokens: int,
) -> str | None:
    client = _get_openai()

    kwargs: dict = {
        "model": model,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
    }
    if _uses_new_token_param(model):
        # Reasoning models reject a custom temperature
        kwargs["max_completion_tokens"] = max_tokens
    else:
        kwargs["max_tokens"] = max_tokens
        kwargs["temperature"] = temperature

    response = client.chat.completions.create(**kwargs)

    usage = getattr(response, "usage", None)
    if usage:
        _record_usage("openai", model, usage.prompt_tokens or 0, usage.completion_tokens or 0)

    if not response.choices:
        return None
    return response.choices[0].message.content


def _call_anthropic(
    system_prompt: str,
    user_prompt: str,
    model: str,
    temperature: float,
    max_tokens: int,
) -> str | None:
    client = _get_anthropic()

    response = client.messages.create(
        model=model,
        max_tokens=max_tokens,
        temperature=temperature,
        system=system_prompt,
        messages=[{"role": "user", "content": user_prompt}],
    )

    _record_usage(
        "anthropic", model,
        response.usage.input_tokens or 0,
        response.usage.output_tokens or 0,
    )
    texts = [block.text for block in response.content if getattr(block, "type", "") == "text"]
    return "".join(texts) or None


def _call_google(
    system_prompt: str,
    user_prompt: str,
    model: str,
    temperature: float,
    max_tokens: int,
) -> str | None:
    from google.genai import types

    client = _get_google()
    response = client.models.generate_content(
        model=model,
        contents=user_prompt,
        config=types.GenerateContentConfig(
            system_instruction=system_prompt,
            temperature=temperature,
            max_output_tokens=max_tokens,
        ),
    )

    meta = getattr(response, "usage_metadata", None)
    if meta:
        _record_usage(
            "google", model,
            getattr(meta, "prompt_token_count", 0) or 0,
            getattr(meta, "candidates_token_count", 0) or 0,
        )
    return response.text


# Provider dispatch
_PROVIDERS = {
    "openai": _call_openai,
    "anthropic": _call_anthropic,
    "google": _call_google,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

@retry(
    retry=retry_if_exception(_is_retryable),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=30),
    reraise=True,
)
def _call_with_retry(call_fn, system_prompt, user_prompt, model, temperature, max_tokens):
    return call_fn(system_prompt, user_prompt, model, temperature, max_tokens)


def call_llm(
    system_prompt: str,
    user_prompt: str,
    provider: str | None = None,
    model: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> str | None:
    """Call an LLM and return its raw text (None when the model sent no content).

    Retries on transient errors (rate limits, server errors, timeouts).
    Raises LLMError for anything that is still failing afterwards.
    """
    provider = provider or config.LLM_PROVIDER
    model = model or config.SYSTEM_PROMPT_MODEL
    temperature = config.SYSTEM_PROMPT_TEMPERATURE if temperature is None else temperature
    max_tokens = max_tokens or config.SYSTEM_PROMPT_MAX_TOKENS

    call_fn = _PROVIDERS.get(provider)
    if not call_fn:
        raise LLMError(
            f"Unknown provider: '{provider}'. Available: {list(_PROVIDERS.keys())}",
            provider=provider,
            model=model,
        )

    logger.info("LLM call: provider=%s, model=%s, max_tokens=%d", provider, model, max_tokens)
    start = _time.time()
    try:
        content = _call_with_retry(call_fn, system_prompt, user_prompt, model, temperature, max_tokens)
    except LLMError:
        raise
    except Exception as exc:
        clean_msg = _extract_error_message(exc, provider, model)
        logger.error("LLM call failed: %s", clean_msg)
        raise LLMError(
            clean_msg,
            provider=provider,
            model=model,
            status_code=_status_code(exc),
            cause=exc,
        ) from exc

    logger.info(
        "LLM call finished in %.1fs — %d chars",
        _time.time() - start, len(content or ""),
    )
    return content
