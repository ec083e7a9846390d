"""Service configuration — LLM gateway, system-prompt generation limits, storage."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
ROOT_DIR = Path(__file__).parent

# ---------------------------------------------------------------------------
# LLM Provider API Keys
#
# The default provider is an OpenAI-compatible chat-completions gateway.
# Anthropic and Google can be selected with LLM_PROVIDER=anthropic|google.
# ---------------------------------------------------------------------------
LLM_GATEWAY_URL = os.getenv("LLM_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1")
LLM_GATEWAY_API_KEY = os.getenv("LLM_GATEWAY_API_KEY", os.getenv("LOVABLE_API_KEY", ""))
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY", "")

LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai")

# ---------------------------------------------------------------------------
# Model names (centralized so they're easy to update)
# ---------------------------------------------------------------------------
GATEWAY_MINI = "openai/gpt-5-mini"
ANTHROPIC_DEFAULT = "claude-sonnet-4-5"
GOOGLE_DEFAULT = "gemini-2.5-flash"

_PROVIDER_DEFAULT_MODELS = {
    "openai": GATEWAY_MINI,
    "anthropic": ANTHROPIC_DEFAULT,
    "google": GOOGLE_DEFAULT,
}

SYSTEM_PROMPT_MODEL = os.getenv(
    "SYSTEM_PROMPT_MODEL", _PROVIDER_DEFAULT_MODELS.get(LLM_PROVIDER, GATEWAY_MINI)
)
SYSTEM_PROMPT_MAX_TOKENS = int(os.getenv("SYSTEM_PROMPT_MAX_TOKENS", "2000"))
SYSTEM_PROMPT_TEMPERATURE = float(os.getenv("SYSTEM_PROMPT_TEMPERATURE", "0.7"))
LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", "60"))

# ---------------------------------------------------------------------------
# System prompt validation / fallback
#
# Completions shorter than MIN_SYSTEM_PROMPT_LENGTH characters are discarded
# and replaced by the local fallback template, which embeds at most
# FALLBACK_CONTEXT_CHARS characters of the compiled context.
# ---------------------------------------------------------------------------
MIN_SYSTEM_PROMPT_LENGTH = int(os.getenv("MIN_SYSTEM_PROMPT_LENGTH", "100"))
FALLBACK_CONTEXT_CHARS = int(os.getenv("FALLBACK_CONTEXT_CHARS", "4000"))

# ---------------------------------------------------------------------------
# Storage (Supabase)
# ---------------------------------------------------------------------------
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "")
COPIES_TABLE = os.getenv("COPIES_TABLE", "copies")
PROJECTS_TABLE = os.getenv("PROJECTS_TABLE", "projects")

# Verify the caller's bearer token against Supabase auth before generating.
REQUIRE_AUTH = os.getenv("REQUIRE_AUTH", "false").lower() == "true"

# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))


def get_llm_api_key(provider: str | None = None) -> str:
    """Return the API key configured for a provider ("" when missing)."""
    key_map = {
        "openai": LLM_GATEWAY_API_KEY,
        "anthropic": ANTHROPIC_API_KEY,
        "google": GOOGLE_API_KEY,
    }
    return key_map.get(provider or LLM_PROVIDER, "")


def storage_configured() -> bool:
    return bool(SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY)
