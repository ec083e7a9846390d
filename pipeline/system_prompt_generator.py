"""System prompt generator — the orchestration around the one LLM call.

Flow per request:
  1. Check that the LLM credential is configured.
  2. Resolve the project (inline identity, or load it by projectId).
  3. Compile project + copy prompts; refuse to continue with no context.
  4. Hash the context.
  5. Ask the model for a system prompt.
  6. Replace an empty / too-short answer with the local fallback template.
  7. Persist onto the copy (best-effort, never fails the request).

Steps 1-5 raise on failure; from step 6 on the caller always gets a usable
system prompt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from types import ModuleType
from typing import Any, Callable

import config
from pipeline import platform_limits
from pipeline import storage as storage_mod
from pipeline.context_hash import generate_context_hash
from pipeline.copy_prompt import build_copy_prompt
from pipeline.fallback import build_fallback_system_prompt
from pipeline.llm import call_llm
from pipeline.project_prompt import (
    build_project_prompt,
    extract_project_identity,
    extract_project_methodology,
)
from prompts.system_prompt_instruction import PROMPT_INSTRUCTION
from schemas.project import ProjectIdentity, ProjectMethodology
from schemas.system_prompt import GenerateSystemPromptRequest, GeneratedSystemPrompt

logger = logging.getLogger(__name__)

CONTEXT_SEPARATOR = "\n\n---\n\n"

USER_PROMPT_TEMPLATE = "Contexto do Projeto e da Copy:\n\n{context}\n\nGere o system prompt:"

_API_KEY_NAMES = {
    "openai": "LLM_GATEWAY_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "google": "GOOGLE_API_KEY",
}


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class SystemPromptError(Exception):
    """Fatal error: the request cannot produce a system prompt."""


class ConfigurationError(SystemPromptError):
    pass


class AuthorizationError(SystemPromptError):
    pass


class ProjectLookupError(SystemPromptError):
    pass


class EmptyContextError(SystemPromptError):
    pass


class ContextHashError(SystemPromptError):
    pass


_AUTH_MARKERS = ("Unauthorized", "Missing authorization")


def status_code_for_error(exc: BaseException) -> int:
    """401 for authentication-shaped errors, 500 for everything else."""
    message = str(exc)
    if any(marker in message for marker in _AUTH_MARKERS):
        return 401
    return 500


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CompiledContext:
    project_prompt: str
    copy_prompt: str

    @property
    def full_context(self) -> str:
        return CONTEXT_SEPARATOR.join(p for p in (self.project_prompt, self.copy_prompt) if p)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SystemPromptGenerator:
    """Turns a GenerateSystemPromptRequest into a GeneratedSystemPrompt.

    ``llm_call`` and ``storage`` are injectable so tests (and alternative
    runtimes) can swap the network collaborators. ``storage`` only needs
    ``fetch_project(project_id)`` and ``save_generated_system_prompt(copy_id, row)``.
    """

    def __init__(
        self,
        llm_call: Callable[..., str | None] | None = None,
        storage: ModuleType | Any | None = None,
        provider: str | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
        min_length: int | None = None,
    ):
        self.llm_call = llm_call or call_llm
        self.storage = storage or storage_mod
        self.provider = provider or config.LLM_PROVIDER
        self.model = model or config.SYSTEM_PROMPT_MODEL
        self.max_tokens = max_tokens or config.SYSTEM_PROMPT_MAX_TOKENS
        self.min_length = config.MIN_SYSTEM_PROMPT_LENGTH if min_length is None else min_length

    # -- steps -------------------------------------------------------------

    def check_configuration(self):
        if not config.get_llm_api_key(self.provider):
            key_name = _API_KEY_NAMES.get(self.provider, f"{self.provider.upper()}_API_KEY")
            raise ConfigurationError(f"{key_name} not configured")

    def resolve_project(
        self, request: GenerateSystemPromptRequest
    ) -> tuple[ProjectIdentity | None, ProjectMethodology | None]:
        identity = request.project_identity
        methodology = request.methodology
        if identity is not None or not request.project_id:
            return identity, methodology

        if not config.storage_configured():
            logger.warning(
                "projectId %s given but storage is not configured — compiling without project",
                request.project_id,
            )
            return identity, methodology

        try:
            project = self.storage.fetch_project(request.project_id)
        except Exception as exc:
            logger.error("Error fetching project %s: %s", request.project_id, exc)
            raise ProjectLookupError("Failed to fetch project data") from exc

        if project is None:
            raise ProjectLookupError(f"Project {request.project_id} not found")
        return (
            extract_project_identity(project),
            methodology or extract_project_methodology(project),
        )

    def compile_context(self, request: GenerateSystemPromptRequest) -> CompiledContext:
        identity, methodology = self.resolve_project(request)

        project_prompt = build_project_prompt(identity, methodology)
        logger.info("Project prompt built: %s", f"{len(project_prompt)} chars" if project_prompt else "empty")

        copy_prompt = build_copy_prompt(request.to_copy_context())
        logger.info("Copy prompt built: %s", f"{len(copy_prompt)} chars" if copy_prompt else "empty")

        compiled = CompiledContext(project_prompt, copy_prompt)
        if not compiled.full_context.strip():
            raise EmptyContextError("No context available to generate system prompt")
        return compiled

    def hash_context(self, compiled: CompiledContext) -> str:
        try:
            context_hash = generate_context_hash(compiled.project_prompt, compiled.copy_prompt)
        except Exception as exc:
            raise ContextHashError(f"Failed to generate context hash: {exc}") from exc
        logger.info("Context hash generated: %s", context_hash)
        return context_hash

    def is_usable(self, text: str | None) -> bool:
        return bool(text and text.strip()) and len(text.strip()) >= self.min_length

    # -- public API --------------------------------------------------------

    def generate(self, request: GenerateSystemPromptRequest) -> GeneratedSystemPrompt:
        """Run steps 1-6. Raises SystemPromptError / LLMError on fatal failures."""
        self.check_configuration()
        compiled = self.compile_context(request)
        context_hash = self.hash_context(compiled)
        full_context = compiled.full_context

        logger.info("Requesting system prompt from %s/%s", self.provider, self.model)
        generated = self.llm_call(
            system_prompt=PROMPT_INSTRUCTION,
            user_prompt=USER_PROMPT_TEMPLATE.format(context=full_context),
            provider=self.provider,
            model=self.model,
            max_tokens=self.max_tokens,
        )

        used_fallback = not self.is_usable(generated)
        if used_fallback:
            logger.warning(
                "Model returned %d usable chars (minimum %d) — using fallback template",
                len((generated or "").strip()), self.min_length,
            )
            system_prompt = build_fallback_system_prompt(full_context)
        else:
            system_prompt = generated.strip()
            logger.info("System prompt generated: %d chars", len(system_prompt))

        if request.platform and platform_limits.applies_to(request.copy_type):
            constraint = platform_limits.build_platform_constraint(request.platform)
            if constraint:
                system_prompt = f"{system_prompt}\n\n{constraint}"

        return GeneratedSystemPrompt(
            system_prompt=system_prompt,
            context_hash=context_hash,
            model=self.model,
            timestamp=utc_timestamp(),
            used_fallback=used_fallback,
            copy_id=request.copy_id,
        )

    def persist(self, result: GeneratedSystemPrompt) -> bool:
        """Best-effort write of the result onto its copy. Never raises."""
        if not result.copy_id:
            return False
        if not config.storage_configured():
            logger.info("Storage not configured — skipping persistence for copy %s", result.copy_id)
            return False
        try:
            self.storage.save_generated_system_prompt(result.copy_id, result.to_storage_row())
        except Exception:
            logger.exception("Failed to persist system prompt for copy %s", result.copy_id)
            return False
        return True

    def run(self, request: GenerateSystemPromptRequest) -> GeneratedSystemPrompt:
        """generate() then persist() — for callers without a background runner."""
        result = self.generate(request)
        self.persist(result)
        return result
