from __future__ import annotations

import asyncio
import unittest
from types import SimpleNamespace
from unittest.mock import patch

from fastapi.testclient import TestClient

import server
from pipeline.llm import LLMError

GOOD_PROMPT = (
    "Você é o copywriter da Acme. Escreva um email de vendas em português, com storytelling, "
    "falando diretamente com o público descrito e terminando com uma chamada clara para ação."
)

PAYLOAD = {
    "copyType": "email",
    "objective": "venda_direta",
    "styles": ["storytelling"],
    "projectIdentity": {"brand_name": "Acme"},
    "copyId": "copy-1",
}


class GenerateSystemPromptApiTests(unittest.TestCase):
    def setUp(self):
        for target, value in (
            ("server.config.LLM_GATEWAY_API_KEY", "test-key"),
            ("server.config.LLM_PROVIDER", "openai"),
            ("server.config.SUPABASE_URL", ""),
            ("server.config.SUPABASE_SERVICE_ROLE_KEY", ""),
            ("server.config.REQUIRE_AUTH", False),
        ):
            patcher = patch(target, value)
            patcher.start()
            self.addCleanup(patcher.stop)

        llm_patcher = patch("pipeline.system_prompt_generator.call_llm", return_value=GOOD_PROMPT)
        self.call_llm = llm_patcher.start()
        self.addCleanup(llm_patcher.stop)

        self.client = TestClient(server.app)

    def test_options_returns_cors_headers(self):
        for path in server.GENERATE_PATHS:
            resp = self.client.options(path)
            self.assertEqual(resp.status_code, 200)
            self.assertEqual(resp.headers["access-control-allow-origin"], "*")
            self.assertIn("x-client-info", resp.headers["access-control-allow-headers"])

    def test_browser_preflight(self):
        resp = self.client.options(
            "/generate-system-prompt",
            headers={
                "Origin": "https://app.example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "authorization, content-type",
            },
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers["access-control-allow-origin"], "*")

    def test_success_envelope(self):
        for path in server.GENERATE_PATHS:
            resp = self.client.post(path, json=PAYLOAD)

            self.assertEqual(resp.status_code, 200)
            self.assertEqual(resp.headers["access-control-allow-origin"], "*")
            body = resp.json()
            self.assertTrue(body["success"])
            self.assertEqual(body["systemPrompt"], GOOD_PROMPT)
            self.assertEqual(len(body["contextHash"]), 32)
            self.assertTrue(body["timestamp"].endswith("Z"))
            self.assertIn("model", body)

    def test_empty_llm_answer_still_succeeds(self):
        self.call_llm.return_value = ""
        with self.assertLogs("pipeline.system_prompt_generator", level="WARNING"):
            resp = self.client.post("/generate-system-prompt", json=PAYLOAD)

        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["success"])
        self.assertGreaterEqual(len(body["systemPrompt"]), 100)

    def test_no_context_returns_500_envelope(self):
        resp = self.client.post(
            "/generate-system-prompt", json={"copyType": "", "projectIdentity": {}}
        )

        self.assertEqual(resp.status_code, 500)
        body = resp.json()
        self.assertEqual(body["success"], False)
        self.assertEqual(body["fallback"], True)
        self.assertIn("No context available", body["error"])
        self.call_llm.assert_not_called()

    def test_missing_api_key_returns_500(self):
        with patch("server.config.LLM_GATEWAY_API_KEY", ""):
            resp = self.client.post("/generate-system-prompt", json=PAYLOAD)
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json()["error"], "LLM_GATEWAY_API_KEY not configured")

    def test_upstream_llm_error_returns_500_envelope(self):
        self.call_llm.side_effect = LLMError(
            "[openai/m] AI gateway returned 503: overloaded", status_code=503
        )

        resp = self.client.post("/generate-system-prompt", json=PAYLOAD)

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(
            resp.json(),
            {
                "success": False,
                "error": "[openai/m] AI gateway returned 503: overloaded",
                "fallback": True,
            },
        )

    def test_invalid_json_returns_500(self):
        resp = self.client.post(
            "/generate-system-prompt",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        self.assertEqual(resp.status_code, 500)
        self.assertIn("Invalid JSON body", resp.json()["error"])

    def test_persistence_failure_does_not_reach_response(self):
        with patch("server.config.SUPABASE_URL", "https://proj.supabase.co"), patch(
            "server.config.SUPABASE_SERVICE_ROLE_KEY", "service-key"
        ), patch(
            "pipeline.storage.save_generated_system_prompt", side_effect=RuntimeError("db down")
        ) as save:
            with self.assertLogs("pipeline.system_prompt_generator", level="ERROR"):
                resp = self.client.post("/generate-system-prompt", json=PAYLOAD)

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["systemPrompt"], GOOD_PROMPT)
        self.assertNotIn("db down", resp.text)
        save.assert_called_once()
        self.assertEqual(save.call_args.args[0], "copy-1")


class AuthTests(unittest.TestCase):
    def setUp(self):
        for target, value in (
            ("server.config.LLM_GATEWAY_API_KEY", "test-key"),
            ("server.config.LLM_PROVIDER", "openai"),
            ("server.config.SUPABASE_URL", ""),
            ("server.config.SUPABASE_SERVICE_ROLE_KEY", ""),
            ("server.config.REQUIRE_AUTH", True),
        ):
            patcher = patch(target, value)
            patcher.start()
            self.addCleanup(patcher.stop)

        llm_patcher = patch("pipeline.system_prompt_generator.call_llm", return_value=GOOD_PROMPT)
        llm_patcher.start()
        self.addCleanup(llm_patcher.stop)

        self.client = TestClient(server.app)

    def test_missing_header_is_401(self):
        resp = self.client.post("/generate-system-prompt", json=PAYLOAD)
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(
            resp.json(),
            {"success": False, "error": "Missing authorization header", "fallback": True},
        )

    def test_rejected_token_is_401(self):
        with patch("server.storage.verify_access_token", return_value=None):
            resp = self.client.post(
                "/generate-system-prompt", json=PAYLOAD, headers={"Authorization": "Bearer bad"}
            )
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["error"], "Unauthorized")

    def test_valid_token_is_accepted(self):
        with patch(
            "server.storage.verify_access_token", return_value=SimpleNamespace(id="user-1")
        ) as verify:
            resp = self.client.post(
                "/generate-system-prompt", json=PAYLOAD, headers={"Authorization": "Bearer good"}
            )
        self.assertEqual(resp.status_code, 200)
        verify.assert_called_once_with("good")


class HealthApiTests(unittest.TestCase):
    def test_health_reports_configuration(self):
        with patch("server.config.LLM_GATEWAY_API_KEY", "test-key"), patch(
            "server.config.LLM_PROVIDER", "openai"
        ), patch("server.config.SUPABASE_URL", ""):
            payload = asyncio.run(server.api_health())

        self.assertEqual(payload["status"], "ok")
        self.assertTrue(payload["llm_configured"])
        self.assertFalse(payload["storage_configured"])
        self.assertTrue(any("SUPABASE_URL" in w for w in payload["warnings"]))


if __name__ == "__main__":
    unittest.main()
