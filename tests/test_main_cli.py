from __future__ import annotations

import argparse
import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import main


def _args(**overrides) -> argparse.Namespace:
    values = {
        "input": None,
        "copy_type": None,
        "framework": None,
        "objective": None,
        "styles": None,
        "emotional_focus": None,
        "copy_id": None,
        "project_id": None,
        "platform": None,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class LoadInputsTests(unittest.TestCase):
    def test_flags_override_json_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "request.json"
            path.write_text(
                json.dumps({"copyType": "email", "projectIdentity": {"brand_name": "Acme"}}),
                "utf-8",
            )
            inputs = main.load_inputs(_args(input=str(path), copy_type="anuncio", styles=["urgente"]))

        self.assertEqual(inputs["copyType"], "anuncio")
        self.assertEqual(inputs["styles"], ["urgente"])
        self.assertEqual(inputs["projectIdentity"], {"brand_name": "Acme"})
        self.assertNotIn("framework", inputs)

    def test_flags_only(self):
        inputs = main.load_inputs(_args(framework="aida", emotional_focus="dor"))
        self.assertEqual(inputs, {"framework": "aida", "emotionalFocus": "dor"})

    def test_missing_file_exits(self):
        with patch.object(main.console, "print"):
            with self.assertRaises(SystemExit):
                main.load_inputs(_args(input="/nonexistent/request.json"))


class CommandTests(unittest.TestCase):
    def test_compile_prints_context_without_llm(self):
        with patch("pipeline.system_prompt_generator.call_llm") as call_llm, patch.object(
            main.console, "print"
        ) as printed:
            main.run_compile({"copyType": "email", "projectIdentity": {"brand_name": "Acme"}})

        call_llm.assert_not_called()
        output = " ".join(str(c.args[0]) for c in printed.call_args_list if c.args)
        self.assertIn("Context hash", output)

    def test_compile_with_no_context_exits(self):
        with patch.object(main.console, "print"):
            with self.assertRaises(SystemExit):
                main.run_compile({"copyType": ""})

    def test_catalog_lists_codes(self):
        with patch.object(main.console, "print") as printed:
            main.run_catalog("framework")
        table = printed.call_args.args[0]
        self.assertEqual(table.title, "framework")
        self.assertEqual(table.row_count, 7)


if __name__ == "__main__":
    unittest.main()
