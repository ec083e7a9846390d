from __future__ import annotations

import unittest

from pipeline.project_prompt import (
    IDENTITY_TITLE,
    METHODOLOGY_TITLE,
    build_project_prompt,
    extract_project_identity,
    extract_project_methodology,
)
from schemas.project import ProjectIdentity, ProjectMethodology


class ProjectPromptTests(unittest.TestCase):
    def test_missing_records_give_empty_prompt(self):
        self.assertEqual(build_project_prompt(), "")
        self.assertEqual(build_project_prompt(ProjectIdentity(), ProjectMethodology()), "")

    def test_identity_lines_only_for_present_fields(self):
        identity = ProjectIdentity(
            brand_name="Acme",
            sector="Educação",
            voice_tones=["direto", "acolhedor"],
        )
        self.assertEqual(
            build_project_prompt(identity),
            "## IDENTIDADE DO PROJETO\n"
            "Nome da marca: Acme\n"
            "Setor: Educação\n"
            "Tons de voz: direto, acolhedor",
        )

    def test_methodology_paragraphs_follow_field_order(self):
        methodology = ProjectMethodology(
            prova_funcionamento="300 alunas formadas",
            name="Método Raiz",
            etapas_metodo=["Diagnóstico", "Plano de ação"],
        )
        prompt = build_project_prompt(methodology=methodology)

        self.assertTrue(prompt.startswith(METHODOLOGY_TITLE + "\n\n"))
        self.assertIn("**Nome da Metodologia:**\nMétodo Raiz", prompt)
        self.assertIn("**Etapas do Método:**\n- Diagnóstico\n- Plano de ação", prompt)
        self.assertLess(prompt.index("Nome da Metodologia"), prompt.index("Etapas do Método"))
        self.assertLess(prompt.index("Etapas do Método"), prompt.index("Prova de Funcionamento"))
        self.assertNotIn("Tese Central", prompt)

    def test_identity_comes_before_methodology(self):
        prompt = build_project_prompt(
            ProjectIdentity(brand_name="Acme"),
            ProjectMethodology(tese_central="Constância vence intensidade"),
        )
        identity_block, methodology_block = prompt.split("\n\n", 1)
        self.assertEqual(identity_block, f"{IDENTITY_TITLE}\nNome da marca: Acme")
        self.assertTrue(methodology_block.startswith(METHODOLOGY_TITLE))

    def test_deterministic(self):
        identity = ProjectIdentity(brand_name="Acme", keywords=["foco", "rotina"])
        methodology = ProjectMethodology(mecanismo_primario="Ciclo 3x3")
        self.assertEqual(
            build_project_prompt(identity, methodology),
            build_project_prompt(identity, methodology),
        )


class ProjectExtractionTests(unittest.TestCase):
    def test_extract_identity_from_row(self):
        identity = extract_project_identity(
            {"id": "p1", "brand_name": "Acme", "keywords": "foco; rotina", "owner": "u1"}
        )
        self.assertEqual(identity.brand_name, "Acme")
        self.assertEqual(identity.keywords, ["foco", "rotina"])

    def test_extract_identity_without_data(self):
        self.assertIsNone(extract_project_identity(None))
        self.assertIsNone(extract_project_identity({"id": "p1"}))

    def test_extract_methodology(self):
        methodology = extract_project_methodology({"methodology": {"tese_central": "Tese", "extra": 1}})
        self.assertEqual(methodology.tese_central, "Tese")
        self.assertIsNone(extract_project_methodology({"methodology": {}}))
        self.assertIsNone(extract_project_methodology({"methodology": "texto solto"}))
        self.assertIsNone(extract_project_methodology({}))


if __name__ == "__main__":
    unittest.main()
