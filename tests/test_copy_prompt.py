from __future__ import annotations

import itertools
import unittest

from pipeline.copy_prompt import (
    AUDIENCE_TITLE,
    COPY_TYPE_TITLE,
    EMOTIONAL_FOCUS_TITLE,
    OFFER_TITLE,
    SECTION_ORDER,
    STYLE_SEPARATOR,
    build_copy_prompt,
    format_demographics,
)
from pipeline.system_prompt_generator import SystemPromptGenerator
from prompts.copy_types import COPY_TYPE_DESCRIPTIONS
from prompts.emotional_focus import EMOTIONAL_FOCUS_DESCRIPTIONS
from prompts.objectives import OBJECTIVE_DESCRIPTIONS
from prompts.styles import STYLE_DESCRIPTIONS
from schemas.copy_context import AudienceSegment, CopyContext, Demographics, Offer
from schemas.system_prompt import GenerateSystemPromptRequest

FULL_FIELDS = {
    "framework": "pas",
    "audience": AudienceSegment(segment_name="Mães empreendedoras", pain_points=["Sem tempo"]),
    "offer": Offer(offer_name="Mentoria 12 semanas", main_benefit="Rotina organizada"),
    "objective": "geracao_leads",
    "styles": ["conversacional"],
    "emotional_focus": "transformacao",
}


def _headers_in_order(prompt: str) -> list[str]:
    present = [title for title in SECTION_ORDER if title in prompt]
    return sorted(present, key=prompt.index)


class CopyPromptTests(unittest.TestCase):
    def test_only_type_section_when_nothing_else_is_set(self):
        prompt = build_copy_prompt(CopyContext(copy_type="landing_page"))
        self.assertEqual(prompt, f"{COPY_TYPE_TITLE}\n{COPY_TYPE_DESCRIPTIONS['landing_page']}")
        for title in SECTION_ORDER[1:]:
            self.assertNotIn(title, prompt)

    def test_copy_type_defaults_to_outro(self):
        self.assertEqual(CopyContext.model_validate({}).copy_type, "outro")
        self.assertEqual(CopyContext.model_validate({"copyType": None}).copy_type, "outro")
        self.assertEqual(CopyContext.model_validate({"copyType": ""}).copy_type, "")
        self.assertEqual(build_copy_prompt(CopyContext(copy_type="")), "")

    def test_unknown_codes_reach_the_prompt_raw(self):
        prompt = build_copy_prompt(CopyContext(copy_type="xyz_custom", objective="objetivo livre"))
        self.assertIn(f"{COPY_TYPE_TITLE}\nxyz_custom", prompt)
        self.assertIn("objetivo livre", prompt)

    def test_sections_follow_fixed_order_for_every_combination(self):
        names = list(FULL_FIELDS)
        for size in range(len(names) + 1):
            for combo in itertools.combinations(names, size):
                context = CopyContext(copy_type="anuncio", **{name: FULL_FIELDS[name] for name in combo})
                prompt = build_copy_prompt(context)
                headers = _headers_in_order(prompt)
                expected = [t for t in SECTION_ORDER if t in headers]
                self.assertEqual(headers, expected, f"combo={combo}")
                self.assertEqual(len(headers), size + 1, f"combo={combo}")

    def test_audience_section(self):
        audience = AudienceSegment(
            segment_name="Mães empreendedoras",
            description="Donas de pequenos negócios",
            demographics=Demographics(age_range="28-40", location="São Paulo"),
            pain_points=["Sem tempo", "Culpa"],
            desires=["Liberdade"],
        )
        prompt = build_copy_prompt(CopyContext(copy_type="", audience=audience))
        self.assertEqual(
            prompt,
            f"{AUDIENCE_TITLE}\n"
            "Segmento: Mães empreendedoras\n"
            "Descrição: Donas de pequenos negócios\n"
            "Demografia: Faixa etária: 28-40, Localização: São Paulo\n"
            "Dores:\n- Sem tempo\n- Culpa\n"
            "Desejos:\n- Liberdade",
        )

    def test_empty_audience_and_offer_are_dropped(self):
        prompt = build_copy_prompt(
            CopyContext(copy_type="email", audience=AudienceSegment(), offer=Offer())
        )
        self.assertNotIn(AUDIENCE_TITLE, prompt)
        self.assertNotIn(OFFER_TITLE, prompt)

    def test_offer_section(self):
        offer = Offer(
            offer_name="Mentoria",
            value_proposition="Rotina em 12 semanas",
            secondary_benefits=["Comunidade", "Suporte"],
        )
        prompt = build_copy_prompt(CopyContext(copy_type="", offer=offer))
        self.assertEqual(
            prompt,
            f"{OFFER_TITLE}\n"
            "Nome: Mentoria\n"
            "Proposta de valor: Rotina em 12 semanas\n"
            "Benefícios secundários:\n- Comunidade\n- Suporte",
        )

    def test_styles_are_joined_with_separator(self):
        prompt = build_copy_prompt(
            CopyContext(copy_type="", styles=["storytelling", "urgente"], emotional_focus="dor")
        )
        self.assertIn(
            STYLE_DESCRIPTIONS["storytelling"] + STYLE_SEPARATOR + STYLE_DESCRIPTIONS["urgente"],
            prompt,
        )
        self.assertTrue(prompt.endswith(f"{EMOTIONAL_FOCUS_TITLE}\n{EMOTIONAL_FOCUS_DESCRIPTIONS['dor']}"))

    def test_styles_accept_comma_string(self):
        context = CopyContext.model_validate({"styles": "storytelling, urgente"})
        self.assertEqual(context.styles, ["storytelling", "urgente"])

    def test_custom_style_tags_reach_prompt_verbatim(self):
        request = GenerateSystemPromptRequest.model_validate(
            {"copyType": "email", "styles": ["3-2-1 contagem regressiva", "1) minimalista", "*", "  "]}
        )
        context = request.to_copy_context()
        self.assertEqual(context.styles, ["3-2-1 contagem regressiva", "1) minimalista", "*"])

        prompt = build_copy_prompt(context)
        self.assertTrue(
            prompt.endswith(
                "## ESTILOS\n3-2-1 contagem regressiva"
                + STYLE_SEPARATOR + "1) minimalista"
                + STYLE_SEPARATOR + "*"
            )
        )

    def test_request_and_context_coerce_styles_alike(self):
        raw = {"copyType": None, "styles": " storytelling ,, - urgente,<b>x</b>"}
        request = GenerateSystemPromptRequest.model_validate(raw)
        context = CopyContext.model_validate(raw)

        self.assertEqual(request.styles, ["storytelling", "- urgente", "<b>x</b>"])
        self.assertEqual(request.to_copy_context().styles, context.styles)
        self.assertEqual(request.copy_type, context.copy_type)
        self.assertEqual(context.copy_type, "outro")

    def test_format_demographics(self):
        self.assertEqual(format_demographics(Demographics()), "")
        self.assertEqual(
            format_demographics(Demographics(gender="Feminino", income_level="Classe B")),
            "Gênero: Feminino, Nível de renda: Classe B",
        )

    def test_deterministic(self):
        context = CopyContext(copy_type="vsl", **FULL_FIELDS)
        self.assertEqual(build_copy_prompt(context), build_copy_prompt(context))


class CompiledContextExampleTests(unittest.TestCase):
    def test_email_sale_storytelling_example(self):
        request = GenerateSystemPromptRequest.model_validate(
            {
                "copyType": "email",
                "objective": "venda_direta",
                "styles": ["storytelling"],
                "projectIdentity": {"brand_name": "Acme"},
            }
        )
        compiled = SystemPromptGenerator(llm_call=lambda **kw: None).compile_context(request)
        context = compiled.full_context

        markers = [
            "IDENTIDADE",
            "Acme",
            COPY_TYPE_DESCRIPTIONS["email"],
            OBJECTIVE_DESCRIPTIONS["venda_direta"],
            STYLE_DESCRIPTIONS["storytelling"],
        ]
        positions = [context.index(m) for m in markers]
        self.assertEqual(positions, sorted(positions))
        self.assertIn("\n\n---\n\n", context)


if __name__ == "__main__":
    unittest.main()
