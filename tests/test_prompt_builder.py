"""Tests for the demo-budget prompt and JSON extraction."""

import pytest

from services.prompt_builder import PROMPT_DEMO_ORCAMENTO, extrair_json, montar_prompt_demo_orcamento


class TestMontarPrompt:
    """Tests for montar_prompt_demo_orcamento."""

    def test_includes_rules_and_company(self, empresa):
        prompt = montar_prompt_demo_orcamento(empresa)
        assert prompt.startswith(PROMPT_DEMO_ORCAMENTO)
        assert f"Nome: {empresa.nome}" in prompt
        assert f"Endereco: {empresa.endereco}" in prompt


class TestExtrairJson:
    """Tests for extrair_json."""

    def test_plain_json(self):
        assert extrair_json('{"a": 1}') == {"a": 1}

    def test_fenced_json(self):
        assert extrair_json('```json\n{"a": 1}\n```') == {"a": 1}

    def test_json_with_surrounding_text(self):
        assert extrair_json('Aqui está: {"a": {"b": 2}} Obrigado!') == {"a": {"b": 2}}

    @pytest.mark.parametrize("texto", ["", "sem json", "[1, 2]", "{a: 1}"])
    def test_invalid(self, texto):
        with pytest.raises(ValueError):
            extrair_json(texto)
