"""Tests for the Gemini demo-data service."""

import json
from unittest.mock import MagicMock, patch

import pytest

from services.gemini_service import (
    DadosDemoOrcamento,
    GeminiServiceError,
    gerar_dados_demo_orcamento,
    gerar_texto,
)


def _cliente_com_resposta(texto):
    """Create a mock genai.Client whose model answers with `texto`."""
    cliente = MagicMock()
    cliente.models.generate_content.return_value = MagicMock(text=texto)
    return cliente


RESPOSTA_VALIDA = json.dumps(
    {
        "cliente": "Padaria Pão Quente",
        "endereco_cliente": "Rua do Trigo, 12\nCuritiba, PR",
        "item": {"descricao": "Vídeo institucional", "quantidade": 2, "preco_unitario": 1250.5},
    }
)


class TestGerarTexto:
    """Tests for gerar_texto."""

    def test_requires_api_key(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        with pytest.raises(GeminiServiceError, match="GEMINI_API_KEY"):
            gerar_texto("prompt")

    def test_returns_text(self):
        cliente = _cliente_com_resposta("  olá  ")
        with patch("services.gemini_service.genai.Client", return_value=cliente) as construtor:
            assert gerar_texto("prompt", model="modelo-x", api_key="chave") == "olá"
        construtor.assert_called_once_with(api_key="chave")
        cliente.models.generate_content.assert_called_once_with(model="modelo-x", contents="prompt")

    def test_empty_answer(self):
        with patch("services.gemini_service.genai.Client", return_value=_cliente_com_resposta("")):
            with pytest.raises(GeminiServiceError, match="nao retornou texto"):
                gerar_texto("prompt", api_key="chave")

    def test_quota_error_is_translated(self):
        cliente = MagicMock()
        cliente.models.generate_content.side_effect = RuntimeError("429 RESOURCE_EXHAUSTED")
        with patch("services.gemini_service.genai.Client", return_value=cliente):
            with pytest.raises(GeminiServiceError, match="Cota da API Gemini esgotada"):
                gerar_texto("prompt", api_key="chave")


class TestGerarDadosDemoOrcamento:
    """Tests for gerar_dados_demo_orcamento."""

    def test_valid_answer(self, empresa):
        resposta = f"```json\n{RESPOSTA_VALIDA}\n```"
        with patch("services.gemini_service.genai.Client", return_value=_cliente_com_resposta(resposta)):
            dados = gerar_dados_demo_orcamento(empresa, api_key="chave")
        assert dados == DadosDemoOrcamento(
            cliente="Padaria Pão Quente",
            endereco_cliente="Rua do Trigo, 12\nCuritiba, PR",
            descricao="Vídeo institucional",
            quantidade=2.0,
            preco_unitario=1250.5,
        )

    def test_prompt_mentions_company(self, empresa):
        cliente = _cliente_com_resposta(RESPOSTA_VALIDA)
        with patch("services.gemini_service.genai.Client", return_value=cliente):
            gerar_dados_demo_orcamento(empresa, api_key="chave")
        prompt = cliente.models.generate_content.call_args.kwargs["contents"]
        assert empresa.nome in prompt

    def test_invalid_json(self, empresa):
        with patch("services.gemini_service.genai.Client", return_value=_cliente_com_resposta("sem json")):
            with pytest.raises(GeminiServiceError, match="dados inválidos"):
                gerar_dados_demo_orcamento(empresa, api_key="chave")

    def test_incomplete_answer(self, empresa):
        resposta = json.dumps({"cliente": "X", "item": {"descricao": "Y", "quantidade": "muitos"}})
        with patch("services.gemini_service.genai.Client", return_value=_cliente_com_resposta(resposta)):
            with pytest.raises(GeminiServiceError, match="incompletos"):
                gerar_dados_demo_orcamento(empresa, api_key="chave")
