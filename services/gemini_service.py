from __future__ import annotations

import logging
from dataclasses import dataclass

from google import genai

from services.config import DEFAULT_MODEL, IdentidadeEmpresa, chave_gemini, modelo_gemini
from services.formatacao import converter_numero
from services.prompt_builder import extrair_json, montar_prompt_demo_orcamento

logger = logging.getLogger(__name__)


# Define um tipo de erro específico para falhas de integração com o Gemini.
class GeminiServiceError(RuntimeError):
    """Raised when Gemini generation fails."""


@dataclass(frozen=True)
class DadosDemoOrcamento:
    cliente: str
    endereco_cliente: str
    descricao: str
    quantidade: float
    preco_unitario: float


DADOS_DEMO_PADRAO = DadosDemoOrcamento(
    cliente="Cliente Exemplo IA",
    endereco_cliente="Rua da Inteligência Artificial, 101\nTecnópolis, IA 90210",
    descricao="Consultoria em Estratégia de Vídeo Marketing",
    quantidade=1,
    preco_unitario=750.50,
)


# Envia o prompt ao Gemini e retorna o texto gerado, com tratamento de erros de cota e autenticação.
def gerar_texto(prompt: str, model: str | None = None, api_key: str | None = None) -> str:
    """
    Gera texto usando Gemini.
    Requer GEMINI_API_KEY ou GOOGLE_API_KEY no ambiente.
    """
    key = (api_key or chave_gemini()).strip()
    if not key:
        raise GeminiServiceError("Configure GEMINI_API_KEY (ou GOOGLE_API_KEY) no ambiente.")

    chosen_model = (model or modelo_gemini() or DEFAULT_MODEL).strip()

    try:
        client = genai.Client(api_key=key)
        response = client.models.generate_content(
            model=chosen_model,
            contents=prompt,
        )
    except Exception as exc:  # pragma: no cover
        raw_msg = str(exc)
        msg_lower = raw_msg.lower()
        if "resource_exhausted" in msg_lower or "quota" in msg_lower or "429" in msg_lower:
            raise GeminiServiceError(
                "Cota da API Gemini esgotada (HTTP 429 RESOURCE_EXHAUSTED). "
                "No Google AI Studio/Google Cloud, habilite faturamento no projeto da chave "
                "ou use outra chave/projeto com cota disponivel."
            ) from exc
        raise GeminiServiceError(f"Falha ao chamar Gemini ({chosen_model}): {raw_msg}") from exc

    text = (response.text or "").strip()
    if not text:
        raise GeminiServiceError("Gemini nao retornou texto.")
    return text


def gerar_dados_demo_orcamento(
    empresa: IdentidadeEmpresa,
    model: str | None = None,
    api_key: str | None = None,
) -> DadosDemoOrcamento:
    """Pede ao Gemini dados fictícios de orçamento e valida o JSON retornado."""
    texto = gerar_texto(montar_prompt_demo_orcamento(empresa), model=model, api_key=api_key)
    try:
        dados = extrair_json(texto)
    except ValueError as exc:
        raise GeminiServiceError(f"Gemini retornou dados inválidos: {exc}") from exc

    item = dados.get("item") if isinstance(dados.get("item"), dict) else {}
    quantidade = converter_numero(item.get("quantidade"))
    preco = converter_numero(item.get("preco_unitario"))
    cliente = str(dados.get("cliente") or "").strip()
    descricao = str(item.get("descricao") or "").strip()
    if not cliente or not descricao or quantidade is None or preco is None:
        raise GeminiServiceError("Gemini retornou dados de orçamento incompletos.")

    logger.info("Dados de demonstração gerados pelo modelo %s", model or modelo_gemini())
    return DadosDemoOrcamento(
        cliente=cliente,
        endereco_cliente=str(dados.get("endereco_cliente") or "").strip(),
        descricao=descricao,
        quantidade=quantidade,
        preco_unitario=preco,
    )
