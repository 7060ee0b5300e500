from __future__ import annotations

import json
import re
from typing import Any

from services.config import IdentidadeEmpresa

PROMPT_DEMO_ORCAMENTO = """
Voce e um assistente comercial de uma produtora de video no Brasil e deve gerar
dados ficticios, porem plausiveis, para demonstrar um orcamento.

REGRAS CRITICAS (obrigatorias):
- O cliente deve ser ficticio (nome e endereco brasileiros).
- O item deve estar relacionado a producao de video ou marketing audiovisual.
- quantidade deve ser um inteiro positivo; preco_unitario em reais, com no maximo 2 casas decimais.
- Nao use Markdown nem explicacoes: responda somente com o JSON.

FORMATO DA SAIDA (JSON):
{
  "cliente": "...",
  "endereco_cliente": "...",
  "item": {"descricao": "...", "quantidade": 1, "preco_unitario": 0.0}
}
""".strip()


def montar_prompt_demo_orcamento(empresa: IdentidadeEmpresa) -> str:
    return f"""{PROMPT_DEMO_ORCAMENTO}

CONTEXTO DA PRODUTORA:
Nome: {empresa.nome}
Endereco: {empresa.endereco}
"""


def _remover_cercas(texto: str) -> str:
    texto = (texto or "").strip()
    texto = re.sub(r"^```(?:json)?\s*", "", texto)
    texto = re.sub(r"\s*```$", "", texto)
    return texto.strip()


def extrair_json(texto: str) -> dict[str, Any]:
    """
    Extrai o objeto JSON da resposta do modelo, tolerando cercas de código.
    Lança ValueError quando não há JSON válido.
    """
    limpo = _remover_cercas(texto)
    inicio = limpo.find("{")
    fim = limpo.rfind("}")
    if inicio < 0 or fim <= inicio:
        raise ValueError("Resposta sem objeto JSON.")
    try:
        dados = json.loads(limpo[inicio : fim + 1])
    except json.JSONDecodeError as exc:
        raise ValueError("Resposta com JSON inválido.") from exc
    if not isinstance(dados, dict):
        raise ValueError("Resposta com JSON inválido.")
    return dados
