from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

RAIZ_PROJETO = Path(__file__).resolve().parent.parent
PRESETS_PADRAO_PATH = RAIZ_PROJETO / "data" / "presets.json"
DEFAULT_MODEL = "gemini-2.5-flash"


@dataclass(frozen=True)
class IdentidadeEmpresa:
    """Dados fixos da empresa prestadora (parte constante dos contratos)."""

    nome: str
    cnpj: str
    endereco: str
    email: str
    telefone: str = ""
    endereco_sede: str = ""
    slogan: str = ""


@dataclass(frozen=True)
class PadroesContrato:
    """Valores padrão usados pelos compositores quando o formulário não informa."""

    percentual_sinal: int = 50
    unidade_moeda_singular: str = "real"
    unidade_moeda_plural: str = "reais"
    subunidade_singular: str = "centavo"
    subunidade_plural: str = "centavos"
    vias: str = "duas"


EMPRESA_PADRAO = IdentidadeEmpresa(
    nome="FastFilms",
    cnpj="53.525.841/0001-89",
    endereco="Rua Criativa, 789, Estúdio Central, Filmópolis - SP",
    email="contato@fastfilms.com",
    telefone="(11) 98765-4321",
    endereco_sede="Lagoa Santa/MG",
    slogan="cada momento merece um bom take!",
)

PADROES = PadroesContrato()


# Lê a identidade da empresa do ambiente, caindo para os valores padrão.
def carregar_empresa() -> IdentidadeEmpresa:
    def _env(nome: str, padrao: str) -> str:
        return (os.getenv(nome) or padrao).strip()

    return IdentidadeEmpresa(
        nome=_env("EMPRESA_NOME", EMPRESA_PADRAO.nome),
        cnpj=_env("EMPRESA_CNPJ", EMPRESA_PADRAO.cnpj),
        endereco=_env("EMPRESA_ENDERECO", EMPRESA_PADRAO.endereco),
        email=_env("EMPRESA_EMAIL", EMPRESA_PADRAO.email),
        telefone=_env("EMPRESA_TELEFONE", EMPRESA_PADRAO.telefone),
        endereco_sede=_env("EMPRESA_ENDERECO_SEDE", EMPRESA_PADRAO.endereco_sede),
        slogan=_env("EMPRESA_SLOGAN", EMPRESA_PADRAO.slogan),
    )


def caminho_presets() -> Path:
    valor = (os.getenv("PRESETS_PATH") or "").strip()
    return Path(valor) if valor else PRESETS_PADRAO_PATH


def modelo_gemini() -> str:
    return (os.getenv("GEMINI_MODEL") or DEFAULT_MODEL).strip()


def chave_gemini() -> str:
    return (os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or "").strip()
