"""Peças comuns aos compositores de contratos."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Any, Iterable

from services.config import PadroesContrato
from services.destaque_termos import destacar_termos
from services.documento import Assinatura, Clausula, LinhaData, Paragrafo, Titulo
from services.formatacao import converter_numero, formatar_moeda, valor_por_extenso

PLACEHOLDER_CURTO = "_" * 19
PLACEHOLDER_LONGO = "_" * 120

INTRODUCAO = "Pelo presente instrumento particular, as partes abaixo identificadas:"


def presente(texto: str | None) -> bool:
    return bool((texto or "").strip())


def texto_ou(texto: str | None, padrao: str = PLACEHOLDER_CURTO) -> str:
    limpo = (texto or "").strip()
    return limpo or padrao


# Converte texto multilinha em alíneas: "a) item;\nb) item."
def alineas(texto: str | None, padrao: str = PLACEHOLDER_LONGO) -> str:
    itens: list[str] = []
    for linha in (texto or "").splitlines():
        item = linha.strip().lstrip("-*•").strip().rstrip(";.")
        if item:
            itens.append(item)
    if not itens:
        return padrao

    letras = string.ascii_lowercase
    linhas: list[str] = []
    for idx, item in enumerate(itens):
        letra = letras[idx] if idx < len(letras) else str(idx + 1)
        final = "." if idx == len(itens) - 1 else ";"
        linhas.append(f"{letra}) {item}{final}")
    return "\n".join(linhas)


# Valor em moeda seguido do extenso: "R$ 10,00 (dez reais)".
def valor_com_extenso(valor: Any, padroes: PadroesContrato) -> str:
    if converter_numero(valor) is None:
        return f"R$ {PLACEHOLDER_CURTO} ({PLACEHOLDER_CURTO} {padroes.unidade_moeda_plural})"
    extenso = valor_por_extenso(
        valor,
        singular=padroes.unidade_moeda_singular,
        plural=padroes.unidade_moeda_plural,
        sub_singular=padroes.subunidade_singular,
        sub_plural=padroes.subunidade_plural,
    )
    return f"{formatar_moeda(valor)}{extenso}"


@dataclass(frozen=True)
class Redator:
    """Gera blocos destacando sempre os mesmos termos definidos."""

    termos: tuple[str, ...]

    @classmethod
    def para(cls, termos: Iterable[str], titulo: str) -> "Redator":
        return cls(tuple(termos) + ((titulo or "").strip().upper(),))

    def segmentos(self, texto: str) -> tuple:
        return tuple(destacar_termos(texto, self.termos))

    def titulo(self, texto: str) -> Titulo:
        return Titulo(self.segmentos((texto or "").strip().upper()))

    def paragrafo(self, texto: str) -> Paragrafo:
        return Paragrafo(self.segmentos(texto))

    def clausula(self, numero: int | None, titulo: str, texto: str, evitar_quebra: bool = True) -> Clausula:
        return Clausula(numero, titulo, self.segmentos(texto), evitar_quebra)

    def abertura(self, titulo: str) -> Paragrafo:
        return self.paragrafo(
            f"têm, entre si, justo e contratado o presente {(titulo or '').strip().upper()}, "
            "que se regerá pelas cláusulas e condições seguintes:"
        )

    def fechamento(self, padroes: PadroesContrato) -> Paragrafo:
        return self.paragrafo(
            "E, por estarem assim justos e contratados, firmam o presente instrumento "
            f"em {padroes.vias} vias de igual teor."
        )


class Numerador:
    """Contador de cláusulas: cada cláusula emitida consome o próximo número."""

    def __init__(self, inicio: int = 1) -> None:
        self._atual = inicio - 1

    def proximo(self) -> int:
        self._atual += 1
        return self._atual


def clausula_foro(redator: Redator, numero: int, foro: str) -> Clausula:
    return redator.clausula(
        numero,
        "DO FORO",
        "Para dirimir eventuais dúvidas ou conflitos oriundos deste contrato, as partes "
        f"elegem o foro da comarca de {texto_ou(foro)}.",
    )


def assinatura_empresa(papel: str, nome_empresa: str) -> Assinatura:
    nome = (nome_empresa or "").strip()
    return Assinatura(f"{papel} ({nome})" if nome else papel)


def linha_data(cidade: str, data_extenso: str) -> LinhaData:
    return LinhaData(f"{texto_ou(cidade)}, {texto_ou(data_extenso)}.")
