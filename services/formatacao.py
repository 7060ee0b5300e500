"""Formatação monetária e numérica em português (Brasil).

Todas as funções deste módulo são tolerantes: entradas ausentes ou inválidas
produzem um valor neutro (``R$ 0,00``, texto vazio) em vez de exceções, pois
são chamadas a cada alteração do formulário.
"""

from __future__ import annotations

import math
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from num2words import num2words

UNIDADE_SINGULAR = "real"
UNIDADE_PLURAL = "reais"
SUBUNIDADE_SINGULAR = "centavo"
SUBUNIDADE_PLURAL = "centavos"
MOEDA_ZERO = "R$ 0,00"

MESES = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)


# Converte número ou texto numérico (ponto ou vírgula decimal) em float.
def converter_numero(valor: Any) -> float | None:
    if valor is None or isinstance(valor, bool):
        return None
    if isinstance(valor, (int, float, Decimal)):
        numero = float(valor)
    else:
        texto = str(valor).strip().replace("R$", "").replace(" ", "")
        if not texto:
            return None
        if "," in texto:
            texto = texto.replace(".", "").replace(",", ".")
        try:
            numero = float(texto)
        except ValueError:
            return None
    if not math.isfinite(numero):
        return None
    return numero


def _agrupar_milhar(inteiro: int) -> str:
    return f"{inteiro:,}".replace(",", ".")


# Formata um valor como moeda brasileira: 1234.5 -> "R$ 1.234,50".
def formatar_moeda(valor: Any) -> str:
    numero = converter_numero(valor)
    if numero is None:
        return MOEDA_ZERO
    centavos_totais = int(
        (Decimal(str(abs(numero))) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    )
    inteiro, centavos = divmod(centavos_totais, 100)
    sinal = "-" if numero < 0 and centavos_totais else ""
    return f"{sinal}R$ {_agrupar_milhar(inteiro)},{centavos:02d}"


# Formata quantidades simples (percentuais, dias): 12.5 -> "12,5", 20.0 -> "20".
def formatar_numero(valor: Any) -> str:
    numero = converter_numero(valor)
    if numero is None:
        return ""
    if numero.is_integer():
        return str(int(numero))
    return f"{numero:.2f}".rstrip("0").rstrip(".").replace(".", ",")


def numero_por_extenso(n: Any) -> str:
    """Escreve um número por extenso, sem unidade: 21 -> "vinte e um".

    Valores fora do alcance do num2words (>= 10^18) ficam sem extenso.
    """
    numero = converter_numero(n)
    if numero is None:
        return ""
    alvo: int | float = int(numero) if numero.is_integer() else numero
    try:
        return num2words(alvo, lang="pt_BR").replace("-", " ")
    except OverflowError:
        return ""


def _unidade(quantidade: int, singular: str, plural: str) -> str:
    if quantidade == 1:
        return singular
    # "um milhão de reais", "dois bilhões de reais"
    if quantidade >= 1_000_000 and quantidade % 1_000_000 == 0:
        return f"de {plural}"
    return plural


def valor_por_extenso(
    valor: Any,
    singular: str = UNIDADE_SINGULAR,
    plural: str = UNIDADE_PLURAL,
    sub_singular: str = SUBUNIDADE_SINGULAR,
    sub_plural: str = SUBUNIDADE_PLURAL,
) -> str:
    """
    Escreve um valor monetário por extenso, pronto para ser concatenado após
    a moeda formatada: 2.5 -> " (dois reais e cinquenta centavos)".
    Retorna texto vazio quando o valor não é numérico ou não tem extenso.
    """
    numero = converter_numero(valor)
    if numero is None:
        return ""
    numero = abs(numero)
    inteiro = int(numero)
    centavos = int(math.floor((numero - inteiro) * 100 + 0.5))
    if centavos >= 100:
        inteiro += 1
        centavos -= 100

    extenso_inteiro = numero_por_extenso(inteiro)
    if not extenso_inteiro:
        return ""
    texto = f"{extenso_inteiro} {_unidade(inteiro, singular, plural)}"
    if centavos > 0:
        texto += f" e {numero_por_extenso(centavos)} {_unidade(centavos, sub_singular, sub_plural)}"
    return f" ({texto})"


# Percentual com extenso: "20" -> "20% (vinte por cento)".
def percentual_por_extenso(valor: Any, placeholder: str = "____") -> str:
    numero = formatar_numero(valor)
    if not numero:
        return f"{placeholder}%"
    extenso = numero_por_extenso(numero)
    if not extenso:
        return f"{numero}%"
    return f"{numero}% ({extenso} por cento)"


# Quantidade de dias com extenso: "7" -> "7 (sete) dias".
def dias_por_extenso(valor: Any, placeholder: str = "____") -> str:
    numero = formatar_numero(valor)
    if not numero:
        return f"{placeholder} dias"
    unidade = "dia" if converter_numero(numero) == 1 else "dias"
    extenso = numero_por_extenso(numero)
    if not extenso:
        return f"{numero} {unidade}"
    return f"{numero} ({extenso}) {unidade}"


# Data por extenso no padrão dos contratos: "15 de maio de 2025".
def data_por_extenso(data: date | None = None) -> str:
    data = data or date.today()
    return f"{data.day} de {MESES[data.month - 1]} de {data.year}"
