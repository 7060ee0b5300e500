from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable

from services.documento import Segmento


@lru_cache(maxsize=128)
def _padrao_termos(termos: tuple[str, ...]) -> re.Pattern[str] | None:
    alternativas = "|".join(re.escape(termo) for termo in termos)
    if not alternativas:
        return None
    return re.compile(rf"\b({alternativas})\b", re.IGNORECASE)


def _normalizar_termos(termos: Iterable[str]) -> tuple[str, ...]:
    vistos: set[str] = set()
    resultado: list[str] = []
    for termo in termos or ():
        texto = (termo or "").strip()
        if not texto or texto.casefold() in vistos:
            continue
        vistos.add(texto.casefold())
        resultado.append(texto)
    return tuple(resultado)


def destacar_termos(texto: str, termos: Iterable[str]) -> list[Segmento]:
    """
    Divide o texto em segmentos alternados comuns/destacados.

    A busca é por palavra inteira e sem diferenciar maiúsculas, de modo que
    "CONTRATANTE" nunca casa dentro de "CONTRATANTES". A concatenação dos
    segmentos reconstrói o texto original.
    """
    texto = texto or ""
    if not texto:
        return [Segmento("", False)]

    termos_norm = _normalizar_termos(termos)
    padrao = _padrao_termos(termos_norm)
    if padrao is None:
        return [Segmento(texto, False)]

    chaves = {termo.casefold() for termo in termos_norm}
    segmentos: list[Segmento] = []
    for pedaco in padrao.split(texto):
        if not pedaco:
            continue
        segmentos.append(Segmento(pedaco, pedaco.casefold() in chaves))
    return segmentos or [Segmento("", False)]
