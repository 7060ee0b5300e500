"""Armazenamento local dos itens pré-definidos de orçamento (presets)."""

from __future__ import annotations

import json
import logging
import os
import uuid
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from services.config import PRESETS_PADRAO_PATH
from services.formatacao import converter_numero

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PresetItem:
    id: str
    descricao: str
    preco_unitario: float


def _preset_de_dict(dados: Any) -> PresetItem | None:
    if not isinstance(dados, dict):
        return None
    descricao = str(dados.get("descricao") or "").strip()
    preco = converter_numero(dados.get("preco_unitario"))
    if not descricao or preco is None:
        return None
    return PresetItem(id=str(dados.get("id") or uuid.uuid4().hex), descricao=descricao, preco_unitario=preco)


def _ler_arquivo(caminho: Path) -> list[PresetItem]:
    dados = json.loads(caminho.read_text(encoding="utf-8"))
    if not isinstance(dados, list):
        raise ValueError("Arquivo de presets deve conter uma lista.")
    return [preset for preset in (_preset_de_dict(item) for item in dados) if preset is not None]


def presets_iniciais() -> list[PresetItem]:
    try:
        return _ler_arquivo(PRESETS_PADRAO_PATH)
    except (OSError, ValueError) as exc:
        logger.warning("Presets padrão indisponíveis em %s: %s", PRESETS_PADRAO_PATH, exc)
        return []


def carregar_presets(caminho: Path) -> list[PresetItem]:
    """
    Lê os presets salvos. Sem arquivo, ou com arquivo corrompido, volta para
    os presets padrão distribuídos com a aplicação.
    """
    caminho = Path(caminho)
    if not caminho.exists():
        return presets_iniciais()
    try:
        return _ler_arquivo(caminho)
    except (OSError, ValueError) as exc:
        logger.warning("Falha ao ler presets de %s: %s", caminho, exc)
        return presets_iniciais()


def salvar_presets(caminho: Path, presets: list[PresetItem]) -> None:
    caminho = Path(caminho)
    caminho.parent.mkdir(parents=True, exist_ok=True)
    temporario = caminho.with_suffix(caminho.suffix + ".tmp")
    conteudo = json.dumps([asdict(preset) for preset in presets], ensure_ascii=False, indent=2)
    temporario.write_text(conteudo, encoding="utf-8")
    os.replace(temporario, caminho)
    logger.info("%d presets salvos em %s", len(presets), caminho)


def _validar(descricao: str, preco_unitario: Any) -> tuple[str, float]:
    texto = (descricao or "").strip()
    if not texto:
        raise ValueError("Descrição do preset é obrigatória.")
    preco = converter_numero(preco_unitario)
    if preco is None or preco < 0:
        raise ValueError("Preço do preset deve ser um número não negativo.")
    return texto, preco


def adicionar_preset(presets: list[PresetItem], descricao: str, preco_unitario: Any) -> list[PresetItem]:
    texto, preco = _validar(descricao, preco_unitario)
    return [*presets, PresetItem(id=uuid.uuid4().hex, descricao=texto, preco_unitario=preco)]


def atualizar_preset(
    presets: list[PresetItem],
    preset_id: str,
    descricao: str,
    preco_unitario: Any,
) -> list[PresetItem]:
    texto, preco = _validar(descricao, preco_unitario)
    if not any(preset.id == preset_id for preset in presets):
        raise ValueError("Preset não encontrado.")
    return [
        PresetItem(id=preset.id, descricao=texto, preco_unitario=preco) if preset.id == preset_id else preset
        for preset in presets
    ]


def remover_preset(presets: list[PresetItem], preset_id: str) -> list[PresetItem]:
    return [preset for preset in presets if preset.id != preset_id]
