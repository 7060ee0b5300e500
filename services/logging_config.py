"""Configuração de logging da aplicação."""

from __future__ import annotations

import logging
import os

FORMATO_LOG = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configurar_logging(nivel: str | None = None) -> None:
    """Configura o logging raiz a partir de LOG_LEVEL (padrão INFO)."""
    nivel_final = (nivel or os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(nivel_final), int):
        nivel_final = "INFO"
    logging.basicConfig(level=nivel_final, format=FORMATO_LOG)
    logging.getLogger().setLevel(nivel_final)
