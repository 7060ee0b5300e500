"""Ponto de entrada único do motor de composição de contratos."""

from __future__ import annotations

import logging
from typing import Any, Callable

from services.config import PADROES, IdentidadeEmpresa, PadroesContrato
from services.contrato_autorizacao import compor_autorizacao
from services.contrato_editor import compor_editor
from services.contrato_filmmaker import compor_filmmaker
from services.contrato_permuta import compor_permuta
from services.contrato_servico_video import compor_servico_video
from services.documento import Aviso, Bloco, Documento
from services.modelos_contrato import (
    TIPO_AUTORIZACAO,
    TIPO_EDITOR,
    TIPO_FILMMAKER,
    TIPO_PERMUTA,
    TIPO_SERVICO_VIDEO,
    contrato_de_dict,
    tipo_do_contrato,
)

logger = logging.getLogger(__name__)

Compositor = Callable[[Any, IdentidadeEmpresa, PadroesContrato], list[Bloco]]

COMPOSITORES: dict[str, Compositor] = {
    TIPO_PERMUTA: compor_permuta,
    TIPO_SERVICO_VIDEO: compor_servico_video,
    TIPO_FILMMAKER: compor_filmmaker,
    TIPO_EDITOR: compor_editor,
    TIPO_AUTORIZACAO: compor_autorizacao,
}

AVISO_NAO_IMPLEMENTADO = "Pré-visualização para este tipo de contrato ainda não implementada."


def montar_documento(
    dados: Any,
    empresa: IdentidadeEmpresa,
    padroes: PadroesContrato = PADROES,
) -> Documento:
    """
    Monta o documento do contrato escolhendo o compositor pelo tipo.

    Aceita o dataclass do contrato ou um dicionário com a chave
    ``tipo_contrato``. Tipos desconhecidos resultam em um documento com um
    único bloco de aviso, nunca em exceção.
    """
    tipo = tipo_do_contrato(dados)
    compositor = COMPOSITORES.get(tipo)
    if compositor is None:
        logger.warning("Tipo de contrato sem compositor: %r", tipo)
        return Documento(tipo, (Aviso(AVISO_NAO_IMPLEMENTADO),))

    if isinstance(dados, dict):
        dados = contrato_de_dict(dados)

    blocos = compositor(dados, empresa, padroes)
    return Documento(tipo, tuple(blocos))
