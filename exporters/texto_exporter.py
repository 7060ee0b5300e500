from __future__ import annotations

from services.documento import (
    Assinatura,
    Aviso,
    BlocoParte,
    Clausula,
    Documento,
    LinhaData,
    Paragrafo,
    Titulo,
)

LINHA_ASSINATURA = "_" * 42


def documento_para_texto(documento: Documento) -> str:
    """Renderiza o documento como texto puro, um bloco por parágrafo."""
    partes: list[str] = []
    for bloco in documento:
        if isinstance(bloco, (Titulo, Paragrafo)):
            partes.append(bloco.texto)
        elif isinstance(bloco, BlocoParte):
            linhas = [f"{bloco.titulo}:"]
            linhas.extend(f"{linha.rotulo}: {linha.valor}" for linha in bloco.linhas)
            partes.append("\n".join(linhas))
        elif isinstance(bloco, Clausula):
            partes.append(f"{bloco.cabecalho}\n{bloco.texto}")
        elif isinstance(bloco, Assinatura):
            partes.append(f"{LINHA_ASSINATURA}\n{bloco.rotulo}")
        elif isinstance(bloco, (LinhaData, Aviso)):
            partes.append(bloco.texto)
    return "\n\n".join(partes)
