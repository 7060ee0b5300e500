from __future__ import annotations

import io

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH

from exporters.texto_exporter import LINHA_ASSINATURA
from services.documento import (
    Assinatura,
    Aviso,
    BlocoParte,
    Clausula,
    Documento,
    LinhaData,
    Paragrafo,
    Segmento,
    Titulo,
)


def _salvar(doc) -> bytes:
    bio = io.BytesIO()
    doc.save(bio)
    return bio.getvalue()


def texto_para_docx_bytes(titulo: str, texto: str) -> bytes:
    doc = Document()
    doc.add_heading(titulo, level=1)

    for linha in texto.splitlines():
        if linha.strip() == "":
            doc.add_paragraph("")
        else:
            doc.add_paragraph(linha)

    return _salvar(doc)


def _adicionar_segmentos(paragrafo, segmentos: tuple[Segmento, ...]) -> None:
    for segmento in segmentos:
        run = paragrafo.add_run(segmento.texto)
        run.bold = segmento.destaque


def documento_para_docx_bytes(documento: Documento) -> bytes:
    """Gera o DOCX do contrato preservando destaques e a dica de não quebrar cláusulas."""
    doc = Document()

    for bloco in documento:
        if isinstance(bloco, Titulo):
            paragrafo = doc.add_paragraph()
            paragrafo.alignment = WD_ALIGN_PARAGRAPH.CENTER
            run = paragrafo.add_run(bloco.texto)
            run.bold = True
        elif isinstance(bloco, Paragrafo):
            _adicionar_segmentos(doc.add_paragraph(), bloco.segmentos)
        elif isinstance(bloco, BlocoParte):
            cabecalho = doc.add_paragraph()
            cabecalho.add_run(f"{bloco.titulo}:").bold = True
            cabecalho.paragraph_format.keep_with_next = True
            for idx, linha in enumerate(bloco.linhas):
                paragrafo = doc.add_paragraph(f"{linha.rotulo}: {linha.valor}")
                paragrafo.paragraph_format.keep_with_next = idx < len(bloco.linhas) - 1
        elif isinstance(bloco, Clausula):
            cabecalho = doc.add_paragraph()
            cabecalho.add_run(bloco.cabecalho).bold = True
            corpo = doc.add_paragraph()
            _adicionar_segmentos(corpo, bloco.corpo)
            if bloco.evitar_quebra:
                cabecalho.paragraph_format.keep_with_next = True
                corpo.paragraph_format.keep_together = True
        elif isinstance(bloco, Assinatura):
            paragrafo = doc.add_paragraph(f"{LINHA_ASSINATURA}\n{bloco.rotulo}")
            paragrafo.alignment = WD_ALIGN_PARAGRAPH.CENTER
            paragrafo.paragraph_format.keep_together = True
        elif isinstance(bloco, (LinhaData, Aviso)):
            doc.add_paragraph(bloco.texto)

    return _salvar(doc)
