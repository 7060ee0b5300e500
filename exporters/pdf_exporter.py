from __future__ import annotations

import re
import textwrap
from typing import Iterable

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

# (texto, negrito)
Trecho = tuple[str, bool]
LinhaPdf = list[Trecho]
# (linhas, manter_juntas)
Grupo = tuple[list[LinhaPdf], bool]

LARGURA_LINHA = 95
MAX_LINHAS_POR_PAGINA = 52


def _normalizar_linha_pdf(texto: str) -> str:
    # PDF basico com Helvetica usa WinAnsi/latin-1.
    return (texto or "").encode("latin-1", "replace").decode("latin-1")


def _escapar_texto_pdf(texto: str) -> str:
    texto = _normalizar_linha_pdf(texto)
    return (
        texto.replace("\\", "\\\\")
        .replace("(", "\\(")
        .replace(")", "\\)")
        .replace("\r", " ")
        .replace("\n", " ")
    )


def _quebrar_linhas(texto: str, largura: int = LARGURA_LINHA) -> list[str]:
    linhas: list[str] = []
    for linha in (texto or "").splitlines():
        limpa = linha.strip()
        if not limpa:
            linhas.append("")
            continue
        linhas.extend(textwrap.wrap(limpa, width=largura) or [""])
    return linhas


def _juntar_trechos(trechos: LinhaPdf) -> LinhaPdf:
    juntos: LinhaPdf = []
    for texto, negrito in trechos:
        if juntos and juntos[-1][1] == negrito:
            juntos[-1] = (juntos[-1][0] + texto, negrito)
        else:
            juntos.append((texto, negrito))
    if juntos:
        juntos[-1] = (juntos[-1][0].rstrip(), juntos[-1][1])
    return juntos


# Quebra segmentos com destaque em linhas de até `largura` caracteres, mantendo o negrito.
def _quebrar_trechos(trechos: Iterable[Trecho], largura: int = LARGURA_LINHA) -> list[LinhaPdf]:
    linhas: list[LinhaPdf] = []
    atual: LinhaPdf = []
    tamanho = 0

    for texto, negrito in trechos:
        for idx, parte in enumerate((texto or "").split("\n")):
            if idx > 0:
                linhas.append(_juntar_trechos(atual))
                atual, tamanho = [], 0
            for token in re.findall(r"\s+|\S+", parte):
                if token.isspace():
                    if tamanho:
                        atual.append((" ", negrito))
                        tamanho += 1
                    continue
                if tamanho and tamanho + len(token) > largura:
                    linhas.append(_juntar_trechos(atual))
                    atual, tamanho = [], 0
                atual.append((token, negrito))
                tamanho += len(token)

    if atual:
        linhas.append(_juntar_trechos(atual))
    return linhas


def _dividir_paginas(grupos: Iterable[Grupo], max_linhas_por_pagina: int = MAX_LINHAS_POR_PAGINA) -> list[list[LinhaPdf]]:
    paginas: list[list[LinhaPdf]] = []
    atual: list[LinhaPdf] = []

    for linhas, manter_juntas in grupos:
        cabe_numa_pagina = len(linhas) <= max_linhas_por_pagina
        if manter_juntas and cabe_numa_pagina and atual and len(atual) + len(linhas) > max_linhas_por_pagina:
            paginas.append(atual)
            atual = []
        for linha in linhas:
            atual.append(linha)
            if len(atual) >= max_linhas_por_pagina:
                paginas.append(atual)
                atual = []

    if atual or not paginas:
        paginas.append(atual)

    return paginas


def _montar_conteudo_pagina(linhas: list[LinhaPdf], primeira_pagina: bool, titulo: str) -> bytes:
    comandos: list[str] = ["BT"]
    y_inicial = 800

    if primeira_pagina:
        comandos.append("/F2 16 Tf")
        comandos.append(f"1 0 0 1 40 {y_inicial} Tm")
        comandos.append(f"({_escapar_texto_pdf(titulo)}) Tj")
        comandos.append("0 -22 Td")
    else:
        comandos.append(f"1 0 0 1 40 {y_inicial} Tm")

    if not linhas:
        comandos.append("/F1 12 Tf")
        comandos.append("( ) Tj")
    else:
        for idx, linha in enumerate(linhas):
            if idx > 0:
                comandos.append("0 -14 Td")
            if not linha:
                comandos.append("/F1 12 Tf")
                comandos.append("( ) Tj")
                continue
            for texto, negrito in linha:
                comandos.append("/F2 12 Tf" if negrito else "/F1 12 Tf")
                comandos.append(f"({_escapar_texto_pdf(texto)}) Tj")

    comandos.append("ET")
    return "\n".join(comandos).encode("latin-1", "replace")


def _montar_pdf(titulo: str, grupos: Iterable[Grupo]) -> bytes:
    titulo_pdf = _normalizar_linha_pdf(titulo)
    paginas_linhas = _dividir_paginas(grupos)

    objetos: list[bytes | None] = [None]
    objetos.append(b"<< /Type /Catalog /Pages 2 0 R >>")  # 1
    objetos.append(b"<< /Type /Pages /Count 0 /Kids [] >>")  # 2 (atualizado depois)
    objetos.append(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>")  # 3
    objetos.append(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica-Bold /Encoding /WinAnsiEncoding >>")  # 4

    kids_refs: list[str] = []
    pagina_base = 5
    for idx, linhas_pagina in enumerate(paginas_linhas):
        pagina_obj = pagina_base + idx * 2
        conteudo_obj = pagina_obj + 1
        kids_refs.append(f"{pagina_obj} 0 R")

        stream = _montar_conteudo_pagina(
            linhas=linhas_pagina,
            primeira_pagina=idx == 0,
            titulo=titulo_pdf,
        )
        corpo_stream = (
            f"<< /Length {len(stream)} >>\nstream\n".encode("latin-1")
            + stream
            + b"\nendstream"
        )
        objetos.append(
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 595 842] "
            f"/Resources << /Font << /F1 3 0 R /F2 4 0 R >> >> /Contents {conteudo_obj} 0 R >>".encode("latin-1")
        )
        objetos.append(corpo_stream)

    objetos[2] = f"<< /Type /Pages /Count {len(paginas_linhas)} /Kids [{' '.join(kids_refs)}] >>".encode("latin-1")

    pdf = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n"
    offsets = [0] * len(objetos)

    for obj_num in range(1, len(objetos)):
        corpo = objetos[obj_num] or b""
        offsets[obj_num] = len(pdf)
        pdf += f"{obj_num} 0 obj\n".encode("latin-1")
        pdf += corpo + b"\n"
        pdf += b"endobj\n"

    xref_pos = len(pdf)
    pdf += f"xref\n0 {len(objetos)}\n".encode("latin-1")
    pdf += b"0000000000 65535 f \n"
    for obj_num in range(1, len(objetos)):
        pdf += f"{offsets[obj_num]:010d} 00000 n \n".encode("latin-1")

    pdf += f"trailer\n<< /Size {len(objetos)} /Root 1 0 R >>\n".encode("latin-1")
    pdf += f"startxref\n{xref_pos}\n%%EOF".encode("latin-1")
    return pdf


def texto_para_pdf_bytes(titulo: str, texto: str) -> bytes:
    linhas = _quebrar_linhas(texto or "")
    grupos = [([[(linha, False)] if linha else []], False) for linha in linhas]
    return _montar_pdf(titulo or "ORCAMENTO", grupos)


def _trechos(segmentos: tuple[Segmento, ...]) -> list[Trecho]:
    return [(segmento.texto, segmento.destaque) for segmento in segmentos]


def _grupos_documento(documento: Documento) -> list[Grupo]:
    grupos: list[Grupo] = []
    for bloco in documento:
        if isinstance(bloco, Titulo):
            continue
        if isinstance(bloco, Paragrafo):
            grupos.append((_quebrar_trechos(_trechos(bloco.segmentos)) + [[]], False))
        elif isinstance(bloco, BlocoParte):
            linhas: list[LinhaPdf] = [[(f"{bloco.titulo}:", True)]]
            for linha in bloco.linhas:
                linhas += _quebrar_trechos([(f"{linha.rotulo}: {linha.valor}", False)])
            grupos.append((linhas + [[]], True))
        elif isinstance(bloco, Clausula):
            linhas = _quebrar_trechos([(bloco.cabecalho, True)]) + _quebrar_trechos(_trechos(bloco.corpo))
            grupos.append((linhas + [[]], bloco.evitar_quebra))
        elif isinstance(bloco, Assinatura):
            grupos.append(([[], [(LINHA_ASSINATURA, False)], [(bloco.rotulo, False)], []], True))
        elif isinstance(bloco, (LinhaData, Aviso)):
            grupos.append((_quebrar_trechos([(bloco.texto, False)]), False))
    return grupos


def documento_para_pdf_bytes(documento: Documento) -> bytes:
    """Gera o PDF do contrato: termos destacados em negrito e cláusulas sem quebra de página."""
    return _montar_pdf(documento.titulo or "CONTRATO", _grupos_documento(documento))
