"""Tests for the HTML, text, DOCX and PDF exporters."""

import io
from dataclasses import replace

import pytest
from docx import Document

from exporters.docx_exporter import documento_para_docx_bytes, texto_para_docx_bytes
from exporters.html_exporter import documento_para_html
from exporters.pdf_exporter import (
    _dividir_paginas,
    _escapar_texto_pdf,
    _quebrar_trechos,
    documento_para_pdf_bytes,
    texto_para_pdf_bytes,
)
from exporters.texto_exporter import LINHA_ASSINATURA, documento_para_texto
from services.documento import Aviso, Documento
from services.modelos_contrato import TIPO_SERVICO_VIDEO, dados_iniciais
from services.montador_contrato import montar_documento


@pytest.fixture
def documento(parte, empresa, hoje):
    """Composed video services contract."""
    dados = replace(dados_iniciais(TIPO_SERVICO_VIDEO, hoje), contratantes=[parte])
    return montar_documento(dados, empresa)


class TestHtml:
    """Tests for documento_para_html."""

    def test_structure(self, documento):
        html = documento_para_html(documento)
        assert html.startswith('<div id="contract-preview-content"')
        assert "<strong>CONTRATANTE</strong>" in html
        assert 'data-avoid-break="true"' in html
        assert "page-break-inside: avoid" in html
        assert "CLÁUSULA 1 - DO OBJETO" in html

    def test_escapes_user_text(self, parte, empresa, hoje):
        dados = replace(
            dados_iniciais(TIPO_SERVICO_VIDEO, hoje),
            contratantes=[replace(parte, nome="<script>x</script>")],
        )
        html = documento_para_html(montar_documento(dados, empresa))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_notice(self):
        html = documento_para_html(Documento("X", (Aviso("Sem prévia"),)))
        assert '<p class="aviso">Sem prévia</p>' in html


class TestTexto:
    """Tests for documento_para_texto."""

    def test_blocks(self, documento, empresa):
        texto = documento_para_texto(documento)
        assert texto.startswith(documento.titulo)
        assert "CLÁUSULA 1 - DO OBJETO\n" in texto
        assert f"{LINHA_ASSINATURA}\nCONTRATADA ({empresa.nome})" in texto
        assert texto.endswith("Lagoa Santa/MG, 15 de maio de 2025.")

    def test_download_bytes_keep_accents(self, documento):
        conteudo = documento_para_texto(documento).encode("utf-8")
        assert "PRESTAÇÃO".encode("utf-8") in conteudo
        assert conteudo.decode("utf-8") == documento_para_texto(documento)


class TestDocx:
    """Tests for the DOCX exporters."""

    def test_contract(self, documento):
        conteudo = documento_para_docx_bytes(documento)
        assert conteudo[:2] == b"PK"

        doc = Document(io.BytesIO(conteudo))
        negritos = [run.text for p in doc.paragraphs for run in p.runs if run.bold]
        assert "CONTRATANTE" in negritos
        cabecalho = next(p for p in doc.paragraphs if p.text == "CLÁUSULA 1 - DO OBJETO")
        assert cabecalho.paragraph_format.keep_with_next is True

    def test_plain_text(self):
        conteudo = texto_para_docx_bytes("ORCAMENTO", "linha 1\n\nlinha 2")
        doc = Document(io.BytesIO(conteudo))
        assert [p.text for p in doc.paragraphs][-4:] == ["ORCAMENTO", "linha 1", "", "linha 2"]


class TestPdf:
    """Tests for the PDF exporters."""

    def test_contract(self, documento):
        conteudo = documento_para_pdf_bytes(documento)
        assert conteudo.startswith(b"%PDF-1.4")
        assert conteudo.endswith(b"%%EOF")
        assert b"/Helvetica-Bold" in conteudo
        assert b"/F2 12 Tf\n(CONTRATANTE) Tj" in conteudo

    def test_plain_text(self):
        conteudo = texto_para_pdf_bytes("ORCAMENTO", "linha 1\n\nlinha 2")
        assert conteudo.startswith(b"%PDF-1.4")
        assert b"/Count 1" in conteudo
        assert b"(linha 1) Tj" in conteudo

    def test_escape(self):
        assert _escapar_texto_pdf("a(b)\\") == "a\\(b\\)\\\\"

    def test_wrap_keeps_bold_runs(self):
        linhas = _quebrar_trechos([("palavra " * 30, False), ("DESTAQUE", True), ("\nfim", False)], largura=40)
        assert all(sum(len(t) for t, _ in linha) <= 40 for linha in linhas)
        assert any(("DESTAQUE", True) in linha for linha in linhas)
        assert linhas[-1] == [("fim", False)]

    def test_kept_group_moves_to_next_page(self):
        corridas = [[("x", False)]] * 50
        clausula = [[("y", True)]] * 5
        paginas = _dividir_paginas([(corridas, False), (clausula, True)], max_linhas_por_pagina=52)
        assert [len(p) for p in paginas] == [50, 5]

    def test_loose_lines_fill_pages(self):
        corridas = [[("x", False)]] * 50
        paginas = _dividir_paginas([(corridas, False), ([[("y", False)]] * 5, False)], max_linhas_por_pagina=52)
        assert [len(p) for p in paginas] == [52, 3]

    def test_oversized_kept_group_is_split(self):
        paginas = _dividir_paginas([([[("x", False)]] * 60, True)], max_linhas_por_pagina=52)
        assert [len(p) for p in paginas] == [52, 8]

    def test_empty_document_has_one_page(self):
        assert _dividir_paginas([]) == [[]]
