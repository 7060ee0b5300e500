"""Tests for the freelancer material authorization term."""

from dataclasses import replace

import pytest

from services.contrato_autorizacao import compor_autorizacao
from services.documento import Documento, Paragrafo
from services.modelos_contrato import TIPO_AUTORIZACAO, dados_iniciais


@pytest.fixture
def autorizacao(parte, hoje):
    """Authorization term for a finished project."""
    return replace(
        dados_iniciais(TIPO_AUTORIZACAO, hoje),
        autorizado=parte,
        nome_projeto="Lançamento Verão",
        cliente_final="Loja Exemplo",
        data_execucao="10/01/2025",
        links_autorizados="https://exemplo.com/video1\nhttps://exemplo.com/video2",
    )


def _documento(dados, empresa):
    return Documento(TIPO_AUTORIZACAO, tuple(compor_autorizacao(dados, empresa)))


class TestAutorizacao:
    """Tests for compor_autorizacao."""

    def test_clauses(self, autorizacao, empresa):
        clausulas = _documento(autorizacao, empresa).clausulas()
        assert [c.numero for c in clausulas] == [1, 2, 3, 4, 5, 6]
        assert [c.titulo for c in clausulas] == [
            "DO OBJETO",
            "DOS LINKS AUTORIZADOS",
            "DAS VEDAÇÕES",
            "DA MULTA POR USO INDEVIDO",
            "DA VIGÊNCIA E REVOGAÇÃO",
            "DO FORO",
        ]

    def test_object_mentions_project(self, autorizacao, empresa):
        objeto = _documento(autorizacao, empresa).clausulas()[0]
        assert '"Lançamento Verão"' in objeto.texto
        assert "Loja Exemplo" in objeto.texto

    def test_links_as_items(self, autorizacao, empresa):
        links = _documento(autorizacao, empresa).clausulas()[1]
        assert "a) https://exemplo.com/video1;\nb) https://exemplo.com/video2." in links.texto

    def test_fine_in_words(self, autorizacao, empresa):
        multa = _documento(autorizacao, empresa).clausulas()[3]
        assert "R$ 5.000,00 (cinco mil reais)" in multa.texto

    def test_closing_and_signatures(self, autorizacao, empresa):
        documento = _documento(autorizacao, empresa)
        paragrafos = [b.texto for b in documento if isinstance(b, Paragrafo)]
        assert (
            "E, por estarem assim justos e acordados, firmam o presente termo em duas vias de igual teor."
            in paragrafos
        )
        assert [a.rotulo for a in documento.assinaturas()] == ["AUTORIZADO", "AUTORIZANTE (FastFilms)"]

    def test_company_is_authorizing_party(self, autorizacao, empresa):
        partes = _documento(autorizacao, empresa).partes()
        assert [p.titulo for p in partes] == ["AUTORIZANTE", "AUTORIZADO"]
        assert partes[0].valor("NOME") == empresa.nome
