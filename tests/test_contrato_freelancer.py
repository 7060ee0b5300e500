"""Tests for the freelance filmmaker and editor contracts."""

from dataclasses import replace

import pytest

from services.contrato_editor import compor_editor, numero_vigencia
from services.contrato_filmmaker import compor_filmmaker, frase_frequencia
from services.documento import Documento
from services.modelos_contrato import TIPO_EDITOR, TIPO_FILMMAKER, dados_iniciais


@pytest.fixture
def filmmaker(parte, hoje):
    """Filmmaker contract with the default form values."""
    return replace(dados_iniciais(TIPO_FILMMAKER, hoje), contratado=parte)


@pytest.fixture
def editor(parte, hoje):
    """Editor contract with the default form values."""
    return replace(dados_iniciais(TIPO_EDITOR, hoje), contratado=parte)


class TestFilmmaker:
    """Tests for compor_filmmaker."""

    def _documento(self, dados, empresa):
        return Documento(TIPO_FILMMAKER, tuple(compor_filmmaker(dados, empresa)))

    def test_without_non_compete(self, filmmaker, empresa):
        clausulas = self._documento(filmmaker, empresa).clausulas()
        assert [c.numero for c in clausulas] == [1, 2, 3, 4, 5, 6, 7, 8, 10]
        assert clausulas[-1].titulo == "DO FORO"

    def test_with_non_compete(self, filmmaker, empresa):
        clausulas = self._documento(replace(filmmaker, incluir_nao_concorrencia=True), empresa).clausulas()
        assert [c.numero for c in clausulas] == list(range(1, 11))
        assert clausulas[8].titulo == "DA NÃO CONCORRÊNCIA"

    def test_non_compete_without_text_is_omitted(self, filmmaker, empresa):
        dados = replace(filmmaker, incluir_nao_concorrencia=True, clausula_nao_concorrencia="  ")
        assert 9 not in [c.numero for c in self._documento(dados, empresa).clausulas()]

    def test_company_is_hiring_party(self, filmmaker, empresa):
        documento = self._documento(filmmaker, empresa)
        assert [p.titulo for p in documento.partes()] == ["CONTRATANTE", "CONTRATADO"]
        assert [a.rotulo for a in documento.assinaturas()] == ["CONTRATADO", "CONTRATANTE (FastFilms)"]

    def test_remuneration(self, filmmaker, empresa):
        remuneracao = self._documento(filmmaker, empresa).clausulas()[2]
        assert "R$ 150,00 (cento e cinquenta reais) por diária de trabalho" in remuneracao.texto
        assert "ao final de cada projeto" in remuneracao.texto

    def test_unknown_unit_falls_back_to_project(self, filmmaker, empresa):
        remuneracao = self._documento(replace(filmmaker, unidade_remuneracao="mes"), empresa).clausulas()[2]
        assert "por projeto" in remuneracao.texto

    def test_confidentiality_fine(self, filmmaker, empresa):
        confidencialidade = self._documento(filmmaker, empresa).clausulas()[5]
        assert confidencialidade.titulo == "DA CONFIDENCIALIDADE"
        assert "R$ 15.000,00 (quinze mil reais)" in confidencialidade.texto


class TestEditor:
    """Tests for compor_editor."""

    def _documento(self, dados, empresa):
        return Documento(TIPO_EDITOR, tuple(compor_editor(dados, empresa)))

    def test_term_clause_is_15_without_non_compete(self, editor, empresa):
        clausulas = self._documento(editor, empresa).clausulas()
        assert [c.numero for c in clausulas] == list(range(1, 16))
        assert (clausulas[-1].numero, clausulas[-1].titulo) == (15, "DA VIGÊNCIA E DO FORO")

    def test_non_compete_pushes_term_clause_to_16(self, editor, empresa):
        clausulas = self._documento(replace(editor, incluir_nao_concorrencia=True), empresa).clausulas()
        assert [(c.numero, c.titulo) for c in clausulas[-2:]] == [
            (15, "DA NÃO CONCORRÊNCIA"),
            (16, "DA VIGÊNCIA E DO FORO"),
        ]

    def test_numero_vigencia(self):
        assert numero_vigencia(False) == 15
        assert numero_vigencia(True) == 16

    def test_payment_details_appended_when_filled(self, editor, empresa):
        com_detalhes = replace(editor, detalhes_pagamento="  Pagamento via PIX.  ")
        remuneracao = self._documento(com_detalhes, empresa).clausulas()[2]
        assert remuneracao.texto.endswith("\nPagamento via PIX.")

    def test_blank_payment_details_are_ignored(self, editor, empresa):
        remuneracao = self._documento(replace(editor, detalhes_pagamento="   "), empresa).clausulas()[2]
        assert not remuneracao.texto.endswith("\n")
        assert remuneracao.titulo == "DA REMUNERAÇÃO"

    def test_late_delivery_fine(self, editor, empresa):
        prazos = self._documento(editor, empresa).clausulas()[3]
        assert "10% (dez por cento)" in prazos.texto

    def test_forum_in_last_clause(self, editor, empresa):
        ultima = self._documento(editor, empresa).clausulas()[-1]
        assert "Lagoa Santa/MG" in ultima.texto


class TestFraseFrequencia:
    """Tests for frase_frequencia."""

    def test_known_frequencies(self):
        assert "mensalmente" in frase_frequencia("mensal")
        assert "semanalmente" in frase_frequencia("Semanal")

    def test_unknown_frequency(self):
        assert "ao final de cada projeto" in frase_frequencia("")
