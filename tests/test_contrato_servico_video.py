"""Tests for the video production services contract."""

from dataclasses import replace

import pytest

from services.contrato_servico_video import (
    FALLBACK_PAGAMENTO_OUTRO,
    compor_servico_video,
    frase_pagamento,
)
from services.documento import Documento, Paragrafo
from services.modelos_contrato import (
    TIPO_SERVICO_VIDEO,
    ContratoServicoVideo,
    ParteContratual,
    dados_iniciais,
)
from services.partes import PLACEHOLDER_CAMPO


@pytest.fixture
def servico(parte, hoje):
    """Video services contract with a single client."""
    return replace(dados_iniciais(TIPO_SERVICO_VIDEO, hoje), contratantes=[parte])


def _documento(dados, empresa):
    return Documento(TIPO_SERVICO_VIDEO, tuple(compor_servico_video(dados, empresa)))


def _tres_contratantes():
    return [ParteContratual(nome=f"Cliente {i}") for i in range(1, 4)]


class TestPartes:
    """Single and multiple clients."""

    def test_single_client(self, servico, empresa):
        documento = _documento(servico, empresa)
        assert [p.titulo for p in documento.partes()] == ["CONTRATANTE", "CONTRATADA"]
        assert [a.rotulo for a in documento.assinaturas()] == ["CONTRATANTE", "CONTRATADA (FastFilms)"]
        assert not any(isinstance(b, Paragrafo) and b.texto == "CONTRATANTES:" for b in documento)

    def test_three_clients(self, servico, empresa):
        documento = _documento(replace(servico, contratantes=_tres_contratantes()), empresa)
        assert any(isinstance(b, Paragrafo) and b.texto == "CONTRATANTES:" for b in documento)
        assert [p.titulo for p in documento.partes()] == [
            "CONTRATANTE 1",
            "CONTRATANTE 2",
            "CONTRATANTE 3",
            "CONTRATADA",
        ]
        assert [p.valor("NOME") for p in documento.partes()[:3]] == ["Cliente 1", "Cliente 2", "Cliente 3"]
        assert [a.rotulo for a in documento.assinaturas()] == [
            "CONTRATANTE 1",
            "CONTRATANTE 2",
            "CONTRATANTE 3",
            "CONTRATADA (FastFilms)",
        ]

    def test_plural_wording(self, servico, empresa):
        clausulas = _documento(replace(servico, contratantes=_tres_contratantes()), empresa).clausulas()
        assert "os CONTRATANTES pagarão" in clausulas[1].texto
        assert clausulas[4].titulo == "DAS RESPONSABILIDADES DOS CONTRATANTES"

    def test_singular_wording(self, servico, empresa):
        clausulas = _documento(servico, empresa).clausulas()
        assert "o CONTRATANTE pagará" in clausulas[1].texto
        assert clausulas[4].titulo == "DAS RESPONSABILIDADES DO CONTRATANTE"

    def test_plural_term_highlighted_as_whole_word(self, servico, empresa):
        clausulas = _documento(replace(servico, contratantes=_tres_contratantes()), empresa).clausulas()
        assert any(s.texto == "CONTRATANTES" and s.destaque for s in clausulas[1].corpo)

    def test_empty_client_list_degrades_to_one_blank_party(self, empresa):
        documento = _documento(ContratoServicoVideo(contratantes=[]), empresa)
        primeira = documento.partes()[0]
        assert primeira.titulo == "CONTRATANTE"
        assert primeira.valor("NOME") == PLACEHOLDER_CAMPO


class TestNumeracao:
    """Fixed clause numbering."""

    def test_all_clauses(self, servico, empresa):
        assert [c.numero for c in _documento(servico, empresa).clausulas()] == list(range(1, 10))

    def test_general_provisions_omitted_keeps_forum_number(self, servico, empresa):
        clausulas = _documento(replace(servico, disposicoes_gerais=""), empresa).clausulas()
        assert [c.numero for c in clausulas] == [1, 2, 3, 4, 5, 6, 7, 9]
        assert clausulas[-1].titulo == "DO FORO"


class TestFrasePagamento:
    """Payment sentence for each payment plan."""

    def test_upfront(self, servico):
        assert "à vista" in frase_pagamento(replace(servico, forma_pagamento="vista"))

    def test_deposit_and_delivery(self, servico):
        dados = replace(servico, forma_pagamento="sinal_entrega", percentual_sinal="30", valor_total="1000")
        frase = frase_pagamento(dados)
        assert "30% (trinta por cento), equivalente a R$ 300,00," in frase
        assert "70% (setenta por cento), equivalente a R$ 700,00," in frase

    @pytest.mark.parametrize("percentual", ["", "abc", "150", "-5"])
    def test_deposit_defaults_to_half(self, servico, percentual):
        dados = replace(servico, forma_pagamento="sinal_entrega", percentual_sinal=percentual, valor_total="1000")
        frase = frase_pagamento(dados)
        assert frase.count("50% (cinquenta por cento), equivalente a R$ 500,00,") == 2

    def test_deposit_without_total_has_no_amounts(self, servico):
        dados = replace(servico, forma_pagamento="sinal_entrega", percentual_sinal="50", valor_total="")
        assert "equivalente" not in frase_pagamento(dados)

    def test_other_uses_description(self, servico):
        dados = replace(servico, forma_pagamento="outro", descricao_pagamento_outro="Três parcelas mensais.")
        assert frase_pagamento(dados) == "Três parcelas mensais."

    def test_other_without_description(self, servico):
        dados = replace(servico, forma_pagamento="outro", descricao_pagamento_outro="")
        assert frase_pagamento(dados) == FALLBACK_PAGAMENTO_OUTRO


class TestConteudo:
    """Clause contents."""

    def test_responsibilities_as_items(self, servico, empresa):
        clausulas = _documento(servico, empresa).clausulas()
        assert "a) Gravar os vídeos conforme combinado;" in clausulas[3].texto

    def test_termination_in_words(self, servico, empresa):
        rescisao = _documento(servico, empresa).clausulas()[6]
        assert "7 (sete) dias" in rescisao.texto
        assert "20% (vinte por cento)" in rescisao.texto
