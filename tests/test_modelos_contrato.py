"""Tests for contract data models and form defaults."""

from services.modelos_contrato import (
    FORO_PADRAO,
    TIPO_EDITOR,
    TIPO_FILMMAKER,
    TIPO_SERVICO_VIDEO,
    TIPOS_CONTRATO,
    ContratoEditor,
    ContratoFilmmaker,
    ContratoServicoVideo,
    ParteContratual,
    contrato_de_dict,
    dados_iniciais,
    tipo_do_contrato,
)


class TestContratoDeDict:
    """Tests for contrato_de_dict."""

    def test_unknown_or_invalid(self):
        assert contrato_de_dict({"tipo_contrato": "OUTRO"}) is None
        assert contrato_de_dict("texto") is None

    def test_builds_parties(self):
        contrato = contrato_de_dict(
            {
                "tipo_contrato": TIPO_SERVICO_VIDEO,
                "contratantes": [{"name": "Ana", "cpfCnpj": "1"}, {"nome": "Bia", "address": "Rua"}],
            }
        )
        assert isinstance(contrato, ContratoServicoVideo)
        assert contrato.contratantes == [
            ParteContratual(nome="Ana", cpf_cnpj="1"),
            ParteContratual(nome="Bia", endereco="Rua"),
        ]

    def test_single_party_becomes_list(self):
        contrato = contrato_de_dict({"tipo_contrato": TIPO_SERVICO_VIDEO, "contratantes": {"nome": "Ana"}})
        assert [p.nome for p in contrato.contratantes] == ["Ana"]

    def test_values_become_text(self):
        contrato = contrato_de_dict({"tipo_contrato": TIPO_SERVICO_VIDEO, "valor_total": 2299})
        assert contrato.valor_total == "2299"

    def test_missing_keys_keep_defaults(self):
        contrato = contrato_de_dict({"tipo_contrato": TIPO_EDITOR, "foro": None})
        assert contrato == ContratoEditor()

    def test_camel_case_fields(self):
        contrato = contrato_de_dict(
            {
                "contractType": TIPO_FILMMAKER,
                "contratado": {"name": "Caio"},
                "remunerationValue": "150.00",
                "remunerationUnit": "hora",
                "rescissionNoticeDays": "15",
                "unjustifiedRescissionPenaltyPercentage": "30",
                "confidentialityBreachPenaltyValue": "15000.00",
            }
        )
        assert contrato.contratado.nome == "Caio"
        assert contrato.valor_remuneracao == "150.00"
        assert contrato.unidade_remuneracao == "hora"
        assert contrato.dias_aviso_rescisao == "15"
        assert contrato.percentual_multa_rescisao == "30"
        assert contrato.multa_confidencialidade == "15000.00"

    def test_snake_case_wins_over_camel_case(self):
        contrato = contrato_de_dict(
            {"tipo_contrato": TIPO_SERVICO_VIDEO, "valor_total": "100", "totalValue": "200"}
        )
        assert contrato.valor_total == "100"

    def test_boolean_flag(self):
        contrato = contrato_de_dict({"tipo_contrato": TIPO_FILMMAKER, "incluir_nao_concorrencia": "sim"})
        assert isinstance(contrato, ContratoFilmmaker)
        assert contrato.incluir_nao_concorrencia is True


class TestDadosIniciais:
    """Tests for dados_iniciais."""

    def test_every_type(self, hoje):
        for tipo in TIPOS_CONTRATO:
            dados = dados_iniciais(tipo, hoje)
            assert tipo_do_contrato(dados) == tipo
            assert dados.foro == FORO_PADRAO
            assert dados.data_extenso == "15 de maio de 2025"

    def test_unknown_type(self):
        assert dados_iniciais("OUTRO") is None

    def test_editor_defaults(self):
        dados = dados_iniciais(TIPO_EDITOR)
        assert dados.valor_remuneracao == "3000.00"
        assert dados.frequencia_pagamento == "mensal"
        assert dados.incluir_nao_concorrencia is False


class TestTipoDoContrato:
    """Tests for tipo_do_contrato."""

    def test_from_dataclass_and_dict(self):
        assert tipo_do_contrato(ContratoEditor()) == TIPO_EDITOR
        assert tipo_do_contrato({"contractType": TIPO_EDITOR}) == TIPO_EDITOR
        assert tipo_do_contrato(None) == ""
