from __future__ import annotations

import logging

from services.composicao import (
    INTRODUCAO,
    Redator,
    alineas,
    assinatura_empresa,
    clausula_foro,
    linha_data,
    texto_ou,
    valor_com_extenso,
)
from services.config import PADROES, IdentidadeEmpresa, PadroesContrato
from services.documento import Assinatura, Bloco
from services.modelos_contrato import ContratoAutorizacaoMaterial
from services.partes import bloco_empresa, bloco_parte

logger = logging.getLogger(__name__)

TERMOS_AUTORIZACAO = ("AUTORIZANTE", "AUTORIZADO")

PLACEHOLDER_LINKS = "_" * 60


def compor_autorizacao(
    dados: ContratoAutorizacaoMaterial,
    empresa: IdentidadeEmpresa,
    padroes: PadroesContrato = PADROES,
) -> list[Bloco]:
    """Termo de autorização específica de uso de material por freelancer."""
    redator = Redator.para(TERMOS_AUTORIZACAO, dados.titulo)
    projeto = texto_ou(dados.nome_projeto)

    blocos: list[Bloco] = [
        redator.titulo(dados.titulo),
        redator.paragrafo(INTRODUCAO),
        bloco_empresa(empresa, "AUTORIZANTE"),
        bloco_parte(dados.autorizado, "AUTORIZADO"),
        redator.paragrafo(
            "resolvem firmar o presente termo, que se regerá pelas cláusulas e condições seguintes:"
        ),
        redator.clausula(
            1,
            "DO OBJETO",
            "A AUTORIZANTE concede ao AUTORIZADO autorização específica, não exclusiva, gratuita "
            "e intransferível para utilizar, exclusivamente em seu portfólio profissional, o "
            f"material audiovisual produzido no projeto \"{projeto}\", executado em "
            f"{texto_ou(dados.data_execucao)} para o cliente final {texto_ou(dados.cliente_final)}.",
        ),
        redator.clausula(
            2,
            "DOS LINKS AUTORIZADOS",
            "A utilização restringe-se ao material publicado nos seguintes endereços:\n"
            f"{alineas(dados.links_autorizados, PLACEHOLDER_LINKS)}",
        ),
        redator.clausula(
            3,
            "DAS VEDAÇÕES",
            "É vedado ao AUTORIZADO utilizar o material para fins comerciais, revendê-lo, "
            "alterá-lo de forma a descaracterizar a obra, associá-lo a marcas de terceiros ou "
            "divulgá-lo antes da publicação oficial pelo cliente final.",
        ),
        redator.clausula(
            4,
            "DA MULTA POR USO INDEVIDO",
            "O uso do material em desacordo com este termo sujeitará o AUTORIZADO ao pagamento de "
            f"multa de {valor_com_extenso(dados.multa_uso_indevido, padroes)}, sem prejuízo da "
            "indenização por perdas e danos e da imediata remoção do conteúdo.",
        ),
        redator.clausula(
            5,
            "DA VIGÊNCIA E REVOGAÇÃO",
            "Esta autorização vigora a partir da data de sua assinatura e poderá ser revogada pela "
            "AUTORIZANTE a qualquer tempo, mediante comunicação por escrito, devendo o AUTORIZADO "
            "remover o material em até 5 (cinco) dias após o recebimento da comunicação.",
        ),
        clausula_foro(redator, 6, dados.foro),
        redator.paragrafo(
            "E, por estarem assim justos e acordados, firmam o presente termo em "
            f"{padroes.vias} vias de igual teor."
        ),
        Assinatura("AUTORIZADO"),
        assinatura_empresa("AUTORIZANTE", empresa.nome),
        linha_data(dados.cidade, dados.data_extenso),
    ]
    logger.debug("Termo de autorização composto para o projeto %s", projeto)
    return blocos
