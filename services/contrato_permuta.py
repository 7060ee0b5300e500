from __future__ import annotations

import logging

from services.composicao import (
    INTRODUCAO,
    PLACEHOLDER_LONGO,
    Numerador,
    Redator,
    assinatura_empresa,
    clausula_foro,
    linha_data,
    presente,
    texto_ou,
    valor_com_extenso,
)
from services.config import PADROES, IdentidadeEmpresa, PadroesContrato
from services.documento import Assinatura, Bloco
from services.modelos_contrato import ContratoPermuta
from services.partes import bloco_empresa, bloco_parte

logger = logging.getLogger(__name__)

TERMOS_PERMUTA = ("PERMUTANTE", "PERMUTADO")

TITULO_PERMUTANTE = "PERMUTANTE (Cede o equipamento e recebe os serviços)"
TITULO_PERMUTADO = "PERMUTADO (Recebe o equipamento e presta os serviços)"


def compor_permuta(
    dados: ContratoPermuta,
    empresa: IdentidadeEmpresa,
    padroes: PadroesContrato = PADROES,
) -> list[Bloco]:
    """
    Contrato de permuta de equipamento por serviços.

    As cláusulas de pagamento e de disposições gerais são opcionais e a
    numeração é sempre contígua: cláusulas omitidas não consomem número.
    """
    redator = Redator.para(TERMOS_PERMUTA, dados.titulo)
    numero = Numerador()

    blocos: list[Bloco] = [
        redator.titulo(dados.titulo),
        redator.paragrafo(INTRODUCAO),
        bloco_parte(dados.permutante, TITULO_PERMUTANTE),
        bloco_empresa(
            empresa,
            TITULO_PERMUTADO,
            cnpj=empresa.cnpj,
            endereco=empresa.endereco_sede or empresa.endereco,
        ),
        redator.abertura(dados.titulo),
    ]

    blocos.append(
        redator.clausula(
            numero.proximo(),
            "DO OBJETO",
            f"O presente contrato tem como objeto a permuta de {texto_ou(dados.descricao_equipamento)}, "
            "de propriedade do PERMUTANTE, avaliada em "
            f"{valor_com_extenso(dados.valor_equipamento, padroes)}, pelo serviço de "
            f"{texto_ou(dados.descricao_servico)} a ser prestado pelo PERMUTADO.",
        )
    )

    if presente(dados.clausula_pagamento):
        blocos.append(
            redator.clausula(numero.proximo(), "DA FORMA DE PAGAMENTO", dados.clausula_pagamento.strip())
        )

    blocos.append(
        redator.clausula(
            numero.proximo(),
            "DAS CONDIÇÕES",
            texto_ou(dados.condicoes, PLACEHOLDER_LONGO),
        )
    )
    blocos.append(
        redator.clausula(
            numero.proximo(),
            "DA TRANSFERÊNCIA DE PROPRIEDADE",
            texto_ou(dados.clausula_transferencia, PLACEHOLDER_LONGO),
        )
    )

    if presente(dados.disposicoes_gerais):
        blocos.append(
            redator.clausula(numero.proximo(), "DAS DISPOSIÇÕES GERAIS", dados.disposicoes_gerais.strip())
        )

    blocos.append(clausula_foro(redator, numero.proximo(), dados.foro))

    blocos.extend(
        [
            redator.fechamento(padroes),
            Assinatura("PERMUTANTE"),
            assinatura_empresa("PERMUTADO", empresa.nome),
            linha_data(dados.cidade, dados.data_extenso),
        ]
    )
    logger.debug("Permuta composta com %d blocos", len(blocos))
    return blocos
