from __future__ import annotations

import logging

from services.composicao import (
    INTRODUCAO,
    PLACEHOLDER_LONGO,
    Redator,
    assinatura_empresa,
    linha_data,
    presente,
    texto_ou,
    valor_com_extenso,
)
from services.config import PADROES, IdentidadeEmpresa, PadroesContrato
from services.contrato_filmmaker import (
    TERMOS_CONTRATACAO,
    clausula_ausencia_vinculo,
    clausula_confidencialidade,
    clausula_nao_concorrencia_incluida,
    clausula_rescisao,
    frase_frequencia,
)
from services.documento import Assinatura, Bloco
from services.formatacao import percentual_por_extenso
from services.modelos_contrato import ContratoEditor
from services.partes import bloco_empresa, bloco_parte

logger = logging.getLogger(__name__)

CLAUSULA_NAO_CONCORRENCIA = 15

OBRIGACOES_CONTRATADO = (
    "São obrigações do CONTRATADO:\n"
    "a) executar a edição conforme o briefing e as referências aprovadas;\n"
    "b) comunicar imediatamente qualquer impedimento que afete os prazos acordados;\n"
    "c) realizar os ajustes solicitados dentro do escopo contratado."
)

OBRIGACOES_CONTRATANTE = (
    "São obrigações da CONTRATANTE:\n"
    "a) fornecer o material bruto, o briefing e as referências necessárias;\n"
    "b) aprovar ou solicitar ajustes nas entregas em tempo hábil;\n"
    "c) efetuar os pagamentos nas condições previstas neste contrato."
)


def numero_vigencia(incluir_nao_concorrencia: bool) -> int:
    return CLAUSULA_NAO_CONCORRENCIA + 1 if incluir_nao_concorrencia else CLAUSULA_NAO_CONCORRENCIA


def compor_editor(
    dados: ContratoEditor,
    empresa: IdentidadeEmpresa,
    padroes: PadroesContrato = PADROES,
) -> list[Bloco]:
    """
    Contratação de freelancer para edição de vídeo.

    As cláusulas 1 a 14 têm numeração fixa. A cláusula de não concorrência,
    quando incluída, ocupa o número 15 e empurra a vigência para 16.
    """
    redator = Redator.para(TERMOS_CONTRATACAO, dados.titulo)
    com_nao_concorrencia = clausula_nao_concorrencia_incluida(
        dados.incluir_nao_concorrencia, dados.clausula_nao_concorrencia
    )

    remuneracao = (
        "Pelos serviços prestados, a CONTRATANTE pagará ao CONTRATADO o valor de "
        f"{valor_com_extenso(dados.valor_remuneracao, padroes)}. "
        f"{frase_frequencia(dados.frequencia_pagamento)}"
    )
    if presente(dados.detalhes_pagamento):
        remuneracao += f"\n{dados.detalhes_pagamento.strip()}"

    blocos: list[Bloco] = [
        redator.titulo(dados.titulo),
        redator.paragrafo(INTRODUCAO),
        bloco_empresa(empresa, "CONTRATANTE"),
        bloco_parte(dados.contratado, "CONTRATADO"),
        redator.abertura(dados.titulo),
        redator.clausula(
            1,
            "DO OBJETO",
            "O presente contrato tem por objeto a prestação, pelo CONTRATADO, de serviços de "
            "edição e finalização de vídeos produzidos ou captados pela CONTRATANTE.",
        ),
        clausula_ausencia_vinculo(redator, 2),
        redator.clausula(3, "DA REMUNERAÇÃO", remuneracao),
        redator.clausula(
            4,
            "DOS PRAZOS E DA MULTA POR ATRASO",
            "Os prazos de entrega de cada trabalho serão definidos pela CONTRATANTE por e-mail ou "
            "outro meio digital. O atraso injustificado na entrega sujeitará o CONTRATADO a multa "
            f"de {percentual_por_extenso(dados.percentual_multa_atraso)} sobre o valor do "
            "respectivo trabalho.",
        ),
        redator.clausula(5, "DOS SOFTWARES", texto_ou(dados.responsabilidade_softwares, PLACEHOLDER_LONGO)),
        redator.clausula(
            6,
            "DA ENTREGA E ARMAZENAMENTO DOS ARQUIVOS",
            "O CONTRATADO entregará os arquivos finais e os projetos de edição nos formatos "
            "solicitados pela CONTRATANTE, mantendo cópia de segurança até a aprovação final de "
            "cada trabalho.",
        ),
        clausula_confidencialidade(redator, 7, dados.multa_confidencialidade, padroes),
        redator.clausula(
            8,
            "DA PROPRIEDADE INTELECTUAL",
            texto_ou(dados.propriedade_intelectual, PLACEHOLDER_LONGO),
        ),
        redator.clausula(9, "DO TRABALHO REMOTO E HÍBRIDO", texto_ou(dados.trabalho_remoto, PLACEHOLDER_LONGO)),
        clausula_rescisao(redator, 10, dados.dias_aviso_rescisao, dados.percentual_multa_rescisao),
        redator.clausula(11, "DAS OBRIGAÇÕES DO CONTRATADO", OBRIGACOES_CONTRATADO),
        redator.clausula(12, "DAS OBRIGAÇÕES DA CONTRATANTE", OBRIGACOES_CONTRATANTE),
        redator.clausula(
            13,
            "DA DISPONIBILIDADE E COMUNICAÇÃO",
            texto_ou(dados.disponibilidade_comunicacao, PLACEHOLDER_LONGO),
        ),
        redator.clausula(14, "DA QUALIDADE DOS SERVIÇOS", texto_ou(dados.qualidade_servicos, PLACEHOLDER_LONGO)),
    ]

    if com_nao_concorrencia:
        blocos.append(
            redator.clausula(
                CLAUSULA_NAO_CONCORRENCIA,
                "DA NÃO CONCORRÊNCIA",
                dados.clausula_nao_concorrencia.strip(),
            )
        )

    blocos.append(
        redator.clausula(
            numero_vigencia(com_nao_concorrencia),
            "DA VIGÊNCIA E DO FORO",
            "Este contrato vigora por prazo indeterminado a partir da data de sua assinatura. "
            "Para dirimir eventuais dúvidas ou conflitos oriundos deste contrato, as partes elegem "
            f"o foro da comarca de {texto_ou(dados.foro)}.",
        )
    )

    blocos.extend(
        [
            redator.fechamento(padroes),
            Assinatura("CONTRATADO"),
            assinatura_empresa("CONTRATANTE", empresa.nome),
            linha_data(dados.cidade, dados.data_extenso),
        ]
    )
    logger.debug("Contrato de editor composto (não concorrência: %s)", com_nao_concorrencia)
    return blocos
