from __future__ import annotations

import logging

from services.composicao import (
    INTRODUCAO,
    PLACEHOLDER_LONGO,
    Redator,
    assinatura_empresa,
    clausula_foro,
    linha_data,
    presente,
    texto_ou,
    valor_com_extenso,
)
from services.config import PADROES, IdentidadeEmpresa, PadroesContrato
from services.documento import Assinatura, Bloco, Clausula
from services.formatacao import dias_por_extenso, percentual_por_extenso
from services.modelos_contrato import ContratoFilmmaker
from services.partes import bloco_empresa, bloco_parte

logger = logging.getLogger(__name__)

TERMOS_CONTRATACAO = ("CONTRATADO", "CONTRATANTE")

UNIDADES = {
    "hora": "por hora trabalhada",
    "dia": "por diária de trabalho",
    "projeto": "por projeto",
}

FREQUENCIAS = {
    "mensal": "mensalmente",
    "semanal": "semanalmente",
    "projeto": "ao final de cada projeto",
}


# Frase da periodicidade de pagamento, comum aos contratos de freelancer.
def frase_frequencia(frequencia: str) -> str:
    quando = FREQUENCIAS.get((frequencia or "").strip().lower(), FREQUENCIAS["projeto"])
    return f"Os valores devidos serão pagos {quando}, mediante a entrega dos serviços realizados no período."


def clausula_nao_concorrencia_incluida(incluir: bool, texto: str) -> bool:
    return bool(incluir) and presente(texto)


def clausula_confidencialidade(redator: Redator, numero: int, multa: str, padroes: PadroesContrato) -> Clausula:
    return redator.clausula(
        numero,
        "DA CONFIDENCIALIDADE",
        "O CONTRATADO compromete-se a manter sigilo absoluto sobre quaisquer informações, "
        "imagens, roteiros, estratégias e dados de clientes a que tiver acesso em razão deste "
        "contrato, durante sua vigência e após o seu término. O descumprimento desta cláusula "
        f"sujeitará o CONTRATADO ao pagamento de multa de {valor_com_extenso(multa, padroes)}, "
        "sem prejuízo da apuração de perdas e danos.",
    )


def clausula_rescisao(redator: Redator, numero: int, dias: str, percentual: str) -> Clausula:
    return redator.clausula(
        numero,
        "DA RESCISÃO",
        "Este contrato poderá ser rescindido por qualquer das partes, a qualquer tempo, mediante "
        f"aviso prévio de {dias_por_extenso(dias)}, por escrito. A rescisão sem justo motivo ou "
        "sem o aviso prévio aqui previsto sujeitará a parte que lhe der causa ao pagamento de "
        f"multa de {percentual_por_extenso(percentual)} sobre os valores devidos no período.",
    )


def clausula_ausencia_vinculo(redator: Redator, numero: int) -> Clausula:
    return redator.clausula(
        numero,
        "DA AUSÊNCIA DE VÍNCULO EMPREGATÍCIO",
        "Os serviços serão prestados pelo CONTRATADO com autonomia, sem subordinação, "
        "habitualidade ou exclusividade, não se estabelecendo entre as partes qualquer vínculo "
        "empregatício, societário ou previdenciário.",
    )


def compor_filmmaker(
    dados: ContratoFilmmaker,
    empresa: IdentidadeEmpresa,
    padroes: PadroesContrato = PADROES,
) -> list[Bloco]:
    """Contratação de freelancer para captação de vídeo (numeração fixa)."""
    redator = Redator.para(TERMOS_CONTRATACAO, dados.titulo)
    unidade = UNIDADES.get((dados.unidade_remuneracao or "").strip().lower(), UNIDADES["projeto"])

    remuneracao = (
        "Pelos serviços prestados, a CONTRATANTE pagará ao CONTRATADO o valor de "
        f"{valor_com_extenso(dados.valor_remuneracao, padroes)} {unidade}. "
        f"{frase_frequencia(dados.frequencia_pagamento)}"
    )
    if presente(dados.forma_pagamento):
        remuneracao += f"\n{dados.forma_pagamento.strip()}"

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
            "captação de vídeo (filmagem) nos projetos e eventos indicados pela CONTRATANTE.",
        ),
        clausula_ausencia_vinculo(redator, 2),
        redator.clausula(3, "DA REMUNERAÇÃO", remuneracao),
        redator.clausula(
            4,
            "DOS PRAZOS DE EXECUÇÃO E ENTREGA",
            texto_ou(dados.prazo_entrega, PLACEHOLDER_LONGO),
        ),
        redator.clausula(
            5,
            "DOS EQUIPAMENTOS",
            texto_ou(dados.responsabilidade_equipamentos, PLACEHOLDER_LONGO),
        ),
        clausula_confidencialidade(redator, 6, dados.multa_confidencialidade, padroes),
        redator.clausula(
            7,
            "DOS DIREITOS DE IMAGEM E PROPRIEDADE INTELECTUAL",
            "Todo o material captado pelo CONTRATADO na execução deste contrato pertence "
            "exclusivamente à CONTRATANTE, que poderá utilizá-lo, editá-lo e divulgá-lo "
            "livremente, sendo vedada ao CONTRATADO sua utilização, inclusive em portfólio, "
            "sem autorização prévia e específica.",
        ),
        clausula_rescisao(redator, 8, dados.dias_aviso_rescisao, dados.percentual_multa_rescisao),
    ]

    if clausula_nao_concorrencia_incluida(dados.incluir_nao_concorrencia, dados.clausula_nao_concorrencia):
        blocos.append(
            redator.clausula(9, "DA NÃO CONCORRÊNCIA", dados.clausula_nao_concorrencia.strip())
        )
    blocos.append(clausula_foro(redator, 10, dados.foro))

    blocos.extend(
        [
            redator.fechamento(padroes),
            Assinatura("CONTRATADO"),
            assinatura_empresa("CONTRATANTE", empresa.nome),
            linha_data(dados.cidade, dados.data_extenso),
        ]
    )
    logger.debug("Contrato de filmmaker composto com %d blocos", len(blocos))
    return blocos
