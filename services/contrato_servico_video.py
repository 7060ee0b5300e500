from __future__ import annotations

import logging

from services.composicao import (
    INTRODUCAO,
    PLACEHOLDER_LONGO,
    Redator,
    alineas,
    assinatura_empresa,
    clausula_foro,
    linha_data,
    presente,
    texto_ou,
    valor_com_extenso,
)
from services.config import PADROES, IdentidadeEmpresa, PadroesContrato
from services.documento import Assinatura, Bloco
from services.formatacao import (
    converter_numero,
    dias_por_extenso,
    formatar_moeda,
    percentual_por_extenso,
)
from services.modelos_contrato import ContratoServicoVideo, ParteContratual
from services.partes import bloco_empresa, bloco_parte

logger = logging.getLogger(__name__)

TERMOS_SERVICO_VIDEO = ("CONTRATANTE", "CONTRATANTES", "CONTRATADA")

FALLBACK_PAGAMENTO_OUTRO = "A forma de pagamento será definida em comum acordo entre as partes."

CLAUSULA_OBJETO = 1
CLAUSULA_PAGAMENTO = 2
CLAUSULA_PRAZO = 3
CLAUSULA_RESP_CONTRATADA = 4
CLAUSULA_RESP_CONTRATANTE = 5
CLAUSULA_DIREITOS_AUTORAIS = 6
CLAUSULA_RESCISAO = 7
CLAUSULA_DISPOSICOES_GERAIS = 8
CLAUSULA_FORO = 9


def _percentual_sinal(valor: str, padroes: PadroesContrato) -> float:
    numero = converter_numero(valor)
    if numero is None or numero < 0 or numero > 100:
        return float(padroes.percentual_sinal)
    return numero


# Frase da forma de pagamento conforme o plano escolhido no formulário.
def frase_pagamento(dados: ContratoServicoVideo, padroes: PadroesContrato = PADROES) -> str:
    if dados.forma_pagamento == "vista":
        return "O pagamento será realizado à vista, no ato da assinatura deste contrato."

    if dados.forma_pagamento == "sinal_entrega":
        sinal = _percentual_sinal(dados.percentual_sinal, padroes)
        restante = 100 - sinal
        total = converter_numero(dados.valor_total)
        equivalente_sinal = ""
        equivalente_restante = ""
        if total is not None:
            equivalente_sinal = f", equivalente a {formatar_moeda(total * sinal / 100)},"
            equivalente_restante = f", equivalente a {formatar_moeda(total * restante / 100)},"
        return (
            f"O pagamento será realizado da seguinte forma: {percentual_por_extenso(sinal)}"
            f"{equivalente_sinal} no ato da assinatura deste contrato, a título de sinal, e "
            f"{percentual_por_extenso(restante)}{equivalente_restante} na entrega dos materiais "
            "finalizados."
        )

    return texto_ou(dados.descricao_pagamento_outro, FALLBACK_PAGAMENTO_OUTRO)


def compor_servico_video(
    dados: ContratoServicoVideo,
    empresa: IdentidadeEmpresa,
    padroes: PadroesContrato = PADROES,
) -> list[Bloco]:
    """
    Prestação de serviços de gravação e edição de vídeos.

    Aceita uma ou mais partes contratantes: com uma única parte o contrato
    fica no singular; com várias, cada parte recebe bloco e assinatura
    numerados na ordem informada, e a CONTRATADA assina por último.
    """
    redator = Redator.para(TERMOS_SERVICO_VIDEO, dados.titulo)
    contratantes = list(dados.contratantes or []) or [ParteContratual()]
    plural = len(contratantes) > 1
    contratante_ref = "os CONTRATANTES" if plural else "o CONTRATANTE"

    blocos: list[Bloco] = [redator.titulo(dados.titulo), redator.paragrafo(INTRODUCAO)]
    if plural:
        blocos.append(redator.paragrafo("CONTRATANTES:"))
        blocos.extend(
            bloco_parte(parte, "CONTRATANTE", indice)
            for indice, parte in enumerate(contratantes, start=1)
        )
    else:
        blocos.append(bloco_parte(contratantes[0], "CONTRATANTE"))
    blocos.append(bloco_empresa(empresa, "CONTRATADA"))
    blocos.append(redator.abertura(dados.titulo))

    blocos.append(
        redator.clausula(
            CLAUSULA_OBJETO,
            "DO OBJETO",
            "O presente contrato tem como objeto a prestação, pela CONTRATADA, dos serviços de "
            f"{texto_ou(dados.descricao_objeto)}",
        )
    )
    verbo_pagar = "pagarão" if plural else "pagará"
    blocos.append(
        redator.clausula(
            CLAUSULA_PAGAMENTO,
            "DO VALOR E DA FORMA DE PAGAMENTO",
            f"Pelos serviços contratados, {contratante_ref} {verbo_pagar} à CONTRATADA o valor total de "
            f"{valor_com_extenso(dados.valor_total, padroes)}.\n{frase_pagamento(dados, padroes)}",
        )
    )
    blocos.append(
        redator.clausula(
            CLAUSULA_PRAZO,
            "DO PRAZO DE ENTREGA",
            f"Os materiais finalizados serão entregues no prazo de {texto_ou(dados.prazo_entrega)}",
        )
    )
    blocos.append(
        redator.clausula(
            CLAUSULA_RESP_CONTRATADA,
            "DAS RESPONSABILIDADES DA CONTRATADA",
            f"São responsabilidades da CONTRATADA:\n{alineas(dados.responsabilidades_contratada)}",
        )
    )
    titulo_resp = "DAS RESPONSABILIDADES DOS CONTRATANTES" if plural else "DAS RESPONSABILIDADES DO CONTRATANTE"
    rotulo_resp = "dos CONTRATANTES" if plural else "do CONTRATANTE"
    blocos.append(
        redator.clausula(
            CLAUSULA_RESP_CONTRATANTE,
            titulo_resp,
            f"São responsabilidades {rotulo_resp}:\n{alineas(dados.responsabilidades_contratante)}",
        )
    )
    blocos.append(
        redator.clausula(
            CLAUSULA_DIREITOS_AUTORAIS,
            "DOS DIREITOS AUTORAIS",
            texto_ou(dados.clausula_direitos_autorais, PLACEHOLDER_LONGO),
        )
    )
    blocos.append(
        redator.clausula(
            CLAUSULA_RESCISAO,
            "DA RESCISÃO",
            "O presente contrato poderá ser rescindido por qualquer das partes mediante aviso "
            f"prévio de {dias_por_extenso(dados.dias_aviso_rescisao)}, por escrito. Em caso de "
            "rescisão imotivada após o início dos serviços, a parte que lhe der causa pagará à "
            f"outra multa de {percentual_por_extenso(dados.percentual_multa_rescisao)} sobre o "
            "valor total do contrato.",
        )
    )
    if presente(dados.disposicoes_gerais):
        blocos.append(
            redator.clausula(
                CLAUSULA_DISPOSICOES_GERAIS,
                "DAS DISPOSIÇÕES GERAIS",
                dados.disposicoes_gerais.strip(),
            )
        )
    blocos.append(clausula_foro(redator, CLAUSULA_FORO, dados.foro))

    blocos.append(redator.fechamento(padroes))
    if plural:
        blocos.extend(Assinatura(f"CONTRATANTE {indice}") for indice in range(1, len(contratantes) + 1))
    else:
        blocos.append(Assinatura("CONTRATANTE"))
    blocos.append(assinatura_empresa("CONTRATADA", empresa.nome))
    blocos.append(linha_data(dados.cidade, dados.data_extenso))

    logger.debug("Serviço de vídeo composto para %d contratante(s)", len(contratantes))
    return blocos
