from __future__ import annotations

import re
from typing import Any

from services.formatacao import converter_numero
from services.modelos_contrato import (
    FORMAS_PAGAMENTO,
    FREQUENCIAS_PAGAMENTO,
    UNIDADES_REMUNERACAO,
    ContratoAutorizacaoMaterial,
    ContratoEditor,
    ContratoFilmmaker,
    ContratoPermuta,
    ContratoServicoVideo,
    ParteContratual,
)

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _vazio(valor: Any) -> bool:
    return not str(valor or "").strip()


def _validar_parte(parte: ParteContratual, rotulo: str) -> list[str]:
    faltantes: list[str] = []
    if _vazio(parte.nome):
        faltantes.append(f"Nome do {rotulo} é obrigatório")
    if _vazio(parte.cpf_cnpj):
        faltantes.append(f"CPF/CNPJ do {rotulo} é obrigatório")
    if _vazio(parte.endereco):
        faltantes.append(f"Endereço do {rotulo} é obrigatório")
    if not _vazio(parte.email) and not EMAIL_RE.match(parte.email.strip()):
        faltantes.append(f"E-mail do {rotulo} inválido")
    return faltantes


def _validar_valor(valor: str, rotulo: str) -> list[str]:
    numero = converter_numero(valor)
    if numero is None or numero < 0:
        return [f"{rotulo} deve ser um número não negativo"]
    return []


def _validar_percentual(valor: str, rotulo: str) -> list[str]:
    numero = converter_numero(valor)
    if numero is None or numero < 0 or numero > 100:
        return [f"{rotulo} deve ser uma porcentagem entre 0 e 100"]
    return []


def _validar_obrigatorios(dados: Any, campos: list[tuple[str, str]]) -> list[str]:
    return [f"{rotulo} é obrigatório" for campo, rotulo in campos if _vazio(getattr(dados, campo, ""))]


_FINALIZACAO = [
    ("titulo", "Título do contrato"),
    ("foro", "Foro"),
    ("cidade", "Cidade do contrato"),
    ("data_extenso", "Data completa do contrato"),
]


def validar_contrato(dados: Any) -> list[str]:
    """
    Valida o formulário de um contrato e retorna a lista de problemas
    encontrados (vazia quando está tudo certo). Nunca lança exceção.
    """
    faltantes: list[str] = []

    if isinstance(dados, ContratoPermuta):
        faltantes += _validar_parte(dados.permutante, "permutante")
        faltantes += _validar_obrigatorios(
            dados,
            [
                ("descricao_equipamento", "Descrição do equipamento"),
                ("descricao_servico", "Descrição do serviço"),
                ("condicoes", "Condições"),
                ("clausula_transferencia", "Cláusula de transferência"),
            ],
        )
        faltantes += _validar_valor(dados.valor_equipamento, "Valor do equipamento")

    elif isinstance(dados, ContratoServicoVideo):
        if not dados.contratantes:
            faltantes.append("Adicione pelo menos um contratante")
        for indice, parte in enumerate(dados.contratantes, start=1):
            rotulo = f"contratante {indice}" if len(dados.contratantes) > 1 else "contratante"
            faltantes += _validar_parte(parte, rotulo)
        faltantes += _validar_obrigatorios(
            dados,
            [
                ("descricao_objeto", "Objeto do contrato"),
                ("prazo_entrega", "Prazo de entrega"),
                ("responsabilidades_contratada", "Responsabilidades da contratada"),
                ("responsabilidades_contratante", "Responsabilidades do contratante"),
                ("clausula_direitos_autorais", "Cláusula de direitos autorais"),
            ],
        )
        faltantes += _validar_valor(dados.valor_total, "Valor total")
        if dados.forma_pagamento not in FORMAS_PAGAMENTO:
            faltantes.append("Forma de pagamento inválida")
        if dados.forma_pagamento == "sinal_entrega" and not _vazio(dados.percentual_sinal):
            faltantes += _validar_percentual(dados.percentual_sinal, "Porcentagem do sinal")
        faltantes += _validar_valor(dados.dias_aviso_rescisao, "Aviso prévio (dias)")
        faltantes += _validar_percentual(dados.percentual_multa_rescisao, "Multa de rescisão")

    elif isinstance(dados, (ContratoFilmmaker, ContratoEditor)):
        faltantes += _validar_parte(dados.contratado, "contratado")
        faltantes += _validar_valor(dados.valor_remuneracao, "Valor da remuneração")
        if dados.frequencia_pagamento not in FREQUENCIAS_PAGAMENTO:
            faltantes.append("Frequência de pagamento inválida")
        faltantes += _validar_valor(dados.multa_confidencialidade, "Multa de confidencialidade")
        faltantes += _validar_valor(dados.dias_aviso_rescisao, "Aviso prévio (dias)")
        faltantes += _validar_percentual(dados.percentual_multa_rescisao, "Multa de rescisão injustificada")
        if dados.incluir_nao_concorrencia and _vazio(dados.clausula_nao_concorrencia):
            faltantes.append("Cláusula de não concorrência é obrigatória quando incluída")
        if isinstance(dados, ContratoFilmmaker):
            if dados.unidade_remuneracao not in UNIDADES_REMUNERACAO:
                faltantes.append("Unidade da remuneração inválida")
            faltantes += _validar_obrigatorios(
                dados,
                [
                    ("prazo_entrega", "Prazos de execução e entrega"),
                    ("responsabilidade_equipamentos", "Cláusula de equipamentos"),
                ],
            )
        else:
            faltantes += _validar_percentual(dados.percentual_multa_atraso, "Multa por atraso")
            faltantes += _validar_obrigatorios(
                dados,
                [
                    ("responsabilidade_softwares", "Cláusula de softwares"),
                    ("propriedade_intelectual", "Cláusula de propriedade intelectual"),
                    ("trabalho_remoto", "Política de trabalho remoto/híbrido"),
                    ("disponibilidade_comunicacao", "Cláusula de disponibilidade"),
                    ("qualidade_servicos", "Cláusula de qualidade"),
                ],
            )

    elif isinstance(dados, ContratoAutorizacaoMaterial):
        faltantes += _validar_parte(dados.autorizado, "autorizado")
        faltantes += _validar_obrigatorios(
            dados,
            [
                ("nome_projeto", "Nome do projeto"),
                ("cliente_final", "Cliente final"),
                ("data_execucao", "Data de execução"),
                ("links_autorizados", "Links autorizados"),
            ],
        )
        faltantes += _validar_valor(dados.multa_uso_indevido, "Valor da multa")

    else:
        return ["Tipo de contrato não suportado"]

    faltantes += _validar_obrigatorios(dados, _FINALIZACAO)
    return faltantes
