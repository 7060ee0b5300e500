from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date
from typing import Any, ClassVar, Union

from services.formatacao import data_por_extenso

TIPO_PERMUTA = "PERMUTA_EQUIPMENT_SERVICE"
TIPO_SERVICO_VIDEO = "SERVICE_VIDEO"
TIPO_FILMMAKER = "FREELANCE_HIRE_FILMMAKER"
TIPO_EDITOR = "FREELANCE_HIRE_EDITOR"
TIPO_AUTORIZACAO = "FREELANCER_MATERIAL_AUTHORIZATION"

TIPOS_CONTRATO: dict[str, str] = {
    TIPO_PERMUTA: "Permuta de Equipamento por Serviços",
    TIPO_SERVICO_VIDEO: "Prestação de Serviços de Vídeo",
    TIPO_FILMMAKER: "Contratação Freelancer Filmmaker",
    TIPO_EDITOR: "Contratação Freelancer Editor",
    TIPO_AUTORIZACAO: "Autorização de Uso de Material (Freelancer)",
}

FORMAS_PAGAMENTO = ("vista", "sinal_entrega", "outro")
FREQUENCIAS_PAGAMENTO = ("mensal", "semanal", "projeto")
UNIDADES_REMUNERACAO = ("hora", "dia", "projeto")

FORO_PADRAO = "Lagoa Santa/MG"


@dataclass
class ParteContratual:
    nome: str = ""
    cpf_cnpj: str = ""
    endereco: str = ""
    email: str = ""


@dataclass
class ContratoPermuta:
    tipo_contrato: ClassVar[str] = TIPO_PERMUTA

    titulo: str = "CONTRATO DE PERMUTA DE EQUIPAMENTO POR PRESTAÇÃO DE SERVIÇOS"
    permutante: ParteContratual = field(default_factory=ParteContratual)
    descricao_equipamento: str = ""
    valor_equipamento: str = ""
    descricao_servico: str = ""
    clausula_pagamento: str = ""
    condicoes: str = ""
    clausula_transferencia: str = ""
    disposicoes_gerais: str = ""
    foro: str = ""
    cidade: str = ""
    data_extenso: str = ""


@dataclass
class ContratoServicoVideo:
    tipo_contrato: ClassVar[str] = TIPO_SERVICO_VIDEO

    titulo: str = "CONTRATO DE PRESTAÇÃO DE SERVIÇOS DE GRAVAÇÃO E EDIÇÃO DE VÍDEOS"
    contratantes: list[ParteContratual] = field(default_factory=lambda: [ParteContratual()])
    descricao_objeto: str = ""
    valor_total: str = ""
    forma_pagamento: str = "sinal_entrega"
    percentual_sinal: str = ""
    descricao_pagamento_outro: str = ""
    prazo_entrega: str = ""
    responsabilidades_contratada: str = ""
    responsabilidades_contratante: str = ""
    clausula_direitos_autorais: str = ""
    dias_aviso_rescisao: str = ""
    percentual_multa_rescisao: str = ""
    disposicoes_gerais: str = ""
    foro: str = ""
    cidade: str = ""
    data_extenso: str = ""


@dataclass
class ContratoFilmmaker:
    tipo_contrato: ClassVar[str] = TIPO_FILMMAKER

    titulo: str = "CONTRATO DE PRESTAÇÃO DE SERVIÇOS FREELANCER PARA CAPTAÇÃO DE VÍDEO"
    contratado: ParteContratual = field(default_factory=ParteContratual)
    valor_remuneracao: str = ""
    unidade_remuneracao: str = "dia"
    frequencia_pagamento: str = "projeto"
    forma_pagamento: str = ""
    prazo_entrega: str = ""
    responsabilidade_equipamentos: str = ""
    multa_confidencialidade: str = ""
    dias_aviso_rescisao: str = ""
    percentual_multa_rescisao: str = ""
    incluir_nao_concorrencia: bool = False
    clausula_nao_concorrencia: str = ""
    foro: str = ""
    cidade: str = ""
    data_extenso: str = ""


@dataclass
class ContratoEditor:
    tipo_contrato: ClassVar[str] = TIPO_EDITOR

    titulo: str = "CONTRATO DE PRESTAÇÃO DE SERVIÇOS FREELANCER PARA EDIÇÃO DE VÍDEO"
    contratado: ParteContratual = field(default_factory=ParteContratual)
    valor_remuneracao: str = ""
    frequencia_pagamento: str = "mensal"
    detalhes_pagamento: str = ""
    percentual_multa_atraso: str = ""
    responsabilidade_softwares: str = ""
    multa_confidencialidade: str = ""
    propriedade_intelectual: str = ""
    trabalho_remoto: str = ""
    dias_aviso_rescisao: str = ""
    percentual_multa_rescisao: str = ""
    disponibilidade_comunicacao: str = ""
    qualidade_servicos: str = ""
    incluir_nao_concorrencia: bool = False
    clausula_nao_concorrencia: str = ""
    foro: str = ""
    cidade: str = ""
    data_extenso: str = ""


@dataclass
class ContratoAutorizacaoMaterial:
    tipo_contrato: ClassVar[str] = TIPO_AUTORIZACAO

    titulo: str = "TERMO DE AUTORIZAÇÃO ESPECÍFICA DE USO DE MATERIAL – FREELANCER"
    autorizado: ParteContratual = field(default_factory=ParteContratual)
    nome_projeto: str = ""
    cliente_final: str = ""
    data_execucao: str = ""
    links_autorizados: str = ""
    multa_uso_indevido: str = ""
    foro: str = ""
    cidade: str = ""
    data_extenso: str = ""


DadosContrato = Union[
    ContratoPermuta,
    ContratoServicoVideo,
    ContratoFilmmaker,
    ContratoEditor,
    ContratoAutorizacaoMaterial,
]

CLASSES_CONTRATO: dict[str, type] = {
    TIPO_PERMUTA: ContratoPermuta,
    TIPO_SERVICO_VIDEO: ContratoServicoVideo,
    TIPO_FILMMAKER: ContratoFilmmaker,
    TIPO_EDITOR: ContratoEditor,
    TIPO_AUTORIZACAO: ContratoAutorizacaoMaterial,
}

CAMPOS_PARTE = ("permutante", "contratado", "autorizado")

# Nomes de campo em camelCase (payload dos formulários web) aceitos para cada campo.
ALIASES_CAMPOS: dict[str, tuple[str, ...]] = {
    "titulo": ("contractTitle",),
    "descricao_equipamento": ("equipmentDescription",),
    "valor_equipamento": ("equipmentValue",),
    "descricao_servico": ("serviceDescription",),
    "clausula_pagamento": ("paymentClause",),
    "condicoes": ("conditions",),
    "clausula_transferencia": ("transferClause",),
    "disposicoes_gerais": ("generalDispositions",),
    "cidade": ("contractCity",),
    "data_extenso": ("contractFullDate",),
    "descricao_objeto": ("objectDescription",),
    "valor_total": ("totalValue",),
    "forma_pagamento": ("paymentType", "paymentMethodDescription"),
    "percentual_sinal": ("sinalValuePercentage",),
    "descricao_pagamento_outro": ("paymentOutroDescription",),
    "prazo_entrega": ("deliveryDeadline", "deliveryDeadlineDetails"),
    "responsabilidades_contratada": ("responsibilitiesContratada",),
    "responsabilidades_contratante": ("responsibilitiesContratante",),
    "clausula_direitos_autorais": ("copyrightClause",),
    "dias_aviso_rescisao": ("rescissionNoticePeriodDays", "rescissionNoticeDays"),
    "percentual_multa_rescisao": ("rescissionPenaltyPercentage", "unjustifiedRescissionPenaltyPercentage"),
    "valor_remuneracao": ("remunerationValue",),
    "unidade_remuneracao": ("remunerationUnit",),
    "responsabilidade_equipamentos": ("equipmentDetails",),
    "multa_confidencialidade": ("confidentialityBreachPenaltyValue",),
    "nome_projeto": ("projectName",),
    "cliente_final": ("finalClientName",),
    "data_execucao": ("executionDate",),
    "links_autorizados": ("authorizedLinks",),
    "multa_uso_indevido": ("penaltyValue",),
}


def _primeiro_texto(*valores: Any) -> str:
    for valor in valores:
        texto = str(valor or "").strip()
        if texto:
            return texto
    return ""


def _to_bool(valor: Any) -> bool:
    if isinstance(valor, bool):
        return valor
    if isinstance(valor, (int, float)):
        return valor != 0
    if isinstance(valor, str):
        return valor.strip().lower() in {"1", "true", "sim", "yes", "y", "on"}
    return False


def _parte_de_dict(valor: Any) -> ParteContratual:
    if isinstance(valor, ParteContratual):
        return valor
    if not isinstance(valor, dict):
        return ParteContratual()
    return ParteContratual(
        nome=str(valor.get("nome") or valor.get("name") or ""),
        cpf_cnpj=str(valor.get("cpf_cnpj") or valor.get("cpfCnpj") or ""),
        endereco=str(valor.get("endereco") or valor.get("address") or ""),
        email=str(valor.get("email") or ""),
    )


# Identifica o tipo de contrato de um payload (dataclass ou dict).
def tipo_do_contrato(dados: Any) -> str:
    if isinstance(dados, dict):
        return _primeiro_texto(dados.get("tipo_contrato"), dados.get("contractType"))
    return str(getattr(dados, "tipo_contrato", "") or "")


def _valor_do_campo(dados: dict[str, Any], nome: str) -> Any:
    for chave in (nome, *ALIASES_CAMPOS.get(nome, ())):
        if dados.get(chave) is not None:
            return dados[chave]
    return None


def contrato_de_dict(dados: dict[str, Any]) -> DadosContrato | None:
    """
    Constrói o dataclass do contrato a partir de um dicionário (payload do
    formulário ou JSON). Aceita os nomes em snake_case ou os equivalentes em
    camelCase de ``ALIASES_CAMPOS``. Chaves ausentes ficam com o valor padrão
    do campo; tipos desconhecidos retornam None.
    """
    if not isinstance(dados, dict):
        return None
    classe = CLASSES_CONTRATO.get(tipo_do_contrato(dados))
    if classe is None:
        return None

    valores: dict[str, Any] = {}
    for campo in fields(classe):
        bruto = _valor_do_campo(dados, campo.name)
        if bruto is None:
            continue
        if campo.name in CAMPOS_PARTE:
            valores[campo.name] = _parte_de_dict(bruto)
        elif campo.name == "contratantes":
            lista = bruto if isinstance(bruto, (list, tuple)) else [bruto]
            valores[campo.name] = [_parte_de_dict(item) for item in lista]
        elif campo.name == "incluir_nao_concorrencia":
            valores[campo.name] = _to_bool(bruto)
        else:
            valores[campo.name] = str(bruto)
    return classe(**valores)


_RESPONSABILIDADES_CONTRATADA = (
    "Gravar os vídeos conforme combinado\n"
    "Editar os vídeos conforme briefing aprovado\n"
    "Entregar os vídeos finalizados em formato digital"
)
_RESPONSABILIDADES_CONTRATANTE = (
    "Fornecer todas as informações necessárias para o trabalho\n"
    "Aprovar o roteiro ou briefing, quando necessário\n"
    "Efetuar os pagamentos nas condições previstas"
)


def dados_iniciais(tipo: str, hoje: date | None = None) -> DadosContrato | None:
    """Valores iniciais de cada formulário de contrato."""
    data_hoje = data_por_extenso(hoje)
    comuns = {"foro": FORO_PADRAO, "cidade": FORO_PADRAO, "data_extenso": data_hoje}

    if tipo == TIPO_PERMUTA:
        return ContratoPermuta(
            descricao_equipamento="uma câmera fotográfica com acessórios",
            valor_equipamento="6000.00",
            descricao_servico="gravação e edição de vídeos",
            clausula_pagamento=(
                "O pagamento do valor acordado será realizado por meio da prestação dos "
                "serviços descritos na cláusula anterior, não havendo a necessidade de "
                "pagamento em dinheiro."
            ),
            condicoes=(
                "Não há prazo limite estipulado para a quitação do valor em serviços. As "
                "partes se comprometem a manter comunicação clara e objetiva quanto à "
                "realização e entrega dos serviços."
            ),
            clausula_transferencia=(
                "A propriedade do equipamento será transferida ao PERMUTADO na assinatura "
                "deste contrato, sendo este responsável por sua guarda, manutenção e "
                "utilização a partir de então."
            ),
            disposicoes_gerais=(
                "Este contrato é celebrado em caráter irrevogável e irretratável, "
                "obrigando as partes por si e seus sucessores."
            ),
            **comuns,
        )
    if tipo == TIPO_SERVICO_VIDEO:
        return ContratoServicoVideo(
            descricao_objeto=(
                "gravação e edição de 10 (dez) vídeos, conforme briefing e orientações "
                "fornecidas pelo CONTRATANTE."
            ),
            valor_total="2299.00",
            forma_pagamento="sinal_entrega",
            percentual_sinal="50",
            prazo_entrega=(
                "7 dias úteis após a realização da última gravação, salvo acordo "
                "diferente entre as partes."
            ),
            responsabilidades_contratada=_RESPONSABILIDADES_CONTRATADA,
            responsabilidades_contratante=_RESPONSABILIDADES_CONTRATANTE,
            clausula_direitos_autorais=(
                "Os direitos sobre os vídeos finalizados serão cedidos ao CONTRATANTE "
                "após o pagamento integral."
            ),
            dias_aviso_rescisao="7",
            percentual_multa_rescisao="20",
            disposicoes_gerais=(
                "Qualquer alteração neste contrato só terá validade se feita por escrito "
                "e assinada por ambas as partes."
            ),
            **comuns,
        )
    if tipo == TIPO_FILMMAKER:
        return ContratoFilmmaker(
            valor_remuneracao="150.00",
            unidade_remuneracao="dia",
            frequencia_pagamento="projeto",
            forma_pagamento=(
                "A forma de pagamento ao CONTRATADO (mensal, semanal ou por projeto) será "
                "de sua escolha, desde que acordada com a CONTRATANTE antes do início dos "
                "trabalhos, podendo esse acordo ser feito verbalmente, por e-mail ou "
                "qualquer outro meio eletrônico de comunicação aceito por ambas as partes."
            ),
            prazo_entrega=(
                "Os prazos para execução e entrega dos arquivos serão definidos por e-mail "
                "ou outro meio digital, sendo obrigatória sua confirmação pelo CONTRATADO."
            ),
            responsabilidade_equipamentos=(
                "Os equipamentos utilizados poderão ser fornecidos pela CONTRATANTE ou do "
                "próprio CONTRATADO, desde que previamente aprovados."
            ),
            multa_confidencialidade="15000.00",
            dias_aviso_rescisao="15",
            percentual_multa_rescisao="30",
            incluir_nao_concorrencia=False,
            clausula_nao_concorrencia=(
                "Durante a vigência deste contrato, o CONTRATADO não poderá prestar "
                "serviços diretamente aos clientes apresentados pela CONTRATANTE sem sua "
                "prévia autorização por escrito."
            ),
            **comuns,
        )
    if tipo == TIPO_EDITOR:
        return ContratoEditor(
            valor_remuneracao="3000.00",
            frequencia_pagamento="mensal",
            detalhes_pagamento=(
                "O pagamento será realizado por transferência bancária ou PIX até o 5º "
                "(quinto) dia útil após o fechamento do período."
            ),
            percentual_multa_atraso="10",
            responsabilidade_softwares=(
                "O CONTRATADO utilizará softwares de edição devidamente licenciados, sendo "
                "o único responsável por sua regularidade, salvo quando as licenças forem "
                "fornecidas pela CONTRATANTE."
            ),
            multa_confidencialidade="15000.00",
            propriedade_intelectual=(
                "Todo o material editado, incluindo projetos, arquivos brutos e versões "
                "finais, é de propriedade exclusiva da CONTRATANTE, não podendo ser "
                "utilizado pelo CONTRATADO sem autorização expressa."
            ),
            trabalho_remoto=(
                "Os serviços poderão ser prestados de forma remota ou híbrida, cabendo ao "
                "CONTRATADO manter ambiente de trabalho adequado e conexão estável."
            ),
            dias_aviso_rescisao="15",
            percentual_multa_rescisao="30",
            disponibilidade_comunicacao=(
                "O CONTRATADO deverá manter-se disponível nos canais de comunicação "
                "acordados durante o horário comercial, respondendo às solicitações da "
                "CONTRATANTE em até 24 (vinte e quatro) horas."
            ),
            qualidade_servicos=(
                "Os materiais entregues deverão observar o padrão de qualidade, o manual "
                "de identidade visual e as referências aprovadas pela CONTRATANTE."
            ),
            incluir_nao_concorrencia=False,
            clausula_nao_concorrencia=(
                "Durante a vigência deste contrato e por 6 (seis) meses após seu término, "
                "o CONTRATADO não prestará serviços de edição diretamente aos clientes da "
                "CONTRATANTE."
            ),
            **comuns,
        )
    if tipo == TIPO_AUTORIZACAO:
        return ContratoAutorizacaoMaterial(multa_uso_indevido="5000.00", **comuns)
    return None
