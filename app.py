from __future__ import annotations

import html
import logging
import math
import os
import re
from dataclasses import asdict
from typing import Any

import streamlit as st
from dotenv import load_dotenv

from exporters.docx_exporter import documento_para_docx_bytes, texto_para_docx_bytes
from exporters.html_exporter import documento_para_html
from exporters.pdf_exporter import documento_para_pdf_bytes, texto_para_pdf_bytes
from exporters.texto_exporter import documento_para_texto
from services.config import caminho_presets, carregar_empresa, chave_gemini, modelo_gemini
from services.formatacao import formatar_moeda, formatar_numero
from services.gemini_service import (
    DADOS_DEMO_PADRAO,
    DadosDemoOrcamento,
    GeminiServiceError,
    gerar_dados_demo_orcamento,
)
from services.logging_config import configurar_logging
from services.modelos_contrato import (
    TIPO_AUTORIZACAO,
    TIPO_EDITOR,
    TIPO_FILMMAKER,
    TIPO_PERMUTA,
    TIPO_SERVICO_VIDEO,
    TIPOS_CONTRATO,
    contrato_de_dict,
    dados_iniciais,
)
from services.montador_contrato import montar_documento
from services.orcamento import (
    DESCONTO_PERCENTUAL,
    DESCONTO_VALOR,
    TERMOS_PADRAO,
    PreviaOrcamento,
    gerar_numero_orcamento,
    montar_previa_orcamento,
    orcamento_para_texto,
)
from services.presets import (
    PresetItem,
    adicionar_preset,
    atualizar_preset,
    carregar_presets,
    remover_preset,
    salvar_presets,
)
from services.validacao_contrato import validar_contrato

# ============================================================================
# SISTEMA DE AUTENTICAÇÃO
# ============================================================================

load_dotenv()
configurar_logging()
logger = logging.getLogger("app")

SENHA_APP = os.getenv("APP_PASSWORD")  # opcional; sem senha o acesso é livre


def exigir_senha():
    """Exige autenticação por senha quando APP_PASSWORD estiver configurada."""
    if not SENHA_APP:
        return True

    if "autenticado" not in st.session_state:
        st.session_state.autenticado = False

    if st.session_state.autenticado:
        return True

    st.title("🔒 Acesso restrito")
    st.markdown("---")
    senha = st.text_input("Senha", type="password")

    if st.button("Entrar"):
        if senha == SENHA_APP:
            st.session_state.autenticado = True
            st.rerun()
        else:
            st.error("❌ Senha incorreta.")
    return False


st.set_page_config(page_title="FastFilms - Contratos e Orçamentos", layout="wide")

# Bloqueia execução se não estiver autenticado
if not exigir_senha():
    st.stop()

# ============================================================================
# CONSTANTES E CONFIGURAÇÕES
# ============================================================================

EMPRESA = carregar_empresa()

SECOES = ["Contratos", "Orçamento"]

ROTULOS_FORMA_PAGAMENTO = {
    "vista": "À vista",
    "sinal_entrega": "Sinal + entrega",
    "outro": "Outro",
}

ROTULOS_FREQUENCIA = {
    "mensal": "Mensal",
    "semanal": "Semanal",
    "projeto": "Por projeto",
}

ROTULOS_UNIDADE = {
    "hora": "Por hora",
    "dia": "Por dia",
    "projeto": "Por projeto",
}

# Papel da parte única de cada contrato: (campo, rótulo da seção)
PARTE_POR_TIPO: dict[str, tuple[str, str]] = {
    TIPO_PERMUTA: ("permutante", "Dados do Permutante (cede o equipamento)"),
    TIPO_FILMMAKER: ("contratado", "Dados do Contratado (freelancer)"),
    TIPO_EDITOR: ("contratado", "Dados do Contratado (editor)"),
    TIPO_AUTORIZACAO: ("autorizado", "Dados do Autorizado (freelancer)"),
}

# (campo, rótulo, tipo de widget, opções)
CampoFormulario = tuple[str, str, str, Any]

CAMPOS_POR_TIPO: dict[str, list[CampoFormulario]] = {
    TIPO_PERMUTA: [
        ("descricao_equipamento", "Descrição do equipamento *", "texto", None),
        ("valor_equipamento", "Valor do equipamento (R$) *", "moeda", None),
        ("descricao_servico", "Descrição dos serviços prestados em troca *", "texto", None),
        ("clausula_pagamento", "Cláusula de forma de pagamento (opcional)", "area", None),
        ("condicoes", "Condições *", "area", None),
        ("clausula_transferencia", "Transferência de propriedade *", "area", None),
        ("disposicoes_gerais", "Disposições gerais (opcional)", "area", None),
    ],
    TIPO_SERVICO_VIDEO: [
        ("descricao_objeto", "Objeto do contrato *", "area", None),
        ("valor_total", "Valor total (R$) *", "moeda", None),
        ("forma_pagamento", "Forma de pagamento", "opcoes", ROTULOS_FORMA_PAGAMENTO),
        ("percentual_sinal", "Porcentagem do sinal (%)", "texto", None),
        ("descricao_pagamento_outro", "Descreva a forma de pagamento", "area", None),
        ("prazo_entrega", "Prazo de entrega *", "area", None),
        ("responsabilidades_contratada", "Responsabilidades da contratada (uma por linha) *", "area", None),
        ("responsabilidades_contratante", "Responsabilidades do contratante (uma por linha) *", "area", None),
        ("clausula_direitos_autorais", "Direitos autorais *", "area", None),
        ("dias_aviso_rescisao", "Aviso prévio para rescisão (dias) *", "texto", None),
        ("percentual_multa_rescisao", "Multa de rescisão (%) *", "texto", None),
        ("disposicoes_gerais", "Disposições gerais (opcional)", "area", None),
    ],
    TIPO_FILMMAKER: [
        ("valor_remuneracao", "Valor da remuneração (R$) *", "moeda", None),
        ("unidade_remuneracao", "Unidade da remuneração", "opcoes", ROTULOS_UNIDADE),
        ("frequencia_pagamento", "Frequência de pagamento", "opcoes", ROTULOS_FREQUENCIA),
        ("forma_pagamento", "Forma de pagamento", "area", None),
        ("prazo_entrega", "Prazos de execução e entrega *", "area", None),
        ("responsabilidade_equipamentos", "Equipamentos *", "area", None),
        ("multa_confidencialidade", "Multa por quebra de confidencialidade (R$) *", "moeda", None),
        ("dias_aviso_rescisao", "Aviso prévio para rescisão (dias) *", "texto", None),
        ("percentual_multa_rescisao", "Multa de rescisão injustificada (%) *", "texto", None),
        ("incluir_nao_concorrencia", "Incluir cláusula de não concorrência", "check", None),
        ("clausula_nao_concorrencia", "Cláusula de não concorrência", "area", None),
    ],
    TIPO_EDITOR: [
        ("valor_remuneracao", "Valor da remuneração (R$) *", "moeda", None),
        ("frequencia_pagamento", "Frequência de pagamento", "opcoes", ROTULOS_FREQUENCIA),
        ("detalhes_pagamento", "Detalhes do pagamento", "area", None),
        ("percentual_multa_atraso", "Multa por atraso (%) *", "texto", None),
        ("responsabilidade_softwares", "Softwares *", "area", None),
        ("multa_confidencialidade", "Multa por quebra de confidencialidade (R$) *", "moeda", None),
        ("propriedade_intelectual", "Propriedade intelectual *", "area", None),
        ("trabalho_remoto", "Trabalho remoto e híbrido *", "area", None),
        ("dias_aviso_rescisao", "Aviso prévio para rescisão (dias) *", "texto", None),
        ("percentual_multa_rescisao", "Multa de rescisão injustificada (%) *", "texto", None),
        ("disponibilidade_comunicacao", "Disponibilidade e comunicação *", "area", None),
        ("qualidade_servicos", "Qualidade dos serviços *", "area", None),
        ("incluir_nao_concorrencia", "Incluir cláusula de não concorrência", "check", None),
        ("clausula_nao_concorrencia", "Cláusula de não concorrência", "area", None),
    ],
    TIPO_AUTORIZACAO: [
        ("nome_projeto", "Nome do projeto *", "texto", None),
        ("cliente_final", "Cliente final *", "texto", None),
        ("data_execucao", "Data de execução *", "texto", None),
        ("links_autorizados", "Links autorizados (um por linha) *", "area", None),
        ("multa_uso_indevido", "Multa por uso indevido (R$) *", "moeda", None),
    ],
}

CAMPOS_FINALIZACAO: list[CampoFormulario] = [
    ("titulo", "Título do contrato *", "texto", None),
    ("foro", "Foro *", "texto", None),
    ("cidade", "Cidade *", "texto", None),
    ("data_extenso", "Data por extenso *", "texto", None),
]

CAMPOS_PARTE = [
    ("nome", "Nome completo / Razão social *"),
    ("cpf_cnpj", "CPF/CNPJ *"),
    ("endereco", "Endereço completo *"),
    ("email", "E-mail"),
]

MIME_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


# ============================================================================
# FUNÇÕES AUXILIARES
# ============================================================================

 # Retorna apenas os caracteres numéricos de um texto.
def _somente_digitos(valor: str) -> str:
    return re.sub(r"\D", "", valor or "")


 # Formata dígitos em padrão de CPF, inclusive durante digitação parcial.
def _formatar_cpf(digitos: str) -> str:
    if len(digitos) <= 3:
        return digitos
    if len(digitos) <= 6:
        return f"{digitos[:3]}.{digitos[3:]}"
    if len(digitos) <= 9:
        return f"{digitos[:3]}.{digitos[3:6]}.{digitos[6:]}"
    return f"{digitos[:3]}.{digitos[3:6]}.{digitos[6:9]}-{digitos[9:11]}"


 # Formata dígitos em padrão de CNPJ, inclusive durante digitação parcial.
def _formatar_cnpj(digitos: str) -> str:
    if len(digitos) <= 2:
        return digitos
    if len(digitos) <= 5:
        return f"{digitos[:2]}.{digitos[2:]}"
    if len(digitos) <= 8:
        return f"{digitos[:2]}.{digitos[2:5]}.{digitos[5:]}"
    if len(digitos) <= 12:
        return f"{digitos[:2]}.{digitos[2:5]}.{digitos[5:8]}/{digitos[8:]}"
    return f"{digitos[:2]}.{digitos[2:5]}.{digitos[5:8]}/{digitos[8:12]}-{digitos[12:14]}"


 # Decide entre máscara de CPF ou CNPJ conforme a quantidade de dígitos.
def _formatar_cpf_cnpj(valor: str) -> str:
    digitos = _somente_digitos(valor)
    if len(digitos) <= 11:
        return _formatar_cpf(digitos[:11])
    return _formatar_cnpj(digitos[:14])


 # Converte uma sequência numérica digitada em centavos para moeda brasileira.
def _formatar_moeda_br(valor: str) -> str:
    digitos = _somente_digitos(valor)
    if not digitos:
        return ""
    centavos = int(digitos)
    inteiro = centavos // 100
    resto = centavos % 100
    inteiro_formatado = f"{inteiro:,}".replace(",", ".")
    return f"R$ {inteiro_formatado},{resto:02d}"


 # Remove caracteres inválidos para nome de arquivo no Windows.
def _sanitizar_nome_arquivo(texto: str) -> str:
    nome = re.sub(r'[<>:"/\\|?*\x00-\x1F]', "", texto or "")
    nome = re.sub(r"\s+", " ", nome).strip(" .")
    return nome


 # Gera o nome padrão do arquivo do contrato com base na parte principal.
def _nome_arquivo_contrato(nome_parte: str, extensao: str) -> str:
    nome = _sanitizar_nome_arquivo(nome_parte) or "[NOME DA PARTE]"
    return f"Contrato - {nome}.{extensao}"


 # Gera o nome padrão do arquivo do orçamento com base no cliente.
def _nome_arquivo_orcamento(cliente: str, extensao: str) -> str:
    nome = _sanitizar_nome_arquivo(cliente).replace(" ", "_") or "cliente"
    return f"orcamento_{nome}.{extensao}"


def _chave(tipo: str, *partes: Any) -> str:
    return ".".join([tipo, *(str(parte) for parte in partes)])


 # Aplica máscara de CPF/CNPJ em um campo de documento.
def _aplicar_mascara_documento(campo: str) -> None:
    st.session_state[campo] = _formatar_cpf_cnpj(st.session_state.get(campo, ""))


 # Aplica máscara de moeda brasileira em um campo monetário.
def _aplicar_mascara_moeda(campo: str) -> None:
    st.session_state[campo] = _formatar_moeda_br(st.session_state.get(campo, ""))


# ============================================================================
# ESTADO DO FORMULÁRIO DE CONTRATOS
# ============================================================================

 # Preenche o session_state com os valores iniciais do contrato na primeira visita.
def _inicializar_formulario(tipo: str) -> None:
    marcador = _chave(tipo, "_inicializado")
    if st.session_state.get(marcador):
        return

    iniciais = asdict(dados_iniciais(tipo))
    for campo, valor in iniciais.items():
        if campo == "contratantes":
            st.session_state[_chave(tipo, "qtd_contratantes")] = max(len(valor), 1)
            for indice, parte in enumerate(valor):
                for subcampo, subvalor in parte.items():
                    st.session_state[_chave(tipo, "contratantes", indice, subcampo)] = subvalor
        elif isinstance(valor, dict):
            for subcampo, subvalor in valor.items():
                st.session_state[_chave(tipo, campo, subcampo)] = subvalor
        else:
            st.session_state[_chave(tipo, campo)] = valor

    st.session_state[marcador] = True


def _restaurar_padroes(tipo: str) -> None:
    for chave in [k for k in st.session_state.keys() if str(k).startswith(f"{tipo}.")]:
        del st.session_state[chave]


def _adicionar_contratante(tipo: str) -> None:
    chave_qtd = _chave(tipo, "qtd_contratantes")
    st.session_state[chave_qtd] = int(st.session_state.get(chave_qtd, 1)) + 1


 # Remove o contratante do índice informado, deslocando os seguintes para cima.
def _remover_contratante(tipo: str, indice: int) -> None:
    chave_qtd = _chave(tipo, "qtd_contratantes")
    quantidade = int(st.session_state.get(chave_qtd, 1))
    if quantidade <= 1:
        return

    for atual in range(indice, quantidade - 1):
        for campo, _ in CAMPOS_PARTE:
            st.session_state[_chave(tipo, "contratantes", atual, campo)] = st.session_state.get(
                _chave(tipo, "contratantes", atual + 1, campo), ""
            )
    for campo, _ in CAMPOS_PARTE:
        st.session_state.pop(_chave(tipo, "contratantes", quantidade - 1, campo), None)
    st.session_state[chave_qtd] = quantidade - 1


def _coletar_parte(tipo: str, *prefixo: Any) -> dict[str, str]:
    return {
        campo: str(st.session_state.get(_chave(tipo, *prefixo, campo), "") or "")
        for campo, _ in CAMPOS_PARTE
    }


 # Monta o payload do contrato a partir do session_state.
def _coletar_payload(tipo: str) -> dict[str, Any]:
    payload: dict[str, Any] = {"tipo_contrato": tipo}

    if tipo == TIPO_SERVICO_VIDEO:
        quantidade = int(st.session_state.get(_chave(tipo, "qtd_contratantes"), 1))
        payload["contratantes"] = [_coletar_parte(tipo, "contratantes", i) for i in range(quantidade)]
    elif tipo in PARTE_POR_TIPO:
        papel, _ = PARTE_POR_TIPO[tipo]
        payload[papel] = _coletar_parte(tipo, papel)

    for campo, _, _, _ in CAMPOS_POR_TIPO.get(tipo, []) + CAMPOS_FINALIZACAO:
        payload[campo] = st.session_state.get(_chave(tipo, campo))
    return payload


# ============================================================================
# RENDERIZAÇÃO DOS FORMULÁRIOS
# ============================================================================

def _titulo_secao(texto: str) -> None:
    st.markdown(f"#### {texto}")


def _renderizar_campos_parte(tipo: str, *prefixo: Any) -> None:
    col1, col2 = st.columns(2)
    for idx, (campo, rotulo) in enumerate(CAMPOS_PARTE):
        chave = _chave(tipo, *prefixo, campo)
        with col1 if idx % 2 == 0 else col2:
            if campo == "cpf_cnpj":
                st.text_input(rotulo, key=chave, on_change=_aplicar_mascara_documento, args=(chave,))
            else:
                st.text_input(rotulo, key=chave)


def _renderizar_contratantes(tipo: str) -> None:
    quantidade = int(st.session_state.get(_chave(tipo, "qtd_contratantes"), 1))
    _titulo_secao("Dados do(s) Contratante(s)")
    for indice in range(quantidade):
        with st.container(border=True):
            cab1, cab2 = st.columns([4, 1])
            with cab1:
                st.caption(f"Contratante {indice + 1}" if quantidade > 1 else "Contratante")
            with cab2:
                st.button(
                    "Remover",
                    key=_chave(tipo, "btn_remover_contratante", indice),
                    on_click=_remover_contratante,
                    args=(tipo, indice),
                    disabled=quantidade <= 1,
                )
            _renderizar_campos_parte(tipo, "contratantes", indice)
    st.button(
        "Adicionar contratante",
        key=_chave(tipo, "btn_adicionar_contratante"),
        on_click=_adicionar_contratante,
        args=(tipo,),
    )


 # Renderiza um campo do formulário conforme o tipo de widget declarado.
def _renderizar_campo(tipo: str, campo: CampoFormulario) -> None:
    nome, rotulo, widget, opcoes = campo
    chave = _chave(tipo, nome)

    if widget == "area":
        st.text_area(rotulo, key=chave, height=100)
    elif widget == "moeda":
        st.text_input(
            rotulo,
            key=chave,
            placeholder="Digite apenas números. Ex.: 125000 -> R$ 1.250,00",
            on_change=_aplicar_mascara_moeda,
            args=(chave,),
        )
    elif widget == "opcoes":
        st.selectbox(rotulo, list(opcoes), format_func=lambda valor: opcoes.get(valor, valor), key=chave)
    elif widget == "check":
        st.checkbox(rotulo, key=chave)
    else:
        st.text_input(rotulo, key=chave)


 # Decide se um campo condicional deve aparecer com base nos demais valores.
def _campo_visivel(tipo: str, nome: str) -> bool:
    if tipo == TIPO_SERVICO_VIDEO:
        forma = st.session_state.get(_chave(tipo, "forma_pagamento"))
        if nome == "percentual_sinal":
            return forma == "sinal_entrega"
        if nome == "descricao_pagamento_outro":
            return forma == "outro"
    if nome == "clausula_nao_concorrencia":
        return bool(st.session_state.get(_chave(tipo, "incluir_nao_concorrencia")))
    return True


def _renderizar_formulario(tipo: str) -> None:
    if tipo == TIPO_SERVICO_VIDEO:
        _renderizar_contratantes(tipo)
    elif tipo in PARTE_POR_TIPO:
        papel, titulo = PARTE_POR_TIPO[tipo]
        _titulo_secao(titulo)
        _renderizar_campos_parte(tipo, papel)

    _titulo_secao("Cláusulas")
    for campo in CAMPOS_POR_TIPO[tipo]:
        if _campo_visivel(tipo, campo[0]):
            _renderizar_campo(tipo, campo)

    _titulo_secao("Finalização")
    fim1, fim2 = st.columns(2)
    for idx, campo in enumerate(CAMPOS_FINALIZACAO):
        with fim1 if idx % 2 == 0 else fim2:
            _renderizar_campo(tipo, campo)


def _nome_parte_principal(payload: dict[str, Any]) -> str:
    if payload.get("contratantes"):
        return str(payload["contratantes"][0].get("nome") or "")
    for papel in ("permutante", "contratado", "autorizado"):
        if isinstance(payload.get(papel), dict):
            return str(payload[papel].get("nome") or "")
    return ""


def _pagina_contratos() -> None:
    tipos = list(TIPOS_CONTRATO)
    with st.sidebar:
        tipo = st.selectbox(
            "Tipo de contrato",
            tipos,
            format_func=lambda valor: TIPOS_CONTRATO[valor],
            key="tipo_contrato",
        )
        st.button("Restaurar valores padrão", on_click=_restaurar_padroes, args=(tipo,))

    _inicializar_formulario(tipo)
    st.title(TIPOS_CONTRATO[tipo])

    col_form, col_previa = st.columns([1, 1])
    with col_form:
        with st.container(border=True):
            _renderizar_formulario(tipo)

    payload = _coletar_payload(tipo)
    contrato = contrato_de_dict(payload)
    faltantes = validar_contrato(contrato) if contrato is not None else ["Tipo de contrato não suportado"]
    documento = montar_documento(contrato if contrato is not None else payload, EMPRESA)

    with col_previa:
        st.markdown("#### Pré-visualização do contrato")
        if faltantes:
            itens = "\n".join(f"- {item}" for item in faltantes)
            st.error(f"Campos pendentes ou inválidos:\n{itens}")
        st.markdown(documento_para_html(documento), unsafe_allow_html=True)

        nome_parte = _nome_parte_principal(payload)
        down1, down2, down3 = st.columns(3)
        with down1:
            st.download_button(
                "Baixar .pdf",
                data=documento_para_pdf_bytes(documento),
                file_name=_nome_arquivo_contrato(nome_parte, "pdf"),
                mime="application/pdf",
                disabled=bool(faltantes),
            )
        with down2:
            st.download_button(
                "Baixar .docx",
                data=documento_para_docx_bytes(documento),
                file_name=_nome_arquivo_contrato(nome_parte, "docx"),
                mime=MIME_DOCX,
                disabled=bool(faltantes),
            )
        with down3:
            st.download_button(
                "Baixar .txt",
                data=documento_para_texto(documento).encode("utf-8"),
                file_name=_nome_arquivo_contrato(nome_parte, "txt"),
                mime="text/plain",
                disabled=bool(faltantes),
            )


# ============================================================================
# ORÇAMENTO
# ============================================================================

COLUNAS_ITENS = ["descricao", "quantidade", "preco_unitario", "total_manual"]


def _item_vazio() -> dict[str, Any]:
    return {"descricao": "", "quantidade": None, "preco_unitario": None, "total_manual": None}


def _inicializar_orcamento() -> None:
    st.session_state.setdefault("orc_cliente", "")
    st.session_state.setdefault("orc_endereco", "")
    st.session_state.setdefault("orc_itens", [_item_vazio()])
    st.session_state.setdefault("orc_versao_itens", 0)
    st.session_state.setdefault("orc_tipo_desconto", DESCONTO_VALOR)
    st.session_state.setdefault("orc_valor_desconto", 0.0)
    st.session_state.setdefault("orc_termos", TERMOS_PADRAO)
    if "orc_presets" not in st.session_state:
        st.session_state["orc_presets"] = carregar_presets(caminho_presets())


def _valor_celula(valor: Any) -> Any:
    # células vazias do DataFrame chegam como NaN
    if isinstance(valor, float) and not math.isfinite(valor):
        return None
    return valor


 # Normaliza o retorno do data_editor (DataFrame ou lista) em lista de dicionários.
def _linhas_editor(resultado: Any) -> list[dict[str, Any]]:
    if hasattr(resultado, "to_dict"):
        resultado = resultado.to_dict("records")
    linhas: list[dict[str, Any]] = []
    for linha in resultado or []:
        if isinstance(linha, dict):
            linhas.append({coluna: _valor_celula(linha.get(coluna)) for coluna in COLUNAS_ITENS})
    return linhas


def _substituir_itens(itens: list[dict[str, Any]]) -> None:
    st.session_state["orc_itens"] = itens
    st.session_state["orc_versao_itens"] += 1


def _aplicar_preset(preset: PresetItem) -> None:
    itens = [linha for linha in st.session_state["orc_itens"] if str(linha.get("descricao") or "").strip()]
    itens.append(
        {"descricao": preset.descricao, "quantidade": 1.0, "preco_unitario": preset.preco_unitario, "total_manual": None}
    )
    _substituir_itens(itens)


def _gravar_presets(presets: list[PresetItem]) -> None:
    salvar_presets(caminho_presets(), presets)
    st.session_state["orc_presets"] = presets


 # Preenche o orçamento com dados de demonstração (Gemini ou dados fixos).
def _preencher_demo() -> None:
    dados: DadosDemoOrcamento = DADOS_DEMO_PADRAO
    if not chave_gemini():
        st.session_state["orc_feedback_demo"] = ("info", "Sem chave do Gemini: usando dados de exemplo fixos.")
    else:
        try:
            dados = gerar_dados_demo_orcamento(EMPRESA, model=modelo_gemini())
            st.session_state["orc_feedback_demo"] = ("success", "Dados de demonstração gerados com IA.")
        except GeminiServiceError as exc:
            logger.warning("Falha ao gerar dados de demonstração: %s", exc)
            st.session_state["orc_feedback_demo"] = ("warning", f"{exc} Usando dados de exemplo fixos.")

    st.session_state["orc_cliente"] = dados.cliente
    st.session_state["orc_endereco"] = dados.endereco_cliente
    _substituir_itens(
        [
            {
                "descricao": dados.descricao,
                "quantidade": dados.quantidade,
                "preco_unitario": dados.preco_unitario,
                "total_manual": None,
            }
        ]
    )


def _exibir_feedback_demo() -> None:
    feedback = st.session_state.pop("orc_feedback_demo", None)
    if not feedback:
        return
    nivel, mensagem = feedback
    getattr(st, nivel)(mensagem)


def _renderizar_gestao_presets() -> None:
    presets: list[PresetItem] = st.session_state["orc_presets"]
    with st.expander("Gerenciar itens pré-definidos"):
        st.caption(f"Arquivo: {caminho_presets()}")
        nova_desc = st.text_input("Descrição do novo item", key="preset_nova_desc")
        novo_preco = st.number_input("Preço unitário (R$)", min_value=0.0, step=10.0, key="preset_novo_preco")
        if st.button("Adicionar item pré-definido", key="btn_preset_adicionar"):
            try:
                _gravar_presets(adicionar_preset(presets, nova_desc, novo_preco))
                st.success("Item pré-definido adicionado.")
            except ValueError as exc:
                st.error(str(exc))

        if not presets:
            return

        st.markdown("---")
        selecionado = st.selectbox(
            "Editar item",
            presets,
            format_func=lambda preset: f"{preset.descricao} ({formatar_moeda(preset.preco_unitario)})",
            key="preset_edicao",
        )
        desc_edit = st.text_input("Descrição", value=selecionado.descricao, key=f"preset_desc_{selecionado.id}")
        preco_edit = st.number_input(
            "Preço unitário (R$)",
            min_value=0.0,
            step=10.0,
            value=float(selecionado.preco_unitario),
            key=f"preset_preco_{selecionado.id}",
        )
        ed1, ed2 = st.columns(2)
        with ed1:
            if st.button("Salvar alterações", key="btn_preset_atualizar"):
                try:
                    _gravar_presets(atualizar_preset(presets, selecionado.id, desc_edit, preco_edit))
                    st.success("Item pré-definido atualizado.")
                except ValueError as exc:
                    st.error(str(exc))
        with ed2:
            if st.button("Remover item", key="btn_preset_remover"):
                _gravar_presets(remover_preset(presets, selecionado.id))
                st.rerun()


def _formulario_orcamento() -> dict[str, Any]:
    return {
        "cliente": st.session_state.get("orc_cliente", ""),
        "endereco_cliente": st.session_state.get("orc_endereco", ""),
        "itens": st.session_state.get("orc_itens", []),
        "tipo_desconto": st.session_state.get("orc_tipo_desconto", DESCONTO_VALOR),
        "valor_desconto": st.session_state.get("orc_valor_desconto", 0.0),
        "termos": st.session_state.get("orc_termos", TERMOS_PADRAO),
    }


def _previa_orcamento_html(previa: PreviaOrcamento) -> str:
    linhas = "".join(
        f"<tr><td>{html.escape(item.descricao)}</td><td>{formatar_numero(item.quantidade)}</td>"
        f"<td>{formatar_moeda(item.preco_unitario)}</td><td>{formatar_moeda(item.total)}</td></tr>"
        for item in previa.itens
    )
    desconto = ""
    if previa.desconto:
        desconto = (
            f"<p>Subtotal: {formatar_moeda(previa.subtotal)}<br/>"
            f"Desconto: -{formatar_moeda(previa.desconto)}</p>"
        )
    endereco = "<br/>".join(html.escape(linha) for linha in previa.endereco_cliente.splitlines())
    termos = "<br/>".join(html.escape(linha) for linha in previa.termos.splitlines())
    return (
        f"<div><h3>{previa.empresa.nome}</h3><p><em>{previa.empresa.slogan}</em></p>"
        f"<p>Número: {previa.numero}<br/>Data: {previa.data}</p>"
        f"<p><strong>Cliente:</strong> {html.escape(previa.cliente)}<br/>{endereco}</p>"
        "<table><tr><th>Descrição</th><th>Qtde.</th><th>Preço Unit.</th><th>Total</th></tr>"
        f"{linhas}</table>{desconto}"
        f"<p><strong>Total: {formatar_moeda(previa.total)}</strong></p>"
        f"<p><strong>Termos e Condições</strong><br/>{termos}</p></div>"
    )


def _pagina_orcamento() -> None:
    _inicializar_orcamento()
    st.title("Orçamento")

    col_form, col_previa = st.columns([1, 1])
    with col_form:
        with st.container(border=True):
            st.button("Preencher dados de demonstração (IA)", on_click=_preencher_demo)
            _exibir_feedback_demo()

            _titulo_secao("Cliente")
            st.text_input("Nome do cliente *", key="orc_cliente")
            st.text_area("Endereço do cliente", key="orc_endereco", height=80)

            _titulo_secao("Itens")
            presets: list[PresetItem] = st.session_state["orc_presets"]
            if presets:
                pre1, pre2 = st.columns([3, 1])
                with pre1:
                    escolhido = st.selectbox(
                        "Item pré-definido",
                        presets,
                        format_func=lambda preset: f"{preset.descricao} ({formatar_moeda(preset.preco_unitario)})",
                        key="orc_preset_escolhido",
                    )
                with pre2:
                    st.button("Adicionar", key="btn_aplicar_preset", on_click=_aplicar_preset, args=(escolhido,))

            editado = st.data_editor(
                st.session_state["orc_itens"],
                num_rows="dynamic",
                key=f"orc_editor_{st.session_state['orc_versao_itens']}",
                column_config={
                    "descricao": st.column_config.TextColumn("Descrição"),
                    "quantidade": st.column_config.NumberColumn("Qtde.", min_value=0.0),
                    "preco_unitario": st.column_config.NumberColumn("Preço Unit. (R$)", min_value=0.0, format="%.2f"),
                    "total_manual": st.column_config.NumberColumn("Total manual (opcional)", min_value=0.0, format="%.2f"),
                },
                use_container_width=True,
            )
            st.session_state["orc_itens"] = _linhas_editor(editado)

            _renderizar_gestao_presets()

            _titulo_secao("Desconto e termos")
            desc1, desc2 = st.columns(2)
            with desc1:
                st.radio(
                    "Tipo de desconto",
                    [DESCONTO_VALOR, DESCONTO_PERCENTUAL],
                    format_func=lambda valor: "Valor (R$)" if valor == DESCONTO_VALOR else "Percentual (%)",
                    horizontal=True,
                    key="orc_tipo_desconto",
                )
            with desc2:
                st.number_input("Desconto", min_value=0.0, step=1.0, key="orc_valor_desconto")
            st.text_area("Termos e condições", key="orc_termos", height=120)

            gerar = st.button("Gerar orçamento", type="primary", key="btn_gerar_orcamento")

    formulario = _formulario_orcamento()
    if gerar:
        if not str(formulario["cliente"]).strip():
            st.error("Informe o nome do cliente antes de gerar o orçamento.")
        else:
            previa = montar_previa_orcamento(formulario, EMPRESA, numero=gerar_numero_orcamento())
            st.session_state["orc_gerado"] = previa
            logger.info("Orçamento %s gerado", previa.numero if previa else "-")

    with col_previa:
        st.markdown("#### Pré-visualização do orçamento")
        previa = montar_previa_orcamento(formulario, EMPRESA)
        if previa is None:
            st.info("Preencha os dados do cliente ou os itens para ver a prévia.")
        else:
            st.markdown(_previa_orcamento_html(previa), unsafe_allow_html=True)

        gerado: PreviaOrcamento | None = st.session_state.get("orc_gerado")
        if gerado is not None:
            st.success(f"Orçamento {gerado.numero} pronto para download.")
            texto = orcamento_para_texto(gerado)
            titulo = f"ORCAMENTO {gerado.numero}"
            down1, down2 = st.columns(2)
            with down1:
                st.download_button(
                    "Baixar .pdf",
                    data=texto_para_pdf_bytes(titulo=titulo, texto=texto),
                    file_name=_nome_arquivo_orcamento(gerado.cliente, "pdf"),
                    mime="application/pdf",
                )
            with down2:
                st.download_button(
                    "Baixar .docx",
                    data=texto_para_docx_bytes(titulo=titulo, texto=texto),
                    file_name=_nome_arquivo_orcamento(gerado.cliente, "docx"),
                    mime=MIME_DOCX,
                )


# ============================================================================
# EXECUÇÃO
# ============================================================================

with st.sidebar:
    st.markdown(f"### {EMPRESA.nome}")
    if EMPRESA.slogan:
        st.caption(EMPRESA.slogan)
    secao = st.radio("Seção", SECOES, key="secao")

if secao == "Contratos":
    _pagina_contratos()
else:
    _pagina_orcamento()
