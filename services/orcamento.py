"""Cálculo e montagem da prévia de orçamentos."""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from services.config import IdentidadeEmpresa
from services.formatacao import converter_numero, formatar_moeda, formatar_numero

TERMOS_PADRAO = (
    "Condições Comerciais: Forma de Pagamento: Transferência bancária, boleto ou PIX.\n\n"
    "Condições de Pagamento: 50% do valor será pago antes do início do serviço e o restante, "
    "após sua conclusão."
)

DESCONTO_PERCENTUAL = "PERCENTUAL"
DESCONTO_VALOR = "VALOR"

NUMERO_PREVIA = "PREVIA"


@dataclass(frozen=True)
class ItemOrcamento:
    descricao: str
    quantidade: float
    preco_unitario: float
    total: float
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


@dataclass(frozen=True)
class PreviaOrcamento:
    cliente: str
    endereco_cliente: str
    itens: tuple[ItemOrcamento, ...]
    termos: str
    numero: str
    data: str
    empresa: IdentidadeEmpresa
    subtotal: float
    desconto: float
    total: float


def calcular_item(
    descricao: str,
    quantidade: Any,
    preco_unitario: Any,
    total_manual: Any = None,
    id: str | None = None,
) -> ItemOrcamento:
    """Quantidade × preço unitário; um total manual válido substitui o cálculo."""
    qtd = converter_numero(quantidade) or 0.0
    preco = converter_numero(preco_unitario) or 0.0
    manual = converter_numero(total_manual)
    total = manual if manual is not None and manual >= 0 else qtd * preco
    return ItemOrcamento(
        descricao=(descricao or "").strip(),
        quantidade=qtd,
        preco_unitario=preco,
        total=round(total, 2),
        id=id or uuid.uuid4().hex,
    )


def calcular_itens(linhas: list[dict[str, Any]]) -> list[ItemOrcamento]:
    itens: list[ItemOrcamento] = []
    for linha in linhas or []:
        if not isinstance(linha, dict):
            continue
        itens.append(
            calcular_item(
                descricao=str(linha.get("descricao") or ""),
                quantidade=linha.get("quantidade"),
                preco_unitario=linha.get("preco_unitario"),
                total_manual=linha.get("total_manual"),
                id=linha.get("id"),
            )
        )
    return itens


def calcular_desconto(subtotal: float, tipo: str, valor: Any) -> float:
    numero = converter_numero(valor)
    if numero is None or numero <= 0 or subtotal <= 0:
        return 0.0
    if tipo == DESCONTO_PERCENTUAL:
        numero = subtotal * min(numero, 100.0) / 100
    return round(min(numero, subtotal), 2)


def gerar_numero_orcamento(ano: int | None = None, rng: random.Random | None = None) -> str:
    ano = ano or date.today().year
    sorteio = (rng or random).randrange(100000)
    return f"ORC-{ano}-{sorteio:05d}"


def _tem_conteudo(formulario: dict[str, Any]) -> bool:
    if str(formulario.get("cliente") or "").strip() or str(formulario.get("endereco_cliente") or "").strip():
        return True
    for linha in formulario.get("itens") or []:
        if not isinstance(linha, dict):
            continue
        if str(linha.get("descricao") or "").strip():
            return True
        if any(converter_numero(linha.get(chave)) for chave in ("quantidade", "preco_unitario")):
            return True
    return False


def montar_previa_orcamento(
    formulario: dict[str, Any],
    empresa: IdentidadeEmpresa,
    numero: str = NUMERO_PREVIA,
    data: date | None = None,
) -> PreviaOrcamento | None:
    """
    Monta a prévia do orçamento a partir dos dados do formulário.

    Retorna None quando ainda não há nenhum dado significativo (sem cliente,
    sem endereço e sem itens preenchidos).
    """
    if not isinstance(formulario, dict) or not _tem_conteudo(formulario):
        return None

    itens = calcular_itens(formulario.get("itens") or [])
    subtotal = round(sum(item.total for item in itens), 2)
    desconto = calcular_desconto(
        subtotal,
        str(formulario.get("tipo_desconto") or DESCONTO_VALOR),
        formulario.get("valor_desconto"),
    )
    return PreviaOrcamento(
        cliente=str(formulario.get("cliente") or "").strip(),
        endereco_cliente=str(formulario.get("endereco_cliente") or "").strip(),
        itens=tuple(itens),
        termos=str(formulario.get("termos") or TERMOS_PADRAO),
        numero=numero,
        data=(data or date.today()).strftime("%d/%m/%Y"),
        empresa=empresa,
        subtotal=subtotal,
        desconto=desconto,
        total=round(subtotal - desconto, 2),
    )


# Converte a prévia em texto corrido para os exportadores DOCX/PDF.
def orcamento_para_texto(previa: PreviaOrcamento) -> str:
    linhas = [
        f"{previa.empresa.nome} - {previa.empresa.slogan}".rstrip(" -"),
        f"Número: {previa.numero}",
        f"Data: {previa.data}",
        "",
        "Cliente:",
        previa.cliente,
    ]
    linhas.extend(previa.endereco_cliente.splitlines())
    linhas += ["", "Itens do Orçamento:"]
    for item in previa.itens:
        linhas.append(
            f"- {item.descricao} | Qtde.: {formatar_numero(item.quantidade)} | "
            f"Preço Unit.: {formatar_moeda(item.preco_unitario)} | Total: {formatar_moeda(item.total)}"
        )
    linhas.append("")
    if previa.desconto:
        linhas.append(f"Subtotal: {formatar_moeda(previa.subtotal)}")
        linhas.append(f"Desconto: {formatar_moeda(previa.desconto)}")
    linhas.append(f"Total: {formatar_moeda(previa.total)}")
    linhas += ["", "Termos e Condições:", previa.termos, "", "Obrigado pela sua preferência!"]
    return "\n".join(linhas)
