from __future__ import annotations

import html

from services.documento import (
    Assinatura,
    Aviso,
    BlocoParte,
    Clausula,
    Documento,
    LinhaData,
    Paragrafo,
    Segmento,
    Titulo,
)

ESTILO_EVITAR_QUEBRA = "page-break-inside: avoid; break-inside: avoid;"

ESTILO_DOCUMENTO = (
    "font-family: Arial, Helvetica, sans-serif; color: #333; font-size: 14px; "
    "line-height: 1.6; background: #fff; padding: 24px;"
)


def _segmentos_html(segmentos: tuple[Segmento, ...]) -> str:
    partes: list[str] = []
    for segmento in segmentos:
        texto = html.escape(segmento.texto).replace("\n", "<br/>")
        partes.append(f"<strong>{texto}</strong>" if segmento.destaque else texto)
    return "".join(partes)


def _clausula_html(clausula: Clausula) -> str:
    estilo = f' style="{ESTILO_EVITAR_QUEBRA}"' if clausula.evitar_quebra else ""
    atributo = ' data-avoid-break="true"' if clausula.evitar_quebra else ""
    return (
        f'<div class="clausula"{atributo}{estilo}>'
        f"<p><strong>{html.escape(clausula.cabecalho)}</strong><br/>"
        f"{_segmentos_html(clausula.corpo)}</p></div>"
    )


def documento_para_html(documento: Documento) -> str:
    """
    Renderiza o documento em HTML para a pré-visualização e para a conversão
    em PDF. Cláusulas marcadas com ``evitar_quebra`` recebem
    ``page-break-inside: avoid``.
    """
    partes: list[str] = [f'<div id="contract-preview-content" style="{ESTILO_DOCUMENTO}">']
    for bloco in documento:
        if isinstance(bloco, Titulo):
            partes.append(
                '<h1 style="text-align: center; font-size: 18px; text-transform: uppercase;">'
                f"{_segmentos_html(bloco.segmentos)}</h1>"
            )
        elif isinstance(bloco, Paragrafo):
            partes.append(f"<p>{_segmentos_html(bloco.segmentos)}</p>")
        elif isinstance(bloco, BlocoParte):
            linhas = "".join(
                f"<p>{html.escape(linha.rotulo)}: {html.escape(linha.valor)}</p>" for linha in bloco.linhas
            )
            partes.append(
                f'<div class="parte" style="{ESTILO_EVITAR_QUEBRA}">'
                f"<p><strong>{html.escape(bloco.titulo)}:</strong></p>{linhas}</div>"
            )
        elif isinstance(bloco, Clausula):
            partes.append(_clausula_html(bloco))
        elif isinstance(bloco, Assinatura):
            partes.append(
                f'<p style="text-align: center; margin-top: 40px; {ESTILO_EVITAR_QUEBRA}">'
                f"__________________________________________<br/>{html.escape(bloco.rotulo)}</p>"
            )
        elif isinstance(bloco, LinhaData):
            partes.append(f'<p style="margin-top: 40px;">{html.escape(bloco.texto)}</p>')
        elif isinstance(bloco, Aviso):
            partes.append(f'<p class="aviso">{html.escape(bloco.texto)}</p>')
    partes.append("</div>")
    return "\n".join(partes)
