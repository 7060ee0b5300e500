from __future__ import annotations

from services.config import IdentidadeEmpresa
from services.documento import BlocoParte, LinhaParte
from services.modelos_contrato import ParteContratual

PLACEHOLDER_CAMPO = "_" * 44

ROTULO_NOME = "NOME"
ROTULO_DOCUMENTO = "CPF/CNPJ"
ROTULO_ENDERECO = "ENDEREÇO"
ROTULO_EMAIL = "E-MAIL"


def _ou_placeholder(valor: str | None) -> str:
    texto = (valor or "").strip()
    return texto or PLACEHOLDER_CAMPO


def _linhas(nome: str, documento: str, endereco: str, email: str) -> tuple[LinhaParte, ...]:
    return (
        LinhaParte(ROTULO_NOME, _ou_placeholder(nome)),
        LinhaParte(ROTULO_DOCUMENTO, _ou_placeholder(documento)),
        LinhaParte(ROTULO_ENDERECO, _ou_placeholder(endereco)),
        LinhaParte(ROTULO_EMAIL, _ou_placeholder(email)),
    )


# Bloco de qualificação de uma parte; `indice` numera partes múltiplas ("CONTRATANTE 2").
def bloco_parte(parte: ParteContratual | None, titulo: str, indice: int | None = None) -> BlocoParte:
    parte = parte or ParteContratual()
    titulo_final = f"{titulo} {indice}" if indice is not None else titulo
    return BlocoParte(
        titulo=titulo_final,
        linhas=_linhas(parte.nome, parte.cpf_cnpj, parte.endereco, parte.email),
    )


def bloco_empresa(
    empresa: IdentidadeEmpresa,
    titulo: str,
    cnpj: str | None = None,
    endereco: str | None = None,
) -> BlocoParte:
    """
    Bloco de qualificação da empresa. `cnpj` e `endereco` substituem os dados
    da identidade quando o contrato exige a sede jurídica.
    """
    return BlocoParte(
        titulo=titulo,
        linhas=_linhas(
            empresa.nome,
            cnpj or empresa.cnpj,
            endereco or empresa.endereco,
            empresa.email,
        ),
    )
