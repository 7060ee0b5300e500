"""Árvore de blocos produzida pelo montador de contratos.

Os blocos não carregam nenhuma marcação de apresentação além do tipo, das
marcas de destaque dos segmentos e da dica ``evitar_quebra`` das cláusulas;
o layout fica a cargo dos exportadores.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass(frozen=True)
class Segmento:
    texto: str
    destaque: bool = False


@dataclass(frozen=True)
class Titulo:
    segmentos: tuple[Segmento, ...]

    @property
    def texto(self) -> str:
        return "".join(s.texto for s in self.segmentos)


@dataclass(frozen=True)
class Paragrafo:
    segmentos: tuple[Segmento, ...]

    @property
    def texto(self) -> str:
        return "".join(s.texto for s in self.segmentos)


@dataclass(frozen=True)
class LinhaParte:
    rotulo: str
    valor: str


@dataclass(frozen=True)
class BlocoParte:
    titulo: str
    linhas: tuple[LinhaParte, ...]

    def valor(self, rotulo: str) -> str:
        for linha in self.linhas:
            if linha.rotulo == rotulo:
                return linha.valor
        return ""


@dataclass(frozen=True)
class Clausula:
    numero: int | None
    titulo: str
    corpo: tuple[Segmento, ...]
    evitar_quebra: bool = True

    @property
    def cabecalho(self) -> str:
        if self.numero is None:
            return self.titulo
        return f"CLÁUSULA {self.numero} - {self.titulo}"

    @property
    def texto(self) -> str:
        return "".join(s.texto for s in self.corpo)


@dataclass(frozen=True)
class Assinatura:
    rotulo: str


@dataclass(frozen=True)
class LinhaData:
    texto: str


@dataclass(frozen=True)
class Aviso:
    texto: str


Bloco = Union[Titulo, Paragrafo, BlocoParte, Clausula, Assinatura, LinhaData, Aviso]


@dataclass(frozen=True)
class Documento:
    tipo_contrato: str
    blocos: tuple[Bloco, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Bloco]:
        return iter(self.blocos)

    def __len__(self) -> int:
        return len(self.blocos)

    def clausulas(self) -> list[Clausula]:
        return [b for b in self.blocos if isinstance(b, Clausula)]

    def partes(self) -> list[BlocoParte]:
        return [b for b in self.blocos if isinstance(b, BlocoParte)]

    def assinaturas(self) -> list[Assinatura]:
        return [b for b in self.blocos if isinstance(b, Assinatura)]

    @property
    def titulo(self) -> str:
        for bloco in self.blocos:
            if isinstance(bloco, Titulo):
                return bloco.texto
        return ""
