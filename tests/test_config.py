"""Tests for environment configuration and logging setup."""

import logging
from pathlib import Path

import pytest

from services.config import (
    DEFAULT_MODEL,
    EMPRESA_PADRAO,
    PRESETS_PADRAO_PATH,
    caminho_presets,
    carregar_empresa,
    chave_gemini,
    modelo_gemini,
)
from services.logging_config import configurar_logging

VARIAVEIS_EMPRESA = (
    "EMPRESA_NOME",
    "EMPRESA_CNPJ",
    "EMPRESA_ENDERECO",
    "EMPRESA_ENDERECO_SEDE",
    "EMPRESA_EMAIL",
    "EMPRESA_TELEFONE",
    "EMPRESA_SLOGAN",
)


@pytest.fixture
def ambiente_limpo(monkeypatch):
    """Remove every configuration variable from the environment."""
    for nome in VARIAVEIS_EMPRESA + ("PRESETS_PATH", "GEMINI_MODEL", "GEMINI_API_KEY", "GOOGLE_API_KEY", "LOG_LEVEL"):
        monkeypatch.delenv(nome, raising=False)
    return monkeypatch


@pytest.fixture
def nivel_raiz():
    """Restore the root logger level after the test."""
    nivel = logging.getLogger().level
    yield
    logging.getLogger().setLevel(nivel)


class TestCarregarEmpresa:
    """Tests for carregar_empresa."""

    def test_defaults(self, ambiente_limpo):
        assert carregar_empresa() == EMPRESA_PADRAO

    def test_environment_overrides(self, ambiente_limpo):
        ambiente_limpo.setenv("EMPRESA_NOME", "  Outra Produtora  ")
        ambiente_limpo.setenv("EMPRESA_ENDERECO_SEDE", "Belo Horizonte/MG")
        empresa = carregar_empresa()
        assert empresa.nome == "Outra Produtora"
        assert empresa.endereco_sede == "Belo Horizonte/MG"
        assert empresa.cnpj == EMPRESA_PADRAO.cnpj


class TestOutrasConfiguracoes:
    """Tests for presets path and Gemini settings."""

    def test_presets_path(self, ambiente_limpo, tmp_path):
        assert caminho_presets() == PRESETS_PADRAO_PATH
        ambiente_limpo.setenv("PRESETS_PATH", str(tmp_path / "p.json"))
        assert caminho_presets() == Path(tmp_path / "p.json")

    def test_gemini_model(self, ambiente_limpo):
        assert modelo_gemini() == DEFAULT_MODEL
        ambiente_limpo.setenv("GEMINI_MODEL", "gemini-outro")
        assert modelo_gemini() == "gemini-outro"

    def test_gemini_key_precedence(self, ambiente_limpo):
        assert chave_gemini() == ""
        ambiente_limpo.setenv("GOOGLE_API_KEY", "google")
        assert chave_gemini() == "google"
        ambiente_limpo.setenv("GEMINI_API_KEY", "gemini")
        assert chave_gemini() == "gemini"


class TestConfigurarLogging:
    """Tests for configurar_logging."""

    def test_explicit_level(self, ambiente_limpo, nivel_raiz):
        configurar_logging("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_level_from_environment(self, ambiente_limpo, nivel_raiz):
        ambiente_limpo.setenv("LOG_LEVEL", "WARNING")
        configurar_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level_falls_back_to_info(self, ambiente_limpo, nivel_raiz):
        configurar_logging("barulhento")
        assert logging.getLogger().level == logging.INFO
