"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from services.config import EMPRESA_PADRAO
from services.modelos_contrato import ParteContratual


@pytest.fixture
def empresa():
    """Company identity used as the fixed party of every contract."""
    return EMPRESA_PADRAO


@pytest.fixture
def hoje():
    """Fixed contract date."""
    return date(2025, 5, 15)


@pytest.fixture
def parte():
    """A fully filled party."""
    return ParteContratual(
        nome="João da Silva",
        cpf_cnpj="123.456.789-00",
        endereco="Rua das Flores, 10, Belo Horizonte/MG",
        email="joao@example.com",
    )
