"""Configuração do pytest para o projeto Slack Mirror."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def anyio_backend() -> str:
    """Testes `@pytest.mark.anyio` rodam apenas em asyncio (trio não é dependência)."""
    return "asyncio"
