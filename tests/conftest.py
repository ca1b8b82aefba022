# tests/conftest.py
"""
Fixtures compartilhados para testes do Void Engine.

Este módulo define fixtures reutilizáveis que fornecem:
- uma superfície de renderização em memória (DocumentSurface)
- storage em memória (MemoryStorage)
- settings efetivos com os defaults empacotados
- uma fábrica de engines isolados
- payloads de injeção representativos

O objetivo destas fixtures é permitir testes do core (registry,
engine, synchronizer, persistence) sem depender de:
- browser ou DOM real
- estado global (a instância compartilhada do bootstrap)
- filesystem (exceto quando o teste pede `tmp_path` explicitamente)

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas
    - Cada engine criado recebe sua própria superfície, storage e Event Log

Invariantes:
    - Nenhuma fixture compartilha estado entre testes
    - Nenhuma fixture toca a instância global do bootstrap
"""

import pytest


@pytest.fixture
def surface():
    """Superfície em memória, vazia."""
    from void_engine.core.surface.document import DocumentSurface

    return DocumentSurface()


@pytest.fixture
def storage():
    """Storage em memória, vazio e funcional."""
    from void_engine.core.persistence.storage import MemoryStorage

    return MemoryStorage()


@pytest.fixture
def settings():
    """Settings efetivos a partir do defaults.yaml empacotado."""
    from void_engine.core.config.settings import load_settings

    return load_settings()


@pytest.fixture
def make_engine(surface, storage, settings):
    """
    Fábrica de engines isolados.

    Por padrão usa as fixtures `surface`, `storage` e `settings`; qualquer
    argumento do construtor pode ser sobrescrito pelo teste, inclusive
    com `None` (ex.: host headless ou sem storage).

    Returns:
        Callable[..., VoidEngine]: Função que constrói um engine novo.
    """
    from void_engine.core.engine.engine import VoidEngine

    def _make(**overrides):
        kwargs = {"surface": surface, "storage": storage, "settings": settings}
        kwargs.update(overrides)
        return VoidEngine(**kwargs)

    return _make


@pytest.fixture
def brand_x_payload() -> dict:
    """Payload parcial: só declara `energy-primary`; o resto vem da Fallback Palette."""
    return {
        "physics": "flat",
        "mode": "light",
        "palette": {"energy-primary": "#ff0000"},
    }


@pytest.fixture
def font_payload() -> dict:
    """Payload com fonte externa declarada."""
    return {
        "physics": "glassy",
        "mode": "dark",
        "palette": {"font-atmos-heading": "'Orbitron', sans-serif"},
        "fonts": [
            {"name": "Orbitron", "url": "https://fonts.googleapis.com/css2?family=Orbitron"},
        ],
    }
