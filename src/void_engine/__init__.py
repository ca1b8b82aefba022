# src/void_engine/__init__.py
"""
Void Engine: runtime de configuração do sistema de atmosferas Void.

A partir de uma única escolha do usuário (o nome de uma atmosfera), o
engine deriva dois eixos dependentes (physics e mode) e projeta a
configuração resultante em uma superfície de renderização externa via
atributos e propriedades customizadas. Também aceita novas atmosferas
em runtime, validadas e combinadas com a Fallback Palette, e persiste
as escolhas do usuário entre sessões.

Arquitetura em alto nível:
    - core.registry    → registry estático (artefato) + runtime (injeção)
    - core.engine      → estado, synchronizer e notifier
    - core.persistence → storage durável por usuário
    - core.surface     → contrato da superfície de renderização
    - bootstrap        → raiz de composição (instância única)

Limites explícitos:
    - Não é um framework CSS nem uma biblioteca de componentes
    - Não implementa bindings de frameworks de UI
"""

from .bootstrap import build_engine, get_engine, reset_engine
from .core.diagnostics import Diagnostics, get_logger, setup_logging
from .core.engine import EngineSnapshot, Preferences, Subscription, VoidEngine
from .core.exceptions import (
    CorruptPersistedState,
    InvalidConfiguration,
    RegistryArtifactError,
    StorageUnavailable,
    UnknownConfiguration,
    VoidException,
)
from .core.persistence import JsonFileStorage, MemoryStorage
from .core.surface import DocumentSurface
from .core.tokens import Density, Mode, Physics

__version__ = "0.1.0"

__all__ = [
    "build_engine",
    "get_engine",
    "reset_engine",
    "Diagnostics",
    "get_logger",
    "setup_logging",
    "EngineSnapshot",
    "Preferences",
    "Subscription",
    "VoidEngine",
    "CorruptPersistedState",
    "InvalidConfiguration",
    "RegistryArtifactError",
    "StorageUnavailable",
    "UnknownConfiguration",
    "VoidException",
    "JsonFileStorage",
    "MemoryStorage",
    "DocumentSurface",
    "Density",
    "Mode",
    "Physics",
]
