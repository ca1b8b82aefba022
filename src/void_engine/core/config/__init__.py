# src/void_engine/core/config/__init__.py
"""
Camada de settings do Void Engine.

Responsabilidades do pacote:
    - Carregar documentos YAML/JSON (defaults empacotados + override local)
    - Resolver a configuração final via deep-merge determinístico
    - Materializar `EngineSettings` imutáveis consumidos pelo engine

Princípios fundamentais:
    - Settings são declarativos e não contêm lógica de atmosfera
    - Overrides são sempre explícitos
    - Conflitos estruturais são erro, nunca heurística

Limites explícitos:
    - Não valida paletas nem entradas do registry
    - Não interage com a superfície de renderização
"""

from .errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    InvalidSettingsError,
    UnsupportedConfigFormatError,
)
from .loader import load_config, read_document
from .merge import deep_merge
from .settings import EngineSettings, StorageKeys, SurfaceAttributes, load_settings

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ConfigTypeConflictError",
    "InvalidConfigRootTypeError",
    "InvalidSettingsError",
    "UnsupportedConfigFormatError",
    "load_config",
    "read_document",
    "deep_merge",
    "EngineSettings",
    "StorageKeys",
    "SurfaceAttributes",
    "load_settings",
]
