# src/void_engine/bootstrap.py
"""
Raiz de composição do Void Engine.

Uma aplicação mantém uma única instância do engine, construída no
início e passada explicitamente a cada consumidor (adapters de UI,
colaboradores de animação). Este módulo é o único lugar com a guarda
"reusar a instância existente": adapters inicializados de forma
independente recebem o mesmo engine em vez de estados divergentes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .core.config.settings import EngineSettings, load_settings
from .core.diagnostics import Diagnostics, get_logger, setup_logging
from .core.engine.engine import ErrorHook, VoidEngine
from .core.persistence.storage import JsonFileStorage, Storage
from .core.surface.protocol import Surface


logger = get_logger(__name__)

_ENGINE: Optional[VoidEngine] = None


def build_engine(
    *,
    settings: Optional[EngineSettings] = None,
    local_config: Optional[Union[str, Path]] = None,
    surface: Optional[Surface] = None,
    storage: Optional[Storage] = None,
    storage_path: Optional[Union[str, Path]] = None,
    on_error: Optional[ErrorHook] = None,
    diagnostics: Optional[Diagnostics] = None,
    configure_logging: bool = False,
) -> VoidEngine:
    """
    Constrói uma nova instância (sem tocar a instância compartilhada).

    Args:
        settings: Settings já materializados; se None, carrega defaults + `local_config`.
        local_config: Override local (YAML/JSON) aplicado sobre os defaults.
        surface: Superfície de renderização; None para hosts headless.
        storage: Backend de storage; tem precedência sobre `storage_path`.
        storage_path: Caminho de um `JsonFileStorage`.
        on_error: Hook de erro do host.
        diagnostics: Event Log compartilhado (opcional).
        configure_logging: Configura o logger `void_engine` com o nível dos settings.
    """
    if settings is None:
        settings = load_settings(local_path=local_config)
    if configure_logging:
        setup_logging(settings.log_level)
    if storage is None and storage_path is not None:
        storage = JsonFileStorage(storage_path)

    return VoidEngine(
        settings=settings,
        surface=surface,
        storage=storage,
        on_error=on_error,
        diagnostics=diagnostics,
    )


def get_engine(**kwargs) -> VoidEngine:
    """Retorna a instância compartilhada, construindo-a na primeira chamada."""
    global _ENGINE
    if _ENGINE is None:
        _ENGINE = build_engine(**kwargs)
    elif kwargs:
        logger.debug("Engine já construído; argumentos ignorados: %s", sorted(kwargs))
    return _ENGINE


def reset_engine() -> None:
    """Descarta a instância compartilhada."""
    global _ENGINE
    _ENGINE = None
