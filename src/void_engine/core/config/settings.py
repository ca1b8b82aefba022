# src/void_engine/core/config/settings.py
"""
Materialização dos settings do engine.

Este módulo converte a configuração resolvida (dict, ver `loader.py`) em
um `EngineSettings` imutável, que é o único formato consumido pelo engine,
pelo synchronizer e pela persistência.

Decisões arquiteturais:
    - Settings são imutáveis após materialização
    - Valores ausentes no dict assumem os defaults da dataclass
    - Incoerências (ex.: limites de escala invertidos) falham cedo

Limites explícitos:
    - Não lê arquivos diretamente (delegado ao loader)
    - Não conhece o estado do engine
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from ..tokens import DEFAULT_ATMOSPHERE, DENSITY_FACTORS
from .errors import InvalidSettingsError
from .loader import load_config


@dataclass(frozen=True)
class StorageKeys:
    """Chaves fixas do armazenamento durável por usuário."""

    atmosphere: str = "void_atmosphere"
    user_config: str = "void_user_config"
    theme_cache: str = "void_theme_cache"


@dataclass(frozen=True)
class SurfaceAttributes:
    """Nomes dos três atributos da tríade na raiz da superfície."""

    atmosphere: str = "data-atmosphere"
    physics: str = "data-physics"
    mode: str = "data-mode"


@dataclass(frozen=True)
class EngineSettings:
    """
    Settings efetivos de uma instância do engine.

    Campos:
        - default_atmosphere: nome distinto que sempre existe no registry
        - registry_path: artefato estático alternativo (None = empacotado)
        - storage_keys: chaves do armazenamento durável
        - attributes: atributos da tríade
        - style_sheet_id: id da folha de estilo gerenciada dinamicamente
        - scale_min / scale_max: limites aplicados à escala renderizada
        - density_factors: tabela density → fator numérico
        - cache_runtime_themes: persiste entradas injetadas entre sessões
        - log_level: nível sugerido para `setup_logging`
        - max_events: capacidade do Event Log em memória (`Diagnostics`)
    """

    default_atmosphere: str = DEFAULT_ATMOSPHERE
    registry_path: Optional[str] = None
    storage_keys: StorageKeys = field(default_factory=StorageKeys)
    attributes: SurfaceAttributes = field(default_factory=SurfaceAttributes)
    style_sheet_id: str = "void-dynamic-themes"
    scale_min: float = 0.75
    scale_max: float = 2.0
    density_factors: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType(dict(DENSITY_FACTORS))
    )
    cache_runtime_themes: bool = False
    log_level: str = "INFO"
    max_events: int = 1000

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "EngineSettings":
        """
        Constrói settings a partir da configuração resolvida.

        Raises:
            InvalidSettingsError: Se valores resolvidos forem incoerentes.
        """
        engine_cfg = config.get("engine", {}) or {}
        storage_cfg = config.get("storage", {}) or {}
        surface_cfg = config.get("surface", {}) or {}
        prefs_cfg = config.get("preferences", {}) or {}
        logging_cfg = config.get("logging", {}) or {}

        default_atmosphere = engine_cfg.get("default_atmosphere", DEFAULT_ATMOSPHERE)
        if not isinstance(default_atmosphere, str) or not default_atmosphere.strip():
            raise InvalidSettingsError("engine.default_atmosphere deve ser string não vazia")

        bounds = prefs_cfg.get("scale_bounds", [0.75, 2.0])
        if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
            raise InvalidSettingsError("preferences.scale_bounds deve ter exatamente dois valores")
        try:
            scale_min, scale_max = float(bounds[0]), float(bounds[1])
        except (TypeError, ValueError) as e:
            raise InvalidSettingsError(f"preferences.scale_bounds inválido: {bounds!r}") from e
        if scale_min > scale_max:
            raise InvalidSettingsError(
                f"preferences.scale_bounds invertido: {scale_min} > {scale_max}"
            )

        factors: Dict[str, float] = {}
        for density, factor in (prefs_cfg.get("density_factors") or DENSITY_FACTORS).items():
            if isinstance(factor, bool) or not isinstance(factor, (int, float)):
                raise InvalidSettingsError(
                    f"preferences.density_factors.{density} deve ser numérico"
                )
            factors[str(density)] = float(factor)

        max_events = logging_cfg.get("max_events", 1000)
        if isinstance(max_events, bool) or not isinstance(max_events, int) or max_events < 1:
            raise InvalidSettingsError(f"logging.max_events deve ser inteiro >= 1: {max_events!r}")

        registry_path = engine_cfg.get("registry_path")

        attrs_cfg = surface_cfg.get("attributes", {}) or {}

        return cls(
            default_atmosphere=default_atmosphere,
            registry_path=str(registry_path) if registry_path else None,
            storage_keys=StorageKeys(
                atmosphere=storage_cfg.get("atmosphere", StorageKeys.atmosphere),
                user_config=storage_cfg.get("user_config", StorageKeys.user_config),
                theme_cache=storage_cfg.get("theme_cache", StorageKeys.theme_cache),
            ),
            attributes=SurfaceAttributes(
                atmosphere=attrs_cfg.get("atmosphere", SurfaceAttributes.atmosphere),
                physics=attrs_cfg.get("physics", SurfaceAttributes.physics),
                mode=attrs_cfg.get("mode", SurfaceAttributes.mode),
            ),
            style_sheet_id=surface_cfg.get("style_sheet_id", "void-dynamic-themes"),
            scale_min=scale_min,
            scale_max=scale_max,
            density_factors=MappingProxyType(factors),
            cache_runtime_themes=bool(engine_cfg.get("cache_runtime_themes", False)),
            log_level=str(logging_cfg.get("level", "INFO")),
            max_events=max_events,
        )


def load_settings(
    *,
    local_path: Optional[Union[str, Path]] = None,
    defaults_path: Optional[Union[str, Path]] = None,
) -> EngineSettings:
    """Carrega defaults (+ override local opcional) e materializa `EngineSettings`."""
    return EngineSettings.from_config(
        load_config(defaults_path=defaults_path, local_path=local_path)
    )
