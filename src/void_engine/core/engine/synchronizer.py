# src/void_engine/core/engine/synchronizer.py
"""
Synchronizer: projeta o estado do engine na superfície de renderização.

Uma chamada a `sync()` deixa a superfície consistente com o estado em
uma única passada síncrona, em ordem fixa:

    1. Tríade de atributos: nome ativo, physics derivado, mode derivado
    2. Paleta inline:
        - entrada estática → remove as propriedades inline deixadas pela
          última entrada de runtime (exatamente as chaves que ela escreveu)
        - entrada de runtime → escreve cada chave da paleta como
          propriedade inline na raiz
    3. Preferências do usuário, independentes da entrada ativa:
        - `--text-scale` limitado a [scale_min, scale_max]
        - `--density` pela tabela de fatores (desconhecido → 1.0)
        - `--user-font-heading` / `--user-font-body`: presente escreve,
          ausente remove

Sem superfície (host headless) a sincronização é um no-op completo.
"""

from __future__ import annotations

import math
from typing import Any, List, Mapping, Optional

from ..config.settings import EngineSettings
from ..diagnostics import INVALID_SCALE, Diagnostics
from ..registry.types import ConfigurationEntry
from ..surface.css import custom_property
from ..surface.protocol import Surface
from .state import Preferences


SCALE_PROPERTY = "--text-scale"
DENSITY_PROPERTY = "--density"
FONT_HEADING_PROPERTY = "--user-font-heading"
FONT_BODY_PROPERTY = "--user-font-body"


def format_number(value: float) -> str:
    """Menor representação exata do número (`2.0` → `2`, `1.1234567` → `1.1234567`)."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def coerce_scale(value: Any) -> Optional[float]:
    """Converte a escala armazenada em float; None quando não numérica."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


def clamp(value: float, lower: float, upper: float) -> float:
    return min(max(value, lower), upper)


def density_factor(density: Any, factors: Mapping[str, float]) -> float:
    if not isinstance(density, str):
        return 1.0
    return factors.get(density, 1.0)


class Synchronizer:
    """Escritor único da superfície para atributos e propriedades da raiz."""

    def __init__(
        self,
        surface: Optional[Surface],
        settings: EngineSettings,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.surface = surface
        self.settings = settings
        self.diagnostics = diagnostics or Diagnostics()
        self._inline_keys: List[str] = []

    @property
    def inline_keys(self) -> List[str]:
        """Propriedades de paleta atualmente escritas inline na raiz."""
        return list(self._inline_keys)

    def sync(
        self,
        *,
        selection: str,
        entry: ConfigurationEntry,
        is_static: bool,
        preferences: Preferences,
    ) -> bool:
        """Aplica o estado; retorna False quando não há superfície."""
        if self.surface is None:
            return False

        attrs = self.settings.attributes
        self.surface.set_attribute(attrs.atmosphere, selection)
        self.surface.set_attribute(attrs.physics, entry.physics.value)
        self.surface.set_attribute(attrs.mode, entry.mode.value)

        if is_static:
            self._clear_inline_palette()
        else:
            self._apply_inline_palette(entry.palette)

        self._apply_preferences(preferences)
        return True

    # ------------------------------------------------------------------
    # Paleta inline
    # ------------------------------------------------------------------
    def _clear_inline_palette(self) -> None:
        for prop in self._inline_keys:
            self.surface.remove_property(prop)
        self._inline_keys = []

    def _apply_inline_palette(self, palette: Mapping[str, str]) -> None:
        written = [custom_property(key) for key in palette]
        for prop in self._inline_keys:
            if prop not in written:
                self.surface.remove_property(prop)
        for key, value in palette.items():
            self.surface.set_property(custom_property(key), value)
        self._inline_keys = written

    # ------------------------------------------------------------------
    # Preferências
    # ------------------------------------------------------------------
    def rendered_scale(self, preferences: Preferences) -> float:
        scale = coerce_scale(preferences.scale)
        if scale is None:
            self.diagnostics.log(
                source="synchronizer",
                level="WARNING",
                code=INVALID_SCALE,
                message=f"Escala não numérica {preferences.scale!r}; renderizando 1.0",
                received=repr(preferences.scale),
            )
            scale = 1.0
        return clamp(scale, self.settings.scale_min, self.settings.scale_max)

    def _apply_preferences(self, preferences: Preferences) -> None:
        self.surface.set_property(SCALE_PROPERTY, format_number(self.rendered_scale(preferences)))
        self.surface.set_property(
            DENSITY_PROPERTY,
            format_number(density_factor(preferences.density, self.settings.density_factors)),
        )
        self._apply_font(FONT_HEADING_PROPERTY, preferences.font_heading)
        self._apply_font(FONT_BODY_PROPERTY, preferences.font_body)

    def _apply_font(self, prop: str, value: Optional[str]) -> None:
        if value:
            self.surface.set_property(prop, str(value))
        else:
            self.surface.remove_property(prop)
