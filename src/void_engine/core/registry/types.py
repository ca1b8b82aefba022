# src/void_engine/core/registry/types.py
"""
Tipos canônicos do registry de atmosferas.

Componentes:
    - FontResource       → fonte externa declarada por uma entrada injetada
    - ConfigurationEntry → entrada imutável do registry (physics, mode, paleta, fontes)

Invariantes:
    - Entradas são imutáveis (frozen + paleta somente leitura)
    - `to_dict()` produz a forma serializável usada pelo cache de runtime
      e aceita de volta pelo validador
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from ..tokens import Mode, Physics


@dataclass(frozen=True)
class FontResource:
    """Fonte externa (nome + URL de folha de estilo) requisitada uma única vez."""

    name: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "url": self.url}


@dataclass(frozen=True)
class ConfigurationEntry:
    """
    Entrada do registry: o que uma atmosfera deriva para a superfície.

    Campos:
        - physics: preset de movimento (`Physics`)
        - mode: preset de contraste (`Mode`)
        - palette: mapeamento chave → valor; vazio quando a entrada estática
          é coberta apenas por regras de estilo pré-autoradas
        - fonts: fontes externas, na ordem declarada
    """

    physics: Physics
    mode: Mode
    palette: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    fonts: Tuple[FontResource, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.palette, MappingProxyType):
            object.__setattr__(self, "palette", MappingProxyType(dict(self.palette)))
        if not isinstance(self.fonts, tuple):
            object.__setattr__(self, "fonts", tuple(self.fonts))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "physics": self.physics.value,
            "mode": self.mode.value,
            "palette": dict(self.palette),
        }
        if self.fonts:
            data["fonts"] = [f.to_dict() for f in self.fonts]
        return data


@dataclass(frozen=True)
class AtmosphereProfile:
    """Par {physics, mode} resolvido para um nome de atmosfera."""

    name: str
    physics: Physics
    mode: Mode
