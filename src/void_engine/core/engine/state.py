# src/void_engine/core/engine/state.py
"""
Estado do engine e snapshot imutável entregue a assinantes.

Componentes:
    - Preferences  → overrides do usuário (fontes, escala, densidade)
    - EngineSnapshot → fotografia somente leitura do estado completo

Decisões arquiteturais:
    - `Preferences` guarda a intenção bruta do usuário: a escala não é
      limitada aqui, apenas na sincronização
    - Chaves externas seguem o formato persistido (camelCase); chaves
      Python (snake_case) também são aceitas em atualizações
    - Chaves desconhecidas são ignoradas e reportadas ao chamador
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..registry.types import ConfigurationEntry
from ..tokens import Density, Mode, Physics


# formato persistido → atributo
PREFERENCE_KEYS: Mapping[str, str] = {
    "fontHeading": "font_heading",
    "fontBody": "font_body",
    "scale": "scale",
    "density": "density",
}


def normalize_preference_changes(changes: Mapping[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
    """Traduz chaves de atualização para atributos; retorna (updates, chaves ignoradas)."""
    attributes = set(PREFERENCE_KEYS.values())
    updates: Dict[str, Any] = {}
    ignored: List[str] = []
    for key, value in changes.items():
        if key in PREFERENCE_KEYS:
            updates[PREFERENCE_KEYS[key]] = value
        elif key in attributes:
            updates[key] = value
        else:
            ignored.append(str(key))
    return updates, ignored


@dataclass(frozen=True)
class Preferences:
    """
    Overrides do usuário aplicados sobre qualquer atmosfera ativa.

    Campos:
        - font_heading / font_body: família de fonte ou None (sem override)
        - scale: fator de escala de texto, armazenado como recebido
        - density: "high" | "standard" | "low" (valores desconhecidos renderizam 1.0)
    """

    font_heading: Optional[str] = None
    font_body: Optional[str] = None
    scale: float = 1.0
    density: str = Density.STANDARD.value

    def merged(self, updates: Mapping[str, Any]) -> "Preferences":
        """Merge raso: apenas os campos presentes em `updates` mudam."""
        return replace(self, **dict(updates))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fontHeading": self.font_heading,
            "fontBody": self.font_body,
            "scale": self.scale,
            "density": self.density,
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Tuple["Preferences", List[str]]:
        """Constrói a partir do formato persistido; retorna (preferências, chaves ignoradas)."""
        if not data:
            return cls(), []
        updates, ignored = normalize_preference_changes(data)
        return cls().merged(updates), ignored


@dataclass(frozen=True)
class EngineSnapshot:
    """
    Fotografia imutável do engine entregue a assinantes.

    Assinantes não recebem o engine: qualquer mudança passa pela API
    pública (`set_selection`, `set_preferences`, `inject_configuration`).
    """

    selection: str
    physics: Physics
    mode: Mode
    registry: Mapping[str, ConfigurationEntry]
    preferences: Preferences

    @property
    def names(self) -> List[str]:
        return list(self.registry)

    @property
    def entry(self) -> ConfigurationEntry:
        return self.registry[self.selection]
