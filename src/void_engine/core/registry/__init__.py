# src/void_engine/core/registry/__init__.py
"""
Registry de atmosferas do Void Engine.

## Componentes

- **types**: `ConfigurationEntry`, `FontResource`, `AtmosphereProfile`
- **validation**: regras estruturais de payloads injetados e merge defensivo
  contra a Fallback Palette
- **loader**: leitura e validação do artefato estático (`void-registry.json`)
- **registry**: `AtmosphereRegistry` com partições estática e de runtime

## Invariantes

- Toda entrada de runtime possui paleta completa (merge defensivo)
- O registry nunca encolhe dentro de uma sessão
- A atmosfera default sempre existe na partição estática
"""

from .loader import BUNDLED_ARTIFACT, load_registry_artifact
from .registry import AtmosphereRegistry
from .types import AtmosphereProfile, ConfigurationEntry, FontResource
from .validation import build_entry, merge_palette, missing_keys

__all__ = [
    "BUNDLED_ARTIFACT",
    "load_registry_artifact",
    "AtmosphereRegistry",
    "AtmosphereProfile",
    "ConfigurationEntry",
    "FontResource",
    "build_entry",
    "merge_palette",
    "missing_keys",
]
