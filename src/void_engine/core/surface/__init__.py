# src/void_engine/core/surface/__init__.py
"""
Superfície de renderização externa.

- **protocol**: contrato `Surface` consumido pelo synchronizer
- **document**: `DocumentSurface`, implementação em memória
- **css**: geração das regras escopadas de atmosferas injetadas
- **fonts**: `FontLoader`, solicitação idempotente de fontes externas
"""

from .css import attribute_selector, build_style_rule, custom_property
from .document import DocumentSurface
from .fonts import FontLoader
from .protocol import Surface

__all__ = [
    "attribute_selector",
    "build_style_rule",
    "custom_property",
    "DocumentSurface",
    "FontLoader",
    "Surface",
]
