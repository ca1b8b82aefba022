# src/void_engine/core/surface/protocol.py
"""
Contrato da superfície de renderização externa.

A superfície é o colaborador que transforma atributos e propriedades em
pixels (no browser, o `document.documentElement` e o `<head>`). O engine
apenas decide *o que* está ativo e projeta esse estado através deste
contrato; como a superfície renderiza é responsabilidade externa.

Operações exigidas:
    - atributos na raiz (leitura e escrita)
    - propriedades customizadas inline na raiz (escrita, remoção, leitura)
    - regras em uma folha de estilo gerenciada, indexadas por chave
    - links de folhas de estilo externas (fontes)

Conformidade é verificada por duck typing (`@runtime_checkable`).
Hosts sem superfície (headless) passam `None` ao engine.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Surface(Protocol):
    """Superfície de renderização mínima consumida pelo synchronizer."""

    def get_attribute(self, name: str) -> Optional[str]:
        ...

    def set_attribute(self, name: str, value: str) -> None:
        ...

    def get_property(self, name: str) -> Optional[str]:
        ...

    def set_property(self, name: str, value: str) -> None:
        ...

    def remove_property(self, name: str) -> None:
        ...

    def upsert_style_rule(self, sheet_id: str, key: str, css: str) -> None:
        """Cria a folha `sheet_id` se preciso e substitui a regra de `key`."""
        ...

    def add_stylesheet_link(self, href: str) -> None:
        """Solicita o carregamento de uma folha externa (fire-and-forget)."""
        ...

    def has_stylesheet_link(self, href: str) -> bool:
        ...
