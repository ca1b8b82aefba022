# src/void_engine/core/surface/document.py
"""
Superfície em memória.

`DocumentSurface` implementa o protocolo `Surface` sobre dicionários,
espelhando o subconjunto do DOM que o engine manipula. É usada por
testes, por hosts headless que querem inspecionar o estado projetado e
como referência de comportamento para adapters reais.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class DocumentSurface:
    """
    Raiz de documento simulada.

    Campos:
    - attributes: atributos da raiz (`data-*`)
    - properties: propriedades customizadas inline (`--*`)
    - style_sheets: sheet_id → (chave → texto da regra), em ordem de inserção
    - links: hrefs de folhas externas, em ordem de solicitação
    """

    attributes: Dict[str, str] = field(default_factory=dict)
    properties: Dict[str, str] = field(default_factory=dict)
    style_sheets: Dict[str, Dict[str, str]] = field(default_factory=dict)
    links: List[str] = field(default_factory=list)

    # -----------------------------
    # Atributos
    # -----------------------------
    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    # -----------------------------
    # Propriedades inline
    # -----------------------------
    def get_property(self, name: str) -> Optional[str]:
        return self.properties.get(name)

    def set_property(self, name: str, value: str) -> None:
        self.properties[name] = value

    def remove_property(self, name: str) -> None:
        self.properties.pop(name, None)

    # -----------------------------
    # Folhas de estilo
    # -----------------------------
    def upsert_style_rule(self, sheet_id: str, key: str, css: str) -> None:
        self.style_sheets.setdefault(sheet_id, {})[key] = css

    def style_sheet_text(self, sheet_id: str) -> str:
        return "\n".join(self.style_sheets.get(sheet_id, {}).values())

    def add_stylesheet_link(self, href: str) -> None:
        self.links.append(href)

    def has_stylesheet_link(self, href: str) -> bool:
        return href in self.links
