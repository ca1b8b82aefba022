# src/void_engine/core/surface/fonts.py
"""
Carregamento idempotente de fontes externas.

Entradas injetadas podem declarar fontes externas (ex.: URLs do Google
Fonts). O `FontLoader` solicita cada URL uma única vez por sessão,
delegando à superfície a criação do link; o download em si é assíncrono
e fora do controle do engine.

Decisões arquiteturais:
    - Fire-and-forget: nenhuma solicitação é aguardada
    - Falha de uma solicitação vira diagnóstico `FONT_LOAD_FAILED` e
      nunca desfaz a injeção que a originou
    - Sem superfície, nada é solicitado nem marcado como solicitado
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Set

from ..diagnostics import Diagnostics
from ..errors import font_load_failed
from ..registry.types import FontResource
from .protocol import Surface


class FontLoader:
    """Fila de fontes já solicitadas (por URL)."""

    def __init__(self, surface: Optional[Surface], diagnostics: Diagnostics):
        self.surface = surface
        self.diagnostics = diagnostics
        self.requested: Set[str] = set()

    def request(self, fonts: Iterable[FontResource]) -> List[str]:
        """Solicita as fontes ainda não pedidas; retorna as URLs efetivamente solicitadas."""
        if self.surface is None:
            return []

        issued: List[str] = []
        for font in fonts:
            if font.url in self.requested:
                continue
            self.requested.add(font.url)
            if self.surface.has_stylesheet_link(font.url):
                continue
            try:
                self.surface.add_stylesheet_link(font.url)
            except Exception as e:
                self.diagnostics.record_error(
                    source="fonts",
                    payload=font_load_failed(url=font.url, font_name=font.name, reason=str(e)),
                    level="WARNING",
                )
                continue
            issued.append(font.url)
        return issued
