# src/void_engine/core/surface/css.py
"""Geração das regras de estilo escopadas para atmosferas injetadas."""

from __future__ import annotations

from typing import Mapping


def custom_property(key: str) -> str:
    """Nome da propriedade customizada de uma chave de paleta (`bg-canvas` → `--bg-canvas`)."""
    return key if key.startswith("--") else f"--{key}"


def attribute_selector(attribute: str, name: str) -> str:
    escaped = name.replace("\\", "\\\\").replace("'", "\\'")
    return f"[{attribute}='{escaped}']"


def build_style_rule(
    name: str,
    *,
    mode: str,
    palette: Mapping[str, str],
    attribute: str = "data-atmosphere",
) -> str:
    """
    Monta o bloco de regra de uma atmosfera.

    Exemplo:
        [data-atmosphere='brand-x'] {
          color-scheme: light;
          --bg-canvas: #010020;
          ...
        }
    """
    lines = [f"{attribute_selector(attribute, name)} {{", f"  color-scheme: {mode};"]
    lines.extend(f"  {custom_property(key)}: {value};" for key, value in palette.items())
    lines.append("}")
    return "\n".join(lines)
