# src/void_engine/core/registry/validation.py
"""
Validador e merger de configurações injetadas.

Este módulo aplica as regras estruturais a payloads recebidos em runtime
e constrói a `ConfigurationEntry` armazenada, fazendo o merge defensivo
da paleta contra a Fallback Palette.

Regras de rejeição (`InvalidConfiguration`):
    - nome ausente, não-string ou vazio
    - payload que não é mapeamento
    - `physics` fora de {glassy, flat, retro}: a superfície ramifica
      comportamento por comparação exata desse valor
    - `mode` declarado fora de {light, dark}
    - `palette` ausente ou não-mapeamento, ou com chave/valor não-string
    - chave de paleta que não forma um nome de propriedade customizada
      (`[A-Za-z0-9_-]`, com `--` opcional) ou valor contendo `{`, `}` ou `;`:
      a paleta é escrita literalmente na regra de estilo gerada
    - `fonts` declarado mas não sendo sequência de {name, url}

Política de merge da paleta:
    - Fallback Palette primeiro, paleta do payload por cima (payload vence)
    - Chaves ausentes no payload caem no fallback silenciosamente
    - Chaves extras do payload são preservadas
    - Merge é idempotente: aplicar o mesmo payload duas vezes gera a mesma entrada

Limites explícitos:
    - Não altera o registry (ver `registry.py`)
    - Não gera CSS nem toca a superfície
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..errors import invalid_configuration
from ..exceptions import InvalidConfiguration
from ..tokens import FALLBACK_MODE, FALLBACK_PALETTE, MODE_VALUES, PHYSICS_VALUES, Mode, Physics
from .types import ConfigurationEntry, FontResource


_PALETTE_KEY = re.compile(r"^(--)?[A-Za-z0-9_][A-Za-z0-9_-]*\Z")
_FORBIDDEN_VALUE_CHARS = frozenset("{};")


def _reject(name: Any, reason: str, *, field_name: Optional[str] = None, received: Any = None) -> InvalidConfiguration:
    return InvalidConfiguration.from_payload(
        invalid_configuration(name=name, reason=reason, field_name=field_name, received=received)
    )


def validate_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise _reject(name, "nome deve ser string não vazia", field_name="name", received=name)
    return name


def parse_physics(name: str, value: Any) -> Physics:
    if not isinstance(value, str) or value not in PHYSICS_VALUES:
        raise _reject(
            name,
            f"physics inválido (esperado um de {list(PHYSICS_VALUES)})",
            field_name="physics",
            received=value,
        )
    return Physics(value)


def parse_mode(name: str, value: Any, default: Mode = FALLBACK_MODE) -> Mode:
    if value is None:
        return default
    if not isinstance(value, str) or value not in MODE_VALUES:
        raise _reject(
            name,
            f"mode inválido (esperado um de {list(MODE_VALUES)})",
            field_name="mode",
            received=value,
        )
    return Mode(value)


def parse_palette(name: str, value: Any) -> Dict[str, str]:
    if value is None or not isinstance(value, Mapping):
        raise _reject(name, "palette ausente ou não é um mapeamento", field_name="palette", received=value)

    palette: Dict[str, str] = {}
    for key, color in value.items():
        if not isinstance(key, str) or not isinstance(color, str):
            raise _reject(
                name,
                "palette deve mapear string → string",
                field_name=f"palette.{key}",
                received=color,
            )
        if not _PALETTE_KEY.match(key):
            raise _reject(
                name,
                "chave de paleta não é um nome de propriedade customizada válido",
                field_name=f"palette.{key}",
                received=key,
            )
        if _FORBIDDEN_VALUE_CHARS.intersection(color):
            raise _reject(
                name,
                "valor de paleta não pode conter {, } ou ;",
                field_name=f"palette.{key}",
                received=color,
            )
        palette[key] = color
    return palette


def parse_fonts(name: str, value: Any) -> Tuple[FontResource, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise _reject(name, "fonts deve ser uma lista de {name, url}", field_name="fonts", received=value)

    fonts: List[FontResource] = []
    for i, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise _reject(name, "fonte deve ser um mapeamento", field_name=f"fonts[{i}]", received=item)
        url = item.get("url")
        font_name = item.get("name", "")
        if not isinstance(url, str) or not url.strip():
            raise _reject(name, "fonte sem url", field_name=f"fonts[{i}].url", received=url)
        if not isinstance(font_name, str):
            raise _reject(name, "nome de fonte deve ser string", field_name=f"fonts[{i}].name", received=font_name)
        fonts.append(FontResource(name=font_name, url=url))
    return tuple(fonts)


def merge_palette(
    palette: Mapping[str, str],
    fallback: Mapping[str, str] = FALLBACK_PALETTE,
) -> Dict[str, str]:
    """Retorna a paleta composta: `fallback` sobreposto por `palette`, chave a chave."""
    composite = dict(fallback)
    composite.update(palette)
    return composite


def missing_keys(palette: Mapping[str, str], fallback: Mapping[str, str] = FALLBACK_PALETTE) -> List[str]:
    """Chaves do fallback que o payload não declarou (serão preenchidas)."""
    return [key for key in fallback if key not in palette]


def build_entry(
    name: Any,
    payload: Any,
    *,
    fallback_palette: Mapping[str, str] = FALLBACK_PALETTE,
    fallback_mode: Mode = FALLBACK_MODE,
) -> Tuple[ConfigurationEntry, List[str]]:
    """
    Valida um payload e constrói a entrada armazenada.

    Args:
        name: Nome sob o qual a entrada será registrada.
        payload: Mapeamento com `physics`, `palette` e opcionalmente `mode` e `fonts`.
        fallback_palette: Paleta confiável usada para preencher lacunas.
        fallback_mode: Mode usado quando o payload não declara um.

    Returns:
        Tuple[ConfigurationEntry, List[str]]: A entrada com paleta completa e a
        lista de chaves preenchidas pelo fallback.

    Raises:
        InvalidConfiguration: Se qualquer regra estrutural for violada.
    """
    name = validate_name(name)
    if not isinstance(payload, Mapping):
        raise _reject(name, "payload deve ser um mapeamento", field_name="payload", received=payload)

    physics = parse_physics(name, payload.get("physics"))
    palette = parse_palette(name, payload.get("palette"))
    mode = parse_mode(name, payload.get("mode"), default=fallback_mode)
    fonts = parse_fonts(name, payload.get("fonts"))

    entry = ConfigurationEntry(
        physics=physics,
        mode=mode,
        palette=merge_palette(palette, fallback_palette),
        fonts=fonts,
    )
    return entry, missing_keys(palette, fallback_palette)
