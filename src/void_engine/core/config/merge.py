# src/void_engine/core/config/merge.py
"""
Deep-merge determinístico de settings.

Este módulo implementa a política de merge usada para resolver os
settings efetivos do engine a partir do `defaults.yaml` empacotado e de
um override local opcional.

Política de merge:
    - dict + dict        → merge recursivo por chave
    - list               → sobrescrita total (sem merge elemento a elemento)
    - base None          → sobrescrita direta (chave opcional sendo preenchida)
    - int/float          → tratados como o mesmo tipo numérico
    - escalar            → sobrescrita direta
    - conflito de tipos  → `ConfigTypeConflictError`

Invariantes:
    - Nenhum input é mutado
    - Chaves não sobrescritas são preservadas
    - A mesma entrada sempre produz a mesma saída

Limites explícitos:
    - Não carrega arquivos
    - Não materializa `EngineSettings`
    - Não é usado para paletas: o overlay de paleta é raso e vive no registry
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combina `base` e `override` produzindo um novo dicionário.

    Args:
        base (Dict[str, Any]): Settings base (ex.: defaults empacotados).
        override (Dict[str, Any]): Overrides explícitos (ex.: arquivo local).

    Returns:
        Dict[str, Any]: Novo dicionário resultante do deep-merge.

    Raises:
        ConfigTypeConflictError: Se uma mesma chave tiver tipos incompatíveis.
    """

    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        if key not in result:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value)
            continue

        if isinstance(override_value, list) or base_value is None:
            result[key] = deepcopy(override_value)
            continue

        if _is_number(base_value) and _is_number(override_value):
            result[key] = override_value
            continue

        if type(base_value) is not type(override_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}"
            )

        result[key] = deepcopy(override_value)

    return result
