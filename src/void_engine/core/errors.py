"""
Void Engine: Canonical Error Structures

Este módulo define o payload canônico de erro do engine e o catálogo de
códigos estáveis. Payloads são o formato entregue a diagnósticos e ao
hook de erro do host, devendo ser:

- explícitos
- serializáveis
- acionáveis

Nenhuma falha descrita aqui encerra o processo: todas degradam para um
default seguro (ver `exceptions.py` e `engine/engine.py`).
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class VoidErrorPayload:
    """
    Payload canônico de erro do Void Engine.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao host (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro
# ---------------------------------------------------------------------------

UNKNOWN_CONFIGURATION = "UNKNOWN_CONFIGURATION"
INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
CORRUPT_PERSISTED_STATE = "CORRUPT_PERSISTED_STATE"
STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
FONT_LOAD_FAILED = "FONT_LOAD_FAILED"
REGISTRY_ARTIFACT_INVALID = "REGISTRY_ARTIFACT_INVALID"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def unknown_configuration(
    *,
    name: str,
    available: List[str],
    fallback: Optional[str] = None,
    hint: str = "Injete a atmosfera antes de selecioná-la ou escolha um nome listado em `available`.",
) -> VoidErrorPayload:
    return VoidErrorPayload(
        type=UNKNOWN_CONFIGURATION,
        message=f'Atmosfera "{name}" não está registrada',
        details={"name": name, "available": list(available), "fallback": fallback},
        hint=hint,
    )


def invalid_configuration(
    *,
    name: Any,
    reason: str,
    field_name: Optional[str] = None,
    received: Any = None,
    hint: str = "Corrija o payload injetado; o registry permanece inalterado.",
) -> VoidErrorPayload:
    return VoidErrorPayload(
        type=INVALID_CONFIGURATION,
        message=f'Configuração "{name}" rejeitada: {reason}',
        details={"name": name, "field": field_name, "received": repr(received)},
        hint=hint,
    )


def corrupt_persisted_state(
    *,
    key: str,
    reason: str,
    hint: str = "O valor armazenado foi descartado e os defaults foram aplicados.",
) -> VoidErrorPayload:
    return VoidErrorPayload(
        type=CORRUPT_PERSISTED_STATE,
        message=f'Estado persistido em "{key}" está corrompido',
        details={"key": key, "reason": reason},
        hint=hint,
    )


def storage_unavailable(
    *,
    operation: str,
    key: Optional[str] = None,
    reason: str = "storage ausente",
    hint: str = "A persistência é best-effort; nenhuma ação é necessária.",
) -> VoidErrorPayload:
    return VoidErrorPayload(
        type=STORAGE_UNAVAILABLE,
        message=f"Armazenamento indisponível durante {operation}",
        details={"operation": operation, "key": key, "reason": reason},
        hint=hint,
    )


def font_load_failed(
    *,
    url: str,
    font_name: Optional[str] = None,
    reason: str = "",
    hint: str = "A injeção foi mantida; verifique a URL da fonte externa.",
) -> VoidErrorPayload:
    return VoidErrorPayload(
        type=FONT_LOAD_FAILED,
        message=f"Falha ao solicitar fonte externa {url}",
        details={"url": url, "font": font_name, "reason": reason},
        hint=hint,
    )
