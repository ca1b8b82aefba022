"""
Void Engine: Canonical Exceptions

Exceções tipadas internas do engine.

Objetivo:
- Sinalizar falhas semânticas com dados estruturados
- Converter de forma determinística para VoidErrorPayload
- Entregar ao hook de erro do host uma instância inspecionável

Regras:
- Exceções carregam apenas dados serializáveis em `details`
- Apenas `RegistryArtifactError` escapa do engine (na construção);
  as demais são capturadas e convertidas em fallback + diagnóstico.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import (
    CORRUPT_PERSISTED_STATE,
    INVALID_CONFIGURATION,
    REGISTRY_ARTIFACT_INVALID,
    STORAGE_UNAVAILABLE,
    UNKNOWN_CONFIGURATION,
    VoidErrorPayload,
)


@dataclass(frozen=True)
class VoidException(Exception):
    """Base class para exceções internas do Void Engine.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    code = "VOID_ERROR"

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_payload(cls, payload: VoidErrorPayload) -> "VoidException":
        """Constrói a exceção a partir de um payload do catálogo."""
        return cls(message=payload.message, details=dict(payload.details), hint=payload.hint)

    def to_payload(self) -> VoidErrorPayload:
        return VoidErrorPayload(
            type=self.code,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


@dataclass(frozen=True)
class UnknownConfiguration(VoidException):
    """Seleção referencia um nome ausente do registry."""

    code = UNKNOWN_CONFIGURATION


@dataclass(frozen=True)
class InvalidConfiguration(VoidException):
    """Payload injetado viola as regras estruturais (physics, palette, fonts)."""

    code = INVALID_CONFIGURATION


@dataclass(frozen=True)
class CorruptPersistedState(VoidException):
    """Valor armazenado não pôde ser interpretado e foi descartado."""

    code = CORRUPT_PERSISTED_STATE


@dataclass(frozen=True)
class StorageUnavailable(VoidException):
    """Armazenamento durável ausente ou falhou na leitura/escrita."""

    code = STORAGE_UNAVAILABLE


@dataclass(frozen=True)
class RegistryArtifactError(VoidException):
    """Artefato estático do registry ausente, malformado ou sem a atmosfera default."""

    code = REGISTRY_ARTIFACT_INVALID
