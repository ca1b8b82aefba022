# src/void_engine/core/diagnostics.py
"""
Diagnósticos estruturados do Void Engine.

Este módulo reúne os dois canais de observabilidade do engine:
    - loggers da hierarquia `void_engine` (stdlib `logging`)
    - um Event Log em memória (`Diagnostics`), com eventos estruturados e
      warnings agrupados por nome de atmosfera

Todo evento registrado em `Diagnostics` é também encaminhado ao logger
no nível correspondente. Efeitos colaterais não fatais (sobrescrita de
injeção, chaves de paleta preenchidas pela Fallback Palette, estado
persistido corrompido, falhas de armazenamento) tornam-se assim
observáveis e testáveis sem exceções.

Invariantes:
    - Eventos sempre incluem `source`, `level`, `code`, `message`, `timestamp`
    - A ordem de `events` reflete a ordem real de emissão
    - O log é limitado a `max_events` eventos (os mais antigos saem primeiro),
      e cada lista de warnings por nome ao mesmo limite
    - Registrar um evento nunca lança exceção

Limites explícitos:
    - Não persiste eventos
    - Não decide políticas de recovery
"""

from __future__ import annotations

import logging
from collections import deque
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List, Optional

from .errors import VoidErrorPayload


ROOT_LOGGER = "void_engine"
DEFAULT_MAX_EVENTS = 1000

# Códigos de eventos não fatais (os códigos de erro vivem em errors.py)
CONFIGURATION_OVERWRITTEN = "CONFIGURATION_OVERWRITTEN"
STATIC_CONFIGURATION_SHADOWED = "STATIC_CONFIGURATION_SHADOWED"
PALETTE_KEYS_FILLED = "PALETTE_KEYS_FILLED"
UNKNOWN_PREFERENCE = "UNKNOWN_PREFERENCE"
INVALID_SCALE = "INVALID_SCALE"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(level: str = "INFO", log_file: Optional[str] = None,
                  console: bool = True) -> logging.Logger:
    """Configura o logger raiz `void_engine` (handlers de console e/ou arquivo)."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(_LEVELS.get(level.upper(), logging.INFO))

    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Retorna um logger dentro da hierarquia `void_engine`."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


class Diagnostics:
    """
    Event Log estruturado de uma instância do engine.

    Campos:
    - events: fila ordenada e limitada de eventos (dicts)
    - warnings: mensagens de warning agrupadas por nome de atmosfera

    O `source` identifica o componente emissor (ex.: "registry",
    "synchronizer", "persistence") e também define o logger usado.
    """

    def __init__(self, *, logger_name: str = ROOT_LOGGER, max_events: int = DEFAULT_MAX_EVENTS):
        if max_events < 1:
            raise ValueError("max_events deve ser >= 1")
        self.max_events = max_events
        self.events: Deque[Dict[str, Any]] = deque(maxlen=max_events)
        self.warnings: Dict[str, List[str]] = {}
        self._logger_name = logger_name

    # -----------------------------
    # Registro
    # -----------------------------
    def log(
        self,
        *,
        source: str,
        level: str,
        code: str,
        message: str,
        **extra: Any,
    ) -> Dict[str, Any]:
        event = {
            "source": source,
            "level": level.upper(),
            "code": code,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

        logger = get_logger(f"{self._logger_name}.{source}")
        logger.log(_LEVELS.get(event["level"], logging.INFO), "[%s] %s", code, message)
        return event

    def add_warning(self, *, name: str, source: str, code: str, message: str, **extra: Any) -> None:
        messages = self.warnings.setdefault(name, [])
        messages.append(message)
        if len(messages) > self.max_events:
            del messages[0]
        self.log(source=source, level="WARNING", code=code, message=message, name=name, **extra)

    def record_error(self, *, source: str, payload: VoidErrorPayload, level: str = "ERROR") -> None:
        """Registra um `VoidErrorPayload` como evento (com `details` e `hint`)."""
        self.log(
            source=source,
            level=level,
            code=payload.type,
            message=payload.message,
            details=dict(payload.details),
            hint=payload.hint,
        )

    # -----------------------------
    # Consulta
    # -----------------------------
    def codes(self) -> List[str]:
        return [ev["code"] for ev in self.events]

    def find(self, code: str) -> List[Dict[str, Any]]:
        return [ev for ev in self.events if ev["code"] == code]
