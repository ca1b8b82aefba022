# src/void_engine/core/persistence/store.py
"""
Persistência da seleção e das preferências do usuário.

A `PersistenceStore` serializa o estado do engine sob chaves fixas de um
`Storage` e o lê de volta na inicialização. Nenhuma operação lança
exceção: falhas são devolvidas como resultados explícitos
(`PersistResult` / `RestoreResult`) e o engine decide, por política,
registrar o diagnóstico e seguir em frente.

Formato:
    - <atmosphere>  → nome da atmosfera (texto puro)
    - <user_config> → objeto JSON {fontHeading, fontBody, scale, density}
    - <theme_cache> → objeto JSON {nome: {physics, mode, palette, fonts?}}

Decisões arquiteturais:
    - Persistência é otimização, não requisito de correção
    - Texto ilegível ou JSON com raiz não-objeto → `CorruptPersistedState`
    - Backend ausente ou que lança exceção → `StorageUnavailable`

Limites explícitos:
    - Não valida entradas do cache de temas (o engine revalida cada uma)
    - Não interpreta as chaves de preferência (ver `engine/state.py`)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from ..config.settings import StorageKeys
from ..diagnostics import get_logger
from ..errors import corrupt_persisted_state, storage_unavailable
from ..exceptions import CorruptPersistedState, StorageUnavailable, VoidException
from .storage import Storage


logger = get_logger(__name__)


@dataclass(frozen=True)
class PersistResult:
    """Resultado de uma escrita best-effort."""

    ok: bool
    reason: Optional[str] = None
    error: Optional[VoidException] = None


@dataclass(frozen=True)
class RestoreResult:
    """
    Resultado de uma leitura.

    Campos:
        - selection: nome armazenado (None quando ausente)
        - preferences: objeto de preferências desserializado (None quando ausente ou descartado)
        - themes: entradas do cache de temas (vazio quando ausente ou descartado)
        - errors: falhas encontradas; valores afetados já foram descartados
    """

    selection: Optional[str] = None
    preferences: Optional[Dict[str, Any]] = None
    themes: Dict[str, Any] = field(default_factory=dict)
    errors: Tuple[VoidException, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


class PersistenceStore:
    """Store canônica do estado do usuário sobre um `Storage` opcional."""

    def __init__(self, storage: Optional[Storage], keys: Optional[StorageKeys] = None):
        self.storage = storage
        self.keys = keys or StorageKeys()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _unavailable(self, operation: str, key: Optional[str], reason: str) -> StorageUnavailable:
        return StorageUnavailable.from_payload(
            storage_unavailable(operation=operation, key=key, reason=reason)
        )

    @property
    def available(self) -> bool:
        return self.storage is not None

    def _read(self, key: str) -> Tuple[Optional[str], Optional[VoidException]]:
        if self.storage is None:
            return None, self._unavailable("restore", key, "storage ausente")
        try:
            return self.storage.get_item(key), None
        except Exception as e:
            logger.debug("Leitura de %s falhou: %s", key, e)
            return None, self._unavailable("restore", key, str(e))

    def _write(self, key: str, value: str) -> PersistResult:
        if self.storage is None:
            err = self._unavailable("persist", key, "storage ausente")
            return PersistResult(ok=False, reason=err.details["reason"], error=err)
        try:
            self.storage.set_item(key, value)
        except Exception as e:
            logger.debug("Escrita de %s falhou: %s", key, e)
            return PersistResult(ok=False, reason=str(e), error=self._unavailable("persist", key, str(e)))
        return PersistResult(ok=True)

    def _parse_object(self, key: str, raw: str) -> Tuple[Optional[Dict[str, Any]], Optional[VoidException]]:
        try:
            data = json.loads(raw)
        except ValueError as e:
            return None, CorruptPersistedState.from_payload(
                corrupt_persisted_state(key=key, reason=f"JSON inválido: {e}")
            )
        if not isinstance(data, dict):
            return None, CorruptPersistedState.from_payload(
                corrupt_persisted_state(key=key, reason=f"esperado objeto JSON, recebido {type(data).__name__}")
            )
        return data, None

    # ------------------------------------------------------------------
    # Seleção + preferências
    # ------------------------------------------------------------------
    def persist(self, selection: str, preferences: Mapping[str, Any]) -> PersistResult:
        """Grava seleção e preferências; para na primeira falha."""
        result = self._write(self.keys.atmosphere, selection)
        if not result.ok:
            return result
        return self._write(self.keys.user_config, json.dumps(dict(preferences)))

    def restore(self) -> RestoreResult:
        """Lê seleção e preferências, descartando valores corrompidos."""
        errors = []

        selection, err = self._read(self.keys.atmosphere)
        if err is not None:
            # storage inteiro indisponível: não insiste na segunda chave
            return RestoreResult(errors=(err,))

        preferences: Optional[Dict[str, Any]] = None
        raw, err = self._read(self.keys.user_config)
        if err is not None:
            errors.append(err)
        elif raw is not None:
            preferences, err = self._parse_object(self.keys.user_config, raw)
            if err is not None:
                errors.append(err)

        return RestoreResult(
            selection=selection or None,
            preferences=preferences,
            errors=tuple(errors),
        )

    # ------------------------------------------------------------------
    # Cache de temas de runtime
    # ------------------------------------------------------------------
    def persist_theme_cache(self, themes: Mapping[str, Mapping[str, Any]]) -> PersistResult:
        payload = {name: dict(entry) for name, entry in themes.items()}
        return self._write(self.keys.theme_cache, json.dumps(payload))

    def restore_theme_cache(self) -> RestoreResult:
        raw, err = self._read(self.keys.theme_cache)
        if err is not None:
            return RestoreResult(errors=(err,))
        if raw is None:
            return RestoreResult()
        themes, err = self._parse_object(self.keys.theme_cache, raw)
        if err is not None:
            return RestoreResult(errors=(err,))
        return RestoreResult(themes=themes or {})
