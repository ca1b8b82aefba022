# src/void_engine/core/persistence/__init__.py
"""
Persistência do estado do usuário.

- **storage**: contrato `Storage` e backends (`MemoryStorage`, `JsonFileStorage`)
- **store**: `PersistenceStore`, com resultados explícitos em vez de falhas silenciosas
"""

from .storage import JsonFileStorage, MemoryStorage, Storage
from .store import PersistenceStore, PersistResult, RestoreResult

__all__ = [
    "JsonFileStorage",
    "MemoryStorage",
    "Storage",
    "PersistenceStore",
    "PersistResult",
    "RestoreResult",
]
