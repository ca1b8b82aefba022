# src/void_engine/core/persistence/storage.py
"""
Backends de armazenamento durável por usuário.

O engine persiste poucos valores textuais sob chaves fixas (seleção,
preferências serializadas e, opcionalmente, o cache de temas de runtime).
O contrato é o de um key/value de strings, no formato do `localStorage`
de um browser:

    get_item(key) -> Optional[str]
    set_item(key, value) -> None
    remove_item(key) -> None

Implementações:
    - MemoryStorage  → dict em memória, com injeção de falhas para testes
    - JsonFileStorage → um único documento JSON em disco, gravado de forma
      atômica (arquivo temporário + replace)

Qualquer exceção lançada por um backend é interpretada pela
`PersistenceStore` como armazenamento indisponível.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class Storage(Protocol):
    """Key/value durável de strings."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class MemoryStorage:
    """Storage em memória. `fail_reads`/`fail_writes` simulam storage indisponível."""

    def __init__(
        self,
        initial: Optional[Dict[str, str]] = None,
        *,
        fail_reads: bool = False,
        fail_writes: bool = False,
    ):
        self.data: Dict[str, str] = dict(initial or {})
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes

    def get_item(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise OSError("storage read disabled")
        return self.data.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("storage quota exceeded")
        self.data[key] = value

    def remove_item(self, key: str) -> None:
        if self.fail_writes:
            raise OSError("storage write disabled")
        self.data.pop(key, None)


class JsonFileStorage:
    """
    Storage baseado em um documento JSON `{chave: valor}`.

    O arquivo é criado na primeira escrita. Um documento ilegível ou com
    raiz diferente de objeto faz leituras e escritas falharem com
    `ValueError`, o que a store trata como armazenamento indisponível.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            document = json.load(f)
        if not isinstance(document, dict):
            raise ValueError(f"Documento de storage inválido (raiz não é objeto): {self.path}")
        return document

    def _dump(self, document: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=self.path.name, suffix=".tmp", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def get_item(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) or value is None else json.dumps(value)

    def set_item(self, key: str, value: str) -> None:
        document = self._load()
        document[key] = value
        self._dump(document)

    def remove_item(self, key: str) -> None:
        document = self._load()
        if key in document:
            del document[key]
            self._dump(document)
