# src/void_engine/core/registry/registry.py
"""
Registry de atmosferas com duas partições lógicas.

Este módulo define o `AtmosphereRegistry`, que combina:
    - a partição estática, carregada uma vez do artefato de build e
      congelada após a carga
    - a partição de runtime, que cresce via injeção e nunca encolhe
      dentro de uma sessão

Decisões arquiteturais:
    - Lookups consultam runtime primeiro: uma injeção sob um nome estático
      sombreia a entrada estática, que passa a ser tratada como runtime
    - Re-injeção sob o mesmo nome sobrescreve (o chamador emite o warning)
    - A ordem de listagem é: nomes estáticos na ordem do artefato, depois
      nomes novos de runtime na ordem de injeção

Invariantes:
    - Entradas nunca são removidas
    - A partição estática é somente leitura
    - Toda entrada armazenada é uma `ConfigurationEntry` imutável

Limites explícitos:
    - Não valida payloads (ver `validation.py`)
    - Não emite diagnósticos nem notificações
    - Não toca a superfície de renderização
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .types import ConfigurationEntry


@dataclass
class AtmosphereRegistry:
    """
    Registry combinado (estático + runtime) indexado por nome de atmosfera.

    O `AtmosphereRegistry` é a fonte de verdade para responder se um nome
    existe, de qual partição ele vem e qual entrada está associada a ele.
    """

    static: Mapping[str, ConfigurationEntry] = field(default_factory=dict)
    _runtime: Dict[str, ConfigurationEntry] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.static = MappingProxyType(dict(self.static))

    def __contains__(self, name: object) -> bool:
        return name in self._runtime or name in self.static

    def __len__(self) -> int:
        return len(self.names())

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def get(self, name: str) -> Optional[ConfigurationEntry]:
        if name in self._runtime:
            return self._runtime[name]
        return self.static.get(name)

    def is_static(self, name: str) -> bool:
        """True quando a entrada ativa para `name` vem do artefato estático."""
        return name in self.static and name not in self._runtime

    def is_runtime(self, name: str) -> bool:
        return name in self._runtime

    def register_runtime(self, name: str, entry: ConfigurationEntry) -> bool:
        """Armazena `entry` na partição de runtime; retorna True se sobrescreveu."""
        overwritten = name in self._runtime
        self._runtime[name] = entry
        return overwritten

    def names(self) -> List[str]:
        ordered = list(self.static)
        ordered.extend(n for n in self._runtime if n not in self.static)
        return ordered

    def runtime_items(self) -> List[Tuple[str, ConfigurationEntry]]:
        return list(self._runtime.items())

    def as_mapping(self) -> Mapping[str, ConfigurationEntry]:
        """Visão somente leitura e desacoplada de todas as entradas resolvidas."""
        return MappingProxyType({name: self.get(name) for name in self.names()})
