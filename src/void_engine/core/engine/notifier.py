# src/void_engine/core/engine/notifier.py
"""
Canal publish/subscribe mínimo do engine.

Garantias:
    - `subscribe` entrega imediatamente o snapshot corrente ao novo assinante
    - A entrega segue a ordem de inscrição; se um callback lança, a exceção
      interrompe a publicação e os assinantes seguintes não recebem aquele
      snapshot (recebem o próximo)
    - Cada publicação itera sobre uma cópia estável da lista de assinantes:
      cancelar uma inscrição durante a entrega não pula nem duplica ninguém
    - Após `unsubscribe`, o notifier não guarda nenhuma referência ao callback

Exceções lançadas por callbacks propagam ao chamador da mutação.
"""

from __future__ import annotations

from typing import Callable, List

from .state import EngineSnapshot


SnapshotCallback = Callable[[EngineSnapshot], None]


class Subscription:
    """Handle de inscrição. Chamar o handle equivale a `unsubscribe()`."""

    def __init__(self, notifier: "Notifier", callback: SnapshotCallback):
        self._notifier = notifier
        self.callback = callback

    @property
    def active(self) -> bool:
        return self._notifier is not None

    def unsubscribe(self) -> None:
        if self._notifier is None:
            return
        self._notifier._remove(self)
        self._notifier = None

    def __call__(self) -> None:
        self.unsubscribe()


class Notifier:
    """Mantém assinantes e publica snapshots produzidos por `snapshot_provider`."""

    def __init__(self, snapshot_provider: Callable[[], EngineSnapshot]):
        self._snapshot_provider = snapshot_provider
        self._subscriptions: List[Subscription] = []

    def __len__(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, callback: SnapshotCallback) -> Subscription:
        if not callable(callback):
            raise TypeError("callback deve ser chamável")
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        callback(self._snapshot_provider())
        return subscription

    def publish(self) -> None:
        snapshot = self._snapshot_provider()
        for subscription in list(self._subscriptions):
            subscription.callback(snapshot)

    def _remove(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
