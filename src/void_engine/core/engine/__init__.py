# src/void_engine/core/engine/__init__.py
"""
Engine de atmosferas.

- **engine**: `VoidEngine`, máquina de estados e API pública
- **state**: `Preferences` e `EngineSnapshot`
- **synchronizer**: projeção do estado na superfície
- **notifier**: publish/subscribe de snapshots
"""

from .engine import ErrorHook, VoidEngine
from .notifier import Notifier, Subscription
from .state import EngineSnapshot, Preferences
from .synchronizer import Synchronizer

__all__ = [
    "ErrorHook",
    "VoidEngine",
    "Notifier",
    "Subscription",
    "EngineSnapshot",
    "Preferences",
    "Synchronizer",
]
