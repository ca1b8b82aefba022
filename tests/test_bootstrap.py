# tests/test_bootstrap.py
"""
Testes da raiz de composição (instância única do engine).

Os testes asseguram que:
- `get_engine` reusa a instância já construída
- `reset_engine` descarta a instância compartilhada
- `build_engine` sempre constrói uma instância nova
- settings locais e storage em arquivo chegam ao engine
"""

import pytest

from void_engine.bootstrap import build_engine, get_engine, reset_engine
from void_engine.core.persistence.storage import JsonFileStorage
from void_engine.core.surface.document import DocumentSurface


@pytest.fixture(autouse=True)
def _isolated_engine():
    reset_engine()
    yield
    reset_engine()


def test_get_engine_reuses_instance():
    first = get_engine(surface=DocumentSurface())
    second = get_engine(surface=DocumentSurface())

    assert first is second


def test_reset_engine_discards_instance():
    first = get_engine()
    reset_engine()

    assert get_engine() is not first


def test_build_engine_is_independent():
    shared = get_engine()

    assert build_engine() is not shared


def test_local_config_and_storage_path(tmp_path):
    local = tmp_path / "void.local.yaml"
    local.write_text("surface:\n  attributes:\n    atmosphere: data-theme\n", encoding="utf-8")
    doc = DocumentSurface()

    engine = build_engine(local_config=local, surface=doc, storage_path=tmp_path / "state.json")
    engine.set_selection("paper")

    assert doc.get_attribute("data-theme") == "paper"
    assert isinstance(engine.store.storage, JsonFileStorage)
    assert JsonFileStorage(tmp_path / "state.json").get_item("void_atmosphere") == "paper"
