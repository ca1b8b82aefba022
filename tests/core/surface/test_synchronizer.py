# tests/core/surface/test_synchronizer.py
"""
Testes do Synchronizer (projeção do estado na superfície).

Este módulo valida a passada única de sincronização, em ordem fixa:
tríade de atributos, paleta inline (ou sua limpeza) e preferências.

Os testes asseguram que:
- a tríade reflete nome, physics e mode da entrada ativa
- entradas de runtime escrevem a paleta inteira inline
- voltar a uma entrada estática remove exatamente as chaves escritas
- a escala renderizada é limitada e a density vira fator numérico
- overrides de fonte presentes escrevem, ausentes removem
- sem superfície, a sincronização é no-op

Decisões arquiteturais:
    - A escala armazenada é a intenção bruta; só o valor renderizado é limitado
    - Densidade desconhecida renderiza 1.0 em vez de falhar
"""

import pytest

from void_engine.core.config.settings import EngineSettings
from void_engine.core.diagnostics import Diagnostics
from void_engine.core.engine.state import Preferences
from void_engine.core.engine.synchronizer import Synchronizer, coerce_scale, format_number
from void_engine.core.registry.types import ConfigurationEntry
from void_engine.core.surface.document import DocumentSurface
from void_engine.core.tokens import Mode, Physics


STATIC = ConfigurationEntry(physics=Physics.GLASSY, mode=Mode.DARK)
RUNTIME = ConfigurationEntry(
    physics=Physics.FLAT,
    mode=Mode.LIGHT,
    palette={"bg-canvas": "#fff", "energy-primary": "#ff0000"},
)


@pytest.fixture
def doc():
    return DocumentSurface()


@pytest.fixture
def sync(doc):
    return Synchronizer(doc, EngineSettings(), Diagnostics())


def _run(sync, *, selection="void", entry=STATIC, is_static=True, preferences=None):
    return sync.sync(
        selection=selection,
        entry=entry,
        is_static=is_static,
        preferences=preferences or Preferences(),
    )


def test_triad_is_written(sync, doc):
    assert _run(sync, selection="brand-x", entry=RUNTIME, is_static=False) is True

    assert doc.attributes == {
        "data-atmosphere": "brand-x",
        "data-physics": "flat",
        "data-mode": "light",
    }


def test_runtime_entry_writes_inline_palette(sync, doc):
    _run(sync, selection="brand-x", entry=RUNTIME, is_static=False)

    assert doc.properties["--bg-canvas"] == "#fff"
    assert doc.properties["--energy-primary"] == "#ff0000"
    assert sorted(sync.inline_keys) == ["--bg-canvas", "--energy-primary"]


def test_switching_back_to_static_clears_inline_palette(sync, doc):
    """
    Cenário: runtime ativo → entrada estática.

    As propriedades inline introduzidas pela entrada de runtime precisam
    sair da raiz, enquanto as propriedades de preferência permanecem.
    """
    _run(sync, selection="brand-x", entry=RUNTIME, is_static=False)
    _run(sync, selection="void", entry=STATIC, is_static=True)

    assert "--bg-canvas" not in doc.properties
    assert "--energy-primary" not in doc.properties
    assert sync.inline_keys == []
    assert doc.properties["--text-scale"] == "1"
    assert doc.attributes["data-atmosphere"] == "void"


def test_switching_between_runtime_entries_drops_stale_keys(sync, doc):
    other = ConfigurationEntry(physics=Physics.RETRO, mode=Mode.DARK, palette={"bg-canvas": "#000"})

    _run(sync, selection="brand-x", entry=RUNTIME, is_static=False)
    _run(sync, selection="brand-y", entry=other, is_static=False)

    assert doc.properties["--bg-canvas"] == "#000"
    assert "--energy-primary" not in doc.properties


def test_static_cleanup_leaves_foreign_properties(sync, doc):
    doc.set_property("--host-owned", "x")
    _run(sync, selection="brand-x", entry=RUNTIME, is_static=False)
    _run(sync)

    assert doc.properties["--host-owned"] == "x"


@pytest.mark.parametrize(
    "scale, rendered",
    [(0.1, "0.75"), (0.75, "0.75"), (1.25, "1.25"), (1.1234567, "1.1234567"), (2.0, "2"), (9, "2"), (float("inf"), "2")],
)
def test_scale_is_clamped_when_rendered(sync, doc, scale, rendered):
    prefs = Preferences(scale=scale)
    _run(sync, preferences=prefs)

    assert doc.properties["--text-scale"] == rendered
    assert prefs.scale == scale


@pytest.mark.parametrize("scale", ["big", None, True, float("nan"), [1]])
def test_non_numeric_scale_renders_default(doc, scale):
    diagnostics = Diagnostics()
    sync = Synchronizer(doc, EngineSettings(), diagnostics)
    _run(sync, preferences=Preferences(scale=scale))

    assert doc.properties["--text-scale"] == "1"
    assert diagnostics.codes() == ["INVALID_SCALE"]


def test_numeric_string_scale_is_accepted():
    assert coerce_scale("1.5") == 1.5


@pytest.mark.parametrize(
    "density, factor",
    [("high", "0.75"), ("standard", "1"), ("low", "1.25"), ("cozy", "1"), (None, "1")],
)
def test_density_factor(sync, doc, density, factor):
    _run(sync, preferences=Preferences(density=density))

    assert doc.properties["--density"] == factor


def test_font_overrides_write_and_remove(sync, doc):
    _run(sync, preferences=Preferences(font_heading="'Inter'", font_body="'Lora'"))
    assert doc.properties["--user-font-heading"] == "'Inter'"
    assert doc.properties["--user-font-body"] == "'Lora'"

    _run(sync, preferences=Preferences(font_heading=None, font_body="'Lora'"))
    assert "--user-font-heading" not in doc.properties
    assert doc.properties["--user-font-body"] == "'Lora'"


def test_headless_sync_is_noop():
    sync = Synchronizer(None, EngineSettings(), Diagnostics())

    assert _run(sync, selection="brand-x", entry=RUNTIME, is_static=False) is False
    assert sync.inline_keys == []


def test_custom_attribute_names():
    from void_engine.core.config.settings import SurfaceAttributes

    doc = DocumentSurface()
    settings = EngineSettings(attributes=SurfaceAttributes(atmosphere="data-theme"))
    _run(Synchronizer(doc, settings), selection="void")

    assert doc.attributes["data-theme"] == "void"
    assert "data-atmosphere" not in doc.attributes


@pytest.mark.parametrize(
    "value, text",
    [(1.0, "1"), (2, "2"), (0.75, "0.75"), (1.1234567, "1.1234567"), (1.000001, "1.000001")],
)
def test_format_number_keeps_full_precision(value, text):
    assert format_number(value) == text
