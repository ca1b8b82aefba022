# tests/core/engine/test_engine_selection.py
"""
Testes da máquina de estados de seleção do VoidEngine.

Este módulo valida `set_selection` e suas garantias observáveis:
- para todo nome conhecido, a tríade na superfície reflete o nome,
  o physics e o mode derivados
- nomes desconhecidos caem no default quando não há hook de erro
- com hook instalado, o fallback é suprimido e o hook decide
- a mutação segue a ordem sincronizar → persistir → notificar

Decisões arquiteturais:
    - `set_selection` nunca lança por padrão
    - Um host que quer falhas duras instala um hook que lança

Limites explícitos:
    - Não valida injeção em runtime (ver test_engine_injection.py)
    - Não valida restauração de estado (ver test_engine_initialization.py)
"""

import pytest

try:
    from void_engine.core.engine.engine import VoidEngine
    from void_engine.core.exceptions import UnknownConfiguration
    from void_engine.core.registry.loader import load_registry_artifact
except Exception as e:  # noqa: BLE001
    VoidEngine = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o engine e suas exceções tipadas estejam disponíveis.

    Decisões arquiteturais:
        - Falha antecipada e explícita quando o engine está ausente
        - Mensagem de erro lista exatamente os módulos esperados

    Limites explícitos:
        - Não constrói engine
        - Não substitui testes funcionais
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing engine API. Implement:"
            "- src/void_engine/core/engine/engine.py (VoidEngine)"
            "- src/void_engine/core/exceptions.py (UnknownConfiguration)"
            f"Import error: {_IMPORT_ERR}"
        )


def _built_in():
    return list(load_registry_artifact().items())


def test_default_selection_is_void(make_engine, surface):
    _require_imports()
    engine = make_engine()

    assert engine.selection == "void"
    assert surface.attributes == {
        "data-atmosphere": "void",
        "data-physics": "glassy",
        "data-mode": "dark",
    }


@pytest.mark.parametrize("name, entry", _built_in() if _IMPORT_ERR is None else [])
def test_triad_matches_every_known_name(make_engine, surface, name, entry):
    """
    Para todo nome conhecido, a tríade reflete o nome e os eixos derivados.

    Invariantes:
        - `data-atmosphere` é o próprio nome
        - `data-physics` e `data-mode` são os valores da entrada do registry
    """
    _require_imports()
    engine = make_engine()
    engine.set_selection(name)

    assert engine.selection == name
    assert surface.get_attribute("data-atmosphere") == name
    assert surface.get_attribute("data-physics") == entry.physics.value
    assert surface.get_attribute("data-mode") == entry.mode.value


@pytest.mark.parametrize("name", ["nope", "", None, 42, "VOID"])
def test_unknown_name_falls_back_to_default(make_engine, surface, name):
    _require_imports()
    engine = make_engine()
    engine.set_selection("terminal")

    engine.set_selection(name)

    assert engine.selection == "void"
    assert surface.get_attribute("data-physics") == "glassy"
    events = engine.diagnostics.find("UNKNOWN_CONFIGURATION")
    assert len(events) == 1
    assert events[0]["level"] == "ERROR"
    assert events[0]["details"]["fallback"] == "void"


def test_unknown_name_with_hook_leaves_state_unchanged(make_engine, surface, storage):
    _require_imports()
    seen = []
    engine = make_engine(on_error=seen.append)
    engine.set_selection("terminal")
    snapshots = []
    engine.subscribe(snapshots.append)

    engine.set_selection("nope")

    assert engine.selection == "terminal"
    assert surface.get_attribute("data-atmosphere") == "terminal"
    assert storage.data["void_atmosphere"] == "terminal"
    assert len(seen) == 1
    assert isinstance(seen[0], UnknownConfiguration)
    assert seen[0].details["name"] == "nope"
    assert "terminal" in seen[0].details["available"]
    assert len(snapshots) == 1  # apenas a entrega imediata do subscribe


def test_raising_hook_propagates(make_engine):
    _require_imports()

    def strict(error):
        raise error

    engine = make_engine(on_error=strict)

    with pytest.raises(UnknownConfiguration):
        engine.set_selection("nope")
    assert engine.selection == "void"


def test_selection_is_persisted(make_engine, storage):
    _require_imports()
    engine = make_engine()
    engine.set_selection("paper")

    assert storage.data["void_atmosphere"] == "paper"


def test_mutation_order_sync_persist_notify(make_engine, surface, storage):
    """
    Ao notificar, a superfície já foi sincronizada e o estado já foi persistido.
    """
    _require_imports()
    engine = make_engine()
    observed = []

    def on_change(snapshot):
        observed.append(
            (snapshot.selection, surface.get_attribute("data-atmosphere"), storage.data.get("void_atmosphere"))
        )

    engine.subscribe(on_change)
    engine.set_selection("focus")

    assert observed[-1] == ("focus", "focus", "focus")


def test_reselecting_same_name_still_notifies(make_engine):
    _require_imports()
    engine = make_engine()
    calls = []
    engine.subscribe(calls.append)

    engine.set_selection("void")

    assert len(calls) == 2
