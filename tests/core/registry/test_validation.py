# tests/core/registry/test_validation.py
"""
Testes do validador e merger de configurações injetadas.

Os testes asseguram que:
- physics fora de {glassy, flat, retro} é rejeitado
- palette ausente ou não-mapeamento é rejeitada
- a paleta armazenada é a Fallback Palette sobreposta pelo payload
- o merge é idempotente
- mode ausente assume o mode de fallback (dark)
- fontes declaradas são normalizadas em FontResource

Decisões arquiteturais:
    - Rejeição sempre via `InvalidConfiguration` com payload estruturado
    - Lacunas na paleta não são erro: são preenchidas silenciosamente
"""

import pytest

try:
    from void_engine.core.exceptions import InvalidConfiguration
    from void_engine.core.registry.types import FontResource
    from void_engine.core.registry.validation import build_entry, merge_palette, missing_keys
    from void_engine.core.tokens import FALLBACK_PALETTE, PALETTE_KEYS, Mode, Physics
except Exception as e:  # noqa: BLE001
    build_entry = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o validador de payloads esteja disponível.

    Falha imediatamente, com a lista de símbolos esperados, quando o
    módulo de validação do registry não pode ser importado.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing registry validation API. Implement:"
            "- src/void_engine/core/registry/validation.py (build_entry, merge_palette, missing_keys)"
            f"Import error: {_IMPORT_ERR}"
        )


def test_fallback_palette_covers_every_contract_key():
    _require_imports()
    assert set(PALETTE_KEYS) == set(FALLBACK_PALETTE)


@pytest.mark.parametrize("physics", ["glass", "GLASSY", "", None, 3, "neumorphic"])
def test_invalid_physics_is_rejected(physics):
    _require_imports()
    with pytest.raises(InvalidConfiguration) as exc:
        build_entry("brand-x", {"physics": physics, "palette": {}})

    assert exc.value.code == "INVALID_CONFIGURATION"
    assert exc.value.details["field"] == "physics"


@pytest.mark.parametrize("palette", [None, "red", ["#fff"], 42])
def test_missing_or_non_mapping_palette_is_rejected(palette):
    _require_imports()
    payload = {"physics": "flat"}
    if palette is not None:
        payload["palette"] = palette

    with pytest.raises(InvalidConfiguration) as exc:
        build_entry("brand-x", payload)

    assert exc.value.details["field"] == "palette"


def test_non_string_palette_value_is_rejected():
    _require_imports()
    with pytest.raises(InvalidConfiguration):
        build_entry("brand-x", {"physics": "flat", "palette": {"energy-primary": 0xFF0000}})


@pytest.mark.parametrize(
    "value",
    ["red; } html { display: none", "#fff;", "{", "var(--x)}"],
)
def test_palette_value_that_escapes_the_rule_is_rejected(value):
    _require_imports()
    with pytest.raises(InvalidConfiguration) as exc:
        build_entry("brand-x", {"physics": "flat", "palette": {"bg-canvas": value}})

    assert exc.value.details["field"] == "palette.bg-canvas"


@pytest.mark.parametrize("key", ["bg canvas", "bg-canvas: red", "", "-", "a{b}", "bg/canvas"])
def test_palette_key_that_is_not_a_custom_property_is_rejected(key):
    _require_imports()
    with pytest.raises(InvalidConfiguration):
        build_entry("brand-x", {"physics": "flat", "palette": {key: "#fff"}})


@pytest.mark.parametrize("key", ["bg-canvas", "--bg-canvas", "glow_halo", "layer2"])
def test_custom_property_keys_are_accepted(key):
    _require_imports()
    entry, _ = build_entry("brand-x", {"physics": "flat", "palette": {key: "rgba(0, 0, 0, 0.5)"}})

    assert entry.palette[key] == "rgba(0, 0, 0, 0.5)"


def test_invalid_mode_is_rejected():
    _require_imports()
    with pytest.raises(InvalidConfiguration) as exc:
        build_entry("brand-x", {"physics": "flat", "mode": "dim", "palette": {}})

    assert exc.value.details["field"] == "mode"


@pytest.mark.parametrize("name", ["", "   ", None, 7])
def test_invalid_name_is_rejected(name):
    _require_imports()
    with pytest.raises(InvalidConfiguration):
        build_entry(name, {"physics": "flat", "palette": {}})


def test_non_mapping_payload_is_rejected():
    _require_imports()
    with pytest.raises(InvalidConfiguration):
        build_entry("brand-x", ["flat"])


def test_partial_palette_is_merged_over_fallback(brand_x_payload):
    """
    Verifica a lei de merge: payload vence chave a chave, o resto vem do fallback.

    O payload declara apenas `energy-primary`; todas as outras chaves do
    contrato precisam existir com os valores da Fallback Palette e ser
    reportadas como preenchidas.
    """
    _require_imports()
    entry, filled = build_entry("brand-x", brand_x_payload)

    assert entry.physics is Physics.FLAT
    assert entry.mode is Mode.LIGHT
    assert entry.palette["energy-primary"] == "#ff0000"
    for key in PALETTE_KEYS:
        if key != "energy-primary":
            assert entry.palette[key] == FALLBACK_PALETTE[key]
    assert "energy-primary" not in filled
    assert set(filled) == set(PALETTE_KEYS) - {"energy-primary"}


def test_merge_is_idempotent(brand_x_payload):
    _require_imports()
    once, _ = build_entry("brand-x", brand_x_payload)
    twice, _ = build_entry("brand-x", {**brand_x_payload, "palette": dict(once.palette)})

    assert once == twice
    assert merge_palette(merge_palette({"text-main": "#000"})) == merge_palette({"text-main": "#000"})


def test_extra_palette_keys_are_preserved():
    _require_imports()
    entry, _ = build_entry("brand-x", {"physics": "retro", "palette": {"glow-halo": "#0f0"}})

    assert entry.palette["glow-halo"] == "#0f0"
    assert set(PALETTE_KEYS) <= set(entry.palette)


def test_missing_mode_defaults_to_dark():
    _require_imports()
    entry, _ = build_entry("brand-x", {"physics": "glassy", "palette": {}})

    assert entry.mode is Mode.DARK


def test_full_palette_reports_nothing_filled():
    _require_imports()
    _, filled = build_entry("brand-x", {"physics": "glassy", "palette": dict(FALLBACK_PALETTE)})

    assert filled == []
    assert missing_keys(FALLBACK_PALETTE) == []


def test_fonts_are_parsed(font_payload):
    _require_imports()
    entry, _ = build_entry("brand-x", font_payload)

    assert entry.fonts == (
        FontResource(name="Orbitron", url="https://fonts.googleapis.com/css2?family=Orbitron"),
    )


@pytest.mark.parametrize("fonts", ["https://x", [{"name": "x"}], [42], {"url": "https://x"}])
def test_invalid_fonts_are_rejected(fonts):
    _require_imports()
    with pytest.raises(InvalidConfiguration):
        build_entry("brand-x", {"physics": "flat", "palette": {}, "fonts": fonts})


def test_stored_palette_is_read_only(brand_x_payload):
    _require_imports()
    entry, _ = build_entry("brand-x", brand_x_payload)

    with pytest.raises(TypeError):
        entry.palette["energy-primary"] = "#000"  # type: ignore[index]
