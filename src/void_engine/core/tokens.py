# src/void_engine/core/tokens.py
"""
Tokens canônicos do Void Engine.

Este módulo concentra os valores fechados que formam o contrato entre o
engine e a superfície de renderização externa:
    - os enums de physics, mode e density
    - as chaves obrigatórias da paleta
    - a Fallback Palette (rede de segurança de todo merge)
    - os fatores numéricos de density
    - as primitivas de movimento de cada preset de physics

Decisões arquiteturais:
    - Enums herdam de `str` para serem gravados diretamente como atributos
    - A Fallback Palette é exposta como mapeamento somente leitura
    - As primitivas de physics são dados, não comportamento

Invariantes:
    - A Fallback Palette declara valor para todas as chaves de `PALETTE_KEYS`
    - Nenhuma estrutura exportada aqui é mutável

Limites explícitos:
    - Não gera CSS nem artefatos de build
    - Não conhece o registry nem o estado do engine
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class Physics(str, Enum):
    """Preset de movimento/comportamento derivado da atmosfera ativa."""
    GLASSY = "glassy"
    FLAT = "flat"
    RETRO = "retro"


class Mode(str, Enum):
    """Preset de contraste (claro/escuro) derivado da atmosfera ativa."""
    LIGHT = "light"
    DARK = "dark"


class Density(str, Enum):
    """Densidade de espaçamento escolhida pelo usuário."""
    HIGH = "high"
    STANDARD = "standard"
    LOW = "low"


PHYSICS_VALUES: Tuple[str, ...] = tuple(p.value for p in Physics)
MODE_VALUES: Tuple[str, ...] = tuple(m.value for m in Mode)

DEFAULT_ATMOSPHERE = "void"

# Ordem = ordem de declaração das regras geradas
PALETTE_KEYS: Tuple[str, ...] = (
    # canvas
    "bg-canvas",
    "bg-surface",
    "bg-sink",
    "bg-spotlight",
    # energy / lighting
    "energy-primary",
    "energy-secondary",
    "border-highlight",
    "border-shadow",
    # signal
    "text-main",
    "text-dim",
    "text-mute",
    # semantic
    "color-premium",
    "color-system",
    "color-success",
    "color-error",
    # typography
    "font-atmos-heading",
    "font-atmos-body",
)

FALLBACK_PALETTE: Mapping[str, str] = MappingProxyType({
    "bg-canvas": "#010020",
    "bg-surface": "rgba(22, 30, 95, 0.4)",
    "bg-sink": "rgba(0, 2, 41, 0.6)",
    "bg-spotlight": "#0a0c2b",
    "energy-primary": "#33e2e6",
    "energy-secondary": "#3875fa",
    "border-highlight": "rgba(56, 117, 250, 0.3)",
    "border-shadow": "rgba(56, 117, 250, 0.1)",
    "text-main": "#ffffff",
    "text-dim": "rgba(255, 255, 255, 0.85)",
    "text-mute": "rgba(255, 255, 255, 0.6)",
    "color-premium": "#ff8c00",
    "color-system": "#a078ff",
    "color-success": "#00e055",
    "color-error": "#ff3c40",
    "font-atmos-heading": "'Hanken Grotesk', sans-serif",
    "font-atmos-body": "'Hanken Grotesk', sans-serif",
})

FALLBACK_MODE = Mode.DARK

DENSITY_FACTORS: Mapping[str, float] = MappingProxyType({
    Density.HIGH.value: 0.75,
    Density.STANDARD.value: 1.0,
    Density.LOW.value: 1.25,
})


@dataclass(frozen=True)
class PhysicsPrimitive:
    """
    Primitivas de tempo e matéria de um preset de physics.

    Campos:
        - blur: desfoque de superfícies (px)
        - border_width: espessura de borda (px)
        - speed_base: duração padrão de transição (ms)
        - speed_fast: duração de micro-interações (ms)
        - ease_stabilize / ease_snap / ease_flow: curvas CSS repassadas como texto

    Consumidas por colaboradores de animação que ramificam comportamento
    pelo valor de physics ativo, sem precisar ler o DOM.
    """

    blur: int
    border_width: int
    speed_base: int
    speed_fast: int
    ease_stabilize: str
    ease_snap: str
    ease_flow: str


PHYSICS_PRIMITIVES: Mapping[Physics, PhysicsPrimitive] = MappingProxyType({
    Physics.GLASSY: PhysicsPrimitive(
        blur=20,
        border_width=1,
        speed_base=300,
        speed_fast=200,
        ease_stabilize="cubic-bezier(0.16, 1, 0.3, 1)",
        ease_snap="cubic-bezier(0.22, 1, 0.36, 1)",
        ease_flow="linear",
    ),
    Physics.FLAT: PhysicsPrimitive(
        blur=0,
        border_width=1,
        speed_base=200,
        speed_fast=133,
        ease_stabilize="ease-out",
        ease_snap="ease-out",
        ease_flow="ease-in-out",
    ),
    Physics.RETRO: PhysicsPrimitive(
        blur=0,
        border_width=2,
        speed_base=0,
        speed_fast=0,
        ease_stabilize="steps(2)",
        ease_snap="steps(2)",
        ease_flow="steps(4)",
    ),
})
