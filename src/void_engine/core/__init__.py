# src/void_engine/core/__init__.py
"""
Core do Void Engine.

Este pacote contém a implementação canônica e independente de adapters
do engine de atmosferas: decidir qual configuração visual está ativa e
expô-la através de um contrato externo documentado (atributos,
propriedades customizadas e regras de estilo geradas).

Componentes principais:
    - tokens      → enums, chaves de paleta, Fallback Palette, primitivas de physics
    - config      → settings declarativos (defaults YAML + override local)
    - registry    → partições estática e de runtime, validação e merge defensivo
    - surface     → contrato da superfície de renderização e implementação em memória
    - persistence → storage durável de seleção, preferências e cache de temas
    - engine      → máquina de estados, synchronizer e notifier
    - diagnostics → logging e Event Log estruturado

Princípios fundamentais:
    - Nenhuma falha encerra o processo: toda falha degrada para um default seguro
    - Toda mutação pública é síncrona e atômica do ponto de vista de observadores
    - Efeitos colaterais não fatais são sempre observáveis (Event Log)

Limites explícitos:
    - Não renderiza pixels nem conhece frameworks de UI
    - Não gera o artefato estático do registry
"""
