# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do Void Engine.

Este módulo contém testes mínimos cujo único objetivo é garantir que:
- o pacote `void_engine` é importável
- os recursos empacotados (defaults.yaml, void-registry.json) existem
- a descoberta e execução de testes ocorre sem erros

Limites explícitos:
    - Não testar lógica de atmosferas
    - Não acumular asserts funcionais
"""


def test_smoke():
    import void_engine

    assert void_engine.__version__


def test_packaged_resources_exist():
    from void_engine.core.config.loader import DEFAULTS_PATH
    from void_engine.core.registry.loader import BUNDLED_ARTIFACT

    assert DEFAULTS_PATH.is_file()
    assert BUNDLED_ARTIFACT.is_file()
