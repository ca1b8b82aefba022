# src/void_engine/core/config/errors.py
"""
Exceções canônicas da camada de settings do Void Engine.

As exceções aqui definidas representam falhas estruturais na resolução
dos settings do engine (arquivos ausentes, formato inválido, conflitos
de merge). Diferente das falhas de runtime do engine, que sempre
degradam para um default seguro, erros de settings são levantados na
composição da aplicação, antes de qualquer engine existir.

Invariantes:
    - Todas as exceções desta camada herdam de `ConfigError`
    - Nenhuma exceção representa falha de injeção ou de seleção

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do engine, do registry ou da superfície
"""


class ConfigError(Exception):
    """
    Exceção base para erros de resolução de settings.

    Permite captura genérica de qualquer falha estrutural de carregamento,
    merge ou materialização dos settings.
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo obrigatório não existe.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - O override local é opcional e nunca gera este erro

    Limites explícitos:
        - Não tenta inferir ou criar o arquivo automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando a extensão do arquivo não é suportada.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando a raiz do documento não é um mapeamento.

    Listas ou escalares na raiz não podem ser mesclados nem
    materializados em settings, e são rejeitados sem normalização.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando o deep-merge encontra tipos incompatíveis.

    Exemplo de conflito:
        - base:     {"surface": {"attributes": {...}}}
        - override: {"surface": "data-theme"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidSettingsError(ConfigError):
    """
    Exceção levantada quando a configuração resolvida não forma settings válidos.

    Exemplos:
        - `scale_bounds` com mínimo maior que o máximo
        - fator de density não numérico
        - nome de atmosfera default vazio
    """


class ConfigParseError(ConfigError):
    """
    Exceção levantada quando o conteúdo do documento não pode ser interpretado.

    Cobre YAML sintaticamente inválido e JSON malformado.
    """
