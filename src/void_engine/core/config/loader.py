# src/void_engine/core/config/loader.py
"""
Loader de documentos de configuração do Void Engine.

Este módulo lê documentos declarativos (YAML ou JSON) do disco e resolve
a configuração efetiva do engine a partir de:
    - um arquivo de defaults (obrigatório; o empacotado por padrão)
    - um arquivo local de overrides (opcional)

O mesmo leitor de documentos é reutilizado pelo loader do artefato de
registry estático, que também é um documento YAML/JSON com raiz dict.

Invariantes:
    - O resultado é sempre um dicionário puro
    - Overrides locais nunca mutam os defaults
    - Arquivos vazios são interpretados como dicionários vazios

Limites explícitos:
    - Não materializa `EngineSettings` (ver `settings.py`)
    - Não valida semântica de atmosferas
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    ConfigParseError,
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


DEFAULTS_PATH = Path(__file__).with_name("defaults.yaml")


def read_document(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Carrega um documento YAML/JSON e valida que sua raiz é um dicionário.

    Args:
        path (Union[str, Path]): Caminho do documento.

    Returns:
        Dict[str, Any]: Conteúdo do documento.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        ConfigParseError: Se o conteúdo não puder ser interpretado.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigFileNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix not in {".yaml", ".yml", ".json"}:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f) if suffix == ".json" else yaml.safe_load(f)
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigParseError(f"Documento ilegível: {path} ({e})") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: Optional[Union[str, Path]] = None,
    local_path: Optional[Union[str, Path]] = None,
) -> Dict[str, Any]:
    """
    Resolve a configuração efetiva do engine.

    Política de resolução:
        - Sem `defaults_path`, usa o `defaults.yaml` empacotado
        - O arquivo local é opcional; se informado mas inexistente, é ignorado
        - Quando presente, o local tem prioridade via `deep_merge`

    Args:
        defaults_path: Caminho opcional para um arquivo de defaults alternativo.
        local_path: Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Configuração resolvida.

    Raises:
        ConfigFileNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se algum formato não for suportado.
        InvalidConfigRootTypeError: Se alguma raiz não for dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural no merge.
    """

    defaults = read_document(defaults_path if defaults_path is not None else DEFAULTS_PATH)

    effective = defaults

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(defaults, read_document(local_file))

    return effective
