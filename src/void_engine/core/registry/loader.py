# src/void_engine/core/registry/loader.py
"""
Loader do artefato estático do registry.

O registry estático é produzido por um passo de build externo (a partir
dos design tokens) e lido uma única vez na inicialização. Este módulo
lê esse artefato (JSON ou YAML), valida cada entrada contra os enums de
physics e mode e garante que a atmosfera default existe.

Formato do artefato:
    {
      "<nome>": {"physics": "glassy", "mode": "dark", "palette": {...}},
      ...
    }

A paleta é opcional no artefato: entradas estáticas são cobertas por
regras de estilo pré-autoradas e não dependem de propriedades inline.

Decisões arquiteturais:
    - Um artefato malformado é falha fatal de build (`RegistryArtifactError`)
    - Entradas estáticas não passam pelo merge defensivo: são autoradas completas

Limites explícitos:
    - Não gera o artefato
    - Não conhece o registry de runtime
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from ..config.errors import ConfigError
from ..config.loader import read_document
from ..exceptions import InvalidConfiguration, RegistryArtifactError
from ..tokens import DEFAULT_ATMOSPHERE
from .types import ConfigurationEntry
from .validation import parse_mode, parse_palette, parse_physics, validate_name


BUNDLED_ARTIFACT = Path(__file__).with_name("void-registry.json")


def load_registry_artifact(
    path: Optional[Union[str, Path]] = None,
    *,
    default_name: str = DEFAULT_ATMOSPHERE,
) -> Dict[str, ConfigurationEntry]:
    """
    Carrega e valida o artefato estático do registry.

    Args:
        path: Caminho do artefato; None usa o artefato empacotado.
        default_name: Atmosfera que precisa obrigatoriamente existir.

    Returns:
        Dict[str, ConfigurationEntry]: Entradas na ordem do artefato.

    Raises:
        RegistryArtifactError: Se o artefato não puder ser lido, se alguma
            entrada for inválida ou se `default_name` estiver ausente.
    """
    artifact = Path(path) if path is not None else BUNDLED_ARTIFACT

    try:
        raw = read_document(artifact)
    except ConfigError as e:
        raise RegistryArtifactError(
            message=f"Artefato de registry ilegível: {artifact}",
            details={"path": str(artifact), "reason": str(e)},
            hint="Regere o artefato de registry a partir dos design tokens.",
        ) from e

    entries: Dict[str, ConfigurationEntry] = {}
    for name, declared in raw.items():
        try:
            validate_name(name)
            if not isinstance(declared, dict):
                raise InvalidConfiguration(
                    message=f'Entrada "{name}" deve ser um mapeamento',
                    details={"name": name},
                )
            palette = parse_palette(name, declared["palette"]) if "palette" in declared else {}
            if "mode" not in declared:
                raise InvalidConfiguration(
                    message=f'Entrada "{name}" não declara mode',
                    details={"name": name, "field": "mode"},
                )
            entries[name] = ConfigurationEntry(
                physics=parse_physics(name, declared.get("physics")),
                mode=parse_mode(name, declared.get("mode")),
                palette=palette,
            )
        except InvalidConfiguration as e:
            raise RegistryArtifactError(
                message=f"Entrada inválida no artefato de registry: {e.message}",
                details={"path": str(artifact), **e.details},
                hint="Corrija a entrada nos design tokens e regere o artefato.",
            ) from e

    if default_name not in entries:
        raise RegistryArtifactError(
            message=f'Atmosfera default "{default_name}" ausente do artefato',
            details={"path": str(artifact), "available": list(entries)},
            hint="O artefato estático precisa declarar a atmosfera default.",
        )

    return entries
