# src/void_engine/core/engine/engine.py
"""
Engine de atmosferas do Void.

O `VoidEngine` é a máquina de estados que decide *qual* atmosfera está
ativa e projeta essa decisão na superfície de renderização. Ele compõe:

    - AtmosphereRegistry → partições estática (artefato) e de runtime (injeção)
    - Synchronizer       → tríade de atributos, paleta inline, preferências
    - PersistenceStore   → seleção, preferências e cache de temas
    - Notifier           → snapshots imutáveis para assinantes
    - FontLoader         → fontes externas de entradas injetadas
    - Diagnostics        → Event Log de efeitos colaterais não fatais

Ciclo de vida:
    Construção: cache de temas (opcional) → seleção inicial (atributo já
    renderizado > seleção persistida > default) → preferências persistidas
    → uma sincronização (sem persistir nem notificar).

    Mutações públicas (`set_selection`, `set_preferences`,
    `inject_configuration`) executam até o fim, nesta ordem:
        validar → mutar → sincronizar → persistir → notificar

Política de erros:
    - Nenhuma falha encerra o processo; todas degradam para um default seguro
    - O hook `on_error` recebe a exceção tipada e é apenas observacional,
      exceto para `UnknownConfiguration`: com hook instalado, o fallback
      automático é suprimido e o estado permanece inalterado
    - Exceções lançadas pelo hook propagam ao chamador
    - Falhas de storage viram diagnóstico e nunca chegam ao hook
    - Storage ausente é registrado uma única vez, na construção
    - Apenas `RegistryArtifactError` escapa, na construção

Limites explícitos:
    - Não renderiza nada (ver `surface/`)
    - Não gera o artefato estático do registry
    - Não mantém estado global (ver `bootstrap.py`)
"""

from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional

from ..config.settings import EngineSettings
from ..diagnostics import (
    CONFIGURATION_OVERWRITTEN,
    PALETTE_KEYS_FILLED,
    STATIC_CONFIGURATION_SHADOWED,
    UNKNOWN_PREFERENCE,
    Diagnostics,
    get_logger,
)
from ..errors import corrupt_persisted_state, unknown_configuration
from ..exceptions import (
    CorruptPersistedState,
    InvalidConfiguration,
    RegistryArtifactError,
    UnknownConfiguration,
    VoidException,
)
from ..persistence.storage import Storage
from ..persistence.store import PersistenceStore, PersistResult
from ..registry.loader import load_registry_artifact
from ..registry.registry import AtmosphereRegistry
from ..registry.types import AtmosphereProfile, ConfigurationEntry
from ..registry.validation import build_entry
from ..surface.css import build_style_rule
from ..surface.fonts import FontLoader
from ..surface.protocol import Surface
from ..tokens import FALLBACK_MODE, FALLBACK_PALETTE, PHYSICS_PRIMITIVES, Mode, Physics, PhysicsPrimitive
from .notifier import Notifier, SnapshotCallback, Subscription
from .state import EngineSnapshot, Preferences, normalize_preference_changes
from .synchronizer import Synchronizer


logger = get_logger(__name__)

ErrorHook = Callable[[VoidException], None]


class VoidEngine:
    """Engine canônico de atmosferas (uma instância por aplicação)."""

    def __init__(
        self,
        *,
        settings: Optional[EngineSettings] = None,
        static_registry: Optional[Mapping[str, ConfigurationEntry]] = None,
        surface: Optional[Surface] = None,
        storage: Optional[Storage] = None,
        on_error: Optional[ErrorHook] = None,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.settings = settings or EngineSettings()
        self.diagnostics = diagnostics or Diagnostics(max_events=self.settings.max_events)
        self.surface = surface
        self.on_error = on_error

        default = self.settings.default_atmosphere
        if static_registry is None:
            static_registry = load_registry_artifact(self.settings.registry_path, default_name=default)
        elif default not in static_registry:
            raise RegistryArtifactError(
                message=f'Atmosfera default "{default}" ausente do registry estático',
                details={"available": list(static_registry)},
                hint="O registry estático precisa declarar a atmosfera default.",
            )

        self.registry = AtmosphereRegistry(static=static_registry)
        self.store = PersistenceStore(storage, self.settings.storage_keys)
        self.fonts = FontLoader(surface, self.diagnostics)
        self.synchronizer = Synchronizer(surface, self.settings, self.diagnostics)
        self.notifier = Notifier(self.snapshot)

        self._selection: str = default
        self._preferences = Preferences()

        self._initialize()

    # ------------------------------------------------------------------
    # Inicialização
    # ------------------------------------------------------------------
    def _initialize(self) -> None:
        if self.settings.cache_runtime_themes:
            self._restore_theme_cache()

        restored = self.store.restore()
        for error in restored.errors:
            self._report_storage_error(error)

        self._selection = self._initial_selection(restored.selection)

        preferences, ignored = Preferences.from_dict(restored.preferences)
        self._warn_ignored_preferences(ignored, source="persistence")
        self._preferences = preferences

        self._sync()
        logger.debug("Engine inicializado com atmosfera %s", self._selection)

    def _initial_selection(self, stored: Optional[str]) -> str:
        if self.surface is not None:
            rendered = self.surface.get_attribute(self.settings.attributes.atmosphere)
            if rendered and rendered in self.registry:
                return rendered
        if stored:
            if stored in self.registry:
                return stored
            self.diagnostics.record_error(
                source="persistence",
                payload=unknown_configuration(
                    name=stored,
                    available=self.registry.names(),
                    fallback=self.settings.default_atmosphere,
                ),
                level="WARNING",
            )
        return self.settings.default_atmosphere

    def _restore_theme_cache(self) -> None:
        restored = self.store.restore_theme_cache()
        for error in restored.errors:
            self._report_storage_error(error)

        key = self.settings.storage_keys.theme_cache
        for name, payload in restored.themes.items():
            try:
                entry, _ = build_entry(name, payload, fallback_palette=FALLBACK_PALETTE, fallback_mode=FALLBACK_MODE)
            except InvalidConfiguration as e:
                self.diagnostics.record_error(
                    source="persistence",
                    payload=corrupt_persisted_state(key=f"{key}.{name}", reason=e.message),
                    level="WARNING",
                )
                continue
            self.registry.register_runtime(name, entry)
            self.fonts.request(entry.fonts)
            self._emit_style_rule(name, entry)

    # ------------------------------------------------------------------
    # Leitura
    # ------------------------------------------------------------------
    @property
    def selection(self) -> str:
        return self._selection

    @property
    def preferences(self) -> Preferences:
        return self._preferences

    @property
    def physics(self) -> Physics:
        return self.get_configuration().physics

    @property
    def mode(self) -> Mode:
        return self.get_configuration().mode

    def snapshot(self) -> EngineSnapshot:
        entry = self.get_configuration()
        return EngineSnapshot(
            selection=self._selection,
            physics=entry.physics,
            mode=entry.mode,
            registry=self.registry.as_mapping(),
            preferences=self._preferences,
        )

    def available_configurations(self) -> List[str]:
        return self.registry.names()

    def has_configuration(self, name: Any) -> bool:
        return isinstance(name, str) and name in self.registry

    def is_static(self, name: Optional[str] = None) -> bool:
        return self.registry.is_static(self._selection if name is None else name)

    def get_configuration(self, name: Optional[str] = None) -> ConfigurationEntry:
        """Entrada de `name` (ou da seleção ativa); nomes desconhecidos resolvem para o default."""
        target = self._selection if name is None else name
        entry = self.registry.get(target) if isinstance(target, str) else None
        if entry is None:
            entry = self.registry.get(self.settings.default_atmosphere)
        return entry

    def resolve_profile(self, name: Optional[str] = None) -> AtmosphereProfile:
        """Par {physics, mode} de `name` (ou da seleção ativa)."""
        target = self._selection if name is None else name
        if not self.has_configuration(target):
            target = self.settings.default_atmosphere
        entry = self.get_configuration(target)
        return AtmosphereProfile(name=target, physics=entry.physics, mode=entry.mode)

    def get_physics_primitives(self, name: Optional[str] = None) -> PhysicsPrimitive:
        return PHYSICS_PRIMITIVES[self.get_configuration(name).physics]

    # ------------------------------------------------------------------
    # Mutações
    # ------------------------------------------------------------------
    def set_selection(self, name: str) -> None:
        """
        Ativa a atmosfera `name`.

        Nome desconhecido:
            - com `on_error`: o hook recebe `UnknownConfiguration` e o
              estado permanece inalterado
            - sem hook: diagnóstico de erro e fallback para o default
        """
        if not self.has_configuration(name):
            default = self.settings.default_atmosphere
            error = UnknownConfiguration.from_payload(
                unknown_configuration(
                    name=name,
                    available=self.registry.names(),
                    fallback=None if self.on_error is not None else default,
                )
            )
            if self.on_error is not None:
                self.diagnostics.record_error(source="engine", payload=error.to_payload(), level="WARNING")
                self.on_error(error)
                return
            self.diagnostics.record_error(source="engine", payload=error.to_payload())
            name = default

        self._selection = name
        self._commit()

    def set_preferences(self, changes: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        """
        Merge raso de preferências.

        Aceita chaves no formato persistido (`fontHeading`, `fontBody`,
        `scale`, `density`) ou em snake_case. A escala é armazenada como
        recebida e limitada apenas na renderização.
        """
        merged = dict(changes or {})
        merged.update(kwargs)
        updates, ignored = normalize_preference_changes(merged)
        self._warn_ignored_preferences(ignored, source="engine")

        self._preferences = self._preferences.merged(updates)
        self._commit()

    def inject_configuration(self, name: str, payload: Mapping[str, Any]) -> None:
        """
        Registra uma atmosfera em runtime.

        Payload inválido é rejeitado sem alterar o registry; a falha vai
        para o Event Log e para o hook, quando instalado.
        """
        try:
            entry, filled = build_entry(
                name, payload, fallback_palette=FALLBACK_PALETTE, fallback_mode=FALLBACK_MODE
            )
        except InvalidConfiguration as e:
            self.diagnostics.record_error(source="registry", payload=e.to_payload())
            if self.on_error is not None:
                self.on_error(e)
            return

        shadows_static = self.registry.is_static(name)
        if self.registry.register_runtime(name, entry):
            self.diagnostics.add_warning(
                name=name,
                source="registry",
                code=CONFIGURATION_OVERWRITTEN,
                message=f'Atmosfera "{name}" re-injetada; a entrada anterior foi sobrescrita',
            )
        elif shadows_static:
            self.diagnostics.add_warning(
                name=name,
                source="registry",
                code=STATIC_CONFIGURATION_SHADOWED,
                message=f'Atmosfera "{name}" injetada sobre a entrada estática de mesmo nome',
            )
        if filled:
            self.diagnostics.add_warning(
                name=name,
                source="registry",
                code=PALETTE_KEYS_FILLED,
                message=f'{len(filled)} chave(s) de paleta de "{name}" preenchidas pela Fallback Palette',
                keys=filled,
            )

        self.fonts.request(entry.fonts)
        self._emit_style_rule(name, entry)
        self._persist_theme_cache()

        if name == self._selection:
            self._sync()
        self.notifier.publish()

    def subscribe(self, callback: SnapshotCallback) -> Subscription:
        return self.notifier.subscribe(callback)

    def persist(self) -> PersistResult:
        """
        Grava seleção e preferências; falhas viram diagnóstico, nunca exceção.

        Sem storage (host sem armazenamento durável) a gravação é um no-op:
        a ausência já foi registrada uma vez, na construção.
        """
        result = self.store.persist(self._selection, self._preferences.to_dict())
        if not result.ok and result.error is not None and self.store.available:
            self._report_storage_error(result.error)
        return result

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------
    def _commit(self) -> None:
        self._sync()
        self.persist()
        self.notifier.publish()

    def _sync(self) -> None:
        self.synchronizer.sync(
            selection=self._selection,
            entry=self.get_configuration(),
            is_static=self.registry.is_static(self._selection),
            preferences=self._preferences,
        )

    def _emit_style_rule(self, name: str, entry: ConfigurationEntry) -> None:
        if self.surface is None:
            return
        css = build_style_rule(
            name,
            mode=entry.mode.value,
            palette=entry.palette,
            attribute=self.settings.attributes.atmosphere,
        )
        self.surface.upsert_style_rule(self.settings.style_sheet_id, name, css)

    def _persist_theme_cache(self) -> None:
        if not self.settings.cache_runtime_themes:
            return
        result = self.store.persist_theme_cache(
            {name: entry.to_dict() for name, entry in self.registry.runtime_items()}
        )
        if not result.ok and result.error is not None and self.store.available:
            self._report_storage_error(result.error)

    def _report_storage_error(self, error: VoidException) -> None:
        self.diagnostics.record_error(source="persistence", payload=error.to_payload(), level="WARNING")
        if isinstance(error, CorruptPersistedState) and self.on_error is not None:
            self.on_error(error)

    def _warn_ignored_preferences(self, ignored: List[str], *, source: str) -> None:
        for key in ignored:
            self.diagnostics.log(
                source=source,
                level="WARNING",
                code=UNKNOWN_PREFERENCE,
                message=f'Preferência desconhecida "{key}" ignorada',
                key=key,
            )
