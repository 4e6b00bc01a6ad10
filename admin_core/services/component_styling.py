"""
Component Styling

Per-component, per-mode style overrides of the branding configuration.

Provides:
- the ELEMENTS / COMPONENTS catalogs and composite id expansion
- ``resolve``: effective light/dark style records for a component id
- ``update``: single-field immutable edit of the override map
- ``ComponentSelection``: tab/selection state of the branding editor
"""

import logging

from admin_core.models.contracts.branding import BrandingConfig, ComponentStyle, StyleRecord
from admin_core.models.enums import ComponentTab, ThemeMode

logger = logging.getLogger(__name__)

# Elements have bespoke editors; components use the generic styling editor.
ELEMENTS: tuple[str, ...] = (
    "application-logo",
    "login-background",
    "typography",
    "top-menu-bar",
    "platform-sidebar",
    "vertical-tab-menu",
)

COMPONENTS: tuple[str, ...] = (
    "text-input",
    "select",
    "multi-select",
    "textarea",
    "button",
    "card",
    "checkbox",
    "radio",
    "switch",
)

COMPOSITE_PARTS: dict[str, tuple[str, ...]] = {
    "platform-sidebar": (
        "platform-sidebar-primary",
        "platform-sidebar-secondary",
        "platform-sidebar-menu-normal",
        "platform-sidebar-menu-hover",
        "platform-sidebar-menu-active",
    ),
    "vertical-tab-menu": (
        "vertical-tab-menu-normal",
        "vertical-tab-menu-hover",
        "vertical-tab-menu-active",
    ),
}

# Inputs and selections get a filled look unless a tenant overrides it.
INPUT_COMPONENTS: frozenset[str] = frozenset({"text-input", "select", "multi-select", "textarea"})
INPUT_BACKGROUND_DEFAULT = "#f7f7f7"

TAB_CATALOGS: dict[ComponentTab, tuple[str, ...]] = {
    ComponentTab.ELEMENTS: ELEMENTS,
    ComponentTab.COMPONENTS: COMPONENTS,
}


def expand_component(component_id: str) -> tuple[str, ...]:
    """
    Return the storage ids behind an editor id.

    Composite elements are stored under their sub-ids; everything else maps
    to itself.
    """
    return COMPOSITE_PARTS.get(component_id, (component_id,))


def _background_floor(component_id: str) -> str:
    return INPUT_BACKGROUND_DEFAULT if component_id in INPUT_COMPONENTS else ""


def _resolve_record(component_id: str, stored: StyleRecord | None) -> StyleRecord:
    record = dict(stored) if stored else {}
    # The floor re-asserts whenever the stored value is falsy.
    if not record.get("backgroundColor"):
        record["backgroundColor"] = _background_floor(component_id)
    return record


def resolve(config: BrandingConfig, component_id: str) -> dict[str, StyleRecord]:
    """
    Effective light/dark style records for a component id.

    Components without overrides resolve to empty records whose
    ``backgroundColor`` is the input default (``#f7f7f7``) for text-input,
    select, multi-select and textarea, and ``""`` otherwise. Stored records
    are returned with the same floor applied to a falsy ``backgroundColor``.

    Pure: returns fresh dicts and never mutates ``config``.
    """
    entry = config.component_styling.get(component_id)
    return {
        ThemeMode.LIGHT.value: _resolve_record(component_id, entry.light if entry else None),
        ThemeMode.DARK.value: _resolve_record(component_id, entry.dark if entry else None),
    }


def update(
    config: BrandingConfig,
    component_id: str,
    mode: ThemeMode | str,
    field: str,
    value: str,
) -> BrandingConfig:
    """
    Set one style property and return the new configuration.

    The edited mode starts from its resolved record. The untouched mode and
    every other component entry are carried over by reference. ``value`` is
    stored as given; it is not validated as CSS.
    """
    mode = ThemeMode(mode)
    current = resolve(config, component_id)
    edited = {**current[mode.value], field: value}

    existing = config.component_styling.get(component_id)
    if existing is not None:
        entry = existing.model_copy(update={mode.value: edited})
    else:
        entry = ComponentStyle(**{**current, mode.value: edited})

    styling = {**config.component_styling, component_id: entry}
    logger.debug(f"Component styling updated: {component_id}.{mode.value}.{field}={value!r}")
    return config.model_copy(update={"component_styling": styling})


def reset(config: BrandingConfig, component_id: str) -> BrandingConfig:
    """Drop every override stored for a component id (and its parts)."""
    targets = set(expand_component(component_id)) | {component_id}
    styling = {
        key: entry for key, entry in config.component_styling.items() if key not in targets
    }
    return config.model_copy(update={"component_styling": styling})


class ComponentSelection:
    """
    Active tab and component of the branding editor.

    The active component always belongs to the active tab's catalog:
    switching tabs, or selecting an id from the other catalog, resets the
    selection to the first id of the active tab.
    """

    def __init__(self, tab: ComponentTab | str = ComponentTab.ELEMENTS):
        self.active_tab = ComponentTab(tab)
        self.active_component = TAB_CATALOGS[self.active_tab][0]

    @property
    def catalog(self) -> tuple[str, ...]:
        return TAB_CATALOGS[self.active_tab]

    def switch_tab(self, tab: ComponentTab | str) -> str:
        """Activate a tab and return the (possibly reset) active component."""
        self.active_tab = ComponentTab(tab)
        if self.active_component not in self.catalog:
            self.active_component = self.catalog[0]
        return self.active_component

    def select(self, component_id: str) -> str:
        """Select a component; ids outside the active tab reset the selection."""
        if component_id in self.catalog:
            self.active_component = component_id
        else:
            logger.debug(
                f"Ignoring selection of {component_id!r} outside tab {self.active_tab.value}"
            )
            self.active_component = self.catalog[0]
        return self.active_component

    def storage_ids(self) -> tuple[str, ...]:
        """Storage ids edited by the current selection."""
        return expand_component(self.active_component)
