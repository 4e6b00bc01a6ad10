"""
Theme application.

Projects a branding configuration onto CSS: ``--brand-*`` custom properties
on the document root plus per-component rules. Rendering surfaces (a web
shell, a preview pane, the CLI) consume the resulting ``ThemeStylesheet``;
nothing here touches a document directly.

Platform chrome is styled globally. Embedded space modules mark their body
with ``data-space`` and are excluded from every component rule.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Protocol

from admin_core.models.contracts.branding import BrandingConfig, StyleRecord
from admin_core.models.enums import LoginBackgroundType, ThemeMode
from admin_core.services.component_styling import resolve

logger = logging.getLogger(__name__)

# Space modules opt out of platform styling via data-space on <body>
SCOPE = "body:not([data-space])"

DEFAULT_FONT_FAMILY_MONO = '"SF Mono", "Monaco", "Inconsolata", "Fira Code", monospace'
DEFAULT_TRANSITION_DURATION = "200ms"
DEFAULT_TRANSITION_TIMING = "cubic-bezier(0.4, 0, 0.2, 1)"
DEFAULT_BORDER_COLOR = "rgba(0, 0, 0, 0.1)"
BODY_TEXT_DARK = "#F5F5F7"
BODY_TEXT_LIGHT = "#1D1D1F"

GOOGLE_FONTS_URL = "https://fonts.googleapis.com/css2?family={family}:wght@300;400;500;600;700&display=swap"

PALETTE_VARIABLES: dict[str, str] = {
    "primary_color": "--brand-primary",
    "secondary_color": "--brand-secondary",
    "warning_color": "--brand-warning",
    "danger_color": "--brand-danger",
    "ui_background_color": "--brand-ui-bg",
    "ui_border_color": "--brand-ui-border",
    "top_menu_background_color": "--brand-top-menu-bg",
    "top_menu_text_color": "--brand-top-menu-text",
    "platform_sidebar_background_color": "--brand-platform-sidebar-bg",
    "platform_sidebar_text_color": "--brand-platform-sidebar-text",
    "secondary_sidebar_background_color": "--brand-secondary-sidebar-bg",
    "secondary_sidebar_text_color": "--brand-secondary-sidebar-text",
    "body_background_color": "--brand-body-bg",
}

GLOBAL_VARIABLES: dict[str, str] = {
    "border_radius": "--brand-border-radius",
    "border_width": "--brand-border-width",
    "button_border_radius": "--brand-button-border-radius",
    "button_border_width": "--brand-button-border-width",
    "input_border_radius": "--brand-input-border-radius",
    "input_border_width": "--brand-input-border-width",
    "select_border_radius": "--brand-select-border-radius",
    "select_border_width": "--brand-select-border-width",
    "textarea_border_radius": "--brand-textarea-border-radius",
    "textarea_border_width": "--brand-textarea-border-width",
    "shadow_xs": "--brand-shadow-xs",
    "shadow_sm": "--brand-shadow-sm",
    "shadow_md": "--brand-shadow-md",
    "shadow_lg": "--brand-shadow-lg",
    "shadow_xl": "--brand-shadow-xl",
}

# Sidebar sub-components override the palette variables they correspond to
SIDEBAR_VARIABLE_OVERRIDES: dict[str, dict[str, str]] = {
    "platform-sidebar-primary": {
        "backgroundColor": "--brand-platform-sidebar-bg",
        "textColor": "--brand-platform-sidebar-text",
    },
    "platform-sidebar-secondary": {
        "backgroundColor": "--brand-secondary-sidebar-bg",
        "textColor": "--brand-secondary-sidebar-text",
    },
}

COMPONENT_SELECTORS: dict[str, tuple[str, ...]] = {
    "text-input": (
        'input:not([type="checkbox"]):not([type="radio"]):not([type="file"])'
        ':not([type="submit"]):not([type="button"]):not([type="reset"])',
        '[data-component="input"]',
    ),
    "select": ('[data-component="select"]', 'button[role="combobox"]', "select"),
    "multi-select": ('[data-component="multi-select"]',),
    "textarea": ("textarea", '[data-component="textarea"]'),
    "button": ("button:not([role])", '[data-component="button"]'),
    "card": ('[data-component="card"]',),
    "checkbox": ('[role="checkbox"]', 'input[type="checkbox"]'),
    "radio": ('[role="radio"]', 'input[type="radio"]'),
    "switch": ('[role="switch"]',),
    "top-menu-bar": ('[data-component="top-menu-bar"]',),
    "platform-sidebar-primary": ('[data-component="platform-sidebar-primary"]',),
    "platform-sidebar-secondary": ('[data-component="platform-sidebar-secondary"]',),
    "platform-sidebar-menu-normal": ('[data-component="platform-sidebar-menu-item"]',),
    "platform-sidebar-menu-hover": ('[data-component="platform-sidebar-menu-item"]:hover',),
    "platform-sidebar-menu-active": ('[data-component="platform-sidebar-menu-item"][data-active="true"]',),
    "vertical-tab-menu-normal": ('[data-component="vertical-tab"]',),
    "vertical-tab-menu-hover": ('[data-component="vertical-tab"]:hover',),
    "vertical-tab-menu-active": ('[data-component="vertical-tab"][data-state="active"]',),
}

# Renamed properties; everything else is kebab-cased
PROPERTY_NAMES: dict[str, str] = {"textColor": "color"}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def css_property(name: str) -> str:
    """
    CSS property name for a style record key.

    Example:
        >>> css_property("borderRadius"), css_property("textColor")
        ('border-radius', 'color')
    """
    if name in PROPERTY_NAMES:
        return PROPERTY_NAMES[name]
    return _CAMEL_BOUNDARY.sub("-", name).lower()


def google_font_url(font_family: str) -> str | None:
    """Stylesheet URL for a Google font; ``None`` for system stacks or an empty value."""
    family = font_family.strip()
    if not family or "system" in family:
        return None
    return GOOGLE_FONTS_URL.format(family=re.sub(r"\s+", "+", family))


class ThemeModeResolver:
    """
    Decides whether a rendering pass uses light or dark.

    Order: explicit toggle, then a ``dark`` class on the document root, then
    the OS color-scheme preference.
    """

    def __init__(
        self,
        explicit: ThemeMode | str | None = None,
        document_classes: Iterable[str] = (),
        prefers_dark: bool = False,
    ):
        self.explicit = ThemeMode(explicit) if explicit else None
        self.document_classes = set(document_classes)
        self.prefers_dark = prefers_dark

    def resolve(self) -> ThemeMode:
        if self.explicit is not None:
            return self.explicit
        if "dark" in self.document_classes:
            return ThemeMode.DARK
        return ThemeMode.DARK if self.prefers_dark else ThemeMode.LIGHT

    def toggle(self, mode: ThemeMode | str | None) -> None:
        """Set or clear (``None``) the explicit toggle."""
        self.explicit = ThemeMode(mode) if mode else None


def css_variables(config: BrandingConfig, mode: ThemeMode | str) -> dict[str, str]:
    """Custom properties for the document root in the given mode."""
    mode = ThemeMode(mode)
    palette = config.palette(mode)
    styling = config.global_styling
    variables: dict[str, str] = {}

    for attr, name in PALETTE_VARIABLES.items():
        value = getattr(palette, attr)
        if value:
            variables[name] = value.strip()
    if not palette.ui_background_color:
        variables["--brand-ui-bg"] = palette.top_menu_background_color

    default_text = BODY_TEXT_DARK if mode == ThemeMode.DARK else BODY_TEXT_LIGHT
    variables["--brand-body-text"] = palette.body_text_color or default_text

    for attr, name in GLOBAL_VARIABLES.items():
        value = getattr(styling, attr)
        if value:
            variables[name] = value

    variables["--brand-border-color"] = (
        styling.border_color.strip() or palette.ui_border_color.strip() or DEFAULT_BORDER_COLOR
    )
    if styling.font_family.strip():
        variables["--brand-font-family"] = styling.font_family.strip()
    variables["--brand-font-family-mono"] = (
        styling.font_family_mono.strip() or DEFAULT_FONT_FAMILY_MONO
    )
    variables["--brand-transition-duration"] = (
        styling.transition_duration or DEFAULT_TRANSITION_DURATION
    )
    variables["--brand-transition-timing"] = styling.transition_timing or DEFAULT_TRANSITION_TIMING

    overlay = config.drawer_overlay
    variables["--brand-drawer-overlay-color"] = overlay.color
    variables["--brand-drawer-overlay-opacity"] = f"{overlay.opacity / 100:g}"
    variables["--brand-drawer-overlay-blur"] = f"{overlay.blur:g}px"

    variables["--brand-login-bg"] = login_background_css(config)

    for component_id, overrides in SIDEBAR_VARIABLE_OVERRIDES.items():
        entry = config.component_styling.get(component_id)
        if entry is None:
            continue
        record = entry.for_mode(mode)
        for key, name in overrides.items():
            if record.get(key):
                variables[name] = record[key]

    return variables


def login_background_css(config: BrandingConfig) -> str:
    """CSS ``background`` value for the login page."""
    background = config.login_background
    if background.type == LoginBackgroundType.COLOR:
        return background.color
    if background.type == LoginBackgroundType.IMAGE:
        return f'url("{background.image}") center / cover no-repeat' if background.image else ""
    gradient = background.gradient
    return f"linear-gradient({gradient.angle:g}deg, {gradient.from_}, {gradient.to})"


def _declarations(record: StyleRecord) -> list[str]:
    return [
        f"{css_property(key)}: {value} !important;"
        for key, value in record.items()
        if value and str(value).strip()
    ]


def component_css(config: BrandingConfig, mode: ThemeMode | str) -> str:
    """
    Rules for every component with effective styles in the given mode.

    Components are resolved through the same resolver the editor uses, so
    input defaults are emitted even without stored overrides. Empty values
    are skipped.
    """
    mode = ThemeMode(mode)
    ids = list(COMPONENT_SELECTORS)
    ids += [key for key in config.component_styling if key not in COMPONENT_SELECTORS]

    blocks: list[str] = []
    for component_id in ids:
        record = resolve(config, component_id)[mode.value]
        declarations = _declarations(record)
        if not declarations:
            continue
        selectors = COMPONENT_SELECTORS.get(
            component_id, (f'[data-component="{component_id}"]',)
        )
        scoped = ",\n".join(f"{SCOPE} {selector}" for selector in selectors)
        body = "\n".join(f"  {line}" for line in declarations)
        blocks.append(f"{scoped} {{\n{body}\n}}")
    return "\n\n".join(blocks)


@dataclass
class ThemeStylesheet:
    """Everything a surface needs to apply a theme."""

    mode: ThemeMode
    variables: dict[str, str]
    component_rules: str
    font_url: str | None = None
    favicon_url: str | None = None
    title: str | None = None

    def root_rule(self) -> str:
        lines = "\n".join(f"  {name}: {value};" for name, value in self.variables.items())
        return f":root {{\n{lines}\n}}"

    def body_rule(self) -> str:
        lines = [f"  color: {self.variables['--brand-body-text']};"]
        if "--brand-font-family" in self.variables:
            lines.append(f"  font-family: {self.variables['--brand-font-family']};")
        return f"{SCOPE} {{\n" + "\n".join(lines) + "\n}"

    def to_css(self) -> str:
        parts = [self.root_rule(), self.body_rule()]
        if self.component_rules:
            parts.append(self.component_rules)
        return "\n\n".join(parts) + "\n"


def render_stylesheet(config: BrandingConfig, mode: ThemeMode | str) -> ThemeStylesheet:
    """Project a configuration onto a stylesheet for one mode."""
    mode = ThemeMode(mode)
    stylesheet = ThemeStylesheet(
        mode=mode,
        variables=css_variables(config, mode),
        component_rules=component_css(config, mode),
        font_url=google_font_url(config.global_styling.font_family),
        favicon_url=config.favicon_url or None,
        title=config.application_name or None,
    )
    logger.debug(
        f"Rendered {mode.value} stylesheet: {len(stylesheet.variables)} variables, "
        f"{len(config.component_styling)} component overrides"
    )
    return stylesheet


class ThemeSurface(Protocol):
    """Anything that can display a stylesheet."""

    def apply_stylesheet(self, stylesheet: ThemeStylesheet) -> None: ...


# Sub-trees that influence the rendered theme
APPLY_FIELDS: tuple[str, ...] = (
    "application_name",
    "favicon_url",
    "light_mode",
    "dark_mode",
    "login_background",
    "global_styling",
    "component_styling",
    "drawer_overlay",
)


@dataclass
class ApplyTracker:
    """
    Skips re-application when nothing relevant changed.

    Frozen sub-trees are compared by identity first and equality second, so
    an edit that shares untouched branches costs a handful of checks.
    """

    _last: tuple | None = field(default=None, repr=False)
    _last_mode: ThemeMode | None = None

    def needs_apply(self, config: BrandingConfig, mode: ThemeMode) -> bool:
        snapshot = tuple(getattr(config, name) for name in APPLY_FIELDS)
        if self._last is not None and mode == self._last_mode:
            unchanged = all(
                new is old or new == old for new, old in zip(snapshot, self._last)
            )
            if unchanged:
                return False
        self._last = snapshot
        self._last_mode = mode
        return True

    def reset(self) -> None:
        self._last = None
        self._last_mode = None
