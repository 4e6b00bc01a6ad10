"""
Icon registry.

Menu items, data models and the application logo reference icons by name.
Names resolve through an explicit enum-to-renderer map; unknown names fall
back to ``AppIcon.FILE`` instead of failing.
"""

import html
import logging
from enum import Enum
from typing import Callable

from admin_core.models.contracts.branding import BrandingConfig
from admin_core.models.enums import LogoType

logger = logging.getLogger(__name__)

IconRenderer = Callable[[str, str | None], str]

# Stored names may carry the icon set prefix
ICON_PREFIX = "lucide-"


class AppIcon(str, Enum):
    """Icons selectable in the admin UI"""
    FILE = "File"
    FOLDER = "Folder"
    HOME = "Home"
    LAYOUT_DASHBOARD = "LayoutDashboard"
    DATABASE = "Database"
    TABLE = "Table"
    USERS = "Users"
    USER = "User"
    SETTINGS = "Settings"
    BELL = "Bell"
    MAIL = "Mail"
    SHIELD = "Shield"
    KEY = "Key"
    PALETTE = "Palette"
    BAR_CHART = "BarChart"
    CALENDAR = "Calendar"
    BUILDING = "Building"
    BRIEFCASE = "Briefcase"
    BOX = "Box"
    LINK = "Link"
    GLOBE = "Globe"
    STAR = "Star"
    TAG = "Tag"
    ZAP = "Zap"


def _lucide_renderer(name: str) -> IconRenderer:
    slug = "".join(f"-{ch.lower()}" if ch.isupper() else ch for ch in name).lstrip("-")

    def render(class_name: str = "", color: str | None = None) -> str:
        style = f' style="color: {html.escape(color)}"' if color else ""
        classes = html.escape(f"icon icon-{slug} {class_name}".strip())
        return f'<i data-lucide="{slug}" class="{classes}"{style} aria-hidden="true"></i>'

    return render


ICON_RENDERERS: dict[AppIcon, IconRenderer] = {icon: _lucide_renderer(icon.value) for icon in AppIcon}

FALLBACK_ICON = AppIcon.FILE


def resolve_icon(name: str | None) -> AppIcon:
    """
    Map a stored icon name to a registered icon.

    Accepts ``"Database"`` and ``"lucide-Database"``; anything unknown (or
    empty) resolves to ``FALLBACK_ICON``.
    """
    if not name:
        return FALLBACK_ICON
    if name.startswith(ICON_PREFIX):
        name = name[len(ICON_PREFIX):]
    try:
        return AppIcon(name)
    except ValueError:
        logger.debug(f"Unknown icon {name!r}, using {FALLBACK_ICON.value}")
        return FALLBACK_ICON


def render_icon(name: str | None, class_name: str = "", color: str | None = None) -> str:
    return ICON_RENDERERS[resolve_icon(name)](class_name, color)


def render_logo(config: BrandingConfig, class_name: str = "app-logo") -> str:
    """
    Markup for the application logo.

    Image logos render the stored data URI; icon logos render the selected
    icon on the logo background color. Returns an empty string when no
    logo is configured.
    """
    if config.application_logo_type == LogoType.ICON and config.application_logo_icon:
        icon = render_icon(
            config.application_logo_icon,
            color=config.application_logo_icon_color or "#000000",
        )
        background = html.escape(config.application_logo_background_color)
        return (
            f'<span class="{html.escape(class_name)}" '
            f'style="background-color: {background}">{icon}</span>'
        )
    if config.application_logo:
        alt = html.escape(config.application_name)
        return (
            f'<img class="{html.escape(class_name)}" '
            f'src="{html.escape(config.application_logo)}" alt="{alt}">'
        )
    return ""
