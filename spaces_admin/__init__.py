"""
Spaces Admin SDK

Async Python access to the platform administration API.

All SDK methods are async and must be awaited.

Usage:
    from spaces_admin import branding, settings, notifications, users
    from spaces_admin import spaces, data_models, roles, uploads, audit_logs

Example:
    # Edit branding with a session (load, edit, save, apply)
    from admin_core.services.branding_session import BrandingSession
    session = BrandingSession(branding, notifier=log)
    await session.load()
    session.update_styling("button", "light", "backgroundColor", "#0a84ff")
    await session.save()

    # Reorder data models (one batch request)
    models = await data_models.list()
    models = await data_models.move(models, 3, 0)

    # Upload a logo and store its URL in the settings
    url = await uploads.logo("assets/logo.png")
    current = await settings.get()
    await settings.save(current.model_copy(update={"logo_url": url}))
"""

from . import log
from .audit_logs import audit_logs
from .branding import branding
from .client import AdminClient, get_client, set_client
from .connections import connections
from .data_models import data_models
from .notifications import notifications
from .roles import roles
from .settings import settings
from .spaces import spaces
from .uploads import uploads
from .users import users

__all__ = [
    "AdminClient",
    "audit_logs",
    "branding",
    "connections",
    "data_models",
    "get_client",
    "log",
    "notifications",
    "roles",
    "set_client",
    "settings",
    "spaces",
    "uploads",
    "users",
]
