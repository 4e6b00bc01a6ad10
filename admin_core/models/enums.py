"""
Enumeration types used across the admin toolkit.

Values match the strings exchanged with the platform API.
"""

from enum import Enum


class ThemeMode(str, Enum):
    """Theme mode a style record applies to"""
    LIGHT = "light"
    DARK = "dark"


class ComponentTab(str, Enum):
    """Branding editor tabs"""
    ELEMENTS = "elements"  # Bespoke editors (logo, sidebar, typography...)
    COMPONENTS = "components"  # Generic styling editor


class LogoType(str, Enum):
    """Application logo representation"""
    IMAGE = "image"
    ICON = "icon"


class LoginBackgroundType(str, Enum):
    """Login page background variants"""
    COLOR = "color"
    GRADIENT = "gradient"
    IMAGE = "image"


class NotificationType(str, Enum):
    """Notification delivery channels"""
    EMAIL = "email"
    PUSH = "push"
    SMS = "sms"
    WEBHOOK = "webhook"


class NotificationDeliveryStatus(str, Enum):
    """Delivery status of a sent notification"""
    SENT = "sent"
    FAILED = "failed"
    PENDING = "pending"


class AttributeDataType(str, Enum):
    """Data model attribute types"""
    TEXT = "TEXT"
    EMAIL = "EMAIL"
    NUMBER = "NUMBER"
    DATE = "DATE"
    BOOLEAN = "BOOLEAN"
    SELECT = "SELECT"
    MULTI_SELECT = "MULTI_SELECT"
    TEXTAREA = "TEXTAREA"
    PHONE = "PHONE"
    URL = "URL"
    JSON = "JSON"
    DATA_ENTITY = "DATA_ENTITY"

    @property
    def has_options(self) -> bool:
        return self in (AttributeDataType.SELECT, AttributeDataType.MULTI_SELECT)


class SourceType(str, Enum):
    """Where a data model's records live"""
    INTERNAL = "INTERNAL"
    EXTERNAL = "EXTERNAL"


class SessionState(str, Enum):
    """Lifecycle of an editor session bound to a remote settings object"""
    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"
    EDITING = "editing"
    SAVING = "saving"


class ResourceState(str, Enum):
    """Client-side cache entry state"""
    ABSENT = "absent"
    LOADING = "loading"
    PRESENT = "present"
