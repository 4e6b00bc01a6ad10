"""
Admin Core Models

Pydantic contracts (API request/response):
    from admin_core.models import BrandingConfig, SystemSettings
    from admin_core.models.contracts.branding import BrandingConfig  # Granular access

Enums:
    from admin_core.models import ThemeMode
    from admin_core.models.enums import ThemeMode
"""

from admin_core.models.enums import (
    AttributeDataType,
    ComponentTab,
    LoginBackgroundType,
    LogoType,
    NotificationDeliveryStatus,
    NotificationType,
    ResourceState,
    SessionState,
    SourceType,
    ThemeMode,
)
from admin_core.models.contracts.branding import (
    DEFAULT_BRANDING_CONFIG,
    STYLE_PROPERTIES,
    BrandingConfig,
    ColorPalette,
    ComponentStyle,
    DrawerOverlay,
    GlobalStyling,
    GradientSpec,
    LoginBackground,
    StyleRecord,
    default_branding_config,
)
from admin_core.models.contracts.settings import (
    NotificationSettings,
    SystemSettings,
)
from admin_core.models.contracts.notifications import (
    NotificationHistoryEntry,
    NotificationTemplate,
    NotificationTemplateCreate,
    NotificationTemplateUpdate,
    extract_template_variables,
)
from admin_core.models.contracts.users import (
    SpaceAssociation,
    UserCreate,
    UserPage,
    UserPublic,
    UserUpdate,
)
from admin_core.models.contracts.spaces import (
    SidebarMenuItem,
    Space,
    SpaceCreate,
    SpaceMember,
    SpaceUpdate,
)
from admin_core.models.contracts.data_models import (
    Attribute,
    AttributeCreate,
    AttributeOption,
    AutoIncrementPolicy,
    DataModel,
    DataModelCreate,
    DataModelUpdate,
)
from admin_core.models.contracts.roles import (
    AuditLogEntry,
    AuditLogPage,
    ConnectionTestResult,
    Permission,
    Role,
    RoleCreate,
)

__all__ = [
    # Enums
    "AttributeDataType",
    "ComponentTab",
    "LoginBackgroundType",
    "LogoType",
    "NotificationDeliveryStatus",
    "NotificationType",
    "ResourceState",
    "SessionState",
    "SourceType",
    "ThemeMode",
    # Branding
    "DEFAULT_BRANDING_CONFIG",
    "STYLE_PROPERTIES",
    "BrandingConfig",
    "ColorPalette",
    "ComponentStyle",
    "DrawerOverlay",
    "GlobalStyling",
    "GradientSpec",
    "LoginBackground",
    "StyleRecord",
    "default_branding_config",
    # Settings
    "NotificationSettings",
    "SystemSettings",
    # Notifications
    "NotificationHistoryEntry",
    "NotificationTemplate",
    "NotificationTemplateCreate",
    "NotificationTemplateUpdate",
    "extract_template_variables",
    # Users
    "SpaceAssociation",
    "UserCreate",
    "UserPage",
    "UserPublic",
    "UserUpdate",
    # Spaces
    "SidebarMenuItem",
    "Space",
    "SpaceCreate",
    "SpaceMember",
    "SpaceUpdate",
    # Data models
    "Attribute",
    "AttributeCreate",
    "AttributeOption",
    "AutoIncrementPolicy",
    "DataModel",
    "DataModelCreate",
    "DataModelUpdate",
    # Roles / audit / connections
    "AuditLogEntry",
    "AuditLogPage",
    "ConnectionTestResult",
    "Permission",
    "Role",
    "RoleCreate",
]
