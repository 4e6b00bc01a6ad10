"""
System and notification settings contract models.

``GET /api/settings`` returns a flat key/value map where booleans and
numbers may arrive as strings; see ``admin_core.services.merge`` for how
that payload is reconciled with the local state.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SystemSettings(BaseModel):
    """Platform-wide settings edited on the System Settings screen."""

    model_config = ConfigDict(populate_by_name=True)

    # General
    site_name: str = Field(default="", alias="siteName")
    site_description: str = Field(default="", alias="siteDescription")
    site_url: str = Field(default="", alias="siteUrl")
    logo_url: str = Field(default="", alias="logoUrl")
    favicon_url: str = Field(default="", alias="faviconUrl")
    support_email: str = Field(default="", alias="supportEmail")

    # Organization
    org_name: str = Field(default="", alias="orgName")
    org_description: str = Field(default="", alias="orgDescription")
    org_address: str = Field(default="", alias="orgAddress")
    org_phone: str = Field(default="", alias="orgPhone")
    org_email: str = Field(default="", alias="orgEmail")
    org_website: str = Field(default="", alias="orgWebsite")

    # Database
    db_host: str = Field(default="", alias="dbHost")
    db_port: int = Field(default=5432, alias="dbPort")
    db_name: str = Field(default="", alias="dbName")
    db_user: str = Field(default="", alias="dbUser")
    db_password: str = Field(default="", alias="dbPassword")

    # Email
    smtp_host: str = Field(default="", alias="smtpHost")
    smtp_port: int = Field(default=587, alias="smtpPort")
    smtp_user: str = Field(default="", alias="smtpUser")
    smtp_password: str = Field(default="", alias="smtpPassword")
    smtp_secure: bool = Field(default=False, alias="smtpSecure")

    # Security
    session_timeout: int = Field(default=24, alias="sessionTimeout")
    max_login_attempts: int = Field(default=5, alias="maxLoginAttempts")
    password_min_length: int = Field(default=8, alias="passwordMinLength")
    require_two_factor: bool = Field(default=False, alias="requireTwoFactor")
    enable_login_alert: bool = Field(default=False, alias="enableLoginAlert")

    # UI protection
    ui_protection_enabled: bool = Field(default=False, alias="uiProtectionEnabled")

    # Features
    enable_user_registration: bool = Field(default=True, alias="enableUserRegistration")
    enable_guest_access: bool = Field(default=False, alias="enableGuestAccess")
    enable_notifications: bool = Field(default=True, alias="enableNotifications")
    enable_analytics: bool = Field(default=False, alias="enableAnalytics")
    require_admin_approval: bool = Field(default=False, alias="requireAdminApproval")
    require_email_verification: bool = Field(default=True, alias="requireEmailVerification")
    enable_audit_trail: bool = Field(default=True, alias="enableAuditTrail")
    delete_policy_days: int = Field(default=30, alias="deletePolicyDays")

    # Storage
    max_file_size: int = Field(default=10 * 1024 * 1024, alias="maxFileSize")
    allowed_file_types: list[str] = Field(
        default_factory=lambda: ["jpg", "jpeg", "png", "gif", "pdf", "doc", "docx"],
        alias="allowedFileTypes",
    )
    storage_provider: str = Field(default="local", alias="storageProvider")

    def to_payload(self) -> dict[str, Any]:
        """
        Build the ``PUT /api/settings`` body.

        The platform stores settings as strings; ``sessionTimeout`` is sent
        as one explicitly, everything else is left to JSON encoding.
        """
        values = self.model_dump(mode="json", by_alias=True)
        values["sessionTimeout"] = str(self.session_timeout)
        return {"settings": values}


# ==================== NOTIFICATION SETTINGS ====================


class SmtpSettings(BaseModel):
    """Outgoing mail server for email notifications."""

    host: str = ""
    port: int = 587
    username: str = ""
    password: str = ""


class EmailChannelSettings(BaseModel):
    enabled: bool = True
    smtp: SmtpSettings = Field(default_factory=SmtpSettings)


class VapidKeys(BaseModel):
    public: str = ""
    private: str = ""


class PushChannelSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = False
    vapid_keys: VapidKeys = Field(default_factory=VapidKeys, alias="vapidKeys")


class SmsChannelSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = False
    provider: str = ""
    api_key: str = Field(default="", alias="apiKey")
    from_number: str = Field(default="", alias="fromNumber")


class WebhookChannelSettings(BaseModel):
    enabled: bool = False
    url: str = ""
    secret: str = ""


class NotificationSettings(BaseModel):
    """Delivery channel configuration, loaded and saved wholesale."""

    email: EmailChannelSettings = Field(default_factory=EmailChannelSettings)
    push: PushChannelSettings = Field(default_factory=PushChannelSettings)
    sms: SmsChannelSettings = Field(default_factory=SmsChannelSettings)
    webhook: WebhookChannelSettings = Field(default_factory=WebhookChannelSettings)
