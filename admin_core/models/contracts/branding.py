"""
Branding contract models.

The branding configuration is a single aggregate per platform instance:
application identity, light/dark color palettes, login background, global
styling tokens and per-component style overrides.

Wire format is camelCase (as stored by the platform); attributes are
snake_case with aliases. All models are frozen, edits go through
``model_copy`` so untouched sub-trees are shared between versions.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from admin_core.models.enums import LoginBackgroundType, LogoType, ThemeMode


def _style_value(value: Any) -> Any:
    """Style values are stored as strings; numbers are accepted and stringified."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    return value


StyleValue = Annotated[str, BeforeValidator(_style_value)]

# Open set of CSS-like properties. Absence means inherit/unset, not zero.
StyleRecord = dict[str, StyleValue]

# Known style properties exposed by the generic component editor
STYLE_PROPERTIES: tuple[str, ...] = (
    "backgroundColor",
    "textColor",
    "borderColor",
    "borderRadius",
    "borderWidth",
    "borderStyle",
    "padding",
    "margin",
    "width",
    "height",
    "minWidth",
    "maxWidth",
    "minHeight",
    "maxHeight",
    "fontFamily",
    "fontSize",
    "fontWeight",
    "fontStyle",
    "lineHeight",
    "letterSpacing",
    "textAlign",
    "textDecoration",
    "textTransform",
    "textOverflow",
    "whiteSpace",
    "wordBreak",
    "opacity",
    "boxShadow",
    "backdropFilter",
    "filter",
    "transform",
    "transition",
    "cursor",
    "outline",
    "outlineColor",
    "outlineWidth",
    "overflow",
    "overflowX",
    "overflowY",
    "pointerEvents",
    "userSelect",
    "visibility",
    "zIndex",
    "gap",
)


class _BrandingModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


# ==================== PALETTES ====================


class ColorPalette(_BrandingModel):
    """
    Named color tokens for one theme mode.

    The same class backs both ``lightMode`` and ``darkMode`` so the two
    records always share an identical field set.
    """

    primary_color: str = Field(default="#1e40af", alias="primaryColor")
    secondary_color: str = Field(default="#64748b", alias="secondaryColor")
    warning_color: str = Field(default="#f59e0b", alias="warningColor")
    danger_color: str = Field(default="#ef4444", alias="dangerColor")
    ui_background_color: str = Field(default="#ffffff", alias="uiBackgroundColor")
    ui_border_color: str = Field(default="rgba(0, 0, 0, 0.1)", alias="uiBorderColor")
    top_menu_background_color: str = Field(default="#ffffff", alias="topMenuBackgroundColor")
    top_menu_text_color: str = Field(default="#1D1D1F", alias="topMenuTextColor")
    platform_sidebar_background_color: str = Field(
        default="#f5f5f7", alias="platformSidebarBackgroundColor"
    )
    platform_sidebar_text_color: str = Field(default="#1D1D1F", alias="platformSidebarTextColor")
    secondary_sidebar_background_color: str = Field(
        default="#fafafa", alias="secondarySidebarBackgroundColor"
    )
    secondary_sidebar_text_color: str = Field(default="#1D1D1F", alias="secondarySidebarTextColor")
    body_background_color: str = Field(default="#ffffff", alias="bodyBackgroundColor")
    body_text_color: str = Field(default="", alias="bodyTextColor")


def _dark_palette() -> ColorPalette:
    return ColorPalette(
        primary_color="#3b82f6",
        secondary_color="#94a3b8",
        warning_color="#fbbf24",
        danger_color="#f87171",
        ui_background_color="#1c1c1e",
        ui_border_color="rgba(255, 255, 255, 0.1)",
        top_menu_background_color="#1c1c1e",
        top_menu_text_color="#F5F5F7",
        platform_sidebar_background_color="#111113",
        platform_sidebar_text_color="#F5F5F7",
        secondary_sidebar_background_color="#18181b",
        secondary_sidebar_text_color="#F5F5F7",
        body_background_color="#000000",
        body_text_color="",
    )


# ==================== LOGIN BACKGROUND ====================


class GradientSpec(_BrandingModel):
    """Linear gradient endpoints and angle (degrees)."""

    from_: str = Field(default="#1e40af", alias="from")
    to: str = Field(default="#3b82f6", alias="to")
    angle: float = Field(default=135)


class LoginBackground(_BrandingModel):
    """
    Login page background.

    Only the member selected by ``type`` is meaningful. The others are kept
    as stored when the type changes.
    """

    type: LoginBackgroundType = LoginBackgroundType.GRADIENT
    color: str = "#1e40af"
    gradient: GradientSpec = Field(default_factory=GradientSpec)
    image: str = ""

    def active_value(self) -> str | GradientSpec:
        """Return the member selected by ``type``."""
        if self.type == LoginBackgroundType.COLOR:
            return self.color
        if self.type == LoginBackgroundType.IMAGE:
            return self.image
        return self.gradient


# ==================== GLOBAL STYLING ====================


class GlobalStyling(_BrandingModel):
    """CSS-like tokens applied globally, outside embedded space modules."""

    border_radius: str = Field(default="8px", alias="borderRadius")
    border_color: str = Field(default="rgba(0, 0, 0, 0.1)", alias="borderColor")
    border_width: str = Field(default="1px", alias="borderWidth")
    button_border_radius: str = Field(default="8px", alias="buttonBorderRadius")
    button_border_width: str = Field(default="0px", alias="buttonBorderWidth")
    input_border_radius: str = Field(default="8px", alias="inputBorderRadius")
    input_border_width: str = Field(default="1px", alias="inputBorderWidth")
    select_border_radius: str = Field(default="8px", alias="selectBorderRadius")
    select_border_width: str = Field(default="1px", alias="selectBorderWidth")
    textarea_border_radius: str = Field(default="8px", alias="textareaBorderRadius")
    textarea_border_width: str = Field(default="1px", alias="textareaBorderWidth")
    shadow_xs: str = Field(default="0 1px 2px 0 rgba(0, 0, 0, 0.03)", alias="shadowXs")
    shadow_sm: str = Field(default="0 1px 2px 0 rgba(0, 0, 0, 0.05)", alias="shadowSm")
    shadow_md: str = Field(default="0 4px 6px -1px rgba(0, 0, 0, 0.1)", alias="shadowMd")
    shadow_lg: str = Field(default="0 10px 15px -3px rgba(0, 0, 0, 0.1)", alias="shadowLg")
    shadow_xl: str = Field(default="0 20px 25px -5px rgba(0, 0, 0, 0.1)", alias="shadowXl")
    transition_duration: str = Field(default="200ms", alias="transitionDuration")
    transition_timing: str = Field(
        default="cubic-bezier(0.4, 0, 0.2, 1)", alias="transitionTiming"
    )
    font_family: str = Field(default="", alias="fontFamily")
    font_family_mono: str = Field(default="", alias="fontFamilyMono")


class DrawerOverlay(_BrandingModel):
    """Backdrop drawn behind open drawers."""

    color: str = "#000000"
    opacity: float = 30
    blur: float = 20


# ==================== COMPONENT STYLING ====================


class ComponentStyle(_BrandingModel):
    """Per-mode style overrides for one component id."""

    light: StyleRecord = Field(default_factory=dict)
    dark: StyleRecord = Field(default_factory=dict)

    def for_mode(self, mode: ThemeMode | str) -> StyleRecord:
        return self.dark if ThemeMode(mode) == ThemeMode.DARK else self.light


# ==================== AGGREGATE ====================


class BrandingConfig(_BrandingModel):
    """
    Complete branding configuration (aggregate root).

    Unknown keys sent by the platform are preserved so a wholesale save
    never drops them.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    application_name: str = Field(default="Spaces", alias="applicationName")
    application_logo: str | None = Field(
        default=None,
        alias="applicationLogo",
        description="Inline image as a data URI (image logo type)",
    )
    application_logo_type: LogoType = Field(default=LogoType.IMAGE, alias="applicationLogoType")
    application_logo_icon: str = Field(default="", alias="applicationLogoIcon")
    application_logo_icon_color: str = Field(default="#ffffff", alias="applicationLogoIconColor")
    application_logo_background_color: str = Field(
        default="#1e40af", alias="applicationLogoBackgroundColor"
    )
    favicon_url: str = Field(default="", alias="faviconUrl")
    light_mode: ColorPalette = Field(default_factory=ColorPalette, alias="lightMode")
    dark_mode: ColorPalette = Field(default_factory=_dark_palette, alias="darkMode")
    login_background: LoginBackground = Field(
        default_factory=LoginBackground, alias="loginBackground"
    )
    global_styling: GlobalStyling = Field(default_factory=GlobalStyling, alias="globalStyling")
    component_styling: dict[str, ComponentStyle] = Field(
        default_factory=dict, alias="componentStyling"
    )
    drawer_overlay: DrawerOverlay = Field(default_factory=DrawerOverlay, alias="drawerOverlay")
    google_fonts_api_key: str = Field(default="", alias="googleFontsApiKey")

    def palette(self, mode: ThemeMode | str) -> ColorPalette:
        """Return the color palette for a theme mode."""
        return self.dark_mode if ThemeMode(mode) == ThemeMode.DARK else self.light_mode

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON document stored by the platform."""
        return self.model_dump(mode="json", by_alias=True, warnings=False)


DEFAULT_BRANDING_CONFIG = BrandingConfig()


def default_branding_config() -> BrandingConfig:
    """Return the compiled-in branding defaults."""
    return DEFAULT_BRANDING_CONFIG
