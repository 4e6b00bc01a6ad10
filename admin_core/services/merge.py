"""
Merge-on-load helpers.

The platform may return partial or older documents. Loading always starts
from the local defaults (or the last known state) and overlays whatever the
remote side actually sent, so new fields get their defaults and unknown
values never wipe local state.
"""

import logging
import types
import typing
from typing import Any, Mapping

from pydantic import ValidationError

from admin_core.core.exceptions import InvalidResponseError
from admin_core.models.contracts.branding import BrandingConfig, default_branding_config
from admin_core.models.contracts.settings import SystemSettings

logger = logging.getLogger(__name__)

# Legacy settings key superseded by uiProtectionEnabled
LEGACY_UI_PROTECTION_KEY = "disableRightClick"


def merge_defaults(defaults: Mapping[str, Any], remote: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Deep-merge ``remote`` onto ``defaults``.

    - keys only in ``defaults`` keep the default value
    - remote keys whose value is ``None`` are ignored
    - when both sides hold a mapping, merge recursively
    - any other remote value replaces the default

    Neither input is mutated; nested mappings in the result are new dicts.

    Example:
        >>> merge_defaults({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}, "b": None})
        {'a': {'x': 1, 'y': 3}}
    """
    merged: dict[str, Any] = {}
    for key, value in defaults.items():
        merged[key] = dict(value) if isinstance(value, Mapping) else value

    for key, value in (remote or {}).items():
        if value is None:
            continue
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_defaults(current, value)
        else:
            merged[key] = value
    return merged


def _require_mapping(remote: Any, what: str) -> None:
    if remote is not None and not isinstance(remote, Mapping):
        raise InvalidResponseError(f"Unexpected {what} document: {type(remote).__name__}", payload=remote)


def merge_branding(remote: Mapping[str, Any] | None) -> BrandingConfig:
    """
    Overlay a remote branding document onto the compiled-in defaults.

    Palettes merge per token, ``componentStyling`` merges per id and then
    per mode, so a remote record that carries a single property keeps the
    rest of the defaults.

    Raises:
        InvalidResponseError: if ``remote`` is not a mapping
        pydantic.ValidationError: if the merged document is not a valid
            branding configuration
    """
    _require_mapping(remote, "branding")
    defaults = default_branding_config().to_payload()
    return BrandingConfig.model_validate(merge_defaults(defaults, remote))


def coerce_bool(value: Any, previous: bool) -> bool:
    """
    Interpret a remote boolean setting.

    ``"true"``/``True`` and ``"false"``/``False`` are recognized; anything
    else (missing, ``"yes"``, ``1``) keeps ``previous``.
    """
    if value is True or value == "true":
        return True
    if value is False or value == "false":
        return False
    return previous


def _coerce_int(value: Any, previous: int) -> int:
    if isinstance(value, bool):
        return previous
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return previous


def _coerce_list(value: Any, previous: list[str]) -> list[str]:
    if isinstance(value, list):
        return [str(item) for item in value]
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return previous


def _field_kind(annotation: Any) -> type | None:
    origin = typing.get_origin(annotation)
    if origin in (typing.Union, types.UnionType):
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        return _field_kind(args[0]) if args else None
    if origin is list:
        return list
    if annotation in (bool, int, str):
        return annotation
    return None


def merge_settings(previous: SystemSettings, remote: Mapping[str, Any] | None) -> SystemSettings:
    """
    Field-by-field merge of a ``GET /api/settings`` payload.

    Each field takes the remote value coerced to the field's type. When the
    remote value is missing or unparseable, the previous value is kept.

    Example:
        >>> merged = merge_settings(SystemSettings(), {"sessionTimeout": "12", "smtpSecure": "true"})
        >>> merged.session_timeout, merged.smtp_secure
        (12, True)
    """
    _require_mapping(remote, "settings")
    remote = dict(remote or {})
    if "uiProtectionEnabled" not in remote and LEGACY_UI_PROTECTION_KEY in remote:
        remote["uiProtectionEnabled"] = remote[LEGACY_UI_PROTECTION_KEY]

    values: dict[str, Any] = {}
    for name, field in SystemSettings.model_fields.items():
        old = getattr(previous, name)
        key = field.alias or name
        if key not in remote or remote[key] is None:
            values[name] = old
            continue

        raw = remote[key]
        kind = _field_kind(field.annotation)
        if kind is bool:
            values[name] = coerce_bool(raw, old)
        elif kind is int:
            values[name] = _coerce_int(raw, old)
        elif kind is list:
            values[name] = _coerce_list(raw, old)
        elif kind is str:
            values[name] = raw if isinstance(raw, str) else str(raw)
        else:
            values[name] = raw

    try:
        return SystemSettings.model_validate(values)
    except ValidationError as e:
        logger.warning(f"Remote settings rejected, keeping previous values: {e}")
        return previous
