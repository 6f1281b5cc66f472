"""
Block settings read from the global config and checked against the base.

When ``isEnforced`` is off, any selected cell may be previewed and nothing
else needs configuring. When it is on, a preview table and a field of a type
that can hold URLs must both be picked.
"""

from dataclasses import dataclass
from typing import Optional

from .models import Base, Field, Table
from .storage import GlobalConfig


class ConfigKeys:
    IS_ENFORCED = "isEnforced"
    URL_TABLE_ID = "urlTableId"
    URL_FIELD_ID = "urlFieldId"


# Field types whose string value can hold a URL
ALLOWED_URL_FIELD_TYPES = frozenset({
    "singleLineText",
    "multilineText",
    "richText",
    "url",
    "formula",
    "singleSelect",
    "lookup",
    "rollup",
})


@dataclass(frozen=True)
class Settings:
    is_enforced: bool
    url_table: Optional[Table]
    url_field: Optional[Field]


@dataclass(frozen=True)
class SettingsValidationResult:
    is_valid: bool
    settings: Settings
    message: Optional[str] = None


def get_settings(global_config: GlobalConfig, base: Base) -> Settings:
    """
    Read values from the global config and convert ids to base objects.

    Tables or fields that no longer exist come back as None.
    """
    is_enforced = bool(global_config.get(ConfigKeys.IS_ENFORCED))
    url_table = base.get_table_by_id_if_exists(global_config.get(ConfigKeys.URL_TABLE_ID))
    url_field = (
        url_table.get_field_by_id_if_exists(global_config.get(ConfigKeys.URL_FIELD_ID))
        if url_table
        else None
    )
    return Settings(is_enforced=is_enforced, url_table=url_table, url_field=url_field)


def get_settings_validation_result(settings: Settings) -> SettingsValidationResult:
    if not settings.is_enforced:
        return SettingsValidationResult(is_valid=True, settings=settings)
    if settings.url_table is None:
        return SettingsValidationResult(
            is_valid=False, settings=settings, message="Pick a table for previews"
        )
    if settings.url_field is None:
        return SettingsValidationResult(
            is_valid=False, settings=settings, message="Pick a field for previews"
        )
    if settings.url_field.type not in ALLOWED_URL_FIELD_TYPES:
        return SettingsValidationResult(
            is_valid=False,
            settings=settings,
            message=f"The “{settings.url_field.name}” field can't contain URLs",
        )
    return SettingsValidationResult(is_valid=True, settings=settings)


def use_settings(global_config: GlobalConfig, base: Base) -> SettingsValidationResult:
    """Read and validate settings in one step."""
    return get_settings_validation_result(get_settings(global_config, base))
