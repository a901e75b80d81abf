from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from clients.motofix_client_sdk.models import Mechanic, MechanicCreate, MechanicUpdate

UGANDA_PHONE_REGEX = re.compile(r"^(\+256|0)[0-9]{9}$")
NAME_MIN, NAME_MAX = 2, 100
LOCATION_MIN, LOCATION_MAX = 2, 100


@dataclass
class FormResult:
    values: dict[str, Any]
    field_errors: dict[str, str]

    @property
    def is_valid(self) -> bool:
        return len(self.field_errors) == 0


def _normalize_required_text(value: str | None) -> str:
    return (value or "").strip()


def validate_password(password: str | None) -> FormResult:
    field_errors: dict[str, str] = {}
    if not password:
        field_errors["password"] = "Please enter a password"
    return FormResult(values={"password": password or ""}, field_errors=field_errors)


def validate_mechanic_form(
    name: str | None,
    phone: str | None,
    location: str | None,
    is_verified: bool = False,
) -> FormResult:
    normalized_name = _normalize_required_text(name)
    normalized_phone = _normalize_required_text(phone)
    normalized_location = _normalize_required_text(location)

    field_errors: dict[str, str] = {}
    if len(normalized_name) < NAME_MIN:
        field_errors["name"] = "Name must be at least 2 characters"
    elif len(normalized_name) > NAME_MAX:
        field_errors["name"] = "Name must be at most 100 characters"

    if not UGANDA_PHONE_REGEX.match(normalized_phone):
        field_errors["phone"] = "Valid Uganda phone required"

    if len(normalized_location) < LOCATION_MIN:
        field_errors["location"] = "Location required"
    elif len(normalized_location) > LOCATION_MAX:
        field_errors["location"] = "Location must be at most 100 characters"

    return FormResult(
        values={
            "name": normalized_name,
            "phone": normalized_phone,
            "location": normalized_location,
            "is_verified": bool(is_verified),
        },
        field_errors=field_errors,
    )


def build_mechanic_create(result: FormResult) -> MechanicCreate:
    return MechanicCreate(**result.values)


def build_mechanic_update(original: Mechanic, result: FormResult) -> MechanicUpdate:
    """Only fields that differ from the loaded mechanic are sent."""
    values = result.values
    changes: dict[str, Any] = {}
    if values["name"] != original.name:
        changes["name"] = values["name"]
    if values["phone"] != original.phone:
        changes["phone"] = values["phone"]
    if values["location"] != original.location:
        changes["location"] = values["location"]
    if values["is_verified"] != original.verified:
        changes["is_verified"] = values["is_verified"]
    return MechanicUpdate(**changes)


def map_api_validation_errors(error_details: Any) -> dict[str, str]:
    if not error_details:
        return {}

    mapped: dict[str, str] = {}
    if isinstance(error_details, dict):
        for key, value in error_details.items():
            if isinstance(value, str):
                mapped[str(key)] = value
            elif isinstance(value, list) and value and isinstance(value[0], str):
                mapped[str(key)] = value[0]
    elif isinstance(error_details, list):
        for item in error_details:
            if not isinstance(item, dict):
                continue
            field = item.get("field") or item.get("loc")
            message = item.get("message") or item.get("msg")
            if isinstance(field, (list, tuple)):
                field = field[-1] if field else None
            if field and message:
                mapped[str(field)] = str(message)
    return mapped
