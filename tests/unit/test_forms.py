from __future__ import annotations

import pytest

from clients.motofix_client_sdk.models import Mechanic

from motofix_control.app.ui.forms import (
    build_mechanic_update,
    map_api_validation_errors,
    validate_mechanic_form,
    validate_password,
)


def _mechanic() -> Mechanic:
    return Mechanic(
        id="m1",
        name="John Okello",
        phone="+256701234567",
        location="Kampala Central",
        is_verified=False,
    )


def test_valid_uganda_phone_passes() -> None:
    result = validate_mechanic_form("John Okello", "+256701234567", "Kampala")

    assert result.is_valid
    assert result.values["phone"] == "+256701234567"


@pytest.mark.parametrize("phone", ["0701234567", "  +256701234567  "])
def test_local_and_padded_phone_pass(phone: str) -> None:
    assert validate_mechanic_form("John", phone, "Kampala").is_valid


@pytest.mark.parametrize("phone", ["12345", "+25670123456", "+2567012345678", "07012345a7", ""])
def test_invalid_phone_reports_uganda_format(phone: str) -> None:
    result = validate_mechanic_form("John Okello", phone, "Kampala")

    assert result.field_errors == {"phone": "Valid Uganda phone required"}


def test_name_and_location_bounds_after_trim() -> None:
    result = validate_mechanic_form(" J ", "0701234567", "x" * 101)

    assert set(result.field_errors) == {"name", "location"}
    assert validate_mechanic_form("Jo", "0701234567", "x" * 100).is_valid


def test_update_contains_only_changed_fields() -> None:
    result = validate_mechanic_form("John Okello", "+256701234567", "Ntinda", True)

    update = build_mechanic_update(_mechanic(), result)

    assert update.changes() == {"location": "Ntinda", "is_verified": True}


def test_update_without_changes_is_empty() -> None:
    result = validate_mechanic_form("John Okello", "+256701234567", "Kampala Central", False)

    assert build_mechanic_update(_mechanic(), result).changes() == {}


def test_empty_password_is_rejected() -> None:
    assert validate_password("").field_errors == {"password": "Please enter a password"}
    assert validate_password("secret").is_valid


def test_map_api_validation_errors_from_fastapi_detail() -> None:
    detail = [{"loc": ["body", "phone"], "msg": "Phone already registered"}]

    assert map_api_validation_errors(detail) == {"phone": "Phone already registered"}
    assert map_api_validation_errors({"name": ["too short"]}) == {"name": "too short"}
    assert map_api_validation_errors(None) == {}
