from __future__ import annotations

from clients.motofix_client_sdk.exceptions import ApiError, ValidationError
from clients.motofix_client_sdk.models import Mechanic

from motofix_control.app.infrastructure.logging.logger import get_logger, log_action
from motofix_control.app.navigation import MECHANICS_MANAGEMENT_ROUTE
from motofix_control.app.ui.components.error_feedback import report_api_error
from motofix_control.app.ui.forms import (
    FormResult,
    build_mechanic_create,
    build_mechanic_update,
    map_api_validation_errors,
    validate_mechanic_form,
)
from motofix_control.app.ui.views.mechanics_view import MechanicsView

logger = get_logger("motofix_control.mechanics_management")

# Listings that show mechanics; every successful mutation drops their cached pages.
MECHANIC_LISTING_MODULES = ("mechanics", "mechanics-management")


class MechanicsManagementView(MechanicsView):
    module = "mechanics-management"
    route = MECHANICS_MANAGEMENT_ROUTE
    title = "Mechanics Management"

    def find_mechanic(self, mechanic_id: str) -> Mechanic | None:
        return next((item for item in self.controller.snapshot.rows if item.id == mechanic_id), None)

    def create(self, name: str, phone: str, location: str, is_verified: bool = False) -> FormResult:
        result = validate_mechanic_form(name, phone, location, is_verified)
        if not result.is_valid:
            return result
        try:
            self.client.create_mechanic(build_mechanic_create(result))
        except ApiError as error:
            self._mutation_failed("create", error, "Failed to add mechanic", result)
            return result
        self._mutation_succeeded("create", "Mechanic added successfully")
        return result

    def edit(self, mechanic: Mechanic, name: str, phone: str, location: str, is_verified: bool) -> FormResult:
        result = validate_mechanic_form(name, phone, location, is_verified)
        if not result.is_valid:
            return result
        update = build_mechanic_update(mechanic, result)
        if not update.changes():
            self.notifications.success("No changes to save")
            return result
        try:
            self.client.update_mechanic(mechanic.id, update)
        except ApiError as error:
            self._mutation_failed("update", error, "Failed to update mechanic", result)
            return result
        self._mutation_succeeded("update", "Mechanic updated successfully")
        return result

    def toggle_verified(self, mechanic: Mechanic) -> bool:
        verified = not mechanic.verified
        try:
            self.client.set_verified(mechanic.id, verified)
        except ApiError as error:
            self._mutation_failed("toggle_verified", error, "Failed to update verification status")
            return False
        self._mutation_succeeded("toggle_verified", "Mechanic verified" if verified else "Verification removed")
        return True

    def delete(self, mechanic: Mechanic) -> bool:
        try:
            self.client.delete_mechanic(mechanic.id)
        except ApiError as error:
            self._mutation_failed("delete", error, "Failed to delete mechanic")
            return False
        self._mutation_succeeded("delete", "Mechanic deleted")
        return True

    def _mutation_succeeded(self, action: str, message: str) -> None:
        cache = self.controller.cache
        if cache is not None:
            for module in MECHANIC_LISTING_MODULES:
                cache.invalidate_prefix(f"{module}:")
        self.notifications.success(message)
        log_action(logger, self.module, action, self.route, None, "success")

    def _mutation_failed(self, action: str, error: ApiError, message: str, result: FormResult | None = None) -> None:
        if result is not None and isinstance(error, ValidationError):
            result.field_errors.update(map_api_validation_errors(error.details))
        report_api_error(self.notifications, error, message)
        log_action(logger, self.module, action, self.route, error.trace_id, "error")

    def extra_commands(self) -> str:
        return " a=add e=edit v=toggle-verified d=delete"

    def handle_extra(self, option: str) -> bool:
        if option == "a":
            return self._prompt_create()
        if option in {"e", "v", "d"}:
            mechanic = self._prompt_mechanic()
            if mechanic is None:
                return True
            if option == "e":
                return self._prompt_edit(mechanic)
            if option == "v":
                self.toggle_verified(mechanic)
                return True
            if input(f"Delete {mechanic.name}? This cannot be undone. (y/N): ").strip().lower() == "y":
                self.delete(mechanic)
            return True
        return False

    def _prompt_mechanic(self) -> Mechanic | None:
        mechanic_id = input("Mechanic ID: ").strip()
        mechanic = self.find_mechanic(mechanic_id)
        if mechanic is None:
            print(f"Mechanic {mechanic_id or '?'} is not on the current page.")
        return mechanic

    def _prompt_create(self) -> bool:
        print("\nAdd New Mechanic")
        result = self.create(
            input("Full Name: "),
            input("Phone: "),
            input("Location: "),
            input("Verified? (y/N): ").strip().lower() == "y",
        )
        _print_field_errors(result)
        return True

    def _prompt_edit(self, mechanic: Mechanic) -> bool:
        print(f"\nEdit Mechanic {mechanic.name} (leave blank to keep the current value)")
        name = input(f"Full Name [{mechanic.name}]: ").strip() or mechanic.name
        phone = input(f"Phone [{mechanic.phone}]: ").strip() or mechanic.phone
        location = input(f"Location [{mechanic.location}]: ").strip() or mechanic.location
        current = "y" if mechanic.verified else "n"
        verified = (input(f"Verified? (y/n) [{current}]: ").strip().lower() or current) == "y"
        result = self.edit(mechanic, name, phone, location, verified)
        _print_field_errors(result)
        return True


def _print_field_errors(result: FormResult) -> None:
    for field_name, message in result.field_errors.items():
        print(f"  {field_name}: {message}")
