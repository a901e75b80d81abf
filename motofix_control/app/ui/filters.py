from __future__ import annotations

from dataclasses import dataclass

from clients.motofix_client_sdk.queries import ALL


@dataclass(frozen=True)
class FilterOption:
    value: str
    label: str


REQUEST_STATUS_OPTIONS = [
    FilterOption(ALL, "All Status"),
    FilterOption("pending", "Pending"),
    FilterOption("accepted", "Accepted"),
    FilterOption("in_progress", "In Progress"),
    FilterOption("completed", "Completed"),
    FilterOption("cancelled", "Cancelled"),
]

VERIFIED_OPTIONS = [
    FilterOption(ALL, "All Mechanics"),
    FilterOption("verified", "Verified Only"),
]

PAYMENT_TYPE_OPTIONS = [
    FilterOption(ALL, "All Types"),
    FilterOption("collection", "Collections"),
    FilterOption("payout", "Payouts"),
]

PAYMENT_STATUS_OPTIONS = [
    FilterOption(ALL, "All Status"),
    FilterOption("success", "Success"),
    FilterOption("pending", "Pending"),
    FilterOption("failed", "Failed"),
]


def prompt_choice(label: str, options: list[FilterOption], current: str = ALL) -> str:
    print(f"{label}:")
    for index, option in enumerate(options, start=1):
        marker = "*" if option.value == current else " "
        print(f" {marker}{index}. {option.label}")
    raw = input("Choose an option: ").strip()
    if not raw.isdigit():
        return current
    index = int(raw)
    if index < 1 or index > len(options):
        return current
    return options[index - 1].value
