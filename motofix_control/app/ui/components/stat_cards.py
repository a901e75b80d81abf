from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StatCard:
    title: str
    value: str
    subtitle: str = ""


def print_stat_cards(title: str, cards: list[StatCard]) -> None:
    print(f"\n{title}")
    width = max((len(card.title) for card in cards), default=0)
    for card in cards:
        subtitle = f"  ({card.subtitle})" if card.subtitle else ""
        print(f"  {card.title.ljust(width)} : {card.value}{subtitle}")
