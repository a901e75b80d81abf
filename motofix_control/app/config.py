from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class AppConfig:
    page_size: int = 10
    listing_ttl_seconds: float = 30.0

    @classmethod
    def from_env(cls, env_file: str | None = ".env") -> "AppConfig":
        load_dotenv(env_file)
        try:
            config = cls(
                page_size=int(os.getenv("MOTOFIX_PAGE_SIZE", "10")),
                listing_ttl_seconds=float(os.getenv("MOTOFIX_LISTING_TTL_SECONDS", "30")),
            )
        except ValueError as exc:
            raise ValueError(f"Invalid console configuration: {exc}") from exc
        config.validate()
        return config

    def validate(self) -> None:
        if self.page_size < 1:
            raise ValueError("MOTOFIX_PAGE_SIZE must be >= 1")
        if self.listing_ttl_seconds <= 0:
            raise ValueError("MOTOFIX_LISTING_TTL_SECONDS must be greater than 0")
