from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


def _zero_if_missing(value: object) -> object:
    if value is None or value == "":
        return 0
    return value


class RequestStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentType(str, Enum):
    COLLECTION = "collection"
    PAYOUT = "payout"


class PaymentStatus(str, Enum):
    SUCCESS = "success"
    PENDING = "pending"
    FAILED = "failed"


class TokenResponse(BaseModel):
    access_token: Optional[str] = None
    token_type: str = "bearer"


class DashboardStats(BaseModel):
    total_requests: int = 0
    completed_jobs: int = 0
    pending_jobs: int = 0
    total_mechanics: int = 0
    verified_mechanics: int = 0
    revenue_collected: float = 0
    paid_to_mechanics: float = 0
    profit: float = 0


class RevenuePoint(BaseModel):
    date: str
    amount: float = 0


class PaymentStats(BaseModel):
    total_collected: float = 0
    total_paid: float = 0

    @property
    def net(self) -> float:
        return self.total_collected - self.total_paid


class ServiceRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    customer_phone: str
    service_type: str
    location: str
    status: RequestStatus
    mechanic_name: Optional[str] = None
    created_at: datetime


class Mechanic(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, populate_by_name=True)

    id: str
    name: str
    phone: str
    location: str
    rating: float = 0
    jobs_completed: int = 0
    verified: bool = Field(default=False, validation_alias="is_verified")
    joined_at: Optional[datetime] = None

    @field_validator("rating", "jobs_completed", mode="before")
    @classmethod
    def default_missing_numbers(cls, value: object) -> object:
        return _zero_if_missing(value)

    @field_validator("verified", mode="before")
    @classmethod
    def default_missing_flag(cls, value: object) -> object:
        return False if value is None else value


class Payment(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    date: datetime
    transaction_id: str
    phone: str
    amount: float = 0
    type: PaymentType
    status: PaymentStatus
    reason: Optional[str] = None

    @field_validator("amount", mode="before")
    @classmethod
    def default_missing_amount(cls, value: object) -> object:
        return _zero_if_missing(value)


class Page(BaseModel, Generic[T]):
    data: List[T] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 10
    total_pages: int = 0


class MechanicCreate(BaseModel):
    name: str
    phone: str
    location: str
    is_verified: bool = False


class MechanicUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    is_verified: Optional[bool] = None

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)
