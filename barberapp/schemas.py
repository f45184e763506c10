# barberapp/schemas.py

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator


class AppointmentStatus(str, Enum):
    pending = "Pending"
    confirmed = "Confirmed"
    completed = "Completed"
    cancelled = "Cancelled"


class ServiceCreate(BaseModel):
    name: str = Field(min_length=3)
    description: str = Field(min_length=5)
    duration: int = Field(gt=0)  # minutes
    price: float = Field(gt=0, allow_inf_nan=False)
    category: str = Field(min_length=2)
    active: bool = True


class ServiceUpdate(BaseModel):
    """Partial patch: only the fields that were sent are applied."""

    name: Optional[str] = Field(default=None, min_length=3)
    description: Optional[str] = Field(default=None, min_length=5)
    duration: Optional[int] = Field(default=None, gt=0)
    price: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    category: Optional[str] = Field(default=None, min_length=2)
    active: Optional[bool] = None


class ServicePublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    duration: int
    price: float
    category: str
    active: bool


class AppointmentPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    client_name: str
    client_phone: str
    client_email: str
    service_name: str
    date: str
    status: AppointmentStatus


class AppointmentStatusUpdate(BaseModel):
    status: AppointmentStatus


class BookingCreate(BaseModel):
    name: str = Field(min_length=2)
    phone: str = Field(pattern=r"^\+?[1-9]\d{1,14}$")
    email: EmailStr
    service_id: str = Field(min_length=1)
    date: date
    time: str = Field(min_length=1)

    # context-dependent checks run only when a context is supplied

    @field_validator("service_id")
    @classmethod
    def service_is_offered(cls, value: str, info: ValidationInfo) -> str:
        if info.context and value not in info.context["service_ids"]:
            raise ValueError("service is not available")
        return value

    @field_validator("date")
    @classmethod
    def date_not_in_past(cls, value, info: ValidationInfo):
        if info.context and value < info.context["today"]:
            raise ValueError("date is in the past")
        return value

    @field_validator("time")
    @classmethod
    def time_is_offered(cls, value: str, info: ValidationInfo) -> str:
        if info.context and value not in info.context["available_times"]:
            raise ValueError("time slot is not offered")
        return value


class NotificationPublic(BaseModel):
    title: str
    description: str
    variant: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    notification: Optional[NotificationPublic] = None


class ServiceView(ServicePublic):
    price_display: str


class ServiceCategoryGroup(BaseModel):
    key: str
    name: str
    services: List[ServiceView]


class AppointmentView(AppointmentPublic):
    date_display: str
    status_label: str


class ServiceActionResponse(BaseModel):
    service: Optional[ServicePublic] = None
    notification: NotificationPublic


class AppointmentActionResponse(BaseModel):
    appointment: Optional[AppointmentPublic] = None
    notification: NotificationPublic
