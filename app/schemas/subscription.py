import uuid
from datetime import date

from pydantic import BaseModel, StrictInt
from sqlmodel import Field, SQLModel


class SubscriptionBase(SQLModel):
    service_name: str = Field(min_length=1)
    price: int = Field(ge=1)
    user_id: uuid.UUID


class SubscriptionCreate(SubscriptionBase):
    # JSON true or "500" must not be coerced into a price
    price: StrictInt = Field(ge=1)
    start_date: str
    end_date: str | None = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "service_name": "Yandex Plus",
                "price": 400,
                "user_id": "60601fee-2bf1-4721-ae6f-7636e79a0cba",
                "start_date": "07-2025",
            }
        }
    }


class SubscriptionRead(SubscriptionBase):
    id: int
    start_date: date
    end_date: date | None = None


class CostQuery(BaseModel):
    start_date: str
    end_date: str
    user_id: str | None = None
    service_name: str | None = None


class CostRead(BaseModel):
    total_cost: int


class HealthRead(BaseModel):
    status: str
    message: str


class ErrorRead(BaseModel):
    error: str
