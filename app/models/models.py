import uuid
from datetime import date

from sqlmodel import Field, SQLModel


class Subscription(SQLModel, table=True):
    __tablename__ = "subscriptions"

    id: int | None = Field(default=None, primary_key=True)
    service_name: str = Field(index=True)
    price: int
    user_id: uuid.UUID = Field(index=True)
    # Month precision: always the first day of the month
    start_date: date
    end_date: date | None = None
