"""
Data-access layer for subscriptions.

The domain layer only depends on the ``SubscriptionRepository`` protocol, so the
SQL implementation can be replaced by a fake in tests.
"""
import logging
import uuid
from datetime import date
from typing import NoReturn, Protocol

from sqlalchemy import delete, func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.core.exceptions import StorageError
from app.models.models import Subscription


class SubscriptionRepository(Protocol):
    """Storage contract for the subscriptions table."""

    def create(self, subscription: Subscription) -> Subscription:
        ...

    def list_all(self) -> list[Subscription]:
        ...

    def get_by_id(self, subscription_id: int) -> Subscription | None:
        ...

    def delete(self, subscription_id: int) -> int:
        """Returns the number of deleted rows."""
        ...

    def total_cost(
        self,
        start_date: date,
        end_date: date,
        user_id: uuid.UUID | None = None,
        service_name: str | None = None,
    ) -> int:
        ...


class SQLSubscriptionRepository:
    def __init__(self, session: Session, logger: logging.Logger):
        self.session = session
        self.logger = logger

    def create(self, subscription: Subscription) -> Subscription:
        self.logger.debug(
            f"Creating subscription service_name={subscription.service_name} "
            f"user_id={subscription.user_id} start_date={subscription.start_date}"
        )
        try:
            self.session.add(subscription)
            self.session.commit()
            self.session.refresh(subscription)
        except SQLAlchemyError as e:
            self._fail("Failed to create subscription", e)
        return subscription

    def list_all(self) -> list[Subscription]:
        try:
            subscriptions = self.session.exec(
                select(Subscription).order_by(Subscription.id)
            ).all()
        except SQLAlchemyError as e:
            self._fail("Failed to fetch subscriptions", e)

        self.logger.info(f"Fetched {len(subscriptions)} subscriptions")
        return list(subscriptions)

    def get_by_id(self, subscription_id: int) -> Subscription | None:
        try:
            return self.session.get(Subscription, subscription_id)
        except SQLAlchemyError as e:
            self._fail(f"Failed to fetch subscription {subscription_id}", e)

    def delete(self, subscription_id: int) -> int:
        try:
            result = self.session.exec(
                delete(Subscription).where(Subscription.id == subscription_id)
            )
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail(f"Failed to delete subscription {subscription_id}", e)
        return result.rowcount

    def total_cost(
        self,
        start_date: date,
        end_date: date,
        user_id: uuid.UUID | None = None,
        service_name: str | None = None,
    ) -> int:
        # A subscription counts when its active interval overlaps [start_date, end_date]
        stmt = select(func.coalesce(func.sum(Subscription.price), 0)).where(
            Subscription.start_date <= end_date,
            or_(Subscription.end_date.is_(None), Subscription.end_date >= start_date),
        )
        if user_id is not None:
            stmt = stmt.where(Subscription.user_id == user_id)
        if service_name is not None:
            stmt = stmt.where(Subscription.service_name == service_name)

        try:
            total = self.session.exec(stmt).one()
        except SQLAlchemyError as e:
            self._fail("Failed to calculate total cost", e)
        return int(total)

    def _fail(self, message: str, error: SQLAlchemyError) -> NoReturn:
        self.session.rollback()
        self.logger.error(f"{message}: {error}")
        raise StorageError(message) from error
