"""
Service layer for subscriptions.
Parses and validates dates before anything reaches the repository.
"""
import logging
import uuid

from app.core.exceptions import NotFoundError, ValidationError
from app.models.models import Subscription
from app.repositories.subscription_repository import SubscriptionRepository
from app.schemas.subscription import CostQuery, SubscriptionCreate
from app.utils.dates import parse_month_year


class SubscriptionService:
    def __init__(self, repository: SubscriptionRepository, logger: logging.Logger):
        self.repository = repository
        self.logger = logger

    def create(self, data: SubscriptionCreate) -> Subscription:
        self.logger.info(
            f"Creating subscription service_name={data.service_name} user_id={data.user_id}"
        )
        start_date = parse_month_year(data.start_date, "start_date")
        end_date = None
        if data.end_date is not None:
            end_date = parse_month_year(data.end_date, "end_date")

        subscription = Subscription(
            service_name=data.service_name,
            price=data.price,
            user_id=data.user_id,
            start_date=start_date,
            end_date=end_date,
        )
        subscription = self.repository.create(subscription)

        self.logger.info(f"Created subscription {subscription.id}")
        return subscription

    def list_all(self) -> list[Subscription]:
        return self.repository.list_all()

    def get(self, subscription_id: int) -> Subscription:
        subscription = self.repository.get_by_id(subscription_id)
        if subscription is None:
            self.logger.warning(f"Subscription {subscription_id} not found")
            raise NotFoundError("subscription not found")
        return subscription

    def delete(self, subscription_id: int) -> None:
        if self.repository.delete(subscription_id) == 0:
            self.logger.warning(f"Subscription {subscription_id} not found, nothing deleted")
            raise NotFoundError("subscription not found")
        self.logger.info(f"Deleted subscription {subscription_id}")

    def total_cost(self, query: CostQuery) -> int:
        """
        Sums the price of every subscription active at some point of the window.

        The window is not checked for end_date < start_date; the overlap
        condition is applied as is.
        """
        start_date = parse_month_year(query.start_date, "start_date")
        end_date = parse_month_year(query.end_date, "end_date")

        user_id = None
        if query.user_id is not None:
            try:
                user_id = uuid.UUID(query.user_id)
            except ValueError:
                raise ValidationError("invalid user_id format, expected UUID")

        total = self.repository.total_cost(
            start_date,
            end_date,
            user_id=user_id,
            service_name=query.service_name,
        )
        self.logger.info(
            f"Total cost {total} for {query.start_date}..{query.end_date} "
            f"user_id={query.user_id} service_name={query.service_name}"
        )
        return total
