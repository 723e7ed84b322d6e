import uuid
from datetime import date

import pytest

from app.core.exceptions import NotFoundError, ValidationError
from app.models.models import Subscription
from app.schemas.subscription import CostQuery, SubscriptionCreate
from app.services.subscription_service import SubscriptionService

USER_ID = uuid.UUID("60601fee-2bf1-4721-ae6f-7636e79a0cba")


class InMemorySubscriptionRepository:
    """Stands in for the SQL repository to exercise the service in isolation."""

    def __init__(self):
        self.rows: dict[int, Subscription] = {}
        self.next_id = 1
        self.total_cost_calls = []

    def create(self, subscription):
        subscription.id = self.next_id
        self.rows[subscription.id] = subscription
        self.next_id += 1
        return subscription

    def list_all(self):
        return [self.rows[key] for key in sorted(self.rows)]

    def get_by_id(self, subscription_id):
        return self.rows.get(subscription_id)

    def delete(self, subscription_id):
        return 1 if self.rows.pop(subscription_id, None) else 0

    def total_cost(self, start_date, end_date, user_id=None, service_name=None):
        self.total_cost_calls.append((start_date, end_date, user_id, service_name))
        return 0


@pytest.fixture
def fake_repository():
    return InMemorySubscriptionRepository()


@pytest.fixture
def fake_service(fake_repository, logger):
    return SubscriptionService(fake_repository, logger)


def test_create_parses_dates_and_assigns_id(fake_service):
    subscription = fake_service.create(
        SubscriptionCreate(
            service_name="Netflix",
            price=500,
            user_id=USER_ID,
            start_date="01-2024",
            end_date="12-2024",
        )
    )

    assert subscription.id == 1
    assert subscription.start_date == date(2024, 1, 1)
    assert subscription.end_date == date(2024, 12, 1)


def test_create_without_end_date_is_open_ended(fake_service):
    subscription = fake_service.create(
        SubscriptionCreate(service_name="Netflix", price=500, user_id=USER_ID, start_date="01-2024")
    )
    assert subscription.end_date is None


def test_create_rejects_bad_end_date_before_storing(fake_service, fake_repository):
    with pytest.raises(ValidationError) as exc_info:
        fake_service.create(
            SubscriptionCreate(
                service_name="Netflix",
                price=500,
                user_id=USER_ID,
                start_date="01-2024",
                end_date="2024-12",
            )
        )

    assert exc_info.value.message == "invalid end_date format, expected MM-YYYY"
    assert fake_repository.rows == {}


def test_create_allows_end_date_before_start_date(fake_service):
    subscription = fake_service.create(
        SubscriptionCreate(
            service_name="Netflix",
            price=500,
            user_id=USER_ID,
            start_date="06-2024",
            end_date="01-2024",
        )
    )
    assert subscription.end_date < subscription.start_date


def test_get_missing_raises_not_found(fake_service):
    with pytest.raises(NotFoundError):
        fake_service.get(42)


def test_delete_twice_reports_not_found(fake_service):
    subscription = fake_service.create(
        SubscriptionCreate(service_name="Spotify", price=200, user_id=USER_ID, start_date="03-2024")
    )

    fake_service.delete(subscription.id)

    with pytest.raises(NotFoundError):
        fake_service.delete(subscription.id)


def test_list_all_empty(fake_service):
    assert fake_service.list_all() == []


def test_total_cost_passes_parsed_filters(fake_service, fake_repository):
    fake_service.total_cost(
        CostQuery(
            start_date="04-2024",
            end_date="09-2024",
            user_id=str(USER_ID),
            service_name="Netflix",
        )
    )

    assert fake_repository.total_cost_calls == [
        (date(2024, 4, 1), date(2024, 9, 1), USER_ID, "Netflix")
    ]


def test_total_cost_rejects_invalid_user_id_before_querying(fake_service, fake_repository):
    with pytest.raises(ValidationError) as exc_info:
        fake_service.total_cost(
            CostQuery(start_date="01-2024", end_date="12-2024", user_id="not-a-uuid")
        )

    assert exc_info.value.message == "invalid user_id format, expected UUID"
    assert fake_repository.total_cost_calls == []


def test_total_cost_rejects_invalid_window(fake_service, fake_repository):
    with pytest.raises(ValidationError):
        fake_service.total_cost(CostQuery(start_date="1-2024", end_date="12-2024"))
    assert fake_repository.total_cost_calls == []
