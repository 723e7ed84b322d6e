import logging

from fastapi import Depends, Request
from sqlmodel import Session

from app.core.database import engine
from app.repositories.subscription_repository import SQLSubscriptionRepository
from app.services.subscription_service import SubscriptionService


def get_session():
    with Session(engine) as session:
        yield session


def get_logger(request: Request) -> logging.Logger:
    return request.app.state.logger


def get_subscription_service(
    session: Session = Depends(get_session),
    logger: logging.Logger = Depends(get_logger),
) -> SubscriptionService:
    repository = SQLSubscriptionRepository(session, logger)
    return SubscriptionService(repository, logger)
