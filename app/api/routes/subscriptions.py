from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.api.deps import get_subscription_service
from app.schemas.subscription import CostQuery, CostRead, ErrorRead, SubscriptionCreate, SubscriptionRead
from app.services.subscription_service import SubscriptionService

# Upper bound of the integer primary key
MAX_ID = 2**31 - 1

router = APIRouter(
    prefix="/api/v1/subscriptions",
    tags=["Subscriptions"],
    responses={
        400: {"model": ErrorRead},
        500: {"model": ErrorRead},
    },
)


@router.post("", response_model=SubscriptionRead, status_code=status.HTTP_201_CREATED)
def create_subscription(
    data: SubscriptionCreate,
    service: SubscriptionService = Depends(get_subscription_service),
):
    subscription = service.create(data)
    return SubscriptionRead.model_validate(subscription)


@router.get("", response_model=list[SubscriptionRead])
def list_subscriptions(service: SubscriptionService = Depends(get_subscription_service)):
    return [SubscriptionRead.model_validate(s) for s in service.list_all()]


# Registered before /{subscription_id} so "cost" is not parsed as an id
@router.get("/cost", response_model=CostRead)
def calculate_total_cost(
    start_date: str = Query(..., description="Window start (MM-YYYY)"),
    end_date: str = Query(..., description="Window end (MM-YYYY)"),
    user_id: str | None = Query(None, description="User id (UUID)"),
    service_name: str | None = Query(None, description="Exact service name"),
    service: SubscriptionService = Depends(get_subscription_service),
):
    query = CostQuery(
        start_date=start_date,
        end_date=end_date,
        user_id=user_id,
        service_name=service_name,
    )
    return CostRead(total_cost=service.total_cost(query))


@router.get(
    "/{subscription_id}",
    response_model=SubscriptionRead,
    responses={404: {"model": ErrorRead}},
)
def get_subscription(
    subscription_id: int = Path(..., le=MAX_ID),
    service: SubscriptionService = Depends(get_subscription_service),
):
    return SubscriptionRead.model_validate(service.get(subscription_id))


@router.delete(
    "/{subscription_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorRead}},
)
def delete_subscription(
    subscription_id: int = Path(..., le=MAX_ID),
    service: SubscriptionService = Depends(get_subscription_service),
):
    service.delete(subscription_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
