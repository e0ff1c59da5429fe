"""GET /v1/plan, POST /v1/plan/preview - Debt and savings planner"""

import time
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from budget_planner.api.v1.schemas import PayoffSchema, PlanPreviewRequest, PlanResponse, PlanSchema
from budget_planner.api.dependencies import get_request_id
from budget_planner.domain.exceptions import ProfileNotFoundError, StoreError
from budget_planner.domain.models import FinancialProfile
from budget_planner.domain.payoff import payoff_horizon
from budget_planner.domain.planning import recommend
from budget_planner.infrastructure.database.session import get_db
from budget_planner.infrastructure.database.repositories import ProfileRepository
from budget_planner.infrastructure.observability.metrics import record_plan
from budget_planner.infrastructure.observability.logging import log_plan_recommended

router = APIRouter()


def build_plan_response(
    profile: FinancialProfile,
    request_id: str,
    user_id: Optional[str],
    start_time: float,
) -> PlanResponse:
    """Run the recommender and payoff estimate for a profile, then record the outcome"""
    plan = recommend(profile.income, profile.debt, profile.savings_goal)
    horizon = payoff_horizon(profile.debt, plan)

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_plan(horizon.status.value)
    log_plan_recommended(request_id, user_id or "anonymous", horizon.status.value, horizon.months, duration_ms)

    return PlanResponse(
        user_id=user_id,
        plan=PlanSchema(debt_payment=plan.debt_payment, savings=plan.savings, expenses=plan.expenses),
        payoff=PayoffSchema(status=horizon.status, months=horizon.months),
    )


@router.get("/plan", response_model=PlanResponse)
def get_plan(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    """
    Recommend a monthly allocation from the user's stored profile.

    Flow:
    1. Load the profile from the profile store
    2. Split income into debt payment, savings and expenses
    3. Estimate the payoff horizon at that debt payment

    Returns:
        Plan with payoff status: debt_free (0 months), on_track (months) or
        not_achievable (no months)
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    try:
        profile = ProfileRepository(db).get(user_id)
        if profile is None:
            raise ProfileNotFoundError(f"No profile for user {user_id}")

        return build_plan_response(profile, request_id, user_id, start_time)

    except ProfileNotFoundError as e:
        logging.warning(f"Plan requested without profile: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail="No profile found. Please set one up first.")

    except StoreError as e:
        logging.error(f"Profile store error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Profile store unavailable")


@router.post("/plan/preview", response_model=PlanResponse)
def preview_plan(request_body: PlanPreviewRequest, request: Request):
    """Recommend a plan for an ad-hoc profile without saving it"""
    start_time = time.perf_counter()
    profile = FinancialProfile(
        income=request_body.income,
        debt=request_body.debt,
        savings_goal=request_body.savings_goal,
    )
    return build_plan_response(profile, get_request_id(request), None, start_time)
