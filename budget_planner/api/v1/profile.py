"""GET/PUT /v1/profile - Financial profile store"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from budget_planner.api.v1.schemas import ProfileResponse, ProfileUpsert
from budget_planner.api.dependencies import get_request_id
from budget_planner.domain.exceptions import StoreError
from budget_planner.infrastructure.database.session import get_db
from budget_planner.infrastructure.database.repositories import ProfileRepository
from budget_planner.infrastructure.observability.metrics import profile_upsert_counter

router = APIRouter()


@router.put("/profile", response_model=ProfileResponse)
def save_profile(
    request_body: ProfileUpsert,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Create or replace the user's financial profile.

    Every field is overwritten; omitted fields are a validation error, not a
    partial update.
    """
    request_id = get_request_id(request)

    try:
        ProfileRepository(db).upsert(
            user_id=request_body.user_id,
            income=request_body.income,
            debt=request_body.debt,
            savings_goal=request_body.savings_goal,
        )
        db.commit()
    except (StoreError, SQLAlchemyError) as e:
        db.rollback()
        logging.error(f"Profile store error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Profile store unavailable")

    profile_upsert_counter.inc()
    logging.info("Profile saved", extra={"request_id": request_id, "user_id": request_body.user_id})

    return ProfileResponse(
        user_id=request_body.user_id,
        income=request_body.income,
        debt=request_body.debt,
        savings_goal=request_body.savings_goal,
    )


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    """Fetch the stored profile; 404 if the user never saved one"""
    request_id = get_request_id(request)

    try:
        profile = ProfileRepository(db).get(user_id)
    except StoreError as e:
        logging.error(f"Profile store error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Profile store unavailable")

    if profile is None:
        raise HTTPException(status_code=404, detail="No profile found")

    return ProfileResponse(
        user_id=user_id,
        income=profile.income,
        debt=profile.debt,
        savings_goal=profile.savings_goal,
    )
