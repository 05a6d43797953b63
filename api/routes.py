from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from .schemas import PeriodOut, PlanRequest, PlanResponse, PlanRowOut
from .deps import get_plan_agent
from agents.plan_agent import PlanAgent
from utils.periods import TargetPeriod, default_target_period, lookback_window, navigate

logger = logging.getLogger(__name__)

router = APIRouter()


def _period_out(period: TargetPeriod) -> PeriodOut:
    window = lookback_window(period)
    return PeriodOut(
        month=period.month,
        year=period.year,
        label=period.label(),
        window_start=window.start.isoformat(),
        window_end=window.end.isoformat(),
        window_label=window.label(),
    )


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/period", response_model=PeriodOut)
def period(
    month: int = Query(..., ge=0, le=11),
    year: int = Query(...),
    step: str = "set",
):
    """Navigate the target period (previous / next / set) and return its lookback window."""
    try:
        target = navigate(TargetPeriod(month, year), step, month=month, year=year)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _period_out(target)


@router.post("/plan", response_model=PlanResponse)
def plan(
    payload: PlanRequest,
    plan_agent: PlanAgent = Depends(get_plan_agent),
):
    target = default_target_period().set(month=payload.target_month, year=payload.target_year)
    try:
        rows = plan_agent.plan(
            [p.to_model() for p in payload.products],
            [t.to_model() for t in payload.transactions],
            [s.to_model() for s in payload.suppliers],
            target.month,
            target.year,
            payload.search_query,
        )
    except ValueError as e:
        logger.warning("Plan request rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    out = [PlanRowOut(**row.to_dict()) for row in rows]
    return PlanResponse(period=_period_out(target), count=len(out), rows=out)
