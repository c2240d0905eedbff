import logging
from typing import Optional
from fastapi import APIRouter, Query

from gidiary.domain.FuelPlanItem import FuelPlanItem
from gidiary.domain.SessionEvent import SessionEvent
from gidiary.logic.display.intake_card import describe_next_intake
from gidiary.logic.display.progress import describe_progress
from gidiary.logic.planning.next_intake import find_next_intake
from gidiary.logic.reporting.session_summary import summarize_session
from gidiary.utilities.formatting import format_carbs
from gidiary.utilities.validators import NextIntakeRequest, SessionSummaryRequest

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post('/api/session/next-intake')
def api_next_intake(body: NextIntakeRequest):
    plan = [FuelPlanItem.from_dict(item.model_dump()) for item in body.plan]
    next_intake = find_next_intake(plan, body.elapsed_minutes, body.logged_timings)
    return describe_next_intake(next_intake, body.elapsed_minutes)


@router.get('/api/session/progress')
def api_progress(completed: int = Query(..., ge=0),
                 total: int = Query(..., ge=0),
                 current_week: Optional[int] = Query(default=None),
                 total_weeks: Optional[int] = Query(default=None)):
    return describe_progress(completed, total, current_week, total_weeks)


@router.post('/api/session/summary')
def api_session_summary(body: SessionSummaryRequest):
    events = [SessionEvent.from_dict(e.model_dump()) for e in body.events]
    summary = summarize_session(events)
    logger.info("Session summary: %s intakes, %s discomfort events",
                summary['intake_count'], summary['discomfort_count'])
    return {**summary, "total_label": format_carbs(summary['total_carbs'])}
