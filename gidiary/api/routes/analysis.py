from typing import List
from fastapi import APIRouter, Query

from gidiary.domain.SessionEvent import SessionEvent, SessionStats
from gidiary.logic.planning.program import program_start_intensity, reasoning_for_issue
from gidiary.logic.reporting.recommendations import generate_recommendations, group_events
from gidiary.utilities.validators import RecommendationsRequest

router = APIRouter()


@router.post('/api/analysis/recommendations')
def api_recommendations(body: RecommendationsRequest):
    sessions = [SessionStats.from_dict(s.model_dump()) for s in body.sessions]
    events = group_events([SessionEvent.from_dict(e.model_dump()) for e in body.events])
    recommendations = generate_recommendations(sessions, events)
    return {
        "count": len(recommendations),
        "recommendations": [r.to_dict() for r in recommendations],
    }


@router.get('/api/programs/reasoning')
def api_program_reasoning(gi_issue: str = Query(default=""),
                          session_rates: List[float] = Query(default=[])):
    """Why the base program fits, and the carb rate its first session starts at."""
    return {
        "gi_issue": gi_issue,
        "reasoning": reasoning_for_issue(gi_issue),
        "start_intensity": program_start_intensity(session_rates),
    }
