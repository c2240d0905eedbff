"""Recommendations from logged sessions.

Three independent analyses run once enough sessions are completed:
- products: share of sessions without discomfort per fuel product
- carb rate: the g/h range with the lowest discomfort share
- timing: whether discomfort clusters early or late in sessions
"""
import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from gidiary.domain.Recommendation import (
    INFO,
    OPTIMAL_RATE,
    PRODUCT_SUCCESS,
    PRODUCT_WARNING,
    TIMING_PATTERN,
    Recommendation,
)
from gidiary.domain.SessionEvent import SessionEvent, SessionStats
from gidiary.utilities.calculations import round_half_up
from gidiary.utilities.constants import (
    COLOR_HIGHLIGHT,
    COLOR_INFO,
    COLOR_SUCCESS,
    COLOR_WARNING,
    MIN_SESSIONS_FOR_RECOMMENDATIONS,
    RATE_BUCKETS,
)

logger = logging.getLogger(__name__)

MIN_PRODUCT_SESSIONS = 3
PRODUCT_SUCCESS_RATE = 0.8
PRODUCT_WARNING_RATE = 0.5
MIN_BUCKET_SESSIONS = 3
OPTIMAL_BUCKET_SUCCESS = 0.7
HIGH_RATE_FLOOR = 100
HIGH_RATE_DISCOMFORT = 0.6
MIN_DISCOMFORT_EVENTS = 5
MIN_PATTERN_EVENTS = 3
EARLY_MINUTES = 30
LATE_MINUTES = 90


def _percent(value: float) -> int:
    return round_half_up(value * 100)


def _product_id(value) -> Optional[int]:
    """Event data is free-form; "3" and 3 name the same product, anything else is ignored."""
    if isinstance(value, bool):
        return None
    try:
        return int(value) or None
    except (TypeError, ValueError):
        return None


def analyze_products(sessions: Sequence[SessionStats],
                     events_by_session: Dict[int, List[SessionEvent]]) -> List[Recommendation]:
    names: Dict[int, str] = {}
    success = defaultdict(int)
    total = defaultdict(int)

    for session in sessions:
        product_ids = set()
        for event in events_by_session.get(session.id, []):
            if not event.is_intake():
                continue
            product_id = _product_id(event.data.get('fuel_product_id'))
            if not product_id:
                continue
            names.setdefault(product_id, event.data.get('product_name') or 'Unknown product')
            product_ids.add(product_id)
        for product_id in product_ids:
            total[product_id] += 1
            if not session.had_discomfort:
                success[product_id] += 1

    recommendations = []
    for product_id, count in total.items():
        if count < MIN_PRODUCT_SESSIONS:
            continue
        name = names[product_id]
        rate = success[product_id] / count
        if rate >= PRODUCT_SUCCESS_RATE:
            recommendations.append(Recommendation(
                type=PRODUCT_SUCCESS,
                title=f"{name} works well",
                message=f"{success[product_id]} of {count} sessions without discomfort ({_percent(rate)}%)",
                details="This product has been consistently well tolerated. Keep using it in similar sessions.",
                icon="check-circle",
                color=COLOR_SUCCESS,
            ))
        elif rate < PRODUCT_WARNING_RATE:
            recommendations.append(Recommendation(
                type=PRODUCT_WARNING,
                title=f"Consider avoiding {name}",
                message=f"Only {success[product_id]} of {count} sessions without discomfort ({_percent(rate)}%)",
                details="This product has caused discomfort in several sessions. Try alternatives or reduce the amount.",
                icon="alert-circle",
                color=COLOR_WARNING,
            ))
    return recommendations


def analyze_optimal_rate(sessions: Sequence[SessionStats]) -> List[Recommendation]:
    buckets = [{'min': lo, 'max': hi, 'sessions': 0, 'discomfort': 0} for lo, hi in RATE_BUCKETS]
    for session in sessions:
        rate = session.carb_rate_per_hour
        if rate <= 0:
            continue
        for bucket in buckets:
            if bucket['min'] <= rate < bucket['max']:
                bucket['sessions'] += 1
                if session.had_discomfort:
                    bucket['discomfort'] += 1
                break

    recommendations = []
    valid = [b for b in buckets if b['sessions'] >= MIN_BUCKET_SESSIONS]
    if valid:
        # first bucket wins ties
        best = min(valid, key=lambda b: b['discomfort'] / b['sessions'])
        success_rate = 1 - best['discomfort'] / best['sessions']
        if success_rate >= OPTIMAL_BUCKET_SUCCESS:
            span = f"{best['min']}-{best['max']}g/h"
            recommendations.append(Recommendation(
                type=OPTIMAL_RATE,
                title=f"Optimal carb rate: {span}",
                message=f"{_percent(success_rate)}% success rate in this range ({best['sessions']} sessions)",
                details=f"Your data shows the best tolerance in this range. Try to stay within {span} for the best results.",
                icon="speedometer",
                color=COLOR_HIGHLIGHT,
            ))

    high = next((b for b in buckets if b['min'] >= HIGH_RATE_FLOOR), None)
    if high and high['sessions'] >= MIN_BUCKET_SESSIONS:
        share = high['discomfort'] / high['sessions']
        if share > HIGH_RATE_DISCOMFORT:
            recommendations.append(Recommendation(
                type=OPTIMAL_RATE,
                title="Consider lowering your carb rate",
                message=f"{_percent(share)}% of sessions above {HIGH_RATE_FLOOR}g/h had discomfort",
                details=f"A high carb rate (>{HIGH_RATE_FLOOR}g/h) has caused discomfort in several sessions. Try 80-100g/h.",
                icon="alert",
                color=COLOR_WARNING,
            ))
    return recommendations


def analyze_timing_patterns(sessions: Sequence[SessionStats],
                            events_by_session: Dict[int, List[SessionEvent]]) -> List[Recommendation]:
    timings = [
        event.offset_minutes
        for session in sessions
        for event in events_by_session.get(session.id, [])
        if event.is_discomfort()
    ]
    if len(timings) < MIN_DISCOMFORT_EVENTS:
        return []

    recommendations = []
    early = [t for t in timings if t <= EARLY_MINUTES]
    if len(early) >= MIN_PATTERN_EVENTS and len(early) / len(timings) > 0.5:
        recommendations.append(Recommendation(
            type=TIMING_PATTERN,
            title="Discomfort often comes early",
            message=f"{len(early)} of {len(timings)} discomfort events happen within {EARLY_MINUTES} min",
            details=f"Start slower with a lower rate for the first {EARLY_MINUTES} minutes before increasing.",
            icon="clock-alert",
            color=COLOR_WARNING,
        ))
    late = [t for t in timings if t >= LATE_MINUTES]
    if len(late) >= MIN_PATTERN_EVENTS and len(late) / len(timings) > 0.5:
        recommendations.append(Recommendation(
            type=TIMING_PATTERN,
            title="Discomfort often comes late",
            message=f"{len(late)} of {len(timings)} discomfort events happen after {LATE_MINUTES} min",
            details=f"Consider reducing intake after {LATE_MINUTES} minutes, or switch to lighter products towards the end.",
            icon="clock-alert",
            color=COLOR_WARNING,
        ))
    return recommendations


def generate_recommendations(sessions: Sequence[SessionStats],
                             events_by_session: Dict[int, List[SessionEvent]]) -> List[Recommendation]:
    """Build recommendations from completed sessions and their events."""
    if len(sessions) < MIN_SESSIONS_FOR_RECOMMENDATIONS:
        missing = MIN_SESSIONS_FOR_RECOMMENDATIONS - len(sessions)
        return [Recommendation(
            type=INFO,
            title=f"Complete {MIN_SESSIONS_FOR_RECOMMENDATIONS}+ sessions for recommendations",
            message=(f"You have {len(sessions)} completed sessions. "
                     f"Complete {missing} more to get personal recommendations."),
            icon="information-outline",
            color=COLOR_INFO,
        )]

    recommendations: List[Recommendation] = []
    recommendations.extend(analyze_products(sessions, events_by_session))
    recommendations.extend(analyze_optimal_rate(sessions))
    recommendations.extend(analyze_timing_patterns(sessions, events_by_session))

    if not recommendations:
        recommendations.append(Recommendation(
            type=INFO,
            title="Need more data",
            message="Keep logging sessions to get more specific recommendations.",
            icon="chart-line",
            color=COLOR_INFO,
        ))
    logger.info("Generated %d recommendations from %d sessions", len(recommendations), len(sessions))
    return recommendations


def group_events(events: Sequence[SessionEvent]) -> Dict[int, List[SessionEvent]]:
    grouped: Dict[int, List[SessionEvent]] = defaultdict(list)
    for event in events:
        grouped[event.session_log_id].append(event)
    return dict(grouped)


__all__ = [
    "generate_recommendations", "analyze_products", "analyze_optimal_rate",
    "analyze_timing_patterns", "group_events",
]
