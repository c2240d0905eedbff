import logging
import math
from fastapi import APIRouter, HTTPException, Query

from gidiary.domain.FuelPlanItem import FuelPlanItem
from gidiary.domain.FuelProduct import FuelProduct
from gidiary.domain.GeneratedPlan import PlannedProduct
from gidiary.logic.planning.fuel_planner import generate_fuel_plan, recalculate_plan
from gidiary.utilities.calculations import (
    calculate_carb_rate,
    calculate_required_carbs,
    calculate_total_carbs,
)
from gidiary.utilities.formatting import format_carb_rate, format_carbs, format_duration_minutes
from gidiary.utilities.validators import (
    FuelProductInput,
    GeneratePlanRequest,
    PlanTotalsRequest,
    RecalculatePlanRequest,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _plan_response(plan):
    return {
        **plan.to_dict(),
        "timeline": [item.to_dict() for item in plan.timeline()],
        "total_label": format_carbs(plan.total_carbs),
    }


# === Fuel plan ===
@router.post('/api/fuel-plan/generate')
def api_generate_plan(body: GeneratePlanRequest):
    """Greedy plan for the target carbs; target <= 0 is reported in 'error', not as HTTP error."""
    products = [FuelProduct.from_dict(p.model_dump()) for p in body.products]
    plan = generate_fuel_plan(body.target_carbs, body.duration_minutes, products,
                              max_quantity=body.max_quantity)
    return _plan_response(plan)


@router.post('/api/fuel-plan/recalculate')
def api_recalculate_plan(body: RecalculatePlanRequest):
    items = [PlannedProduct.from_dict(item.model_dump()) for item in body.items]
    return _plan_response(recalculate_plan(items, body.target_carbs))


@router.post('/api/fuel-plan/totals')
def api_plan_totals(body: PlanTotalsRequest):
    plan = [FuelPlanItem.from_dict(item.model_dump()) for item in body.items]
    total = calculate_total_carbs(plan)
    rate = calculate_carb_rate(total, body.duration_minutes)
    return {
        "total_carbs": total,
        "carb_rate": rate,
        "total_label": format_carbs(total),
        "rate_label": format_carb_rate(round(rate, 1)),
        "duration_label": format_duration_minutes(body.duration_minutes),
    }


# === Carb arithmetic ===
@router.get('/api/carbs/required')
def api_required_carbs(duration_minutes: float = Query(..., ge=0),
                       target_g_per_hour: float = Query(..., ge=0)):
    required = calculate_required_carbs(duration_minutes, target_g_per_hour)
    return {"required_carbs": required, "label": format_carbs(round(required, 1))}


@router.get('/api/carbs/rate')
def api_carb_rate(total_carbs: float = Query(...), duration_minutes: float = Query(...)):
    if duration_minutes <= 0:
        raise HTTPException(status_code=400, detail="duration_minutes must be greater than 0")
    rate = calculate_carb_rate(total_carbs, duration_minutes)
    if not math.isfinite(rate):
        raise HTTPException(status_code=400, detail="Carb rate is not a finite number")
    return {"carb_rate": rate, "label": format_carb_rate(round(rate, 1))}


# === Fuel products ===
@router.post('/api/fuel-products/validate')
def api_validate_product(body: FuelProductInput):
    """Pydantic rejects invalid products with 422 before this runs."""
    logger.debug("Validated fuel product %s", body.name)
    return {"valid": True, "product": body.model_dump()}
