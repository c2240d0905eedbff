"""
Input validation: permissive predicates for form fields and Pydantic
schemas for the API payloads.
"""
import json
import math
import re
from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Literal, Optional

# Liberal local@domain.tld shape; not RFC 5322.
EMAIL_PATTERN = re.compile(r'[^\s@]+@[^\s@]+\.[^\s@]+')

_DECIMAL_PATTERN = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?', re.ASCII)
_PREFIXED_PATTERN = re.compile(r'0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)', re.ASCII)
_INFINITY_PATTERN = re.compile(r'[+-]?Infinity', re.ASCII)


def is_valid_email(email: str) -> bool:
    """True for strings shaped like local@domain.tld (no whitespace, one '@')."""
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_number(value: str) -> bool:
    """True when a non-blank string reads as a number. No range check."""
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not text:
        return False
    return bool(
        _DECIMAL_PATTERN.fullmatch(text)
        or _PREFIXED_PATTERN.fullmatch(text)
        or _INFINITY_PATTERN.fullmatch(text)
    )


def is_positive_number(value: float) -> bool:
    return value > 0


ProductType = Literal['gel', 'drink', 'bar', 'food']


class FuelProductInput(BaseModel):
    """Schema for creating or editing a fuel product."""
    name: str = Field(..., min_length=1, max_length=50)
    product_type: ProductType
    carbs_per_serving: float = Field(..., gt=0, le=200)
    serving_size: Optional[str] = Field(None, max_length=50)
    notes: Optional[str] = Field(None, max_length=200)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Product name cannot be blank."""
        if not v.strip():
            raise ValueError('Product name is required')
        return v.strip()


class FuelProductPayload(BaseModel):
    """A catalog product handed to the planner."""
    id: int
    name: str = Field(..., min_length=1)
    product_type: ProductType = 'gel'
    carbs_per_serving: float
    serving_size: Optional[str] = None
    notes: Optional[str] = None


class FuelPlanItemInput(BaseModel):
    """Schema for one planned intake."""
    fuel_product_id: int
    product_name: str
    quantity: float = 1
    timing_minutes: int = Field(0, ge=0)
    carbs_total: float


class PlannedProductInput(BaseModel):
    """Schema for one product line of a generated plan (after manual edits)."""
    fuel_product_id: int
    product_name: str
    quantity: int = Field(..., ge=0)
    carbs_per_serving: float
    timing_minutes: List[int] = Field(default_factory=list)
    carbs_total: Optional[float] = None


class GeneratePlanRequest(BaseModel):
    target_carbs: float
    duration_minutes: int = Field(..., gt=0)
    products: List[FuelProductPayload]
    max_quantity: Optional[int] = Field(None, ge=1)


class RecalculatePlanRequest(BaseModel):
    items: List[PlannedProductInput]
    target_carbs: float


class PlanTotalsRequest(BaseModel):
    items: List[FuelPlanItemInput]
    duration_minutes: float = Field(..., gt=0)


class NextIntakeRequest(BaseModel):
    plan: List[FuelPlanItemInput]
    elapsed_minutes: int = Field(..., ge=0)
    logged_timings: List[int] = Field(default_factory=list)


class SessionEventInput(BaseModel):
    id: Optional[int] = None
    session_log_id: int
    event_type: Literal['intake', 'discomfort', 'note']
    timestamp_offset_seconds: int = Field(0, ge=0)
    actual_timestamp: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict)
    data_json: Optional[str] = None

    @field_validator('data_json')
    @classmethod
    def validate_data_json(cls, v):
        """Stored event data must be a JSON object."""
        if v is None or v == '':
            return v
        try:
            parsed = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f'data_json is not valid JSON: {e.msg}')
        if not isinstance(parsed, dict):
            raise ValueError('data_json must be a JSON object')
        return v


class SessionSummaryRequest(BaseModel):
    events: List[SessionEventInput]


class SessionStatsInput(BaseModel):
    id: int
    carb_rate_per_hour: float = 0
    discomfort_count: int = Field(0, ge=0)
    avg_discomfort: Optional[float] = None

    @field_validator('carb_rate_per_hour')
    @classmethod
    def finite_rate(cls, v):
        """Rates coming from a zero-length session are stored as 0."""
        return v if math.isfinite(v) else 0


class RecommendationsRequest(BaseModel):
    sessions: List[SessionStatsInput]
    events: List[SessionEventInput] = Field(default_factory=list)
