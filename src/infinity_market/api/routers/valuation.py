"""Valuation endpoint: POST /valuation."""

from __future__ import annotations

import math
from dataclasses import asdict

from fastapi import APIRouter

from infinity_market.api.schemas import (
    ValuationBreakdownResponse,
    ValuationRequest,
    ValuationResponse,
)
from infinity_market.service.valuation import value_breakdown

router = APIRouter()


@router.post("", response_model=ValuationResponse)
async def compute_website_value(body: ValuationRequest) -> ValuationResponse:
    """Compute a website's value from its current attributes."""
    breakdown = asdict(value_breakdown(body.website))
    total = breakdown.pop("total")
    terms = {
        key: None if isinstance(term, float) and not math.isfinite(term) else term
        for key, term in breakdown.items()
    }
    return ValuationResponse(value=total, breakdown=ValuationBreakdownResponse(**terms))
