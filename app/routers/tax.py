"""Routers for tax computation endpoints:
    GET   /api/v1/regimes
    POST  /api/v1/tax:compute
    POST  /api/v1/tax:compare
"""

from __future__ import annotations

import logging
import math
from typing import List

from fastapi import APIRouter, HTTPException

from app.models.regimes import CESS_RATE, SURCHARGE_SLABS, SlabTable, get_regime, list_regimes
from app.models.schemas import (
    CompareRequest,
    ComputeRequest,
    RegimeComparison,
    RegimeOut,
    RegimesResponse,
    SlabOut,
    TaxResult,
)
from app.services.comparison_service import compare_regimes
from app.services.tax_service import compute_tax_for_regime
from app.utils.helpers import format_rate_percent, sanitize_income, slab_range_label

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1",
    tags=["Tax"],
)


def _slabs_out(slabs: SlabTable) -> List[SlabOut]:
    out: list[SlabOut] = []
    previous = 0.0
    for slab in slabs:
        out.append(
            SlabOut(
                upperBound=None if math.isinf(slab.upper_bound) else slab.upper_bound,
                rate=slab.rate,
                rangeLabel=slab_range_label(previous, slab.upper_bound),
                ratePercent=format_rate_percent(slab.rate),
            )
        )
        previous = slab.upper_bound
    return out


# ── 1. Regime catalogue ──────────────────────────────────────────────────

@router.get(
    "/regimes",
    response_model=RegimesResponse,
    summary="List the available tax regimes and shared levies",
)
async def regimes() -> RegimesResponse:
    """Return every registered regime with its slabs and rebate rules,
    plus the surcharge table and cess rate applied to all of them.
    """
    return RegimesResponse(
        regimes=[
            RegimeOut(
                key=r.key,
                label=r.label,
                slabs=_slabs_out(r.slabs),
                rebateEligibilityLimit=r.config.rebate_eligibility_limit,
                maxRebate=r.config.max_rebate,
                standardDeduction=r.config.standard_deduction,
            )
            for r in list_regimes()
        ],
        surchargeSlabs=_slabs_out(SURCHARGE_SLABS),
        cessRate=CESS_RATE,
    )


# ── 2. Single-regime computation ─────────────────────────────────────────

@router.post(
    "/tax:compute",
    response_model=TaxResult,
    summary="Compute tax liability under one regime",
)
async def tax_compute(body: ComputeRequest) -> TaxResult:
    """Compute slab-wise tax, rebate, surcharge, cess and effective rate
    for the given gross income under the requested regime.
    """
    try:
        regime = get_regime(body.regime)
    except KeyError as exc:
        logger.warning("Rejected tax computation: %s", exc.args[0])
        raise HTTPException(status_code=404, detail=exc.args[0])

    return compute_tax_for_regime(sanitize_income(body.income), regime)


# ── 3. Regime comparison ─────────────────────────────────────────────────

@router.post(
    "/tax:compare",
    response_model=RegimeComparison,
    summary="Compare the current and proposed regimes",
)
async def tax_compare(body: CompareRequest) -> RegimeComparison:
    """Compute both regimes for one gross income and report the saving
    under the proposed regime (negative when it costs more).
    """
    return compare_regimes(sanitize_income(body.income))
