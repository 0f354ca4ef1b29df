"""Side-by-side comparison of two regimes for the same gross income."""

from __future__ import annotations

from app.models.regimes import CESS_RATE, REGIMES, SURCHARGE_SLABS, Regime, SlabTable
from app.models.schemas import RegimeComparison
from app.services.tax_service import compute_tax_for_regime


def compare_regimes(
    gross_income: float,
    current: Regime = REGIMES["current"],
    proposed: Regime = REGIMES["proposed"],
    surcharge_slabs: SlabTable = SURCHARGE_SLABS,
    cess_rate: float = CESS_RATE,
) -> RegimeComparison:
    """Compute both regimes and report which one is cheaper.

    *gross_income* is expected to be already sanitised by the caller.
    ``savings`` is positive when the proposed regime costs less.
    """
    current_result = compute_tax_for_regime(gross_income, current, surcharge_slabs, cess_rate)
    proposed_result = compute_tax_for_regime(gross_income, proposed, surcharge_slabs, cess_rate)

    savings = current_result.totalTax - proposed_result.totalTax
    if savings > 0:
        verdict = "proposed"
    elif savings < 0:
        verdict = "current"
    else:
        verdict = "equal"

    return RegimeComparison(
        income=gross_income,
        current=current_result,
        proposed=proposed_result,
        savings=savings,
        verdict=verdict,
    )
