"""Indian income-tax computation for a single slab regime.

Pipeline for one gross income:
    taxable income  = gross − standard deduction (floored at 0)
    base tax        = cumulative slab walk over taxable income
    rebate (87A)    = min(base tax, max rebate) if taxable ≤ limit, else 0
    surcharge       = (base tax − rebate) × rate looked up on *gross* income
    cess            = (tax after rebate + surcharge) × cess rate
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from app.models.regimes import CESS_RATE, SURCHARGE_SLABS, Regime, RegimeConfig, SlabTable
from app.models.schemas import TaxBreakdownLine, TaxResult
from app.utils.helpers import format_rate_percent, sanitize_income, slab_range_label

logger = logging.getLogger(__name__)


def tax_by_slab(taxable_income: float, slabs: SlabTable) -> Tuple[float, List[TaxBreakdownLine]]:
    """Walk *slabs* in ascending order and tax the income falling in each.

    Returns ``(base_tax, breakdown)``. Only slabs that received income
    produce a breakdown line; the walk stops once income is exhausted.
    """
    remaining = max(taxable_income, 0.0)
    previous_bound = 0.0
    base_tax = 0.0
    breakdown: list[TaxBreakdownLine] = []

    for slab in slabs:
        if remaining <= 0:
            break
        taxed = min(remaining, slab.upper_bound - previous_bound)
        slab_tax = taxed * slab.rate

        if taxed > 0:
            breakdown.append(
                TaxBreakdownLine(
                    rangeLabel=slab_range_label(previous_bound, slab.upper_bound),
                    ratePercent=format_rate_percent(slab.rate),
                    amount=slab_tax,
                )
            )

        base_tax += slab_tax
        remaining -= taxed
        previous_bound = slab.upper_bound

    return base_tax, breakdown


def calculate_rebate(taxable_income: float, base_tax: float, config: RegimeConfig) -> float:
    """Section 87A rebate: all-or-nothing at the eligibility limit (inclusive)."""
    if taxable_income <= config.rebate_eligibility_limit:
        return min(base_tax, config.max_rebate)
    return 0.0


def surcharge_rate(gross_income: float, surcharge_slabs: SlabTable = SURCHARGE_SLABS) -> float:
    """Rate of the first surcharge slab whose bound is ≥ *gross_income*."""
    for slab in surcharge_slabs:
        if gross_income <= slab.upper_bound:
            return slab.rate
    return 0.0


def compute_tax(
    gross_income: float,
    slabs: SlabTable,
    regime_config: RegimeConfig,
    surcharge_slabs: SlabTable = SURCHARGE_SLABS,
    cess_rate: float = CESS_RATE,
) -> TaxResult:
    """Compute the full tax liability for *gross_income* under one regime.

    Parameters
    ----------
    gross_income:
        Annual gross income in INR. Negative, non-finite or non-numeric
        values are treated as 0.
    slabs:
        Cumulative slab table applied to taxable income.
    regime_config:
        Rebate limit, maximum rebate and standard deduction for the regime.
    surcharge_slabs:
        Single-rate lookup table keyed on gross income.
    cess_rate:
        Flat levy on tax after rebate plus surcharge.

    Returns
    -------
    TaxResult
        Raw (unrounded) amounts; formatting is left to the caller.
    """
    gross = sanitize_income(gross_income)
    deduction = regime_config.standard_deduction
    taxable_income = max(0.0, gross - deduction)

    base_tax, breakdown = tax_by_slab(taxable_income, slabs)
    rebate = calculate_rebate(taxable_income, base_tax, regime_config)
    tax_after_rebate = base_tax - rebate

    surcharge = tax_after_rebate * surcharge_rate(gross, surcharge_slabs)
    cess = (tax_after_rebate + surcharge) * cess_rate
    total_tax = tax_after_rebate + surcharge + cess
    effective_rate = total_tax / gross * 100 if gross > 0 else 0.0

    logger.debug(
        "Computed tax: gross=%s taxable=%s base=%s rebate=%s total=%s",
        gross, taxable_income, base_tax, rebate, total_tax,
    )

    return TaxResult(
        slabwiseTax=breakdown,
        baseTax=base_tax,
        rebate=rebate,
        taxAfterRebate=tax_after_rebate,
        surcharge=surcharge,
        cess=cess,
        totalTax=total_tax,
        effectiveRatePercent=effective_rate,
        taxableIncome=taxable_income,
        standardDeduction=deduction,
    )


def compute_tax_for_regime(
    gross_income: float,
    regime: Regime,
    surcharge_slabs: SlabTable = SURCHARGE_SLABS,
    cess_rate: float = CESS_RATE,
) -> TaxResult:
    """Shorthand for :func:`compute_tax` with a registered :class:`Regime`."""
    return compute_tax(gross_income, regime.slabs, regime.config, surcharge_slabs, cess_rate)
