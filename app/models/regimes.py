"""Tax regime data: slab tables, rebate rules and the named regime registry.

Current Regime (no changes):
    ₹0 – ₹3,00,000           → 0 %
    ₹3,00,000 – ₹6,00,000    → 5 %
    ₹6,00,000 – ₹9,00,000    → 10 %
    ₹9,00,000 – ₹12,00,000   → 15 %
    ₹12,00,000 – ₹15,00,000  → 20 %
    Above ₹15,00,000          → 30 %

Proposed Regime (Budget 2025):
    ₹0 – ₹4,00,000           → 0 %
    ₹4,00,000 – ₹8,00,000    → 5 %
    ₹8,00,000 – ₹12,00,000   → 10 %
    ₹12,00,000 – ₹16,00,000  → 15 %
    ₹16,00,000 – ₹20,00,000  → 20 %
    ₹20,00,000 – ₹24,00,000  → 25 %
    Above ₹24,00,000          → 30 %
"""

from __future__ import annotations

import math
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.config import settings

INF = math.inf


class TaxSlab(BaseModel):
    """One bracket: income below ``upper_bound`` is taxed at ``rate``."""

    model_config = ConfigDict(frozen=True)

    upper_bound: float = Field(..., gt=0, description="Exclusive upper limit (inf for the top bracket)")
    rate: float = Field(..., ge=0, le=1, description="Marginal rate as a fraction")


SlabTable = Tuple[TaxSlab, ...]


def validate_slab_table(slabs: SlabTable) -> SlabTable:
    """Raise ``ValueError`` unless bounds are strictly increasing."""
    if not slabs:
        raise ValueError("Slab table must contain at least one slab")
    previous = 0.0
    for slab in slabs:
        if slab.upper_bound <= previous:
            raise ValueError(
                f"Slab bounds must be strictly increasing: {slab.upper_bound} "
                f"follows {previous}"
            )
        previous = slab.upper_bound
    return slabs


class RegimeConfig(BaseModel):
    """Per-regime rebate rules (Section 87A) and standard deduction."""

    model_config = ConfigDict(frozen=True)

    rebate_eligibility_limit: float = Field(..., ge=0, description="Taxable income ceiling for the rebate")
    max_rebate: float = Field(..., ge=0, description="Largest rebate granted")
    standard_deduction: float = Field(
        default_factory=lambda: settings.STANDARD_DEDUCTION,
        ge=0,
        description="Flat deduction from gross income",
    )


class Regime(BaseModel):
    """A named slab table paired with its own rebate rules."""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    slabs: SlabTable
    config: RegimeConfig

    @model_validator(mode="after")
    def _check_slabs(self) -> "Regime":
        validate_slab_table(self.slabs)
        return self


# ── Slab tables ───────────────────────────────────────────────────────────

CURRENT_TAX_SLABS: SlabTable = validate_slab_table((
    TaxSlab(upper_bound=300_000, rate=0.00),
    TaxSlab(upper_bound=600_000, rate=0.05),
    TaxSlab(upper_bound=900_000, rate=0.10),
    TaxSlab(upper_bound=1_200_000, rate=0.15),
    TaxSlab(upper_bound=1_500_000, rate=0.20),
    TaxSlab(upper_bound=INF, rate=0.30),
))

PROPOSED_TAX_SLABS: SlabTable = validate_slab_table((
    TaxSlab(upper_bound=400_000, rate=0.00),
    TaxSlab(upper_bound=800_000, rate=0.05),
    TaxSlab(upper_bound=1_200_000, rate=0.10),
    TaxSlab(upper_bound=1_600_000, rate=0.15),
    TaxSlab(upper_bound=2_000_000, rate=0.20),
    TaxSlab(upper_bound=2_400_000, rate=0.25),
    TaxSlab(upper_bound=INF, rate=0.30),
))

# Keyed on gross income; single-rate lookup, bounds inclusive
SURCHARGE_SLABS: SlabTable = validate_slab_table((
    TaxSlab(upper_bound=5_000_000, rate=0.00),
    TaxSlab(upper_bound=10_000_000, rate=0.10),
    TaxSlab(upper_bound=20_000_000, rate=0.15),
    TaxSlab(upper_bound=50_000_000, rate=0.25),
    TaxSlab(upper_bound=INF, rate=0.37),
))

CESS_RATE: float = settings.CESS_RATE

# ── Rebate rules ──────────────────────────────────────────────────────────

CURRENT_REGIME_CONFIG = RegimeConfig(rebate_eligibility_limit=700_000, max_rebate=25_000)
PROPOSED_REGIME_CONFIG = RegimeConfig(rebate_eligibility_limit=1_200_000, max_rebate=60_000)

# ── Registry ──────────────────────────────────────────────────────────────

REGIMES: Dict[str, Regime] = {
    "current": Regime(
        key="current",
        label="Current Regime",
        slabs=CURRENT_TAX_SLABS,
        config=CURRENT_REGIME_CONFIG,
    ),
    "proposed": Regime(
        key="proposed",
        label="Proposed Regime (Budget 2025)",
        slabs=PROPOSED_TAX_SLABS,
        config=PROPOSED_REGIME_CONFIG,
    ),
}


def get_regime(key: str) -> Regime:
    """Look up a regime by key; raises ``KeyError`` for unknown keys."""
    try:
        return REGIMES[key]
    except KeyError:
        raise KeyError(f"Unknown tax regime: '{key}'") from None


def list_regimes() -> List[Regime]:
    return list(REGIMES.values())
