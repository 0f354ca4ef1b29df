"""Pydantic request / response schemas for all API endpoints.

Field names follow the UI contract (camelCase):
  - TaxResult        → full computation for one regime
  - RegimeComparison → two TaxResults side by side plus the saving
"""

from __future__ import annotations
from typing import List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

class TaxBreakdownLine(BaseModel):
    """Tax levied inside one slab that received income."""
    model_config = ConfigDict(frozen=True)

    rangeLabel: str = Field(..., description="Bracket label, e.g. '₹3,00,000 - ₹6,00,000'")
    ratePercent: str = Field(..., description="Marginal rate, e.g. '5%'")
    amount: float = Field(..., description="Tax on the income inside this slab")

class TaxResult(BaseModel):
    """Complete tax computation for one income under one regime."""
    model_config = ConfigDict(frozen=True)

    slabwiseTax: List[TaxBreakdownLine]
    baseTax: float = Field(..., description="Sum of slab-wise tax")
    rebate: float = Field(..., description="Section 87A rebate")
    taxAfterRebate: float
    surcharge: float = Field(..., description="Levy on tax, tiered by gross income")
    cess: float = Field(..., description="Health & Education Cess on tax + surcharge")
    totalTax: float
    effectiveRatePercent: float = Field(..., description="totalTax / gross income × 100")
    taxableIncome: float = Field(..., description="Gross income less standard deduction")
    standardDeduction: float

# ── 1. Single regime  (/tax:compute) ─────────────────────────────────────

class ComputeRequest(BaseModel):
    income: Union[float, str, None] = Field(
        None, description="Gross annual income; free text such as '15,00,000' is accepted"
    )
    regime: str = Field("current", description="Regime key (see GET /regimes)")

# ── 2. Comparison  (/tax:compare) ────────────────────────────────────────

class CompareRequest(BaseModel):
    income: Union[float, str, None] = Field(None, description="Gross annual income")

class RegimeComparison(BaseModel):
    """Both regimes for the same gross income."""
    model_config = ConfigDict(frozen=True)

    income: float = Field(..., description="Sanitised gross income")
    current: TaxResult
    proposed: TaxResult
    savings: float = Field(
        ..., description="current.totalTax − proposed.totalTax (negative: proposed costs more)"
    )
    verdict: Literal["proposed", "current", "equal"] = Field(
        ..., description="Which regime is cheaper"
    )

# ── 3. Regime catalogue  (/regimes) ──────────────────────────────────────

class SlabOut(BaseModel):
    upperBound: Optional[float] = Field(..., description="Exclusive upper limit; null = open-ended")
    rate: float
    rangeLabel: str
    ratePercent: str

class RegimeOut(BaseModel):
    key: str
    label: str
    slabs: List[SlabOut]
    rebateEligibilityLimit: float
    maxRebate: float
    standardDeduction: float

class RegimesResponse(BaseModel):
    regimes: List[RegimeOut]
    surchargeSlabs: List[SlabOut]
    cessRate: float

# ── 4. Performance Report  (/performance) ────────────────────────────────

class PerformanceResponse(BaseModel):
    time: str = Field(..., description="Last response time (HH:mm:ss.SSS)")
    memory: str = Field(..., description="Current memory usage (e.g. '123.45 MB')")
    threads: int = Field(..., description="Number of active threads")
