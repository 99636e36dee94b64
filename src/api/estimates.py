"""Tax estimate API endpoints.

The request model carries the same rules as the estimator form: income
between $1 and $10,000,000, a selected state, one of the two business types
and non-negative deductions. Requests that break them get FastAPI's standard
422 response before any calculation runs.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from fastapi import APIRouter
from pydantic import BaseModel, Field, field_validator

from src.core.config import settings
from src.core.logging import get_logger
from src.tax.calculator import BusinessType, TaxInput, TaxResult, compute_taxes
from src.tax.output import format_currency, quarterly_schedule, summary_cards
from src.tax.states import STATES, StateRate, find_state
from src.tax.year_config import get_tax_year_config

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["estimates"])

MAX_ANNUAL_INCOME = Decimal("10000000")


class EstimateRequest(BaseModel):
    """Estimate inputs submitted by the client."""

    annual_income: Decimal = Field(
        ..., description="Gross annual self-employment income in USD."
    )
    state: str = Field(..., description="Two-letter state code.")
    business_type: BusinessType = BusinessType.SOLE_PROPRIETOR
    deductions: Decimal = Field(
        default=Decimal("0"), description="Estimated business deductions in USD."
    )

    @field_validator("annual_income")
    @classmethod
    def validate_annual_income(cls, value: Decimal) -> Decimal:
        """Income must be between $1 and $10,000,000."""
        if not value.is_finite():
            raise ValueError("Income must be a number")
        if value < 1:
            raise ValueError("Income must be at least $1")
        if value > MAX_ANNUAL_INCOME:
            raise ValueError("Income must be realistic")
        return value

    @field_validator("state")
    @classmethod
    def validate_state(cls, value: str) -> str:
        """A state must be selected."""
        value = value.strip()
        if not value:
            raise ValueError("Please select a state")
        return value

    @field_validator("deductions")
    @classmethod
    def validate_deductions(cls, value: Decimal) -> Decimal:
        """Deductions cannot be negative."""
        if not value.is_finite():
            raise ValueError("Deductions must be a number")
        if value < 0:
            raise ValueError("Deductions cannot be negative")
        return value

    def to_tax_input(self) -> TaxInput:
        """Convert to the calculator's input record."""
        return TaxInput(
            annual_income=self.annual_income,
            state=self.state,
            business_type=self.business_type,
            deductions=self.deductions,
        )


class StateResponse(BaseModel):
    """State entry as exposed to clients."""

    code: str
    name: str
    tax_rate: float

    @classmethod
    def from_state(cls, state: StateRate) -> "StateResponse":
        """Build from a state table entry."""
        return cls(code=state.code, name=state.name, tax_rate=float(state.tax_rate))


class BracketResponse(BaseModel):
    """Federal bracket detail for one bracket that received income."""

    min: float
    rate: float
    income_in_bracket: float
    tax_in_bracket: float


class SummaryCardResponse(BaseModel):
    """Headline figure with display text."""

    title: str
    amount: str
    description: str
    highlight: bool


class QuarterlyPaymentResponse(BaseModel):
    """Installment with label and due date."""

    label: str
    due_date: date
    amount: str


class EstimateDisplay(BaseModel):
    """Figures rounded and formatted for display."""

    self_employment_tax: str
    federal_tax: str
    state_tax: str
    total_tax: str
    cards: list[SummaryCardResponse]
    quarterly_payments: list[QuarterlyPaymentResponse]


class EstimateResponse(BaseModel):
    """Full estimate: unrounded figures plus display strings."""

    tax_year: int
    self_employment_tax: float
    federal_tax: float
    state_tax: float
    total_tax: float
    quarterly_payments: list[float]
    state_info: StateResponse
    state_matched: bool
    net_income: float
    taxable_income: float
    effective_rate: float
    bracket_breakdown: list[BracketResponse]
    display: EstimateDisplay


def build_estimate_response(
    result: TaxResult, tax_year: int, state_matched: bool
) -> EstimateResponse:
    """Render a TaxResult for the API.

    Args:
        result: Computed estimate.
        tax_year: Year whose constants were applied.
        state_matched: False when the requested code fell back.

    Returns:
        EstimateResponse with raw figures and formatted display block.
    """
    display = EstimateDisplay(
        self_employment_tax=format_currency(result.self_employment_tax),
        federal_tax=format_currency(result.federal_tax),
        state_tax=format_currency(result.state_tax),
        total_tax=format_currency(result.total_tax),
        cards=[
            SummaryCardResponse(
                title=card.title,
                amount=card.formatted_amount,
                description=card.description,
                highlight=card.highlight,
            )
            for card in summary_cards(result, tax_year)
        ],
        quarterly_payments=[
            QuarterlyPaymentResponse(
                label=payment.label,
                due_date=payment.due_date,
                amount=payment.formatted_amount,
            )
            for payment in quarterly_schedule(result, tax_year)
        ],
    )

    return EstimateResponse(
        tax_year=tax_year,
        self_employment_tax=float(result.self_employment_tax),
        federal_tax=float(result.federal_tax),
        state_tax=float(result.state_tax),
        total_tax=float(result.total_tax),
        quarterly_payments=[float(amount) for amount in result.quarterly_payments],
        state_info=StateResponse.from_state(result.state_info),
        state_matched=state_matched,
        net_income=float(result.net_income),
        taxable_income=float(result.taxable_income),
        effective_rate=float(result.effective_rate),
        bracket_breakdown=[
            BracketResponse(
                min=float(item.min),
                rate=float(item.rate),
                income_in_bracket=float(item.income_in_bracket),
                tax_in_bracket=float(item.tax_in_bracket),
            )
            for item in result.bracket_breakdown
        ],
        display=display,
    )


@router.get("/states", response_model=list[StateResponse])
async def list_states() -> list[StateResponse]:
    """Return supported states in display order."""
    return [StateResponse.from_state(state) for state in STATES]


@router.post("/estimates", response_model=EstimateResponse)
async def create_estimate(request: EstimateRequest) -> EstimateResponse:
    """Compute an annual estimate and its quarterly payments.

    Unknown state codes are not rejected; the estimate uses the fallback
    state and reports ``state_matched: false``.
    """
    config = get_tax_year_config(settings.tax_year)
    state_matched = find_state(request.state) is not None
    if not state_matched:
        logger.warning("estimate_state_fallback", requested_state=request.state)

    result = compute_taxes(
        request.to_tax_input(),
        federal_brackets=config.federal_brackets,
        config=config,
    )

    logger.info(
        "estimate_created",
        tax_year=config.tax_year,
        state=result.state_info.code,
        business_type=request.business_type.value,
    )
    return build_estimate_response(result, config.tax_year, state_matched)
