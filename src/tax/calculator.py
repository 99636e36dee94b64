"""Estimated tax calculation for self-employed individuals.

This module provides pure functions for computing a freelancer's annual tax
estimate:
- Net income after deductions
- Self-employment tax at the combined 15.3% rate
- Federal income tax using marginal brackets
- State income tax at a flat per-state rate
- Quarterly estimated payments

All monetary values use Decimal for precision. Nothing here performs I/O or
keeps state between calls; each call returns a fresh TaxResult.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from src.core.logging import get_logger
from src.tax.states import STATES, StateRate, get_state
from src.tax.year_config import FederalBracket, TaxYearConfig, TAX_YEAR_2025

logger = get_logger(__name__)

ZERO = Decimal("0")
QUARTERS = 4


# =============================================================================
# Data Structures
# =============================================================================


class BusinessType(str, Enum):
    """Supported business structures.

    The business type is recorded on the input but both structures are taxed
    identically.
    """

    SOLE_PROPRIETOR = "sole-proprietor"
    LLC = "llc"


@dataclass(frozen=True)
class TaxInput:
    """Inputs for one estimate.

    Attributes:
        annual_income: Gross annual income before deductions.
        state: State code used for the flat state rate lookup.
        business_type: Business structure (does not affect the result).
        deductions: Business deductions subtracted from income.
    """

    annual_income: Decimal
    state: str
    business_type: BusinessType = BusinessType.SOLE_PROPRIETOR
    deductions: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass(frozen=True)
class BracketAmount:
    """Income and tax attributed to one federal bracket.

    Attributes:
        min: Bracket threshold.
        rate: Marginal rate of the bracket.
        income_in_bracket: Portion of taxable income taxed at ``rate``.
        tax_in_bracket: ``income_in_bracket * rate``.
    """

    min: Decimal
    rate: Decimal
    income_in_bracket: Decimal
    tax_in_bracket: Decimal


@dataclass(frozen=True)
class FederalTaxResult:
    """Federal income tax with its intermediate figures.

    Attributes:
        taxable_income: Base after the SE deduction and standard deduction.
        tax: Total federal income tax.
        bracket_breakdown: One entry per bracket that received income.
    """

    taxable_income: Decimal
    tax: Decimal
    bracket_breakdown: tuple[BracketAmount, ...] = ()


@dataclass(frozen=True)
class TaxResult:
    """Result of an estimate.

    Attributes:
        self_employment_tax: SE tax on net income.
        federal_tax: Federal income tax.
        state_tax: State income tax.
        total_tax: Sum of the three taxes above.
        quarterly_payments: Four equal installments of ``total_tax``.
        state_info: State whose rate was applied (fallback if unmatched).
        net_income: Income after deductions, floored at zero.
        taxable_income: Federal taxable income after deductions.
        effective_rate: ``total_tax / net_income`` (0 when no net income).
        bracket_breakdown: Per-bracket federal detail.
    """

    self_employment_tax: Decimal
    federal_tax: Decimal
    state_tax: Decimal
    total_tax: Decimal
    quarterly_payments: tuple[Decimal, Decimal, Decimal, Decimal]
    state_info: StateRate
    net_income: Decimal = field(default_factory=lambda: Decimal("0"))
    taxable_income: Decimal = field(default_factory=lambda: Decimal("0"))
    effective_rate: Decimal = field(default_factory=lambda: Decimal("0"))
    bracket_breakdown: tuple[BracketAmount, ...] = ()


# =============================================================================
# Component Calculations
# =============================================================================


def _as_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a numeric value to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def calculate_net_income(
    annual_income: Decimal | int | float,
    deductions: Decimal | int | float,
) -> Decimal:
    """Income after deductions, never below zero.

    Example:
        >>> calculate_net_income(Decimal("100000"), Decimal("10000"))
        Decimal('90000')
    """
    return max(ZERO, _as_decimal(annual_income) - _as_decimal(deductions))


def calculate_self_employment_tax(
    net_income: Decimal, config: TaxYearConfig = TAX_YEAR_2025
) -> Decimal:
    """Self-employment tax at the combined rate, with no wage-base cap."""
    return net_income * config.se_rate


def calculate_federal_tax(
    net_income: Decimal,
    self_employment_tax: Decimal,
    brackets: Sequence[FederalBracket] | None = None,
    config: TaxYearConfig = TAX_YEAR_2025,
) -> FederalTaxResult:
    """Calculate federal income tax using marginal brackets.

    Half of the SE tax and the standard deduction are removed from net income
    before the walk. Every bracket except the last taxes at most the width
    up to the next threshold; the last bracket taxes all remaining income.

    Args:
        net_income: Income after deductions.
        self_employment_tax: SE tax already computed for ``net_income``.
        brackets: Ordered bracket table. Defaults to the config's table.
        config: Tax year constants.

    Returns:
        FederalTaxResult with the tax, taxable income and per-bracket detail.

    Example:
        >>> result = calculate_federal_tax(Decimal("90000"), Decimal("13770"))
        >>> result.tax
        Decimal('10119.300')
    """
    if brackets is None:
        brackets = config.federal_brackets

    se_deduction = self_employment_tax * config.se_deduction_rate
    taxable_income = max(ZERO, net_income - se_deduction - config.standard_deduction)

    remaining_income = taxable_income
    tax = ZERO
    breakdown: list[BracketAmount] = []

    for index, bracket in enumerate(brackets):
        if remaining_income <= ZERO:
            break

        if index == len(brackets) - 1:
            # Top bracket - no limit
            income_in_bracket = remaining_income
        else:
            next_bracket = brackets[index + 1]
            income_in_bracket = min(remaining_income, next_bracket.min - bracket.min)

        tax_in_bracket = income_in_bracket * bracket.rate
        tax += tax_in_bracket
        remaining_income -= income_in_bracket
        breakdown.append(
            BracketAmount(
                min=bracket.min,
                rate=bracket.rate,
                income_in_bracket=income_in_bracket,
                tax_in_bracket=tax_in_bracket,
            )
        )

    return FederalTaxResult(
        taxable_income=taxable_income,
        tax=tax,
        bracket_breakdown=tuple(breakdown),
    )


def calculate_state_tax(net_income: Decimal, state: StateRate) -> Decimal:
    """State income tax at the state's flat rate."""
    return net_income * state.tax_rate


def calculate_quarterly_payments(
    total_tax: Decimal,
) -> tuple[Decimal, Decimal, Decimal, Decimal]:
    """Split the annual total into four equal, unrounded installments."""
    quarterly_amount = total_tax / QUARTERS
    return (quarterly_amount, quarterly_amount, quarterly_amount, quarterly_amount)


# =============================================================================
# Estimate
# =============================================================================


def compute_taxes(
    tax_input: TaxInput,
    federal_brackets: Sequence[FederalBracket] | None = None,
    state_table: tuple[StateRate, ...] = STATES,
    config: TaxYearConfig = TAX_YEAR_2025,
) -> TaxResult:
    """Compute the full annual estimate for one input.

    Negative income or deductions larger than income clamp net income to
    zero, which yields an all-zero result rather than an error. An unknown
    state code uses the first entry of ``state_table``.

    Args:
        tax_input: Validated estimate inputs.
        federal_brackets: Ordered bracket table. Defaults to the config's.
        state_table: State rate table.
        config: Tax year constants.

    Returns:
        TaxResult with all derived figures.

    Example:
        >>> result = compute_taxes(
        ...     TaxInput(Decimal("100000"), "CA", deductions=Decimal("10000"))
        ... )
        >>> result.self_employment_tax
        Decimal('13770.000')
    """
    net_income = calculate_net_income(tax_input.annual_income, tax_input.deductions)
    self_employment_tax = calculate_self_employment_tax(net_income, config)
    federal = calculate_federal_tax(
        net_income, self_employment_tax, federal_brackets, config
    )
    state = get_state(tax_input.state, state_table)
    state_tax = calculate_state_tax(net_income, state)

    total_tax = self_employment_tax + federal.tax + state_tax

    if net_income > ZERO:
        effective_rate = total_tax / net_income
    else:
        effective_rate = ZERO

    logger.debug(
        "tax_estimate_computed",
        state=state.code,
        brackets_used=len(federal.bracket_breakdown),
    )

    return TaxResult(
        self_employment_tax=self_employment_tax,
        federal_tax=federal.tax,
        state_tax=state_tax,
        total_tax=total_tax,
        quarterly_payments=calculate_quarterly_payments(total_tax),
        state_info=state,
        net_income=net_income,
        taxable_income=federal.taxable_income,
        effective_rate=effective_rate,
        bracket_breakdown=federal.bracket_breakdown,
    )
