"""Display helpers for tax estimates.

Stored results keep full precision; rounding to cents happens here, at the
point where figures are turned into strings for a reader:
- format_currency / format_percent for individual figures
- summary_cards for the four headline amounts
- quarterly_schedule for the installment table with IRS due dates
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from src.tax.calculator import TaxResult

CENT = Decimal("0.01")


@dataclass(frozen=True)
class SummaryCard:
    """One headline figure of an estimate.

    Attributes:
        title: Card heading.
        amount: Unrounded amount.
        formatted_amount: Amount as a currency string.
        description: Short explanation shown under the amount.
        highlight: True only for the total.
    """

    title: str
    amount: Decimal
    formatted_amount: str
    description: str
    highlight: bool = False


@dataclass(frozen=True)
class QuarterlyPayment:
    """One estimated payment installment.

    Attributes:
        label: "Q1" through "Q4".
        due_date: IRS due date for the installment.
        amount: Unrounded installment amount.
        formatted_amount: Amount as a currency string.
    """

    label: str
    due_date: date
    amount: Decimal
    formatted_amount: str


def round_cents(value: Decimal) -> Decimal:
    """Round to cents, half up."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(value: Decimal) -> str:
    """Format an amount as US dollars.

    Example:
        >>> format_currency(Decimal("8064.825"))
        '$8,064.83'
    """
    rounded = round_cents(value)
    if rounded < 0:
        return f"-${-rounded:,.2f}"
    return f"${rounded:,.2f}"


def format_percent(rate: Decimal) -> str:
    """Format a fractional rate as a percentage with trailing zeros trimmed.

    Example:
        >>> format_percent(Decimal("0.093"))
        '9.3%'
    """
    percent = (rate * 100).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{percent.normalize():f}%"


def quarterly_due_dates(tax_year: int) -> tuple[date, date, date, date]:
    """Estimated payment due dates for a tax year.

    Weekend and holiday shifts are not applied.
    """
    return (
        date(tax_year, 4, 15),
        date(tax_year, 6, 15),
        date(tax_year, 9, 15),
        date(tax_year + 1, 1, 15),
    )


def quarterly_schedule(result: TaxResult, tax_year: int) -> list[QuarterlyPayment]:
    """Pair each installment with its label and due date."""
    return [
        QuarterlyPayment(
            label=f"Q{index + 1}",
            due_date=due_date,
            amount=amount,
            formatted_amount=format_currency(amount),
        )
        for index, (amount, due_date) in enumerate(
            zip(result.quarterly_payments, quarterly_due_dates(tax_year))
        )
    ]


def summary_cards(result: TaxResult, tax_year: int) -> list[SummaryCard]:
    """Build the headline cards for an estimate.

    Args:
        result: Computed estimate.
        tax_year: Year whose brackets were applied.

    Returns:
        Cards for SE, federal, state and total tax, in that order.
    """
    return [
        SummaryCard(
            title="Self-Employment Tax",
            amount=result.self_employment_tax,
            formatted_amount=format_currency(result.self_employment_tax),
            description="15.3% of net earnings",
        ),
        SummaryCard(
            title="Federal Income Tax",
            amount=result.federal_tax,
            formatted_amount=format_currency(result.federal_tax),
            description=f"Based on {tax_year} tax brackets",
        ),
        SummaryCard(
            title="State Income Tax",
            amount=result.state_tax,
            formatted_amount=format_currency(result.state_tax),
            description=(
                f"Based on {result.state_info.name} tax rate "
                f"({format_percent(result.state_info.tax_rate)})"
            ),
        ),
        SummaryCard(
            title="Total Annual Tax",
            amount=result.total_tax,
            formatted_amount=format_currency(result.total_tax),
            description="Combined tax liability",
            highlight=True,
        ),
    ]
