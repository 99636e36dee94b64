"""Tax year-specific constants and federal brackets.

This module centralizes the values the estimator depends on for a tax year:
the self-employment tax rate, the deductible share of SE tax, the standard
deduction and the ordered federal bracket table.

Example:
    >>> from src.tax.year_config import get_tax_year_config
    >>> config = get_tax_year_config(2025)
    >>> print(f"Standard deduction: {config.standard_deduction}")
    Standard deduction: 14000
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType


@dataclass(frozen=True)
class FederalBracket:
    """A single marginal federal bracket.

    Attributes:
        min: Taxable income at which this bracket's rate begins.
        rate: Marginal rate applied up to the next bracket's ``min``.
    """

    min: Decimal
    rate: Decimal


def validate_brackets(brackets: Sequence[FederalBracket]) -> None:
    """Check that a bracket table is usable for a marginal walk.

    Args:
        brackets: Bracket table to check.

    Raises:
        ValueError: If the table is empty, does not start at zero, or is not
            strictly ascending by ``min``.
    """
    if not brackets:
        raise ValueError("Federal bracket table must not be empty")
    if brackets[0].min != Decimal("0"):
        raise ValueError(
            f"Federal bracket table must start at 0, got {brackets[0].min}"
        )
    for lower, upper in zip(brackets, brackets[1:]):
        if upper.min <= lower.min:
            raise ValueError(
                f"Federal brackets must be strictly ascending: {lower.min} >= {upper.min}"
            )


# 2025 single-filer thresholds
FEDERAL_BRACKETS_2025: tuple[FederalBracket, ...] = (
    FederalBracket(min=Decimal("0"), rate=Decimal("0.10")),
    FederalBracket(min=Decimal("11925"), rate=Decimal("0.12")),
    FederalBracket(min=Decimal("48475"), rate=Decimal("0.22")),
    FederalBracket(min=Decimal("103350"), rate=Decimal("0.24")),
    FederalBracket(min=Decimal("197300"), rate=Decimal("0.32")),
    FederalBracket(min=Decimal("250525"), rate=Decimal("0.35")),
    FederalBracket(min=Decimal("626350"), rate=Decimal("0.37")),
)

validate_brackets(FEDERAL_BRACKETS_2025)


@dataclass(frozen=True)
class TaxYearConfig:
    """Tax year-specific constants.

    All monetary values are Decimal for precision in tax calculations.
    This dataclass is frozen to prevent accidental modification.

    Attributes:
        tax_year: The tax year these values apply to.
        federal_brackets: Ordered marginal brackets, lowest first.
        standard_deduction: Flat deduction taken before the bracket walk.
        se_rate: Combined self-employment rate (Social Security + Medicare).
        se_deduction_rate: Share of SE tax deductible for income tax.
    """

    tax_year: int
    federal_brackets: tuple[FederalBracket, ...]
    standard_deduction: Decimal

    # Self-employment tax (12.4% Social Security + 2.9% Medicare), uncapped
    se_rate: Decimal = Decimal("0.153")
    se_deduction_rate: Decimal = Decimal("0.5")

    @property
    def top_bracket(self) -> FederalBracket:
        """Highest marginal bracket (no upper bound)."""
        return self.federal_brackets[-1]


# 2025 Configuration - estimated standard deduction used by the estimator
TAX_YEAR_2025 = TaxYearConfig(
    tax_year=2025,
    federal_brackets=FEDERAL_BRACKETS_2025,
    standard_deduction=Decimal("14000"),
)

# Registry of available tax year configurations
TAX_YEAR_CONFIGS: Mapping[int, TaxYearConfig] = MappingProxyType(
    {
        2025: TAX_YEAR_2025,
    }
)


def get_tax_year_config(year: int) -> TaxYearConfig:
    """Get configuration for a specific tax year.

    Args:
        year: The tax year (e.g., 2025).

    Returns:
        TaxYearConfig for the specified year.

    Raises:
        ValueError: If no configuration exists for the requested year.
    """
    if year not in TAX_YEAR_CONFIGS:
        available = sorted(TAX_YEAR_CONFIGS.keys())
        raise ValueError(
            f"No tax configuration for year {year}. Available years: {available}"
        )
    return TAX_YEAR_CONFIGS[year]
