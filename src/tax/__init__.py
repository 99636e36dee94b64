"""Tax rate tables and year-specific configurations."""

from src.tax.states import STATES, STATES_BY_CODE, StateRate, get_state
from src.tax.year_config import (
    FEDERAL_BRACKETS_2025,
    TAX_YEAR_2025,
    TAX_YEAR_CONFIGS,
    FederalBracket,
    TaxYearConfig,
    get_tax_year_config,
)

__all__ = [
    "FederalBracket",
    "FEDERAL_BRACKETS_2025",
    "StateRate",
    "STATES",
    "STATES_BY_CODE",
    "TaxYearConfig",
    "TAX_YEAR_2025",
    "TAX_YEAR_CONFIGS",
    "get_state",
    "get_tax_year_config",
]
