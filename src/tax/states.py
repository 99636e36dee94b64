"""State income tax rates.

Each supported state is approximated by a single flat rate applied to net
self-employment income. The table is ordered alphabetically by state name and
its first entry doubles as the fallback for codes that are not in the table.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType


@dataclass(frozen=True)
class StateRate:
    """Flat income tax rate for one state.

    Attributes:
        code: Two-letter postal code (e.g., "CA").
        name: Display name (e.g., "California").
        tax_rate: Flat rate as a fraction (0.093 for 9.3%).
    """

    code: str
    name: str
    tax_rate: Decimal


STATES: tuple[StateRate, ...] = (
    StateRate("AL", "Alabama", Decimal("0.05")),
    StateRate("AK", "Alaska", Decimal("0")),
    StateRate("AZ", "Arizona", Decimal("0.025")),
    StateRate("AR", "Arkansas", Decimal("0.039")),
    StateRate("CA", "California", Decimal("0.093")),
    StateRate("CO", "Colorado", Decimal("0.044")),
    StateRate("CT", "Connecticut", Decimal("0.0699")),
    StateRate("DE", "Delaware", Decimal("0.066")),
    StateRate("DC", "District of Columbia", Decimal("0.0895")),
    StateRate("FL", "Florida", Decimal("0")),
    StateRate("GA", "Georgia", Decimal("0.0539")),
    StateRate("HI", "Hawaii", Decimal("0.11")),
    StateRate("ID", "Idaho", Decimal("0.057")),
    StateRate("IL", "Illinois", Decimal("0.0495")),
    StateRate("IN", "Indiana", Decimal("0.03")),
    StateRate("IA", "Iowa", Decimal("0.038")),
    StateRate("KS", "Kansas", Decimal("0.057")),
    StateRate("KY", "Kentucky", Decimal("0.04")),
    StateRate("LA", "Louisiana", Decimal("0.03")),
    StateRate("ME", "Maine", Decimal("0.0715")),
    StateRate("MD", "Maryland", Decimal("0.0575")),
    StateRate("MA", "Massachusetts", Decimal("0.05")),
    StateRate("MI", "Michigan", Decimal("0.0425")),
    StateRate("MN", "Minnesota", Decimal("0.0985")),
    StateRate("MS", "Mississippi", Decimal("0.044")),
    StateRate("MO", "Missouri", Decimal("0.047")),
    StateRate("MT", "Montana", Decimal("0.059")),
    StateRate("NE", "Nebraska", Decimal("0.052")),
    StateRate("NV", "Nevada", Decimal("0")),
    StateRate("NH", "New Hampshire", Decimal("0")),
    StateRate("NJ", "New Jersey", Decimal("0.1075")),
    StateRate("NM", "New Mexico", Decimal("0.059")),
    StateRate("NY", "New York", Decimal("0.0685")),
    StateRate("NC", "North Carolina", Decimal("0.0425")),
    StateRate("ND", "North Dakota", Decimal("0.025")),
    StateRate("OH", "Ohio", Decimal("0.035")),
    StateRate("OK", "Oklahoma", Decimal("0.0475")),
    StateRate("OR", "Oregon", Decimal("0.099")),
    StateRate("PA", "Pennsylvania", Decimal("0.0307")),
    StateRate("RI", "Rhode Island", Decimal("0.0599")),
    StateRate("SC", "South Carolina", Decimal("0.062")),
    StateRate("SD", "South Dakota", Decimal("0")),
    StateRate("TN", "Tennessee", Decimal("0")),
    StateRate("TX", "Texas", Decimal("0")),
    StateRate("UT", "Utah", Decimal("0.0455")),
    StateRate("VT", "Vermont", Decimal("0.0875")),
    StateRate("VA", "Virginia", Decimal("0.0575")),
    StateRate("WA", "Washington", Decimal("0")),
    StateRate("WV", "West Virginia", Decimal("0.0482")),
    StateRate("WI", "Wisconsin", Decimal("0.0765")),
    StateRate("WY", "Wyoming", Decimal("0")),
)

STATES_BY_CODE: Mapping[str, StateRate] = MappingProxyType(
    {state.code: state for state in STATES}
)


def find_state(code: str, states: tuple[StateRate, ...] = STATES) -> StateRate | None:
    """Return the state with exactly this code, or None."""
    if states is STATES:
        return STATES_BY_CODE.get(code)
    return next((state for state in states if state.code == code), None)


def get_state(code: str, states: tuple[StateRate, ...] = STATES) -> StateRate:
    """Look up a state by code, falling back to the first table entry.

    Matching is exact and case-sensitive. Unknown codes never raise; they
    resolve to ``states[0]`` so callers always get a usable rate.

    Args:
        code: State code as stored in the table.
        states: Table to search. Defaults to the built-in table.

    Returns:
        Matching StateRate, or the fallback entry.
    """
    return find_state(code, states) or states[0]
