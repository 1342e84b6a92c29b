# src/lifecost/taxes.py
import math

from .errors import InvalidInputError
from .formatting import format_tax_rate, format_whole_dollars
from .schemas import TaxSavings


def calculate_tax_savings(
    current_tax_burden: float,
    compare_tax_burden: float,
    annual_income: float,
) -> TaxSavings:
    """
    What moving from a place with `current_tax_burden` to one with
    `compare_tax_burden` (both as percent of income) is worth per year.
    A positive result is a saving.

    Raises InvalidInputError when the current burden is zero, since the
    relative difference is undefined, and for any non-finite input.
    """
    if not all(math.isfinite(v) for v in (current_tax_burden, compare_tax_burden, annual_income)):
        raise InvalidInputError("Tax burdens and income must be finite numbers.")
    if current_tax_burden == 0:
        raise InvalidInputError("Current tax burden must be non-zero.")

    difference = current_tax_burden - compare_tax_burden
    annual_savings = annual_income * (difference / 100)
    monthly_savings = annual_savings / 12
    percent_difference = difference / current_tax_burden * 100
    return TaxSavings(
        annual_savings=annual_savings,
        monthly_savings=monthly_savings,
        percent_difference=percent_difference,
        annual_savings_display=format_whole_dollars(annual_savings),
        monthly_savings_display=format_whole_dollars(monthly_savings),
        percent_difference_display=format_tax_rate(percent_difference),
    )
