# src/lifecost/formatting.py
from .constants import MetricFormat


def format_number(value: float) -> str:
    """Bare number; whole values lose their trailing `.0`."""
    if float(value).is_integer():
        return str(int(value))
    return f"{round(value, 2):g}"


def format_currency(amount: float) -> str:
    """US dollars with thousands separators; cents only when present."""
    sign = "-" if amount < 0 else ""
    amount = abs(amount)
    if float(amount).is_integer():
        return f"{sign}${amount:,.0f}"
    return f"{sign}${amount:,.2f}"


def format_whole_dollars(amount: float) -> str:
    sign = "-" if round(amount) < 0 else ""
    return f"{sign}${abs(amount):,.0f}"


def format_percent(value: float, digits: int = 1) -> str:
    return f"{value:.{digits}f}%"


def format_tax_rate(percent: float) -> str:
    return format_percent(percent, digits=2)


def format_metric(value: float, metric_format: MetricFormat) -> str:
    if metric_format == MetricFormat.CURRENCY:
        return format_currency(value)
    if metric_format == MetricFormat.PERCENT:
        return format_percent(value)
    if metric_format == MetricFormat.TIME:
        return f"{format_number(value)} min"
    return format_number(value)
