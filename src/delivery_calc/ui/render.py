"""
Display sink for order breakdowns.

Formats every monetary value to the configured number of decimal places and
renders the order summary as text, HTML or a table.
"""
import html
from typing import Optional

import pandas as pd

from ..config.settings import get_settings, Settings
from ..engine.models import OrderBreakdown

WELCOME_MESSAGE = "Hello! Welcome to our delivery system."
SUMMARY_TITLE = "Order Summary"
FREE_DELIVERY_LABEL = "Free delivery!"


def format_money(amount: float, settings: Optional[Settings] = None) -> str:
    """Format an amount with the currency symbol, e.g. 'R$ 36.60'."""
    settings = settings or get_settings()
    return f"{settings.currency_symbol} {amount:.{settings.decimal_places}f}"


def format_percent(value: float) -> str:
    """Echo a percent the way it was entered: 10 -> '10', 12.5 -> '12.5'."""
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def render_lines(breakdown: OrderBreakdown, settings: Optional[Settings] = None) -> list[str]:
    """Summary lines in display order: subtotal, discount, tax, delivery, total."""
    settings = settings or get_settings()
    money = lambda amount: format_money(amount, settings)

    if breakdown.free_delivery_applied:
        delivery = FREE_DELIVERY_LABEL
    else:
        delivery = f"+ {money(breakdown.delivery_fee)}"

    return [
        f"Subtotal: {money(breakdown.subtotal)}",
        f"Discount ({format_percent(breakdown.discount_percent)}%): - {money(breakdown.discount_amount)}",
        f"Tax ({settings.tax_percent:g}%): + {money(breakdown.tax_amount)}",
        f"Delivery fee: {delivery}",
        f"Total due: {money(breakdown.total)}",
    ]


def render_text(breakdown: OrderBreakdown, settings: Optional[Settings] = None) -> str:
    """Plain-text summary with a separator before the total."""
    lines = render_lines(breakdown, settings)
    body = lines[:-1] + ["-" * max(len(line) for line in lines), lines[-1]]
    return "\n".join([SUMMARY_TITLE] + body)


def render_html(breakdown: OrderBreakdown, settings: Optional[Settings] = None) -> str:
    """HTML fragment for the results area of a page."""
    lines = [html.escape(line) for line in render_lines(breakdown, settings)]
    parts = [f"<h2>{SUMMARY_TITLE}</h2>"]
    parts.extend(f"<p>{line}</p>" for line in lines[:-1])
    parts.append("<hr>")
    parts.append(f"<p><strong>{lines[-1]}</strong></p>")
    return "\n".join(parts)


def render_welcome() -> str:
    """HTML fragment shown before any calculation."""
    return f"<p><strong>{html.escape(WELCOME_MESSAGE)}</strong></p>"


def breakdown_frame(breakdown: OrderBreakdown, settings: Optional[Settings] = None) -> pd.DataFrame:
    """Breakdown as an Item/Amount table, rounded to the display precision."""
    settings = settings or get_settings()
    rows = [
        ('Subtotal', breakdown.subtotal),
        ('Discount', breakdown.discount_amount),
        ('Tax', breakdown.tax_amount),
        ('Delivery Fee', breakdown.delivery_fee),
        ('Total', breakdown.total),
    ]
    df = pd.DataFrame(rows, columns=['Item', 'Amount'])
    df['Amount'] = df['Amount'].round(settings.decimal_places)
    return df


def breakdown_csv(breakdown: OrderBreakdown, settings: Optional[Settings] = None) -> str:
    """CSV export of the breakdown table."""
    return breakdown_frame(breakdown, settings).to_csv(index=False)
