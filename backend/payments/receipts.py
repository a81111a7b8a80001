"""
Plain-text bill for printing or preview.
"""
from datetime import datetime
from typing import List, Optional

from django.utils import timezone

from core_backend.config import app_settings

from .money import format_amount, format_money


def render_receipt(bill, printed_at: Optional[datetime] = None) -> str:
    """
    Renders a Bill as fixed-width text:

        ==============================
              Aroi Restaurant
        ==============================
        Table: 5
        ...
        Pad Thai x2
          60.00 x 2 = 120.00 ฿
        ------------------------------
        Grand total: 205.00 ฿

    ``printed_at`` defaults to now in the display timezone.
    """
    width = int(app_settings.receipt_width)
    currency = app_settings.currency
    symbol = app_settings.currency_symbol
    printed_at = timezone.localtime(printed_at or timezone.now())

    heavy = "=" * width
    light = "-" * width

    out: List[str] = [
        heavy,
        app_settings.shop_name.center(width).rstrip(),
        heavy,
        f"Table: {bill.table_number}",
        f"Date: {printed_at:%Y-%m-%d}",
        f"Time: {printed_at:%H:%M}",
        heavy,
        "Items",
        light,
    ]
    for line in bill.lines:
        out.append(f"{line.name} x{line.quantity}")
        out.append(
            f"  {format_amount(currency, line.price)} x {line.quantity} = "
            f"{format_money(currency, line.amount, symbol)}"
        )
        if line.note:
            out.append(f"  Note: {line.note}")
    out.extend([
        light,
        f"Items: {bill.item_count}",
        f"Grand total: {format_money(currency, bill.grand_total, symbol)}",
        heavy,
        "Thank you".center(width).rstrip(),
        heavy,
    ])
    return "\n".join(out) + "\n"
