"""
Reports services package.

- SalesReportService: daily sales summary built from settled orders
- TimezoneUtils: display-timezone day and hour boundaries
"""

from .sales_service import SalesReportService
from .timezone_utils import TimezoneUtils

__all__ = [
    'SalesReportService',
    'TimezoneUtils',
]
