"""ユースケースモジュール."""
from .calculate_order_summary import (
    CalculateOrderSummaryUseCase,
    DiscountNotApplicableError,
    DiscountNotFoundError,
    InsufficientPointsError,
)
from .record_discount_usage import DiscountUsageLimitError, RecordDiscountUsageUseCase

__all__ = [
    # Checkout Use Cases
    "CalculateOrderSummaryUseCase",
    "RecordDiscountUsageUseCase",
    # Errors
    "DiscountNotApplicableError",
    "DiscountNotFoundError",
    "DiscountUsageLimitError",
    "InsufficientPointsError",
]
