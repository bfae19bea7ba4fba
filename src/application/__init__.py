"""アプリケーション層モジュール."""
from .cart_state_manager import CartStateManager
from .use_cases import (
    CalculateOrderSummaryUseCase,
    DiscountNotApplicableError,
    DiscountNotFoundError,
    DiscountUsageLimitError,
    InsufficientPointsError,
    RecordDiscountUsageUseCase,
)

__all__ = [
    # Cart
    "CartStateManager",
    # Checkout Use Cases
    "CalculateOrderSummaryUseCase",
    "RecordDiscountUsageUseCase",
    # Errors
    "DiscountNotApplicableError",
    "DiscountNotFoundError",
    "DiscountUsageLimitError",
    "InsufficientPointsError",
]
