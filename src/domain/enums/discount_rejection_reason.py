"""割引コード適用不可理由の列挙型."""
from enum import Enum


class DiscountRejectionReason(Enum):
    """割引コードが注文に適用できない理由."""

    NOT_FOUND = "not_found"
    INACTIVE = "inactive"
    NOT_YET_ACTIVE = "not_yet_active"
    EXPIRED = "expired"
    USAGE_LIMIT_REACHED = "usage_limit_reached"
    BELOW_MINIMUM_ORDER = "below_minimum_order"

    def get_message(self) -> str:
        """表示用メッセージを返す."""
        messages = {
            DiscountRejectionReason.NOT_FOUND: "This discount code doesn't exist.",
            DiscountRejectionReason.INACTIVE: "This discount code is inactive.",
            DiscountRejectionReason.NOT_YET_ACTIVE: "This discount code is not active yet.",
            DiscountRejectionReason.EXPIRED: "This discount code has expired.",
            DiscountRejectionReason.USAGE_LIMIT_REACHED: (
                "This discount code has reached its maximum usage limit."
            ),
            DiscountRejectionReason.BELOW_MINIMUM_ORDER: (
                "This discount requires a higher minimum order amount."
            ),
        }
        return messages[self]
