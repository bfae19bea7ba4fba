"""割引コードリポジトリのDynamoDB実装."""
import os
from datetime import date, datetime
from decimal import Decimal
from typing import Any

import boto3
from boto3.dynamodb.conditions import Key

from src.domain.entities import DiscountCode, normalize_code
from src.domain.ports import DiscountRepository


class DynamoDBDiscountRepository(DiscountRepository):
    """割引コードリポジトリのDynamoDB実装."""

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "DISCOUNT_TABLE_NAME", "storefront-discount"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def save(self, discount: DiscountCode) -> None:
        """割引コードを保存する."""
        self._table.put_item(Item=self._to_dynamodb_item(discount))

    def find_by_code(self, code: str) -> DiscountCode | None:
        """コード文字列で検索する（GSI使用）."""
        response = self._table.query(
            IndexName="code-index",
            KeyConditionExpression=Key("code").eq(normalize_code(code)),
            Limit=1,
        )
        items = response["Items"]
        if not items:
            return None
        return self._from_dynamodb_item(items[0])

    def find_all(self) -> list[DiscountCode]:
        """全件を作成日時の新しい順に取得する."""
        items: list[dict[str, Any]] = []
        kwargs: dict[str, Any] = {}
        while True:
            response = self._table.scan(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key
        discounts = [self._from_dynamodb_item(item) for item in items]
        return sorted(discounts, key=lambda d: d.created_at, reverse=True)

    def delete(self, discount_id: str) -> None:
        """割引コードを削除する."""
        self._table.delete_item(Key={"discount_id": discount_id})

    @staticmethod
    def _to_dynamodb_item(discount: DiscountCode) -> dict[str, Any]:
        """DiscountCodeエンティティをDynamoDBアイテムに変換."""
        item: dict[str, Any] = {
            "discount_id": discount.discount_id,
            "code": discount.code,
            "discount_percent": Decimal(str(discount.discount_percent)),
            "max_uses": discount.max_uses,
            "current_uses": discount.current_uses,
            "active": discount.active,
            "min_order_amount": Decimal(str(discount.min_order_amount)),
            "created_at": discount.created_at.isoformat(),
        }
        if discount.description is not None:
            item["description"] = discount.description
        if discount.start_date is not None:
            item["start_date"] = discount.start_date.isoformat()
        if discount.end_date is not None:
            item["end_date"] = discount.end_date.isoformat()
        return item

    @staticmethod
    def _from_dynamodb_item(item: dict[str, Any]) -> DiscountCode:
        """DynamoDBアイテムをDiscountCodeエンティティに変換."""
        start_date = item.get("start_date")
        end_date = item.get("end_date")
        return DiscountCode(
            discount_id=item["discount_id"],
            code=item["code"],
            discount_percent=float(item["discount_percent"]),
            description=item.get("description"),
            max_uses=int(item.get("max_uses", 0)),
            current_uses=int(item.get("current_uses", 0)),
            active=bool(item.get("active", True)),
            start_date=date.fromisoformat(start_date) if start_date else None,
            end_date=date.fromisoformat(end_date) if end_date else None,
            min_order_amount=float(item.get("min_order_amount", 0)),
            created_at=datetime.fromisoformat(item["created_at"]),
        )
