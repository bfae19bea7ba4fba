"""カートストレージのDynamoDB実装."""
import logging
import os
from datetime import datetime, timedelta, timezone
from typing import Any

import boto3
from botocore.exceptions import ClientError

from src.domain.ports import CartStorage

logger = logging.getLogger(__name__)

# TTL: 30日
DEFAULT_TTL_DAYS = 30


class DynamoDBCartStorage(CartStorage):
    """ストレージキーをパーティションキーとしてJSONを保持するDynamoDB実装."""

    def __init__(self, table_name: str | None = None, ttl_days: int | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "CART_TABLE_NAME", "storefront-cart"
        )
        if ttl_days is None:
            ttl_days = int(os.environ.get("CART_TTL_DAYS", DEFAULT_TTL_DAYS))
        self._ttl_days = ttl_days
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def get_item(self, key: str) -> str | None:
        """キーの値を取得する."""
        try:
            response = self._table.get_item(Key={"storage_key": key})
        except ClientError as e:
            logger.error(f"Failed to get cart {key}: {e}")
            raise
        item = response.get("Item")
        if item is None:
            return None
        return item.get("payload")

    def set_item(self, key: str, value: str) -> None:
        """キーに値を書き込む."""
        try:
            self._table.put_item(Item=self._to_dynamodb_item(key, value))
        except ClientError as e:
            logger.error(f"Failed to save cart {key}: {e}")
            raise

    def remove_item(self, key: str) -> None:
        """キーを削除する."""
        try:
            self._table.delete_item(Key={"storage_key": key})
        except ClientError as e:
            logger.error(f"Failed to delete cart {key}: {e}")
            raise

    def _to_dynamodb_item(self, key: str, value: str) -> dict[str, Any]:
        """DynamoDBアイテムに変換."""
        now = datetime.now(timezone.utc)
        ttl = int((now + timedelta(days=self._ttl_days)).timestamp())
        return {
            "storage_key": key,
            "payload": value,
            "updated_at": now.isoformat(),
            "ttl": ttl,
        }
