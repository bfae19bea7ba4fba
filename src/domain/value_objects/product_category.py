"""商品カテゴリを表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

UNCATEGORIZED_NAME = "Uncategorized"


@dataclass(frozen=True)
class ProductCategory:
    """商品に埋め込まれたカテゴリ情報."""

    id: str = ""
    name: str = ""
    description: str = ""
    image: str = ""
    created_at: str | None = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> ProductCategory:
        """辞書から生成する（欠損フィールドは空文字）."""
        return cls(
            id=str(record.get("id") or ""),
            name=str(record.get("name") or ""),
            description=str(record.get("description") or ""),
            image=str(record.get("image") or ""),
            created_at=record.get("created_at") or None,
        )

    def to_record(self) -> dict[str, Any]:
        """辞書に変換する."""
        record: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "image": self.image,
        }
        if self.created_at is not None:
            record["created_at"] = self.created_at
        return record


# カテゴリ未設定の商品に割り当てるカテゴリ
UNCATEGORIZED = ProductCategory(name=UNCATEGORIZED_NAME)
