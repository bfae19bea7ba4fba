"""商品スナップショットエンティティ."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from ..value_objects import UNCATEGORIZED, ProductCategory


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_images(record: dict[str, Any]) -> tuple[str, ...]:
    """images（リスト/JSON文字列）または単一のimageから画像URLのタプルを得る."""
    images = record.get("images")
    if isinstance(images, (list, tuple)):
        return tuple(str(image) for image in images if image)
    if isinstance(images, str) and images:
        try:
            parsed = json.loads(images)
        except json.JSONDecodeError:
            return (images,)
        if isinstance(parsed, list):
            return tuple(str(image) for image in parsed if image)
        return ()
    image = record.get("image")
    if isinstance(image, str) and image:
        return (image,)
    return ()


def _parse_category(value: Any) -> ProductCategory | str:
    if isinstance(value, ProductCategory):
        return value
    if isinstance(value, dict):
        return ProductCategory.from_record(value)
    if isinstance(value, str):
        return value
    return UNCATEGORIZED


@dataclass(frozen=True)
class Product:
    """カートが保持する商品のスナップショット.

    カタログ側のレコードは参照せず、追加時点のコピーを保持する。
    """

    id: str
    name: str = ""
    price: float = 0.0
    images: tuple[str, ...] = ()
    description: str = ""
    category_id: str = ""
    featured: bool = False
    is_new: bool = False
    discount: float = 0
    category: ProductCategory | str = UNCATEGORIZED
    unit: str = ""
    stock: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    # 以下は表示用で永続化しない
    original_price: float = 0
    size: str = ""
    color: str = ""
    material: str = ""
    brand: str = ""
    gender: str = ""

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.id:
            raise ValueError("Product id cannot be empty")

    @classmethod
    def from_record(cls, record: Product | dict[str, Any]) -> Product:
        """商品レコードを正規化してスナップショットを生成する.

        欠損した任意フィールドは安全なデフォルト値で補う。
        """
        if isinstance(record, Product):
            return record

        price = record.get("price")
        stock = record.get("stock")
        discount = record.get("discount")
        original_price = record.get("original_price")
        return cls(
            id=str(record.get("id") or ""),
            name=str(record.get("name") or ""),
            price=float(price) if _is_number(price) else 0.0,
            images=_parse_images(record),
            description=str(record.get("description") or ""),
            category_id=str(record.get("category_id") or ""),
            featured=bool(record.get("featured")),
            is_new=bool(record.get("is_new")),
            discount=discount if _is_number(discount) else 0,
            category=_parse_category(record.get("category")),
            unit=str(record.get("unit") or ""),
            stock=int(stock) if _is_number(stock) else None,
            created_at=record.get("created_at") or None,
            updated_at=record.get("updated_at") or None,
            original_price=original_price if _is_number(original_price) else 0,
            size=str(record.get("size") or ""),
            color=str(record.get("color") or ""),
            material=str(record.get("material") or ""),
            brand=str(record.get("brand") or ""),
            gender=str(record.get("gender") or ""),
        )

    def to_snapshot(self) -> dict[str, Any]:
        """ストレージに書き込む安全な射影を返す."""
        snapshot: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "images": list(self.images),
            "description": self.description,
            "category_id": self.category_id,
            "featured": self.featured,
            "is_new": self.is_new,
            "discount": self.discount,
            "unit": self.unit,
        }
        if isinstance(self.category, ProductCategory):
            snapshot["category"] = self.category.to_record()
        else:
            snapshot["category"] = self.category
        if self.stock is not None:
            snapshot["stock"] = self.stock
        if self.created_at is not None:
            snapshot["created_at"] = self.created_at
        if self.updated_at is not None:
            snapshot["updated_at"] = self.updated_at
        return snapshot

    def has_stock_limit(self) -> bool:
        """在庫上限が既知か判定する."""
        return self.stock is not None

    @property
    def primary_image(self) -> str | None:
        """先頭の画像URL."""
        return self.images[0] if self.images else None
