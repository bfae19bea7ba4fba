"""永続化されたカートのシリアライズ/正規化ドメインサービス."""
from __future__ import annotations

import json
from typing import Any

from ..entities import CartLine, Product


class CorruptCartPayloadError(Exception):
    """永続化されたカートが解釈できないエラー."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Corrupt cart payload: {reason}")


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _valid_quantity(value: Any) -> int | None:
    """正の整数として解釈できる数量を返す（不正ならNone）."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    if value <= 0:
        return None
    return int(value)


class CartPayloadCodec:
    """カート行とストレージ上のJSON配列を相互変換するサービス."""

    @staticmethod
    def to_record(line: CartLine) -> dict[str, Any]:
        """カート行をストレージ安全な射影に変換する."""
        record: dict[str, Any] = {
            "product": line.product.to_snapshot(),
            "quantity": line.quantity,
        }
        if line.selected_color is not None:
            record["selectedColor"] = line.selected_color
        if line.selected_size is not None:
            record["selectedSize"] = line.selected_size
        if line.selected_type is not None:
            record["selected_type"] = line.selected_type
        if line.customization_id is not None:
            record["customizationId"] = line.customization_id
        return record

    @classmethod
    def encode(cls, lines: list[CartLine]) -> str:
        """カート行のリストをJSON文字列にする."""
        return json.dumps([cls.to_record(line) for line in lines], ensure_ascii=False)

    @staticmethod
    def normalize(payload: Any) -> list[CartLine]:
        """任意のJSON値から整形式のカート行だけを取り出す.

        オブジェクトでないもの、product.id が偽のもの、数量が正の数でないものは捨てる。
        """
        if not isinstance(payload, list):
            return []

        lines: list[CartLine] = []
        for entry in payload:
            if not isinstance(entry, dict):
                continue
            product = entry.get("product")
            if not isinstance(product, dict) or not product.get("id"):
                continue
            quantity = _valid_quantity(entry.get("quantity"))
            if quantity is None:
                continue
            selected_type = entry.get("selected_type", entry.get("selectedType"))
            lines.append(
                CartLine(
                    product=Product.from_record(product),
                    quantity=quantity,
                    selected_color=_optional_str(entry.get("selectedColor")),
                    selected_size=_optional_str(entry.get("selectedSize")),
                    selected_type=_optional_str(selected_type),
                    customization_id=_optional_str(entry.get("customizationId")),
                )
            )
        return lines

    @classmethod
    def decode(cls, raw: str) -> list[CartLine]:
        """JSON文字列をパースして正規化する.

        Raises:
            CorruptCartPayloadError: JSONとして解釈できない、または配列でない場合
        """
        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise CorruptCartPayloadError(str(e)) from e
        if not isinstance(payload, list):
            raise CorruptCartPayloadError(f"expected a list, got {type(payload).__name__}")
        return cls.normalize(payload)
