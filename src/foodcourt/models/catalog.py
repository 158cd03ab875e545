from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from foodcourt.constants import ALL_PINCODES, PLACEHOLDER_IMAGE_URL
from foodcourt.models._shared import parse_float


def _as_text(value: Any, default: str) -> str:
    if not value:
        return default
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class Price(BaseModel):
    final: float = 0.0
    restaurantPrice: float = 0.0
    adminFee: float = 0.0

    @classmethod
    def from_raw(cls, value: Any) -> Price:
        """Accept either a plain number or a {final, restaurantPrice, adminFee} node."""
        if isinstance(value, dict):
            return cls(
                final=parse_float(value.get("final")),
                restaurantPrice=parse_float(value.get("restaurantPrice")),
                adminFee=parse_float(value.get("adminFee")),
            )
        amount = parse_float(value)
        return cls(final=amount, restaurantPrice=amount, adminFee=0.0)


class Dish(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    key: str
    name: str = ""
    categoryId: str = "uncategorized"
    pincode: str = ALL_PINCODES
    discount: float = 0.0
    unit: str = "Unit N/A"
    description: str = "No description available."
    isInStock: bool = True
    price: Price = Price()
    customerPrice: float = 0.0
    images: list[str] = Field(default_factory=lambda: [PLACEHOLDER_IMAGE_URL])
    imageUrl: str | None = None

    @classmethod
    def from_raw(cls, key: str, data: dict[str, Any]) -> Dish:
        """
        Normalize a stored dish.

        Missing category and pincode fall back to "uncategorized" and "ALL",
        the price is always returned in structured form and ``customerPrice``
        is the final price with the discount percentage taken off.
        """
        price = Price.from_raw(data.get("price"))
        discount = parse_float(data.get("discount") or 0)

        images = data.get("images")
        if not isinstance(images, list) or not images:
            images = [data.get("imageUrl") or PLACEHOLDER_IMAGE_URL]

        in_stock = data.get("isInStock")

        return cls.model_validate(
            {
                **data,
                "key": key,
                "name": data.get("name") or "",
                "categoryId": _as_text(data.get("categoryId"), "uncategorized"),
                "pincode": _as_text(data.get("pincode"), ALL_PINCODES),
                "discount": discount,
                "unit": data.get("unit") or "Unit N/A",
                "description": data.get("description") or "No description available.",
                "isInStock": True if in_stock is None else bool(in_stock),
                "price": price,
                "customerPrice": price.final * (1 - discount / 100),
                "images": images,
                "imageUrl": data.get("imageUrl") or None,
            }
        )

    def is_available_in(self, pincode: str | None) -> bool:
        """True if the dish is served everywhere, or in ``pincode``."""
        if not pincode:
            return True
        return self.pincode == ALL_PINCODES or self.pincode == pincode


class Category(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str
    name: str = ""
    imageUrl: str | None = None

    @classmethod
    def from_raw(cls, key: str, data: dict[str, Any]) -> Category:
        # a stored "id" field wins over the record key
        return cls.model_validate({"id": key, **data})


class SliderImage(BaseModel):
    downloadURL: str
    title: str | None = None


class WishlistItem(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    key: str
    name: str = ""
