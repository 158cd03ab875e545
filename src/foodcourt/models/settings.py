from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from foodcourt.constants import (
    DEFAULT_DELIVERY_FEE,
    DEFAULT_FREE_DELIVERY_THRESHOLD,
    DEFAULT_THEME_COLOR,
)
from foodcourt.models._shared import parse_float


class ThemeSettings(BaseModel):
    customerThemeColor: str = DEFAULT_THEME_COLOR


class DeliverySettings(BaseModel):
    deliveryFee: float = DEFAULT_DELIVERY_FEE
    freeDeliveryThreshold: float = DEFAULT_FREE_DELIVERY_THRESHOLD


class AppSettings(BaseModel):
    theme: ThemeSettings = ThemeSettings()
    delivery: DeliverySettings = DeliverySettings()

    @classmethod
    def from_raw(cls, data: dict[str, Any] | None) -> AppSettings:
        """Build settings from the ``settings`` node; falsy values use defaults."""
        data = data if isinstance(data, dict) else {}
        theme = data.get("theme") if isinstance(data.get("theme"), dict) else {}
        delivery = data.get("delivery") if isinstance(data.get("delivery"), dict) else {}

        return cls(
            theme=ThemeSettings(
                customerThemeColor=theme.get("customerThemeColor") or DEFAULT_THEME_COLOR,
            ),
            delivery=DeliverySettings(
                deliveryFee=parse_float(
                    delivery.get("deliveryFee") or DEFAULT_DELIVERY_FEE, DEFAULT_DELIVERY_FEE
                ),
                freeDeliveryThreshold=parse_float(
                    delivery.get("freeDeliveryThreshold") or DEFAULT_FREE_DELIVERY_THRESHOLD,
                    DEFAULT_FREE_DELIVERY_THRESHOLD,
                ),
            ),
        )
