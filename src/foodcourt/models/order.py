from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from foodcourt.constants import (
    CUSTOMER_STATUS_MAP,
    DEFAULT_CUSTOMER_STATUS,
    DEFAULT_DRIVER_IMAGE_URL,
    ON_WAY_STATUS,
    SIMULATED_DRIVER,
)
from foodcourt.models._shared import children, parse_float

# Fields derived on read that never go back to the database
DERIVED_ORDER_FIELDS = {"k", "customerStatus", "driverDetails"}


class DriverDetails(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = ""
    mobile: str = ""
    imageUrl: str = DEFAULT_DRIVER_IMAGE_URL

    @classmethod
    def from_raw(cls, data: dict[str, Any]) -> DriverDetails:
        """Public part of a ``delivery_partners/{uid}`` profile."""
        return cls(
            name=data.get("name") or "",
            mobile=data.get("mobile") or "",
            imageUrl=data.get("profileImageUrl") or DEFAULT_DRIVER_IMAGE_URL,
        )

    @classmethod
    def simulated(cls) -> DriverDetails:
        return cls(**SIMULATED_DRIVER)


def customer_status_for(status: str | None) -> str:
    return CUSTOMER_STATUS_MAP.get(status or "", DEFAULT_CUSTOMER_STATUS)


def _timestamp(value: Any) -> int | float:
    number = parse_float(value)
    return int(number) if number.is_integer() else number


class Order(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    k: str = ""
    userId: str = ""
    status: str = ""
    customerStatus: str = DEFAULT_CUSTOMER_STATUS
    timestamp: int | float = 0
    dboyId: str | None = None
    items: list[dict[str, Any]] = Field(default_factory=list)
    driverDetails: DriverDetails | None = None

    @classmethod
    def from_raw(cls, key: str, data: dict[str, Any]) -> Order:
        status = data.get("status") or ""
        # index-keyed items come back as a list with None holes
        items = [item for _, item in children(data.get("items")) if isinstance(item, dict)]

        return cls.model_validate(
            {
                "k": key,
                **data,
                "status": status,
                "customerStatus": customer_status_for(status),
                "timestamp": _timestamp(data.get("timestamp")),
                "dboyId": data.get("dboyId") or None,
                "items": items,
            }
        )

    @property
    def needs_driver_details(self) -> bool:
        return self.customerStatus == ON_WAY_STATUS and bool(self.dboyId)

    def to_record(self) -> dict[str, Any]:
        """Dump the order as it is stored, without derived fields."""
        return self.model_dump(exclude=DERIVED_ORDER_FIELDS, exclude_none=True)
