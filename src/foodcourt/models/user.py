from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Address(BaseModel):
    state: str = ""
    district: str = ""
    line: str = ""


class UserData(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    uid: str
    name: str = "User Name"
    email: str | None = None
    mobile: str = ""
    pincode: str = ""
    address: Address = Address()
    profileImageUrl: str | None = None
    createdAt: str | None = None

    @classmethod
    def from_raw(cls, uid: str, data: dict[str, Any]) -> UserData:
        """Map a stored ``users/{uid}`` node to a profile, filling blanks."""
        address = data.get("address") or {}
        if not isinstance(address, dict):
            address = {}

        return cls(
            uid=uid,
            name=data.get("name") or "User Name",
            email=data.get("email") or None,
            mobile=str(data.get("mobile") or ""),
            pincode=str(data.get("pincode") or ""),
            address=Address(
                state=address.get("state") or "",
                district=address.get("district") or "",
                line=address.get("line") or "",
            ),
            profileImageUrl=data.get("profileImageUrl") or None,
            createdAt=data.get("createdAt") or None,
        )
