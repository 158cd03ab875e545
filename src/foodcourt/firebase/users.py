"""User profile and delivery partner records."""

from datetime import datetime, timezone
from typing import Any

from foodcourt.config import FirebaseConfig
from foodcourt.constants import DELIVERY_PARTNERS_PATH, USERS_PATH
from foodcourt.firebase.client import get_reference
from foodcourt.models import UserData


def save_new_user_data(config: FirebaseConfig, uid: str, data: dict[str, Any]) -> None:
    """Write a new profile at users/{uid}, stamping createdAt."""
    record = {**data, "createdAt": datetime.now(timezone.utc).isoformat()}
    get_reference(config, f"{USERS_PATH}/{uid}").set(record)


def fetch_user_data(config: FirebaseConfig, uid: str) -> UserData | None:
    data = get_reference(config, f"{USERS_PATH}/{uid}").get()
    if data is None:
        return None
    return UserData.from_raw(uid, data if isinstance(data, dict) else {})


def check_is_delivery_partner(config: FirebaseConfig, uid: str) -> bool:
    return get_reference(config, f"{DELIVERY_PARTNERS_PATH}/{uid}").get() is not None
