"""Per-user wishlist stored under users/{uid}/wishlist."""

from typing import Any, Callable

from foodcourt.config import FirebaseConfig
from foodcourt.constants import USERS_PATH
from foodcourt.firebase.client import get_reference
from foodcourt.firebase.streams import Unsubscribe, subscribe
from foodcourt.models import WishlistItem
from foodcourt.models._shared import children


def _wishlist_path(uid: str) -> str:
    return f"{USERS_PATH}/{uid}/wishlist"


def listen_for_wishlist_updates(
    config: FirebaseConfig,
    uid: str,
    callback: Callable[[list[str]], None],
) -> Unsubscribe:
    """Deliver the wishlisted dish keys on every change."""

    def on_value(value: Any):
        callback([key for key, _ in children(value)])

    return subscribe(config, _wishlist_path(uid), on_value)


def add_wishlist_item(config: FirebaseConfig, uid: str, item: WishlistItem | dict[str, Any]) -> None:
    if isinstance(item, dict):
        item = WishlistItem.model_validate(item)
    get_reference(config, f"{_wishlist_path(uid)}/{item.key}").set(item.model_dump(exclude_none=True))


def remove_wishlist_item(config: FirebaseConfig, uid: str, dish_key: str) -> None:
    get_reference(config, f"{_wishlist_path(uid)}/{dish_key}").delete()


def fetch_wishlist_items(config: FirebaseConfig, uid: str) -> list[WishlistItem]:
    data = get_reference(config, _wishlist_path(uid)).get()
    return [
        WishlistItem.model_validate({"key": key, **value})
        for key, value in children(data)
        if isinstance(value, dict)
    ]
