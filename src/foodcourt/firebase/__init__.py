"""Firebase client and operations."""

from foodcourt.firebase.auth import (
    AuthError,
    on_auth_changed,
    register_with_email,
    sign_in_with_email,
    sign_in_with_google,
    sign_out_user,
)
from foodcourt.firebase.catalog import fetch_banners, fetch_categories, fetch_dishes
from foodcourt.firebase.client import get_reference
from foodcourt.firebase.orders import (
    delete_order,
    listen_for_user_orders,
    place_new_order,
    update_order,
)
from foodcourt.firebase.settings import fetch_app_settings
from foodcourt.firebase.users import check_is_delivery_partner, fetch_user_data, save_new_user_data
from foodcourt.firebase.wishlist import (
    add_wishlist_item,
    fetch_wishlist_items,
    listen_for_wishlist_updates,
    remove_wishlist_item,
)

__all__ = [
    "AuthError",
    "add_wishlist_item",
    "check_is_delivery_partner",
    "delete_order",
    "fetch_app_settings",
    "fetch_banners",
    "fetch_categories",
    "fetch_dishes",
    "fetch_user_data",
    "fetch_wishlist_items",
    "get_reference",
    "listen_for_user_orders",
    "listen_for_wishlist_updates",
    "on_auth_changed",
    "place_new_order",
    "register_with_email",
    "remove_wishlist_item",
    "save_new_user_data",
    "sign_in_with_email",
    "sign_in_with_google",
    "sign_out_user",
    "update_order",
]
