"""Order placement, updates and the per-user order feed."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

from pydantic import ValidationError

from foodcourt.config import FirebaseConfig
from foodcourt.constants import DELIVERY_PARTNERS_PATH, ORDERS_PATH
from foodcourt.firebase.client import get_reference
from foodcourt.firebase.streams import Unsubscribe, subscribe
from foodcourt.models import DriverDetails, Order
from foodcourt.models._shared import children
from foodcourt.models.order import DERIVED_ORDER_FIELDS

logger = logging.getLogger(__name__)

DriverLookup = Callable[[str], DriverDetails | None]

MAX_LOOKUP_WORKERS = 8


# =============================================================================
# Writes
# =============================================================================


def place_new_order(config: FirebaseConfig, order: Order | dict[str, Any]) -> str:
    """Store a new order under a push-generated key and return the key."""
    if isinstance(order, Order):
        record = order.to_record()
    else:
        record = {k: v for k, v in order.items() if k not in DERIVED_ORDER_FIELDS}

    new_ref = get_reference(config, ORDERS_PATH).push(record)
    logger.info("Placed order %s for user %s", new_ref.key, record.get("userId"))
    return new_ref.key


def update_order(config: FirebaseConfig, order_key: str, updates: dict[str, Any]) -> None:
    get_reference(config, f"{ORDERS_PATH}/{order_key}").update(updates)


def delete_order(config: FirebaseConfig, order_key: str) -> None:
    get_reference(config, f"{ORDERS_PATH}/{order_key}").delete()


# =============================================================================
# Driver details join
# =============================================================================


def fetch_driver_details(config: FirebaseConfig, driver_id: str) -> DriverDetails | None:
    """Public profile of a delivery partner, or None if there is no record."""
    data = get_reference(config, f"{DELIVERY_PARTNERS_PATH}/{driver_id}").get()
    if not data or not isinstance(data, dict):
        return None
    return DriverDetails.from_raw(data)


def _lookup_or_simulated(lookup: DriverLookup, driver_id: str) -> DriverDetails:
    try:
        details = lookup(driver_id)
    except Exception as e:
        logger.error("Error fetching driver %s: %s", driver_id, e)
        return DriverDetails.simulated()
    return details if details is not None else DriverDetails.simulated()


def attach_driver_details(
    orders: list[Order],
    lookup: DriverLookup,
    cache: dict[str, DriverDetails],
) -> list[Order]:
    """
    Fill ``driverDetails`` on every order that is on its way.

    Each driver id missing from ``cache`` is looked up once, all lookups run
    concurrently and are awaited together. Failed or empty lookups resolve
    to the simulated driver. ``cache`` is filled in place.
    """
    pending = sorted(
        {order.dboyId for order in orders if order.needs_driver_details} - set(cache)
    )

    if pending:
        workers = min(MAX_LOOKUP_WORKERS, len(pending))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = pool.map(lambda driver_id: _lookup_or_simulated(lookup, driver_id), pending)
            cache.update(zip(pending, results))

    return [
        order.model_copy(update={"driverDetails": cache[order.dboyId]})
        if order.needs_driver_details
        else order
        for order in orders
    ]


# =============================================================================
# Order feed
# =============================================================================


def build_user_orders(
    orders_node: Any,
    uid: str,
    lookup: DriverLookup,
    cache: dict[str, DriverDetails] | None = None,
) -> list[Order]:
    """
    Turn the raw ``orders`` node into the customer's order list.

    Keeps only orders placed by ``uid``, derives the customer status, joins
    driver details for orders on their way and sorts newest first. Records
    that fail normalization are logged and skipped.
    """
    if cache is None:
        cache = {}

    user_orders = []
    for key, value in children(orders_node):
        if not isinstance(value, dict) or value.get("userId") != uid:
            continue
        try:
            user_orders.append(Order.from_raw(key, value))
        except ValidationError as e:
            logger.error("Skipping malformed order %s: %s", key, e)

    user_orders = attach_driver_details(user_orders, lookup, cache)
    user_orders.sort(key=lambda order: order.timestamp, reverse=True)
    return user_orders


def fetch_user_orders(config: FirebaseConfig, uid: str) -> list[Order]:
    """One-shot read of the order feed for ``uid``."""
    orders_node = get_reference(config, ORDERS_PATH).get()
    return build_user_orders(
        orders_node, uid, lambda driver_id: fetch_driver_details(config, driver_id)
    )


def listen_for_user_orders(
    config: FirebaseConfig,
    uid: str,
    callback: Callable[[list[Order]], None],
) -> Unsubscribe:
    """
    Deliver the customer's order list on every change to ``orders``.

    Each notification gets its own driver cache. Returns the unsubscribe
    handle; the caller must call it to stop the stream.
    """

    def lookup(driver_id: str) -> DriverDetails | None:
        return fetch_driver_details(config, driver_id)

    def on_value(orders_node: Any):
        callback(build_user_orders(orders_node, uid, lookup, cache={}))

    return subscribe(config, ORDERS_PATH, on_value)
