"""Catalog reads: dishes, categories and banners."""

import logging

from foodcourt.config import FirebaseConfig
from foodcourt.constants import (
    BANNERS_PATH,
    CATEGORIES_PATH,
    DISHES_PATH,
    PLACEHOLDER_CATEGORIES,
    PLACEHOLDER_DISHES,
    PLACEHOLDER_SLIDER_IMAGES,
)
from foodcourt.firebase.client import get_reference
from foodcourt.models import Category, Dish, SliderImage
from foodcourt.models._shared import children

logger = logging.getLogger(__name__)


def placeholder_dishes() -> list[Dish]:
    return [Dish.from_raw(dish["key"], dish) for dish in PLACEHOLDER_DISHES]


def placeholder_categories() -> list[Category]:
    return [Category(**category) for category in PLACEHOLDER_CATEGORIES]


def placeholder_slider_images() -> list[SliderImage]:
    return [SliderImage(**image) for image in PLACEHOLDER_SLIDER_IMAGES]


def fetch_categories(config: FirebaseConfig) -> list[Category]:
    """All categories, or the placeholder set if there are none or the read fails."""
    try:
        data = get_reference(config, CATEGORIES_PATH).get()
        categories = [
            Category.from_raw(key, value)
            for key, value in children(data)
            if isinstance(value, dict)
        ]
    except Exception as e:
        logger.error("Error fetching categories: %s", e)
        return placeholder_categories()

    return categories or placeholder_categories()


def fetch_dishes(config: FirebaseConfig, pincode: str | None = None) -> list[Dish]:
    """
    Fetch and normalize dishes served in ``pincode``.

    Dishes marked "ALL" are always included; without a pincode nothing is
    filtered. If the read fails the placeholder catalog is returned as is.

    Args:
        config: Firebase configuration
        pincode: Customer pincode, or None to skip filtering

    Returns:
        List of normalized dishes in database order
    """
    try:
        data = get_reference(config, DISHES_PATH).get()
        dishes = []
        for key, value in children(data):
            if not isinstance(value, dict):
                continue
            dish = Dish.from_raw(key, value)
            if dish.is_available_in(pincode):
                dishes.append(dish)
    except Exception as e:
        logger.error("Error fetching dishes: %s", e)
        return placeholder_dishes()

    logger.debug("Fetched %d dishes for pincode %s", len(dishes), pincode or "-")
    return dishes


def fetch_banners(config: FirebaseConfig) -> list[SliderImage]:
    """Banners that have an image, or the placeholder slider images."""
    try:
        data = get_reference(config, BANNERS_PATH).get()
        images = [
            SliderImage(downloadURL=value["imageUrl"], title=value.get("title"))
            for _, value in children(data)
            if isinstance(value, dict) and value.get("imageUrl")
        ]
    except Exception as e:
        logger.error("Error fetching banners: %s", e)
        return placeholder_slider_images()

    return images or placeholder_slider_images()
