"""Seed the catalog with the placeholder dataset."""

from typing import Any

from tqdm import tqdm

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


def catalog_records() -> dict[str, dict[str, Any]]:
    """
    Placeholder catalog as a multi-path update keyed by database path.

    Dishes and categories are stored without their key field, banners in
    their stored shape ({imageUrl, title}).
    """
    records: dict[str, dict[str, Any]] = {}

    for category in PLACEHOLDER_CATEGORIES:
        record = {k: v for k, v in category.items() if k != "id"}
        records[f"{CATEGORIES_PATH}/{category['id']}"] = record

    for dish in PLACEHOLDER_DISHES:
        record = {k: v for k, v in dish.items() if k != "key"}
        records[f"{DISHES_PATH}/{dish['key']}"] = record

    for index, image in enumerate(PLACEHOLDER_SLIDER_IMAGES, start=1):
        records[f"{BANNERS_PATH}/banner-{index}"] = {
            "imageUrl": image["downloadURL"],
            "title": image["title"],
        }

    return records


def seed_catalog(
    config: FirebaseConfig,
    batch_size: int = 50,
    dry_run: bool = False,
) -> dict[str, int]:
    """
    Write the placeholder catalog, ``batch_size`` paths per update.

    Returns:
        Number of records per top-level path
    """
    records = catalog_records()
    counts: dict[str, int] = {}
    for path in records:
        top = path.split("/", 1)[0]
        counts[top] = counts.get(top, 0) + 1

    if dry_run:
        return counts

    root = get_reference(config, "/")
    batch: dict[str, Any] = {}

    for path, record in tqdm(records.items(), desc="Seeding catalog"):
        batch[path] = record

        # Commit every batch_size paths
        if len(batch) >= batch_size:
            root.update(batch)
            batch = {}

    # Commit remaining
    if batch:
        root.update(batch)

    return counts
