import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from app.core.exceptions import SeedDataError
from app.repositories.base import EntityRepository

logger = logging.getLogger(__name__)


def load_seed_file(path: str) -> Dict[str, list]:
    """
    Read a seed document of the form
        {"lawcase": [...], "lawclient": [...], "lawyer": [...]}
    Missing kinds are allowed.
    """
    seed_path = Path(path)
    if not seed_path.is_file():
        raise SeedDataError(f"Seed file not found: {seed_path}")

    try:
        with open(seed_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Seed file is not valid JSON: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SeedDataError(f"Seed file cannot be read: {e}") from e

    if not isinstance(data, dict):
        raise SeedDataError("Seed file must contain a JSON object")
    return data


def seed_stores(stores: Mapping[str, EntityRepository], data: Mapping[str, Any]) -> Dict[str, int]:
    """
    Validate and add seed rows into the matching stores, in file order.
    Returns how many rows each store received.
    """
    unknown = set(data) - set(stores)
    if unknown:
        raise SeedDataError(f"Unknown kinds in seed data: {sorted(unknown)}")

    summary: Dict[str, int] = {}
    for kind, rows in data.items():
        store = stores[kind]
        if not isinstance(rows, list):
            raise SeedDataError(f"Seed data for '{kind}' must be a list")

        for row in rows:
            try:
                entity = store.model.model_validate(row)
            except ValidationError as e:
                raise SeedDataError(f"Invalid {kind} row {row!r}: {e}") from e
            store.add(entity)

        summary[kind] = len(rows)
        logger.info("Seeded %s %s rows", len(rows), kind)

    return summary
