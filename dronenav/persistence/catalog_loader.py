"""Load the airspace zone and regulation catalogs from JSON files.

Each catalog file is a JSON array of records in the wire shape served by
the web application (camelCase keys; zone geometry either normalized or
GeoJSON-ish ``coordinates``).  The bundled catalogs live in
``dronenav/data/``.

Invalid records are skipped with a warning so one bad entry never takes
the whole catalog down.  A missing or unreadable file raises
:class:`CatalogFileError`.

Environment Variables:
    DRONENAV_CATALOG_DIR: directory holding ``airspace_zones.json`` and
                          ``regulations.json`` (default: bundled data)
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from dronenav.contracts.airspace import AirspaceZone
from dronenav.contracts.regulation import Regulation
from dronenav.persistence.errors import CatalogFileError

logger = logging.getLogger(__name__)

BUNDLED_CATALOG_DIR = Path(__file__).resolve().parent.parent / "data"
ZONES_FILENAME = "airspace_zones.json"
REGULATIONS_FILENAME = "regulations.json"

M = TypeVar("M", bound=BaseModel)


def catalog_dir() -> Path:
    """Configured catalog directory, falling back to the bundled data."""
    configured = os.environ.get("DRONENAV_CATALOG_DIR")
    return Path(configured) if configured else BUNDLED_CATALOG_DIR


def parse_records(raw: list, model: type[M], source: str = "<memory>") -> list[M]:
    """Validate *raw* dicts as *model*, dropping the ones that fail."""
    records: list[M] = []
    for index, item in enumerate(raw):
        try:
            records.append(model.model_validate(item))
        except ValidationError as exc:
            ident = item.get("id") if isinstance(item, dict) else None
            logger.warning(
                "Skipping invalid %s record #%d (id=%s) in %s: %s",
                model.__name__, index, ident, source, exc.errors()[0]["msg"],
            )
    return records


def _read_array(path: Path) -> list:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise CatalogFileError(str(path), "file not found") from None
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogFileError(str(path), f"unreadable: {exc}") from exc
    if not isinstance(data, list):
        raise CatalogFileError(str(path), "expected a JSON array of records")
    return data


def load_zones(path: Path | None = None) -> list[AirspaceZone]:
    path = path or catalog_dir() / ZONES_FILENAME
    zones = parse_records(_read_array(path), AirspaceZone, str(path))
    logger.info("Loaded %d airspace zones from %s", len(zones), path)
    return zones


def load_regulations(path: Path | None = None) -> list[Regulation]:
    path = path or catalog_dir() / REGULATIONS_FILENAME
    regulations = parse_records(_read_array(path), Regulation, str(path))
    logger.info("Loaded %d regulations from %s", len(regulations), path)
    return regulations
