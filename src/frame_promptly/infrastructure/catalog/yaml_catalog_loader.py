from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from frame_promptly.core.domain.catalog import FrameworkCatalog
from frame_promptly.core.exceptions import CatalogError
from frame_promptly.infrastructure.catalog.catalog_manifest_model import CatalogManifestModel
from frame_promptly.infrastructure.observability import get_logger

logger = get_logger("catalog")

DEFAULT_CATALOG_PATH = Path(__file__).with_name("framework_catalog.yaml")


def parse_framework_catalog(raw: str) -> FrameworkCatalog:
    """Parses and validates catalog YAML text into the domain catalog."""
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in framework catalog: {e}") from e

    if not isinstance(data, dict):
        raise CatalogError("Framework catalog must be a mapping with a 'frameworks' key")

    try:
        manifest = CatalogManifestModel(**data)
    except ValidationError as e:
        raise CatalogError(f"Framework catalog failed validation: {e}") from e
    return manifest.to_domain()


@lru_cache
def load_framework_catalog(path: Path | None = None) -> FrameworkCatalog:
    catalog_path = path or DEFAULT_CATALOG_PATH
    if not catalog_path.exists():
        raise CatalogError(f"Framework catalog not found at {catalog_path}")

    catalog = parse_framework_catalog(catalog_path.read_text(encoding="utf-8"))
    logger.info(
        "Framework catalog loaded",
        path=str(catalog_path),
        frameworks=len(catalog.frameworks),
    )
    return catalog
