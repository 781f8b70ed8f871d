from .yaml_catalog_loader import DEFAULT_CATALOG_PATH, load_framework_catalog, parse_framework_catalog

__all__ = ["DEFAULT_CATALOG_PATH", "load_framework_catalog", "parse_framework_catalog"]
