from app.services.catalog import CatalogStore, catalog_store


def get_catalog_store() -> CatalogStore:
    """Catalog dependency; loads lazily when the app runs without its lifespan (e.g. under test clients)."""
    catalog_store.ensure_loaded()
    return catalog_store
