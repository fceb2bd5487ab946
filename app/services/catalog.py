import json
from pathlib import Path

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from app.core.config import settings
from app.models.fashion import FashionItem, PinterestBoard
from app.utils.items import filter_by_categories, filter_by_price_range

# app/services/catalog.py -> app/services -> app
DATA_DIR = Path(__file__).resolve().parent.parent / "data"
SAMPLE_CATALOG_PATH = DATA_DIR / "sample_catalog.json"
SAMPLE_BOARD_PATH = DATA_DIR / "sample_board.json"

_catalog_adapter = TypeAdapter(list[FashionItem])


class CatalogLoadError(RuntimeError):
    """Raised when a catalog file cannot be read or parsed."""


def _read_json(path: Path):
    try:
        with path.open(encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogLoadError(f"Failed to read {path}: {exc}") from exc


def load_catalog_file(path: Path) -> list[FashionItem]:
    try:
        return _catalog_adapter.validate_python(_read_json(path))
    except ValidationError as exc:
        raise CatalogLoadError(f"Invalid catalog in {path}: {exc}") from exc


def load_sample_board() -> PinterestBoard:
    try:
        return PinterestBoard.model_validate(_read_json(SAMPLE_BOARD_PATH))
    except ValidationError as exc:
        raise CatalogLoadError(f"Invalid sample board in {SAMPLE_BOARD_PATH}: {exc}") from exc


class CatalogStore:
    """
    In-memory catalog for the web service.

    Loaded once at startup and read-only afterwards. Items are keyed by id;
    when a file repeats an id, the first entry wins.
    """

    def __init__(self):
        self._items: dict[str, FashionItem] = {}
        self.source: Path | None = None

    @property
    def is_loaded(self) -> bool:
        return self.source is not None

    def load(self, path: Path | None = None) -> int:
        """
        Load the catalog from ``path``, the configured CATALOG_PATH, or the bundled sample.

        Returns:
            Number of items loaded
        """
        source = path or settings.CATALOG_PATH or SAMPLE_CATALOG_PATH
        items = load_catalog_file(Path(source))

        self._items = {}
        for item in items:
            if item.id in self._items:
                logger.warning(f"Duplicate catalog id {item.id} in {source}, keeping the first entry")
                continue
            self._items[item.id] = item

        self.source = Path(source)
        logger.info(f"Loaded {len(self._items)} items into catalog from {source}")
        return len(self._items)

    def ensure_loaded(self) -> None:
        if not self.is_loaded:
            self.load()

    def get(self, item_id: str) -> FashionItem | None:
        return self._items.get(item_id)

    def all_items(self) -> list[FashionItem]:
        return list(self._items.values())

    def list_items(
        self,
        category: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
    ) -> list[FashionItem]:
        items = self.all_items()
        if category:
            items = filter_by_categories(items, [category])
        if min_price is not None or max_price is not None:
            items = filter_by_price_range(
                items,
                min_price if min_price is not None else 0.0,
                max_price if max_price is not None else float("inf"),
            )
        return items

    def __len__(self) -> int:
        return len(self._items)


catalog_store = CatalogStore()
