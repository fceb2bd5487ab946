import pytest
from httpx import ASGITransport, AsyncClient

from app.core.app import app
from app.models.fashion import FashionItem, PinterestBoard
from app.services.catalog import catalog_store, load_sample_board

BASE = "http://test"


@pytest.fixture
def sample_board() -> PinterestBoard:
    return load_sample_board()


@pytest.fixture
def sample_catalog() -> list[FashionItem]:
    catalog_store.load()
    return catalog_store.all_items()


@pytest.fixture
async def client():
    catalog_store.load()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c
