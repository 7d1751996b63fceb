import pytest
import pytest_asyncio

from catalog.repositories.product_repository import ProductRepository
from catalog.testing.db_helper import DbHelper


@pytest_asyncio.fixture
async def db_helper():
    """Start a disposable database, wipe it after the test, then stop it."""
    helper = DbHelper()
    await helper.start()
    yield helper
    await helper.cleanup()
    await helper.stop()


@pytest.fixture
def product_repo(db_helper):
    return ProductRepository(db_helper.db)


@pytest_asyncio.fixture
async def sample_products(db_helper, product_repo):
    """Insert the sample catalog and return the stored documents by name."""
    collection = product_repo.collection_name
    product1 = await db_helper.create_doc(collection, {
        "name": "PLUS Sewing Quilting Machine",
        "modelNum": "B880",
        "brand": "Bernina",
        "salePrice": 349.99,
        "msrp": 329.99,
        "relatedProducts": [],
    })
    product2 = await db_helper.create_doc(collection, {
        "name": "Mechanical Sewing Machine with Foot Pedal",
        "modelNum": "10",
        "brand": "Alphasew",
        "salePrice": 79.99,
        "relatedProducts": [],
    })
    product3 = await db_helper.create_doc(collection, {
        "name": "L460 Overlocker",
        "modelNum": "L460",
        "brand": "Bernina",
        "salePrice": 189.99,
        "relatedProducts": [],
    })
    product4 = await db_helper.create_doc(collection, {
        "name": "Sewing & Embroidery Machine",
        "modelNum": "NQ3600D",
        "brand": "Brother",
        "salePrice": 219.99,
        "msrp": 249.99,
        "relatedProducts": [product1["_id"], product3["_id"]],
    })
    return {
        "product1": product1,
        "product2": product2,
        "product3": product3,
        "product4": product4,
    }
