import os
from dotenv import load_dotenv

load_dotenv()

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "catalog")
PRODUCTS_COLLECTION = os.getenv("PRODUCTS_COLLECTION", "products")

# Leave unset to run the test suite against the in-process engine
MONGO_TEST_URI = os.getenv("MONGO_TEST_URI") or None
TEST_DB_START_TIMEOUT = float(os.getenv("TEST_DB_START_TIMEOUT", "60"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
