"""MongoDB connection handle.

The client is opened and closed explicitly, typically through
``with MongoStore(...) as db:``. Prices travel as Decimal128 via a type
codec and dates come back timezone-aware in UTC.
"""

from __future__ import annotations

import logging
from datetime import timezone
from decimal import Decimal

from bson.codec_options import TypeCodec, TypeRegistry
from bson.decimal128 import Decimal128
from bson.errors import InvalidId
from bson.objectid import ObjectId
from pymongo import ASCENDING, TEXT, MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)

PRODUCTS = "products"
USERS = "users"
ORDERS = "orders"


class DecimalCodec(TypeCodec):
    python_type = Decimal
    bson_type = Decimal128

    def transform_python(self, value: Decimal) -> Decimal128:
        return Decimal128(value)

    def transform_bson(self, value: Decimal128) -> Decimal:
        return value.to_decimal()


def to_object_id(raw: str | None) -> ObjectId | None:
    """Parse a stored id; None when *raw* is not a valid ObjectId."""
    if not raw:
        return None
    try:
        return ObjectId(raw)
    except (InvalidId, TypeError):
        return None


class MongoStore:

    def __init__(self, uri: str, database_name: str) -> None:
        self._uri = uri
        self._database_name = database_name
        self._client: MongoClient | None = None

    def open(self) -> Database:
        self._client = MongoClient(
            self._uri,
            tz_aware=True,
            tzinfo=timezone.utc,
            type_registry=TypeRegistry([DecimalCodec()]),
        )
        db = self._client[self._database_name]
        self._ensure_indexes(db)
        logger.info(f"Connected to MongoDB database '{self._database_name}'")
        return db

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed.")

    def __enter__(self) -> Database:
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def _ensure_indexes(db: Database) -> None:
        db[PRODUCTS].create_index([("name", TEXT), ("description", TEXT)])
        db[PRODUCTS].create_index([("category", ASCENDING)])
        db[PRODUCTS].create_index([("price", ASCENDING)])
        db[USERS].create_index([("email", ASCENDING)], unique=True)
        db[ORDERS].create_index([("user_id", ASCENDING)])
