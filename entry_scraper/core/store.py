import logging
from typing import Optional, Protocol

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from entry_scraper.config.settings import settings
from entry_scraper.core.events import (
    StoreLookupError,
    StoreUnavailableError,
    StoreWriteError,
)
from entry_scraper.core.models import JobRecord

logger = logging.getLogger(__name__)


class JobStore(Protocol):
    """
    Keyed persistence for job records; `url` is the unique key.
    """

    def find_by_url(self, url: str) -> Optional[JobRecord]: ...

    def create(self, record: JobRecord) -> None: ...


class MongoJobStore:
    """
    JobStore backed by a MongoDB collection with a unique index on `url`.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    @classmethod
    def from_settings(cls) -> "MongoJobStore":
        try:
            client = MongoClient(settings.MONGO_URI)
        except (PyMongoError, ValueError) as e:
            # The URI is parsed here; the server is only contacted on first use
            raise StoreUnavailableError(f"Invalid MongoDB configuration: {e}") from e
        collection = client[settings.MONGO_DATABASE][settings.MONGO_COLLECTION]
        logger.info(
            f"Using MongoDB collection {settings.MONGO_DATABASE}.{settings.MONGO_COLLECTION}"
        )
        return cls(collection)

    def ensure_indexes(self) -> None:
        """
        Create the unique url index. Safe to call multiple times.
        """
        try:
            self.collection.create_index(
                [("url", ASCENDING)], unique=True, name="ux_url"
            )
        except PyMongoError as e:
            raise StoreWriteError(f"Failed to create url index: {e}") from e

    def find_by_url(self, url: str) -> Optional[JobRecord]:
        try:
            doc = self.collection.find_one({"url": url}, {"_id": 0})
        except PyMongoError as e:
            raise StoreLookupError(f"Lookup failed for {url}: {e}") from e
        if doc is None:
            return None
        return JobRecord.from_document(doc)

    def create(self, record: JobRecord) -> None:
        if not record.url:
            raise StoreWriteError("Refusing to store a job without a url")
        try:
            self.collection.insert_one(record.to_document())
        except PyMongoError as e:
            # DuplicateKeyError included: the url is already stored
            raise StoreWriteError(f"Insert failed for {record.url}: {e}") from e
