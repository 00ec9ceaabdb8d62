import logging
import threading

from pymongo import ASCENDING, MongoClient
from pymongo.errors import PyMongoError

from ballotbox.config import (
    ELECTIONS_COLLECTION,
    MONGO_DB,
    MONGO_TIMEOUT_MS,
    MONGO_URI,
    USERS_COLLECTION,
    VOTES_COLLECTION,
)
from ballotbox.exceptions import StoreError

logger = logging.getLogger(__name__)


class MongoConnector:
    """Process-wide MongoDB handle, created lazily on first use."""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls._connect()
        return cls._instance

    @classmethod
    def _connect(cls):
        instance = super(MongoConnector, cls).__new__(cls)
        instance.client = None
        try:
            instance.client = MongoClient(MONGO_URI, serverSelectionTimeoutMS=MONGO_TIMEOUT_MS)
            instance.db = instance.client[MONGO_DB]
            instance.elections = instance.db[ELECTIONS_COLLECTION]
            instance.votes = instance.db[VOTES_COLLECTION]
            instance.users = instance.db[USERS_COLLECTION]
            instance.ensure_indexes()
        except PyMongoError as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            # Half-built clients still run monitor threads
            if instance.client is not None:
                instance.client.close()
            raise StoreError(f"Could not connect to the record store: {e}") from e
        logger.info(f"Connected to MongoDB: {MONGO_DB}")
        return instance

    def ensure_indexes(self):
        # One vote per user per election, enforced by the store
        self.votes.create_index(
            [("election_id", ASCENDING), ("user_id", ASCENDING)],
            unique=True,
            name="uniq_election_user",
        )
        self.elections.create_index([("created_by", ASCENDING)])
        self.elections.create_index([("end_date", ASCENDING)])
        self.users.create_index("email", unique=True)

    @classmethod
    def reset(cls):
        """Drop the cached connection; the next use reconnects."""
        with cls._lock:
            if cls._instance is not None:
                cls._instance.client.close()
            cls._instance = None


def election_collection():
    return MongoConnector().elections


def vote_collection():
    return MongoConnector().votes


def user_collection():
    return MongoConnector().users
