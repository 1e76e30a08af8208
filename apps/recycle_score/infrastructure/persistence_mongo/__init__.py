"""MongoDB Persistence Adapters."""

from recycle_score.infrastructure.persistence_mongo.address_reader_mongo import (
    MongoAddressAggregateReader,
)
from recycle_score.infrastructure.persistence_mongo.connection import MongoConnectionProvider
from recycle_score.infrastructure.persistence_mongo.submission_writer_mongo import (
    MongoSubmissionWriter,
)

__all__ = [
    "MongoAddressAggregateReader",
    "MongoConnectionProvider",
    "MongoSubmissionWriter",
]
