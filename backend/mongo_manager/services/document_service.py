"""
Document service translating console operations into driver calls.

Provides:
- Collection listing for a database
- Paginated document listing
- Insert / replace / delete of single documents
- Ad-hoc find, findOne and count queries
"""
import logging
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from mongo_manager.core.encoding import (
    JSONValue,
    document_id_candidates,
    encode_value,
    parse_filter,
    to_bson,
)
from mongo_manager.core.exceptions import DriverError, UnsupportedOperationError
from mongo_manager.database.connections import ConnectionManager
from mongo_manager.schemas.documents import (
    CollectionInfo,
    DeleteResult,
    DocumentPage,
    InsertResult,
    ReplaceResult,
)
from mongo_manager.schemas.query import QueryOperation

logger = logging.getLogger(__name__)


class DocumentService:
    """Service for browsing and editing documents of the connected deployment."""

    def __init__(self, connection: ConnectionManager, query_result_limit: int = 100):
        """Initialize with the connection manager."""
        self.connection = connection
        self.query_result_limit = query_result_limit

    def _collection(self, db_name: str, collection_name: str) -> AsyncIOMotorCollection:
        return self.connection.get_database(db_name)[collection_name]

    # ==================== Databases & Collections ====================

    async def list_databases(self) -> list[dict[str, Any]]:
        """List databases with their size on disk."""
        return await self.connection.list_databases()

    async def list_collections(self, db_name: str) -> list[CollectionInfo]:
        """
        List collections and views of a database.

        A database that does not exist simply has no collections.
        """
        db = self.connection.get_database(db_name)
        try:
            cursor = await db.list_collections()
            infos = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"listCollections on {db_name} failed: {e}")
            raise DriverError(str(e)) from e

        return [
            CollectionInfo(name=info["name"], type=info.get("type") or "collection")
            for info in infos
        ]

    # ==================== Documents ====================

    async def list_documents(
        self,
        db_name: str,
        collection_name: str,
        page: int = 1,
        limit: int = 20,
    ) -> DocumentPage:
        """
        Get one page of documents in natural order.

        Args:
            db_name: Database name
            collection_name: Collection name
            page: Page number, starting at 1
            limit: Documents per page

        Returns:
            DocumentPage; pages past the end hold no documents
        """
        collection = self._collection(db_name, collection_name)
        skip = (page - 1) * limit

        try:
            cursor = collection.find({}).skip(skip).limit(limit)
            docs = await cursor.to_list(length=limit)
            total = await collection.count_documents({})
        except PyMongoError as e:
            logger.error(f"Listing {db_name}.{collection_name} failed: {e}")
            raise DriverError(str(e)) from e

        total_pages = (total + limit - 1) // limit

        return DocumentPage(
            documents=[encode_value(doc) for doc in docs],
            total_count=total,
            page=page,
            total_pages=total_pages,
        )

    async def insert_document(
        self,
        db_name: str,
        collection_name: str,
        document: dict[str, JSONValue],
    ) -> InsertResult:
        """Insert a document; MongoDB assigns an _id when none is given."""
        collection = self._collection(db_name, collection_name)
        bson_document = to_bson(document)
        try:
            result = await collection.insert_one(bson_document)
        except PyMongoError as e:
            logger.error(f"Insert into {db_name}.{collection_name} failed: {e}")
            raise DriverError(str(e)) from e

        logger.info(f"Inserted document {result.inserted_id} into {db_name}.{collection_name}")
        return InsertResult(
            acknowledged=result.acknowledged,
            inserted_id=encode_value(result.inserted_id),
        )

    async def replace_document(
        self,
        db_name: str,
        collection_name: str,
        doc_id: str,
        document: dict[str, JSONValue],
    ) -> ReplaceResult:
        """
        Replace the document with the given identifier.

        The _id is immutable, so any _id in the replacement body is dropped.
        No match is reported through matchedCount, not as an error.
        """
        collection = self._collection(db_name, collection_name)
        replacement = {key: value for key, value in to_bson(document).items() if key != "_id"}

        try:
            result = await collection.replace_one(
                {"_id": {"$in": document_id_candidates(doc_id)}},
                replacement,
            )
        except PyMongoError as e:
            logger.error(f"Replace of {doc_id} in {db_name}.{collection_name} failed: {e}")
            raise DriverError(str(e)) from e

        logger.info(
            f"Replaced document {doc_id} in {db_name}.{collection_name} "
            f"(matched: {result.matched_count})"
        )
        return ReplaceResult(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_id=encode_value(result.upserted_id),
        )

    async def delete_document(
        self,
        db_name: str,
        collection_name: str,
        doc_id: str,
    ) -> DeleteResult:
        """Delete the document with the given identifier."""
        collection = self._collection(db_name, collection_name)
        try:
            result = await collection.delete_one({"_id": {"$in": document_id_candidates(doc_id)}})
        except PyMongoError as e:
            logger.error(f"Delete of {doc_id} in {db_name}.{collection_name} failed: {e}")
            raise DriverError(str(e)) from e

        logger.info(
            f"Deleted document {doc_id} from {db_name}.{collection_name} "
            f"(deleted: {result.deleted_count})"
        )
        return DeleteResult(acknowledged=result.acknowledged, deleted_count=result.deleted_count)

    # ==================== Ad-hoc Queries ====================

    async def execute_query(
        self,
        db_name: str,
        collection_name: str,
        filter_text: Optional[str],
        operation: str = QueryOperation.FIND.value,
    ) -> JSONValue:
        """
        Run a find, findOne or count query.

        The filter is parsed before anything is sent to the database.

        Raises:
            InvalidFilterError: filter_text is not a JSON object
            UnsupportedOperationError: operation is not find, findOne or count
        """
        query = parse_filter(filter_text)

        try:
            op = QueryOperation(operation)
        except ValueError:
            raise UnsupportedOperationError(operation) from None

        collection = self._collection(db_name, collection_name)
        try:
            if op is QueryOperation.FIND:
                cursor = collection.find(query).limit(self.query_result_limit)
                docs = await cursor.to_list(length=self.query_result_limit)
                return [encode_value(doc) for doc in docs]
            if op is QueryOperation.FIND_ONE:
                doc = await collection.find_one(query)
                return encode_value(doc)
            return await collection.count_documents(query)
        except PyMongoError as e:
            logger.error(f"Query {operation} on {db_name}.{collection_name} failed: {e}")
            raise DriverError(str(e)) from e
