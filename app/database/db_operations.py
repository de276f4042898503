"""
Database operations - Generic CRUD functions for all collections
"""
from typing import List, Dict, Optional, Tuple
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError
from app.config.database import db_config
from app.utils.helpers import to_object_id
from datetime import datetime

# Errors surfaced by the storage layer, a malformed document id included
PERSISTENCE_ERRORS = (InvalidId, PyMongoError)

class DBOperations:
    """Generic database operations for MongoDB collections"""

    @staticmethod
    async def get_all(
        collection_name: str,
        filter_query: Dict = None,
        sort: Optional[List[Tuple[str, int]]] = None,
        limit: int = 0,
    ) -> List[Dict]:
        """Get documents from a collection with optional filtering, sorting and limit"""
        collection = db_config.get_collection(collection_name)
        filter_query = filter_query or {}
        cursor = collection.find(filter_query)
        if sort:
            cursor = cursor.sort(sort)
        if limit:
            cursor = cursor.limit(limit)
        documents = await cursor.to_list(length=limit or None)
        return documents

    @staticmethod
    async def get_by_id(collection_name: str, doc_id: str) -> Optional[Dict]:
        """Get a single document by ID, None when the ID is unknown or malformed"""
        collection = db_config.get_collection(collection_name)
        if not doc_id or not ObjectId.is_valid(doc_id):
            return None
        return await collection.find_one({"_id": ObjectId(doc_id)})

    @staticmethod
    async def get_one(collection_name: str, filter_query: Dict) -> Optional[Dict]:
        """Get a single document by filter query"""
        collection = db_config.get_collection(collection_name)
        document = await collection.find_one(filter_query)
        return document

    @staticmethod
    async def create(collection_name: str, document: Dict) -> Dict:
        """Create a new document"""
        collection = db_config.get_collection(collection_name)
        now = datetime.utcnow()
        document["createdAt"] = now
        document["updatedAt"] = now
        result = await collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    @staticmethod
    async def update(collection_name: str, doc_id: str, update_data: Dict) -> Optional[Dict]:
        """Update a document by ID. Raises InvalidId for a malformed ID."""
        collection = db_config.get_collection(collection_name)
        update_data["updatedAt"] = datetime.utcnow()
        result = await collection.find_one_and_update(
            {"_id": to_object_id(doc_id)},
            {"$set": update_data},
            return_document=True
        )
        return result

    @staticmethod
    async def delete(collection_name: str, doc_id: str) -> bool:
        """Delete a document by ID. Raises InvalidId for a malformed ID."""
        collection = db_config.get_collection(collection_name)
        result = await collection.delete_one({"_id": to_object_id(doc_id)})
        return result.deleted_count > 0

    @staticmethod
    async def delete_many(collection_name: str, filter_query: Dict = None) -> int:
        """Delete every document matching the filter"""
        collection = db_config.get_collection(collection_name)
        result = await collection.delete_many(filter_query or {})
        return result.deleted_count

    @staticmethod
    async def count(collection_name: str, filter_query: Dict = None) -> int:
        """Count documents in a collection"""
        collection = db_config.get_collection(collection_name)
        filter_query = filter_query or {}
        count = await collection.count_documents(filter_query)
        return count

db_ops = DBOperations()
