"""
Helper utility functions
"""
import re
from bson import ObjectId
from bson.errors import InvalidId
from typing import Dict, List, Optional
from datetime import datetime
import pytz

def to_object_id(doc_id: Optional[str]) -> ObjectId:
    """Convert a string ID to ObjectId, raising InvalidId when malformed"""
    if isinstance(doc_id, ObjectId):
        return doc_id
    # ObjectId(None) would mint a fresh id
    if doc_id is None:
        raise InvalidId("Document id is required")
    return ObjectId(doc_id)

def escape_search_term(term: str) -> str:
    """Escape a user supplied term so it matches literally inside $regex"""
    return re.escape(term)

def serialize_doc(doc: Optional[Dict]) -> Optional[Dict]:
    """Convert MongoDB document to JSON-serializable format"""
    if doc is None:
        return None

    # Convert any nested ObjectIds or datetimes
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            doc[key] = str(value)
        elif isinstance(value, datetime):
            if value.tzinfo is None:
                value = pytz.utc.localize(value)
            doc[key] = value.astimezone(pytz.utc).isoformat()
        elif isinstance(value, list):
            doc[key] = [serialize_doc(item) if isinstance(item, dict) else item for item in value]
        elif isinstance(value, dict):
            doc[key] = serialize_doc(value)

    return doc

def serialize_docs(docs: List[Dict]) -> List[Dict]:
    """Convert list of MongoDB documents to JSON-serializable format"""
    return [serialize_doc(doc) for doc in docs]
