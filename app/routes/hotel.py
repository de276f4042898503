"""
Hotel routes - bulk listing, updates, removal, browsing and search
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Header, HTTPException, Query, status
from pydantic import ValidationError

from app.config.database import Collections
from app.config.settings import settings
from app.database.db_operations import db_ops, PERSISTENCE_ERRORS
from app.models.hotel import (
    HotelCreate,
    HotelUpdate,
    HotelListEnvelope,
    HotelEnvelope,
    HotelSearchEnvelope,
    HotelsAddedEnvelope,
    HotelCountEnvelope,
    MessageEnvelope,
)
from app.utils.auth import require_admin, require_write_access, require_bulk_delete_access
from app.utils.helpers import serialize_doc, serialize_docs, to_object_id, escape_search_term

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Hotels"])

NEWEST_FIRST = [("createdAt", -1)]

def internal_error(detail: Any = "An error occurred") -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


@router.post("/add-hotel", response_model=HotelsAddedEnvelope)
async def add_hotels(
    hotels: Any = Body(None),
    admin: dict = Depends(require_admin)
):
    """
    Add a batch of hotels (admin only).
    Items that fail validation or insertion are logged and skipped; the
    request only fails when none of them could be stored.
    """
    if not isinstance(hotels, list):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be an array of hotels"
        )

    saved_hotels = []
    for index, item in enumerate(hotels):
        try:
            hotel = HotelCreate.model_validate(item)
        except ValidationError as exc:
            logger.warning("Skipping hotel #%d: %s", index, exc.errors(include_url=False))
            continue

        try:
            created_hotel = await db_ops.create(Collections.HOTELS, hotel.model_dump())
        except PERSISTENCE_ERRORS as exc:
            logger.warning("Error saving hotel #%d (%s): %s", index, hotel.name, exc)
            continue
        saved_hotels.append(serialize_doc(created_hotel))

    if not saved_hotels:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No hotels were added due to errors"
        )

    logger.info("Admin %s added %d/%d hotels", admin["_id"], len(saved_hotels), len(hotels))
    return {"message": "Hotels added successfully", "hotels": saved_hotels}


@router.put("/update-hotel", response_model=MessageEnvelope)
async def update_hotel(
    hotel_update: Any = Body(None),
    hotel_id: Optional[str] = Header(None, alias="hotelid"),
    actor: Optional[dict] = Depends(require_write_access)
):
    """
    Overwrite the supplied listing fields of a hotel; owner and rating are left alone.
    A body that does not fit the hotel schema is a failed write, not a 422.
    """
    try:
        update = HotelUpdate.model_validate(hotel_update if hotel_update is not None else {})
    except ValidationError as exc:
        logger.warning("Rejected update for hotel %s: %s", hotel_id, exc.errors(include_url=False))
        raise internal_error()

    # Explicit nulls are skipped so stored hotels always keep their required fields
    update_data = update.model_dump(exclude_unset=True, exclude_none=True)

    try:
        await db_ops.update(Collections.HOTELS, hotel_id, update_data)
    except PERSISTENCE_ERRORS:
        logger.exception("Error updating hotel %s", hotel_id)
        raise internal_error()

    return {"message": "Hotel updated successfully!"}


@router.delete("/delete-hotel", response_model=MessageEnvelope)
async def delete_hotel(
    hotel_id: Optional[str] = Header(None, alias="hotelid"),
    actor: Optional[dict] = Depends(require_write_access)
):
    """Delete a single hotel"""
    try:
        await db_ops.delete(Collections.HOTELS, hotel_id)
    except PERSISTENCE_ERRORS:
        logger.exception("Error deleting hotel %s", hotel_id)
        raise internal_error()

    return {"message": "Hotel deleted successfully!"}


@router.delete("/delete-all-hotels", response_model=MessageEnvelope)
async def delete_all_hotels(
    actor: dict = Depends(require_bulk_delete_access)
):
    """Delete every hotel in the collection"""
    try:
        deleted = await db_ops.delete_many(Collections.HOTELS)
    except PERSISTENCE_ERRORS as exc:
        logger.exception("Error deleting all hotels")
        raise internal_error({"message": "An error occurred", "error": str(exc)})

    logger.info("Deleted %d hotels on behalf of %s", deleted, actor.get("sub") or actor.get("_id"))
    return {"message": "All hotels deleted successfully!"}


@router.get("/get-all-hotels", response_model=HotelListEnvelope)
async def get_all_hotels():
    """Get all hotels, newest first"""
    try:
        hotels = await db_ops.get_all(Collections.HOTELS, sort=NEWEST_FIRST)
    except PERSISTENCE_ERRORS:
        logger.exception("Error fetching hotels")
        raise internal_error()

    return {"status": "Success", "data": serialize_docs(hotels)}


@router.get("/get-recent-hotels", response_model=HotelListEnvelope)
async def get_recent_hotels():
    """Get the most recently added hotels"""
    try:
        hotels = await db_ops.get_all(
            Collections.HOTELS,
            sort=NEWEST_FIRST,
            limit=settings.RECENT_HOTELS_LIMIT
        )
    except PERSISTENCE_ERRORS:
        logger.exception("Error fetching recent hotels")
        raise internal_error()

    return {"status": "Success", "data": serialize_docs(hotels)}


@router.get("/get-hotel-by-id/{hotel_id}", response_model=HotelEnvelope)
async def get_hotel_by_id(hotel_id: str):
    """Get hotel by ID. An unknown ID still answers 200 with null data."""
    try:
        hotel = await db_ops.get_one(Collections.HOTELS, {"_id": to_object_id(hotel_id)})
    except PERSISTENCE_ERRORS:
        logger.exception("Error fetching hotel %s", hotel_id)
        raise internal_error()

    return {"status": "Success", "data": serialize_doc(hotel)}


@router.get("/search", response_model=HotelSearchEnvelope)
async def search_hotels(query: Optional[str] = Query(None)):
    """Case-insensitive substring search on hotel name"""
    if not query or not query.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query is required"
        )

    filter_query: Dict = {"name": {"$regex": escape_search_term(query), "$options": "i"}}
    try:
        hotels = await db_ops.get_all(Collections.HOTELS, filter_query)
    except PERSISTENCE_ERRORS:
        logger.exception("Error searching hotels for %r", query)
        raise internal_error("Internal server error")

    if not hotels:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No hotels found"
        )

    return {"status": "Success", "hotels": serialize_docs(hotels)}


@router.get("/total-hotels", response_model=HotelCountEnvelope)
async def total_hotels():
    """Get total number of hotels"""
    try:
        total = await db_ops.count(Collections.HOTELS)
    except PERSISTENCE_ERRORS:
        logger.exception("Error fetching total hotels")
        raise internal_error({
            "status": "Error",
            "message": "An error occurred while fetching total hotels"
        })

    return {"status": "Success", "count": total}
