from pydantic import BaseModel, Field, validator
from datetime import datetime
from typing import List, Optional

class HotelBase(BaseModel):
    # Basic Info
    name: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)

    # Pricing & Availability
    pricePerNight: float = Field(..., ge=0)
    roomsAvailable: int = Field(default=0, ge=0)

    # Media
    facilities: List[str] = []
    images: List[str] = []

    # Back-reference to the listing user, not an ownership check
    owner: Optional[str] = None
    rating: float = Field(default=0, ge=0, le=5)

    @validator('name', 'location', 'category')
    def strip_text(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Field cannot be blank')
        return v

class HotelCreate(HotelBase):
    @validator('facilities', 'images')
    def drop_blank_entries(cls, v):
        return [item.strip() for item in v if item and item.strip()]

class HotelUpdate(BaseModel):
    # owner and rating are deliberately absent: updates never touch them.
    # Explicit nulls are dropped by the route, blanks are rejected.
    name: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    pricePerNight: Optional[float] = Field(None, ge=0)
    facilities: Optional[List[str]] = None
    images: Optional[List[str]] = None
    roomsAvailable: Optional[int] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1)

    @validator('name', 'location', 'category')
    def strip_text(cls, v):
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError('Field cannot be blank')
        return v

class HotelResponse(HotelBase):
    id: str = Field(alias="_id")
    createdAt: datetime
    updatedAt: datetime

    class Config:
        populate_by_name = True
        json_encoders = {datetime: lambda v: v.isoformat()}

# Response envelopes

class HotelListEnvelope(BaseModel):
    status: str = "Success"
    data: List[HotelResponse]

class HotelEnvelope(BaseModel):
    status: str = "Success"
    data: Optional[HotelResponse] = None

class HotelSearchEnvelope(BaseModel):
    status: str = "Success"
    hotels: List[HotelResponse]

class HotelsAddedEnvelope(BaseModel):
    message: str = "Hotels added successfully"
    hotels: List[HotelResponse]

class HotelCountEnvelope(BaseModel):
    status: str = "Success"
    count: int

class MessageEnvelope(BaseModel):
    message: str
