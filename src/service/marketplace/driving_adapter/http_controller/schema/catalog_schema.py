"""
Catalog API Schemas - venues and artists
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class VenueCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'The Blue Room',
                'address': '12 Harbour St',
                'capacity': 250,
                'amenities': ['sound system', 'bar'],
                'images': [],
                'description': 'Intimate live music club',
            }
        }
    )

    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=512)
    capacity: int = Field(..., gt=0)
    amenities: List[str] = []
    images: List[str] = []
    description: str = ''


class VenueUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = Field(None, min_length=1, max_length=512)
    capacity: Optional[int] = Field(None, gt=0)
    amenities: Optional[List[str]] = None
    images: Optional[List[str]] = None
    description: Optional[str] = None


class VenueResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    name: str
    address: str
    capacity: int
    amenities: List[str]
    images: List[str]
    description: str
    created_at: Optional[datetime] = None


class ArtistUpdateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'description': 'Four-piece indie band',
                'experience': '120 shows since 2019',
                'genres': ['indie', 'rock'],
                'introduction_video_url': 'https://video.example.com/intro',
            }
        }
    )

    description: Optional[str] = None
    experience: Optional[str] = None
    genres: Optional[List[str]] = None
    introduction_video_url: Optional[str] = Field(None, max_length=1024)


class ArtistResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    description: str
    experience: str
    genres: List[str]
    introduction_video_url: Optional[str] = None
    rating: Optional[float] = None
    created_at: Optional[datetime] = None


class EnsureArtistResponse(ArtistResponse):
    created: bool
