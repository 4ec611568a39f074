"""Pydantic shapes returned by the business directory."""

from datetime import datetime, time
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BusinessTag(BaseModel):
    """One resolved (business, tag name) pair."""
    business_id: str
    tag_name: str


class CategoryListing(BaseModel):
    """Summary record used by the category listing view."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: Optional[str] = None
    location: Optional[str] = None
    main_image: Optional[str] = Field(default=None, alias="mainImage")
    tags: List[str] = Field(default_factory=list)


class _BusinessFields(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    category: Optional[str] = None
    platform: Optional[str] = None
    platform_id: Optional[str] = None
    name: Optional[str] = None
    location: Optional[str] = None
    weekday_open_time: Optional[time] = None
    weekday_close_time: Optional[time] = None
    weekend_open_time: Optional[time] = None
    weekend_close_time: Optional[time] = None
    dayon: Optional[str] = None
    dayoff: Optional[str] = None
    store_number: Optional[str] = None
    contents: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BusinessDetail(_BusinessFields):
    """
    Detail view of one business.

    The registration name/number and owner are not declared here, so they are
    dropped even when present on the source row.
    """
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    images: Dict[str, List[str]] = Field(default_factory=dict)
    tags: List[str] = Field(default_factory=list)


class BusinessRecord(_BusinessFields):
    """A full business row, as returned by create and update."""
    business_registration_name: Optional[str] = None
    business_registration_number: Optional[str] = None
    business_owner: Optional[str] = None


class BusinessInfo(BaseModel):
    """Caller input for creating a business. `species` is a comma separated tag list."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: Optional[str] = None
    location: Optional[str] = None
    dayon: Optional[str] = None
    dayoff: Optional[str] = None
    store_number: Optional[str] = None
    contents: Optional[str] = None
    business_registration_name: Optional[str] = None
    business_registration_number: Optional[str] = None
    business_owner: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    species: Optional[str] = None
