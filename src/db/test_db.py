#!/usr/bin/env python3
"""
Test Database Setup

Provides an in-memory test database and a factory that seeds it through the same
store functions the directory uses.
"""

from contextlib import contextmanager
from typing import Generator, List, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.db.db_interface import DbInterface
from src.db.models.business import Business
from src.db.models.beauty_tag import BeautyTag
from src.db.models.beauty_tag_relation import BeautyTagRelation
from src.db.db import create_business, create_image, get_or_create_tag, create_tag_relation


class TestDatabase:
    """Test database with proper setup and teardown."""
    __test__ = False

    def __init__(self, database_url: str = "sqlite://"):
        self.database_url = database_url
        self.engine = None
        self.SessionLocal = None
        self.session = None

    def setup(self):
        """Set up test database with all tables."""
        if self.database_url == "sqlite://":
            # One shared connection so every session sees the same in-memory database
            self.engine = create_engine(
                self.database_url,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False}
            )
        else:
            self.engine = create_engine(self.database_url, connect_args={"check_same_thread": False})

        DbInterface.metadata.create_all(self.engine)

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.session = self.SessionLocal()

    def teardown(self):
        """Clean up test database."""
        if self.session:
            self.session.close()
        if self.engine:
            DbInterface.metadata.drop_all(self.engine)
            self.engine.dispose()

    @contextmanager
    def get_session(self) -> Generator:
        """Yield the shared test session."""
        try:
            yield self.session
        except Exception:
            self.session.rollback()
            raise
        finally:
            self.session.commit()

    @contextmanager
    def new_session(self) -> Generator:
        """Yield a fresh session per call, for lookups running on worker threads."""
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()


class TestDataFactory:
    """Factory for creating test data using the main database API."""
    __test__ = False

    @staticmethod
    def create_test_business(session, business_id: str = "b1", category: str = "beauty", **kwargs) -> Business:
        """Create a business row; the creation defaults are applied and category overridden afterwards."""
        business_info = {
            "id": business_id,
            "name": kwargs.get("name", f"Test Business {business_id}"),
            "location": kwargs.get("location", "Seoul"),
            "dayon": kwargs.get("dayon"),
            "dayoff": kwargs.get("dayoff"),
            "store_number": kwargs.get("store_number"),
            "contents": kwargs.get("contents"),
            "business_registration_name": kwargs.get("business_registration_name", "Registered Co."),
            "business_registration_number": kwargs.get("business_registration_number", "123-45-67890"),
            "business_owner": kwargs.get("business_owner", "Owner Kim"),
            "email": kwargs.get("email", f"{business_id}@example.com"),
            "phone": kwargs.get("phone", "010-0000-0000"),
        }
        business = create_business(session, business_info)
        business.category = category
        session.commit()
        return business

    @staticmethod
    def create_test_image(session, business_id: str, endpoint: Optional[str] = None,
                          image_type: str = "main") -> int:
        """Create an image for a business."""
        endpoint = endpoint or f"/images/{business_id}/{image_type}.jpg"
        image_id = create_image(session, business_id, endpoint, image_type)
        session.commit()
        return image_id

    @staticmethod
    def create_test_tags(session, business_id: str, tag_names: List[str]) -> List[int]:
        """Get-or-create tags and link each one to the business."""
        tag_ids = []
        for tag_name in tag_names:
            tag_id = get_or_create_tag(session, tag_name)
            create_tag_relation(session, business_id, tag_id)
            tag_ids.append(tag_id)
        session.commit()
        return tag_ids

    @staticmethod
    def create_dangling_relation(session, business_id: str) -> int:
        """Link a business to a tag ID that has no tag row."""
        missing_tag_id = (session.query(BeautyTag.tag_id).order_by(BeautyTag.tag_id.desc()).first() or (0,))[0] + 1000
        relation = BeautyTagRelation(business_id=business_id, tag_id=missing_tag_id)
        session.add(relation)
        session.commit()
        return missing_tag_id


# Sample creation inputs for different scenarios
SAMPLE_BUSINESSES = {
    "salon": {
        "id": "b1",
        "name": "Salon X",
        "location": "Seoul",
        "dayon": "Mon-Sat",
        "dayoff": "Sun",
        "store_number": "02-123-4567",
        "contents": "Nail art and care",
        "business_registration_name": "Salon X Co.",
        "business_registration_number": "111-22-33333",
        "business_owner": "Lee",
        "email": "salon@example.com",
        "phone": "010-1111-2222",
        "species": "nails,nails",
    },
    "spa": {
        "id": "b2",
        "name": "Spa Y",
        "location": "Busan",
        "species": "skin care, massage,  facial",
    },
    "trailing_comma": {
        "id": "b3",
        "name": "Shop Z",
        "location": "Incheon",
        "species": "waxing,",
    },
}
