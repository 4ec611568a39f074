from datetime import datetime, timezone, time
from typing import List, Dict, Any, Optional, Iterable

from src.db.models.business import Business, SENSITIVE_BUSINESS_FIELDS
from src.db.models.image import Image, MAIN_IMAGE_TYPE
from src.db.models.beauty_tag import BeautyTag
from src.db.models.beauty_tag_relation import BeautyTagRelation

MIDNIGHT = time(0, 0, 0)

# Fields forced on every newly created business regardless of input
BUSINESS_CREATE_DEFAULTS = {
    "category": "beauty",
    "platform_id": "id",
    "platform": "kakao",
    "weekday_open_time": MIDNIGHT,
    "weekday_close_time": MIDNIGHT,
    "weekend_open_time": MIDNIGHT,
    "weekend_close_time": MIDNIGHT,
}

BUSINESS_COLUMNS = tuple(column.name for column in Business.__table__.columns)
PUBLIC_BUSINESS_COLUMNS = tuple(name for name in BUSINESS_COLUMNS if name not in SENSITIVE_BUSINESS_FIELDS)


# Business operations
def get_businesses_by_category(session, category: str) -> List[Any]:
    """Get id/name/location rows for every business in a category."""
    return session.query(
        Business.id, Business.name, Business.location
    ).filter(Business.category == category).all()


def get_business_by_id(session, business_id: str) -> Optional[Business]:
    """Get a full business row by ID."""
    return session.query(Business).filter_by(id=business_id).first()


def get_public_business_fields(session, business_id: str) -> Optional[Dict[str, Any]]:
    """Get a business by ID as a dict, without the sensitive registration fields."""
    columns = [getattr(Business, name) for name in PUBLIC_BUSINESS_COLUMNS]
    row = session.query(*columns).filter(Business.id == business_id).first()
    if row is None:
        return None
    return dict(row._mapping)


def create_business(session, business_info: Dict[str, Any], now: Optional[datetime] = None) -> Business:
    """Create a business with the fixed creation defaults, returns the flushed row."""
    if now is None:
        now = datetime.now(timezone.utc)

    values = {key: value for key, value in business_info.items() if key in BUSINESS_COLUMNS}
    values.update(BUSINESS_CREATE_DEFAULTS)
    values["created_at"] = now
    values["updated_at"] = now

    business = Business(**values)
    session.add(business)
    session.flush()

    return business


def update_business(session, business_id: str, update_info: Dict[str, Any]) -> int:
    """Apply a partial update to a business, returns the number of matched rows."""
    return session.query(Business).filter(
        Business.id == business_id
    ).update(update_info, synchronize_session=False)


# Image operations
def get_main_images(session) -> List[Any]:
    """Get endpoint/business_id rows for every main image, across all businesses."""
    return session.query(
        Image.endpoint, Image.business_id
    ).filter(Image.image_type == MAIN_IMAGE_TYPE).order_by(Image.image_id).all()


def get_images_for_business(session, business_id: str) -> List[Any]:
    """Get endpoint/image_type rows for one business."""
    return session.query(
        Image.endpoint, Image.image_type
    ).filter(Image.business_id == business_id).order_by(Image.image_id).all()


def create_image(session, business_id: str, endpoint: str, image_type: str) -> int:
    """Create an image, returns image ID."""
    image = Image(business_id=business_id, endpoint=endpoint, image_type=image_type)
    session.add(image)
    session.flush()

    return image.image_id


# Tag operations
def get_all_tag_relations(session) -> List[Any]:
    """Get business_id/tag_id rows for every tag relation."""
    return session.query(
        BeautyTagRelation.business_id, BeautyTagRelation.tag_id
    ).order_by(BeautyTagRelation.relation_id).all()


def get_tag_relations_for_business(session, business_id: str) -> List[Any]:
    """Get business_id/tag_id rows for one business."""
    return session.query(
        BeautyTagRelation.business_id, BeautyTagRelation.tag_id
    ).filter(
        BeautyTagRelation.business_id == business_id
    ).order_by(BeautyTagRelation.relation_id).all()


def get_tag_names_by_ids(session, tag_ids: Iterable[int]) -> Dict[int, str]:
    """Resolve a set of tag IDs in a single query, returns {tag_id: tag_name} for those that exist."""
    tag_ids = set(tag_ids)
    if not tag_ids:
        return {}
    rows = session.query(BeautyTag.tag_id, BeautyTag.tag_name).filter(
        BeautyTag.tag_id.in_(tag_ids)
    ).all()
    return {row.tag_id: row.tag_name for row in rows}


def get_tag_by_name(session, tag_name: str) -> Optional[BeautyTag]:
    """Get a tag by exact name."""
    return session.query(BeautyTag).filter_by(tag_name=tag_name).first()


def get_or_create_tag(session, tag_name: str) -> int:
    """Get or create a tag, returns tag ID."""
    tag = get_tag_by_name(session, tag_name)
    if not tag:
        tag = BeautyTag(tag_name=tag_name)
        session.add(tag)
        session.flush()

    return tag.tag_id


def create_tag_relation(session, business_id: str, tag_id: int) -> int:
    """Link a business to a tag without checking for an existing link, returns relation ID."""
    relation = BeautyTagRelation(business_id=business_id, tag_id=tag_id)
    session.add(relation)
    session.flush()

    return relation.relation_id


def get_tag_names(session) -> List[str]:
    """Get all tag names."""
    return [tag.tag_name for tag in session.query(BeautyTag).order_by(BeautyTag.tag_id).all()]


def count_tag_relations(session, business_id: Optional[str] = None) -> int:
    """Count relation rows, optionally for one business."""
    query = session.query(BeautyTagRelation)
    if business_id is not None:
        query = query.filter(BeautyTagRelation.business_id == business_id)
    return query.count()
