"""
Business Writer
Creates businesses (deriving their tags from free text) and applies partial updates.
"""

from datetime import datetime, time, timezone
from typing import Any, Dict, Union

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.db.db import (
    BUSINESS_COLUMNS, create_business, get_business_by_id, update_business
)
from src.db.db_interface import get_db_session
from src.db.models.business import Business
from src.env_var_injection import skip_empty_tags_enabled
from src.business_directory.exceptions import (
    DuplicateBusinessError, NoChangeOrNotFoundError, StoreFailure, TagProcessingError
)
from src.business_directory.schemas import BusinessInfo, BusinessRecord
from src.business_directory.tag_normalizer import process_and_save_tags
from src.utils.log import get_logger

logger = get_logger(__name__)

# Columns whose values may arrive as ISO strings in update input
_TEMPORAL_COLUMNS = {
    column.name: column.type.python_type
    for column in Business.__table__.columns
    if column.type.python_type in (time, datetime)
}


def _coerce_temporal(name: str, value: Any) -> Any:
    python_type = _TEMPORAL_COLUMNS.get(name)
    if python_type is None or not isinstance(value, str):
        return value
    return python_type.fromisoformat(value)


class BusinessWriter:
    """Write path of the directory: create and update."""

    def __init__(self, session_factory=get_db_session, skip_empty_tags=None):
        self.session_factory = session_factory
        self.skip_empty_tags = skip_empty_tags_enabled() if skip_empty_tags is None else skip_empty_tags

    def create(self, business_info: Union[BusinessInfo, Dict[str, Any]]) -> BusinessRecord:
        """
        Create a business and link it to the tags named in `species`.

        The business row is committed before tags are processed and is not rolled back
        if tag processing fails. In that case TagProcessingError is raised with the
        created record attached as `business`.
        """
        if not isinstance(business_info, BusinessInfo):
            business_info = BusinessInfo.model_validate(business_info)

        with self.session_factory() as session:
            try:
                if get_business_by_id(session, business_info.id) is not None:
                    raise DuplicateBusinessError(business_info.id)
                business = create_business(session, business_info.model_dump(exclude={"species"}))
                session.commit()
                record = BusinessRecord.model_validate(business)
            except DuplicateBusinessError:
                logger.error(f"Business {business_info.id} already exists")
                raise
            except IntegrityError as e:
                session.rollback()
                logger.error(f"Business {business_info.id} already exists: {e}")
                raise DuplicateBusinessError(business_info.id) from e
            except SQLAlchemyError as e:
                session.rollback()
                logger.error(f"Error creating business {business_info.id}: {e}")
                raise StoreFailure("Failed to create business") from e

            logger.info(f"✅ Created business {record.id}")

            try:
                process_and_save_tags(session, business_info.species, record.id,
                                      skip_empty=self.skip_empty_tags)
            except TagProcessingError as e:
                e.business = record
                raise

        return record

    def _updatable_values(self, business_id: str, update_info: Dict[str, Any]) -> Dict[str, Any]:
        ignored = sorted(key for key in update_info if key not in BUSINESS_COLUMNS or key == "id")
        if ignored:
            logger.warning(f"Ignoring non-updatable fields for business {business_id}: {ignored}")
        return {
            key: _coerce_temporal(key, value)
            for key, value in update_info.items()
            if key in BUSINESS_COLUMNS and key != "id"
        }

    def update(self, business_id: str, update_info: Dict[str, Any]) -> BusinessRecord:
        """Apply a partial update and return the re-fetched business."""
        try:
            values = self._updatable_values(business_id, update_info)
        except ValueError as e:
            logger.error(f"Invalid update for business {business_id}: {e}")
            raise StoreFailure("Failed to update business") from e

        if not values:
            raise NoChangeOrNotFoundError(business_id)
        values.setdefault("updated_at", datetime.now(timezone.utc))

        with self.session_factory() as session:
            try:
                matched = update_business(session, business_id, values)
                if matched == 0:
                    session.rollback()
                    raise NoChangeOrNotFoundError(business_id)
                session.commit()
                record = BusinessRecord.model_validate(get_business_by_id(session, business_id))
            except SQLAlchemyError as e:
                session.rollback()
                logger.error(f"Error updating business {business_id}: {e}")
                raise StoreFailure("Failed to update business") from e

        logger.info(f"✏️ Updated business {business_id}: {sorted(values)}")
        return record
