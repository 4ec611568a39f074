"""Turns free-text tag input into tag rows and business-tag relations."""

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from src.db.db import get_or_create_tag, create_tag_relation
from src.business_directory.exceptions import TagProcessingError
from src.utils.log import get_logger
from src.utils.strings import split_tag_names

logger = get_logger(__name__)


def process_and_save_tags(session, species: Optional[str], business_id: str,
                          skip_empty: bool = False) -> List[int]:
    """
    Link a business to every tag named in `species`, creating missing tags.

    Whitespace is stripped and the input split on commas. For each name the tag is looked
    up by exact name and created if absent, then a relation is always inserted, even when
    the same link already exists. Each name is committed on its own, so a failure keeps
    whatever was linked before it.

    Returns the tag ID resolved for each candidate name, in input order.
    """
    tag_ids = []
    try:
        for tag_name in split_tag_names(species, skip_empty=skip_empty):
            if not tag_name:
                logger.warning(f"Saving empty tag name for business {business_id} (species={species!r})")
            tag_id = get_or_create_tag(session, tag_name)
            create_tag_relation(session, business_id, tag_id)
            session.commit()
            tag_ids.append(tag_id)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Error processing and saving tags: {e}")
        raise TagProcessingError() from e

    logger.info(f"🏷️ Linked business {business_id} to {len(tag_ids)} tags")
    return tag_ids
