"""
Business Detail Assembler
Builds the detail view of one business: public fields, images grouped by type and tag names.
"""

from functools import partial
from typing import Dict, Iterable, List

from sqlalchemy.exc import SQLAlchemyError

from src.db.db import get_public_business_fields, get_images_for_business
from src.db.db_interface import get_db_session
from src.env_var_injection import parallel_reads_enabled
from src.business_directory.exceptions import BusinessNotFoundError, StoreFailure, TagFetchError
from src.business_directory.lookups import fetch_with, run_lookups
from src.business_directory.schemas import BusinessDetail
from src.business_directory.tag_resolver import TagResolver
from src.utils.log import get_logger

logger = get_logger(__name__)


def group_images_by_type(images: Iterable) -> Dict[str, List[str]]:
    """Map image_type -> endpoints in fetch order. Types without images get no key."""
    images_by_type = {}
    for image in images:
        images_by_type.setdefault(image.image_type, []).append(image.endpoint)
    return images_by_type


class BusinessDetailAssembler:
    """Produces the BusinessDetail of a single business."""

    def __init__(self, session_factory=get_db_session, tag_resolver=None, parallel_reads=None):
        self.session_factory = session_factory
        self.tag_resolver = tag_resolver or TagResolver(session_factory)
        self.parallel_reads = parallel_reads_enabled() if parallel_reads is None else parallel_reads

    def get_details(self, business_id: str) -> BusinessDetail:
        try:
            business, images, tags = run_lookups([
                partial(fetch_with, self.session_factory, get_public_business_fields, business_id),
                partial(fetch_with, self.session_factory, get_images_for_business, business_id),
                partial(self.tag_resolver.resolve_tag_names_for_business, business_id),
            ], parallel=self.parallel_reads)
        except (SQLAlchemyError, TagFetchError) as e:
            logger.error(f"Error fetching business details for {business_id}: {e}")
            raise StoreFailure("Failed to fetch business details") from e

        if business is None:
            raise BusinessNotFoundError(business_id)

        return BusinessDetail(**business, images=group_images_by_type(images), tags=tags)
