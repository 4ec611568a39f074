"""
Category List Assembler
Builds the category listing view: business + main image + tag names.
"""

from functools import partial
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from src.db.db import get_businesses_by_category, get_main_images
from src.db.db_interface import get_db_session
from src.env_var_injection import parallel_reads_enabled
from src.business_directory.exceptions import StoreFailure, TagFetchError
from src.business_directory.lookups import fetch_with, run_lookups
from src.business_directory.schemas import CategoryListing
from src.business_directory.tag_resolver import TagResolver, group_tag_names_by_business
from src.utils.log import get_logger

logger = get_logger(__name__)


class CategoryListAssembler:
    """Produces one CategoryListing per business in a category."""

    def __init__(self, session_factory=get_db_session, tag_resolver=None, parallel_reads=None):
        self.session_factory = session_factory
        self.tag_resolver = tag_resolver or TagResolver(session_factory)
        self.parallel_reads = parallel_reads_enabled() if parallel_reads is None else parallel_reads

    def list_by_category(self, category: str) -> List[CategoryListing]:
        try:
            businesses, main_images, business_tags = run_lookups([
                partial(fetch_with, self.session_factory, get_businesses_by_category, category),
                partial(fetch_with, self.session_factory, get_main_images),
                self.tag_resolver.resolve_all_tags_grouped_by_business,
            ], parallel=self.parallel_reads)
        except (SQLAlchemyError, TagFetchError) as e:
            logger.error(f"Error fetching businesses with details: {e}")
            raise StoreFailure("Failed to fetch businesses with details") from e

        # First main image in fetch order wins
        main_image_by_business = {}
        for image in main_images:
            main_image_by_business.setdefault(image.business_id, image.endpoint)
        tags_by_business = group_tag_names_by_business(business_tags)

        return [
            CategoryListing(
                id=business.id,
                name=business.name,
                location=business.location,
                main_image=main_image_by_business.get(business.id),
                tags=tags_by_business.get(business.id, []),
            )
            for business in businesses
        ]
