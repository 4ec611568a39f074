#!/usr/bin/env python3
"""
Business Directory Service
Entry point for the four directory operations: category listing, detail view,
business creation and business update.
"""

from typing import Any, Dict, List, Union

from src.db.db_interface import get_db_session
from src.business_directory.business_detail import BusinessDetailAssembler
from src.business_directory.business_writer import BusinessWriter
from src.business_directory.category_list import CategoryListAssembler
from src.business_directory.schemas import BusinessDetail, BusinessInfo, BusinessRecord, CategoryListing
from src.business_directory.tag_resolver import TagResolver
from src.utils.log import get_logger, logging_context

logger = get_logger(__name__)


class BusinessDirectoryService:
    """Wires the assemblers and the writer to one session factory."""

    def __init__(self, session_factory=get_db_session, parallel_reads=None, skip_empty_tags=None):
        self.tag_resolver = TagResolver(session_factory)
        self.category_list = CategoryListAssembler(session_factory, self.tag_resolver, parallel_reads)
        self.business_detail = BusinessDetailAssembler(session_factory, self.tag_resolver, parallel_reads)
        self.writer = BusinessWriter(session_factory, skip_empty_tags)
        logger.info("✅ Initialized BusinessDirectoryService")

    def list_by_category(self, category: str) -> List[CategoryListing]:
        with logging_context({"operation": "list_by_category", "category": category}):
            listings = self.category_list.list_by_category(category)
            logger.info(f"📋 Listed {len(listings)} businesses in category '{category}'")
        return listings

    def get_details(self, business_id: str) -> BusinessDetail:
        with logging_context({"operation": "get_details", "business_id": business_id}):
            detail = self.business_detail.get_details(business_id)
            logger.info(f"🔍 Fetched details for business {business_id} "
                        f"({sum(len(v) for v in detail.images.values())} images, {len(detail.tags)} tags)")
        return detail

    def create(self, business_info: Union[BusinessInfo, Dict[str, Any]]) -> BusinessRecord:
        business_id = business_info.id if isinstance(business_info, BusinessInfo) else business_info.get("id")
        with logging_context({"operation": "create", "business_id": business_id}):
            return self.writer.create(business_info)

    def update(self, business_id: str, update_info: Dict[str, Any]) -> BusinessRecord:
        with logging_context({"operation": "update", "business_id": business_id}):
            return self.writer.update(business_id, update_info)
