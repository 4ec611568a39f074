# src/business_directory/__init__.py

from .exceptions import (
    BusinessDirectoryError, StoreFailure, TagFetchError, DuplicateBusinessError,
    BusinessNotFoundError, NoChangeOrNotFoundError, TagProcessingError,
)
from .schemas import BusinessTag, CategoryListing, BusinessDetail, BusinessRecord, BusinessInfo
from .tag_resolver import TagResolver
from .category_list import CategoryListAssembler
from .business_detail import BusinessDetailAssembler
from .business_writer import BusinessWriter
from .tag_normalizer import process_and_save_tags
from .service import BusinessDirectoryService
