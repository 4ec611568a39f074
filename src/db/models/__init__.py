# src/db/models/__init__.py

from src.db.db_interface import DbInterface

# Import all model classes so they're registered with DbInterface.metadata
from .business import Business, SENSITIVE_BUSINESS_FIELDS
from .image import Image, MAIN_IMAGE_TYPE
from .beauty_tag import BeautyTag
from .beauty_tag_relation import BeautyTagRelation
