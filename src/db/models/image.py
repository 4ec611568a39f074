# src/db/models/image.py

from sqlalchemy import Column, Integer, Text, ForeignKey
from src.db.db_interface import DbInterface

MAIN_IMAGE_TYPE = "main"


class Image(DbInterface):
	__tablename__ = "images"

	image_id = Column(Integer, primary_key=True)
	endpoint = Column(Text, nullable=False)
	# e.g. "main", "gallery"; a business may have any number of each
	image_type = Column(Text, nullable=False, index=True)
	business_id = Column(Text, ForeignKey("businesses.id", ondelete="CASCADE"), nullable=False, index=True)
