# src/db/models/beauty_tag.py

from sqlalchemy import Column, Integer, Text
from src.db.db_interface import DbInterface


class BeautyTag(DbInterface):
	__tablename__ = "beauty_tags"

	tag_id = Column(Integer, primary_key=True)
	# Case and whitespace sensitive as typed
	tag_name = Column(Text, unique=True, nullable=False)
