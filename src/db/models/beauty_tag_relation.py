# src/db/models/beauty_tag_relation.py

from sqlalchemy import Column, Integer, Text, ForeignKey
from src.db.db_interface import DbInterface


class BeautyTagRelation(DbInterface):
	__tablename__ = "beauty_tag_relations"

	# Surrogate key: (business_id, tag_id) pairs are allowed to repeat
	relation_id = Column(Integer, primary_key=True)
	business_id = Column(Text, ForeignKey("businesses.id", ondelete="CASCADE"), nullable=False, index=True)
	# No FK: relations may outlive the tag they point at
	tag_id = Column(Integer, nullable=False, index=True)
