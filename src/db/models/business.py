# src/db/models/business.py

from sqlalchemy import Column, Text, Time, TIMESTAMP
from sqlalchemy.sql import func
from src.db.db_interface import DbInterface

# Never returned by the detail view
SENSITIVE_BUSINESS_FIELDS = (
	"business_registration_name",
	"business_registration_number",
	"business_owner",
)


class Business(DbInterface):
	__tablename__ = "businesses"

	# Caller-supplied identifier
	id = Column(Text, primary_key=True)
	category = Column(Text, nullable=False, index=True)
	platform = Column(Text)
	platform_id = Column(Text)
	name = Column(Text)
	location = Column(Text)
	weekday_open_time = Column(Time)
	weekday_close_time = Column(Time)
	weekend_open_time = Column(Time)
	weekend_close_time = Column(Time)
	dayon = Column(Text)
	dayoff = Column(Text)
	store_number = Column(Text)
	contents = Column(Text)
	business_registration_name = Column(Text)
	business_registration_number = Column(Text)
	business_owner = Column(Text)
	email = Column(Text)
	phone = Column(Text)
	created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
	updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
