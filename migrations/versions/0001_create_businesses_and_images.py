"""create businesses and images"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
	op.create_table(
		"businesses",
		sa.Column("id", sa.Text, primary_key=True),
		sa.Column("category", sa.Text, nullable=False),
		sa.Column("platform", sa.Text),
		sa.Column("platform_id", sa.Text),
		sa.Column("name", sa.Text),
		sa.Column("location", sa.Text),
		sa.Column("weekday_open_time", sa.Time),
		sa.Column("weekday_close_time", sa.Time),
		sa.Column("weekend_open_time", sa.Time),
		sa.Column("weekend_close_time", sa.Time),
		sa.Column("dayon", sa.Text),
		sa.Column("dayoff", sa.Text),
		sa.Column("store_number", sa.Text),
		sa.Column("contents", sa.Text),
		sa.Column("business_registration_name", sa.Text),
		sa.Column("business_registration_number", sa.Text),
		sa.Column("business_owner", sa.Text),
		sa.Column("email", sa.Text),
		sa.Column("phone", sa.Text),
		sa.Column("created_at", sa.TIMESTAMP(timezone=True),
		          server_default=sa.func.now()),
		sa.Column("updated_at", sa.TIMESTAMP(timezone=True),
		          server_default=sa.func.now()),
	)
	op.create_index("ix_businesses_category", "businesses", ["category"])

	op.create_table(
		"images",
		sa.Column("image_id", sa.Integer, primary_key=True),
		sa.Column("endpoint", sa.Text, nullable=False),
		sa.Column("image_type", sa.Text, nullable=False),
		sa.Column("business_id", sa.Text,
		          sa.ForeignKey("businesses.id", ondelete="CASCADE"), nullable=False),
	)
	op.create_index("ix_images_image_type", "images", ["image_type"])
	op.create_index("ix_images_business_id", "images", ["business_id"])


def downgrade():
	op.drop_index("ix_images_business_id", table_name="images")
	op.drop_index("ix_images_image_type", table_name="images")
	op.drop_table("images")
	op.drop_index("ix_businesses_category", table_name="businesses")
	op.drop_table("businesses")
