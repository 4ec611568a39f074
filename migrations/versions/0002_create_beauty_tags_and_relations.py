"""create beauty_tags and beauty_tag_relations"""

from alembic import op
import sqlalchemy as sa

revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None


def upgrade():
	op.create_table(
		"beauty_tags",
		sa.Column("tag_id", sa.Integer, primary_key=True),
		sa.Column("tag_name", sa.Text, unique=True, nullable=False),
	)

	# No unique (business_id, tag_id): repeated links are allowed
	op.create_table(
		"beauty_tag_relations",
		sa.Column("relation_id", sa.Integer, primary_key=True),
		sa.Column("business_id", sa.Text,
		          sa.ForeignKey("businesses.id", ondelete="CASCADE"), nullable=False),
		sa.Column("tag_id", sa.Integer, nullable=False),
	)
	op.create_index("ix_beauty_tag_relations_business_id", "beauty_tag_relations", ["business_id"])
	op.create_index("ix_beauty_tag_relations_tag_id", "beauty_tag_relations", ["tag_id"])


def downgrade():
	op.drop_index("ix_beauty_tag_relations_tag_id", table_name="beauty_tag_relations")
	op.drop_index("ix_beauty_tag_relations_business_id", table_name="beauty_tag_relations")
	op.drop_table("beauty_tag_relations")
	op.drop_table("beauty_tags")
