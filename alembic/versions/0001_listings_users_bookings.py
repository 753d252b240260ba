from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "0001_listings_users_bookings"
down_revision = None
branch_labels = None
depends_on = None


def _audit_columns():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("token", sa.String(length=200), nullable=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("avatar", sa.Text(), nullable=False, server_default=""),
        sa.Column("contact", sa.String(length=320), nullable=False),
        sa.Column("wallet_id", sa.String(length=200), nullable=True),
        sa.Column("income", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("listings", postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("bookings", postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default=sa.text("'[]'::jsonb")),
        *_audit_columns(),
    )
    op.create_index("ix_users_token", "users", ["token"])

    op.create_table(
        "listings",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("image", sa.Text(), nullable=False),
        sa.Column("address", sa.String(length=300), nullable=False),
        sa.Column("country", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("city", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("num_of_guests", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("num_of_beds", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("num_of_baths", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("rating", sa.Float(), nullable=False, server_default="0"),
        # no FK, dangling hosts surface when the host field is read
        sa.Column("host", sa.String(), nullable=False),
        sa.Column("bookings", postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("bookings_index", postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default=sa.text("'{}'::jsonb")),
        *_audit_columns(),
    )
    op.create_index("ix_listings_price", "listings", ["price"])
    op.create_index("ix_listings_host", "listings", ["host"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("listing", sa.String(), nullable=False),
        sa.Column("tenant", sa.String(), nullable=False),
        sa.Column("check_in", sa.String(length=10), nullable=False),
        sa.Column("check_out", sa.String(length=10), nullable=False),
        *_audit_columns(),
    )
    op.create_index("ix_bookings_listing", "bookings", ["listing"])
    op.create_index("ix_bookings_tenant", "bookings", ["tenant"])


def downgrade():
    op.drop_index("ix_bookings_tenant", table_name="bookings")
    op.drop_index("ix_bookings_listing", table_name="bookings")
    op.drop_table("bookings")
    op.drop_index("ix_listings_host", table_name="listings")
    op.drop_index("ix_listings_price", table_name="listings")
    op.drop_table("listings")
    op.drop_index("ix_users_token", table_name="users")
    op.drop_table("users")
