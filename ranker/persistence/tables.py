"""SQLAlchemy table definitions for Media Ranker.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(255), nullable=False),
    Column("provider", String(50), nullable=True),  # 'github', NULL for local
    Column("uid", String(255), nullable=True),  # Provider-scoped user id
    Column("name", String(255), nullable=True),  # Display name
    Column("session_version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("username", name="uq_users_username"),
    UniqueConstraint("provider", "uid", name="uq_users_provider_identity"),
)

# ============================================================================
# WORKS TABLE
# ============================================================================
works_table = Table(
    "works",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(255), nullable=False),
    Column(
        "category",
        postgresql.ENUM(
            "album", "book", "movie", name="work_category", create_type=False
        ),
        nullable=False,
    ),
    Column("creator", String(255), nullable=True),
    Column("publication_year", Integer, nullable=True),
    Column("description", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_works_category", works_table.c.category)
Index("idx_works_title", works_table.c.title)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("work_id", UUID, ForeignKey("works.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "work_id", name="uq_vote_user_work"),
)

Index("idx_votes_user_id", votes_table.c.user_id)
Index("idx_votes_work_id", votes_table.c.work_id)
