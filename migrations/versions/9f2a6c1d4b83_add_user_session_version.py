"""add_user_session_version

Session tokens carry the user's session_version; logout increments it so
earlier tokens stop resolving.

Revision ID: 9f2a6c1d4b83
Revises: 3c9d4e2a7f10
Create Date: 2026-10-20 14:03:27.901455

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9f2a6c1d4b83"
down_revision: Union[str, Sequence[str], None] = "3c9d4e2a7f10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "users",
        sa.Column(
            "session_version", sa.Integer(), nullable=False, server_default="0"
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_column("users", "session_version")
