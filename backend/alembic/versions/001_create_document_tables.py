"""Create menu and orders document tables

Revision ID: 001
Revises: None
Create Date: 2024-06-01 00:00:00.000000+00:00

What:  Creates the two collection tables, `menu` and `orders`.
How:   Each row is one document: UUID primary key, JSONB body, UTC
       insertion timestamp (indexed; defines listing order).

Rollback: downgrade() drops both tables (destructive, all documents lost).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

COLLECTIONS = ("menu", "orders")


def _create_document_table(name: str) -> None:
    op.create_table(
        name,
        sa.Column(
            "id",
            sa.Uuid(as_uuid=True),
            nullable=False,
            comment="Store-generated document identifier",
        ),
        sa.Column(
            "body",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=False,
            comment="Caller-supplied document fields",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="When the document was inserted (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(f"ix_{name}_created_at", name, ["created_at"])


def upgrade() -> None:
    for name in COLLECTIONS:
        _create_document_table(name)


def downgrade() -> None:
    for name in reversed(COLLECTIONS):
        op.drop_index(f"ix_{name}_created_at", table_name=name)
        op.drop_table(name)
