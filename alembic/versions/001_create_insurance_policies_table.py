"""create insurance_policies table

Revision ID: 001
Revises:
Create Date: 2026-10-17 12:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "insurance_policies",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("policy_holder", sa.String(255), nullable=False),
        sa.Column("policy_holder_name", sa.String(255), nullable=False),
        sa.Column("coverage_amount", sa.Float(), nullable=False),
        sa.Column("premium_amount", sa.Float(), nullable=False),
        sa.Column("policy_start_date", sa.BigInteger(), nullable=False),
        sa.Column("policy_end_date", sa.BigInteger(), nullable=False),
        sa.Column("is_claimed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("updated_at", sa.BigInteger(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_insurance_policies_id", "insurance_policies", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_insurance_policies_id", table_name="insurance_policies")
    op.drop_table("insurance_policies")
