"""Add coach_tone to prompts and logs, add knowledge_base table

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 14:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Add coach_tone columns and the knowledge_base table."""
    op.add_column('system_prompts',
        sa.Column('coach_tone', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=True))
    op.create_index(op.f('ix_system_prompts_coach_tone'), 'system_prompts', ['coach_tone'], unique=False)
    op.add_column('ai_logs',
        sa.Column('coach_tone', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=True))

    op.create_table('knowledge_base', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('content', sqlmodel.sql.sqltypes.AutoString(), nullable=False, server_default=''),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))


def downgrade() -> None:
    """Drop knowledge_base and the coach_tone columns."""
    op.drop_table('knowledge_base')
    with op.batch_alter_table('ai_logs') as batch_op:
        batch_op.drop_column('coach_tone')
    op.drop_index(op.f('ix_system_prompts_coach_tone'), table_name='system_prompts')
    with op.batch_alter_table('system_prompts') as batch_op:
        batch_op.drop_column('coach_tone')
