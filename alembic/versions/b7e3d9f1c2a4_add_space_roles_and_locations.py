"""add_space_roles_and_locations

Revision ID: b7e3d9f1c2a4
Revises: a1c0f2e4b6d8
Create Date: 2026-10-19 14:40:07.902113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = 'b7e3d9f1c2a4'
down_revision: Union[str, None] = 'a1c0f2e4b6d8'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('space_roles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('space_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('color', sa.String(length=32), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['space_id'], ['spaces.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('space_id', 'name', name='uq_space_role_space_name'),
    )

    op.create_table('space_locations',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('space_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['space_id'], ['spaces.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('space_id', 'name', name='uq_space_location_space_name'),
    )

    # people.space_role (자유 텍스트) → space_role_id FK (free-text role replaced by a reference)
    op.add_column('people', sa.Column('space_role_id', sa.Uuid(), nullable=True))
    op.create_foreign_key(
        'fk_people_space_role_id', 'people', 'space_roles',
        ['space_role_id'], ['id'], ondelete='SET NULL',
    )
    op.drop_column('people', 'space_role')

    op.add_column('products', sa.Column('space_location_id', sa.Uuid(), nullable=True))
    op.create_foreign_key(
        'fk_products_space_location_id', 'products', 'space_locations',
        ['space_location_id'], ['id'], ondelete='SET NULL',
    )


def downgrade() -> None:
    op.drop_constraint('fk_products_space_location_id', 'products', type_='foreignkey')
    op.drop_column('products', 'space_location_id')

    op.add_column('people', sa.Column('space_role', sa.String(length=255), nullable=True))
    op.drop_constraint('fk_people_space_role_id', 'people', type_='foreignkey')
    op.drop_column('people', 'space_role_id')

    op.drop_table('space_locations')
    op.drop_table('space_roles')
