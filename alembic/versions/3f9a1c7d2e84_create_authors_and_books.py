"""Create authors and books tables

Revision ID: 3f9a1c7d2e84
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c7d2e84'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('authors',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.Text(), nullable=False, comment="Author's first name"),
        sa.Column('last_name', sa.Text(), nullable=False, comment="Author's last name"),
        sa.Column('bio', sa.Text(), nullable=True, comment='Author biography'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_authors_last_name'), 'authors', ['last_name'], unique=False)

    op.create_table('books',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False, comment='Book title'),
        sa.Column('isbn', sa.Text(), nullable=True, comment='International Standard Book Number'),
        sa.Column('year', sa.Integer(), nullable=True, comment='Year of publication'),
        sa.Column('summary', sa.String(length=500), nullable=True, comment='Book summary'),
        sa.Column('image', sa.Text(), nullable=True, comment='Cover image path'),
        sa.Column('price', sa.Numeric(precision=18, scale=2), nullable=True, comment='Book price'),
        sa.Column('author_id', sa.Integer(), nullable=False, comment='Author who wrote the book'),
        sa.ForeignKeyConstraint(['author_id'], ['authors.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)
    op.create_index(op.f('ix_books_author_id'), 'books', ['author_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_books_author_id'), table_name='books')
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_table('books')
    op.drop_index(op.f('ix_authors_last_name'), table_name='authors')
    op.drop_table('authors')
