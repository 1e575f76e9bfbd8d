"""Create item, bitstream, requestitem and user tables

Revision ID: 3f9c2d7e1b40
Revises: 
Create Date: 2026-10-18 10:12:44.201337

"""
from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision = '3f9c2d7e1b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table('item',
    sa.Column('id', sa.Uuid(), nullable=False),
    sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
    sa.Column('handle', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_item_handle'), 'item', ['handle'], unique=False)

    op.create_table('bitstream',
    sa.Column('id', sa.Uuid(), nullable=False),
    sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
    sa.Column('item_id', sa.Uuid(), nullable=True),
    sa.Column('size_bytes', sa.Integer(), nullable=False),
    sa.ForeignKeyConstraint(['item_id'], ['item.id'], ),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_bitstream_item_id'), 'bitstream', ['item_id'], unique=False)

    op.create_table('requestitem',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('token', sqlmodel.sql.sqltypes.AutoString(length=48), nullable=False),
    sa.Column('item_id', sa.Uuid(), nullable=False),
    sa.Column('bitstream_id', sa.Uuid(), nullable=False),
    sa.Column('allfiles', sa.Boolean(), nullable=False),
    sa.Column('request_email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
    sa.Column('request_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
    sa.Column('request_message', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
    sa.Column('decision', sa.Enum('PENDING', 'ACCEPTED', 'DENIED', name='requestdecision'), nullable=False),
    sa.Column('request_date', sa.DateTime(timezone=True), nullable=False),
    sa.Column('decision_date', sa.DateTime(timezone=True), nullable=True),
    sa.Column('response_message', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
    sa.ForeignKeyConstraint(['bitstream_id'], ['bitstream.id'], ),
    sa.ForeignKeyConstraint(['item_id'], ['item.id'], ),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_requestitem_item_id'), 'requestitem', ['item_id'], unique=False)
    op.create_index(op.f('ix_requestitem_token'), 'requestitem', ['token'], unique=True)

    op.create_table('user',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('username', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
    sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
    sa.Column('is_active', sa.Boolean(), nullable=False),
    sa.Column('is_admin', sa.Boolean(), nullable=False),
    sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)
    op.create_index(op.f('ix_user_username'), 'user', ['username'], unique=True)


def downgrade() -> None:
    op.drop_index(op.f('ix_user_username'), table_name='user')
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_table('user')
    op.drop_index(op.f('ix_requestitem_token'), table_name='requestitem')
    op.drop_index(op.f('ix_requestitem_item_id'), table_name='requestitem')
    op.drop_table('requestitem')
    op.drop_index(op.f('ix_bitstream_item_id'), table_name='bitstream')
    op.drop_table('bitstream')
    op.drop_index(op.f('ix_item_handle'), table_name='item')
    op.drop_table('item')
