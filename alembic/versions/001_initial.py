"""Initial schema: stocks and stock_prices

Revision ID: 001
Revises:
Create Date: 2025-01-10
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '001'
down_revision = None
branch_labels = None
depends_on = None

stock_layer = sa.Enum('BLUECHIP', 'MIDCAP', 'PENNY', name='stock_layer')


def upgrade():
    op.create_table('stocks',
        sa.Column('symbol', sa.String(length=10), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('exchange', sa.String(length=10), nullable=False),
        sa.Column('industry', sa.String(length=100), nullable=True),
        sa.Column('sector', sa.String(length=50), nullable=False),
        sa.Column('layer', stock_layer, nullable=True),
        sa.Column('listing_date', sa.Date(), nullable=True),
        sa.Column('outstanding_shares', sa.BigInteger(), nullable=True),
        sa.Column('market_cap', sa.BigInteger(), nullable=True),
        sa.PrimaryKeyConstraint('symbol')
    )
    op.create_index('ix_stocks_exchange', 'stocks', ['exchange'])
    op.create_index('ix_stocks_sector', 'stocks', ['sector'])
    op.create_index('ix_stocks_layer', 'stocks', ['layer'])

    op.create_table('stock_prices',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('symbol', sa.String(length=10), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('open', sa.Numeric(precision=12, scale=3), nullable=False),
        sa.Column('high', sa.Numeric(precision=12, scale=3), nullable=False),
        sa.Column('low', sa.Numeric(precision=12, scale=3), nullable=False),
        sa.Column('close', sa.Numeric(precision=12, scale=3), nullable=False),
        sa.Column('volume', sa.BigInteger(), nullable=False),
        sa.Column('adjusted_close', sa.Numeric(precision=12, scale=3), nullable=True),
        sa.ForeignKeyConstraint(['symbol'], ['stocks.symbol'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('symbol', 'date', name='uq_stock_prices_symbol_date')
    )
    op.create_index('ix_stock_prices_symbol', 'stock_prices', ['symbol'])
    op.create_index('ix_stock_prices_date', 'stock_prices', ['date'])
    op.create_index('ix_stock_prices_symbol_date', 'stock_prices', ['symbol', 'date'])


def downgrade():
    op.drop_index('ix_stock_prices_symbol_date', table_name='stock_prices')
    op.drop_index('ix_stock_prices_date', table_name='stock_prices')
    op.drop_index('ix_stock_prices_symbol', table_name='stock_prices')
    op.drop_table('stock_prices')
    op.drop_index('ix_stocks_layer', table_name='stocks')
    op.drop_index('ix_stocks_sector', table_name='stocks')
    op.drop_index('ix_stocks_exchange', table_name='stocks')
    op.drop_table('stocks')
    stock_layer.drop(op.get_bind(), checkfirst=True)
