"""create plant planning tables

Revision ID: 3b1f0c7a9d21
Revises:
Create Date: 2026-10-19 09:12:40.118203

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3b1f0c7a9d21'
down_revision = None
branch_labels = None
depends_on = None

order_status = sa.Enum('PENDING', 'COMPLETED', name='orderstatus')
job_status = sa.Enum('PENDING', 'IN_PROGRESS', 'COMPLETED', name='jobstatus')


def upgrade():
    op.create_table('plant_orders',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=True),
        sa.Column('party_code', sa.String(length=255), nullable=False),
        sa.Column('sizer', sa.String(length=64), nullable=True),
        sa.Column('size', sa.Float(), nullable=False),
        sa.Column('micron', sa.Float(), nullable=False),
        sa.Column('qty', sa.Float(), nullable=False),
        sa.Column('meter', sa.Float(), nullable=True),
        sa.Column('status', order_status, nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_plant_orders_id'), 'plant_orders', ['id'], unique=False)
    op.create_index(op.f('ix_plant_orders_status'), 'plant_orders', ['status'], unique=False)
    op.create_index(op.f('ix_plant_orders_party_code'), 'plant_orders', ['party_code'], unique=False)

    op.create_table('slitting_jobs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=True),
        sa.Column('job_no', sa.String(length=64), nullable=False),
        sa.Column('job_code', sa.String(length=255), nullable=False),
        sa.Column('micron', sa.Float(), nullable=False),
        sa.Column('sizer', sa.Float(), nullable=True),
        sa.Column('roll_length', sa.Float(), nullable=False),
        sa.Column('plan_qty', sa.Float(), nullable=False),
        sa.Column('status', job_status, nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_slitting_jobs_id'), 'slitting_jobs', ['id'], unique=False)
    op.create_index(op.f('ix_slitting_jobs_job_no'), 'slitting_jobs', ['job_no'], unique=False)

    op.create_table('slitting_coils',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('job_id', sa.Integer(), nullable=False),
        sa.Column('number', sa.Integer(), nullable=False),
        sa.Column('size', sa.Float(), nullable=False),
        sa.Column('rolls', sa.Integer(), nullable=False),
        sa.Column('target_qty', sa.Float(), nullable=True),
        sa.Column('is_multi_up', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['job_id'], ['slitting_jobs.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_slitting_coils_id'), 'slitting_coils', ['id'], unique=False)
    op.create_index(op.f('ix_slitting_coils_job_id'), 'slitting_coils', ['job_id'], unique=False)

    op.create_table('slitting_rows',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('job_id', sa.Integer(), nullable=False),
        sa.Column('coil_id', sa.Integer(), nullable=False),
        sa.Column('sr_no', sa.Integer(), nullable=False),
        sa.Column('gross_weight', sa.Float(), nullable=False),
        sa.Column('core_weight', sa.Float(), nullable=False),
        sa.Column('net_weight', sa.Float(), nullable=False),
        sa.Column('meter', sa.Float(), nullable=False),
        sa.ForeignKeyConstraint(['job_id'], ['slitting_jobs.id'], ),
        sa.ForeignKeyConstraint(['coil_id'], ['slitting_coils.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_slitting_rows_id'), 'slitting_rows', ['id'], unique=False)
    op.create_index(op.f('ix_slitting_rows_job_id'), 'slitting_rows', ['job_id'], unique=False)
    op.create_index(op.f('ix_slitting_rows_coil_id'), 'slitting_rows', ['coil_id'], unique=False)

    op.create_table('production_plans',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=True),
        sa.Column('party_name', sa.String(length=255), nullable=False),
        sa.Column('size', sa.String(length=64), nullable=False),
        sa.Column('type', sa.String(length=64), nullable=False),
        sa.Column('print_name', sa.String(length=255), nullable=True),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('micron', sa.Float(), nullable=False),
        sa.Column('meter', sa.Float(), nullable=False),
        sa.Column('cutting_size', sa.Float(), nullable=False),
        sa.Column('pcs', sa.Integer(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('status', order_status, nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_production_plans_id'), 'production_plans', ['id'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_production_plans_id'), table_name='production_plans')
    op.drop_table('production_plans')
    op.drop_index(op.f('ix_slitting_rows_coil_id'), table_name='slitting_rows')
    op.drop_index(op.f('ix_slitting_rows_job_id'), table_name='slitting_rows')
    op.drop_index(op.f('ix_slitting_rows_id'), table_name='slitting_rows')
    op.drop_table('slitting_rows')
    op.drop_index(op.f('ix_slitting_coils_job_id'), table_name='slitting_coils')
    op.drop_index(op.f('ix_slitting_coils_id'), table_name='slitting_coils')
    op.drop_table('slitting_coils')
    op.drop_index(op.f('ix_slitting_jobs_job_no'), table_name='slitting_jobs')
    op.drop_index(op.f('ix_slitting_jobs_id'), table_name='slitting_jobs')
    op.drop_table('slitting_jobs')
    op.drop_index(op.f('ix_plant_orders_status'), table_name='plant_orders')
    op.drop_index(op.f('ix_plant_orders_party_code'), table_name='plant_orders')
    op.drop_index(op.f('ix_plant_orders_id'), table_name='plant_orders')
    op.drop_table('plant_orders')
