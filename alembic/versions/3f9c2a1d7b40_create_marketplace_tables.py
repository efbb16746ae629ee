"""Create marketplace tables

Revision ID: 3f9c2a1d7b40
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2a1d7b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the marketplace schema. Enum columns store their value as a string."""

    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('role', sa.String(length=32), nullable=False),
        sa.Column('approved', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('approved_by', sa.Integer(), nullable=True),
        sa.Column('approved_at', sa.DateTime(), nullable=True),
        sa.Column('email_verified', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('email_verification_token', sa.String(), nullable=True),
        sa.Column('email_verification_expires', sa.DateTime(), nullable=True),
        sa.Column('password_reset_token', sa.String(), nullable=True),
        sa.Column('password_reset_expires', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email')
    )

    op.create_table('supplier_profiles',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('company_name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('website', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('profile_image', sa.String(), nullable=True),
        sa.Column('verified', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('rating', sa.Float(), server_default='0', nullable=False),
        sa.Column('status', sa.String(length=32), server_default='pending_approval', nullable=False),

        # Company registration
        sa.Column('business_registration_number', sa.String(), nullable=True),
        sa.Column('country_of_registration', sa.String(), nullable=True),
        sa.Column('city_of_registration', sa.String(), nullable=True),
        sa.Column('year_established', sa.Integer(), nullable=True),
        sa.Column('legal_entity_type', sa.String(), nullable=True),
        sa.Column('vat_tax_id', sa.String(), nullable=True),
        sa.Column('registered_business_address', sa.Text(), nullable=True),

        # Contact and social media
        sa.Column('primary_contact_name', sa.String(), nullable=True),
        sa.Column('contact_job_title', sa.String(), nullable=True),
        sa.Column('contact_email', sa.String(), nullable=True),
        sa.Column('contact_phone', sa.String(), nullable=True),
        sa.Column('company_website', sa.String(), nullable=True),
        sa.Column('whatsapp_number', sa.String(), nullable=True),
        sa.Column('social_media_linkedin', sa.String(), nullable=True),
        sa.Column('social_media_youtube', sa.String(), nullable=True),
        sa.Column('social_media_facebook', sa.String(), nullable=True),
        sa.Column('social_media_tiktok', sa.String(), nullable=True),
        sa.Column('social_media_instagram', sa.String(), nullable=True),
        sa.Column('social_media_pinterest', sa.String(), nullable=True),
        sa.Column('social_media_x', sa.String(), nullable=True),

        sa.Column('main_product_category', sa.String(), nullable=True),
        sa.Column('business_license', sa.String(), nullable=True),
        sa.Column('tax_certificate', sa.String(), nullable=True),
        sa.Column('export_license', sa.String(), nullable=True),
        sa.Column('quality_certifications', sa.JSON(), nullable=False),
        sa.Column('factory_photos', sa.JSON(), nullable=False),
        sa.Column('shipping_methods', sa.JSON(), nullable=False),
        sa.Column('incoterms_supported', sa.JSON(), nullable=False),
        sa.Column('regions_shipped_to', sa.JSON(), nullable=False),
        sa.Column('key_clients', sa.JSON(), nullable=False),
        sa.Column('testimonials', sa.JSON(), nullable=False),

        # Onboarding
        sa.Column('onboarding_completed', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('onboarding_step', sa.Integer(), server_default='1', nullable=False),
        sa.Column('profile_draft_data', sa.Text(), nullable=True),
        sa.Column('agrees_to_terms', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('agrees_to_privacy', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('declares_info_accurate', sa.Boolean(), server_default=sa.false(), nullable=False),

        # Moderation
        sa.Column('rejected_by', sa.Integer(), nullable=True),
        sa.Column('rejected_at', sa.DateTime(), nullable=True),
        sa.Column('rejection_reason', sa.Text(), nullable=True),
        sa.Column('suspended_by', sa.Integer(), nullable=True),
        sa.Column('suspended_at', sa.DateTime(), nullable=True),
        sa.Column('suspension_reason', sa.Text(), nullable=True),
        sa.Column('deleted_by', sa.Integer(), nullable=True),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id')
    )

    op.create_table('buyer_profiles',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('company_name', sa.String(), nullable=False),
        sa.Column('contact_name', sa.String(), nullable=True),
        sa.Column('industry', sa.String(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('website', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('profile_image', sa.String(), nullable=True),
        sa.Column('status', sa.String(length=32), server_default='active', nullable=False),
        sa.Column('suspension_reason', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id')
    )

    op.create_table('categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('icon', sa.String(), nullable=True),
        sa.Column('image', sa.String(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('parent_id', sa.Integer(), nullable=True),
        sa.Column('product_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('sort_order', sa.Integer(), server_default='0', nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['parent_id'], ['categories.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('products',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('supplier_id', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Float(), nullable=True),
        sa.Column('min_price', sa.Float(), nullable=True),
        sa.Column('max_price', sa.Float(), nullable=True),
        sa.Column('min_order', sa.Integer(), nullable=True),
        sa.Column('unit', sa.String(), nullable=True),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('video_url', sa.String(), nullable=True),
        sa.Column('specifications', sa.Text(), nullable=True),

        # Trade details
        sa.Column('materials', sa.String(), nullable=True),
        sa.Column('color', sa.String(), nullable=True),
        sa.Column('size', sa.String(), nullable=True),
        sa.Column('weight', sa.String(), nullable=True),
        sa.Column('dimensions', sa.String(), nullable=True),
        sa.Column('shipping_terms', sa.String(), nullable=True),
        sa.Column('incoterms', sa.String(), nullable=True),
        sa.Column('packaging_details', sa.Text(), nullable=True),
        sa.Column('lead_time', sa.String(), nullable=True),
        sa.Column('payment_terms', sa.String(), nullable=True),
        sa.Column('certifications', sa.JSON(), nullable=False),
        sa.Column('quality_grade', sa.String(), nullable=True),
        sa.Column('origin', sa.String(), nullable=True),
        sa.Column('supply_capacity', sa.String(), nullable=True),
        sa.Column('moq', sa.String(), nullable=True),
        sa.Column('source_url', sa.String(), nullable=True),

        sa.Column('status', sa.String(length=32), server_default='pending', nullable=False),
        sa.Column('views', sa.Integer(), server_default='0', nullable=False),
        sa.Column('inquiries', sa.Integer(), server_default='0', nullable=False),
        sa.Column('rating', sa.Float(), server_default='0', nullable=False),

        # Review trail
        sa.Column('reviewed_by', sa.Integer(), nullable=True),
        sa.Column('reviewed_at', sa.DateTime(), nullable=True),
        sa.Column('review_notes', sa.Text(), nullable=True),
        sa.Column('rejected_by', sa.Integer(), nullable=True),
        sa.Column('rejected_at', sa.DateTime(), nullable=True),
        sa.Column('rejection_reason', sa.Text(), nullable=True),
        sa.Column('suspended_by', sa.Integer(), nullable=True),
        sa.Column('suspended_at', sa.DateTime(), nullable=True),
        sa.Column('suspension_reason', sa.Text(), nullable=True),
        sa.Column('restored_by', sa.Integer(), nullable=True),
        sa.Column('restored_at', sa.DateTime(), nullable=True),
        sa.Column('deleted_by', sa.Integer(), nullable=True),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], ),
        sa.ForeignKeyConstraint(['supplier_id'], ['supplier_profiles.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('inquiries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('buyer_id', sa.Integer(), nullable=False),
        sa.Column('supplier_id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=True),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=True),
        sa.Column('status', sa.String(length=32), server_default='pending', nullable=False),
        sa.Column('admin_approval_status', sa.String(length=32), server_default='pending', nullable=False),
        sa.Column('approved_by', sa.Integer(), nullable=True),
        sa.Column('approved_at', sa.DateTime(), nullable=True),
        sa.Column('rejection_reason', sa.Text(), nullable=True),
        sa.Column('supplier_reply', sa.Text(), nullable=True),
        sa.Column('replied_at', sa.DateTime(), nullable=True),
        sa.Column('buyer_reply', sa.Text(), nullable=True),
        sa.Column('buyer_replied_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['buyer_id'], ['buyer_profiles.id'], ),
        sa.ForeignKeyConstraint(['supplier_id'], ['supplier_profiles.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('notifications',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('is_read', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('action_url', sa.String(), nullable=True),
        sa.Column('action_text', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('read_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('admin_notifications',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('related_id', sa.Integer(), nullable=True),
        sa.Column('read', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('saved_products',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('buyer_id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['buyer_id'], ['buyer_profiles.id'], ),
        sa.ForeignKeyConstraint(['product_id'], ['products.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('followed_suppliers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('buyer_id', sa.Integer(), nullable=False),
        sa.Column('supplier_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['buyer_id'], ['buyer_profiles.id'], ),
        sa.ForeignKeyConstraint(['supplier_id'], ['supplier_profiles.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    # Lookup indexes
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'])
    op.create_index('ix_users_email_verification_token', 'users', ['email_verification_token'])
    op.create_index('ix_users_password_reset_token', 'users', ['password_reset_token'])
    op.create_index('ix_supplier_profiles_id', 'supplier_profiles', ['id'])
    op.create_index('ix_supplier_profiles_user_id', 'supplier_profiles', ['user_id'])
    op.create_index('ix_supplier_profiles_status', 'supplier_profiles', ['status'])
    op.create_index('ix_buyer_profiles_id', 'buyer_profiles', ['id'])
    op.create_index('ix_buyer_profiles_user_id', 'buyer_profiles', ['user_id'])
    op.create_index('ix_categories_id', 'categories', ['id'])
    op.create_index('ix_categories_parent_id', 'categories', ['parent_id'])
    op.create_index('ix_products_id', 'products', ['id'])
    op.create_index('ix_products_supplier_id', 'products', ['supplier_id'])
    op.create_index('ix_products_category_id', 'products', ['category_id'])
    op.create_index('ix_products_status', 'products', ['status'])
    op.create_index('ix_inquiries_id', 'inquiries', ['id'])
    op.create_index('ix_inquiries_buyer_id', 'inquiries', ['buyer_id'])
    op.create_index('ix_inquiries_supplier_id', 'inquiries', ['supplier_id'])
    op.create_index('ix_inquiries_admin_approval_status', 'inquiries', ['admin_approval_status'])
    op.create_index('ix_notifications_id', 'notifications', ['id'])
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])
    op.create_index('ix_admin_notifications_id', 'admin_notifications', ['id'])
    op.create_index('ix_admin_notifications_type', 'admin_notifications', ['type'])
    op.create_index('ix_saved_products_id', 'saved_products', ['id'])
    op.create_index('ix_saved_products_buyer_id', 'saved_products', ['buyer_id'])
    op.create_index('ix_saved_products_product_id', 'saved_products', ['product_id'])
    op.create_index('ix_followed_suppliers_id', 'followed_suppliers', ['id'])
    op.create_index('ix_followed_suppliers_buyer_id', 'followed_suppliers', ['buyer_id'])
    op.create_index('ix_followed_suppliers_supplier_id', 'followed_suppliers', ['supplier_id'])


def downgrade() -> None:
    """Drop all marketplace tables, children first"""
    op.drop_table('followed_suppliers')
    op.drop_table('saved_products')
    op.drop_table('admin_notifications')
    op.drop_table('notifications')
    op.drop_table('inquiries')
    op.drop_table('products')
    op.drop_table('categories')
    op.drop_table('buyer_profiles')
    op.drop_table('supplier_profiles')
    op.drop_table('users')
