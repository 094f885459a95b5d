"""init_marketplace_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Schema:
- profile: Accounts for every role (artist / venue_owner / audience)
- artist: Performer extension of an artist profile, shares the profile id
- venue: Venues owned by venue-owner profiles
- show_request: Artist <-> venue booking negotiations
- event: Scheduled shows at a venue by an artist
- ticket: Ticket types of an event with remaining inventory
- booking: Confirmed purchases with UUID7 primary key
- message: Chat messages inside an accepted show request
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY, UUID


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        'created_at',
        sa.DateTime(timezone=True),
        server_default=sa.text('now()'),
        nullable=False,
    )


def _updated_at() -> sa.Column:
    return sa.Column(
        'updated_at',
        sa.DateTime(timezone=True),
        server_default=sa.text('now()'),
        nullable=False,
    )


def upgrade() -> None:
    """Create all tables with final schema."""

    # ========== Accounts ==========

    op.create_table(
        'profile',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=False),
        sa.Column('avatar_url', sa.String(length=1024), nullable=True),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column(
            'verification_status',
            sa.String(length=20),
            server_default='none',
            nullable=False,
        ),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            "role IN ('artist', 'venue_owner', 'audience')", name='ck_profile_role'
        ),
        sa.CheckConstraint(
            "verification_status IN ('none', 'pending', 'approved', 'rejected')",
            name='ck_profile_verification_status',
        ),
    )
    op.create_index(op.f('ix_profile_email'), 'profile', ['email'], unique=True)

    op.create_table(
        'artist',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), server_default='', nullable=False),
        sa.Column('experience', sa.Text(), server_default='', nullable=False),
        sa.Column(
            'genres',
            ARRAY(sa.String(length=50)),
            server_default=sa.text("'{}'"),
            nullable=False,
        ),
        sa.Column('introduction_video_url', sa.String(length=1024), nullable=True),
        sa.Column('rating', sa.Float(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(['id'], ['profile.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )

    # ========== Venues and negotiations ==========

    op.create_table(
        'venue',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=512), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column(
            'amenities',
            ARRAY(sa.String(length=100)),
            server_default=sa.text("'{}'"),
            nullable=False,
        ),
        sa.Column(
            'images',
            ARRAY(sa.String(length=1024)),
            server_default=sa.text("'{}'"),
            nullable=False,
        ),
        sa.Column('description', sa.Text(), server_default='', nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(['owner_id'], ['profile.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('capacity > 0', name='ck_venue_capacity_positive'),
    )
    op.create_index(op.f('ix_venue_owner_id'), 'venue', ['owner_id'], unique=False)

    op.create_table(
        'show_request',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('artist_id', sa.Integer(), nullable=False),
        sa.Column('venue_id', sa.Integer(), nullable=False),
        sa.Column('proposed_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('initiator', sa.String(length=20), nullable=False),
        sa.Column('message', sa.Text(), server_default='', nullable=False),
        sa.Column('status', sa.String(length=20), server_default='pending', nullable=False),
        _created_at(),
        _updated_at(),
        sa.ForeignKeyConstraint(['artist_id'], ['artist.id']),
        sa.ForeignKeyConstraint(['venue_id'], ['venue.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            "initiator IN ('artist', 'venue')", name='ck_show_request_initiator'
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected')", name='ck_show_request_status'
        ),
    )
    op.create_index(
        op.f('ix_show_request_artist_id'), 'show_request', ['artist_id'], unique=False
    )
    op.create_index(op.f('ix_show_request_venue_id'), 'show_request', ['venue_id'], unique=False)

    # ========== Events and inventory ==========

    op.create_table(
        'event',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('venue_id', sa.Integer(), nullable=False),
        sa.Column('artist_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), server_default='', nullable=False),
        sa.Column('event_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), server_default='scheduled', nullable=False),
        _created_at(),
        _updated_at(),
        sa.ForeignKeyConstraint(['venue_id'], ['venue.id']),
        sa.ForeignKeyConstraint(['artist_id'], ['artist.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('duration > 0', name='ck_event_duration_positive'),
        sa.CheckConstraint(
            "status IN ('scheduled', 'published', 'canceled', 'completed')",
            name='ck_event_status',
        ),
    )
    op.create_index(op.f('ix_event_venue_id'), 'event', ['venue_id'], unique=False)
    op.create_index(op.f('ix_event_artist_id'), 'event', ['artist_id'], unique=False)

    op.create_table(
        'ticket',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('ticket_type', sa.String(length=100), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('quantity_total', sa.Integer(), nullable=False),
        sa.Column('quantity_remaining', sa.Integer(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(['event_id'], ['event.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('price >= 0', name='ck_ticket_price_non_negative'),
        sa.CheckConstraint('quantity_total > 0', name='ck_ticket_quantity_total_positive'),
        # Last line of defence against overselling
        sa.CheckConstraint(
            'quantity_remaining >= 0 AND quantity_remaining <= quantity_total',
            name='ck_ticket_quantity_remaining_range',
        ),
        sa.UniqueConstraint('event_id', 'ticket_type', name='uq_ticket_event_type'),
    )
    op.create_index(op.f('ix_ticket_event_id'), 'ticket', ['event_id'], unique=False)

    op.create_table(
        'booking',
        sa.Column('id', UUID(as_uuid=True), nullable=False),
        sa.Column('ticket_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('total_amount', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), server_default='confirmed', nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(['ticket_id'], ['ticket.id']),
        sa.ForeignKeyConstraint(['user_id'], ['profile.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('quantity > 0', name='ck_booking_quantity_positive'),
    )
    op.create_index(op.f('ix_booking_ticket_id'), 'booking', ['ticket_id'], unique=False)
    op.create_index(op.f('ix_booking_user_id'), 'booking', ['user_id'], unique=False)

    # ========== Messaging ==========

    op.create_table(
        'message',
        sa.Column('id', UUID(as_uuid=True), nullable=False),
        sa.Column('show_request_id', sa.Integer(), nullable=False),
        sa.Column('sender_id', sa.Integer(), nullable=False),
        sa.Column('receiver_id', sa.Integer(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('read', sa.Boolean(), server_default=sa.false(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(['show_request_id'], ['show_request.id']),
        sa.ForeignKeyConstraint(['sender_id'], ['profile.id']),
        sa.ForeignKeyConstraint(['receiver_id'], ['profile.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('sender_id <> receiver_id', name='ck_message_distinct_parties'),
    )
    op.create_index('ix_message_thread', 'message', ['show_request_id', 'created_at'])
    op.create_index('ix_message_unread', 'message', ['receiver_id', 'read'])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_index('ix_message_unread', table_name='message')
    op.drop_index('ix_message_thread', table_name='message')
    op.drop_table('message')

    op.drop_index(op.f('ix_booking_user_id'), table_name='booking')
    op.drop_index(op.f('ix_booking_ticket_id'), table_name='booking')
    op.drop_table('booking')

    op.drop_index(op.f('ix_ticket_event_id'), table_name='ticket')
    op.drop_table('ticket')

    op.drop_index(op.f('ix_event_artist_id'), table_name='event')
    op.drop_index(op.f('ix_event_venue_id'), table_name='event')
    op.drop_table('event')

    op.drop_index(op.f('ix_show_request_venue_id'), table_name='show_request')
    op.drop_index(op.f('ix_show_request_artist_id'), table_name='show_request')
    op.drop_table('show_request')

    op.drop_index(op.f('ix_venue_owner_id'), table_name='venue')
    op.drop_table('venue')

    op.drop_table('artist')

    op.drop_index(op.f('ix_profile_email'), table_name='profile')
    op.drop_table('profile')
