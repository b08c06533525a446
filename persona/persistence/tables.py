"""SQLAlchemy table definitions for persona.

Repositories use SQLAlchemy Core against these tables and map rows to the
frozen domain models in ``persona.persistence.mappers``.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE (provisioned from the authentication service)
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("email", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

# ============================================================================
# IDENTITIES TABLE (context-scoped profiles)
# ============================================================================
identities_table = Table(
    "identities",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "owner_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("personal_name", Text, nullable=False),
    Column("context", String(20), nullable=False),
    Column(
        "other_names", ARRAY(Text), nullable=False, server_default=text("'{}'::text[]")
    ),
    Column("pronouns", Text, nullable=True),
    Column("title", Text, nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("social_links", JSONB, nullable=False, server_default=text("'{}'::jsonb")),
    Column("is_primary", Boolean, nullable=False, server_default=text("false")),
    Column("is_discoverable", Boolean, nullable=False, server_default=text("false")),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    CheckConstraint(
        "context IN ('legal', 'work', 'social', 'gaming')",
        name="ck_identities_context",
    ),
)

Index("idx_identities_owner_id", identities_table.c.owner_id)
Index("idx_identities_context", identities_table.c.context)
# Database-level backstop for the one-primary-per-owner rule
Index(
    "uq_identities_one_primary_per_owner",
    identities_table.c.owner_id,
    unique=True,
    postgresql_where=identities_table.c.is_primary,
)
Index(
    "idx_identities_discoverable",
    identities_table.c.context,
    identities_table.c.created_at,
    postgresql_where=identities_table.c.is_discoverable,
)

# ============================================================================
# AUDIT LOGS TABLE (append-only)
# ============================================================================
audit_logs_table = Table(
    "audit_logs",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "owner_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("entity", String(50), nullable=False),
    Column("entity_id", String(64), nullable=True),
    Column("operation", String(50), nullable=False),
    Column("diff", JSONB, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index("idx_audit_logs_owner_id", audit_logs_table.c.owner_id)
Index("idx_audit_logs_entity", audit_logs_table.c.entity, audit_logs_table.c.entity_id)
