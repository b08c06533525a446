"""Identity repository implementation using PostgreSQL."""

from datetime import datetime
from typing import Optional

from sqlalchemy import desc, exists, func, literal, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from persona.domain.model.identity import Identity, PublicIdentity
from persona.domain.repository.identity import IdentityRepository
from persona.domain.value import AccountId, IdentityContext, IdentityId
from persona.persistence.mappers import (
    identity_to_dict,
    row_to_identity,
    row_to_public_identity,
)
from persona.persistence.tables import accounts_table, identities_table

# Whitelist selected for cross-account reads; private columns never leave the DB
PUBLIC_IDENTITY_COLUMNS = (
    identities_table.c.id,
    identities_table.c.personal_name,
    identities_table.c.context,
    identities_table.c.other_names,
    identities_table.c.pronouns,
    identities_table.c.title,
    identities_table.c.avatar_url,
    identities_table.c.social_links,
)


def _like_pattern(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class PostgresIdentityRepository(IdentityRepository):
    """PostgreSQL implementation of IdentityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def lock_owner(self, owner_id: AccountId) -> None:
        """Lock the owner's account row until the transaction ends.

        Args:
            owner_id: Account whose identities are about to change
        """
        stmt = (
            select(accounts_table.c.id)
            .where(accounts_table.c.id == owner_id)
            .with_for_update()
        )
        await self.session.execute(stmt)

    async def find_owned(
        self, identity_id: IdentityId, owner_id: AccountId
    ) -> Optional[Identity]:
        """Get identity by ID if owned by the account.

        Args:
            identity_id: Identity ID to look up
            owner_id: Authenticated account

        Returns:
            Identity if found and owned, None otherwise
        """
        stmt = select(identities_table).where(
            identities_table.c.id == identity_id,
            identities_table.c.owner_id == owner_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_identity(dict(row))

    async def find_all_by_owner(
        self, owner_id: AccountId, context: Optional[IdentityContext] = None
    ) -> list[Identity]:
        """Find the owner's identities, primary first then newest first.

        Args:
            owner_id: Authenticated account
            context: Optional context filter

        Returns:
            List of identities (may be empty)
        """
        stmt = select(identities_table).where(identities_table.c.owner_id == owner_id)
        if context:
            stmt = stmt.where(identities_table.c.context == context.value)
        stmt = stmt.order_by(
            desc(identities_table.c.is_primary),
            desc(identities_table.c.created_at),
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()

        return [row_to_identity(dict(row)) for row in rows]

    async def find_primary_by_owner(self, owner_id: AccountId) -> Optional[Identity]:
        """Get primary identity for an account.

        Args:
            owner_id: Authenticated account

        Returns:
            Primary identity if set, None otherwise
        """
        stmt = select(identities_table).where(
            identities_table.c.owner_id == owner_id,
            identities_table.c.is_primary == True,  # noqa: E712
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_identity(dict(row))

    async def count_by_owner(self, owner_id: AccountId) -> int:
        """Count the owner's identities."""
        stmt = select(func.count()).where(identities_table.c.owner_id == owner_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def clear_primary(self, owner_id: AccountId, updated_at: datetime) -> None:
        """Unset the owner's primary flag.

        Args:
            owner_id: Authenticated account
            updated_at: Timestamp for the identity losing the flag
        """
        stmt = (
            identities_table.update()
            .where(
                identities_table.c.owner_id == owner_id,
                identities_table.c.is_primary == True,  # noqa: E712
            )
            .values(is_primary=False, updated_at=updated_at)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def save(self, identity: Identity) -> Identity:
        """Save identity to database.

        Args:
            identity: Identity to save

        Returns:
            Saved identity
        """
        identity_dict = identity_to_dict(identity)

        existing = await self.find_owned(identity.id, identity.owner_id)

        if existing:
            stmt = (
                identities_table.update()
                .where(identities_table.c.id == identity.id)
                .values(**identity_dict)
            )
            await self.session.execute(stmt)
        else:
            stmt = identities_table.insert().values(**identity_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return identity

    async def delete(self, identity_id: IdentityId, owner_id: AccountId) -> bool:
        """Delete an owned identity.

        Returns:
            True if a row was removed
        """
        stmt = identities_table.delete().where(
            identities_table.c.id == identity_id,
            identities_table.c.owner_id == owner_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def search_discoverable(
        self,
        context: IdentityContext,
        text: Optional[str],
        limit: int,
    ) -> list[PublicIdentity]:
        """Search discoverable identities of every owner.

        Args:
            context: Context to search in
            text: Case-insensitive substring filter
            limit: Maximum rows to return

        Returns:
            Public projections, newest first
        """
        stmt = select(*PUBLIC_IDENTITY_COLUMNS).where(
            identities_table.c.is_discoverable == True,  # noqa: E712
            identities_table.c.context == context.value,
        )

        if text:
            pattern = _like_pattern(text)
            other_name = func.unnest(identities_table.c.other_names).table_valued(
                "name"
            )
            other_names_match = exists(
                select(literal(1))
                .select_from(other_name)
                .where(other_name.c.name.ilike(pattern, escape="\\"))
            )
            stmt = stmt.where(
                or_(
                    identities_table.c.personal_name.ilike(pattern, escape="\\"),
                    identities_table.c.title.ilike(pattern, escape="\\"),
                    other_names_match,
                )
            )

        stmt = stmt.order_by(
            desc(identities_table.c.created_at), desc(identities_table.c.id)
        ).limit(limit)

        result = await self.session.execute(stmt)
        rows = result.mappings().all()

        return [row_to_public_identity(dict(row)) for row in rows]

    async def find_discoverable(
        self, identity_id: IdentityId
    ) -> Optional[PublicIdentity]:
        """Get the public projection of a discoverable identity.

        Args:
            identity_id: Identity ID to look up

        Returns:
            PublicIdentity if found and discoverable, None otherwise
        """
        stmt = select(*PUBLIC_IDENTITY_COLUMNS).where(
            identities_table.c.id == identity_id,
            identities_table.c.is_discoverable == True,  # noqa: E712
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_public_identity(dict(row))
