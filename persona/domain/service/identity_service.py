"""Identity store domain service.

Owns the per-account invariants:

* at most one identity per owner has ``is_primary`` set;
* an owner always keeps at least one identity.

Every mutation runs inside ``UnitOfWork.transaction()`` after locking the
owner, so the "clear old primary" and "write new record" steps and the audit
entry are committed together or not at all.
"""

from typing import Optional
from uuid import uuid4

import logfire

from persona.domain.error import LastIdentityError, NotFoundError
from persona.domain.model.identity import (
    Identity,
    IdentityDraft,
    IdentityPatch,
    utcnow,
)
from persona.domain.repository.identity import IdentityRepository
from persona.domain.repository.unit_of_work import UnitOfWork
from persona.domain.service.audit_service import AuditService, snapshot
from persona.domain.value import AccountId, AuditOperation, IdentityContext, IdentityId

from .base import Service


class IdentityService(Service):
    """Domain service for owner-scoped identity operations."""

    def __init__(
        self,
        identity_repository: IdentityRepository,
        unit_of_work: UnitOfWork,
        audit_service: AuditService,
    ) -> None:
        """Initialize identity service.

        Args:
            identity_repository: Identity repository
            unit_of_work: Transaction scope shared with the audit repository
            audit_service: Audit recorder
        """
        self.identity_repository = identity_repository
        self.unit_of_work = unit_of_work
        self.audit_service = audit_service

    async def list_identities(
        self, owner_id: AccountId, context: Optional[IdentityContext] = None
    ) -> list[Identity]:
        """List the owner's identities, primary first then newest first.

        Args:
            owner_id: Authenticated account
            context: Restrict to one context when given

        Returns:
            Identities (may be empty)
        """
        with logfire.span(
            "identity_service.list_identities",
            owner_id=str(owner_id),
            context=context.value if context else None,
        ):
            identities = await self.identity_repository.find_all_by_owner(
                owner_id, context
            )
            logfire.info(
                "Identities listed", owner_id=str(owner_id), count=len(identities)
            )
            return identities

    async def get_identity(
        self, identity_id: IdentityId, owner_id: AccountId
    ) -> Identity:
        """Get one of the owner's identities.

        Raises:
            NotFoundError: If the identity does not exist or is not owned
        """
        with logfire.span(
            "identity_service.get_identity",
            identity_id=str(identity_id),
            owner_id=str(owner_id),
        ):
            return await self._require_owned(identity_id, owner_id)

    async def get_primary(self, owner_id: AccountId) -> Optional[Identity]:
        """Get the owner's primary identity, if any."""
        return await self.identity_repository.find_primary_by_owner(owner_id)

    async def create_identity(
        self, owner_id: AccountId, draft: IdentityDraft
    ) -> Identity:
        """Create an identity for the owner.

        If the draft is primary, the owner's current primary loses the flag
        in the same transaction.

        Args:
            owner_id: Authenticated account, always the new record's owner
            draft: Validated identity fields

        Returns:
            The stored identity
        """
        with logfire.span(
            "identity_service.create_identity",
            owner_id=str(owner_id),
            context=draft.context.value,
            is_primary=draft.is_primary,
        ):
            async with self.unit_of_work.transaction():
                await self.identity_repository.lock_owner(owner_id)
                now = utcnow()

                if draft.is_primary:
                    await self.identity_repository.clear_primary(owner_id, now)

                identity = Identity(
                    id=IdentityId(uuid4()),
                    owner_id=owner_id,
                    created_at=now,
                    updated_at=now,
                    **draft.model_dump(),
                )
                saved = await self.identity_repository.save(identity)

                await self.audit_service.record(
                    owner_id,
                    AuditOperation.CREATE,
                    {"created": snapshot(saved)},
                    entity_id=str(saved.id),
                )

            logfire.info(
                "Identity created",
                identity_id=str(saved.id),
                owner_id=str(owner_id),
                is_primary=saved.is_primary,
            )
            return saved

    async def update_identity(
        self, identity_id: IdentityId, owner_id: AccountId, patch: IdentityPatch
    ) -> Identity:
        """Apply a partial update to one of the owner's identities.

        Raises:
            NotFoundError: If the identity does not exist or is not owned
        """
        with logfire.span(
            "identity_service.update_identity",
            identity_id=str(identity_id),
            owner_id=str(owner_id),
            fields=sorted(patch.model_fields_set),
        ):
            async with self.unit_of_work.transaction():
                await self.identity_repository.lock_owner(owner_id)
                existing = await self._require_owned(identity_id, owner_id)
                now = utcnow()

                if patch.is_primary is True:
                    await self.identity_repository.clear_primary(owner_id, now)

                updated = existing.model_copy(
                    update={**patch.changes(), "updated_at": now}
                )
                saved = await self.identity_repository.save(updated)

                await self.audit_service.record(
                    owner_id,
                    AuditOperation.UPDATE,
                    {"before": snapshot(existing), "after": snapshot(saved)},
                    entity_id=str(identity_id),
                )

            logfire.info(
                "Identity updated", identity_id=str(identity_id), owner_id=str(owner_id)
            )
            return saved

    async def delete_identity(
        self, identity_id: IdentityId, owner_id: AccountId
    ) -> bool:
        """Delete one of the owner's identities.

        Raises:
            NotFoundError: If the identity does not exist or is not owned
            LastIdentityError: If it is the owner's only identity
        """
        with logfire.span(
            "identity_service.delete_identity",
            identity_id=str(identity_id),
            owner_id=str(owner_id),
        ):
            async with self.unit_of_work.transaction():
                await self.identity_repository.lock_owner(owner_id)
                existing = await self._require_owned(identity_id, owner_id)

                if await self.identity_repository.count_by_owner(owner_id) <= 1:
                    logfire.warn(
                        "Refused to delete last identity",
                        identity_id=str(identity_id),
                        owner_id=str(owner_id),
                    )
                    raise LastIdentityError(str(identity_id))

                deleted = await self.identity_repository.delete(identity_id, owner_id)

                await self.audit_service.record(
                    owner_id,
                    AuditOperation.DELETE,
                    {"deleted": snapshot(existing)},
                    entity_id=str(identity_id),
                )

            logfire.info(
                "Identity deleted", identity_id=str(identity_id), owner_id=str(owner_id)
            )
            return deleted

    async def set_primary(
        self, identity_id: IdentityId, owner_id: AccountId
    ) -> Identity:
        """Make one of the owner's identities the primary one.

        Raises:
            NotFoundError: If the identity does not exist or is not owned
        """
        with logfire.span(
            "identity_service.set_primary",
            identity_id=str(identity_id),
            owner_id=str(owner_id),
        ):
            async with self.unit_of_work.transaction():
                await self.identity_repository.lock_owner(owner_id)
                existing = await self._require_owned(identity_id, owner_id)
                now = utcnow()

                await self.identity_repository.clear_primary(owner_id, now)
                saved = await self.identity_repository.save(
                    existing.model_copy(update={"is_primary": True, "updated_at": now})
                )

                await self.audit_service.record(
                    owner_id,
                    AuditOperation.SET_PRIMARY,
                    {"before": snapshot(existing), "after": snapshot(saved)},
                    entity_id=str(identity_id),
                )

            logfire.info(
                "Primary identity set",
                identity_id=str(identity_id),
                owner_id=str(owner_id),
            )
            return saved

    async def _require_owned(
        self, identity_id: IdentityId, owner_id: AccountId
    ) -> Identity:
        identity = await self.identity_repository.find_owned(identity_id, owner_id)
        if not identity:
            logfire.warn(
                "Identity not found",
                identity_id=str(identity_id),
                owner_id=str(owner_id),
            )
            raise NotFoundError("Identity", str(identity_id))
        return identity
