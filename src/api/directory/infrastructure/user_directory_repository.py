"""SQLAlchemy implementation of IUserDirectoryRepository.

Builds every directory statement and maps ``user`` rows onto the User
aggregate. Tenant-scoped queries join through ``account`` (and
``organization`` or ``labelrole``) inside this module only.

Email and domain comparisons run against ``TRIM(LOWER(column))`` so rows
written before normalization was enforced still match.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from directory.domain.aggregates import User
from directory.domain.value_objects import SpaceId, TenantScope, UserRefId
from directory.infrastructure.models import (
    AccountModel,
    OrganizationModel,
    SpaceRoleModel,
    UserModel,
)
from directory.infrastructure.observability import (
    DefaultUserDirectoryRepositoryProbe,
    UserDirectoryRepositoryProbe,
)
from directory.ports.repositories import IUserDirectoryRepository


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _normalized(column):
    return func.trim(func.lower(column))


class UserDirectoryRepository(IUserDirectoryRepository):
    """Repository for User records backed by a relational store.

    Works on whatever session it is given; transaction boundaries belong
    to the caller. Raises SQLAlchemy exceptions unchanged.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: UserDirectoryRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession supplied by the caller
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultUserDirectoryRepositoryProbe()

    async def add(self, user: User) -> None:
        """Insert a new user row.

        The row is flushed immediately so constraint violations surface
        from this call rather than at commit.
        """
        model = UserModel(
            refid=user.id.value,
            firstname=user.firstname,
            lastname=user.lastname,
            email=user.email,
            initials=user.initials,
            global_=user.global_admin,
            password=user.password,
            salt=user.salt,
            reset=user.reset,
            created=user.created,
            revised=user.revised,
        )
        self._session.add(model)
        await self._session.flush()

        self._probe.user_added(user.id.value, user.email)

    async def get_by_ref_id(self, ref_id: UserRefId) -> User | None:
        """Retrieve a user by reference id."""
        stmt = self._select_users().where(UserModel.refid == ref_id.value)
        return await self._fetch_one(stmt, lookup="refid")

    async def get_by_domain(self, domain: str, email: str) -> User | None:
        """Retrieve a user by email among members of the organization
        owning ``domain``.
        """
        stmt = (
            self._select_users()
            .join(AccountModel, AccountModel.userid == UserModel.refid)
            .join(OrganizationModel, OrganizationModel.refid == AccountModel.orgid)
            .where(
                _normalized(UserModel.email) == email,
                _normalized(OrganizationModel.domain) == domain,
            )
        )
        return await self._fetch_one(stmt, lookup="domain_email")

    async def get_by_email(self, email: str) -> User | None:
        """Retrieve a user by normalized email across all organizations."""
        stmt = self._select_users().where(_normalized(UserModel.email) == email)
        return await self._fetch_one(stmt, lookup="email")

    async def get_by_reset_token(self, token: str) -> User | None:
        """Retrieve the user holding the given reset token."""
        stmt = self._select_users().where(UserModel.reset == token)
        return await self._fetch_one(stmt, lookup="reset_token")

    async def get_by_salt(self, salt: str) -> User | None:
        """Retrieve the user whose salt equals the given value."""
        stmt = self._select_users().where(UserModel.salt == salt)
        return await self._fetch_one(stmt, lookup="serial")

    async def list_active_for_organization(self, scope: TenantScope) -> list[User]:
        """List users with an active membership in the scoped organization."""
        stmt = self._select_users().where(
            UserModel.refid.in_(self._members_of(scope, active_only=True))
        )
        return await self._fetch_listing(stmt, scope, listing="active")

    async def list_for_organization(self, scope: TenantScope) -> list[User]:
        """List users with any membership in the scoped organization."""
        stmt = self._select_users().where(
            UserModel.refid.in_(self._members_of(scope, active_only=False))
        )
        return await self._fetch_listing(stmt, scope, listing="all")

    async def list_for_space(self, scope: TenantScope, space_id: SpaceId) -> list[User]:
        """List active organization members holding a grant on the space."""
        granted = select(SpaceRoleModel.userid).where(
            SpaceRoleModel.orgid == scope.org_id.value,
            SpaceRoleModel.labelid == space_id.value,
        )
        stmt = self._select_users().where(
            UserModel.refid.in_(granted),
            UserModel.refid.in_(self._members_of(scope, active_only=True)),
        )
        return await self._fetch_listing(stmt, scope, listing="space")

    async def update_profile(self, user: User) -> int:
        """Overwrite first name, last name, email, initials and revised."""
        stmt = (
            update(UserModel)
            .where(UserModel.refid == user.id.value)
            .values(
                firstname=user.firstname,
                lastname=user.lastname,
                email=user.email,
                initials=user.initials,
                revised=user.revised,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)

        self._probe.user_updated(user.id.value, "profile", result.rowcount)
        return result.rowcount

    async def update_password(
        self, ref_id: UserRefId, salt: str, password: str, revised: datetime
    ) -> int:
        """Set salt and password and clear the reset token."""
        stmt = (
            update(UserModel)
            .where(UserModel.refid == ref_id.value)
            .values(salt=salt, password=password, reset="", revised=revised)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)

        self._probe.user_updated(ref_id.value, "password", result.rowcount)
        return result.rowcount

    async def set_reset_token(self, email: str, token: str, revised: datetime) -> int:
        """Set the reset token and clear the password for a normalized email."""
        stmt = (
            update(UserModel)
            .where(_normalized(UserModel.email) == email)
            .values(reset=token, password="", revised=revised)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)

        self._probe.reset_token_set(email, result.rowcount)
        return result.rowcount

    async def remove_membership(self, ref_id: UserRefId, scope: TenantScope) -> int:
        """Delete the account row binding the user to the scoped organization."""
        stmt = (
            delete(AccountModel)
            .where(
                AccountModel.userid == ref_id.value,
                AccountModel.orgid == scope.org_id.value,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)

        self._probe.membership_removed(ref_id.value, scope.org_id.value, result.rowcount)
        return result.rowcount

    async def count_active(self) -> int:
        """Count users with at least one active membership."""
        stmt = (
            select(func.count())
            .select_from(UserModel)
            .where(
                UserModel.refid.in_(
                    select(AccountModel.userid).where(AccountModel.active.is_(True))
                )
            )
        )
        result = await self._session.execute(stmt)
        count = result.scalar_one()

        self._probe.active_users_counted(count)
        return count

    @staticmethod
    def _select_users() -> Select[tuple[UserModel]]:
        # populate_existing refreshes rows already in the identity map, so
        # reads after an UPDATE in the same session see the new values
        return select(UserModel).execution_options(populate_existing=True)

    @staticmethod
    def _members_of(scope: TenantScope, active_only: bool) -> Select[tuple[str]]:
        stmt = select(AccountModel.userid).where(
            AccountModel.orgid == scope.org_id.value
        )
        if active_only:
            stmt = stmt.where(AccountModel.active.is_(True))
        return stmt

    async def _fetch_one(self, stmt: Select[tuple[UserModel]], lookup: str) -> User | None:
        result = await self._session.execute(stmt.order_by(UserModel.id).limit(1))
        model = result.scalars().first()

        if model is None:
            self._probe.user_not_found(lookup)
            return None

        self._probe.user_retrieved(model.refid, lookup)
        return self._to_domain(model)

    async def _fetch_listing(
        self, stmt: Select[tuple[UserModel]], scope: TenantScope, listing: str
    ) -> list[User]:
        result = await self._session.execute(
            stmt.order_by(UserModel.firstname, UserModel.lastname)
        )
        users = [self._to_domain(model) for model in result.scalars().all()]

        self._probe.users_listed(scope.org_id.value, listing, len(users))
        return users

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User(
            id=UserRefId(value=model.refid),
            firstname=model.firstname,
            lastname=model.lastname,
            email=model.email,
            initials=model.initials,
            global_admin=model.global_,
            password=model.password,
            salt=model.salt,
            reset=model.reset,
            created=_as_utc(model.created),
            revised=_as_utc(model.revised),
        )
