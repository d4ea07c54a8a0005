"""Identity Provider — resolves bearer tokens to Callers via the `api_users` table.

Invariants:
    - Missing, unknown or inactive tokens resolve to ANONYMOUS (never raise)
    - Tokens are compared by SHA-256 digest
"""

import hashlib

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from smartsales.core.domain_types import ANONYMOUS, Caller
from smartsales.models.api_user import ApiUser


def digest_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class SqlIdentityProvider:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def resolve(self, token: str | None) -> Caller:
        if not token:
            return ANONYMOUS
        result = await self.db.execute(
            select(ApiUser).where(ApiUser.token_digest == digest_token(token)),
        )
        user = result.scalar_one_or_none()
        if user is None or not user.is_active:
            return ANONYMOUS
        return Caller(
            authenticated=True,
            login=user.login,
            roles=frozenset(user.roles or []),
            capabilities=frozenset(user.capabilities or []),
        )
