from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.core.providers import StaticIdentityProvider, system_clock, uuid_generator
from app.core.security import get_principal_from_token
from app.db import SessionLocal
from app.errors import UnauthorizedError
from app.repositories.insurance_policy import SqlAlchemyPolicyStore
from app.services.insurance_policy import PolicyRegistry

# Tokens are issued elsewhere; this service only verifies them.
bearer_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token", auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_principal(token: str | None = Depends(bearer_scheme)) -> str:
    """Resolve the calling principal from the bearer token."""
    if not token:
        raise UnauthorizedError("Not authenticated")

    principal = get_principal_from_token(token)
    if principal is None:
        raise UnauthorizedError("Could not validate credentials")
    return principal


def get_policy_registry(
    db: Session = Depends(get_db),
    principal: str = Depends(get_current_principal),
) -> PolicyRegistry:
    """Build a registry bound to this request's session and caller."""
    return PolicyRegistry(
        store=SqlAlchemyPolicyStore(db),
        clock=system_clock,
        ids=uuid_generator,
        identity=StaticIdentityProvider(principal),
    )
