"""Policy stores: ordered maps from policy ID to policy record.

Stores are pure data access - no business logic. They never fail for a
missing key; absence is reported as ``None``.
"""

from typing import Protocol

from sqlalchemy.orm import Session

from app.db.models.insurance_policy import InsurancePolicy as InsurancePolicyModel
from app.schemas.insurance_policy import InsurancePolicy


class PolicyStore(Protocol):
    def insert(self, policy_id: str, policy: InsurancePolicy) -> None:
        """Insert or overwrite the record stored at ``policy_id``."""
        ...

    def get(self, policy_id: str) -> InsurancePolicy | None: ...

    def remove(self, policy_id: str) -> InsurancePolicy | None:
        """Remove the record at ``policy_id`` and return it, if present."""
        ...

    def list_all(self) -> list[InsurancePolicy]: ...


class InMemoryPolicyStore:
    """Process-local store. Each instance owns its own records."""

    def __init__(self) -> None:
        self._policies: dict[str, InsurancePolicy] = {}

    def insert(self, policy_id: str, policy: InsurancePolicy) -> None:
        self._policies[policy_id] = policy

    def get(self, policy_id: str) -> InsurancePolicy | None:
        return self._policies.get(policy_id)

    def remove(self, policy_id: str) -> InsurancePolicy | None:
        return self._policies.pop(policy_id, None)

    def list_all(self) -> list[InsurancePolicy]:
        return [self._policies[key] for key in sorted(self._policies)]


class SqlAlchemyPolicyStore:
    """Store backed by the ``insurance_policies`` table. One commit per mutation."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _commit(self) -> None:
        """Commit, rolling back first if the commit fails so the session stays usable."""
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def insert(self, policy_id: str, policy: InsurancePolicy) -> None:
        values = policy.model_dump()
        values["id"] = policy_id
        self.db.merge(InsurancePolicyModel(**values))
        self._commit()

    def get(self, policy_id: str) -> InsurancePolicy | None:
        row = self.db.get(InsurancePolicyModel, policy_id)
        if row is None:
            return None
        return InsurancePolicy.model_validate(row)

    def remove(self, policy_id: str) -> InsurancePolicy | None:
        row = self.db.get(InsurancePolicyModel, policy_id)
        if row is None:
            return None
        policy = InsurancePolicy.model_validate(row)
        self.db.delete(row)
        self._commit()
        return policy

    def list_all(self) -> list[InsurancePolicy]:
        rows = self.db.query(InsurancePolicyModel).order_by(InsurancePolicyModel.id).all()
        return [InsurancePolicy.model_validate(row) for row in rows]
