import functools
import logging
from collections.abc import Callable, Mapping
from typing import Any, ParamSpec, TypeVar

from pydantic import ValidationError

from app.core.providers import Clock, IdentityProvider, IdGenerator
from app.domain.claim_status import ClaimFilingPolicy, ClaimStatus
from app.domain.result import Result
from app.errors import ConflictError, DomainError, DomainValidationError, NotFoundError
from app.repositories.insurance_policy import PolicyStore
from app.schemas.insurance_policy import (
    REQUIRED_PAYLOAD_FIELDS,
    InsurancePolicy,
    InsurancePolicyPayload,
)

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def _as_result(operation: Callable[P, T]) -> Callable[P, Result[T]]:
    """Turn domain errors raised inside a registry operation into a failed Result."""

    @functools.wraps(operation)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T]:
        try:
            return Result.ok(operation(*args, **kwargs))
        except DomainError as exc:
            logger.warning("%s rejected: %s", operation.__name__, exc)
            return Result.fail(exc)

    return wrapper


def _not_found(policy_id: str) -> NotFoundError:
    return NotFoundError(f"Insurance Policy with ID={policy_id} not found.")


def _validate_id(policy_id: Any) -> str:
    if not policy_id or not isinstance(policy_id, str):
        raise DomainValidationError("Invalid ID format.")
    return policy_id


def _parse_payload(payload: Any, action: str) -> InsurancePolicyPayload:
    """
    Validate a raw payload mapping.

    - Must be a mapping
    - Must contain every required field (first missing one is reported)
    - Field values must have the right types

    Raises:
        DomainValidationError: If any of the above fails
    """
    if not isinstance(payload, Mapping):
        raise DomainValidationError(f"Invalid payload for {action} an insurance policy.")

    for field in REQUIRED_PAYLOAD_FIELDS:
        if field not in payload:
            raise DomainValidationError(f"Missing required field: {field}.")

    try:
        return InsurancePolicyPayload.model_validate(dict(payload))
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise DomainValidationError(f"Invalid value for field {field}: {error['msg']}.") from exc


class PolicyRegistry:
    """
    Create, read, update, delete and claim insurance policies.

    Every public operation returns a ``Result``; expected failures
    (validation, missing policy, double claim) never escape as exceptions.
    A failed operation leaves the store unchanged.
    """

    def __init__(
        self,
        store: PolicyStore,
        clock: Clock,
        ids: IdGenerator,
        identity: IdentityProvider,
    ) -> None:
        self.store = store
        self.clock = clock
        self.ids = ids
        self.identity = identity

    def _get_existing(self, policy_id: str) -> InsurancePolicy:
        policy = self.store.get(policy_id)
        if policy is None:
            raise _not_found(policy_id)
        return policy

    @_as_result
    def create_insurance_policy(self, payload: Mapping[str, Any]) -> InsurancePolicy:
        """
        Create a policy owned by the calling principal.

        Ownership is never taken from the payload; a ``policy_holder`` key in
        it is ignored.

        Raises (as a failed Result):
            DomainValidationError: If the payload is malformed, incomplete,
                or marks the new policy as already claimed
        """
        data = _parse_payload(payload, "creating")
        if data.is_claimed:
            raise DomainValidationError("A new Insurance Policy cannot start as claimed.")

        policy = InsurancePolicy(
            id=self.ids.new_id(),
            policy_holder=self.identity.current_principal(),
            created_at=self.clock.now(),
            updated_at=None,
            **data.model_dump(),
        )
        self.store.insert(policy.id, policy)
        logger.info("Created insurance policy %s for %s", policy.id, policy.policy_holder)
        return policy

    @_as_result
    def get_insurance_policy(self, policy_id: str) -> InsurancePolicy:
        return self._get_existing(_validate_id(policy_id))

    @_as_result
    def get_all_insurance_policies(self) -> list[InsurancePolicy]:
        """List the caller's policies. A linear scan; there is no owner index."""
        principal = self.identity.current_principal()
        return [p for p in self.store.list_all() if p.policy_holder == principal]

    @_as_result
    def update_insurance_policy(
        self, policy_id: str, payload: Mapping[str, Any]
    ) -> InsurancePolicy:
        """
        Replace the client-editable fields of a policy.

        - ``id``, ``policy_holder`` and ``created_at`` are preserved
        - A filed claim cannot be withdrawn

        Raises (as a failed Result):
            DomainValidationError: If the ID or payload is invalid
            NotFoundError: If the policy doesn't exist
            ConflictError: If the payload would un-claim a claimed policy
        """
        policy_id = _validate_id(policy_id)
        data = _parse_payload(payload, "updating")
        existing = self._get_existing(policy_id)

        claim_policy = ClaimFilingPolicy(ClaimStatus.of(existing.is_claimed))
        if not claim_policy.allows(ClaimStatus.of(data.is_claimed)):
            raise ConflictError(
                f"Claim for Insurance Policy with ID={policy_id} cannot be withdrawn."
            )

        updated = existing.model_copy(
            update={**data.model_dump(), "updated_at": self.clock.now()}
        )
        self.store.insert(policy_id, updated)
        logger.info("Updated insurance policy %s", policy_id)
        return updated

    @_as_result
    def delete_insurance_policy(self, policy_id: str) -> InsurancePolicy:
        """Remove a policy and return it as it was just before removal."""
        policy_id = _validate_id(policy_id)
        removed = self.store.remove(policy_id)
        if removed is None:
            raise _not_found(policy_id)
        logger.info("Deleted insurance policy %s", policy_id)
        return removed

    @_as_result
    def file_claim(self, policy_id: str) -> InsurancePolicy:
        """
        File the (single) claim on a policy.

        Not idempotent: a second filing is reported as a conflict and the
        stored record is left as the first filing wrote it.

        Raises (as a failed Result):
            DomainValidationError: If the ID is invalid
            NotFoundError: If the policy doesn't exist
            ConflictError: If a claim has already been filed
        """
        policy_id = _validate_id(policy_id)
        policy = self._get_existing(policy_id)

        if not ClaimFilingPolicy(ClaimStatus.of(policy.is_claimed)).can_file():
            raise ConflictError(
                f"Claim for Insurance Policy with ID={policy_id} has already been filed."
            )

        claimed = policy.model_copy(
            update={"is_claimed": True, "updated_at": self.clock.now()}
        )
        self.store.insert(policy_id, claimed)
        logger.info("Filed claim for insurance policy %s", policy_id)
        return claimed
