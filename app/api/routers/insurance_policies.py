from typing import Any

from fastapi import APIRouter, Body, Depends, status

from app.api.deps import get_policy_registry
from app.schemas.insurance_policy import InsurancePolicy
from app.services.insurance_policy import PolicyRegistry

router = APIRouter(prefix="/insurance-policies", tags=["insurance-policies"])


@router.post("", response_model=InsurancePolicy, status_code=status.HTTP_201_CREATED)
def create_insurance_policy(
    payload: Any = Body(...),
    registry: PolicyRegistry = Depends(get_policy_registry),
):
    """
    Create a new insurance policy owned by the caller.

    The body is validated by the registry, so a missing field is a 400
    naming that field rather than a 422.
    """
    return registry.create_insurance_policy(payload).unwrap()


@router.get("", response_model=list[InsurancePolicy])
def get_all_insurance_policies(
    registry: PolicyRegistry = Depends(get_policy_registry),
):
    """Get every policy whose holder is the caller. Empty when there are none."""
    return registry.get_all_insurance_policies().unwrap()


@router.get("/{policy_id}", response_model=InsurancePolicy)
def get_insurance_policy(
    policy_id: str,
    registry: PolicyRegistry = Depends(get_policy_registry),
):
    return registry.get_insurance_policy(policy_id).unwrap()


@router.put("/{policy_id}", response_model=InsurancePolicy)
def update_insurance_policy(
    policy_id: str,
    payload: Any = Body(...),
    registry: PolicyRegistry = Depends(get_policy_registry),
):
    """
    Replace the editable fields of a policy. ID, holder and creation time
    are kept; a filed claim cannot be withdrawn (409).
    """
    return registry.update_insurance_policy(policy_id, payload).unwrap()


@router.delete("/{policy_id}", response_model=InsurancePolicy)
def delete_insurance_policy(
    policy_id: str,
    registry: PolicyRegistry = Depends(get_policy_registry),
):
    """Delete a policy and return it as it was before deletion."""
    return registry.delete_insurance_policy(policy_id).unwrap()


@router.post("/{policy_id}/claim", response_model=InsurancePolicy)
def file_claim(
    policy_id: str,
    registry: PolicyRegistry = Depends(get_policy_registry),
):
    """
    File the claim on a policy. A policy can be claimed once; filing again
    returns 409 and leaves the policy unchanged.
    """
    return registry.file_claim(policy_id).unwrap()
