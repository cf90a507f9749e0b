from pydantic import BaseModel, ConfigDict, Field

# Bounds of the storage columns: String(255) and signed BigInteger
MAX_NAME_LENGTH = 255
MAX_TIMESTAMP = 2**63 - 1


class InsurancePolicy(BaseModel):
    """A stored life-insurance policy record."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    policy_holder: str
    policy_holder_name: str
    coverage_amount: float
    premium_amount: float
    policy_start_date: int
    policy_end_date: int
    is_claimed: bool = False
    created_at: int
    updated_at: int | None = None


class InsurancePolicyPayload(BaseModel):
    """Client-supplied fields for creating or replacing a policy.

    ``id``, ``created_at``, ``updated_at`` and ``policy_holder`` are owned by
    the registry and are never read from the payload.
    """

    model_config = ConfigDict(extra="ignore")

    policy_holder_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    coverage_amount: float
    premium_amount: float
    policy_start_date: int = Field(..., ge=0, le=MAX_TIMESTAMP)
    policy_end_date: int = Field(..., ge=0, le=MAX_TIMESTAMP)
    is_claimed: bool


# Declaration order is the order in which missing fields are reported.
REQUIRED_PAYLOAD_FIELDS: tuple[str, ...] = tuple(InsurancePolicyPayload.model_fields)
