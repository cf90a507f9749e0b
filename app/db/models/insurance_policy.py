from sqlalchemy import BigInteger, Boolean, Column, Float, String

from app.db.base import Base


class InsurancePolicy(Base):
    __tablename__ = "insurance_policies"

    id = Column(String(36), primary_key=True, index=True)
    policy_holder = Column(String(255), nullable=False)
    policy_holder_name = Column(String(255), nullable=False)
    coverage_amount = Column(Float, nullable=False)
    premium_amount = Column(Float, nullable=False)
    policy_start_date = Column(BigInteger, nullable=False)
    policy_end_date = Column(BigInteger, nullable=False)
    is_claimed = Column(Boolean, nullable=False, default=False)
    # Record timestamps are integer nanoseconds
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=True)
