from app.db.models.insurance_policy import InsurancePolicy

__all__ = ["InsurancePolicy"]
