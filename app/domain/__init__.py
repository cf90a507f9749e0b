"""Domain-level rules for insurance policies.

Rules here (claim filing, operation outcomes) say *what* is allowed,
independent from *where* they are applied (registry, HTTP layer, stores).
"""
