"""API errors and validation helpers."""


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Accepted claim length for AI fact checking
MIN_CLAIM_LENGTH = 10
MAX_CLAIM_LENGTH = 1000


def validate_claim(claim: str) -> str:
    """Validate a claim submitted for fact checking and return it stripped."""
    if not isinstance(claim, str) or not claim.strip():
        raise ValidationError("Claim is required")
    claim = claim.strip()
    if not MIN_CLAIM_LENGTH <= len(claim) <= MAX_CLAIM_LENGTH:
        raise ValidationError(
            f"Claim must be between {MIN_CLAIM_LENGTH} and {MAX_CLAIM_LENGTH} characters"
        )
    return claim


def validate_politician_ids(politician_ids: list[str]) -> list[str]:
    """At least two distinct politicians are needed for a comparison."""
    ids = list(dict.fromkeys(i for i in politician_ids if i))
    if len(ids) < 2:
        raise ValidationError("At least 2 politicians required for comparison")
    return ids
