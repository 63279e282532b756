"""Reference domain models - regions, offices, operator accounts."""

from app.models.reference.account import ACCOUNT_DDL
from app.models.reference.entities import Office, OperatorAccount, Region, Role
from app.models.reference.office import OFFICE_DDL
from app.models.reference.region import REGION_DDL

__all__ = [
    "REGION_DDL",
    "OFFICE_DDL",
    "ACCOUNT_DDL",
    "Region",
    "Office",
    "OperatorAccount",
    "Role",
]
