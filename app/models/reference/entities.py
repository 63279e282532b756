"""Reference data entities - seed input records."""

from dataclasses import dataclass
from enum import StrEnum

from app.models.common import BaseEntity


class Role(StrEnum):
    """Account roles."""

    USER = "USER"
    ADMIN = "ADMIN"
    SUPER_ADMIN = "SUPER_ADMIN"


@dataclass
class Region(BaseEntity):
    """A state (or the FCT) and its geopolitical zone."""

    code: str
    name: str
    zone: str


@dataclass
class Office(BaseEntity):
    """A government office type."""

    name: str
    category: str
    level: str
    description: str

    @property
    def id(self) -> str:
        return self.category.lower()


@dataclass
class OperatorAccount(BaseEntity):
    """Privileged operator seeded at deployment."""

    email: str
    password: str
    first_name: str
    last_name: str
    role: Role = Role.SUPER_ADMIN
