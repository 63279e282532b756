"""Account repository - operator accounts."""

from datetime import datetime

from loguru import logger

from app.models.reference import OperatorAccount
from app.repositories.base import BaseRepository
from app.security.passwords import hash_password, verify_password


class AccountRepository(BaseRepository):
    """Repository for operator account access."""

    def upsert_operator(self, account: OperatorAccount) -> None:
        """Insert or update an operator by email.

        The password hash is written on insert only; an existing account
        keeps its credential and gets its profile and role refreshed.
        """
        self._require_writable()
        now = datetime.now()
        self.execute(
            """
            INSERT INTO account
                (email, password_hash, first_name, last_name, role, is_active, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, TRUE, ?, ?)
            ON CONFLICT (email) DO UPDATE SET
                first_name = EXCLUDED.first_name,
                last_name = EXCLUDED.last_name,
                role = EXCLUDED.role,
                updated_at = EXCLUDED.updated_at
            """,
            [
                account.email,
                hash_password(account.password),
                account.first_name,
                account.last_name,
                str(account.role),
                now,
                now,
            ],
        )
        logger.info("Operator created/updated: {} (role: {})", account.email, account.role)

    def get(self, email: str) -> dict | None:
        row = self.fetchone(
            "SELECT email, first_name, last_name, role, is_active FROM account WHERE email = ?",
            [email],
        )
        if not row:
            return None
        return {"email": row[0], "first_name": row[1], "last_name": row[2], "role": row[3], "is_active": row[4]}

    def check_password(self, email: str, password: str) -> bool:
        """Verify a password against the stored hash."""
        row = self.fetchone("SELECT password_hash FROM account WHERE email = ? AND is_active", [email])
        return bool(row) and verify_password(password, row[0])
