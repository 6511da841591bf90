"""
Business logic for members.

``MemberService`` registers members, checks login credentials and
reads member profiles from the ``members`` table.  Password hashes are
read only for verification and are never copied into a returned
record.
"""

import logging
import sqlite3
from typing import List

from ..core.db import get_connection, is_unique_violation
from ..core.errors import Conflict, NotFound, Unauthorized
from ..core.security import hash_password, verify_password
from ..schemas.member import MemberCreate, MemberRead


logger = logging.getLogger(__name__)

PUBLIC_COLUMNS = "id, username, email, about, location, website"


def _row_to_member(row: sqlite3.Row) -> MemberRead:
    return MemberRead(
        id=row["id"],
        username=row["username"],
        email=row["email"],
        about=row["about"],
        location=row["location"],
        website=row["website"],
    )


class MemberService:
    """Service for registering, authenticating and reading members."""

    @classmethod
    async def register(cls, data: MemberCreate) -> MemberRead:
        """Create a new member and return its public record.

        The password is stored as a salted PBKDF2 hash.  Username
        uniqueness is left to the ``UNIQUE`` constraint on the table so
        that two concurrent registrations cannot both succeed; the
        losing insert raises ``Conflict``.
        """
        logger.info("Registering member %s", data.username)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO members (username, email, password, about, location, website) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (
                    data.username,
                    data.email,
                    hash_password(data.password),
                    data.about,
                    data.location,
                    data.website,
                ),
            )
            member_id = cursor.lastrowid
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if is_unique_violation(e):
                logger.warning("Username %s is already taken", data.username)
                raise Conflict("Username already taken. Please try another one") from e
            raise
        finally:
            conn.close()
        return MemberRead(
            id=member_id,
            username=data.username,
            email=data.email,
            about=data.about,
            location=data.location,
            website=data.website,
        )

    @classmethod
    async def authenticate(cls, username: str, password: str) -> MemberRead:
        """Check credentials and return the matching member.

        Raises ``NotFound`` for an unknown username and ``Unauthorized``
        when the password does not match the stored hash.
        """
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {PUBLIC_COLUMNS}, password FROM members WHERE username = ?",
                (username,),
            ).fetchone()
        finally:
            conn.close()
        if not row:
            raise NotFound("Member not found. Please register")
        if not verify_password(password, row["password"]):
            logger.warning("Failed login for member %s", username)
            raise Unauthorized("Not authorized")
        logger.info("Member %s logged in", username)
        return _row_to_member(row)

    @classmethod
    async def list_members(cls) -> List[MemberRead]:
        """Return all members in registration order."""
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT {PUBLIC_COLUMNS} FROM members ORDER BY id"
            ).fetchall()
            return [_row_to_member(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def get_member(cls, member_id: int) -> MemberRead:
        """Retrieve a member by ID, raising ``NotFound`` if absent."""
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {PUBLIC_COLUMNS} FROM members WHERE id = ?",
                (member_id,),
            ).fetchone()
        finally:
            conn.close()
        if not row:
            raise NotFound(f"Member {member_id} not found")
        return _row_to_member(row)
