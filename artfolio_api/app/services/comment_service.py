"""
Business logic for comments.

Comments are posted by authenticated members on a portfolio and read
back as part of the portfolio detail view.  The author's username is
stored alongside the author id so the detail view needs no extra join.
"""

import logging
import sqlite3
from datetime import datetime, timezone
from typing import List

from ..core.db import get_connection
from ..core.errors import NotFound, Unauthorized
from ..schemas.comment import CommentCreate, CommentRead


logger = logging.getLogger(__name__)


def _row_to_comment(row: sqlite3.Row) -> CommentRead:
    return CommentRead(
        id=row["id"],
        portfolio_id=row["portfolio_id"],
        post_by_id=row["post_by_id"],
        post_by_username=row["post_by_username"],
        posted=row["posted"],
        text=row["text"],
    )


class CommentService:
    """Service for posting and listing portfolio comments."""

    @classmethod
    async def create_comment(cls, data: CommentCreate, current_member: dict) -> CommentRead:
        """Post a comment on a portfolio as the authenticated member.

        Raises ``Unauthorized`` if the payload names a different author
        and ``NotFound`` if the portfolio does not exist.
        """
        author_id = current_member["member_id"]
        author_name = current_member["username"]
        if data.post_by_id is not None and data.post_by_id != author_id:
            raise Unauthorized("Cannot post a comment as another member")
        if data.post_by_username is not None and data.post_by_username != author_name:
            raise Unauthorized("Cannot post a comment as another member")
        posted = data.post_date or datetime.now(timezone.utc)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            portfolio = cursor.execute(
                "SELECT id FROM portfolios WHERE id = ?",
                (data.portfolio_id,),
            ).fetchone()
            if not portfolio:
                raise NotFound(f"Portfolio {data.portfolio_id} not found")
            cursor.execute(
                """
                INSERT INTO comments (portfolio_id, post_by_id, post_by_username, posted, text)
                VALUES (?, ?, ?, ?, ?)
                """,
                (data.portfolio_id, author_id, author_name, posted.isoformat(), data.content),
            )
            comment_id = cursor.lastrowid
            conn.commit()
        finally:
            conn.close()
        logger.info("Member %s commented on portfolio %s", author_id, data.portfolio_id)
        return CommentRead(
            id=comment_id,
            portfolio_id=data.portfolio_id,
            post_by_id=author_id,
            post_by_username=author_name,
            posted=posted,
            text=data.content,
        )

    @classmethod
    async def list_for_portfolio(cls, portfolio_id: int) -> List[CommentRead]:
        """Return the comments of a portfolio in posting order."""
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT id, portfolio_id, post_by_id, post_by_username, posted, text "
                "FROM comments WHERE portfolio_id = ? ORDER BY id",
                (portfolio_id,),
            ).fetchall()
            return [_row_to_comment(row) for row in rows]
        finally:
            conn.close()
