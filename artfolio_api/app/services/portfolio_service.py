"""
Business logic for portfolios.

``PortfolioService`` stores artwork listings in the ``portfolios``
table and reads them back either on their own or joined with the
public fields of the owning member (``authorInfo``).  The join is an
inner join, so a listing whose owner row is missing is left out of the
joined views.  Empty results are always empty lists.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import get_connection, is_unique_violation
from ..core.errors import Conflict, NotFound, Unauthorized
from ..schemas.portfolio import (
    AuthorInfo,
    PortfolioCreate,
    PortfolioDetail,
    PortfolioRead,
    PortfolioWithAuthor,
)
from .comment_service import CommentService


logger = logging.getLogger(__name__)

# Category value meaning "do not filter by category".
ALL_CATEGORIES = "all"

PORTFOLIO_COLUMNS = "id, title, description, image, category, price, member_id"

JOINED_SELECT = (
    "SELECT p.id, p.title, p.description, p.image, p.category, p.price, p.member_id, "
    "m.username AS author_username, m.location AS author_location, m.website AS author_website "
    "FROM portfolios p JOIN members m ON m.id = p.member_id"
)


def _row_to_portfolio(row: sqlite3.Row) -> PortfolioRead:
    return PortfolioRead(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        image=row["image"],
        category=row["category"],
        price=row["price"],
        member_id=row["member_id"],
    )


def _row_to_joined(row: sqlite3.Row) -> PortfolioWithAuthor:
    return PortfolioWithAuthor(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        image=row["image"],
        category=row["category"],
        price=row["price"],
        member_id=row["member_id"],
        author_info=AuthorInfo(
            id=row["member_id"],
            username=row["author_username"],
            location=row["author_location"],
            website=row["author_website"],
        ),
    )


class PortfolioService:
    """Service for uploading, listing and filtering portfolios."""

    @classmethod
    async def create_portfolio(cls, data: PortfolioCreate, current_member: dict) -> PortfolioRead:
        """Store a new portfolio owned by the authenticated member.

        A ``memberId`` in the payload that names someone else is
        rejected with ``Unauthorized``.  A duplicate title violates the
        ``UNIQUE`` constraint and is reported as ``Conflict``.
        """
        owner_id = current_member["member_id"]
        if data.member_id is not None and data.member_id != owner_id:
            logger.warning(
                "Member %s tried to upload a portfolio for member %s", owner_id, data.member_id
            )
            raise Unauthorized("Cannot upload a portfolio for another member")
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO portfolios (title, description, image, category, price, member_id)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (data.title, data.description, data.image, data.category, data.price, owner_id),
            )
            portfolio_id = cursor.lastrowid
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if is_unique_violation(e):
                logger.warning("Portfolio title '%s' is already taken", data.title)
                raise Conflict("Title taken already, please try another one") from e
            raise
        finally:
            conn.close()
        logger.info("Member %s added portfolio %s '%s'", owner_id, portfolio_id, data.title)
        return PortfolioRead(
            id=portfolio_id,
            title=data.title,
            description=data.description,
            image=data.image,
            category=data.category,
            price=data.price,
            member_id=owner_id,
        )

    @classmethod
    async def list_portfolios(cls) -> List[PortfolioRead]:
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT {PORTFOLIO_COLUMNS} FROM portfolios ORDER BY id"
            ).fetchall()
            return [_row_to_portfolio(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def list_member_portfolios(cls, member_id: int) -> List[PortfolioRead]:
        """Return the portfolios owned by ``member_id`` (possibly none)."""
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT {PORTFOLIO_COLUMNS} FROM portfolios WHERE member_id = ? ORDER BY id",
                (member_id,),
            ).fetchall()
            return [_row_to_portfolio(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def list_with_authors(cls) -> List[PortfolioWithAuthor]:
        """Return every portfolio joined with its author's public profile."""
        conn = get_connection()
        try:
            rows = conn.execute(f"{JOINED_SELECT} ORDER BY p.id").fetchall()
            return [_row_to_joined(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def get_with_author(cls, portfolio_id: int) -> PortfolioDetail:
        """Return one portfolio with author info and its comments.

        Comments come back in the order they were posted.  Raises
        ``NotFound`` if the portfolio does not exist.
        """
        conn = get_connection()
        try:
            row = conn.execute(
                f"{JOINED_SELECT} WHERE p.id = ?",
                (portfolio_id,),
            ).fetchone()
        finally:
            conn.close()
        if not row:
            raise NotFound(f"Portfolio {portfolio_id} not found")
        comments = await CommentService.list_for_portfolio(portfolio_id)
        return PortfolioDetail(**_row_to_joined(row).model_dump(), comments=comments)

    @classmethod
    async def filter_portfolios(
        cls,
        min_price: float,
        max_price: float,
        category: Optional[str] = ALL_CATEGORIES,
    ) -> List[PortfolioWithAuthor]:
        """Filter portfolios by price range and category.

        - Both price bounds are exclusive: a listing priced exactly
          ``min_price`` or ``max_price`` is not returned.
        - ``category`` equal to ``"all"`` (or ``None``) disables the
          category filter.
        """
        where_clauses = ["p.price > ?", "p.price < ?"]
        params: list = [min_price, max_price]
        if category and category != ALL_CATEGORIES:
            where_clauses.append("p.category = ?")
            params.append(category)
        query = f"{JOINED_SELECT} WHERE {' AND '.join(where_clauses)} ORDER BY p.id"
        conn = get_connection()
        try:
            rows = conn.execute(query, tuple(params)).fetchall()
        finally:
            conn.close()
        logger.debug(
            "Filter %s < price < %s, category=%s matched %d portfolios",
            min_price, max_price, category, len(rows),
        )
        return [_row_to_joined(row) for row in rows]
