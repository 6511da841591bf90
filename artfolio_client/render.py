"""HTML fragments for the marketplace pages.

Each function turns API data into the markup of one page region.  All
interpolated values are HTML‑escaped, because titles, descriptions,
profile fields and comments are free text typed by members.
"""

from __future__ import annotations

import html
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

NO_PORTFOLIO_TEXT = "You have not uploaded any project yet!"
NO_MATCH_TEXT = "Sorry, there is no artwork that matches your search!"
NO_COMMENTS_TEXT = "There has not been any question about this artwork"


def _e(value: Any) -> str:
    if value is None:
        return ""
    return html.escape(str(value))


def _price(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return _e(value)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Read an ISO string, a ``datetime`` or epoch milliseconds."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_date(value: Any) -> str:
    """Format a comment timestamp as ``D/M/YYYY at H:MM``."""
    moment = parse_timestamp(value)
    if moment is None:
        return ""
    return f"{moment.day}/{moment.month}/{moment.year} at {moment.hour}:{moment.minute:02d}"


def member_name(name: str) -> str:
    return f"<b>{_e(name)}</b>"


def members_list(members: Iterable[Dict[str, Any]]) -> str:
    rows = "".join(
        f'<div class="col mt-3"><h4>{_e(m.get("username"))}</h4></div>' for m in members
    )
    return f'<h2 class="pt-5 pb-4">All Members</h2>{rows}'


def account_summary(account: Dict[str, Any]) -> str:
    fields = (
        ("Username", account.get("username")),
        ("Email", account.get("email")),
        ("About", account.get("about")),
        ("Location", account.get("location")),
    )
    rows = "".join(
        '<div class="flexContainer-flexStart mb-1">'
        f'<strong class="userInfoField">{label}:</strong><div>{_e(value)}</div>'
        "</div>"
        for label, value in fields
    )
    website = account.get("website")
    rows += (
        '<div class="flexContainer-flexStart mb-1">'
        '<strong class="userInfoField">Website:</strong>'
        f'<a href="{_e(website)}">{_e(website)}</a>'
        "</div>"
    )
    return rows


def my_portfolio_cards(portfolios: Iterable[Dict[str, Any]]) -> str:
    """Cards for the member's own portfolios, or a notice if there are none."""
    cards = [
        '<div class="card portfolioCard border-bottom">'
        f'<div style="background-image:url({_e(item.get("image"))})" class="portfolioPage-image mb-3"></div>'
        f'<h5 class="card-text mb-3">{_e(item.get("title"))}</h5>'
        '<div class="portfolioPage-buttonsWrapper"><div class="portfolioPage-buttonGroup">'
        f'<div class="button viewMoreButton btn-font" id="{_e(item.get("id"))}">View</div>'
        f'<div class="button-black editButton btn-font" id="{_e(item.get("id"))}">Edit</div>'
        "</div>"
        f'<div class="button-red deleteButton btn-font" id="{_e(item.get("id"))}">Delete</div>'
        "</div></div>"
        for item in portfolios
    ]
    if not cards:
        return f'<div class="noPortfolio text-center">{NO_PORTFOLIO_TEXT}</div>'
    return " ".join(cards)


def product_cards(portfolios: Iterable[Dict[str, Any]]) -> str:
    """Landing page cards: artwork with its author's name, location and site."""
    cards = []
    for art in portfolios:
        author = art.get("authorInfo") or {}
        cards.append(
            '<div class="col-sm-12 col-md-6 col-lg-4 my-xs-1 my-sm-1 my-md-3 my-lg-3">'
            '<div class="card card-border rounded-0 mb-4">'
            f'<img src="{_e(art.get("image"))}" alt="{_e(art.get("title"))}" class="card-img-top radius">'
            '<div class="card-body artcard-body mx-1 my-1">'
            '<div class="artcard-columnwrap">'
            f'<h4 class="card-title artcard-title mb-3">{_e(art.get("title"))}</h4>'
            f'<h5 class="card-title artcard-price">&dollar;{_price(art.get("price"))}</h5>'
            "</div>"
            f'<p class="card-title"><b>{_e(author.get("username"))}, {_e(author.get("location"))}</b></p>'
            f'<p class="mb-3 text-truncate">{_e(art.get("description"))}</p>'
            f'<a href="{_e(author.get("website"))}" class="card-link artcard-link">Artist Website</a>'
            '<div class="artcard-columnwrap mt-4">'
            f'<p class="card-title h5-cyan">{_e(art.get("category"))}</p>'
            f'<div class="button viewMoreButton btn-font" id="{_e(art.get("id"))}">View</div>'
            "</div></div></div></div>"
        )
    return " ".join(cards)


def no_match() -> str:
    return f'<div class="noResultText-wrapper"><h3 class="noResultText">{NO_MATCH_TEXT}</h3></div>'


def view_more(portfolio: Dict[str, Any]) -> str:
    """Detail panel of one portfolio."""
    author = portfolio.get("authorInfo") or {}
    return (
        "<div>"
        f'<h5 class="h3">{_e(portfolio.get("title"))}</h5>'
        '<div class="viewMore-photoBackground">'
        f'<img src="{_e(portfolio.get("image"))}" class="viewMore-mainPhoto" alt="{_e(portfolio.get("title"))} photo">'
        "</div>"
        '<div class="flexContainer-row mt-3 mb-3">'
        f'<h5 class="h4">{_e(author.get("username"))}</h5>'
        f'<h5 class="card-title h4 artcard-price">&dollar;{_price(portfolio.get("price"))}</h5>'
        "</div>"
        f'<p>{_e(portfolio.get("description"))}</p>'
        f'<strong class="mb-5">Location: {_e(author.get("location"))}</strong><br/>'
        f'<a href="{_e(author.get("website"))}" class="artcard-link">{_e(author.get("website"))}</a>'
        '<div class="artcard-columnwrap mt-5 viewMore-endBoarder">'
        f'<p class="card-title h5-cyan">{_e(portfolio.get("category"))}</p>'
        f'<div class="bg-info text-white radius py-2 px-3 btn-font" id="{_e(portfolio.get("id"))}">Buy Now</div>'
        "</div>"
        '<button id="backToLanding" type="button" class="btn btn-dark mt-3 mb-5 btn-font radius">Back</button>'
        "</div>"
    )


def comment(item: Dict[str, Any], current_user: Optional[str] = None) -> str:
    """One comment; the logged‑in member's own comments read "You"."""
    own = bool(current_user) and item.get("postByUsername") == current_user
    side = "comment-right" if own else "comment-left"
    author = "You" if own else _e(item.get("postByUsername"))
    text = f"<b>{_e(item.get('text'))}</b>" if own else _e(item.get("text"))
    return (
        f'<div class="comment-container {side} mb-3">'
        '<div class="comment-info">'
        f'<strong class="mr-1">{author}</strong>'
        f"<p>on {_e(format_date(item.get('posted')))}</p>"
        "</div>"
        f"<p>{text}</p>"
        "</div>"
    )


def comments(items: Iterable[Dict[str, Any]], current_user: Optional[str] = None) -> str:
    rendered = "".join(comment(item, current_user) for item in items)
    if not rendered:
        return f'<div class="text-center">{NO_COMMENTS_TEXT}</div>'
    return rendered
