"""Marketplace client controller.

``MarketplaceApp`` ties the pieces of the client together: it reads the
configuration once, talks to the API through :class:`MarketplaceAPI`,
keeps the login in a :class:`SessionStore` and moves between pages with
a :class:`ViewStateMachine`.  Every action returns the updated
:class:`Page`, a plain model of what the user should see: visible
sections, navigation buttons, rendered HTML fragments and alert
messages.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional

from . import render
from .api import MarketplaceAPI
from .config import ClientConfig, load_client_config
from .session import (
    ACCESS_TOKEN,
    CURRENT_PORTFOLIO,
    MEMBER_ID,
    USERS_NAME,
    SessionStore,
)
from .views import ViewState, ViewStateMachine, nav_controls


logger = logging.getLogger(__name__)

# Fragment ids.
MEMBER_NAME = "memberName"
LANDING_CARDS = "landingPage-cards"
MEMBERS_LIST = "membersCards"
ACCOUNT_INFO = "projectPage-accountInfo"
PROJECT_CARDS = "projectPage-cards"
VIEW_MORE_CONTENT = "viewMorePage-content"
VIEW_MORE_COMMENTS = "viewMorePage-comments"


@dataclass
class Page:
    state: ViewState = ViewState.LANDING
    visible_sections: FrozenSet[str] = frozenset()
    nav: FrozenSet[str] = frozenset()
    fragments: Dict[str, str] = field(default_factory=dict)
    alerts: List[str] = field(default_factory=list)


class MarketplaceApp:
    """Page controller of the marketplace client."""

    def __init__(
        self,
        config_source: str,
        *,
        session: Optional[SessionStore] = None,
        api: Optional[MarketplaceAPI] = None,
        timeout: float = 15,
    ) -> None:
        self.config_source = config_source
        self.config: Optional[ClientConfig] = None
        self.session = session or SessionStore()
        self.api = api
        self.timeout = timeout
        self.views = ViewStateMachine()
        self.page = Page()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def logged_in(self) -> bool:
        return self.session.logged_in

    def _begin(self) -> None:
        self.page.alerts = []

    def _alert(self, message: str) -> None:
        logger.info("Alert: %s", message)
        self.page.alerts.append(message)

    def _show(self, state: ViewState) -> Page:
        self.views.go(state, logged_in=self.logged_in)
        return self._sync()

    def _sync(self) -> Page:
        self.page.state = self.views.state
        self.page.visible_sections = self.views.visible_sections
        self.page.nav = nav_controls(self.logged_in)
        name = self.session.get(USERS_NAME)
        self.page.fragments[MEMBER_NAME] = render.member_name(name) if name else ""
        return self.page

    def _require_started(self) -> MarketplaceAPI:
        if self.api is None:
            raise RuntimeError("MarketplaceApp.start() must be called first")
        return self.api

    # ------------------------------------------------------------------
    # Startup and navigation
    # ------------------------------------------------------------------
    def start(self) -> Page:
        """Load the configuration, restore the session and show the landing page.

        The configuration is read only once; later calls reuse it.
        ``ConfigError`` propagates, since no API call is possible
        without a base URL.
        """
        self._begin()
        if self.config is None:
            self.config = load_client_config(self.config_source, timeout=self.timeout)
        if self.api is None:
            self.api = MarketplaceAPI(base_url=self.config.base_url, timeout=self.timeout)
        self.api.set_token(self.session.get(ACCESS_TOKEN))
        self._load_landing()
        return self._show(ViewState.LANDING)

    def navigate(self, state: ViewState) -> Page:
        self._begin()
        self.views.go(state, logged_in=self.logged_in)
        return self._refresh()

    def back(self) -> Page:
        self._begin()
        if self.views.state is ViewState.VIEW_MORE:
            return self.back_to_landing()
        self.views.back(logged_in=self.logged_in)
        return self._refresh()

    def _refresh(self) -> Page:
        # Reload whatever the current state renders.
        if self.views.state is ViewState.LANDING:
            self._load_landing()
        elif self.views.state is ViewState.MEMBER_PORTFOLIO:
            self._load_my_portfolio()
        return self._sync()

    def _load_landing(self) -> None:
        portfolios, error = self._require_started().list_portfolios_with_authors()
        if error:
            self._alert(error["message"])
            return
        self.page.fragments[LANDING_CARDS] = render.product_cards(portfolios)

    # ------------------------------------------------------------------
    # Members
    # ------------------------------------------------------------------
    def register(
        self,
        username: str,
        email: str,
        password: str,
        *,
        about: Optional[str] = None,
        location: Optional[str] = None,
        website: Optional[str] = None,
    ) -> Page:
        self._begin()
        if not (username and email and password):
            self._alert("Please fill in all input fields")
            return self._sync()
        _, error = self._require_started().register_member(
            username, email, password, about=about, location=location, website=website
        )
        if error:
            self._alert(error["message"])
            return self._sync()
        self._alert("Please login to add artwork and buy art")
        return self._show(ViewState.LOGIN)

    def login(self, username: str, password: str) -> Page:
        self._begin()
        if not (username and password):
            self._alert("Please fill in all input fields")
            return self._sync()
        api = self._require_started()
        member, error = api.login_member(username, password)
        if error:
            if error["code"] == "not_found":
                self._alert("Register please")
            elif error["code"] == "unauthorized":
                self._alert("Incorrect Password")
            else:
                self._alert(error["message"])
            return self._sync()
        self.session.remember_member(member)
        api.set_token(member.get("access_token"))
        logger.info("Logged in as %s", member.get("username"))
        return self._show(ViewState.LANDING)

    def logout(self) -> Page:
        self._begin()
        self.session.clear()
        if self.api is not None:
            self.api.set_token(None)
        self.page.fragments.pop(ACCOUNT_INFO, None)
        self.page.fragments.pop(PROJECT_CARDS, None)
        return self._show(ViewState.LANDING)

    def view_members(self) -> Page:
        self._begin()
        members, error = self._require_started().list_members()
        if error:
            self._alert(error["message"])
        else:
            self.page.fragments[MEMBERS_LIST] = render.members_list(members)
        return self._sync()

    # ------------------------------------------------------------------
    # Portfolios
    # ------------------------------------------------------------------
    def show_my_portfolio(self) -> Page:
        """Show the logged-in member's account summary and portfolios."""
        self._begin()
        if self.logged_in:
            self._load_my_portfolio()
        return self._show(ViewState.MEMBER_PORTFOLIO)

    def _load_my_portfolio(self) -> None:
        api = self._require_started()
        member_id = self.session.get(MEMBER_ID)
        account, error = api.get_account_info(member_id)
        if error:
            self._alert(error["message"])
        else:
            self.page.fragments[ACCOUNT_INFO] = render.account_summary(account)
        portfolios, error = api.list_member_portfolios(member_id)
        if error:
            self._alert(error["message"])
        else:
            self.page.fragments[PROJECT_CARDS] = render.my_portfolio_cards(portfolios)

    def add_portfolio(
        self,
        *,
        title: str,
        description: str,
        image: str,
        category: str,
        price: Any,
    ) -> Page:
        self._begin()
        if not self.logged_in:
            self._alert("401, permission denied")
            return self._sync()
        if any(value in (None, "") for value in (title, description, image, category, price)):
            self._alert("Please enter all details")
            return self._sync()
        _, error = self._require_started().add_portfolio(
            title=title,
            description=description,
            image=image,
            category=category,
            price=price,
            member_id=self.session.get(MEMBER_ID),
        )
        if error:
            self._alert(error["message"])
            return self._sync()
        self._alert("Added the portfolio")
        self._load_my_portfolio()
        return self._show(ViewState.MEMBER_PORTFOLIO)

    def view_portfolio(self, portfolio_id: Any) -> Page:
        self._begin()
        portfolio, error = self._require_started().get_portfolio_with_author(portfolio_id)
        if error:
            self._alert(error["message"])
            return self._sync()
        self.session.set(CURRENT_PORTFOLIO, portfolio["id"])
        self.page.fragments[VIEW_MORE_CONTENT] = render.view_more(portfolio)
        self.page.fragments[VIEW_MORE_COMMENTS] = render.comments(
            portfolio.get("comments") or [], self.session.get(USERS_NAME)
        )
        return self._show(ViewState.VIEW_MORE)

    def back_to_landing(self) -> Page:
        self._begin()
        self.session.remove(CURRENT_PORTFOLIO)
        self._load_landing()
        return self._show(ViewState.LANDING)

    def filter_portfolios(self, min_price: Any, max_price: Any, category: str = "all") -> Page:
        self._begin()
        portfolios, error = self._require_started().filter_portfolios(min_price, max_price, category)
        if error:
            self._alert(error["message"])
            return self._sync()
        if portfolios:
            self.page.fragments[LANDING_CARDS] = render.product_cards(portfolios)
        else:
            self.page.fragments[LANDING_CARDS] = render.no_match()
        return self._show(ViewState.LANDING)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------
    def post_comment(self, content: str) -> Page:
        """Ask a question on the open portfolio as the logged-in member."""
        self._begin()
        portfolio_id = self.session.get(CURRENT_PORTFOLIO)
        if not self.logged_in:
            self._alert("Please login to ask a question")
            return self._sync()
        if portfolio_id is None:
            self._alert("Open an artwork first")
            return self._sync()
        if not content or not content.strip():
            self._alert("Please enter all details")
            return self._sync()
        comment, error = self._require_started().add_comment(
            portfolio_id, content, post_date=int(time.time() * 1000)
        )
        if error:
            self._alert(error["message"])
            return self._sync()
        fragment = self.page.fragments.get(VIEW_MORE_COMMENTS, "")
        if render.NO_COMMENTS_TEXT in fragment:
            fragment = ""
        self.page.fragments[VIEW_MORE_COMMENTS] = fragment + render.comment(
            comment, self.session.get(USERS_NAME)
        )
        return self._sync()
