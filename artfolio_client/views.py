"""View states of the marketplace client.

The client shows one page at a time.  ``ViewState`` names the pages and
``VIEW_SECTIONS`` declares which page sections are visible in each
state, so a transition is just an assignment of the current state.
Navigation buttons depend only on whether a member is logged in (see
:func:`nav_controls`) and "Back" goes to the page declared in
``BACK_TARGETS``.
"""

from __future__ import annotations

import enum
import logging
from typing import Dict, FrozenSet


logger = logging.getLogger(__name__)


class ViewState(str, enum.Enum):
    LANDING = "landing"
    LOGIN = "login"
    SIGNUP = "signup"
    MEMBER_PORTFOLIO = "member_portfolio"
    UPLOAD = "upload"
    UPDATE = "update"
    DELETE = "delete"
    VIEW_MORE = "view_more"


# Page section ids.
LANDING_PAGE = "landingPage"
MEMBERS_PANEL = "membersCards"
LOGIN_PAGE = "loginPage"
SIGNUP_PAGE = "signUpPage"
PROJECT_PAGE = "projectPage"
UPLOAD_PAGE = "uploadPortfolioPage"
UPDATE_PAGE = "updatePortfolioPage"
DELETE_PAGE = "deletePortfolioPage"
VIEW_MORE_PAGE = "viewMorePage"

ALL_SECTIONS: FrozenSet[str] = frozenset({
    LANDING_PAGE,
    MEMBERS_PANEL,
    LOGIN_PAGE,
    SIGNUP_PAGE,
    PROJECT_PAGE,
    UPLOAD_PAGE,
    UPDATE_PAGE,
    DELETE_PAGE,
    VIEW_MORE_PAGE,
})

VIEW_SECTIONS: Dict[ViewState, FrozenSet[str]] = {
    ViewState.LANDING: frozenset({LANDING_PAGE, MEMBERS_PANEL}),
    ViewState.LOGIN: frozenset({LOGIN_PAGE}),
    ViewState.SIGNUP: frozenset({SIGNUP_PAGE}),
    ViewState.MEMBER_PORTFOLIO: frozenset({PROJECT_PAGE}),
    ViewState.UPLOAD: frozenset({UPLOAD_PAGE}),
    ViewState.UPDATE: frozenset({UPDATE_PAGE}),
    ViewState.DELETE: frozenset({DELETE_PAGE}),
    ViewState.VIEW_MORE: frozenset({VIEW_MORE_PAGE}),
}

BACK_TARGETS: Dict[ViewState, ViewState] = {
    ViewState.LOGIN: ViewState.LANDING,
    ViewState.SIGNUP: ViewState.LANDING,
    ViewState.MEMBER_PORTFOLIO: ViewState.LANDING,
    ViewState.UPLOAD: ViewState.MEMBER_PORTFOLIO,
    ViewState.UPDATE: ViewState.MEMBER_PORTFOLIO,
    ViewState.DELETE: ViewState.MEMBER_PORTFOLIO,
    ViewState.VIEW_MORE: ViewState.LANDING,
}

# States that only make sense for a logged‑in member.
REQUIRES_LOGIN: FrozenSet[ViewState] = frozenset({
    ViewState.MEMBER_PORTFOLIO,
    ViewState.UPLOAD,
    ViewState.UPDATE,
    ViewState.DELETE,
})

# Navigation buttons.
LOGOUT_BTN = "logoutBtn"
MY_PORTFOLIO_BTN = "myPortfolioBtn"
LOGIN_BTN = "loginBtn"
SIGNUP_BTN = "signUpBtn"


def nav_controls(logged_in: bool) -> FrozenSet[str]:
    """Return the navigation buttons shown for the session state."""
    if logged_in:
        return frozenset({LOGOUT_BTN, MY_PORTFOLIO_BTN})
    return frozenset({LOGIN_BTN, SIGNUP_BTN})


class ViewStateMachine:
    """Holds the current view state; the single source of truth for visibility."""

    def __init__(self, initial: ViewState = ViewState.LANDING) -> None:
        self.state = initial

    @property
    def visible_sections(self) -> FrozenSet[str]:
        return VIEW_SECTIONS[self.state]

    @property
    def hidden_sections(self) -> FrozenSet[str]:
        return ALL_SECTIONS - self.visible_sections

    def is_visible(self, section: str) -> bool:
        return section in self.visible_sections

    def go(self, state: ViewState, *, logged_in: bool) -> ViewState:
        """Move to ``state``; members‑only states redirect to the login page."""
        state = ViewState(state)
        if state in REQUIRES_LOGIN and not logged_in:
            logger.info("View %s needs a login, showing the login page", state.value)
            state = ViewState.LOGIN
        logger.debug("View %s -> %s", self.state.value, state.value)
        self.state = state
        return state

    def back(self, *, logged_in: bool) -> ViewState:
        return self.go(BACK_TARGETS.get(self.state, ViewState.LANDING), logged_in=logged_in)
