"""Client for the Artfolio Marketplace API.

The client mirrors the single‑page browser front end: it reads its
server address from ``config.json``, keeps the logged‑in identity in a
small key‑value session store, moves between page sections through a
declarative view‑state machine and renders API data into HTML
fragments.

* :mod:`artfolio_client.config` – locate the API.
* :mod:`artfolio_client.api` – HTTP calls (``requests``).
* :mod:`artfolio_client.session` – client‑side session keys.
* :mod:`artfolio_client.views` – view states and visible sections.
* :mod:`artfolio_client.render` – HTML fragments.
* :mod:`artfolio_client.app` – the controller wiring them together.
"""

from .api import MarketplaceAPI
from .app import MarketplaceApp, Page
from .config import ClientConfig, load_client_config
from .session import SessionStore
from .views import ViewState

__all__ = [
    "ClientConfig",
    "MarketplaceAPI",
    "MarketplaceApp",
    "Page",
    "SessionStore",
    "ViewState",
    "load_client_config",
]
