import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, TypeVar

import requests
from dotenv import load_dotenv
from pydantic import BaseModel

from mochi_pitch import MOCHI_BASE_URL
from mochi_pitch.logger import logger
from .models import Card, Deck, PaginatedResponse, Template

load_dotenv()

T = TypeVar('T', bound=BaseModel)

CARDS_PAGE_LIMIT = 100


class MochiApiError(Exception):
    """Raised when the Mochi API answers with an error status."""
    def __init__(self, method: str, url: str, status_code: int, body: str):
        super().__init__(f"{method} {url} failed with status {status_code}: {body}")
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body


@dataclass
class MochiConfig:
    api_key: str
    base_url: str = MOCHI_BASE_URL
    timeout: float = 30.0


def get_mochi_config() -> MochiConfig:
    """Build the client configuration from the environment."""
    api_key = os.getenv('MOCHI_KEY')
    if not api_key:
        raise ValueError("MOCHI_KEY must be set in environment")
    base_url = os.getenv('MOCHI_BASE_URL') or MOCHI_BASE_URL
    return MochiConfig(api_key=api_key, base_url=base_url)


class MochiClient:
    """Thin client for the parts of the Mochi REST API used to update cards."""

    def __init__(self, config: MochiConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()
        # Mochi uses the API key as the basic-auth user with an empty password
        self.session.auth = (config.api_key, "")

    def _url(self, endpoint: str) -> str:
        return self.config.base_url.rstrip("/") + "/" + endpoint.lstrip("/")

    def _request(self, method: str, endpoint: str, **kwargs) -> Dict[str, Any]:
        url = self._url(endpoint)
        response = self.session.request(method, url, timeout=self.config.timeout, **kwargs)
        if not response.ok:
            raise MochiApiError(method, url, response.status_code, response.text)
        return response.json()

    def _list(self, endpoint: str, model: Type[T], params: Optional[Dict[str, Any]] = None) -> List[T]:
        """Fetch every page of *endpoint*, following the bookmark until a page is empty."""
        items: List[T] = []
        bookmark: Optional[str] = None
        page_count = 1
        while True:
            logger.info(f"Fetching {endpoint} page {page_count}")
            query = dict(params or {})
            if bookmark is not None:
                query["bookmark"] = bookmark
            data = self._request("GET", endpoint, params=query)
            page = PaginatedResponse[model].model_validate(data)
            if not page.docs:
                break
            items.extend(page.docs)
            bookmark = page.bookmark
            page_count += 1
        return items

    def list_decks(self) -> List[Deck]:
        return self._list("decks", Deck)

    def list_templates(self) -> List[Template]:
        return self._list("templates", Template)

    def list_cards(self, deck_id: str) -> List[Card]:
        return self._list("cards", Card, {"deck-id": deck_id, "limit": CARDS_PAGE_LIMIT})

    def get_card(self, card_id: str) -> Card:
        return Card.model_validate(self._request("GET", f"cards/{card_id}"))

    def get_template(self, template_id: str) -> Template:
        return Template.model_validate(self._request("GET", f"templates/{template_id}"))

    def update_card(self, card_id: str, fields: Dict[str, str]) -> Card:
        """Overwrite the given field values (field id -> value) of a card."""
        payload = {
            "fields": {
                field_id: {"id": field_id, "value": value}
                for field_id, value in fields.items()
            }
        }
        return Card.model_validate(self._request("POST", f"cards/{card_id}", json=payload))

    def close(self) -> None:
        self.session.close()
