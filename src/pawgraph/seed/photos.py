from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import requests

from pawgraph.seed.provider import SeedError

logger = logging.getLogger("pawgraph.seed")


class HttpSession(Protocol):
    """
    The part of `requests.Session` the photo source relies on.
    """

    def get(self, url: str, **kwargs: Any) -> Any: ...


class DogPhotoSource:
    """
    Fetches random dog photo URLs from a dog.ceo-compatible API.

    The API answers `{"message": "<image url>", "status": "success"}`.
    """

    def __init__(
        self,
        *,
        api_url: str,
        timeout_s: float = 10.0,
        fallback_photo: Optional[str] = None,
        session: Optional[HttpSession] = None,
    ) -> None:
        self.api_url = api_url
        self.timeout_s = timeout_s
        self.fallback_photo = fallback_photo
        self.session = session if session is not None else requests.Session()

    def fetch(self) -> str:
        try:
            r = self.session.get(self.api_url, timeout=self.timeout_s)
            r.raise_for_status()
            payload = r.json()
            if not isinstance(payload, dict):
                raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
            photo = payload["message"]
        except (requests.exceptions.RequestException, KeyError, ValueError) as exc:
            if self.fallback_photo:
                logger.warning(
                    "photo fetch from %s failed (%s); using fallback",
                    self.api_url,
                    exc,
                )
                return self.fallback_photo
            raise SeedError(f"could not fetch dog photo from {self.api_url}") from exc

        if not isinstance(photo, str) or not photo:
            if self.fallback_photo:
                return self.fallback_photo
            raise SeedError(f"unexpected photo payload from {self.api_url}")
        return photo
