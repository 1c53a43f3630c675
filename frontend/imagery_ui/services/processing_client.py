import json
import logging
from typing import Optional

import requests
from pydantic import ValidationError

from imagery_ui.config import Settings, get_settings
from imagery_ui.models.errors import RequestTimeoutError, ResultParseError, TransportError
from imagery_ui.models.result import ProcessingResult

logger = logging.getLogger(__name__)


class ProcessingClient:
    """Issues the single ``POST /api/process`` call to the imagery backend."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        self.session = session or requests.Session()

    def process(self, youtube_url: str, save: bool) -> ProcessingResult:
        payload = {"youtube_url": youtube_url, "save": save}
        url = self.settings.process_url
        logger.info("POST %s (save=%s)", url, save)

        try:
            response = self.session.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.settings.request_timeout,
            )
        except requests.Timeout:
            raise RequestTimeoutError(self.settings.request_timeout)
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise TransportError(str(e))

        if not response.ok:
            body = response.text
            logger.warning("Backend answered %s: %s", response.status_code, body[:200])
            message = body if body.strip() else f"Request failed: {response.status_code}"
            raise TransportError(message, status_code=response.status_code)

        return parse_result(response.text)


def parse_result(body: str) -> ProcessingResult:
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ResultParseError(f"Invalid JSON in response: {e}")

    if not isinstance(data, dict):
        raise ResultParseError(f"Expected a JSON object, got {type(data).__name__}")

    try:
        return ProcessingResult.model_validate(data)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ResultParseError(f"Unexpected response shape: {errors}")
