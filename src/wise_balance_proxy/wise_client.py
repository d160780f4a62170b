import logging
from typing import List, Optional

import requests
from pydantic import ValidationError

from .errors import BalanceFetchError
from .models import Balance, BalanceList, Config

log = logging.getLogger("wise-balance-proxy")


class WiseClient:
    """Single-shot reader for the Wise balances endpoint. No retries, no cache."""

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    @property
    def balances_url(self) -> str:
        return f"{self.config.api_base_url.rstrip('/')}/v4/profiles/{self.config.profile_id}/balances"

    def get_balances(self) -> List[Balance]:
        url = self.balances_url
        params = {"types": "STANDARD"}
        headers = {"Authorization": f"Bearer {self.config.api_key}"}
        log.info("Calling Wise: GET %s params=%s", url, params)
        try:
            rsp = self.session.get(url, params=params, headers=headers, timeout=self.config.timeout)
            rsp.raise_for_status()
        except requests.HTTPError as e:
            raise BalanceFetchError(f"Wise returned HTTP {e.response.status_code}: {e.response.text}") from e
        except requests.RequestException as e:
            raise BalanceFetchError(f"Wise request failed: {e}") from e

        if self.config.log_response_body:
            # carries account balances; only on explicit opt-in
            log.info("Raw JSON response: %s", rsp.text)

        try:
            return BalanceList.validate_json(rsp.content)
        except ValidationError as e:
            raise BalanceFetchError(f"Unexpected balances payload: {e}") from e