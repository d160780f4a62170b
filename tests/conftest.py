import pytest
from pydantic import ValidationError

from wise_balance_proxy.errors import BalanceFetchError
from wise_balance_proxy.main import create_app
from wise_balance_proxy.models import BalanceList, Config

USD_BODY = b'[{"currency":"USD","totalWorth":{"value":12.5}}]'


class FakeFetcher:
    """Stands in for WiseClient.get_balances and counts upstream calls."""

    def __init__(self, payload=b"[]", error=None, balances=None):
        self.payload = payload
        self.error = error
        self.balances = balances
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.error:
            raise self.error
        if self.balances is not None:
            return self.balances
        try:
            return BalanceList.validate_json(self.payload)
        except ValidationError as e:
            raise BalanceFetchError(str(e)) from e


@pytest.fixture
def token():
    return "s3cret-token"


@pytest.fixture
def config(token):
    return Config(api_key="key-123", profile_id="42", user_token=token)


@pytest.fixture
def make_fetcher():
    return FakeFetcher


@pytest.fixture
def fetcher(make_fetcher):
    return make_fetcher(USD_BODY)


@pytest.fixture
def make_client(config):
    def _make(fetch, cfg=None):
        app = create_app(cfg or config, fetch_balances=fetch)
        app.config["TESTING"] = True
        return app.test_client()
    return _make


@pytest.fixture
def client(make_client, fetcher):
    return make_client(fetcher)


@pytest.fixture
def failing_fetcher(make_fetcher):
    return make_fetcher(error=BalanceFetchError("Unexpected balances payload: boom"))
