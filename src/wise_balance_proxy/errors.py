class ConfigError(ValueError):
    """Required startup configuration is missing or malformed."""


class BalanceFetchError(RuntimeError):
    """The upstream balances call failed or returned something unparseable."""
