from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class TotalWorth(BaseModel):
    # NaN, Infinity, overflowing numbers and numeric strings are all rejected
    model_config = ConfigDict(frozen=True, strict=True, allow_inf_nan=False)

    value: float


class Balance(BaseModel):
    """One currency balance as returned by /v4/profiles/{id}/balances.

    Only the fields the proxy exposes are modelled; everything else in the
    upstream record is ignored.
    """

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)

    currency: str
    total_worth: TotalWorth = Field(alias="totalWorth")


BalanceList = TypeAdapter(List[Balance])


class Config(BaseModel):
    """Process-wide settings, built once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False)
    profile_id: str
    user_token: Optional[str] = Field(default=None, repr=False)
    require_token: bool = True
    api_base_url: str = "https://api.wise.com"
    timeout: Optional[float] = None
    log_response_body: bool = False
    host: str = "0.0.0.0"
    port: int = 8080
