"""
Pydantic models for typed response payloads.

Most endpoints return free-form JSON that is handed to the caller as-is;
payloads with a stable, documented shape get a model here.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenInfo(BaseModel):
    """
    Fungible token summary returned by ``api/v1/tokens``.

    Attributes:
        contractType (Optional[str]): Token standard, e.g. ``KIP7`` or ``ERC20``.
        name (Optional[str]): Token name.
        symbol (Optional[str]): Token symbol.
        icon (Optional[str]): Icon URL.
        decimal (Optional[int]): Number of decimals.
        totalSupply (Optional[float]): Total supply.
        totalTransfers (Optional[int]): Number of transfers.
        officialSite (Optional[str]): Project website.
        burnAmount (Optional[float]): Amount burned.
        totalBurns (Optional[int]): Number of burn events.
    """
    model_config = ConfigDict(extra="allow")

    contractType: Optional[str] = Field(None, description="Token standard")
    name: Optional[str] = Field(None, description="Token name")
    symbol: Optional[str] = Field(None, description="Token symbol")
    icon: Optional[str] = Field(None, description="Icon URL")
    decimal: Optional[int] = Field(None, ge=0, description="Number of decimals")
    totalSupply: Optional[float] = Field(None, description="Total supply")
    totalTransfers: Optional[int] = Field(None, ge=0, description="Number of transfers")
    officialSite: Optional[str] = Field(None, description="Project website")
    burnAmount: Optional[float] = Field(None, description="Amount burned")
    totalBurns: Optional[int] = Field(None, ge=0, description="Number of burn events")
