"""Wire models for the game client's battle replay and result exports."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ReplayPayload(BaseModel):
    """Battle replay as accepted by the in-game tournament page.

    Field order is part of the format: the client compares the serialized
    JSON, so fields must stay declared in this order.
    """

    winner: str = Field(..., description="Winner label shown by the client")
    left: str = Field(..., description="Label of the left (friendly) side")
    right: str = Field(..., description="Label of the right (hostile) side")
    date: int = Field(..., description="Epoch seconds at encoding time")
    title: str = Field(..., description="Replay title")
    setup: list[int] = Field(..., description="Friendly lineup in client indices")
    shero: list[int] = Field(..., description="Friendly hero levels in catalog order")
    player: list[int] = Field(..., description="Hostile lineup in client indices")
    phero: list[int] = Field(..., description="Hostile hero levels in catalog order")


class ArmyReport(BaseModel):
    followers: int = Field(..., ge=0, description="Total follower cost of the lineup")
    monsters: list[str] = Field(default_factory=list, description="Monster names in battle order")


class InstanceReport(BaseModel):
    """JSON export of one solved instance."""

    target: ArmyReport
    solution: ArmyReport
    time: float = Field(..., ge=0.0, description="Calculation time in seconds")
    fights: int = Field(..., ge=0, description="Number of fights simulated")
    replay: str = Field(..., description="Base64 battle replay")
