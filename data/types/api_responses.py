from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class CardPayload(BaseModel):
    """A single card as the deck service reports it."""

    code: str = Field(description="Short card code, e.g. 'KH'")
    image: str = Field(description="URL of the card face image")
    value: str = Field(description="Face label, e.g. 'KING' or '5'")
    suit: str = Field(description="Suit name, e.g. 'HEARTS'")


class NewDeckResponse(BaseModel):
    """Response of deck/new/shuffle/."""

    deck_id: str = Field(description="Opaque deck identifier issued by the service")
    success: bool = True
    shuffled: bool = True
    remaining: Optional[int] = None


class DrawResponse(BaseModel):
    """Response of a draw from a deck or from a named pile.

    The service may return fewer cards than requested once the source is
    exhausted; that is not treated as an error here.
    """

    cards: List[CardPayload] = Field(default_factory=list)
    success: bool = True
    remaining: Optional[int] = None


class PileStatus(BaseModel):
    """Server-side count for a single pile."""

    remaining: int = Field(ge=0)


class PileAddResponse(BaseModel):
    """Response of deck/{id}/pile/{name}/add/."""

    piles: Dict[str, PileStatus]
    success: bool = True
    remaining: Optional[int] = None
