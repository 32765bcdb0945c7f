"""Models voor de chat relay: inkomende vraag, antwoord en foutmelding."""

from pydantic import BaseModel, Field


# ---------- Models ----------
class ChatRequest(BaseModel):
    """Request model for chat messages."""

    message: str = Field(..., min_length=1)


class ChatResponse(BaseModel):
    """Response model for chat replies."""

    reply: str


class ErrorResponse(BaseModel):
    """Response model for failed requests."""

    error: str
