"""Request bodies accepted by the API."""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class CollectDataRequest(BaseModel):
    source: str = Field(min_length=1, description="Source name, e.g. twitter or reddit")
    credentials: Optional[Dict[str, str]] = Field(
        default=None, description="Per-source credentials merged into the agent"
    )
    query: Optional[str] = Field(default=None, description="OR-separated search query")


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(min_length=1, max_length=2000)
    session_id: Optional[str] = Field(default=None, alias="sessionId")


class ContactRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=200)
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=320)
    subject: str = Field(min_length=1, max_length=300)
    message: str = Field(min_length=1, max_length=5000)


class EngagementMetricsIn(BaseModel):
    likes: Optional[int] = Field(default=None, ge=0)
    shares: Optional[int] = Field(default=None, ge=0)
    comments: Optional[int] = Field(default=None, ge=0)


class SentimentAnalysisIn(BaseModel):
    overall_sentiment: float = Field(ge=-1, le=1)
    sentiment_score: float = Field(ge=0, le=1)
    categories: Dict[str, Optional[float]] = Field(default_factory=dict)


class SocialEventRequest(BaseModel):
    """A pre-built event, stored as-is under its platform's collection."""

    event_id: str = Field(min_length=1)
    platform: str = Field(min_length=1)
    event_content: str = ""
    clean_event_text: str = ""
    author_id: Optional[str] = None
    author_name: Optional[str] = None
    event_title: Optional[str] = None
    event_url: Optional[str] = None
    parent_event_id: Optional[str] = None
    engagement_metrics: EngagementMetricsIn = Field(default_factory=EngagementMetricsIn)
    sentiment_analysis: Optional[SentimentAnalysisIn] = None
    location_focus: Optional[str] = None
    airline_mentioned: Optional[str] = None
    timestamp_utc: Optional[str] = None
