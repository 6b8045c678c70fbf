from .base import ErrorDetail, FailureResponse, ValidationErrorResponse
from .requests import (
    ChatRequest,
    CollectDataRequest,
    ContactRequest,
    EngagementMetricsIn,
    SentimentAnalysisIn,
    SocialEventRequest,
)

__all__ = [
    "ErrorDetail",
    "FailureResponse",
    "ValidationErrorResponse",
    "ChatRequest",
    "CollectDataRequest",
    "ContactRequest",
    "EngagementMetricsIn",
    "SentimentAnalysisIn",
    "SocialEventRequest",
]
