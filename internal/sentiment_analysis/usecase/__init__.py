from .sentiment_analysis import SentimentAnalysis
from .new import New

__all__ = ["SentimentAnalysis", "New"]
