from .social_event import SocialEventUseCase
from .new import New
from .helpers import collection_name

__all__ = ["SocialEventUseCase", "New", "collection_name"]
