from .document import DocumentUseCase
from .new import New

__all__ = ["DocumentUseCase", "New"]
