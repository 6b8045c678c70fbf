from typing import Optional

from pkg.logger.logger import Logger
from ..repository.interface import IDocumentRepository
from .document import DocumentUseCase


def New(repository: IDocumentRepository, logger: Optional[Logger] = None) -> DocumentUseCase:
    if repository is None:
        raise ValueError("repository cannot be None")

    return DocumentUseCase(repository=repository, logger=logger)


__all__ = ["New"]
