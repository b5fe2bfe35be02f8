# bilingual_lens/domain/interfaces.py

from abc import ABC, abstractmethod
from typing import List

from .models import DocumentPair


class CorpusSourcePort(ABC):
    """
    Port for whatever holds the processed document pairs.
    The core only reads from it; corpus text is never mutated.
    """

    @abstractmethod
    def list_documents(self) -> List[DocumentPair]:
        """
        Return a snapshot of the corpus in input order.
        Later changes to the source must not show up in a returned list.
        """
        ...

    @abstractmethod
    def get_document(self, document_id: str) -> DocumentPair:
        """Raise KeyError when the id is unknown."""
        ...

    @abstractmethod
    def count(self) -> int: ...


class ScrollPanePort(ABC):
    """
    Handle for one scrollable pane, independent of any UI toolkit.

    set_offset() may synchronously emit the pane's own scroll event back into
    the controller, the way a browser or Qt scroll bar would.
    """

    @property
    @abstractmethod
    def content_height(self) -> float: ...

    @property
    @abstractmethod
    def viewport_height(self) -> float: ...

    @abstractmethod
    def get_offset(self) -> float: ...

    @abstractmethod
    def set_offset(self, value: float) -> None: ...
