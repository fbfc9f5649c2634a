"""Record parser interface."""

from abc import ABC, abstractmethod
from typing import List

from ..models import MovieRecord


class IRecordParser(ABC):
    """Interface for turning one CSV document into movie records."""

    @abstractmethod
    def parse(self, text: str, source_tag: str) -> List[MovieRecord]:
        """Parse a CSV document.

        Args:
            text: Raw CSV text whose first line is the header.
            source_tag: Tag attached to every parsed record.

        Returns:
            Parsed records in row order. Empty if the document cannot be parsed.
        """
        pass
