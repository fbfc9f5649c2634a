"""Record parser service implementation."""

import csv
import io
from typing import Dict, List, Optional

from pydantic import ValidationError

from ...infrastructure.logging import LoggerMixin
from ..interfaces import IRecordParser
from ..models import MovieRecord

TITLE_COLUMN = "Title"
SOURCE_COLUMN = "source"


class RecordParser(IRecordParser, LoggerMixin):
    """Parses collection exports with ``csv.DictReader``.

    The header row names the columns. Short rows leave the missing columns
    unset and surplus cells are ignored. Rows the CSV reader rejects and rows
    without a usable title are skipped. Only an unreadable header discards the
    whole document.
    """

    def parse(self, text: str, source_tag: str) -> List[MovieRecord]:
        """Parse a CSV document.

        Args:
            text: Raw CSV text whose first line is the header.
            source_tag: Tag attached to every parsed record.

        Returns:
            Parsed records in row order. Empty if the header cannot be parsed.
        """
        if not text or not text.strip():
            return []

        reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff"), newline=""))
        records: List[MovieRecord] = []
        skipped = 0

        try:
            fieldnames = reader.fieldnames
        except csv.Error as e:
            self.logger.error(f"{source_tag}: failed to parse CSV header: {e}")
            return []

        if not fieldnames:
            return []
        if TITLE_COLUMN not in fieldnames:
            self.logger.warning(f"{source_tag}: no '{TITLE_COLUMN}' column in header")

        rows = iter(reader)
        while True:
            try:
                row = next(rows)
            except StopIteration:
                break
            except csv.Error as e:
                # The reader resumes on the next line after a rejected row
                self.logger.debug(f"{source_tag}: unreadable row at line {reader.line_num}: {e}")
                skipped += 1
                continue

            record = self._parse_row(row, source_tag)
            if record is None:
                skipped += 1
                continue
            records.append(record)

        if skipped:
            self.logger.debug(f"{source_tag}: skipped {skipped} rows")

        return records

    def _parse_row(
        self, row: Dict[Optional[str], Optional[str]], source_tag: str
    ) -> Optional[MovieRecord]:
        """Convert one CSV row into a record.

        Args:
            row: Row as returned by ``csv.DictReader``.
            source_tag: Tag attached to the record.

        Returns:
            MovieRecord, or None if the row has no title or fails validation.
        """
        title = row.get(TITLE_COLUMN)
        if not title or not title.strip():
            return None

        # DictReader stores surplus cells under None and pads short rows with None
        data = {
            column: value
            for column, value in row.items()
            if column is not None and value is not None and column != SOURCE_COLUMN
        }
        data[SOURCE_COLUMN] = source_tag

        try:
            return MovieRecord.model_validate(data)
        except ValidationError as e:
            self.logger.debug(f"{source_tag}: invalid row {title!r}: {e}")
            return None
