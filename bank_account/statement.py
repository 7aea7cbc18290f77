"""
Statement Rendering

Turns the ledger history into the printed statement: a fixed header
followed by one line per record, most recently posted first. Ordering is
by posting sequence, never by date, so same-day postings keep their
relative order reversed.
"""

from typing import Iterable, List, Optional, TextIO

from .ledger import DISPLAY_DATE_FORMAT, TransactionRecord


STATEMENT_HEADER = "Date || Amount || Balance"


class StatementPrinter:
    """Writes statements to an output stream, one line per write"""

    def __init__(
        self,
        stream: TextIO,
        header: str = STATEMENT_HEADER,
        date_format: str = DISPLAY_DATE_FORMAT
    ):
        self.stream = stream
        self.header = header
        self.date_format = date_format

    def render(self, records: Iterable[TransactionRecord]) -> List[str]:
        """
        Build the statement lines without writing them

        Args:
            records: Posted records in any order

        Returns:
            Header followed by record lines in descending sequence order
        """
        ordered = sorted(records, key=lambda record: record.sequence, reverse=True)
        lines = [self.header]
        lines.extend(record.to_statement_line(self.date_format) for record in ordered)
        return lines

    def print(self, records: Iterable[TransactionRecord], stream: Optional[TextIO] = None) -> None:
        """Write the rendered statement to the stream"""
        out = stream if stream is not None else self.stream
        for line in self.render(records):
            out.write(line + "\n")
