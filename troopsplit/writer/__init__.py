"""writer — display formatting and plain-text rendering of allocations."""

from troopsplit.writer.formatting import format_count
from troopsplit.writer.writer import EMPTY_MESSAGE, TextWriter, WriterInput, WriterOutput

__all__ = ["EMPTY_MESSAGE", "TextWriter", "WriterInput", "WriterOutput", "format_count"]
