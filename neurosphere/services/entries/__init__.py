"""Entry services."""

from neurosphere.services.entries.entry_validator import EntryValidator
from neurosphere.services.entries.entry_ids import parse_entry_id

__all__ = ["EntryValidator", "parse_entry_id"]
