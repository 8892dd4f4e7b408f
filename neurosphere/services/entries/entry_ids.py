"""
Entry id parsing.
"""

from bson import ObjectId
from bson.errors import InvalidId

from common.utils.exceptions import NotFoundException


def parse_entry_id(entry_id: str, code: str) -> ObjectId:
    """
    Parse an entry id, treating an unparsable id as a missing entry.

    Args:
        entry_id: Id from the request path
        code: Error code to report when the id is unusable

    Raises:
        NotFoundException: If entry_id is not a valid ObjectId
    """
    try:
        return ObjectId(entry_id)
    except (InvalidId, TypeError):
        raise NotFoundException(message="Entry not found", code=code)
