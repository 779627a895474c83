# boutique/core/ids.py
import uuid

from boutique.core.errors import InvalidIdentifierFormat


def parse_record_id(raw: str, label: str = "ID") -> uuid.UUID:
    """
    Parse a client-supplied record id.

    Raises:
        InvalidIdentifierFormat: "Invalid <label> format" if `raw` is not a UUID.
    """
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        raise InvalidIdentifierFormat(f"Invalid {label} format")
