# boutique/core/credentials.py
"""
Reversible password encoding.

Stored passwords are Base64 over UTF-8 so existing accounts keep working.
This is NOT a hash: anyone holding the stored form can recover the password.
"""

import base64
import binascii
import hmac


def encode_secret(secret: str) -> str:
    """Return the stored representation of a plaintext password."""
    return base64.b64encode(secret.encode("utf-8")).decode("ascii")


def decode_secret(stored: str) -> str:
    """
    Recover the plaintext password from its stored representation.

    Raises:
        ValueError: if `stored` is not valid Base64 of UTF-8 text.
    """
    try:
        return base64.b64decode(stored.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError) as e:
        raise ValueError("stored secret is not a valid encoding") from e


def secrets_match(stored: str, supplied: str) -> bool:
    """
    Compare a supplied password with a stored one in constant time.

    An undecodable stored value never matches.
    """
    try:
        expected = decode_secret(stored)
    except ValueError:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), supplied.encode("utf-8"))
