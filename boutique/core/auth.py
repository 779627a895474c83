# boutique/core/auth.py
import base64
import binascii
import logging
from typing import NamedTuple

from fastapi import Depends, Header
from sqlmodel import Session

from boutique.core.credentials import secrets_match
from boutique.core.errors import (
    InvalidCredentials,
    MalformedEncoding,
    MissingOrMalformedHeader,
)
from boutique.database import get_session
from boutique.models.user import User
from boutique.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

BASIC_PREFIX = "Basic "

user_repo = UserRepository()


class BasicCredentials(NamedTuple):
    email: str
    password: str


def parse_basic_authorization(header: str | None) -> BasicCredentials:
    """
    Parse an `Authorization: Basic <base64(email:password)>` header value.

    Rules:
      - the scheme tag is matched exactly ("Basic ", case-sensitive)
      - split on the first ':' so passwords may contain ':'
      - missing "=" padding on the payload is tolerated
      - trailing whitespace is stripped from the password only;
        the email is used verbatim

    Raises:
        MissingOrMalformedHeader: header absent or not a Basic header.
        MalformedEncoding: payload missing, not Base64/UTF-8, or no ':'.
    """
    if not header or not header.startswith(BASIC_PREFIX):
        raise MissingOrMalformedHeader()

    encoded = header[len(BASIC_PREFIX):].strip()
    if not encoded:
        raise MalformedEncoding()
    # Some clients drop the trailing "=" padding.
    encoded += "=" * (-len(encoded) % 4)

    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError):
        raise MalformedEncoding()

    email, separator, password = decoded.partition(":")
    if not separator:
        raise MalformedEncoding()

    return BasicCredentials(email=email, password=password.rstrip())


def authenticate(
    session: Session,
    header: str | None,
    repo: UserRepository = user_repo,
) -> User:
    """
    Resolve the account behind a Basic Authorization header.

    Flow:
      1. Parse the header (see parse_basic_authorization).
      2. Look up the account by exact email.
      3. Compare the decoded stored password with the supplied one.

    Unknown email and wrong password raise the same InvalidCredentials,
    so responses do not reveal which accounts exist.

    Returns:
        The authenticated User.
    """
    try:
        credentials = parse_basic_authorization(header)
    except MissingOrMalformedHeader:
        logger.warning("Auth failed: missing or non-Basic Authorization header")
        raise
    except MalformedEncoding:
        logger.warning("Auth failed: malformed Basic credentials")
        raise

    user = repo.get_by_email(session, credentials.email)
    if user is None:
        logger.warning(f"Auth failed: no account for email {credentials.email!r}")
        raise InvalidCredentials()

    if not secrets_match(user.encoded_password, credentials.password):
        logger.warning(f"Auth failed: password mismatch for user {user.id}")
        raise InvalidCredentials()

    logger.info(f"Auth OK: user {user.id}")
    return user


def require_auth(
    authorization: str | None = Header(default=None),
    session: Session = Depends(get_session),
) -> User:
    """
    FastAPI dependency enforcing Basic authentication.

    Runs once per request (no sessions, no caching across requests).
    Attach to every route except signup and the public catalog.

    Raises:
        AuthenticationError (401): on any credential problem.
    """
    return authenticate(session, authorization)
