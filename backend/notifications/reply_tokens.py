"""
Signed tokens embedded in reply-to addresses of topic and post emails.

The reply address carries ``<topicId>/<token>``. The token is the signature
segment of a signed ``{userId, topicId, userEmail}`` payload, so the inbound
reply pipeline can recompute it from the sender and topic and check that the
reply comes from the user the email was sent to, without the full credentials
travelling in the address.
"""

import hashlib
import hmac

from itsdangerous import URLSafeSerializer

REPLY_TOKEN_SALT = "reply-to"


def _get_serializer(secret_key: str) -> URLSafeSerializer:
    """
    Get configured serializer for reply tokens.

    Raises:
        ValueError: If the secret key is empty
    """
    if not secret_key:
        raise ValueError("AUTH_SECRET must be set to sign reply-to addresses.")

    return URLSafeSerializer(
        secret_key,
        salt=REPLY_TOKEN_SALT,
        signer_kwargs={"digest_method": hashlib.sha256},
    )


def generate_reply_token(
    secret_key: str, user_id: int, topic_id: int | str | None, user_email: str
) -> str:
    """
    Generate the reply token for a user and topic.

    Args:
        secret_key: Signing secret (AUTH_SECRET)
        user_id: Recipient user id
        topic_id: Topic the email is about
        user_email: Recipient email, already sanitized

    Returns:
        URL-safe signature string (the last segment of payload.signature)
    """
    body = {"userId": user_id, "topicId": topic_id, "userEmail": user_email}
    signed = _get_serializer(secret_key).dumps(body)
    return signed.rsplit(".", 1)[-1]


def validate_reply_token(
    secret_key: str, token: str, user_id: int, topic_id: int | str | None, user_email: str
) -> bool:
    """
    Check a reply token against the sender and topic of an inbound reply.

    Never raises for a bad token - returns False instead.
    """
    try:
        expected = generate_reply_token(secret_key, user_id, topic_id, user_email)
    except ValueError:
        return False
    return hmac.compare_digest(expected, token or "")
