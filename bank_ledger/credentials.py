"""One-way credential hashing for account logins."""

import hashlib
import hmac

from bank_ledger.exceptions import CredentialHashingError

HASH_ALGORITHM = "sha256"


def hash_secret(secret: str) -> str:
    """Return the hex digest of ``secret``.

    Deterministic: the same secret always yields the same digest.

    Raises
    ------
    CredentialHashingError
        If the hashing algorithm is unavailable in this interpreter.
    TypeError
        If ``secret`` is not a string.
    """
    if not isinstance(secret, str):
        raise TypeError(f"Secret must be a string, got {type(secret).__name__}")
    try:
        digest = hashlib.new(HASH_ALGORITHM)
    except ValueError as e:
        raise CredentialHashingError(f"Hash algorithm {HASH_ALGORITHM} is unavailable") from e
    digest.update(secret.encode("utf-8", "surrogatepass"))
    return digest.hexdigest()


def verify_secret(secret: str, expected_hash: str) -> bool:
    """Check ``secret`` against a stored digest in constant time."""
    return hmac.compare_digest(hash_secret(secret), expected_hash)
