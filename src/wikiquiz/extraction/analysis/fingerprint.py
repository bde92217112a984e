# ABOUTME: Content fingerprint for change detection between extractions of one URL
# ABOUTME: SHA-256 over the UTF-8 plain text, rendered as lowercase hex

import hashlib


def fingerprint(plain_text: str) -> str:
    """Compute a stable identity for extracted article text.

    Used to tell whether two extractions of the same URL yielded the same
    content; not a security primitive.
    """
    sha = hashlib.sha256()
    sha.update(plain_text.encode("utf-8"))
    return sha.hexdigest()
