import hashlib


def mask_phone(phone: str | None) -> str | None:
    if not phone:
        return phone
    # last digits + hash
    suffix = phone[-4:]
    digest = hashlib.sha256(phone.encode("utf-8")).hexdigest()[:8]
    return f"...{suffix}#{digest}"


def shorten_body(body: str | None, max_len: int = 200) -> str | None:
    if body is None:
        return None
    return body if len(body) <= max_len else body[:max_len] + "..."


def mask_sid(sid: str | None) -> str | None:
    """Keep the two-letter resource prefix and the last 4 characters."""
    if not sid:
        return sid

    if len(sid) <= 6:
        return sid  # too short to mask meaningfully

    prefix = sid[:2]
    suffix = sid[-4:]
    return f"{prefix}...{suffix}"
