import re

from authcheck.exceptions import InvalidAddressError

DOMAIN_RE = re.compile(
    r"^(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z0-9][a-z0-9-]{0,61}[a-z0-9]$"
)


def is_valid_domain(domain: str) -> bool:
    return bool(DOMAIN_RE.match(domain))


def parse_address(raw: str | None) -> tuple[str, str | None]:
    """Normalize a domain or email address into (domain, email).

    ``email`` is None when a bare domain was given.
    """
    if raw is not None and not isinstance(raw, str):
        raise InvalidAddressError("Please enter a valid domain name")
    value = (raw or "").strip().lower()
    if not value:
        raise InvalidAddressError("Please enter a domain name")

    email = None
    domain = value
    if "@" in value:
        local, _, domain = value.rpartition("@")
        if not local:
            raise InvalidAddressError("Please enter a valid email address")
        email = value

    if not is_valid_domain(domain):
        raise InvalidAddressError("Please enter a valid domain name")
    return domain, email
