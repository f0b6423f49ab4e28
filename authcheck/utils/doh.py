import logging
from dataclasses import dataclass

import dns.rdatatype
import requests

from authcheck.config import Config
from authcheck.exceptions import TransportError

logger = logging.getLogger(__name__)

DOH_TIMEOUT = 10


@dataclass(frozen=True)
class AnswerRecord:
    name: str
    type: int
    data: str


def strip_quotes(data: str) -> str:
    """Remove one leading and one trailing double quote, if present."""
    if data.startswith('"'):
        data = data[1:]
    if data.endswith('"'):
        data = data[:-1]
    return data


def query(name: str, record_type: str = "TXT", endpoint: str | None = None,
          session=None) -> list[AnswerRecord]:
    """Issue one DNS-over-HTTPS JSON query and return the answers of the requested type.

    A response without an ``Answer`` section is an empty result. Raises
    TransportError when the HTTP exchange fails or the body is not JSON.
    """
    rdtype = int(dns.rdatatype.from_text(record_type))
    http = session or requests
    url = endpoint or Config.DOH_ENDPOINT

    logger.debug("DoH query %s %s via %s", name, record_type, url)
    try:
        resp = http.get(
            url,
            params={"name": name, "type": record_type},
            headers={"Accept": "application/dns-json"},
            timeout=DOH_TIMEOUT,
        )
    except requests.RequestException as e:
        raise TransportError(f"DNS query failed: {e}") from e

    if not resp.ok:
        raise TransportError(f"DNS query failed: {resp.reason}", status=resp.status_code)

    try:
        data = resp.json()
    except ValueError as e:
        raise TransportError("DNS query failed: malformed JSON response") from e
    if not isinstance(data, dict):
        raise TransportError("DNS query failed: malformed JSON response")

    records = data.get("Answer") or []
    if not isinstance(records, list):
        raise TransportError("DNS query failed: malformed JSON response")

    answers = []
    for record in records:
        if not isinstance(record, dict):
            raise TransportError("DNS query failed: malformed JSON response")
        if record.get("type") != rdtype or not isinstance(record.get("data"), str):
            continue
        answers.append(AnswerRecord(
            name=record.get("name", name),
            type=record["type"],
            data=record["data"],
        ))
    return answers
