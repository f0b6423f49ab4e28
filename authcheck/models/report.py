from dataclasses import dataclass, field
from enum import Enum
from typing import Any

DKIM_SELECTORS = ("bh", "ba", "ba2", "hf", "hf2")

SPF_WEIGHT = 40
DKIM_WEIGHT = 40
DMARC_WEIGHT = 20
MAX_SCORE = SPF_WEIGHT + DKIM_WEIGHT + DMARC_WEIGHT


class DMARCPolicy(Enum):
    REJECT = "reject"
    QUARANTINE = "quarantine"
    NONE = "none"


@dataclass(frozen=True)
class SPFVerdict:
    exists: bool = False
    has_exactly_one: bool = False
    record: str | None = None
    has_bullhorn: bool = False
    has_sendgrid: bool = False

    def to_dict(self) -> dict:
        return {
            "exists": self.exists,
            "hasExactlyOne": self.has_exactly_one,
            "record": self.record,
            "hasBullhorn": self.has_bullhorn,
            "hasSendgrid": self.has_sendgrid,
        }


@dataclass(frozen=True)
class DKIMVerdict:
    """Per-selector presence, keyed and ordered by DKIM_SELECTORS."""
    selectors: dict[str, bool] = field(default_factory=dict)

    def __getitem__(self, selector: str) -> bool:
        return self.selectors.get(selector, False)

    @property
    def present_count(self) -> int:
        return sum(1 for present in self.selectors.values() if present)

    def to_dict(self) -> dict:
        return dict(self.selectors)


@dataclass(frozen=True)
class DMARCVerdict:
    exists: bool = False
    policy: DMARCPolicy | None = None

    def to_dict(self) -> dict:
        return {
            "exists": self.exists,
            "policy": self.policy.value if self.policy else None,
        }


def compute_score(spf: SPFVerdict, dkim: DKIMVerdict, dmarc: DMARCVerdict,
                  selectors: tuple[str, ...] = DKIM_SELECTORS) -> int:
    score = 0
    if spf.has_exactly_one:
        score += SPF_WEIGHT

    # DKIM points are spread evenly over the selector list
    if selectors:
        present = sum(1 for s in selectors if dkim[s])
        score += DKIM_WEIGHT * present // len(selectors)

    if dmarc.exists:
        score += DMARC_WEIGHT
    return score


@dataclass(frozen=True)
class AuthenticationReport:
    domain: str
    spf: SPFVerdict
    dkim: DKIMVerdict
    dmarc: DMARCVerdict
    score: int
    email: str | None = None
    checked_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self.domain,
            "email": self.email,
            "results": {
                "spf": self.spf.to_dict(),
                "dkim": self.dkim.to_dict(),
                "dmarc": self.dmarc.to_dict(),
            },
            "score": self.score,
            "checkedAt": self.checked_at,
        }
