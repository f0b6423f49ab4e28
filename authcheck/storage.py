import logging
from datetime import datetime, timezone

from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from authcheck.models.report import DKIM_SELECTORS
from authcheck.models.usage_log import Base, UsageLogEntry

logger = logging.getLogger(__name__)

TOP_DOMAINS_LIMIT = 10
RECENT_CHECKS_LIMIT = 20


def _section(results: dict, key: str) -> dict:
    value = results.get(key)
    return value if isinstance(value, dict) else {}


def _text(value) -> str | None:
    return value if isinstance(value, str) and value else None


class UsageLogStore:
    """Append-only log of completed checks plus the aggregate queries behind /stats."""

    def __init__(self, database_url: str):
        kwargs = {}
        if database_url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
        self.engine = create_engine(database_url, **kwargs)
        self._session = sessionmaker(bind=self.engine)
        Base.metadata.create_all(self.engine)

    def record_check(self, domain: str, results: dict, email: str | None = None,
                     score: int | None = None, ip_address: str = "unknown",
                     user_agent: str = "unknown") -> UsageLogEntry:
        spf = _section(results, "spf")
        dkim = _section(results, "dkim")
        dmarc = _section(results, "dmarc")

        entry = UsageLogEntry(
            domain=domain,
            email=email,
            timestamp=datetime.now(timezone.utc).isoformat(),
            ip_address=ip_address or "unknown",
            user_agent=user_agent or "unknown",
            spf_exists=bool(spf.get("exists")),
            spf_has_exactly_one=bool(spf.get("hasExactlyOne")),
            spf_record=_text(spf.get("record")),
            spf_bullhorn=bool(spf.get("hasBullhorn")),
            spf_sendgrid=bool(spf.get("hasSendgrid")),
            dmarc_exists=bool(dmarc.get("exists")),
            dmarc_policy=_text(dmarc.get("policy")),
            score=score,
        )
        for selector in DKIM_SELECTORS:
            setattr(entry, f"dkim_{selector}", bool(dkim.get(selector)))

        with self._session() as session:
            session.add(entry)
            session.commit()
            session.refresh(entry)
            session.expunge(entry)
        logger.debug("Logged check for %s", domain)
        return entry

    def get_stats(self) -> dict:
        with self._session() as session:
            count = func.count(UsageLogEntry.id).label("count")
            top = session.execute(
                select(UsageLogEntry.domain, count)
                .group_by(UsageLogEntry.domain)
                .order_by(count.desc())
                .limit(TOP_DOMAINS_LIMIT)
            ).all()
            recent = session.execute(
                select(UsageLogEntry.domain, UsageLogEntry.timestamp)
                .order_by(UsageLogEntry.timestamp.desc(), UsageLogEntry.id.desc())
                .limit(RECENT_CHECKS_LIMIT)
            ).all()
            total = session.scalar(select(func.count(UsageLogEntry.id)))

        return {
            "totalChecks": total or 0,
            "recentChecks": [{"domain": d, "timestamp": ts} for d, ts in recent],
            "topDomains": [{"domain": d, "count": c} for d, c in top],
        }
