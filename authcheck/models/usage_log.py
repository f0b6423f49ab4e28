from sqlalchemy import Column, Integer, String, Boolean, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class UsageLogEntry(Base):
    """One completed check. Rows are only ever appended."""

    __tablename__ = "audit_log"

    id = Column(Integer, primary_key=True, autoincrement=True)
    domain = Column(String(255), nullable=False, index=True)
    email = Column(String(320), nullable=True)
    timestamp = Column(String(40), nullable=False, index=True)
    ip_address = Column(String(64), nullable=False, default="unknown")
    user_agent = Column(Text, nullable=False, default="unknown")

    spf_exists = Column(Boolean, default=False)
    spf_has_exactly_one = Column(Boolean, default=False)
    spf_record = Column(Text, nullable=True)
    spf_bullhorn = Column(Boolean, default=False)
    spf_sendgrid = Column(Boolean, default=False)

    # one column per DKIM selector; keep in step with DKIM_SELECTORS
    dkim_bh = Column(Boolean, default=False)
    dkim_ba = Column(Boolean, default=False)
    dkim_ba2 = Column(Boolean, default=False)
    dkim_hf = Column(Boolean, default=False)
    dkim_hf2 = Column(Boolean, default=False)

    dmarc_exists = Column(Boolean, default=False)
    dmarc_policy = Column(String(16), nullable=True)

    score = Column(Integer, nullable=True)
