import logging
import os
from dotenv import load_dotenv

load_dotenv()

CLOUDFLARE_DNS_API = "https://cloudflare-dns.com/dns-query"


class Config:
    DEBUG = os.getenv("FLASK_DEBUG", "0") == "1"

    # DNS-over-HTTPS resolver
    DOH_ENDPOINT = os.getenv("DOH_ENDPOINT", CLOUDFLARE_DNS_API)

    # Usage log store
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///authcheck.db")
    LOG_ENDPOINT = os.getenv("LOG_ENDPOINT", "")

    # Admin surface (/stats); empty disables it
    ADMIN_JWT_SECRET = os.getenv("ADMIN_JWT_SECRET", "")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))
        root.addHandler(handler)
