import logging
from concurrent.futures import ThreadPoolExecutor

from authcheck.evaluators.base import BaseEvaluator
from authcheck.models.report import DKIM_SELECTORS, DKIMVerdict
from authcheck.utils import doh

logger = logging.getLogger(__name__)


class DKIMEvaluator(BaseEvaluator):
    name = "dkim"

    def __init__(self, selectors: tuple[str, ...] = DKIM_SELECTORS, endpoint: str | None = None):
        super().__init__(endpoint)
        self.selectors = selectors

    def evaluate(self, domain: str) -> DKIMVerdict:
        with ThreadPoolExecutor(max_workers=len(self.selectors) or 1) as pool:
            futures = {
                sel: pool.submit(self._check_selector, sel, domain)
                for sel in self.selectors
            }
            # merged by selector key, so completion order does not matter
            results = {sel: fut.result() for sel, fut in futures.items()}
        return DKIMVerdict(selectors=results)

    def _check_selector(self, selector: str, domain: str) -> bool:
        name = f"{selector}._domainkey.{domain}"
        try:
            return len(doh.query(name, "TXT", endpoint=self.endpoint)) > 0
        except Exception as e:
            logger.info("DKIM selector %s treated as absent: %s", name, e)
            return False
