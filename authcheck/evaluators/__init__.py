import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

from authcheck.evaluators.spf import SPFEvaluator
from authcheck.evaluators.dkim import DKIMEvaluator
from authcheck.evaluators.dmarc import DMARCEvaluator
from authcheck.models.report import AuthenticationReport, compute_score
from authcheck.utils.address import parse_address

logger = logging.getLogger(__name__)


def run_check(address: str, endpoint: str | None = None) -> AuthenticationReport:
    """Evaluate SPF, DKIM and DMARC for a domain or email address.

    Raises InvalidAddressError for unusable input and EvaluationError when
    the SPF lookup fails. DKIM and DMARC failures only degrade their own
    verdicts. ``endpoint`` overrides the DoH resolver URL.
    """
    domain, email = parse_address(address)
    spf_evaluator = SPFEvaluator(endpoint)
    dkim_evaluator = DKIMEvaluator(endpoint=endpoint)
    dmarc_evaluator = DMARCEvaluator(endpoint)

    logger.info("Checking email authentication records for %s", domain)
    with ThreadPoolExecutor(max_workers=3) as pool:
        spf_future = pool.submit(spf_evaluator.evaluate, domain)
        dkim_future = pool.submit(dkim_evaluator.evaluate, domain)
        dmarc_future = pool.submit(dmarc_evaluator.evaluate, domain)

        spf = spf_future.result()
        dkim = dkim_future.result()
        dmarc = dmarc_future.result()

    score = compute_score(spf, dkim, dmarc, dkim_evaluator.selectors)
    return AuthenticationReport(
        domain=domain,
        email=email,
        spf=spf,
        dkim=dkim,
        dmarc=dmarc,
        score=score,
        checked_at=datetime.now(timezone.utc).isoformat(),
    )
