import logging

from authcheck.evaluators.base import BaseEvaluator
from authcheck.models.report import DMARCPolicy, DMARCVerdict
from authcheck.utils import doh
from authcheck.utils.doh import AnswerRecord, strip_quotes

logger = logging.getLogger(__name__)

# Checked in this order; the first match wins.
POLICY_TOKENS = (
    ("p=reject", DMARCPolicy.REJECT),
    ("p=quarantine", DMARCPolicy.QUARANTINE),
    ("p=none", DMARCPolicy.NONE),
)


def evaluate_dmarc(answers: list[AnswerRecord]) -> DMARCVerdict:
    if not answers:
        return DMARCVerdict()

    record = strip_quotes(answers[0].data)
    for token, policy in POLICY_TOKENS:
        if token in record:
            return DMARCVerdict(exists=True, policy=policy)
    return DMARCVerdict(exists=True, policy=None)


class DMARCEvaluator(BaseEvaluator):
    name = "dmarc"

    def evaluate(self, domain: str) -> DMARCVerdict:
        name = f"_dmarc.{domain}"
        try:
            answers = doh.query(name, "TXT", endpoint=self.endpoint)
        except Exception as e:
            logger.info("DMARC lookup for %s treated as absent: %s", name, e)
            return DMARCVerdict()
        return evaluate_dmarc(answers)
