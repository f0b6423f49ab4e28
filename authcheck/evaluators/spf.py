from authcheck.evaluators.base import BaseEvaluator
from authcheck.exceptions import EvaluationError, TransportError
from authcheck.models.report import SPFVerdict
from authcheck.utils import doh
from authcheck.utils.doh import AnswerRecord, strip_quotes

SPF_PREFIX = "v=spf1"
BULLHORN_INCLUDE = "include:_spf.bullhornmail.com"
SENDGRID_INCLUDE = "include:sendgrid.net"


def evaluate_spf(answers: list[AnswerRecord]) -> SPFVerdict:
    """Build an SPF verdict from the apex TXT answers.

    Provider detection is a plain substring test on the first SPF record;
    nested includes are not followed.
    """
    records = [
        strip_quotes(a.data) for a in answers
        if strip_quotes(a.data).startswith(SPF_PREFIX)
    ]
    if not records:
        return SPFVerdict()

    record = records[0]
    return SPFVerdict(
        exists=True,
        has_exactly_one=len(records) == 1,
        record=record,
        has_bullhorn=BULLHORN_INCLUDE in record,
        has_sendgrid=SENDGRID_INCLUDE in record,
    )


class SPFEvaluator(BaseEvaluator):
    name = "spf"

    def evaluate(self, domain: str) -> SPFVerdict:
        try:
            answers = doh.query(domain, "TXT", endpoint=self.endpoint)
        except TransportError as e:
            raise EvaluationError(f"SPF check failed: {e}", cause=e) from e
        return evaluate_spf(answers)
