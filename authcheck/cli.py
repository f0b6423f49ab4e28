import argparse
import json
import sys

from authcheck.config import Config, configure_logging
from authcheck.exceptions import EvaluationError, InvalidAddressError
from authcheck.models.report import AuthenticationReport


def _label(flag: bool, yes: str, no: str) -> str:
    return yes if flag else no


def human_report(report: AuthenticationReport) -> str:
    lines = []
    target = report.email or report.domain
    lines.append(f"Email authentication report for: {target}")
    if report.checked_at:
        lines.append(f"Checked at (UTC): {report.checked_at}")
    lines.append("-" * 60)

    spf = report.spf
    lines.append("SPF:")
    lines.append(f"  - Exactly one SPF record: {_label(spf.has_exactly_one, 'Yes', 'No')}")
    if spf.exists and spf.record:
        lines.append(f"  - Bullhorn include: {_label(spf.has_bullhorn, 'Present', 'Missing')}")
        lines.append(f"  - SendGrid include: {_label(spf.has_sendgrid, 'Present', 'Missing')}")
        lines.append(f"  - Record: {spf.record}")
    lines.append("")

    lines.append("DKIM:")
    for selector, present in report.dkim.selectors.items():
        lines.append(f"  - {selector}._domainkey: {_label(present, 'Exists', 'Missing')}")
    lines.append("")

    dmarc = report.dmarc
    lines.append("DMARC:")
    lines.append(f"  - Record present: {_label(dmarc.exists, 'Yes', 'No')}")
    if dmarc.exists and dmarc.policy:
        lines.append(f"  - Policy: p={dmarc.policy.value}")
    lines.append("-" * 60)
    lines.append(f"Score (0-100): {report.score}")
    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Check SPF, DKIM and DMARC records for a domain or email address")
    parser.add_argument("address", help="domain or email address to check (e.g. example.com)")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--log-endpoint", default=Config.LOG_ENDPOINT,
                        help="POST each completed check to this usage log URL")
    parser.add_argument("--log-level", default=Config.LOG_LEVEL, help="Logging level")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    from authcheck.evaluators import run_check
    from authcheck.utils.usage_reporter import dispatch_report

    try:
        report = run_check(args.address)
    except InvalidAddressError as e:
        print(str(e), file=sys.stderr)
        sys.exit(2)
    except EvaluationError as e:
        print(f"Error checking DNS records: {e}", file=sys.stderr)
        sys.exit(2)

    dispatch_report(args.log_endpoint, report)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(human_report(report))


if __name__ == "__main__":
    main()
