"""
The fixed catalog of security header checks.

Each check is a plain function over the page headers (and markup, unused by
the current checks) wrapped in a ``CheckDefinition``. Order matters for
display and export only; scoring is a weighted sum.
"""

import re

from headergrade.checks.headers import find_header, truncate_value
from headergrade.checks.protocol import (
    CheckDefinition,
    CheckOutcome,
    HeaderMap,
    Severity,
)

# One year, the minimum HSTS duration accepted by browser preload lists
HSTS_RECOMMENDED_MAX_AGE = 31536000

HSTS_MAX_AGE_PATTERN = re.compile(r"max-age=(\d+)")

CSP_UNSAFE_DIRECTIVES = ("unsafe-inline", "unsafe-eval")


def check_https(headers: HeaderMap, content: str = "") -> CheckOutcome:
    # The scheme is enforced by the crawler, which only hands over HTTPS pages
    return CheckOutcome(passed=True, detail="Checked via crawl URL")


def check_strict_transport_security(
    headers: HeaderMap, content: str = ""
) -> CheckOutcome:
    value = find_header(headers, "strict-transport-security")
    if not value:
        return CheckOutcome(
            passed=False,
            detail="Header missing - browsers can connect over HTTP",
        )

    match = HSTS_MAX_AGE_PATTERN.search(value)
    max_age = int(match.group(1)) if match else 0

    # A short max-age is advisory only, presence is enough to pass
    if max_age < HSTS_RECOMMENDED_MAX_AGE:
        return CheckOutcome(
            passed=True,
            value=value,
            detail=f"max-age={max_age} (recommend >= {HSTS_RECOMMENDED_MAX_AGE})",
        )
    return CheckOutcome(passed=True, value=value)


def check_content_security_policy(
    headers: HeaderMap, content: str = ""
) -> CheckOutcome:
    value = find_header(headers, "content-security-policy")
    if not value:
        return CheckOutcome(
            passed=False,
            detail="No CSP header - site is vulnerable to XSS injection",
        )

    detail = None
    if any(directive in value for directive in CSP_UNSAFE_DIRECTIVES):
        detail = "Contains unsafe-inline or unsafe-eval directives"

    return CheckOutcome(passed=True, value=truncate_value(value), detail=detail)


def check_x_frame_options(headers: HeaderMap, content: str = "") -> CheckOutcome:
    value = find_header(headers, "x-frame-options")
    if not value:
        return CheckOutcome(
            passed=False,
            detail="Missing - page can be embedded in iframes (clickjacking risk)",
        )
    return CheckOutcome(passed=True, value=value)


def check_x_content_type_options(
    headers: HeaderMap, content: str = ""
) -> CheckOutcome:
    value = find_header(headers, "x-content-type-options")
    if not value:
        return CheckOutcome(
            passed=False, detail="Missing - browser may MIME-sniff responses"
        )
    return CheckOutcome(passed=value.lower() == "nosniff", value=value)


def check_referrer_policy(headers: HeaderMap, content: str = "") -> CheckOutcome:
    value = find_header(headers, "referrer-policy")
    if not value:
        return CheckOutcome(
            passed=False, detail="Missing - full URL may leak in Referer header"
        )
    return CheckOutcome(passed=True, value=value)


def check_permissions_policy(headers: HeaderMap, content: str = "") -> CheckOutcome:
    # Feature-Policy is the legacy name of the same header
    value = find_header(headers, "permissions-policy") or find_header(
        headers, "feature-policy"
    )
    if not value:
        return CheckOutcome(
            passed=False,
            detail="Missing - all browser features are allowed by default",
        )
    return CheckOutcome(passed=True, value=truncate_value(value))


def check_x_xss_protection(headers: HeaderMap, content: str = "") -> CheckOutcome:
    value = find_header(headers, "x-xss-protection")
    if not value:
        return CheckOutcome(
            passed=False, detail="Missing (note: modern browsers use CSP instead)"
        )
    return CheckOutcome(passed=True, value=value)


def check_cross_origin_opener_policy(
    headers: HeaderMap, content: str = ""
) -> CheckOutcome:
    value = find_header(headers, "cross-origin-opener-policy")
    if not value:
        return CheckOutcome(
            passed=False,
            detail="Missing - window can be referenced by cross-origin pages",
        )
    return CheckOutcome(passed=True, value=value)


def check_cross_origin_resource_policy(
    headers: HeaderMap, content: str = ""
) -> CheckOutcome:
    value = find_header(headers, "cross-origin-resource-policy")
    if not value:
        return CheckOutcome(passed=False, detail="Missing")
    return CheckOutcome(passed=True, value=value)


CHECK_CATALOG: tuple[CheckDefinition, ...] = (
    CheckDefinition(
        name="HTTPS",
        header="url",
        description="Site uses HTTPS encryption",
        severity=Severity.CRITICAL,
        evaluate=check_https,
    ),
    CheckDefinition(
        name="Strict-Transport-Security",
        header="strict-transport-security",
        description="Forces HTTPS connections via HSTS",
        severity=Severity.CRITICAL,
        evaluate=check_strict_transport_security,
    ),
    CheckDefinition(
        name="Content-Security-Policy",
        header="content-security-policy",
        description="Mitigates XSS and injection attacks",
        severity=Severity.CRITICAL,
        evaluate=check_content_security_policy,
    ),
    CheckDefinition(
        name="X-Frame-Options",
        header="x-frame-options",
        description="Prevents clickjacking by controlling iframe embedding",
        severity=Severity.HIGH,
        evaluate=check_x_frame_options,
    ),
    CheckDefinition(
        name="X-Content-Type-Options",
        header="x-content-type-options",
        description="Prevents MIME type sniffing",
        severity=Severity.MEDIUM,
        evaluate=check_x_content_type_options,
    ),
    CheckDefinition(
        name="Referrer-Policy",
        header="referrer-policy",
        description="Controls how much referrer info is sent",
        severity=Severity.MEDIUM,
        evaluate=check_referrer_policy,
    ),
    CheckDefinition(
        name="Permissions-Policy",
        header="permissions-policy",
        description="Controls browser feature access (camera, mic, geolocation)",
        severity=Severity.MEDIUM,
        evaluate=check_permissions_policy,
    ),
    CheckDefinition(
        name="X-XSS-Protection",
        header="x-xss-protection",
        description="Legacy XSS filter (deprecated but still checked)",
        severity=Severity.LOW,
        evaluate=check_x_xss_protection,
    ),
    CheckDefinition(
        name="Cross-Origin-Opener-Policy",
        header="cross-origin-opener-policy",
        description="Isolates browsing context from cross-origin popups",
        severity=Severity.LOW,
        evaluate=check_cross_origin_opener_policy,
    ),
    CheckDefinition(
        name="Cross-Origin-Resource-Policy",
        header="cross-origin-resource-policy",
        description="Prevents resources from being loaded cross-origin",
        severity=Severity.LOW,
        evaluate=check_cross_origin_resource_policy,
    ),
)

_CHECKS_BY_NAME = {check.name: check for check in CHECK_CATALOG}


def get_check(name: str) -> CheckDefinition:
    """Return the catalog entry with the given name (raises KeyError if unknown)."""
    return _CHECKS_BY_NAME[name]


def catalog_total_weight() -> int:
    """Sum of the severity weights of every catalog entry."""
    return sum(check.weight for check in CHECK_CATALOG)
