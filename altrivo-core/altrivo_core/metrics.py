"""
OTP Metrics
===========
Prometheus counters for OTP issuance and verification outcomes.
"""

from prometheus_client import CollectorRegistry, Counter, generate_latest

OTP_REGISTRY = CollectorRegistry()

OTP_ISSUED = Counter(
    name="otp_issued_total",
    documentation="Verification codes delivered and stored",
    labelnames=["template"],
    registry=OTP_REGISTRY,
)

OTP_DELIVERY_FAILURES = Counter(
    name="otp_delivery_failures_total",
    documentation="Verification codes that could not be delivered",
    labelnames=["template"],
    registry=OTP_REGISTRY,
)

OTP_BLOCKED = Counter(
    name="otp_requests_blocked_total",
    documentation="Issuance requests refused by the gate or throttle",
    labelnames=["kind"],
    registry=OTP_REGISTRY,
)

OTP_VERIFICATIONS = Counter(
    name="otp_verifications_total",
    documentation="Verification attempts by outcome",
    labelnames=["outcome"],
    registry=OTP_REGISTRY,
)


def record_blocked(kind: str) -> None:
    OTP_BLOCKED.labels(kind=kind).inc()


def record_verification(outcome: str) -> None:
    OTP_VERIFICATIONS.labels(outcome=outcome).inc()


def get_metrics_text() -> bytes:
    """Render the OTP registry in Prometheus text format."""
    return generate_latest(OTP_REGISTRY)
