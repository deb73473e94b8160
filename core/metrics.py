"""
Prometheus metrics for the activation code service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Activation code metrics
activation_codes_created_total = Counter(
    "activation_codes_created_total",
    "Total activation codes created",
)

activation_codes_redeemed_total = Counter(
    "activation_codes_redeemed_total",
    "Total activation code redemptions",
)

activation_code_status_changes_total = Counter(
    "activation_code_status_changes_total",
    "Total activation code status updates",
    ["status"],
)

accounts_registered_total = Counter(
    "accounts_registered_total",
    "Total accounts registered under activation codes",
)

account_quota_rejections_total = Counter(
    "account_quota_rejections_total",
    "Total account registrations rejected because the quota was full",
)

admin_logins_total = Counter(
    "admin_logins_total",
    "Total successful administrator logins",
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
