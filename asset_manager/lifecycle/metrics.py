"""Prometheus metrics of the asset lifecycle.

    asset_manager_operations_total
        Finished orchestration runs, labelled by `operation` (create, destroy)
        and `outcome` (the error kind, or `success`).

    asset_manager_key_release_failures_total
        Leased keys which could not be deleted from the wallet again. Any
        increase means a key is dangling in the key daemon.

    asset_manager_confirmation_wait_seconds
        Time spent waiting for a broadcast transaction to be confirmed.
"""
from prometheus_client import Counter, Histogram

ASSET_OPERATIONS_TOTAL = Counter(
    "asset_manager_operations_total",
    "Total amount of asset lifecycle runs.",
    labelnames=["operation", "outcome"],
)
KEY_RELEASE_FAILURES_TOTAL = Counter(
    "asset_manager_key_release_failures_total",
    "Total amount of leased keys that could not be released.",
)
CONFIRMATION_WAIT_SECONDS = Histogram(
    "asset_manager_confirmation_wait_seconds",
    "Duration of waiting for transaction confirmation.",
    buckets=(1, 2.5, 5, 10, 20, 30, 60, 120, 300),
)
