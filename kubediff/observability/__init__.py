"""Logging and metrics for kubediff.

Submodules:
    logging -- structlog configuration and component-bound loggers.
    metrics -- Prometheus counters for diff calls and selector failures.
"""
