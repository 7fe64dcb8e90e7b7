"""Public package API for aksprime."""

from .aks import AKSResult, InvalidInput, Stage, certify, is_prime
from .config import ConfigError, clear_config, configure, get_config
from .runtime import DeadlineExceeded, JobCancelled, cancel_job, cancel_requested, raise_if_cancelled

__all__ = [
    "is_prime",
    "certify",
    "AKSResult",
    "Stage",
    "InvalidInput",
    "configure",
    "get_config",
    "clear_config",
    "ConfigError",
    "cancel_job",
    "cancel_requested",
    "raise_if_cancelled",
    "JobCancelled",
    "DeadlineExceeded",
]
