"""Observability: logging and metrics for observer registries."""

from observers.observability.logger import get_logger
from observers.observability.metrics import Metrics

__all__ = ["get_logger", "Metrics"]
