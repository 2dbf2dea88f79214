"""
Request timing against per-category thresholds
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Dict, List, Optional

from graphql_contract.config import ContractTestConfig, get_config

logger = logging.getLogger(__name__)

CATEGORIES = ("simple_query", "complex_query", "mutation")


@dataclass
class PerformanceMetric:
    """Performance metrics for a single operation"""
    operation: str
    duration: float
    success: bool
    category: str = ""


class PerformanceMonitor:
    """Monitor and report response times"""

    def __init__(self, config: Optional[ContractTestConfig] = None):
        self.config = config or get_config()
        self.metrics: List[PerformanceMetric] = []
        self.thresholds = self.config.perf_thresholds()

    async def time_operation(self, operation_name: str, awaitable: Awaitable[Any], category: str = "simple_query") -> Any:
        """Time an awaitable and record the metric; exceptions propagate"""
        start_time = time.perf_counter()
        success = True

        try:
            return await awaitable
        except Exception:
            success = False
            raise
        finally:
            duration = time.perf_counter() - start_time
            self.metrics.append(PerformanceMetric(operation_name, duration, success, category))

            threshold = self.thresholds.get(category)
            if threshold is not None and duration > threshold:
                logger.warning(f"Performance warning: {operation_name} took {duration:.2f}s (threshold: {threshold}s)")
            else:
                logger.info(f"{operation_name} executed in {duration * 1000:.0f}ms")

    def get_category_stats(self, category: str) -> Dict[str, Any]:
        category_metrics = [m for m in self.metrics if m.category == category]

        if not category_metrics:
            return {"count": 0, "avg_time": 0.0, "max_time": 0.0, "success_rate": 0.0}

        durations = [m.duration for m in category_metrics]
        successes = sum(1 for m in category_metrics if m.success)

        return {
            "count": len(category_metrics),
            "avg_time": sum(durations) / len(durations),
            "max_time": max(durations),
            "success_rate": successes / len(category_metrics),
        }

    def over_threshold(self) -> List[PerformanceMetric]:
        return [
            m for m in self.metrics
            if m.category in self.thresholds and m.duration > self.thresholds[m.category]
        ]

    def summary(self) -> Dict[str, Dict[str, Any]]:
        return {c: self.get_category_stats(c) for c in CATEGORIES if self.get_category_stats(c)["count"]}

    def log_summary(self):
        if not self.metrics:
            logger.info("No performance metrics recorded")
            return

        for category, stats in self.summary().items():
            threshold = self.thresholds[category]
            status = "OK" if stats["max_time"] <= threshold else "SLOW"
            logger.info(
                f"[{status}] {category}: {stats['count']} ops, "
                f"avg {stats['avg_time']:.2f}s, max {stats['max_time']:.2f}s"
            )
