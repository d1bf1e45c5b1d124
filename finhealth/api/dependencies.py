"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Request

from finhealth.config import settings
from finhealth.domain.benchmarks import BenchmarkTable, load_benchmarks


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache(maxsize=1)
def get_benchmarks() -> BenchmarkTable:
    """Provide the process-wide benchmark table, built once from settings"""
    return load_benchmarks(settings.indicator_weights)


def get_max_action_items() -> int:
    return settings.max_action_items
