"""POST /v1/analysis - financial health assessment endpoint"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Request

from finhealth.api.dependencies import get_benchmarks, get_max_action_items, get_request_id
from finhealth.api.v1.schemas import AnalysisRequest, AnalysisResponse, BenchmarksResponse
from finhealth.domain.benchmarks import BenchmarkTable
from finhealth.domain.scoring import compute_analysis
from finhealth.infrastructure.observability.logging import log_analysis
from finhealth.infrastructure.observability.metrics import record_analysis

router = APIRouter()


@router.post("/analysis", response_model=AnalysisResponse)
def create_analysis(
    request_body: AnalysisRequest,
    request: Request,
    benchmarks: BenchmarkTable = Depends(get_benchmarks),
    max_action_items: int = Depends(get_max_action_items),
):
    """
    Score a financial profile.

    Flow:
    1. Validate and convert the submitted profile
    2. Compute indicator scores, overall score and tier
    3. Derive insights and the action plan
    4. Return the serialized assessment
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = compute_analysis(
            request_body.to_profile(),
            benchmarks=benchmarks,
            max_action_items=max_action_items,
        )
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_analysis(result.overall_score, result.tier, result.degraded)
    log_analysis(request_id, result.overall_score, result.tier, result.degraded, duration_ms)

    return AnalysisResponse.from_result(result)


@router.get("/benchmarks", response_model=BenchmarksResponse)
def get_benchmark_table(benchmarks: BenchmarkTable = Depends(get_benchmarks)):
    """Active benchmark thresholds and weights, for renderers that display targets"""
    return BenchmarksResponse(**benchmarks.to_dict())
