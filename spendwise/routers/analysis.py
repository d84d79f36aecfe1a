import logging
from typing import Any, Dict

from fastapi import APIRouter, Body

from spendwise.utils.alerts import generate_alerts
from spendwise.utils.analyzer import SpendingAnalyzer
from spendwise.utils.cohort import cohort_overview
from spendwise.utils.loader import build_dataset
from spendwise.utils.summary import render_summary

router = APIRouter()
logger = logging.getLogger(__name__)
analyzer = SpendingAnalyzer()


@router.post("/")
def analyze_dataset(payload: Dict[str, Any] = Body(...)) -> Dict:
    """
    Validate the posted dataset and analyze every person in it.
    """
    dataset = build_dataset(payload)
    results = analyzer.analyze_all(dataset)
    return {
        "results": [r.to_dict() for r in results],
        "overview": cohort_overview(results).to_dict(),
    }


@router.post("/{person_id}")
def analyze_person(person_id: str, payload: Dict[str, Any] = Body(...)) -> Dict:
    dataset = build_dataset(payload)
    result = analyzer.analyze_person(dataset, person_id)
    logger.info(f"Analyzed {person_id}: utilization={result.budget.utilization}% status={result.budget.status}")
    return {
        "analysis": result.to_dict(),
        "summary": render_summary(result),
        "alerts": [a.to_dict() for a in generate_alerts(result)],
    }
