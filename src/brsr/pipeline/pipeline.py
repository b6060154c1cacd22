# src/brsr/pipeline/pipeline.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from brsr.config import BRSRConfig, load_config
from brsr.core.types import ReportArtifacts
from brsr.document.compiler import compile_document
from brsr.metrics.derived import compute_derived_metrics
from brsr.scoring.engine import score_record

logger = logging.getLogger(__name__)


# ----------------------------------------------------------
# Main Pipeline
# ----------------------------------------------------------
class BRSRPipeline:
    """
    Runs the three stages over one disclosure record:
        - derived metrics (totals, percentages, intensity ratios)
        - compliance scores (indicator -> topic -> pillar -> overall)
        - document sections (general, management, principles, summary)

    Stages never write to the record, and no state is kept between runs,
    so one instance may serve many records from several threads.
    """

    def __init__(self, config: Optional[BRSRConfig] = None):
        self.config = config or load_config()

    def run(self, record: Mapping[str, Any]) -> ReportArtifacts:
        if not isinstance(record, Mapping):
            logger.debug("pipeline: record is %s, not a mapping; using empty record", type(record).__name__)
            record = {}

        metrics = compute_derived_metrics(record)
        scores = score_record(record, self.config)
        document = compile_document(record, metrics, scores, self.config)

        financial_year = record.get("financial_year")
        logger.info(
            "pipeline: scored %s/%s (%.2f%%) for FY %s; %d sections compiled",
            scores.total_score,
            scores.max_score,
            scores.percentage,
            financial_year or "n/a",
            len(document),
        )

        return ReportArtifacts(
            derived_metrics=metrics,
            scores=scores,
            document=document,
            financial_year=financial_year if isinstance(financial_year, str) else None,
        )

    def run_on_file(self, json_path: str) -> ReportArtifacts:
        path = Path(json_path)
        if not path.exists():
            raise FileNotFoundError(json_path)

        record: Dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
        return self.run(record)


# Convenience API
def run_pipeline(record: Mapping[str, Any]) -> ReportArtifacts:
    return BRSRPipeline().run(record)
