import csv
import json
from pathlib import Path
from typing import Any

from brsr.config import load_config
from brsr.core.types import ComplianceScore, ReportArtifacts


def save_scores_to_csv(scores: ComplianceScore, out_path: str) -> None:
    """
    Save indicator-level scores to a CSV file with a stable, flat schema.

    One row per indicator, ordered by principle then rubric order.
    """
    cfg = load_config()
    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["topic", "pillar", "indicator", "points", "topic_total"])

        for topic, topic_score in scores.topic_scores.items():
            for s in topic_score.indicator_scores:
                writer.writerow([
                    topic,
                    cfg.pillar_of(topic),
                    s.key,
                    s.points,
                    topic_score.total,
                ])


def artifacts_to_json(artifacts: ReportArtifacts, indent: int = 2) -> str:
    return json.dumps(artifacts.to_dict(), indent=indent, ensure_ascii=False)


def save_artifacts_to_json(artifacts: ReportArtifacts, out_path: str) -> None:
    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(artifacts_to_json(artifacts), encoding="utf-8")


def load_record(in_path: str) -> Any:
    with open(in_path, "r", encoding="utf-8") as f:
        return json.load(f)
