# src/brsr/cli/run.py

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Mapping, Optional

from brsr.document.render_md import render_markdown
from brsr.pipeline.io_utils import (
    artifacts_to_json,
    load_record,
    save_artifacts_to_json,
    save_scores_to_csv,
)
from brsr.pipeline.pipeline import BRSRPipeline

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="BRSR scoring: derived metrics, compliance scores and report document."
    )
    parser.add_argument(
        "input",
        help="Path to a BRSR disclosure record (JSON object).",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Where to save metrics, scores and document as JSON (default: stdout).",
    )
    parser.add_argument(
        "--markdown",
        "-m",
        help="Optional path for a Markdown rendering of the document.",
    )
    parser.add_argument(
        "--csv",
        help="Optional path for indicator-level scores as CSV.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    in_path = Path(args.input)
    if not in_path.exists():
        logger.error("Input record not found: %s", in_path)
        return 1

    try:
        record = load_record(str(in_path))
    except json.JSONDecodeError as exc:
        logger.error("Input record is not valid JSON: %s (%s)", in_path, exc)
        return 1

    if not isinstance(record, Mapping):
        logger.error("Input record must be a JSON object, got %s", type(record).__name__)
        return 1

    logger.info("CLI: Starting BRSR pipeline on '%s'", in_path)
    artifacts = BRSRPipeline().run(record)

    if args.output:
        save_artifacts_to_json(artifacts, args.output)
        logger.info("CLI: Saved results to %s", args.output)
    else:
        print(artifacts_to_json(artifacts))

    if args.markdown:
        md_file = Path(args.markdown)
        md_file.parent.mkdir(parents=True, exist_ok=True)
        md_file.write_text(render_markdown(artifacts.document), encoding="utf-8")
        logger.info("CLI: Saved Markdown document to %s", md_file)

    if args.csv:
        save_scores_to_csv(artifacts.scores, args.csv)
        logger.info("CLI: Saved indicator scores to %s", args.csv)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
