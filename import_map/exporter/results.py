"""Write every output file of an analysis run."""

from __future__ import annotations

import logging
from pathlib import Path

from import_map.exporter.html import write_html
from import_map.exporter.json_exporter import write_errors_json, write_graph_json
from import_map.exporter.report import generate_text_report
from import_map.models import AnalysisResult

logger = logging.getLogger(__name__)

GRAPH_FILENAME = "import-map.json"
REPORT_FILENAME = "import-map-report.md"
HTML_FILENAME = "import-map.html"
ERRORS_FILENAME = "import-map-errors.json"


def export_results(
    result: AnalysisResult,
    output_dir: Path,
    *,
    generate_visualization: bool = True,
) -> list[Path]:
    """Write JSON, report, optional HTML and the error log; return the created paths."""
    output_dir.mkdir(parents=True, exist_ok=True)
    created: list[Path] = []

    created.append(write_graph_json(result.graph, output_dir / GRAPH_FILENAME))
    logger.info("Saved JSON data to %s", created[-1])

    report_path = output_dir / REPORT_FILENAME
    report_path.write_text(generate_text_report(result.graph), encoding="utf-8")
    created.append(report_path)
    logger.info("Saved analysis report to %s", report_path)

    if generate_visualization:
        created.append(write_html(result.graph, output_dir / HTML_FILENAME))
        # Deployment copy
        created.append(write_html(result.graph, output_dir / "dist" / "index.html"))
        logger.info("Saved HTML visualization to %s", created[-2])

    if result.errors:
        created.append(write_errors_json(result.errors, output_dir / ERRORS_FILENAME))
        logger.warning("Saved error log to %s", created[-1])

    return created
