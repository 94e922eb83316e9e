from import_map.exporter.html import generate_html, write_html
from import_map.exporter.json_exporter import graph_to_dict, graph_to_json, write_errors_json, write_graph_json
from import_map.exporter.report import generate_text_report
from import_map.exporter.results import export_results

__all__ = [
    "export_results",
    "generate_html",
    "generate_text_report",
    "graph_to_dict",
    "graph_to_json",
    "write_errors_json",
    "write_graph_json",
    "write_html",
]
