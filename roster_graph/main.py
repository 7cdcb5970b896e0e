"""
Main entry point for running the roster graph pipeline.

Example:
    $ python -m roster_graph.main --input data/raw/nba_2022_2023.csv
    $ python -m roster_graph.main --input roster.csv --top-k 10 --plot
"""

import argparse
import logging
from typing import Any, Dict, List, Optional

from kedro.io import DataCatalog, MemoryDataset
from kedro.runner import SequentialRunner

from roster_graph.pipeline_registry import register_pipelines
from roster_graph.settings import DEFAULT_ROSTER_PARAMS

logger = logging.getLogger(__name__)


def run_pipeline(params: Optional[Dict[str, Any]] = None, pipeline_name: str = "__default__") -> Dict[str, Any]:
    """
    Run the specified pipeline on an in-memory catalog.

    Args:
        params: Overrides merged over ``DEFAULT_ROSTER_PARAMS``
        pipeline_name: Name of the registered pipeline to run

    Returns:
        Dict[str, Any]: The pipeline's final outputs keyed by dataset name
    """
    roster_params = {**DEFAULT_ROSTER_PARAMS, **(params or {})}
    pipeline = register_pipelines()[pipeline_name]

    datasets = {
        name: MemoryDataset(copy_mode="assign")
        for name in pipeline.all_outputs()
    }
    datasets["params:roster"] = MemoryDataset(roster_params, copy_mode="assign")
    catalog = DataCatalog(datasets=datasets)

    logger.info(f"Running pipeline: {pipeline_name}")
    SequentialRunner().run(pipeline, catalog)

    return {name: datasets[name].load() for name in pipeline.outputs()}


def log_report(report: Dict[str, Any]) -> None:
    """Log the analysis results in a human-readable form."""
    logger.info(f"Graph has {report['nodes']:,} nodes and {report['edges']:,} edges")
    logger.info(f"Average distance between nodes: {report['average_distance']:.2f}")

    logger.info(f"Top {len(report['representatives'])} representatives:")
    for name in report["representatives"]:
        logger.info(f"Player: {name}")

    for label, key in (("Most similar", "most_similar"), ("Most dissimilar", "most_dissimilar")):
        pair = report[key]
        if pair is None:
            logger.info(f"{label} pair: not available")
            continue
        first, second = pair["players"]
        logger.info(f"{label} pair: ({first}, {second}) with Jaccard similarity {pair['score']:.2f}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Build a player graph from a roster CSV and analyze it"
    )

    parser.add_argument(
        "--input",
        dest="input_path",
        help=f"Roster CSV file (default: {DEFAULT_ROSTER_PARAMS['input_path']})",
    )

    parser.add_argument(
        "--output-dir",
        help=f"Directory for exported files (default: {DEFAULT_ROSTER_PARAMS['output_dir']})",
    )

    parser.add_argument(
        "--top-k",
        type=int,
        help=f"Number of representatives to report (default: {DEFAULT_ROSTER_PARAMS['top_k']})",
    )

    parser.add_argument("--dot-file", help="Name of the DOT file written to the output directory")
    parser.add_argument("--name-column", help="Roster column holding the player name")
    parser.add_argument("--group-column", help="Roster column holding the team")

    parser.add_argument(
        "--plot",
        action="store_true",
        default=None,
        help="Render the graph to a PNG with matplotlib",
    )

    parser.add_argument(
        "--progress",
        dest="show_progress",
        action="store_true",
        default=None,
        help="Show progress bars for the shortest path searches",
    )

    parser.add_argument(
        "--no-json",
        dest="export_json",
        action="store_false",
        default=None,
        help="Skip the node-link JSON export",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    """Run the pipeline with command line overrides and log the report."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    args = parse_args(argv)
    params = {key: value for key, value in vars(args).items() if value is not None}

    outputs = run_pipeline(params)
    log_report(outputs["roster_report"])

    for kind, path in outputs["export_files"].items():
        logger.info(f"Wrote {kind} output to {path}")

    return outputs


if __name__ == "__main__":
    main()
