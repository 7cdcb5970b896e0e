"""Project pipelines."""

from typing import Dict

from kedro.pipeline import Pipeline

from roster_graph.pipeline import create_pipeline as create_roster_pipeline


def register_pipelines() -> Dict[str, Pipeline]:
    """Register the project's pipelines.

    Returns:
        A mapping from pipeline names to ``Pipeline`` objects.
    """
    roster_pipeline = create_roster_pipeline()

    return {
        "__default__": roster_pipeline,
        "roster": roster_pipeline,
    }
