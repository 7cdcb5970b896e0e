"""Project settings."""

from pathlib import Path

# The location of the project root directory.
PROJECT_ROOT = Path(__file__).parents[1]  # Going up from roster_graph to the project root

# Default paths
DEFAULT_ROSTER_FILE = Path("data/raw/nba_2022_2023.csv")
DEFAULT_OUTPUT_DIR = Path("data/graph")

# Roster CSV columns
DEFAULT_NAME_COLUMN = "Player"
DEFAULT_GROUP_COLUMN = "Tm"

# Parameters fed to the pipeline as ``params:roster``
DEFAULT_ROSTER_PARAMS = {
    "input_path": str(DEFAULT_ROSTER_FILE),
    "output_dir": str(DEFAULT_OUTPUT_DIR),
    "name_column": DEFAULT_NAME_COLUMN,
    "group_column": DEFAULT_GROUP_COLUMN,
    "top_k": 5,
    "dot_file": "roster_graph.dot",
    "json_file": "roster_graph.json",
    "representatives_file": "representatives.parquet",
    "closeness_file": "closeness.parquet",
    "plot_file": "roster_graph.png",
    "export_json": True,
    "plot": False,
    "show_progress": False,
}
