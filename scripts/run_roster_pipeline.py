#!/usr/bin/env python
"""
Run the roster graph pipeline.

This script reads a roster CSV, builds the player graph, and reports the
average distance, the most central players, and the most and least similar
player pairs. The graph is exported to DOT (render with Graphviz) and JSON.

Example:
    $ python scripts/run_roster_pipeline.py --input data/raw/nba_2022_2023.csv
    $ python scripts/run_roster_pipeline.py --top-k 10 --plot
"""

import sys
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from roster_graph.main import main


if __name__ == "__main__":
    main()
