"""
Configuration constants for the graph algorithm engine.

All sentinels, limits, and tunable settings are defined here.
Overrides are read from environment variables (a local .env file is honoured).
"""

import logging
import os

import numpy as np
from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Edge Configuration
# =============================================================================

# Weight given to every edge when a graph is built in unweighted mode
DEFAULT_EDGE_WEIGHT = 1

# Data type of the adjacency matrix mirror
MATRIX_DTYPE = "int64"

# =============================================================================
# Output Sentinels
# =============================================================================

# Prim's parent entry for the root and for vertices outside the tree
NO_PARENT = -1

# Padding for unused trailing slots of a traversal result buffer
NO_VERTEX = -1

# Dijkstra distance for vertices unreachable from the start (C int max)
UNREACHABLE = int(np.iinfo(np.int32).max)

# How an unreachable distance is rendered in tables
UNREACHABLE_LABEL = "∞"

# =============================================================================
# Graph Limits
# =============================================================================

# Largest vertex count accepted by Graph (the matrix mirror is n x n)
MAX_VERTICES = int(os.environ.get("GRAPH_MAX_VERTICES", "1000"))

# Largest accepted edge weight. A simple path has at most MAX_VERTICES - 1
# edges, so no real distance or key can reach UNREACHABLE.
MAX_EDGE_WEIGHT = (UNREACHABLE - 1) // max(MAX_VERTICES - 1, 1)

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for scripts using LOG_LEVEL by default."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
