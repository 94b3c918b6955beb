"""Command-line demo: load the sample network and print every line.

Run with ``python -m transit_line.pipeline``. The data directory can be
changed through TL_NETWORK_DATA_DIR.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .adapters.repository import CSVNetworkLoader
from .container import Container, get_container
from .domain.errors import TransitLineError
from .domain.models import LineView
from .logging_config import configure_logging
from .services.responses import error_response

logger = logging.getLogger(__name__)


def describe_line(view: LineView) -> str:
    """Render a line as a short multi-line message."""
    header = f"Line: {view.name} ({view.color})" if view.color else f"Line: {view.name}"
    if view.is_empty:
        return f"{header}\nNo segments yet."
    path_str = " -> ".join(view.station_names)
    return f"{header}\nStations: {path_str}\nTotal distance: {view.total_distance}"


def run_pipeline(container: Optional[Container] = None) -> int:
    """Load the configured network and print each line.

    Returns:
        Process exit code: 0 on success, 1 when the network is rejected.
    """
    container = container or get_container()
    loader: CSVNetworkLoader = container.resolve(CSVNetworkLoader)

    try:
        views = loader.load()
    except TransitLineError as e:
        response = error_response(e)
        logger.error(
            "Network rejected",
            extra={"error_code": response.code.value, "details": response.details},
        )
        print(f"Error [{response.code.value}]: {response.message}")
        return 1

    for view in views:
        print(describe_line(view))
        print()
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(run_pipeline())
