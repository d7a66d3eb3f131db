"""Graph projections and visualization."""

from mythologic.graph.visualize import (
    build_display_graph,
    entity_type_counts,
    generate_html_visualization,
)

__all__ = ["build_display_graph", "entity_type_counts", "generate_html_visualization"]
