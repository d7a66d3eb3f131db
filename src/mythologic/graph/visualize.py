"""Generate an interactive HTML visualization of an ontology."""

import logging
from collections import Counter
from pathlib import Path

import networkx as nx
from pyvis.network import Network

from mythologic.models import Relationship
from mythologic.ontology import MythOntology

logger = logging.getLogger(__name__)

# Color by entity type
NODE_COLORS = {
    "Deity": "#FFC107",  # Amber
    "Hero": "#4CAF50",  # Green
    "Creature": "#F44336",  # Red
    "Artifact": "#FF9800",  # Orange
    "Location": "#2196F3",  # Blue
    "Concept": "#9C27B0",  # Purple
    "Culture": "#795548",  # Brown
    "Pantheon": "#E91E63",  # Pink
    "MythologicalEra": "#607D8B",  # Blue grey
    "MythologicalRegion": "#009688",  # Teal
}
DEFAULT_COLOR = "#9E9E9E"

EDGE_COLORS = {
    "FamilyRelationship": "#8BC34A",
    "AllianceRelationship": "#03A9F4",
    "ConflictRelationship": "#FF5722",
    "TransformationRelationship": "#CE93D8",
}


def entity_type_counts(ontology: MythOntology) -> dict[str, int]:
    """Number of stored entities per type, most common first."""
    counts = Counter(entity.entity_type for entity in ontology.all_entities())
    return dict(counts.most_common())


def build_display_graph(ontology: MythOntology) -> nx.DiGraph:
    """Project the ontology into a directed graph ready for pyvis.

    Nodes are every non-relationship entity; edges come from relationship
    entities (both ways when bidirectional) and from node relationship lists.
    Edges whose endpoints are not stored are dropped.
    """
    G = nx.DiGraph()

    for entity in ontology.all_entities():
        if isinstance(entity, Relationship):
            continue
        G.add_node(
            str(entity.id),
            label=entity.name,
            title=f"{entity.name}\nType: {entity.entity_type}\n{entity.description}",
            color=NODE_COLORS.get(entity.entity_type, DEFAULT_COLOR),
            group=entity.entity_type,
        )

    def add_edge(source, target, relationship: Relationship) -> None:
        source, target = str(source), str(target)
        if source not in G.nodes or target not in G.nodes or G.has_edge(source, target):
            return
        G.add_edge(
            source,
            target,
            title=f"{relationship.name} ({relationship.entity_type})",
            label=relationship.name,
            color=EDGE_COLORS.get(relationship.entity_type, DEFAULT_COLOR),
            weight=1 + 4 * relationship.strength,
        )

    relationships = [e for e in ontology.all_entities() if isinstance(e, Relationship)]
    for rel in relationships:
        add_edge(rel.source_id, rel.target_id, rel)
        if rel.bidirectional:
            add_edge(rel.target_id, rel.source_id, rel)

    for entity in ontology.all_entities():
        if isinstance(entity, Relationship):
            continue
        for rel_id in entity.relationships:
            rel = ontology.get_entity(rel_id)
            if not isinstance(rel, Relationship):
                continue
            other = rel.other_end(entity.id)
            if other is not None:
                add_edge(entity.id, other, rel)

    # Size by connections
    for node, degree in G.degree():
        G.nodes[node]["size"] = min(50, 10 + 3 * degree)

    return G


def generate_html_visualization(ontology: MythOntology, output_path: Path) -> Path:
    """Write an interactive graph to ``output_path`` (an ``.html`` file).

    Returns the path written.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    G = build_display_graph(ontology)

    net = Network(
        height="800px",
        width="100%",
        bgcolor="#222222",
        font_color="white",
        directed=True,
        cdn_resources="remote",
    )

    # Configure physics
    net.barnes_hut(
        gravity=-3000,
        central_gravity=0.3,
        spring_length=200,
        spring_strength=0.05,
    )

    net.from_nx(G, show_edge_weights=False)
    net.save_graph(str(output_path))

    logger.info(
        "Wrote visualization with %d nodes and %d edges to %s",
        G.number_of_nodes(),
        G.number_of_edges(),
        output_path,
    )
    return output_path
