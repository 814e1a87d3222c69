"""Network graph - bipartite voter/option graph with circular layout.

Options sit on an inner circle of radius min(width, height) / 6 and voters on
an outer circle of radius min(width, height) / 3, both around the canvas
center. The i-th of n nodes on a circle is placed at angle 2*pi*i/n, so the
layout depends only on input order.
"""

import math
from collections.abc import Sequence

from loguru import logger

import settings
from app.models.voting import NetworkEdge, NetworkGraph, NetworkNode, NodeType, OptionAggregate, VoteRecord


def option_node_id(option_id: str) -> str:
    return f"option_{option_id}"


def voter_node_id(invite_code: str) -> str:
    return f"voter_{invite_code}"


def circle_position(index: int, count: int, center: tuple[float, float], radius: float) -> tuple[float, float]:
    """Coordinates of the index-th of count points spread evenly on a circle."""
    angle = 2 * math.pi * index / count
    return center[0] + math.cos(angle) * radius, center[1] + math.sin(angle) * radius


def build_network_graph(
    votes: Sequence[VoteRecord],
    aggregates: Sequence[OptionAggregate],
    width: int | None = None,
    height: int | None = None,
) -> NetworkGraph:
    """Nodes for options and voters, one edge per positive allocation to a known option."""
    if not votes or not aggregates:
        return NetworkGraph()

    width = width or settings.CANVAS_WIDTH
    height = height or settings.CANVAS_HEIGHT
    center = (width / 2, height / 2)
    option_radius = min(width, height) / 6
    voter_radius = min(width, height) / 3

    nodes: list[NetworkNode] = []
    for i, agg in enumerate(aggregates):
        x, y = circle_position(i, len(aggregates), center, option_radius)
        nodes.append(
            NetworkNode(
                id=option_node_id(agg.option_id),
                type=NodeType.OPTION,
                label=agg.title,
                x=x,
                y=y,
                total_credits=agg.total_credits,
                vote_count=agg.vote_count,
            )
        )

    for i, vote in enumerate(votes):
        x, y = circle_position(i, len(votes), center, voter_radius)
        nodes.append(
            NetworkNode(
                id=voter_node_id(vote.invite_code),
                type=NodeType.VOTER,
                label=f"Voter {i + 1}",
                x=x,
                y=y,
                credits=vote.total_credits_used,
                submitted_at=vote.submitted_at,
            )
        )

    known = {agg.option_id for agg in aggregates}
    edges = [
        NetworkEdge(
            id=f"{vote.invite_code}_{option_id}",
            source=voter_node_id(vote.invite_code),
            target=option_node_id(option_id),
            weight=credits,
            submitted_at=vote.submitted_at,
        )
        for vote in votes
        for option_id, credits in vote.funded().items()
        if option_id in known
    ]

    logger.debug("Network graph: {} nodes, {} edges", len(nodes), len(edges))
    return NetworkGraph(nodes=nodes, edges=edges)
