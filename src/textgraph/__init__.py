"""textgraph - render graph neighborhoods, node sets and paths as terminal text."""

__version__ = "0.1.0"

from textgraph.config import DEFAULT_CONFIG, RenderConfig, merge_config  # noqa: E402
from textgraph.graph import Edge, GraphCounts, NetworkXGraphAccessor, Node  # noqa: E402
from textgraph.render import AsciiRenderer, render_graph_stats, render_query_result  # noqa: E402

__all__ = [
    "DEFAULT_CONFIG",
    "AsciiRenderer",
    "Edge",
    "GraphCounts",
    "NetworkXGraphAccessor",
    "Node",
    "RenderConfig",
    "__version__",
    "merge_config",
    "render_graph_stats",
    "render_query_result",
]
