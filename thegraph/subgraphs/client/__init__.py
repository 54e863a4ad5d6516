"""High-level client API to query subgraphs."""

from .subgraph_client import ClientBuilder, SubgraphClient
from .watermark import Watermark

__all__ = [
    "ClientBuilder",
    "SubgraphClient",
    "Watermark",
]
