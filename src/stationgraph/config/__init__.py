"""
Configuration layer for stationgraph.

Configuration in stationgraph is:
- Explicit (passed to a GraphStore, not read from globals at call time)
- Typed (a frozen GraphConfig)
- Overridable from the environment (``STATIONGRAPH_*`` via dynaconf)
"""

from stationgraph.config.settings import GraphConfig
from stationgraph.config.loader import load_config, default_config

__all__ = [
    "GraphConfig",
    "load_config",
    "default_config",
]
