from __future__ import annotations

import logging
from functools import lru_cache

from dynaconf import Dynaconf

from stationgraph.config.constants import DEFAULTS
from stationgraph.config.settings import GraphConfig
from stationgraph.errors import InvalidArgumentError

_GRAPH_TYPES = {"directed", "undirected"}


def _settings() -> Dynaconf:
    return Dynaconf(
        envvar_prefix="STATIONGRAPH",
        load_dotenv=True,
        settings_files=[],
    )


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def load_config() -> GraphConfig:
    """
    Build a GraphConfig from ``STATIONGRAPH_*`` environment variables
    (and a ``.env`` file, if present), falling back to DEFAULTS.
    """
    settings = _settings()

    graph_type = str(settings.get("GRAPH_TYPE", DEFAULTS["GRAPH_TYPE"])).lower()
    if graph_type not in _GRAPH_TYPES:
        raise InvalidArgumentError(
            f"GRAPH_TYPE must be one of {sorted(_GRAPH_TYPES)}, got {graph_type!r}",
            details={"graph_type": graph_type},
        )

    config = GraphConfig(
        graph_type=graph_type,
        symmetrize_on_insert=_as_bool(
            settings.get("SYMMETRIZE_ON_INSERT", DEFAULTS["SYMMETRIZE_ON_INSERT"])
        ),
        sort_in_place=_as_bool(
            settings.get("SORT_IN_PLACE", DEFAULTS["SORT_IN_PLACE"])
        ),
        allow_hash_ordering=_as_bool(
            settings.get("ALLOW_HASH_ORDERING", DEFAULTS["ALLOW_HASH_ORDERING"])
        ),
        render_connector=str(
            settings.get("RENDER_CONNECTOR", DEFAULTS["RENDER_CONNECTOR"])
        ),
    )

    logging.getLogger("stationgraph.config").info(
        "[config] graph_type=%s symmetrize_on_insert=%s sort_in_place=%s "
        "allow_hash_ordering=%s",
        config.graph_type,
        config.symmetrize_on_insert,
        config.sort_in_place,
        config.allow_hash_ordering,
    )
    return config


@lru_cache
def default_config() -> GraphConfig:
    """Process-wide configuration, loaded once on first use."""
    return load_config()
