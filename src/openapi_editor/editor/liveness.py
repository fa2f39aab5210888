"""Liveness scan: which component names are still in use."""

import logging

from openapi_editor.config import HTTP_METHODS
from openapi_editor.editor.refs import ReferenceCollector

logger = logging.getLogger(__name__)


def live_references(document: dict, methods=HTTP_METHODS) -> set[str]:
    """Return every component name reachable from the document as it stands.

    Scans all remaining path items (path-level parameters and every
    operation) plus the reusable parameter, request body and response pools.
    This is always a full rescan: a component used by a deleted operation
    may still be used elsewhere.
    """
    collector = ReferenceCollector(document)
    live: set[str] = set()

    paths = document.get("paths")
    if isinstance(paths, dict):
        for path_item in paths.values():
            collector.path_item_refs(path_item, live, methods)

    collector.pool_refs(live)

    logger.debug("Live component names: %s", sorted(live))
    return live
