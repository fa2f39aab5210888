"""Tag cleanup after an operation is removed."""

import logging

from openapi_editor.config import HTTP_METHODS

logger = logging.getLogger(__name__)


def used_tags(document: dict, methods=HTTP_METHODS) -> set[str]:
    """Return the tag names referenced by any operation in the document."""
    tags: set[str] = set()
    paths = document.get("paths")
    if not isinstance(paths, dict):
        return tags
    for path_item in paths.values():
        if not isinstance(path_item, dict):
            continue
        for method in methods:
            operation = path_item.get(method)
            if isinstance(operation, dict):
                tags.update(operation.get("tags") or [])
    return tags


def prune_tags(document: dict, removed_tags: set[str], methods=HTTP_METHODS) -> list[str]:
    """Drop tags that belonged to a removed operation and are no longer used.

    Tags the removed operation did not carry are kept even when nothing uses
    them. The `tags` list is removed from the document when it ends up empty.
    Returns the names of the removed tags.
    """
    tags = document.get("tags")
    if not removed_tags or not tags:
        return []

    in_use = used_tags(document, methods)
    kept = []
    dropped = []
    for tag in tags:
        name = tag.get("name") if isinstance(tag, dict) else None
        if name not in removed_tags or name in in_use:
            kept.append(tag)
        else:
            dropped.append(name)

    if kept:
        document["tags"] = kept
    else:
        del document["tags"]

    if dropped:
        logger.info("Removed unused tags: %s", ", ".join(dropped))
    return dropped
