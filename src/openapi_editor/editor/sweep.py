"""Removal of component pool entries that are no longer live."""

import logging

from openapi_editor.editor.refs import ReferenceCollector

logger = logging.getLogger(__name__)

# Pools swept without ordering: their entries are never candidates for each other.
FLAT_POOLS = ("parameters", "responses", "requestBodies")


def sweep_components(document: dict, live: set[str], sweep_cycles: bool = False) -> dict[str, list[str]]:
    """Delete every unreferenced component and return the removed names by pool.

    Reusable parameters, responses and request bodies whose name is not in
    `live` are removed outright. Schemas are removed in dependency order: a
    pass deletes each candidate whose referenced names are all either
    non-candidates or already deleted, and passes repeat while they make
    progress. Candidates that reference each other in a cycle never satisfy
    that condition and are left in place unless `sweep_cycles` is set.
    """
    removed: dict[str, list[str]] = {}
    components = document.get("components")
    if not isinstance(components, dict):
        return removed

    for kind in FLAT_POOLS:
        pool = components.get(kind)
        if not isinstance(pool, dict):
            continue
        for name in [n for n in pool if n not in live]:
            del pool[name]
            removed.setdefault(kind, []).append(name)

    schemas = components.get("schemas")
    if isinstance(schemas, dict):
        deleted = _sweep_schemas(document, schemas, live, sweep_cycles)
        if deleted:
            removed["schemas"] = deleted

    for kind, names in removed.items():
        logger.info("Removed %d unused %s: %s", len(names), kind, ", ".join(names))
    return removed


def _sweep_schemas(document: dict, schemas: dict, live: set[str], sweep_cycles: bool) -> list[str]:
    collector = ReferenceCollector(document)
    candidates = [name for name in schemas if name not in live]
    deleted: list[str] = []

    progress = True
    passes = 0
    while progress and candidates:
        progress = False
        passes += 1
        for name in list(candidates):
            if name not in schemas:
                candidates.remove(name)
                continue

            refs: set[str] = set()
            collector.schema_refs(schemas[name], refs)
            if all(ref not in candidates or ref not in schemas for ref in refs):
                del schemas[name]
                candidates.remove(name)
                deleted.append(name)
                progress = True
        logger.debug("Sweep pass %d: %d candidates left", passes, len(candidates))

    if candidates:
        if sweep_cycles:
            logger.info("Removing unreferenced schema cycle members: %s", ", ".join(candidates))
            for name in candidates:
                del schemas[name]
                deleted.append(name)
        else:
            logger.info("Leaving cyclic unreferenced schemas in place: %s", ", ".join(candidates))

    return deleted
