"""OpenApiEditor: reference-aware deletion of operations.

Removing an operation also removes every component that nothing else uses
any more and every tag that only the removed operation carried.
"""

import logging
from collections.abc import Iterable

from openapi_editor.config import EditorConfig
from openapi_editor.document.models import DeletionSummary, OperationInfo
from openapi_editor.document.operations import iter_operations, list_operations
from openapi_editor.editor.liveness import live_references
from openapi_editor.editor.refs import ReferenceCollector
from openapi_editor.editor.sweep import sweep_components
from openapi_editor.editor.tags import prune_tags

logger = logging.getLogger(__name__)


class OpenApiEditor:
    """Owns one parsed OpenAPI document and edits it in place.

    Example:
        editor = OpenApiEditor(yaml.safe_load(text))
        if editor.delete_function("deletePet"):
            text = dump_document(editor.get_document(), "yaml")
    """

    def __init__(self, document: dict, config: EditorConfig | None = None):
        self.document = document
        self.config = config or EditorConfig()
        self._last_removed_components: dict[str, list[str]] = {}
        self._last_removed_tags: list[str] = []

    def delete_function(self, operation_id: str) -> bool:
        """Delete the first operation with `operation_id`, then clean up.

        Returns False, leaving the document untouched, when no operation
        matches.
        """
        self._last_removed_components = {}
        self._last_removed_tags = []

        located = self._remove_operation(operation_id)
        if located is None:
            logger.debug("No operation with operationId %r", operation_id)
            return False
        tags, refs = located
        logger.debug("Operation %r referenced: %s", operation_id, sorted(refs))

        live = live_references(self.document, self.config.methods)
        self._last_removed_components = sweep_components(
            self.document, live, sweep_cycles=self.config.sweep_cycles
        )
        self._last_removed_tags = prune_tags(self.document, tags, self.config.methods)
        return True

    def delete_functions(self, operation_ids: Iterable[str]) -> DeletionSummary:
        """Delete several operations one at a time and report what went away."""
        summary = DeletionSummary()
        for operation_id in operation_ids:
            if not self.delete_function(operation_id):
                summary.missing.append(operation_id)
                continue
            summary.deleted.append(operation_id)
            for kind, names in self._last_removed_components.items():
                summary.removed_components.setdefault(kind, []).extend(names)
            summary.removed_tags.extend(self._last_removed_tags)
        return summary

    def get_document(self) -> dict:
        """Return the edited document itself (not a copy)."""
        return self.document

    def list_operations(self) -> list[OperationInfo]:
        return list_operations(self.document, self.config.methods)

    def _remove_operation(self, operation_id: str) -> tuple[set[str], set[str]] | None:
        """Remove the first matching operation; return its (tags, references)."""
        for path, method, operation in iter_operations(self.document, self.config.methods):
            if operation.get("operationId") != operation_id:
                continue

            tags = set(operation.get("tags") or [])
            refs: set[str] = set()
            ReferenceCollector(self.document).operation_refs(operation, refs)

            path_item = self.document["paths"][path]
            del path_item[method]
            if not any(m in path_item for m in self.config.methods):
                del self.document["paths"][path]
                logger.info("Removed %s %s (%s) and its now empty path", method.upper(), path, operation_id)
            else:
                logger.info("Removed %s %s (%s)", method.upper(), path, operation_id)
            return tags, refs
        return None
