"""Enumerating and searching the operations of a document."""

from collections.abc import Iterator

from openapi_editor.config import HTTP_METHODS
from openapi_editor.document.models import OperationInfo


def iter_operations(document: dict, methods=HTTP_METHODS) -> Iterator[tuple[str, str, dict]]:
    """Yield (path, method, operation) in path order, then method order."""
    paths = document.get("paths")
    if not isinstance(paths, dict):
        return
    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue
        for method in methods:
            operation = path_item.get(method)
            if isinstance(operation, dict):
                yield path, method, operation


def list_operations(document: dict, methods=HTTP_METHODS) -> list[OperationInfo]:
    """List operations that carry an operationId (the ones that can be deleted)."""
    result = []
    for path, method, operation in iter_operations(document, methods):
        operation_id = operation.get("operationId")
        if not operation_id:
            continue
        result.append(
            OperationInfo(
                operation_id=str(operation_id),
                method=method.upper(),
                path=path,
                summary=operation.get("summary") or "",
                tags=[str(t) for t in operation.get("tags") or []],
            )
        )
    return result


def filter_operations(operations: list[OperationInfo], term: str | None) -> list[OperationInfo]:
    """Keep operations whose id, path, method or summary contains `term` (case-insensitive)."""
    if not term:
        return list(operations)
    needle = term.lower()
    return [
        op for op in operations
        if needle in op.operation_id.lower()
        or needle in op.path.lower()
        or needle in op.method.lower()
        or needle in op.summary.lower()
    ]
