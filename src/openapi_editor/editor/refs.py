"""Reference collector for OpenAPI documents.

Walks schemas, parameters, request bodies and responses and gathers the
names of the shared components they reference, following references into
the component pool transitively.
"""

import logging

logger = logging.getLogger(__name__)

COMBINATORS = ("allOf", "oneOf", "anyOf")


def ref_name(ref: str) -> str:
    """Return the component name of a `$ref` string (its last path segment)."""
    return ref.rsplit("/", 1)[-1]


def _ref_of(node) -> str | None:
    if isinstance(node, dict) and isinstance(node.get("$ref"), str):
        return ref_name(node["$ref"])
    return None


class ReferenceCollector:
    """Collects referenced component names from one document."""

    def __init__(self, document: dict):
        self.document = document

    def _pool(self, kind: str) -> dict:
        components = self.document.get("components")
        if not isinstance(components, dict):
            return {}
        pool = components.get(kind)
        return pool if isinstance(pool, dict) else {}

    def schema_refs(self, schema, refs: set[str], visited: set[str] | None = None) -> None:
        """Add every reference name reachable from `schema` to `refs`.

        Each referenced schema is expanded at most once per call, so reference
        cycles terminate. Names that do not resolve are still recorded.
        """
        if not isinstance(schema, dict):
            return
        if visited is None:
            visited = set()

        name = _ref_of(schema)
        if name is not None:
            refs.add(name)
            if name not in visited:
                visited.add(name)
                target = self._pool("schemas").get(name)
                if target is not None:
                    self.schema_refs(target, refs, visited)
            return

        self.schema_refs(schema.get("items"), refs, visited)

        properties = schema.get("properties")
        if isinstance(properties, dict):
            for prop in properties.values():
                self.schema_refs(prop, refs, visited)

        self.schema_refs(schema.get("additionalProperties"), refs, visited)

        for combinator in COMBINATORS:
            subschemas = schema.get(combinator)
            if isinstance(subschemas, list):
                for sub in subschemas:
                    self.schema_refs(sub, refs, visited)

        self.schema_refs(schema.get("not"), refs, visited)

    def content_refs(self, content, refs: set[str]) -> None:
        """Collect from every media type's schema in a `content` mapping."""
        if not isinstance(content, dict):
            return
        for media in content.values():
            if isinstance(media, dict):
                self.schema_refs(media.get("schema"), refs)

    def _pooled(self, entry, kind: str, refs: set[str]):
        """Resolve a `$ref` entry against the `kind` pool.

        Returns the inline definition to walk, or None when there is nothing
        further to collect.
        """
        visited: set[str] = set()
        while True:
            name = _ref_of(entry)
            if name is None:
                return entry if isinstance(entry, dict) else None
            refs.add(name)
            if name in visited:
                return None
            visited.add(name)
            entry = self._pool(kind).get(name)

    def parameter_refs(self, parameter, refs: set[str]) -> None:
        parameter = self._pooled(parameter, "parameters", refs)
        if parameter is None:
            return
        self.schema_refs(parameter.get("schema"), refs)
        self.content_refs(parameter.get("content"), refs)

    def request_body_refs(self, body, refs: set[str]) -> None:
        body = self._pooled(body, "requestBodies", refs)
        if body is None:
            return
        self.content_refs(body.get("content"), refs)

    def response_refs(self, response, refs: set[str]) -> None:
        response = self._pooled(response, "responses", refs)
        if response is None:
            return
        self.content_refs(response.get("content"), refs)

    def parameters_refs(self, parameters, refs: set[str]) -> None:
        if isinstance(parameters, list):
            for parameter in parameters:
                self.parameter_refs(parameter, refs)

    def operation_refs(self, operation, refs: set[str]) -> None:
        """Collect every name used by an operation's parameters, body and responses."""
        if not isinstance(operation, dict):
            return
        self.parameters_refs(operation.get("parameters"), refs)
        self.request_body_refs(operation.get("requestBody"), refs)

        responses = operation.get("responses")
        if isinstance(responses, dict):
            for response in responses.values():
                self.response_refs(response, refs)

    def path_item_refs(self, path_item, refs: set[str], methods) -> None:
        """Collect from path-level parameters and each operation in `methods`."""
        if not isinstance(path_item, dict):
            return
        self.parameters_refs(path_item.get("parameters"), refs)
        for method in methods:
            self.operation_refs(path_item.get(method), refs)

    def pool_refs(self, refs: set[str]) -> None:
        """Collect from the reusable parameters, request bodies and responses."""
        for parameter in self._pool("parameters").values():
            self.parameter_refs(parameter, refs)
        for body in self._pool("requestBodies").values():
            self.request_body_refs(body, refs)
        for response in self._pool("responses").values():
            self.response_refs(response, refs)
