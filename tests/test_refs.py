from openapi_editor.editor.refs import ReferenceCollector, ref_name


def _ref(name: str) -> dict:
    return {"$ref": f"#/components/schemas/{name}"}


def _collector(schemas: dict | None = None, **pools) -> ReferenceCollector:
    components = {"schemas": schemas or {}}
    components.update(pools)
    return ReferenceCollector({"openapi": "3.0.0", "paths": {}, "components": components})


class TestRefName:
    def test_takes_last_segment(self):
        assert ref_name("#/components/schemas/Pet") == "Pet"

    def test_plain_name(self):
        assert ref_name("Pet") == "Pet"


class TestSchemaRefs:
    def test_direct_reference(self):
        refs = set()
        _collector({"Pet": {"type": "object"}}).schema_refs(_ref("Pet"), refs)
        assert refs == {"Pet"}

    def test_follows_references_transitively(self):
        schemas = {
            "A": {"type": "object", "properties": {"b": _ref("B")}},
            "B": {"type": "array", "items": _ref("C")},
            "C": {"type": "string"},
        }
        refs = set()
        _collector(schemas).schema_refs(_ref("A"), refs)
        assert refs == {"A", "B", "C"}

    def test_walks_items_properties_and_combinators(self):
        schema = {
            "type": "object",
            "properties": {
                "list": {"type": "array", "items": _ref("Item")},
                "union": {"oneOf": [_ref("Cat"), _ref("Dog")]},
                "either": {"anyOf": [{"type": "string"}, _ref("Code")]},
                "merged": {"allOf": [_ref("Base")]},
                "negated": {"not": _ref("Forbidden")},
            },
        }
        refs = set()
        _collector().schema_refs(schema, refs)
        assert refs == {"Item", "Cat", "Dog", "Code", "Base", "Forbidden"}

    def test_additional_properties_schema(self):
        refs = set()
        _collector().schema_refs({"type": "object", "additionalProperties": _ref("Value")}, refs)
        assert refs == {"Value"}

    def test_additional_properties_boolean_is_skipped(self):
        refs = set()
        _collector().schema_refs({"type": "object", "additionalProperties": True}, refs)
        assert refs == set()

    def test_reference_cycle_terminates(self):
        schemas = {
            "P": {"type": "object", "properties": {"q": _ref("Q")}},
            "Q": {"type": "object", "properties": {"p": _ref("P")}},
        }
        refs = set()
        _collector(schemas).schema_refs(_ref("P"), refs)
        assert refs == {"P", "Q"}

    def test_self_reference_terminates(self):
        schemas = {"Node": {"type": "object", "properties": {"children": {"type": "array", "items": _ref("Node")}}}}
        refs = set()
        _collector(schemas).schema_refs(schemas["Node"], refs)
        assert refs == {"Node"}

    def test_dangling_reference_is_recorded(self):
        refs = set()
        _collector().schema_refs(_ref("Missing"), refs)
        assert refs == {"Missing"}

    def test_malformed_nodes_are_skipped(self):
        refs = set()
        collector = _collector()
        collector.schema_refs(None, refs)
        collector.schema_refs("string", refs)
        collector.schema_refs({"properties": ["not", "a", "mapping"], "allOf": "nope", "items": 3}, refs)
        assert refs == set()

    def test_accumulator_keeps_existing_names(self):
        refs = {"Existing"}
        _collector({"Pet": {}}).schema_refs(_ref("Pet"), refs)
        assert refs == {"Existing", "Pet"}


class TestOperationRefs:
    def test_parameters_body_and_responses(self):
        operation = {
            "operationId": "op",
            "parameters": [{"name": "id", "in": "path", "schema": _ref("Id")}],
            "requestBody": {"content": {"application/json": {"schema": _ref("Input")}}},
            "responses": {
                "200": {"description": "ok", "content": {"application/json": {"schema": _ref("Output")}}},
                "204": {"description": "no content"},
            },
        }
        refs = set()
        _collector().operation_refs(operation, refs)
        assert refs == {"Id", "Input", "Output"}

    def test_pooled_entries_are_recorded_and_expanded(self):
        collector = _collector(
            {},
            parameters={"Limit": {"name": "limit", "in": "query", "schema": _ref("LimitValue")}},
            requestBodies={"Body": {"content": {"application/json": {"schema": _ref("Input")}}}},
            responses={"Error": {"description": "err", "content": {"application/json": {"schema": _ref("Problem")}}}},
        )
        operation = {
            "parameters": [{"$ref": "#/components/parameters/Limit"}],
            "requestBody": {"$ref": "#/components/requestBodies/Body"},
            "responses": {"default": {"$ref": "#/components/responses/Error"}},
        }
        refs = set()
        collector.operation_refs(operation, refs)
        assert refs == {"Limit", "LimitValue", "Body", "Input", "Error", "Problem"}

    def test_missing_sections_collect_nothing(self):
        refs = set()
        collector = _collector()
        collector.operation_refs({"operationId": "bare"}, refs)
        collector.operation_refs({"responses": {"200": {"description": "ok", "content": None}}}, refs)
        collector.operation_refs(None, refs)
        assert refs == set()


class TestPoolRefs:
    def test_walks_reusable_pools(self):
        collector = _collector(
            {},
            parameters={"P": {"name": "p", "in": "query", "schema": _ref("FromParam")}},
            requestBodies={"B": {"content": {"application/json": {"schema": _ref("FromBody")}}}},
            responses={"R": {"description": "r", "content": {"application/json": {"schema": _ref("FromResponse")}}}},
        )
        refs = set()
        collector.pool_refs(refs)
        assert refs == {"FromParam", "FromBody", "FromResponse"}

    def test_document_without_components(self):
        refs = set()
        ReferenceCollector({"openapi": "3.0.0", "paths": {}}).pool_refs(refs)
        assert refs == set()
