from talend2postman.talend.base import Document, Entity, Header
from talend2postman.postman.base import (
    Body,
    Collection,
    Info,
    SCHEMA_V2_1,
    Url,
)


class TestTalendModels:
    def test_minimal_entity_defaults(self):
        entity = Entity.model_validate({"type": "Request"})
        assert entity.name is None
        assert entity.method is None
        assert entity.headers is None
        assert entity.uri is None
        assert entity.name is None
        assert entity.body is None

    def test_unknown_keys_ignored(self):
        entity = Entity.model_validate({
            "type": "Request",
            "id": "r-1",
            "assertions": [],
            "method": {"link": "http://tools.ietf.org", "name": "PUT"},
        })
        assert entity.method.name == "PUT"
        assert not hasattr(entity, "assertions")

    def test_numbers_coerced_to_text(self):
        header = Header.model_validate({"name": "X-Retry", "value": 3, "enabled": True})
        assert header.value == "3"

    def test_nested_children(self):
        doc = Document.model_validate({
            "entities": [
                {
                    "entity": {"type": "Project", "name": "P"},
                    "children": [{"entity": {"type": "Service", "name": "S"}}],
                }
            ]
        })
        project = doc.entities[0]
        assert project.children[0].entity.name == "S"
        assert project.children[0].children is None

    def test_empty_document(self):
        assert Document.model_validate({}).entities is None

    def test_malformed_field_defaults_to_none(self):
        entity = Entity.model_validate({"type": "Environment", "headers": {"k": "v"}, "uri": 42, "name": ["x"]})
        assert entity.type == "Environment"
        assert entity.headers is None
        assert entity.uri is None
        assert entity.name is None

    def test_malformed_list_elements_dropped(self):
        entity = Entity.model_validate({
            "type": "Request",
            "headers": ["Accept: */*", {"name": "A", "value": "1", "enabled": True}],
        })
        assert [h.name for h in entity.headers] == ["A"]

    def test_malformed_child_node_keeps_siblings(self):
        doc = Document.model_validate({"entities": ["junk", {"entity": {"type": "Project", "name": "P"}}]})
        assert [n.entity.name for n in doc.entities] == ["P"]

    def test_malformed_nested_field_defaults(self):
        header = Header.model_validate({"name": {"x": 1}, "value": "v", "enabled": True})
        assert header.name is None
        assert header.value == "v"


class TestPostmanModels:
    def test_info_uses_wire_names(self):
        info = Info(postman_id="abc", name="P")
        assert info.to_json_dict() == {
            "_postman_id": "abc",
            "name": "P",
            "schema": SCHEMA_V2_1,
            "_exporter_id": "talend2postman",
        }

    def test_info_key_order(self):
        info = Info(postman_id="abc", name="P")
        assert list(info.to_json_dict()) == ["_postman_id", "name", "schema", "_exporter_id"]

    def test_url_without_port_omits_key(self):
        url = Url(raw="http://localhost", protocol="http", host=["localhost"], path=[])
        assert "port" not in url.to_json_dict()

    def test_default_body_is_empty_raw(self):
        assert Body().to_json_dict() == {"mode": "raw", "raw": ""}

    def test_empty_collection(self):
        data = Collection(info=Info(postman_id="abc", name="P")).to_json_dict()
        assert data["item"] == []
