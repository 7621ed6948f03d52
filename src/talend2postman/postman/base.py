"""Postman Collection v2.1 models produced by the converter.

Field names follow Python style; aliases carry the wire names. Dump with
``to_json_dict()`` to get the exact Postman document, optional fields omitted.
"""

from pydantic import BaseModel, ConfigDict, Field

SCHEMA_V2_1 = "https://schema.getpostman.com/json/collection/v2.1.0/collection.json"
EXPORTER_ID = "talend2postman"


class PostmanModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class KeyValue(PostmanModel):
    """A header or urlencoded field."""

    key: str
    value: str
    type: str | None = None


class FormParam(PostmanModel):
    key: str
    value: str
    type: str = "text"  # text / file


class RawOptions(PostmanModel):
    language: str  # json / text


class BodyOptions(PostmanModel):
    raw: RawOptions


class Body(PostmanModel):
    mode: str = "raw"  # raw / urlencoded / formdata
    raw: str = ""
    urlencoded: list[KeyValue] | None = None
    formdata: list[FormParam] | None = None
    options: BodyOptions | None = None


class Url(PostmanModel):
    raw: str
    protocol: str
    host: list[str]
    path: list[str]
    port: str | None = None


class Request(PostmanModel):
    method: str
    header: list[KeyValue]
    body: Body
    url: Url


class RequestItem(PostmanModel):
    name: str
    request: Request
    response: list[dict] = []


class Folder(PostmanModel):
    name: str
    item: list[RequestItem] = []


class Info(PostmanModel):
    postman_id: str = Field(alias="_postman_id")
    name: str
    schema_url: str = Field(default=SCHEMA_V2_1, alias="schema")
    exporter_id: str = Field(default=EXPORTER_ID, alias="_exporter_id")


class Collection(PostmanModel):
    info: Info
    item: list[Folder] = []
