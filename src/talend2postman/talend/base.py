"""Data models for Talend API Tester exports.

An export is a tree of entity nodes (Project -> Service -> Request).
Every field is optional so that partially-populated exports still load;
missing values are resolved by the mapper, never rejected here.
A field that fails validation is reset to None; in a list field only the
failing elements are dropped.
"""

import logging
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

logger = logging.getLogger(__name__)


class TalendModel(BaseModel):
    """Lenient base: unknown keys ignored, numbers accepted where text is expected."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @field_validator("*", mode="wrap")
    @classmethod
    def default_on_error(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            if not isinstance(value, list) or not _is_list_field(handler):
                logger.debug("%s.%s: unusable value, defaulting", cls.__name__, info.field_name)
                return None

        kept = []
        for item in value:
            try:
                kept.extend(handler([item]))
            except ValidationError:
                logger.debug("%s.%s: dropping unusable element", cls.__name__, info.field_name)
        return kept


def _is_list_field(handler: ValidatorFunctionWrapHandler) -> bool:
    try:
        handler([])
    except ValidationError:
        return False
    return True


class Method(TalendModel):
    name: str | None = None


class Scheme(TalendModel):
    name: str | None = None


class Uri(TalendModel):
    scheme: Scheme | None = None
    host: str | None = None
    path: str | None = None


class Header(TalendModel):
    name: str | None = None
    value: str | None = None
    enabled: bool | None = None


class FormItem(TalendModel):
    name: str | None = None
    value: str | None = None
    type: str | None = None  # "file" marks a file field


class FormBody(TalendModel):
    encoding: str | None = None
    items: list[FormItem] | None = None


class Body(TalendModel):
    textBody: str | None = None
    formBody: FormBody | None = None


class Entity(TalendModel):
    """A single node payload. Only Request entities use the request fields."""

    type: str | None = None  # Project / Service / Request / ...
    id: Any = None
    name: str | None = None
    method: Method | None = None
    headers: list[Header] | None = None
    uri: Uri | None = None
    body: Body | None = None


class EntityNode(TalendModel):
    entity: Entity | None = None
    children: list["EntityNode"] | None = None


class Document(TalendModel):
    """Root of an export file."""

    entities: list[EntityNode] | None = None
