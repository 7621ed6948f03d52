"""Talend -> Postman mapping.

Converts the Project -> Service -> Request tree of a Talend export into
Postman collections. Every function here is total: missing or null input
fields fall back to defaults and unexpected node types are skipped.
"""

import logging
import re
import uuid

from talend2postman.talend.base import Body as TalendBody
from talend2postman.talend.base import Document, Entity, EntityNode, Uri

from .base import (
    Body,
    BodyOptions,
    Collection,
    Folder,
    FormParam,
    Info,
    KeyValue,
    RawOptions,
    Request,
    RequestItem,
    Url,
)

logger = logging.getLogger(__name__)

URLENCODED_RE = re.compile(r"x-www-form-urlencoded", re.IGNORECASE)
MULTIPART_RE = re.compile(r"multipart/form-data", re.IGNORECASE)


def convert_document(document: Document) -> list[Collection]:
    """Map every top-level Project node to a collection, in input order."""
    nodes = document.entities or []
    collections = [
        project_to_collection(node) for node in nodes if _node_type(node) == "Project"
    ]
    logger.debug(
        "Converted %d of %d top-level entities into collections",
        len(collections),
        len(nodes),
    )
    return collections


def project_to_collection(project_node: EntityNode) -> Collection:
    """Project node -> Collection with one folder per Service child."""
    name = _entity_name(project_node) or "Unnamed Project"
    folders = [
        service_to_folder(child)
        for child in _children(project_node)
        if _node_type(child) == "Service"
    ]
    logger.debug("Project %r: %d folders", name, len(folders))
    return Collection(
        info=Info(postman_id=str(uuid.uuid4()), name=name),
        item=folders,
    )


def service_to_folder(service_node: EntityNode) -> Folder:
    """Service node -> Folder with one item per Request child."""
    name = _entity_name(service_node) or "Unnamed Service"
    items = []
    for child in _children(service_node):
        if _node_type(child) == "Request":
            items.append(request_to_item(child.entity))
        else:
            logger.debug("Service %r: skipping %s node", name, _node_type(child))
    return Folder(name=name, item=items)


def request_to_item(entity: Entity) -> RequestItem:
    """Request entity -> Postman request item."""
    method = (entity.method.name if entity.method else None) or "GET"
    headers = [
        KeyValue(key=h.name or "", value=h.value or "")
        for h in entity.headers or []
        if h.enabled
    ]
    content_type = _content_type(headers)

    return RequestItem(
        name=entity.name or f"Request {entity.id}",
        request=Request(
            method=method,
            header=headers,
            body=build_body(entity.body, content_type),
            url=build_url(entity.uri),
        ),
    )


def build_url(uri: Uri | None) -> Url:
    """Rebuild a Postman URL from Talend's scheme/host/path triple.

    ``raw`` keeps the host exactly as given (port included) while the
    ``host`` array holds the port-less part and ``port`` is split out.
    """
    scheme_name = uri.scheme.name if uri and uri.scheme else None
    scheme = (scheme_name or "http").replace(":", "", 1)
    host = (uri.host if uri else None) or "localhost"
    trimmed_path = re.sub(r"^/+", "", (uri.path if uri else None) or "")

    raw = f"{scheme}://{host}"
    if trimmed_path:
        raw += f"/{trimmed_path}"

    host_parts = host.split(":")
    port = host_parts[1] if len(host_parts) > 1 else ""

    return Url(
        raw=raw,
        protocol=scheme,
        host=[host_parts[0]],
        path=trimmed_path.split("/") if trimmed_path else [],
        port=port or None,
    )


def build_body(body: TalendBody | None, content_type: str) -> Body:
    """Pick the Postman body mode.

    Form items win over the text body; their encoding selects urlencoded
    or formdata. Without form items the text body is sent raw, tagged as
    json when the Content-Type says so.
    """
    text_body = (body.textBody if body else None) or ""
    form_body = body.formBody if body else None
    form_items = (form_body.items if form_body else None) or []

    if form_items:
        encoding = form_body.encoding or ""
        if URLENCODED_RE.search(encoding):
            return Body(
                mode="urlencoded",
                urlencoded=[
                    KeyValue(key=fi.name or "", value=fi.value or "", type="text")
                    for fi in form_items
                ],
            )
        if MULTIPART_RE.search(encoding):
            return Body(
                mode="formdata",
                formdata=[
                    FormParam(
                        key=fi.name or "",
                        value=fi.value or "",
                        type="file" if fi.type == "file" else "text",
                    )
                    for fi in form_items
                ],
            )
        return Body(raw=text_body, options=_raw_language("text"))

    if "application/json" in content_type:
        return Body(raw=text_body, options=_raw_language("json"))
    if text_body:
        return Body(raw=text_body, options=_raw_language("text"))
    return Body()


def _content_type(headers: list[KeyValue]) -> str:
    for h in headers:
        if h.key.lower() == "content-type":
            return h.value.lower()
    return ""


def _raw_language(language: str) -> BodyOptions:
    return BodyOptions(raw=RawOptions(language=language))


def _node_type(node: EntityNode) -> str | None:
    return node.entity.type if node.entity else None


def _entity_name(node: EntityNode) -> str | None:
    return node.entity.name if node.entity else None


def _children(node: EntityNode) -> list[EntityNode]:
    return node.children or []
