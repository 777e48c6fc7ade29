"""
JSON/XML content negotiation for the contact endpoints.

Request bodies are parsed according to their ``Content-Type`` and
responses are rendered according to the request's ``Accept`` header;
JSON is used whenever the client expresses no preference.  XML
documents are flat: one child element per field, wrapped in a root
element named after the model (``<Contact>``, ``<Address>``), and a
list is rendered as ``<List><item>...</item></List>``.
"""

import json
import re
import xml.etree.ElementTree as ET
from typing import Any, Dict, Optional, Type, TypeVar

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from contact_directory_api.app.core.exceptions import BadResourceException
from contact_directory_api.app.services.validation import Violation


JSON_MEDIA_TYPE = "application/json"
XML_MEDIA_TYPE = "application/xml"
_XML_TYPES = {"application/xml", "text/xml"}

ModelT = TypeVar("ModelT", bound=BaseModel)

# Characters XML 1.0 does not allow in a document, including lone surrogates.
_XML_ILLEGAL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def preferred_media_type(accept: Optional[str]) -> str:
    """Pick JSON or XML from an ``Accept`` header, honouring q-values."""
    if not accept:
        return JSON_MEDIA_TYPE
    candidates = []
    for position, part in enumerate(accept.split(",")):
        media_type, _, params = part.strip().partition(";")
        quality = 1.0
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality <= 0:
            continue
        candidates.append((-quality, position, media_type.strip().lower()))
    for _, _, media_type in sorted(candidates):
        if media_type in _XML_TYPES:
            return XML_MEDIA_TYPE
        if media_type in {JSON_MEDIA_TYPE, "application/*", "*/*"}:
            return JSON_MEDIA_TYPE
    return JSON_MEDIA_TYPE


def _is_xml(content_type: Optional[str]) -> bool:
    return (content_type or "").split(";")[0].strip().lower() in _XML_TYPES


def _xml_to_dict(body: bytes) -> Dict[str, Any]:
    root = ET.fromstring(body)
    return {child.tag: child.text for child in root}


async def read_body(request: Request) -> Dict[str, Any]:
    """Parse the request body into a dict of field values.

    Raises ``BadResourceException`` if the body is empty, cannot be
    parsed or is not an object.
    """
    body = await request.body()
    if not body.strip():
        raise BadResourceException("Request body must not be empty")
    try:
        if _is_xml(request.headers.get("content-type")):
            payload = _xml_to_dict(body)
        else:
            payload = json.loads(body)
    except (ET.ParseError, ValueError) as exc:
        raise BadResourceException(f"Malformed request body: {exc}") from exc
    if not isinstance(payload, dict):
        raise BadResourceException("Request body must be an object")
    return payload


def parse_model(model: Type[ModelT], payload: Dict[str, Any]) -> ModelT:
    """Build ``model`` from ``payload``, reporting type errors as ``BadResourceException``."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        violations = [
            Violation(".".join(str(loc) for loc in error["loc"]) or model.__name__, error["msg"])
            for error in exc.errors()
        ]
        details = "; ".join(str(v) for v in violations)
        raise BadResourceException(f"Invalid {model.__name__}: {details}", violations) from exc


def _dict_to_xml(parent: ET.Element, data: Dict[str, Any]) -> None:
    for key, value in data.items():
        element = ET.SubElement(parent, key)
        if value is not None:
            element.text = _XML_ILLEGAL.sub("", str(value))


def to_xml(payload: Any, root: str) -> str:
    """Serialize a dict (or a list of dicts) to an XML document string.

    Characters that cannot appear in an XML 1.0 document are dropped
    from the values; the JSON rendering keeps them.
    """
    if isinstance(payload, list):
        element = ET.Element("List")
        for item in payload:
            _dict_to_xml(ET.SubElement(element, "item"), item)
    else:
        element = ET.Element(root)
        _dict_to_xml(element, payload)
    return ET.tostring(element, encoding="unicode")


def render(
    request: Request,
    payload: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
    root: str = "Contact",
) -> Response:
    """Render ``payload`` in the media type the client prefers."""
    if preferred_media_type(request.headers.get("accept")) == XML_MEDIA_TYPE:
        return Response(
            content=to_xml(payload, root),
            status_code=status_code,
            headers=headers,
            media_type=XML_MEDIA_TYPE,
        )
    return JSONResponse(content=payload, status_code=status_code, headers=headers)


def dump(models: Any) -> Any:
    """Convert a model or a list of models to wire-format dicts."""
    if isinstance(models, list):
        return [model.model_dump(by_alias=True) for model in models]
    return models.model_dump(by_alias=True)

