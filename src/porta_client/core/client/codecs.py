"""
Response codecs for the admin portal wire formats.

Most endpoints answer with JSON; the legacy create endpoint answers with an
XML document using the same field names. Each client operation picks one
codec, and the codec turns the raw body into a validated pydantic model.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Type, TypeVar

from lxml import etree
from pydantic import BaseModel, ValidationError

from .errors import DecodeError

M = TypeVar("M", bound=BaseModel)


class ResponseCodec(ABC):
    """Decodes a successful response body into a model."""

    media_type: str = ""

    @abstractmethod
    def decode(self, body: bytes, model: Type[M]) -> M:
        """Decode ``body`` into an instance of ``model``.

        Raises:
            DecodeError: If the body is malformed or does not match the model.
        """
        pass

    def _validation_failed(self, body: bytes, model: Type[BaseModel], error: Exception) -> DecodeError:
        text = body.decode("utf-8", errors="replace")
        return DecodeError(
            f"Could not decode {self.media_type} body into {model.__name__}: {error}",
            body=text,
            original_error=error
        )


class JsonCodec(ResponseCodec):
    """Codec for ``application/json`` bodies."""

    media_type = "application/json"

    def decode(self, body: bytes, model: Type[M]) -> M:
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise self._validation_failed(body, model, e) from e


class XmlCodec(ResponseCodec):
    """
    Codec for ``application/xml`` bodies.

    The document is flattened into the same dict shape the JSON endpoints
    produce, keyed by the root tag, so both codecs share one set of models:

        <application><id>1</id><plan><id>2</id></plan></application>
        -> {"application": {"id": "1", "plan": {"id": "2"}}}
    """

    media_type = "application/xml"

    def decode(self, body: bytes, model: Type[M]) -> M:
        try:
            # Parsers are not shared between threads
            parser = etree.XMLParser(resolve_entities=False, no_network=True)
            root = etree.fromstring(body, parser=parser)
        except etree.XMLSyntaxError as e:
            raise self._validation_failed(body, model, e) from e

        data = {root.tag: element_to_dict(root)}
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise self._validation_failed(body, model, e) from e


def element_to_dict(element: Any) -> Dict[str, Any]:
    """Convert the children of an XML element into a dict.

    Leaves become their stripped text, elements with children become nested
    dicts. Empty leaves are left out so model defaults apply. Repeated
    siblings are collected into a list in document order.
    """
    result: Dict[str, Any] = {}
    for child in element:
        # Skip comments and processing instructions
        if not isinstance(child.tag, str):
            continue
        if len(child):
            value: Any = element_to_dict(child)
        else:
            value = (child.text or "").strip()
            if not value:
                continue
        if child.tag not in result:
            result[child.tag] = value
        elif isinstance(result[child.tag], list):
            result[child.tag].append(value)
        else:
            result[child.tag] = [result[child.tag], value]
    return result


JSON_CODEC = JsonCodec()
XML_CODEC = XmlCodec()
