"""Decode catalog XML responses into series and episode models."""

from typing import Optional, TypeVar

from lxml import etree
from pydantic import ValidationError

from tvdb_catalog.core.errors import MalformedDocument
from tvdb_catalog.models import CatalogRecord, Episode, EpisodeList, Series, SeriesList

RecordT = TypeVar("RecordT", bound=CatalogRecord)

SERIES_TAG = "Series"
EPISODE_TAG = "Episode"


def _parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)


def _parse(data: bytes, shape: str) -> etree._Element:
    """Parse a response body, mapping syntax errors to MalformedDocument."""
    try:
        root = etree.fromstring(data, parser=_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        raise MalformedDocument(f"Response is not well-formed XML: {e}", shape=shape) from e
    return root


def _element_text(element: etree._Element) -> str:
    """Character data directly inside an element, nested markup excluded."""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def _collect_fields(element: etree._Element, tags: dict[str, str]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for child in element:
        # Comments and processing instructions have a non-string tag
        if isinstance(child.tag, str) and child.tag in tags:
            fields[child.tag] = _element_text(child)
    return fields


def _decode_record(element: etree._Element, model: type[RecordT], shape: str) -> RecordT:
    try:
        return model.model_validate(_collect_fields(element, model.xml_tags()))
    except ValidationError as e:
        raise MalformedDocument(f"Invalid {element.tag} record: {e}", shape=shape) from e


def _decode_children(data: bytes, tag: str, model: type[RecordT], shape: str) -> list[RecordT]:
    root = _parse(data, shape)
    return [_decode_record(child, model, shape) for child in root if child.tag == tag]


def decode_series_list(data: bytes) -> SeriesList:
    """
    Decode every top-level <Series> record of a response.

    Args:
        data: Raw response body

    Returns:
        SeriesList in document order, empty when no record is present

    Raises:
        MalformedDocument: If the body is not well-formed XML or a field
            fails conversion
    """
    return SeriesList(series=_decode_children(data, SERIES_TAG, Series, "series-list"))


def decode_episode_list(data: bytes) -> EpisodeList:
    """
    Decode every top-level <Episode> record of a response.

    Args:
        data: Raw response body

    Returns:
        EpisodeList in document order

    Raises:
        MalformedDocument: If the body is not well-formed XML or a field
            fails conversion
    """
    return EpisodeList(episodes=_decode_children(data, EPISODE_TAG, Episode, "episode-list"))


def _find_series_element(root: etree._Element) -> Optional[etree._Element]:
    if root.tag == SERIES_TAG:
        return root
    return root.find(SERIES_TAG)


def decode_series_into(data: bytes, series: Series) -> Series:
    """
    Decode a single series record over an existing Series in place.

    Only fields whose tags appear in the record are overwritten. Fields
    missing from the document and the attached seasons are left alone.

    Args:
        data: Raw response body
        series: Series to update

    Returns:
        The same Series instance

    Raises:
        MalformedDocument: If the body is not well-formed XML or a field
            fails conversion
    """
    shape = "series"
    element = _find_series_element(_parse(data, shape))
    if element is None:
        return series

    decoded = _decode_record(element, Series, shape)
    for name in decoded.model_fields_set:
        setattr(series, name, getattr(decoded, name))
    return series
