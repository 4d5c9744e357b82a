"""Read packaging hints from Maven POM files using lxml.

A path alone cannot tell a `maven-plugin` jar from a plain `jar`; the POM that
sits next to the artifact can.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from artifact_layout.exceptions import PomReadError
from artifact_layout.extensions import ExtensionTypeTable
from artifact_layout.models import ArtifactCoordinate


logger = logging.getLogger(__name__)

_PACKAGING_XPATH = "/*[local-name()='project']/*[local-name()='packaging']"


def _text_first(node: etree._Element, xpath_expr: str) -> str | None:
    """Get text of the first matching element using namespace-agnostic XPath.

    Args:
        node: Root element to query under.
        xpath_expr: XPath expression (should use local-name()).

    Returns:
        Text content if found and non-empty, otherwise None.
    """
    found = node.xpath(xpath_expr)
    if not found:
        return None
    first = found[0]
    if isinstance(first, etree._Element):
        text = (first.text or "").strip()
        return text or None
    return None


def _parse_xml(path: Path) -> etree._Element:
    """Parse an XML file and return its root element.

    Raises:
        PomReadError: If the file is missing or cannot be parsed.
    """
    if not path.exists():
        raise PomReadError(f"POM not found: {path}")
    try:
        parser = etree.XMLParser(resolve_entities=False, no_network=True, recover=False)
        tree = etree.parse(str(path), parser=parser)
        return tree.getroot()
    except (OSError, etree.XMLSyntaxError) as exc:
        raise PomReadError(f"Failed to parse POM: {path}") from exc


def read_packaging(path: str | Path) -> str | None:
    """Return the `<packaging>` declared by a POM, or None when absent."""
    root = _parse_xml(Path(path))
    return _text_first(root, _PACKAGING_XPATH)


def refine_type(
    coordinate: ArtifactCoordinate,
    packaging: str | None,
    extensions: ExtensionTypeTable,
) -> ArtifactCoordinate:
    """Replace a best-effort type with the POM's packaging where they agree.

    Only the main artifact (no classifier) is refined, and only when the
    packaging is registered and stores files with the same extension as the
    current type.
    """
    if not packaging or coordinate.classifier or packaging == coordinate.type:
        return coordinate
    if not extensions.is_registered(packaging) or not extensions.is_registered(coordinate.type):
        return coordinate
    if extensions.extension_of(packaging) != extensions.extension_of(coordinate.type):
        return coordinate

    logger.debug("Refined %s type %s -> %s", coordinate.compact(), coordinate.type, packaging)
    return coordinate.model_copy(update={"type": packaging})
