"""Reads and rewrites the platform version pinned in Maven POM descriptors.

Reading goes through an XML parser so that comments or look-alike text cannot
be mistaken for the property. Rewriting is a targeted text substitution so the
rest of the file keeps its exact formatting, and it is checked against the
parser so that both always agree on which element is the pin.
"""

import re
import xml.etree.ElementTree as ET
from pathlib import Path

import structlog

from quarkus_platform_updater.descriptors.exceptions import DescriptorParseError, DescriptorPropertyNotFoundError
from quarkus_platform_updater.utils.constants import PLATFORM_VERSION_PROPERTY

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

_COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)


def _local_name(tag: str) -> str:
    """Strip the '{namespace}' prefix ElementTree puts on qualified tags."""
    return tag.rsplit("}", 1)[-1]


def _find_child(element: ET.Element, name: str, ignore_case: bool = False) -> ET.Element | None:
    for child in element:
        if not isinstance(child.tag, str):
            continue
        local_name = _local_name(child.tag)
        if local_name == name or (ignore_case and local_name.casefold() == name.casefold()):
            return child
    return None


def extract_property(text: str, path: Path, property_name: str = PLATFORM_VERSION_PROPERTY) -> str:
    """Return the value of a property from the top-level <properties> section of a POM.

    The property name is matched case-insensitively, like the rewrite does.
    """
    try:
        project = ET.fromstring(text)
    except ET.ParseError as exc:
        raise DescriptorParseError(path, str(exc)) from exc

    properties = _find_child(project, "properties")
    if properties is None:
        raise DescriptorPropertyNotFoundError(path, property_name)
    element = _find_child(properties, property_name, ignore_case=True)
    if element is None or not (element.text or "").strip():
        raise DescriptorPropertyNotFoundError(path, property_name)
    return element.text.strip()  # type: ignore[union-attr]


def read_platform_version(path: Path, property_name: str = PLATFORM_VERSION_PROPERTY) -> str:
    """Read the platform version pinned in the descriptor at path."""
    value = extract_property(path.read_text(encoding="utf-8"), path, property_name)
    logger.info("Read pinned platform version", descriptor=str(path), version=value)
    return value


def replace_property(text: str, path: Path, version: str, property_name: str = PLATFORM_VERSION_PROPERTY) -> str:
    """Replace the value of the property element that extract_property reads.

    Candidate elements are located with a case-insensitive pattern outside XML
    comments, and their original tag spelling is kept. The first candidate whose
    rewrite makes the parsed property read back as version wins, so elements of
    the same name in comments or in nested <properties> blocks (profiles) are
    left alone. Text that already pins version is returned unchanged.

    Raises:
        DescriptorParseError: If text is not well-formed XML.
        DescriptorPropertyNotFoundError: If no element can be rewritten to pin version.
    """
    if extract_property(text, path, property_name) == version:
        return text

    pattern = re.compile(
        rf"(<{re.escape(property_name)}>\s*)[\w.\-]+(\s*</{re.escape(property_name)}>)",
        re.IGNORECASE,
    )
    comments = [match.span() for match in _COMMENT_PATTERN.finditer(text)]
    for match in pattern.finditer(text):
        if any(start <= match.start() < end for start, end in comments):
            continue
        updated = f"{text[: match.start()]}{match.group(1)}{version}{match.group(2)}{text[match.end() :]}"
        if extract_property(updated, path, property_name) == version:
            return updated
        logger.debug("Skipping element that is not the pinned property", descriptor=str(path), offset=match.start())
    raise DescriptorPropertyNotFoundError(path, property_name)


def update_platform_version(path: Path, version: str, property_name: str = PLATFORM_VERSION_PROPERTY) -> None:
    """Rewrite the platform version pinned in the descriptor at path in place.

    Line endings are preserved as they are on disk.
    """
    with open(path, encoding="utf-8", newline="") as f:
        text = f.read()
    updated = replace_property(text, path, version, property_name)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(updated)
    logger.info("Updated pinned platform version", descriptor=str(path), version=version)
