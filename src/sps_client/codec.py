"""XML codec for the attributed document tree.

Maps ``Document`` trees to the gateway's XML wire format and back using
lxml. Tags and attributes are copied verbatim in both directions.
"""

from lxml import etree

from sps_client.models.document import Document, Element, Node, Text
from sps_client.models.exceptions import DocumentDecodeError, DocumentEncodeError

_PARSER = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    remove_comments=True,
    remove_pis=True,
)


def _to_tree(document: Document) -> etree._Element:
    """Build the lxml element tree for a document's root."""
    root = etree.Element(document.root_tag, document.root.attributes)
    _fill(root, document.root)
    return root


def encode(document: Document) -> bytes:
    """
    Serialize a document to bytes in its declared charset.

    Characters the charset cannot represent are written as numeric
    character references.

    Raises:
        DocumentEncodeError: If a tag/attribute name is not a valid XML name
            or the charset is unknown
    """
    try:
        return etree.tostring(
            _to_tree(document),
            xml_declaration=True,
            encoding=document.encoding,
        )
    except (ValueError, LookupError) as e:
        raise DocumentEncodeError(f"Cannot encode document: {e}") from e


def to_string(document: Document) -> str:
    """Render a document as text without the XML declaration, for logs."""
    return etree.tostring(_to_tree(document), encoding="unicode")


def _fill(parent: etree._Element, element: Element) -> None:
    for tag, node in element.children.items():
        if isinstance(node, Text):
            child = etree.SubElement(parent, tag)
            child.text = node.value
        else:
            child = etree.SubElement(parent, tag, node.attributes)
            _fill(child, node)


def decode(data: bytes) -> Document:
    """
    Parse an XML byte stream into a document.

    Any root tag is accepted; checking it against the expected protocol
    root is left to the caller. The charset comes from the XML declaration.

    Raises:
        DocumentDecodeError: If the body is not well-formed XML or an
            element repeats a child tag
    """
    try:
        root = etree.fromstring(data, _PARSER)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise DocumentDecodeError(f"Invalid XML: {e}") from e

    if root is None:
        raise DocumentDecodeError("Empty XML document")

    docinfo = root.getroottree().docinfo
    return Document(
        root_tag=root.tag,
        root=_to_element(root),
        version=docinfo.xml_version or "1.0",
        encoding=docinfo.encoding or "UTF-8",
    )


def _to_element(elem: etree._Element) -> Element:
    children: dict[str, Node] = {}
    for child in elem:
        if child.tag in children:
            raise DocumentDecodeError(f"Repeated element <{child.tag}> in <{elem.tag}>")
        children[child.tag] = _to_node(child)
    return Element(children=children, attributes=dict(elem.attrib))


def _to_node(elem: etree._Element) -> Node:
    # Childless, attribute-less elements are leaves; <x/> reads as empty text
    if len(elem) == 0 and not elem.attrib:
        return Text(elem.text or "")
    return _to_element(elem)
