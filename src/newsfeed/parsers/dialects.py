"""Feed dialect matchers.

Each dialect inspects a parsed document root and either claims it,
returning the feed title and its entry elements, or declines with None.
Dialects are tried in a fixed order and the first match wins:
RSS 2.0, then RDF (RSS 1.0), then Atom.

Element names are compared by local name, so namespaced variants such
as `dc:date` or `atom:link` are found alongside plain ones.
"""

from collections.abc import Iterator
from itertools import islice
from xml.etree.ElementTree import Element

from newsfeed.models.news import FeedItem, ParsedFeed

# Date elements in order of preference; values are passed through untouched
DATE_FIELDS = ("pubDate", "updated", "date", "published")

_PRIMARY_LINK_RELS = ("", "alternate")


def local_name(element: Element) -> str:
    """Strip the `{namespace}` prefix ElementTree puts on tag names."""
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def children(element: Element, name: str) -> list[Element]:
    return [child for child in element if local_name(child) == name]


def first_child(element: Element, name: str) -> Element | None:
    for child in element:
        if local_name(child) == name:
            return child
    return None


def text_of(element: Element | None) -> str:
    """Full text content, nested markup (Atom xhtml content) included."""
    if element is None:
        return ""
    return "".join(element.itertext()).strip()


class Dialect:
    """Base class for a feed document shape."""

    name = ""

    def match(self, root: Element) -> tuple[str, list[Element]] | None:
        """Return (feed title, entry elements) if this dialect owns `root`."""
        raise NotImplementedError


class Rss2Dialect(Dialect):
    """`<rss><channel><item/>...</channel></rss>`"""

    name = "rss2"

    def match(self, root: Element) -> tuple[str, list[Element]] | None:
        if local_name(root) != "rss":
            return None
        channel = first_child(root, "channel")
        if channel is None:
            return None
        return text_of(first_child(channel, "title")), children(channel, "item")


class RdfDialect(Dialect):
    """`<rdf:RDF><channel/><item/>...</rdf:RDF>`, items are siblings of channel."""

    name = "rdf"

    def match(self, root: Element) -> tuple[str, list[Element]] | None:
        if local_name(root) != "RDF":
            return None
        channel = first_child(root, "channel")
        if channel is None:
            return None
        items = children(root, "item") or children(channel, "item")
        return text_of(first_child(channel, "title")), items


class AtomDialect(Dialect):
    """`<feed><entry/>...</feed>`"""

    name = "atom"

    def match(self, root: Element) -> tuple[str, list[Element]] | None:
        if local_name(root) != "feed":
            return None
        return text_of(first_child(root, "title")), children(root, "entry")


DIALECTS: tuple[Dialect, ...] = (Rss2Dialect(), RdfDialect(), AtomDialect())


def extract_title(entry: Element) -> str:
    for element in children(entry, "title"):
        title = text_of(element) or element.get("title", "").strip()
        if title:
            return title
    return ""


def _link_target(element: Element) -> str:
    return text_of(element) or element.get("href", "").strip()


def extract_link(entry: Element) -> str:
    """Plain text link, else `href`; among several links prefer the alternate one."""
    links = children(entry, "link")
    if len(links) > 1:
        for element in links:
            if element.get("rel", "").strip().lower() in _PRIMARY_LINK_RELS:
                target = _link_target(element)
                if target:
                    return target
    for element in links:
        target = _link_target(element)
        if target:
            return target
    return ""


def extract_pub_date(entry: Element) -> str:
    for name in DATE_FIELDS:
        value = text_of(first_child(entry, name))
        if value:
            return value
    return ""


def project(entry: Element) -> FeedItem:
    return FeedItem(
        title=extract_title(entry),
        link=extract_link(entry),
        pub_date=extract_pub_date(entry),
    )


def _project_all(entries: list[Element], max_items: int) -> Iterator[FeedItem]:
    return (project(entry) for entry in islice(entries, max_items))


def extract(root: Element, max_items: int) -> ParsedFeed | None:
    """Run the dialects in order against `root`.

    Args:
        root: Parsed document root.
        max_items: Cap on returned items, document order is preserved.

    Returns:
        ParsedFeed from the first matching dialect, or None when the
        document is well-formed XML but not a known feed shape.
    """
    for dialect in DIALECTS:
        matched = dialect.match(root)
        if matched is None:
            continue
        title, entries = matched
        return ParsedFeed(
            dialect=dialect.name,
            title=title,
            items=list(_project_all(entries, max_items)),
        )
    return None
