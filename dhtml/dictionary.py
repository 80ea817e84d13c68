"""
Vocabulary table mapping German keywords to HTML tag and attribute names.

The tables are fixed at import time. A lookup miss is not an error: callers
keep the original name, which lets English names and unknown identifiers pass
through unchanged.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

TAGS: Dict[str, str] = {
    # Basic structure
    "döner": "html",
    "dokument": "html",
    "kopf": "head",
    "head": "head",
    "titel": "title",
    "title": "title",
    "körper": "body",
    "body": "body",
    "meta": "meta",
    "beschreibung": "meta",
    "verknüpfung": "link",
    "stil": "style",
    # Text content
    "überschrift1": "h1",
    "hauptüberschrift": "h1",
    "überschrift2": "h2",
    "überschrift3": "h3",
    "überschrift4": "h4",
    "überschrift5": "h5",
    "überschrift6": "h6",
    "absatz": "p",
    "p": "p",
    "bereich": "div",
    "spanne": "span",
    "stark": "strong",
    "betont": "em",
    "fett": "b",
    "kursiv": "i",
    # Lists
    "ungeordnete_liste": "ul",
    "liste": "ul",
    "geordnete_liste": "ol",
    "listenelement": "li",
    "li": "li",
    # Links and media
    "anker": "a",
    "bild": "img",
    "video": "video",
    "audio": "audio",
    # Forms
    "formular": "form",
    "eingabe": "input",
    "beschriftung": "label",
    "knopf": "button",
    "auswahl": "select",
    "option": "option",
    "textbereich": "textarea",
    # Tables
    "tabelle": "table",
    "tabellenreihe": "tr",
    "tabellendaten": "td",
    "tabellenkopf": "th",
    "tabellenkörper": "tbody",
    "tabellenheader": "thead",
    "tabellenfuß": "tfoot",
}

ATTRIBUTES: Dict[str, str] = {
    # Common attributes
    "klasse": "class",
    "identität": "id",
    "stil": "style",
    "titel": "title",
    "sprache": "lang",
    # Link attributes
    "href": "href",
    "ziel": "target",
    # Image attributes
    "quelle": "src",
    "alternativ": "alt",
    "breite": "width",
    "höhe": "height",
    # Form attributes
    "typ": "type",
    "name": "name",
    "wert": "value",
    "platzhalter": "placeholder",
    "erforderlich": "required",
    "deaktiviert": "disabled",
    # Event attributes
    "bei_klick": "onclick",
    "bei_laden": "onload",
    "bei_änderung": "onchange",
}


class Vocabulary:
    """
    Read-only lookup table for localized tag and attribute names.

    Both mappings are copied and frozen on construction, so one instance can
    be shared between any number of concurrent transpilations.
    """

    def __init__(self, tags: Mapping[str, str], attributes: Mapping[str, str]):
        self._tags = MappingProxyType(dict(tags))
        self._attributes = MappingProxyType(dict(attributes))

    def __repr__(self):
        return f"Vocabulary({len(self._tags)} tags, {len(self._attributes)} attributes)"

    @property
    def tags(self) -> Mapping[str, str]:
        return self._tags

    @property
    def attributes(self) -> Mapping[str, str]:
        return self._attributes

    def resolve_tag(self, name: str) -> Optional[str]:
        """Return the HTML tag name for a localized tag, or None if unknown."""
        return self._tags.get(name)

    def resolve_attribute(self, name: str) -> Optional[str]:
        """Return the HTML attribute name for a localized attribute, or None."""
        return self._attributes.get(name)

    def as_dict(self) -> Dict[str, Dict[str, str]]:
        """Return plain-dict copies of both tables for serialization."""
        return {"tags": dict(self._tags), "attributes": dict(self._attributes)}


DEFAULT_VOCABULARY = Vocabulary(TAGS, ATTRIBUTES)
