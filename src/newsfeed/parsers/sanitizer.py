"""Best-effort repair of common XML well-formedness defects.

Lax feed generators routinely emit control characters and bare
ampersands. Both make a strict XML parser fail on the whole document,
so they are fixed up before parsing. The result is not guaranteed to be
well-formed; a later parse failure is still a real error.
"""

import re

# XML 1.0 forbids C0 controls other than tab, LF and CR, plus U+FFFE/U+FFFF
_ILLEGAL_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")

# An ampersand that does not start a predefined entity or a character reference
_BARE_AMPERSAND = re.compile(r"&(?!(?:amp|lt|gt|quot|apos|#[0-9]+|#[xX][0-9a-fA-F]+);)")

# Sections whose content is taken literally by the parser
_VERBATIM_SECTIONS = re.compile(r"(<!\[CDATA\[.*?\]\]>|<!--.*?-->)", re.DOTALL)


def sanitize(xml: str) -> str:
    """Return a repaired copy of `xml`.

    - strips characters outside the XML character set
    - drops leading whitespace and byte order marks, which must not
      precede an XML declaration
    - escapes `&` unless it already starts a valid entity reference;
      CDATA sections and comments are left as they are

    Idempotent: sanitize(sanitize(x)) == sanitize(x).
    """
    text = _ILLEGAL_CHARS.sub("", xml)
    text = text.lstrip("\ufeff \t\r\n")
    # re.split with a capturing group alternates outside, section, outside, ...
    parts = _VERBATIM_SECTIONS.split(text)
    parts[::2] = [_BARE_AMPERSAND.sub("&amp;", part) for part in parts[::2]]
    return "".join(parts)
