"""Convert inline HTML fragments from project pages to Markdown."""

from __future__ import annotations

import re
from urllib.parse import urljoin, urlsplit

from tdmscrape.exceptions import ConversionError

try:
    from bs4 import BeautifulSoup
    from bs4.builder import ParserRejectedMarkup
    from bs4.element import Comment, NavigableString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_CODE_TAGS = {"code", "kbd", "samp", "tt"}
_DROPPED_TAGS = ["script", "style", "noscript"]
_BACKTICK_RUN_RE = re.compile(r"`+")
_MARKDOWN_SPECIAL_RE = re.compile(r"([\\`*_\[\]<>])")
_BLOCK_MARKER_RE = re.compile(r"^(\s*)([#+-]|\d+\.)(?=\s|$)")
_LINE_START_PARENTS = {"[document]", "p"}


def convert_fragment_to_markdown(html: str, *, base_url: str | None = None) -> str:
    """Convert an HTML fragment into a single Markdown string.

    Parameters
    ----------
    html : str
        The HTML fragment to convert, e.g. the inside of a ``<p>``.
    base_url : str | None
        Scheme and host that relative ``href``/``src`` values are resolved
        against. Relative URLs are left as they are when None.

    Raises
    ------
    ConversionError
        If the fragment is not a string or cannot be parsed.
    """
    if not isinstance(html, str):
        raise ConversionError(f"Expected an HTML string, got {type(html).__name__}")
    if not html.strip():
        return ""
    try:
        # html.parser keeps the fragment as is, without implied <html>/<p> wrappers.
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ConversionError(f"Could not parse HTML fragment: {exc}") from exc

    for tag in soup.find_all(_DROPPED_TAGS):
        tag.decompose()
    return _cleanup_inline_text(_serialize_children(soup, base_url=base_url))


def resolve_url(url: str, base_url: str | None) -> str:
    """Make ``url`` absolute against ``base_url``.

    Absolute URLs, in-page anchors and scheme links such as ``mailto:`` are
    returned unchanged.
    """
    url = url.strip()
    if not base_url or not url or url.startswith("#") or urlsplit(url).scheme:
        return url
    return urljoin(base_url.rstrip("/") + "/", url)


def _serialize(node: Tag | NavigableString, *, base_url: str | None) -> str:
    if isinstance(node, Comment):
        return ""
    if isinstance(node, NavigableString):
        return _escape_text(_collapse_whitespace(str(node)), at_line_start=_starts_line(node))

    if node.name == "br":
        return "\n"

    if node.name in _CODE_TAGS:
        return _inline_code(node.get_text())

    if node.name in {"strong", "b"}:
        return _wrap(_serialize_children(node, base_url=base_url), "**")

    if node.name in {"em", "i"}:
        return _wrap(_serialize_children(node, base_url=base_url), "*")

    if node.name == "a":
        text = _serialize_children(node, base_url=base_url).strip()
        href = node.get("href")
        if href:
            href = resolve_url(href, base_url)
            return f"[{text or href}]({href})"
        return text

    if node.name == "img":
        src = node.get("src")
        if not src:
            return ""
        alt = _escape_text(node.get("alt") or "")
        return f"![{alt}]({resolve_url(src, base_url)})"

    if node.name == "sup":
        text = _serialize_children(node, base_url=base_url).strip()
        return f"^{text}^" if text else ""

    if node.name == "sub":
        text = _serialize_children(node, base_url=base_url).strip()
        return f"~{text}~" if text else ""

    if node.name in {"ul", "ol"}:
        lines = _serialize_list(node, base_url=base_url)
        return "\n" + "\n".join(lines) + "\n" if lines else ""

    if node.name == "p":
        return "\n\n" + _serialize_children(node, base_url=base_url) + "\n\n"

    return _serialize_children(node, base_url=base_url)


def _serialize_children(tag: Tag, *, base_url: str | None) -> str:
    return "".join(_serialize(child, base_url=base_url) for child in tag.children)


def _serialize_list(list_tag: Tag, indent: int = 0, *, base_url: str | None) -> list[str]:
    lines: list[str] = []
    ordered = list_tag.name == "ol"
    for number, item in enumerate(list_tag.find_all("li", recursive=False), start=1):
        item_text_parts: list[str] = []
        nested_lists: list[Tag] = []
        for child in item.children:
            if isinstance(child, Tag) and child.name in {"ul", "ol"}:
                nested_lists.append(child)
            else:
                item_text_parts.append(_serialize(child, base_url=base_url))
        item_text = " ".join(_cleanup_inline_text("".join(item_text_parts)).split("\n"))
        prefix = "  " * indent + (f"{number}. " if ordered else "- ")
        lines.append(prefix + item_text if item_text else prefix.rstrip())
        for nested in nested_lists:
            lines.extend(_serialize_list(nested, indent + 1, base_url=base_url))
    return lines


def _inline_code(text: str) -> str:
    if not text:
        return ""
    longest = max((len(run) for run in _BACKTICK_RUN_RE.findall(text)), default=0)
    fence = "`" * (longest + 1)
    if text.startswith("`") or text.endswith("`"):
        text = f" {text} "
    return f"{fence}{text}{fence}"


def _wrap(text: str, marker: str) -> str:
    stripped = text.strip()
    if not stripped:
        return text
    # Markers hug the text; surrounding spaces stay outside.
    leading = text[: len(text) - len(text.lstrip())]
    trailing = text[len(text.rstrip()) :]
    return f"{leading}{marker}{stripped}{marker}{trailing}"


def _collapse_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text)


def _escape_text(text: str, *, at_line_start: bool = False) -> str:
    """Backslash-escape page text so it renders literally, not as Markdown."""
    text = _MARKDOWN_SPECIAL_RE.sub(r"\\\1", text)
    if at_line_start:
        text = _BLOCK_MARKER_RE.sub(_escape_block_marker, text, count=1)
    return text


def _escape_block_marker(match: re.Match[str]) -> str:
    indent, marker = match.groups()
    if marker.endswith("."):
        return f"{indent}{marker[:-1]}\\."
    return f"{indent}\\{marker}"


def _starts_line(node: NavigableString) -> bool:
    """True if ``node`` begins a line of the output (fragment start, paragraph or after <br>)."""
    previous = node.previous_sibling
    while (
        isinstance(previous, NavigableString)
        and not isinstance(previous, Comment)
        and not previous.strip()
    ):
        previous = previous.previous_sibling
    if previous is None:
        return node.parent is not None and node.parent.name in _LINE_START_PARENTS
    return isinstance(previous, Tag) and previous.name == "br"


def _cleanup_inline_text(text: str) -> str:
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"[ \t]*\n[ \t]*", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()
