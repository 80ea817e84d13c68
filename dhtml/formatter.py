"""
Line-oriented pretty printer for rendered HTML.

This is a textual pass over already rendered markup, not over the tree. It
relies on the renderer never emitting a tag that spans several lines; an
attribute value containing a literal ``><`` is split like a tag boundary.
"""

DEFAULT_INDENT = "  "


def _is_closing(line: str) -> bool:
    return line.startswith("</")


def _is_leaf(line: str) -> bool:
    """Lines that neither open nor close a nesting level."""
    return (
        line.endswith("/>")
        or line.startswith("<!--")
        or ("</" in line and ">" in line and not _is_closing(line))
    )


def format_html(html: str, indent: str = DEFAULT_INDENT) -> str:
    """
    Put adjacent tags on their own lines and indent them by nesting depth.

    Depth drops before a closing-tag line is printed and rises after an
    opening-tag line is printed.

    Args:
        html: Rendered HTML text
        indent: Indentation unit per nesting level

    Returns:
        The formatted text, one line per tag, each terminated by a newline
    """
    html = html.replace("><", ">\n<")

    lines = []
    depth = 0

    for raw_line in html.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        closing = _is_closing(line)
        if closing:
            depth = max(depth - 1, 0)

        lines.append(f"{indent * depth}{line}\n")

        if line.startswith("<") and not closing and not _is_leaf(line):
            depth += 1

    return "".join(lines)
