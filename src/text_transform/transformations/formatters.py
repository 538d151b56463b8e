"""
Code formatters and minifiers.

JSON and YAML go through real parsers (json, PyYAML). SQL, CSS, JavaScript
and HTML use lightweight token rewriting: readable output for typical
snippets, not a full pretty-printer.
"""

import json
import re
from xml.dom import minidom
from xml.parsers.expat import ExpatError

import yaml

_INDENT = "  "

_SQL_KEYWORDS = [
    "SELECT", "FROM", "WHERE", "JOIN", "LEFT JOIN", "RIGHT JOIN", "INNER JOIN",
    "ON", "GROUP BY", "ORDER BY", "HAVING", "LIMIT", "OFFSET", "UNION",
    "INSERT INTO", "VALUES", "UPDATE", "SET", "DELETE FROM", "CREATE TABLE",
    "ALTER TABLE", "DROP TABLE", "CREATE INDEX", "DROP INDEX", "AS", "AND", "OR",
    "NOT", "IN", "EXISTS", "BETWEEN", "LIKE", "IS NULL", "IS NOT NULL",
    "CASE", "WHEN", "THEN", "ELSE", "END", "WITH", "DISTINCT", "ALL",
]
_SQL_KEYWORD_PATTERNS = [
    (keyword, re.compile(r"\b" + keyword.replace(" ", r"\s+") + r"\b", re.IGNORECASE))
    for keyword in _SQL_KEYWORDS
]

_INLINE_HTML_TAGS = {"span", "a", "strong", "em", "b", "i", "code", "small", "sub", "sup"}
_VOID_HTML_TAGS = {
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
}
_TAG_SPLIT = re.compile(r"(<[^>]*>)")


def format_json(text: str, indent: int = 2) -> str:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        return f"Invalid JSON: {e}"
    return json.dumps(parsed, indent=max(0, min(int(indent), 8)), ensure_ascii=False)


def minify_json(text: str) -> str:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        return f"Invalid JSON: {e}"
    return json.dumps(parsed, separators=(",", ":"), ensure_ascii=False)


def format_sql(text: str) -> str:
    """Uppercase keywords and break major clauses onto their own lines."""
    formatted = text.strip()
    for keyword, pattern in _SQL_KEYWORD_PATTERNS:
        formatted = pattern.sub(keyword, formatted)

    formatted = re.sub(
        r"\s+(SELECT|FROM|WHERE|GROUP BY|ORDER BY|HAVING|LIMIT|OFFSET|UNION)\b", r"\n\1", formatted
    )
    formatted = re.sub(r"\s+(LEFT JOIN|RIGHT JOIN|INNER JOIN|JOIN)\b", r"\n  \1", formatted)
    formatted = re.sub(r"\s+AND\s+", "\n  AND ", formatted)
    formatted = re.sub(r"\s+OR\s+", "\n  OR ", formatted)
    formatted = re.sub(r",\s*", ",\n  ", formatted)
    formatted = re.sub(r"\n\s*\n", "\n", formatted)
    return formatted.strip()


def minify_sql(text: str) -> str:
    minified = re.sub(r"\s+", " ", text)
    minified = re.sub(r"\s*([(),])\s*", r"\1", minified)
    minified = re.sub(r";\s*", ";", minified)
    return minified.strip()


def format_xml(text: str) -> str:
    compact = re.sub(r">\s+<", "><", text.strip())
    try:
        document = minidom.parseString(compact)
    except ExpatError as e:
        return f"Invalid XML: {e}"
    pretty = document.toprettyxml(indent=_INDENT)
    # minidom always emits a declaration; keep it only if the input had one
    if not compact.startswith("<?xml"):
        pretty = pretty.split("\n", 1)[1]
    return "\n".join(line for line in pretty.splitlines() if line.strip())


def minify_xml(text: str) -> str:
    minified = re.sub(r"<!--.*?-->", "", text, flags=re.DOTALL)
    minified = re.sub(r">\s+<", "><", minified)
    return re.sub(r"\s+", " ", minified).strip()


def format_css(text: str) -> str:
    css = re.sub(r"/\*.*?\*/", "", text.strip(), flags=re.DOTALL)
    css = css.replace("{", " {\n").replace("}", "\n}\n")
    css = css.replace(";", ";\n").replace(",", ",\n")

    lines = []
    depth = 0
    for line in css.split("\n"):
        line = line.strip()
        if not line:
            continue
        if "}" in line:
            depth -= 1
        lines.append(_INDENT * max(0, depth) + line)
        if "{" in line:
            depth += 1
    return "\n".join(lines)


def minify_css(text: str) -> str:
    minified = re.sub(r"/\*.*?\*/", "", text, flags=re.DOTALL)
    minified = re.sub(r"\s+", " ", minified)
    for char in "{}:;,":
        minified = re.sub(r"\s*" + re.escape(char) + r"\s*", char, minified)
    return minified.replace(";}", "}").strip()


def format_javascript(text: str) -> str:
    """Put statements and blocks on their own lines with brace indentation."""
    source = re.sub(r"\s+", " ", text).strip()
    source = re.sub(r"\s*\(\s*", "(", source)
    source = re.sub(r"\s*\)\s*", ") ", source)
    source = re.sub(r"\)\s*\{", ") {", source)

    lines = []
    depth = 0
    current = ""
    for char in source:
        if char == "{":
            lines.append(_INDENT * depth + (current.strip() + " {").strip())
            current = ""
            depth += 1
        elif char == "}":
            if current.strip():
                lines.append(_INDENT * depth + current.strip())
            current = ""
            depth = max(0, depth - 1)
            lines.append(_INDENT * depth + "}")
        elif char == ";":
            lines.append(_INDENT * depth + current.strip() + ";")
            current = ""
        else:
            current += char
    if current.strip():
        lines.append(_INDENT * depth + current.strip())
    return "\n".join(line for line in lines if line.strip())


def minify_javascript(text: str) -> str:
    minified = re.sub(r"/\*.*?\*/", "", text, flags=re.DOTALL)
    minified = re.sub(r"//.*$", "", minified, flags=re.MULTILINE)
    minified = re.sub(r"\s+", " ", minified)
    minified = re.sub(r"\s*([{}();,:])\s*", r"\1", minified)
    minified = re.sub(r";\s*}", "}", minified)
    return minified.strip()


def _tag_name(token: str) -> str:
    match = re.match(r"</?\s*([A-Za-z][\w-]*)", token)
    return match.group(1).lower() if match else ""


def format_html(text: str) -> str:
    """Indent block-level elements; inline and void elements do not nest."""
    lines = []
    depth = 0
    for token in _TAG_SPLIT.split(text.strip()):
        if not token:
            continue
        if token.startswith("<!--"):
            lines.append(_INDENT * depth + token)
        elif token.startswith("<!"):
            lines.append(token)
        elif token.startswith("</"):
            if _tag_name(token) not in _INLINE_HTML_TAGS:
                depth = max(0, depth - 1)
            lines.append(_INDENT * depth + token)
        elif token.startswith("<"):
            lines.append(_INDENT * depth + token)
            name = _tag_name(token)
            if (
                name
                and not token.endswith("/>")
                and name not in _INLINE_HTML_TAGS
                and name not in _VOID_HTML_TAGS
            ):
                depth += 1
        elif token.strip():
            lines.append(_INDENT * depth + token.strip())
    return "\n".join(lines)


def minify_html(text: str) -> str:
    minified = re.sub(r"<!--.*?-->", "", text, flags=re.DOTALL)
    minified = re.sub(r">\s+<", "><", minified)
    minified = re.sub(r"\s+", " ", minified)
    minified = re.sub(r"\s*=\s*", "=", minified)
    return minified.strip()


def format_yaml(text: str) -> str:
    try:
        documents = list(yaml.safe_load_all(text))
    except yaml.YAMLError as e:
        return f"Invalid YAML: {e}"
    return "---\n".join(
        yaml.safe_dump(doc, sort_keys=False, allow_unicode=True, default_flow_style=False)
        for doc in documents
    ).strip()


def json_to_yaml(text: str) -> str:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        return f"Invalid JSON: {e}"
    return yaml.safe_dump(
        parsed, sort_keys=False, allow_unicode=True, default_flow_style=False
    ).strip()


def yaml_to_json(text: str) -> str:
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as e:
        return f"Invalid YAML: {e}"
    # Dates and other YAML-only scalars become strings
    return json.dumps(parsed, indent=2, ensure_ascii=False, default=str)
