"""
Data format converters: CSV, JSON, XML, Markdown, HTML and cURL.
"""

import csv
import io
import json
import re
import shlex
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional, Tuple
from xml.sax.saxutils import escape, quoteattr

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

CURL_LANGUAGES = ("javascript", "python", "php")


def csv_to_json(text: str, has_header: bool = True) -> str:
    """Rows become objects keyed by the header, or plain lists without one."""
    rows = list(csv.reader(io.StringIO(text.strip())))
    if not rows:
        return "[]"
    if not has_header:
        return json.dumps(rows, indent=2, ensure_ascii=False)

    header, *body = rows
    # Rows whose width differs from the header are skipped
    records = [dict(zip(header, row)) for row in body if len(row) == len(header)]
    return json.dumps(records, indent=2, ensure_ascii=False)


def _csv_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _csv_line(cells: List[str]) -> str:
    # csv.writer quotes a lone empty field; an empty row is a blank line
    if cells == [""]:
        return ""
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="").writerow(cells)
    return buffer.getvalue()


def json_to_csv(text: str) -> str:
    """Header row from the first object's keys, then one row per element."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return f"Invalid JSON: {e}"
    if not isinstance(data, list):
        return "Input must be a JSON array"
    if not data:
        return ""
    if not all(isinstance(row, dict) for row in data):
        return "Input must be a JSON array of objects"

    headers = list(data[0].keys())
    lines = [_csv_line(headers)]
    lines.extend(_csv_line([_csv_cell(row.get(header)) for header in headers]) for row in data)
    return "\n".join(lines)


def _element_to_value(element: ET.Element) -> Any:
    value: Dict[str, Any] = {f"@{name}": attr for name, attr in element.attrib.items()}
    children = list(element)
    text = (element.text or "").strip()

    if not children:
        if not value:
            return text
        if text:
            value["#text"] = text
        return value

    for child in children:
        child_value = _element_to_value(child)
        if child.tag in value:
            existing = value[child.tag]
            if not isinstance(existing, list):
                value[child.tag] = existing = [existing]
            existing.append(child_value)
        else:
            value[child.tag] = child_value
    return value


def xml_to_json(text: str) -> str:
    """Attributes become '@name' keys, mixed text '#text', repeated tags lists."""
    try:
        root = ET.fromstring(text.strip())
    except ET.ParseError as e:
        return f"Invalid XML: {e}"
    return json.dumps({root.tag: _element_to_value(root)}, indent=2, ensure_ascii=False)


def _xml_scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return escape(str(value))


def _to_xml(value: Any, name: str) -> str:
    if isinstance(value, list):
        return "".join(_to_xml(item, name) for item in value)
    if isinstance(value, dict):
        attrs = []
        children = []
        for key, child in value.items():
            if key.startswith("@"):
                attrs.append(f" {key[1:]}={quoteattr(_csv_cell(child))}")
            elif key == "#text":
                children.append(_xml_scalar(child))
            else:
                children.append(_to_xml(child, key))
        if not children:
            return f"<{name}{''.join(attrs)}/>"
        return f"<{name}{''.join(attrs)}>{''.join(children)}</{name}>"
    return f"<{name}>{_xml_scalar(value)}</{name}>"


def json_to_xml(text: str) -> str:
    """Wrap the document in a <root> element; array elements become <item>."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return f"Invalid JSON: {e}"
    if isinstance(data, list):
        body = "<root>" + "".join(_to_xml(item, "item") for item in data) + "</root>"
    else:
        body = _to_xml(data, "root")
    return XML_DECLARATION + body


def markdown_to_html(text: str) -> str:
    """Convert common Markdown: headings, emphasis, links, images, code, lists, quotes."""
    html = text
    html = re.sub(r"^### (.*)$", r"<h3>\1</h3>", html, flags=re.MULTILINE)
    html = re.sub(r"^## (.*)$", r"<h2>\1</h2>", html, flags=re.MULTILINE)
    html = re.sub(r"^# (.*)$", r"<h1>\1</h1>", html, flags=re.MULTILINE)

    html = re.sub(r"```([^`]*)```", r"<pre><code>\1</code></pre>", html)
    html = re.sub(r"`([^`]+)`", r"<code>\1</code>", html)

    html = re.sub(r"\*\*([^*]+)\*\*", r"<strong>\1</strong>", html)
    html = re.sub(r"__([^_]+)__", r"<strong>\1</strong>", html)
    html = re.sub(r"^\* (.+)$", r"<li>\1</li>", html, flags=re.MULTILINE)
    html = re.sub(r"\*([^*\n]+)\*", r"<em>\1</em>", html)
    html = re.sub(r"\b_([^_\n]+)_\b", r"<em>\1</em>", html)

    html = re.sub(r"!\[([^\]]*)\]\(([^)]+)\)", r'<img src="\2" alt="\1" />', html)
    html = re.sub(r"\[([^\]]+)\]\(([^)]+)\)", r'<a href="\2">\1</a>', html)

    html = re.sub(r"((?:<li>.*</li>\n?)+)", r"<ul>\1</ul>", html)
    html = re.sub(r"^\d+\. (.+)$", r"<li>\1</li>", html, flags=re.MULTILINE)
    html = re.sub(r"^> (.+)$", r"<blockquote>\1</blockquote>", html, flags=re.MULTILINE)
    html = re.sub(r"^---$", "<hr />", html, flags=re.MULTILINE)

    html = html.replace("\n\n", "</p><p>")
    if not html.startswith("<"):
        html = f"<p>{html}</p>"
    return html


def html_to_markdown(text: str) -> str:
    md = re.sub(r"<(script|style)\b.*?</\1>", "", text, flags=re.IGNORECASE | re.DOTALL)

    for level in range(1, 7):
        md = re.sub(
            rf"<h{level}[^>]*>(.*?)</h{level}>", "#" * level + r" \1\n\n", md,
            flags=re.IGNORECASE,
        )

    md = re.sub(r"<(?:strong|b)(?:\s[^>]*)?>(.*?)</(?:strong|b)>", r"**\1**", md, flags=re.IGNORECASE)
    md = re.sub(r"<(?:em|i)(?:\s[^>]*)?>(.*?)</(?:em|i)>", r"*\1*", md, flags=re.IGNORECASE)
    md = re.sub(r'<a[^>]+href="([^"]*)"[^>]*>([^<]+)</a>', r"[\2](\1)", md, flags=re.IGNORECASE)
    md = re.sub(r'<img[^>]+src="([^"]*)"[^>]*alt="([^"]*)"[^>]*>', r"![\2](\1)", md, flags=re.IGNORECASE)
    md = re.sub(r'<img[^>]+src="([^"]*)"[^>]*>', r"![](\1)", md, flags=re.IGNORECASE)

    md = re.sub(r"<pre><code>(.*?)</code></pre>", r"```\n\1\n```\n\n", md, flags=re.IGNORECASE | re.DOTALL)
    md = re.sub(r"<code>(.*?)</code>", r"`\1`", md, flags=re.IGNORECASE)

    md = re.sub(r"<br\s*/?>", "\n", md, flags=re.IGNORECASE)
    md = re.sub(r"</p>", "\n\n", md, flags=re.IGNORECASE)
    md = re.sub(r"<p[^>]*>", "", md, flags=re.IGNORECASE)

    md = re.sub(r"<li[^>]*>(.*?)</li>", r"* \1\n", md, flags=re.IGNORECASE)
    md = re.sub(r"</?(?:ul|ol)[^>]*>", "", md, flags=re.IGNORECASE)
    md = re.sub(r"<blockquote[^>]*>(.*?)</blockquote>", r"> \1\n\n", md, flags=re.IGNORECASE)
    md = re.sub(r"<hr\s*/?>", "---\n\n", md, flags=re.IGNORECASE)

    md = re.sub(r"<[^>]+>", "", md)
    md = re.sub(r"\n{3,}", "\n\n", md)

    for entity, char in (("&lt;", "<"), ("&gt;", ">"), ("&quot;", '"'), ("&#39;", "'"), ("&amp;", "&")):
        md = md.replace(entity, char)
    return md.strip()


def _parse_curl(command: str) -> Tuple[str, str, Dict[str, str], Optional[str]]:
    tokens = shlex.split(command.replace("\\\n", " "))
    if not tokens or tokens[0] != "curl":
        raise ValueError("command must start with 'curl'")

    url = ""
    method: Optional[str] = None
    headers: Dict[str, str] = {}
    data: Optional[str] = None

    args = iter(tokens[1:])
    for token in args:
        if token in ("-X", "--request"):
            method = next(args, "GET").upper()
        elif token in ("-H", "--header"):
            name, _, value = next(args, "").partition(":")
            if name:
                headers[name.strip()] = value.strip()
        elif token in ("-d", "--data", "--data-raw", "--data-binary"):
            data = next(args, "")
        elif not token.startswith("-") and not url:
            url = token

    if not url:
        raise ValueError("no URL found")
    if method is None:
        method = "POST" if data is not None else "GET"
    return url, method, headers, data


def _javascript_fetch(url: str, method: str, headers: Dict[str, str], data: Optional[str]) -> str:
    lines = [f"fetch('{url}', {{", f"  method: '{method}',"]
    if headers:
        lines.append("  headers: {")
        lines.extend(f"    '{key}': '{value}'," for key, value in headers.items())
        lines.append("  },")
    if data is not None:
        lines.append(f"  body: '{data}',")
    lines.extend([
        "})",
        "  .then(response => response.json())",
        "  .then(data => console.log(data))",
        "  .catch(error => console.error(error));",
    ])
    return "\n".join(lines)


def _python_requests(url: str, method: str, headers: Dict[str, str], data: Optional[str]) -> str:
    lines = ["import requests", ""]
    if headers:
        lines.append("headers = {")
        lines.extend(f"    {key!r}: {value!r}," for key, value in headers.items())
        lines.extend(["}", ""])
    if data is not None:
        lines.extend([f"data = {data!r}", ""])

    args = [f"    {url!r}"]
    if headers:
        args.append("    headers=headers")
    if data is not None:
        args.append("    data=data")
    lines.append(f"response = requests.{method.lower()}(")
    lines.append(",\n".join(args))
    lines.extend([")", "", "print(response.json())"])
    return "\n".join(lines)


def _php_curl(url: str, method: str, headers: Dict[str, str], data: Optional[str]) -> str:
    lines = [
        "<?php",
        "",
        "$curl = curl_init();",
        "",
        "curl_setopt_array($curl, array(",
        f"  CURLOPT_URL => '{url}',",
        "  CURLOPT_RETURNTRANSFER => true,",
        f"  CURLOPT_CUSTOMREQUEST => '{method}',",
    ]
    if data is not None:
        lines.append(f"  CURLOPT_POSTFIELDS => '{data}',")
    if headers:
        lines.append("  CURLOPT_HTTPHEADER => array(")
        lines.extend(f"    '{key}: {value}'," for key, value in headers.items())
        lines.append("  ),")
    lines.extend([
        "));",
        "",
        "$response = curl_exec($curl);",
        "curl_close($curl);",
        "",
        "echo $response;",
    ])
    return "\n".join(lines)


_CURL_GENERATORS = {
    "javascript": _javascript_fetch,
    "js": _javascript_fetch,
    "python": _python_requests,
    "php": _php_curl,
}


def curl_to_code(command: str, language: str = "javascript") -> str:
    """Translate a cURL command into fetch, requests or PHP cURL code."""
    generator = _CURL_GENERATORS.get(language.lower())
    if generator is None:
        return "Unsupported language. Supported: " + ", ".join(CURL_LANGUAGES)
    try:
        url, method, headers, data = _parse_curl(command.strip())
    except ValueError as e:
        return f"Error parsing cURL command: {e}"
    return generator(url, method, headers, data)

