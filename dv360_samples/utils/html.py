"""HTML helpers for the sample pages.

Pure functions that return HTML fragments as strings:
- ``render_form(title, fields)``: the parameter input form.
- ``render_error(code, message, action, name)``: error block with a back link.
- ``render_result_list(title, items)``: titled list of API resources.
- ``render_index(examples)``: links to every registered example.
- ``render_page(title, body)``: wraps a fragment in the page chrome.

All dynamic values pass through ``markupsafe.escape``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import urlencode

from markupsafe import escape


def render_form(title: str, fields: Iterable[Dict[str, Any]]) -> str:
    """Render the input form for an example.

    Each field is a dict with ``name``, ``display``, ``required``, ``file``
    and ``value`` keys. File inputs never carry a value.
    """
    parts: List[str] = [
        f"<h2>Enter {escape(title)} parameters</h2>",
        '<form method="POST" enctype="multipart/form-data"><fieldset>',
    ]
    for field in fields:
        marker = "*" if field.get("required") else ""
        if field.get("file"):
            control = f'<input name="{escape(field["name"])}" type="file">'
        else:
            control = (
                f'<input name="{escape(field["name"])}" '
                f'value="{escape(field.get("value") or "")}">'
            )
        parts.append(f"{escape(field['display'])}{marker}: {control}<br/>")
    parts.append("</fieldset>*required<br/>")
    parts.append('<input type="submit" name="submit" value="Submit"/>')
    parts.append("</form>")
    return "".join(parts)


def render_error(code: Any, message: str, action: Optional[str], name: str) -> str:
    query = urlencode({"action": action or ""})
    return (
        f'<p class="error">Error Code: {escape(code)} </p>'
        f'<p class="error">Exception: {escape(message)} </p>'
        f'<p><a class="highlight" href="?{escape(query)}"> Go back to {escape(name)} sample</a></p>'
    )


def render_result_list(title: str, items: Iterable[Tuple[str, str]]) -> str:
    """Render ``(label, value)`` pairs under a heading."""
    rows = [
        f"<li><b>{escape(label)}</b>: {escape(value)}</li>" for label, value in items
    ]
    if not rows:
        return render_no_results(title)
    return f"<h3>{escape(title)}</h3><ul>{''.join(rows)}</ul>"


def render_no_results(title: str) -> str:
    return f"<h3>{escape(title)}</h3><p>No results found.</p>"


def render_index(examples: Iterable[Tuple[str, str]]) -> str:
    """Render the landing page links for ``(action, display name)`` pairs."""
    links = [
        f'<li><a href="?{escape(urlencode({"action": action}))}">{escape(name)}</a></li>'
        for action, name in examples
    ]
    return f"<h2>Samples</h2><ul>{''.join(links)}</ul>"


def render_page(title: str, body: str) -> str:
    # body is already rendered HTML and is inserted as is
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "  <head>\n"
        '    <meta charset="utf-8" />\n'
        f"    <title>{escape(title)} | Display &amp; Video 360 samples</title>\n"
        "    <style>\n"
        "      body { font-family: sans-serif; margin: 2em; }\n"
        "      .error { color: #b00020; }\n"
        "      .highlight { font-weight: bold; }\n"
        "    </style>\n"
        "  </head>\n"
        "  <body>\n"
        '    <p><a href="/">Home</a></p>\n'
        f"    {body}\n"
        "  </body>\n"
        "</html>"
    )
