"""Post-processing of rendered Markdown HTML around code blocks."""

from __future__ import annotations

import re

_CODE_BLOCK_RE = re.compile(r"(<pre><code(?:\s+[^>]*)?>.*?</code></pre>)", re.DOTALL)

_CODE_TITLE_RE = re.compile(
    r'(<div class=(\\"|")relative(\\"|")><pre><code class=(\\"|")'
    r'language-([^:]+):([^"\\?#\s]+)(?:\(([^)]+)\))?(\\"|")>)'
)

_PARENTHESES_RE = re.compile(r"\(([^)]*)\)")


def add_default_language(html: str) -> str:
    """Give code blocks without a language the `language-js` class."""
    return html.replace("<pre><code>", '<pre><code class="language-js">')


def add_relative_div(html: str) -> str:
    """Wrap every `<pre><code>` block in a `<div class="relative">`."""
    return _CODE_BLOCK_RE.sub(r'<div class="relative">\1</div>', html)


def _format_title(code_title: str) -> str:
    if "(" not in code_title:
        return code_title
    with_space = code_title.replace("(", " (")
    return _PARENTHESES_RE.sub(lambda m: m.group(0).replace("_", " "), with_space)


def _title_block(match: re.Match[str]) -> str:
    language = match.group(5)
    title = _format_title(match.group(6))
    quote = '\\"' if "\\" in match.group(2) else '"'
    return (
        f'<div class="remark-code-title">{title}</div>'
        f"<div class={quote}relative{quote}><pre>"
        f"<code class={quote}language-{language}{quote}>"
    )


def add_gfm_code_title(html: str) -> str:
    """Turn `language-<lang>:<title>` classes into a title div above the block."""
    return _CODE_TITLE_RE.sub(_title_block, html)