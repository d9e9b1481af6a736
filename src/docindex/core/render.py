"""Markdown-to-HTML rendering with pluggable syntax highlighting for code fences"""

import logging
from typing import Iterable, Protocol

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml
from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name

from docindex.config import DEFAULT_HIGHLIGHT_LANGUAGES


LOGGER = logging.getLogger(__name__)

LANGUAGE_ALIASES: dict[str, str] = {
    'sh':         'bash',
    'shell':      'bash',
    'zsh':        'bash',
    'dockerfile': 'docker',
    'scss':       'css',
}


def resolve_language(lang: str) -> str:
    """Normalize a fence info tag to the grammar name used by the highlighter."""
    normalized = lang.strip().lower()
    return LANGUAGE_ALIASES.get(normalized, normalized)


class Highlighter(Protocol):
    """Anything that can turn code of a (resolved) language into highlighted HTML."""

    def supports(self, lang: str) -> bool: ...

    def highlight(self, code: str, lang: str) -> str: ...


class PygmentsHighlighter:
    """Highlighter backed by Pygments lexers, emitting inline-styled spans inside <pre><code>."""

    def __init__(self, languages: Iterable[str] = None, theme: str = 'default') -> None:
        langs = DEFAULT_HIGHLIGHT_LANGUAGES if languages is None else languages
        self.languages = {resolve_language(lang) for lang in langs}
        self.formatter = HtmlFormatter(nowrap=True, noclasses=True, style=theme)

    def supports(self, lang: str) -> bool:
        return lang in self.languages

    def highlight(self, code: str, lang: str) -> str:
        lexer = get_lexer_by_name(lang)
        body = pygments_highlight(code, lexer, self.formatter)
        return f'<pre class="highlight language-{escapeHtml(lang)}"><code>{body}</code></pre>'


def plain_code_block(code: str, lang: str) -> str:
    return f'<pre class="language-{escapeHtml(lang or "text")}"><code>{escapeHtml(code)}</code></pre>'


def render_code_block(code: str, lang: str, highlighter: Highlighter | None) -> str:
    """Highlight one fenced block; unsupported languages and highlighter errors degrade to escaped text."""
    if highlighter is not None and lang:
        target = resolve_language(lang)
        try:
            if highlighter.supports(target):
                return highlighter.highlight(code, target)
        except Exception as e:
            LOGGER.warning("Highlighting failed for language %s: %s", lang, e)
    return plain_code_block(code, lang)


class MarkdownRenderer:
    """markdown-it renderer whose fences are routed through a Highlighter."""

    def __init__(
        self,
        highlighter: Highlighter | None = None,
        preset: str = 'gfm-like',
        linkify: bool = True,
        ) -> None:
        self.highlighter = highlighter
        self.md = MarkdownIt(preset, options_update={
            "html": True,
            "linkify": linkify,
            "typographer": True,
            "highlight": self._highlight,
        })
        self.md.enable(["replacements", "smartquotes"])

    def _highlight(self, code: str, lang: str, attrs: str) -> str:
        return render_code_block(code, lang, self.highlighter)

    def render(self, markdown: str) -> str:
        return self.md.render(markdown)


def make_renderer(settings) -> MarkdownRenderer:
    """Build the default Pygments-backed renderer from Settings."""
    try:
        highlighter = PygmentsHighlighter(settings.highlight_languages, settings.highlight_theme)
    except Exception as e:
        LOGGER.warning("Failed to initialize highlighter, code blocks will be plain: %s", e)
        highlighter = None
    return MarkdownRenderer(highlighter, preset=settings.parser_config, linkify=settings.linkify)
