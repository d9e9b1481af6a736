"""Shared fixtures for core unit tests"""

import pytest

from docindex.core.render import MarkdownRenderer, PygmentsHighlighter


class RecordingHighlighter:
    """Highlighter double that records the language each block was highlighted with."""

    def __init__(self, supported=("bash", "python"), fail=False):
        self.supported = set(supported)
        self.fail = fail
        self.calls: list[tuple[str, str]] = []

    def supports(self, lang):
        return lang in self.supported

    def highlight(self, code, lang):
        self.calls.append((code, lang))
        if self.fail:
            raise RuntimeError("grammar exploded")
        return f'<pre class="recorded-{lang}"><code>{code}</code></pre>'


@pytest.fixture(name="renderer")
def renderer_fixture():
    return MarkdownRenderer(PygmentsHighlighter())


@pytest.fixture(name="recorder")
def recorder_fixture():
    return RecordingHighlighter()


@pytest.fixture(name="failing_highlighter")
def failing_highlighter_fixture():
    return RecordingHighlighter(fail=True)
