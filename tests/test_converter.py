"""
End-to-end conversion tests

Tests the full pipeline: markdown source -> events -> interceptor -> HTML,
using the real markdown-it parser and Pygments.
"""

import pytest

from enerator.config import AppSettings
from enerator.lib.catalog import Catalog, SyntaxCatalog
from enerator.lib.converter import (
    Converter,
    events_parse,
    events_render,
    fenceLanguage_extract,
    markdown_make,
)
from enerator.models import Event, EventKind


@pytest.fixture(scope="module")
def syntaxes():
    return SyntaxCatalog()


@pytest.fixture
def converter(syntaxes):
    return Converter(syntaxes)


SCENARIO = """Some prose before the code.

```python
print(1)
```

Some prose after the code.
"""


class TestEventSource:
    """markdown-it tokens adapted to events"""

    def test_fence_expands_to_start_text_end(self):
        md = markdown_make()
        events = list(events_parse(md, "```rust\nfn main() {}\nlet x = 1;\n```\n"))

        assert events[0] == Event(EventKind.START, tag="fence", info="rust")
        assert events[1:3] == [
            Event(EventKind.TEXT, text="fn main() {}\n"),
            Event(EventKind.TEXT, text="let x = 1;\n"),
        ]
        assert events[3] == Event(EventKind.END, tag="fence")

    def test_raw_html_block_is_html_event(self):
        events = list(events_parse(markdown_make(), "<div>raw</div>\n"))
        assert events == [Event(EventKind.HTML, text="<div>raw</div>\n")]

    def test_other_tokens_wrapped(self):
        events = list(events_parse(markdown_make(), "# Title\n"))
        assert [e.kind for e in events] == [EventKind.OTHER] * 3
        assert [e.token.type for e in events] == ["heading_open", "inline", "heading_close"]

    @pytest.mark.parametrize(
        "info, language",
        [("python", "python"), ("  python  ", "python"), ("python {.lines}", "python"), ("", "")],
    )
    def test_fence_language(self, info, language):
        assert fenceLanguage_extract(info) == language

    def test_render_without_rewrite_matches_markdown_it(self):
        md = markdown_make()
        source = "# T\n\n- a\n- b\n\n```py\nx\n```\n\n<p>raw</p>\n"
        assert events_render(md, events_parse(md, source)) == md.render(source)


class TestConvert:
    """Markdown to HTML with highlighting"""

    def test_scenario_three_elements(self, converter):
        html = converter.convert(SCENARIO)

        assert html.startswith("<p>Some prose before the code.</p>\n<pre><code>")
        assert html.endswith("</code></pre>\n<p>Some prose after the code.</p>\n")
        assert html.count("<pre><code>") == 1
        assert '<span class="syn-nb">print</span>' in html
        assert '<span class="syn-mi">1</span>' in html

    def test_no_code_blocks_matches_plain_render(self, converter):
        source = "First paragraph.\n\nSecond *emphasised* paragraph.\n"
        assert converter.convert(source) == converter.convert(source, highlight=False)
        assert converter.convert(source) == markdown_make().render(source)

    def test_unknown_language_plain_text(self, converter):
        html = converter.convert("```no-such-language-xyz\n<tag> & stuff\n```\n")
        assert html == "<pre><code>&lt;tag&gt; &amp; stuff\n</code></pre>\n"

    def test_no_language_plain_text(self, converter):
        html = converter.convert("```\nplain\n```\n")
        assert html == "<pre><code>plain\n</code></pre>\n"

    def test_empty_block_vanishes(self, converter):
        html = converter.convert("Before.\n\n```python\n```\n\nAfter.\n")
        assert html == "<p>Before.</p>\n<p>After.</p>\n"
        assert "<pre>" not in html

    def test_highlight_disabled_uses_default_fence(self, converter):
        html = converter.convert(SCENARIO, highlight=False)
        assert '<pre><code class="language-python">print(1)\n</code></pre>' in html
        assert "syn-" not in html

    def test_indented_code_not_intercepted(self, converter):
        html = converter.convert("    indented\n")
        assert html == "<pre><code>indented\n</code></pre>\n"

    def test_nested_in_list(self, converter):
        html = converter.convert("- item\n\n  ```python\n  x = 1\n  ```\n")
        assert "<li>" in html
        assert '<span class="syn-n">x</span>' in html


class TestExtensions:
    """Parser features beyond CommonMark"""

    def test_strikethrough(self, converter):
        assert "<s>gone</s>" in converter.convert("~~gone~~\n")

    def test_tables(self, converter):
        html = converter.convert("| a | b |\n|---|---|\n| 1 | 2 |\n")
        assert "<table>" in html
        assert "<td>1</td>" in html

    def test_smart_punctuation(self, converter):
        html = converter.convert('"quoted" -- text...\n')
        assert "“quoted”" in html
        assert "…" in html

    def test_class_prefix_from_settings(self, syntaxes):
        settings = AppSettings(_env_file=None, class_prefix="hl-")
        html = Converter(syntaxes, settings=settings).convert("```python\nprint(1)\n```\n")
        assert '<span class="hl-nb">print</span>' in html
        assert "syn-" not in html

    def test_html_classes_match_theme_css(self):
        settings = AppSettings(_env_file=None, class_prefix="hl-")
        catalog = Catalog.load(settings)
        html = Converter(catalog.syntaxes, settings=settings).convert("```python\nprint(1)\n```\n")
        css = catalog.themes.css_render("default")
        assert 'class="hl-nb"' in html
        assert ".hl-nb" in css

    def test_extensions_can_be_disabled(self, syntaxes):
        settings = AppSettings(
            _env_file=None,
            enable_strikethrough=False,
            enable_tables=False,
            enable_smart_punctuation=False,
        )
        html = Converter(syntaxes, settings=settings).convert('~~x~~ "q"\n')
        assert "<s>" not in html
        assert "&quot;q&quot;" in html
