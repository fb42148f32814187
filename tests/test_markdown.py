"""Tests for HTML to Markdown conversion."""

from bs4 import BeautifulSoup

from docusaurus_scraper.extraction.markdown import callout_type, detect_language, html_to_markdown


def _tag(html: str):
    return BeautifulSoup(html, "html.parser").find()


class TestCodeBlocks:
    """Tests for the pre/code override."""

    def test_language_tagged_fence_keeps_raw_text(self):
        code = 'def greet(name):\n    return f"Hello, {name}!"  # *not* emphasis'
        html = f'<pre><code class="language-python">{code}</code></pre>'

        markdown = html_to_markdown(html)

        assert f"```python\n{code}\n```" in markdown

    def test_highlighted_spans_are_flattened(self):
        html = (
            '<pre class="prism"><code class="language-js">'
            '<span class="token keyword">const</span> x = <span class="token number">1</span>;'
            "</code></pre>"
        )
        assert html_to_markdown(html) == "```js\nconst x = 1;\n```"

    def test_no_language_class(self):
        html = "<pre><code>plain text</code></pre>"
        assert html_to_markdown(html) == "```\nplain text\n```"

    def test_pre_without_code(self):
        assert html_to_markdown("<pre>echo hi</pre>") == "```\necho hi\n```"

    def test_detect_language(self):
        assert detect_language(_tag('<code class="hljs language-bash"></code>')) == "bash"
        assert detect_language(_tag('<code class="language-"></code>')) == ""
        assert detect_language(None) == ""


class TestCallouts:
    """Tests for the callout/admonition override."""

    def test_callout_warning(self):
        html = '<div class="callout callout-warning"><p>Back up your data <strong>first</strong>.</p></div>'

        markdown = html_to_markdown(html)

        assert markdown.startswith(":::warning\n")
        assert "Back up your data **first**." in markdown
        assert markdown.endswith("\n:::")

    def test_admonition_defaults_to_note(self):
        markdown = html_to_markdown('<div class="admonition"><p>Remember this.</p></div>')
        assert markdown == ":::note\nRemember this.\n:::"

    def test_callout_is_its_own_paragraph(self):
        html = (
            "<p>Before</p>"
            '<div class="admonition admonition-tip"><p>Use the CLI.</p></div>'
            "<p>After</p>"
        )
        assert html_to_markdown(html) == "Before\n\n:::tip\nUse the CLI.\n:::\n\nAfter"

    def test_callout_type(self):
        assert callout_type(_tag('<aside class="callout callout-danger"></aside>')) == "danger"
        assert callout_type(_tag('<div class="admonition-title"></div>')) is None
        assert callout_type(_tag("<div></div>")) is None


class TestDefaults:
    """Tests for the default conversion settings."""

    def test_atx_headings(self):
        assert html_to_markdown("<h1>Title</h1><h3>Sub</h3>") == "# Title\n\n### Sub"

    def test_hyphen_bullets(self):
        markdown = html_to_markdown("<ul><li>One</li><li>Two</li></ul>")
        assert markdown.splitlines() == ["- One", "- Two"]

    def test_links(self):
        assert html_to_markdown('<p><a href="/docs/a">Docs</a></p>') == "[Docs](/docs/a)"
