"""Convert Markdown to an HTML fragment in one call."""

from marklet import markdown_to_html

html = markdown_to_html(b"# Hello\n**World**\n- one\n- two")
print(html)
