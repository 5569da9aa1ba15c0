"""marklet renderers.

Available Renderers:
- HtmlRenderer: Renders a token stream to an HTML fragment

"""

from marklet.renderers.html import HtmlRenderer, RenderContext

__all__ = ["HtmlRenderer", "RenderContext"]
