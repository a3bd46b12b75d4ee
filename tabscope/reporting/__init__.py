from .markdown import MarkdownReport, render_markdown, write_json

__all__ = ["MarkdownReport", "render_markdown", "write_json"]
