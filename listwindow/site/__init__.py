"""Blog-side consumers of the virtualized post list."""

from listwindow.site.code_block import ClipboardPort, CodeBlockCopyButton
from listwindow.site.posts import PostSummary, format_post_date, post_sequence, sort_posts
from listwindow.site.theme import PreferenceStore, ThemeToggle

__all__ = [
    "ClipboardPort",
    "CodeBlockCopyButton",
    "PostSummary",
    "PreferenceStore",
    "ThemeToggle",
    "format_post_date",
    "post_sequence",
    "sort_posts",
]
