"""
django-travel-blog - Publishing backend for a travel and lifestyle blog.

Features:
- Posts with draft/published/scheduled/archived lifecycle
- Public, private and restricted visibility
- Categories, flat tags and author profiles
- Moderated, threaded comments
- Tiered related-posts ranking with popularity fallback
- Atomic view counting
"""

__version__ = "0.1.0"
