"""Tredumo CMS — content and media API for the Tredumo marketing site.

Serves pages, blog posts, testimonials, and media references to the
public site, and lets admins manage them behind token auth.
"""

__version__ = "0.1.0"
