"""
Sitemap for the public pages of the quiz site.
"""
from django.contrib.sitemaps import Sitemap
from django.utils import timezone


class StaticPagesSitemap(Sitemap):
    """Front-end pages with individual priorities."""

    # (path, changefreq, priority)
    _pages = [
        ("/", "daily", 1.0),
        ("/quiz", "weekly", 0.9),
        ("/result", "weekly", 0.8),
        ("/community-results", "daily", 0.8),
        ("/suggest-politicians", "daily", 0.7),
    ]

    def items(self):
        return self._pages

    def location(self, item):
        return item[0]

    def changefreq(self, item):
        return item[1]

    def priority(self, item):
        return item[2]

    def lastmod(self, item):
        return timezone.now()
