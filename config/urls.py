"""
URL configuration for the political compass project.

The JSON API lives under ``/api/``; the admin is mounted at ``settings.ADMIN_URL``.
"""
from django.conf import settings
from django.contrib import admin
from django.contrib.sitemaps.views import sitemap
from django.urls import include, path

from compass.sitemaps import StaticPagesSitemap

sitemaps = {
    "static": StaticPagesSitemap,
}

urlpatterns = [
    path(settings.ADMIN_URL, admin.site.urls),
    path("sitemap.xml", sitemap, {"sitemaps": sitemaps}, name="sitemap"),
    path("api/suggestions/", include("suggestions.urls")),
    path("api/", include("compass.urls")),
]
