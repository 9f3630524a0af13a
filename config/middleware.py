"""
Request filtering and response headers for the whole site.

Requests for deployment artefacts (env files, package manifests, VCS folders,
source maps, logs, backups, editor swap files) answer 404 before any view runs.
Probes for well-known admin or debug paths are bounced to the home page; the
real Django admin lives under ``settings.ADMIN_URL``.
"""
import logging
import re

from django.http import HttpResponseNotFound, HttpResponseRedirect

logger = logging.getLogger(__name__)

BLOCKED_PATH_RE = re.compile(
    r"""^/(
        \.env(\.[\w-]+)?
      | package(-lock)?\.json
      | (next|tailwind)\.config\.(js|ts)
      | postcss\.config\.mjs
      | (node_modules|\.next|\.git|\.well-known)(/.*)?
      | .*\.(log|map|bak|backup|swp|tmp)
      | .*~
    )$""",
    re.X,
)

REDIRECT_PREFIXES = ("/admin/", "/api/admin/", "/debug/", "/logs/")
REDIRECT_ROOTS = {prefix.rstrip("/") for prefix in REDIRECT_PREFIXES}


class SensitivePathMiddleware:
    """
    Run right after SecurityMiddleware so blocked paths never reach WhiteNoise
    or the URL resolver.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        path = request.path
        if BLOCKED_PATH_RE.match(path):
            logger.info("Blocked request for sensitive path %s", path)
            return self._with_headers(HttpResponseNotFound())
        if path.startswith(REDIRECT_PREFIXES) or path in REDIRECT_ROOTS:
            return self._with_headers(HttpResponseRedirect("/"))
        return self._with_headers(self.get_response(request))

    def _with_headers(self, response):
        response.setdefault("X-DNS-Prefetch-Control", "off")
        response.setdefault("X-Frame-Options", "DENY")
        response.setdefault("X-Content-Type-Options", "nosniff")
        response.setdefault("Referrer-Policy", "origin-when-cross-origin")
        return response
