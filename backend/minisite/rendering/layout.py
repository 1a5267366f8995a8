"""Layout — the common HTML shell wrapped around every page fragment.

Invariants:
    - Title, nav state, and timestamp are escaped; the body fragment is inserted as-is
    - Exactly one nav link carries aria-current="page" when the path is a nav target
    - Empty title falls back to the site title

Design Decisions:
    - render_page() returns a finished HTMLResponse; security headers are added by
      the middleware at http.response.start, before any body bytes go out
"""

from datetime import datetime
from html import escape

from fastapi.responses import HTMLResponse

from minisite.config import Settings
from minisite.core.clock import iso_utc, utc_now

NAV_LINKS = (
    ("/", "Home"),
    ("/about", "About"),
    ("/request", "Request"),
    ("/contact", "Contact"),
)


def page_title(title: str, site_title: str) -> str:
    title = title.strip()
    if not title:
        return site_title
    return f"{title} · {site_title}"


def _nav(current_path: str) -> str:
    items = []
    for href, label in NAV_LINKS:
        current = ' aria-current="page"' if href == current_path else ""
        items.append(f'<a href="{escape(href)}"{current}>{escape(label)}</a>')
    return "\n        ".join(items)


def render_layout(
    title: str,
    body: str,
    *,
    current_path: str,
    site_title: str,
    now: datetime | None = None,
) -> str:
    """Full HTML document around a pre-escaped body fragment."""
    stamp = iso_utc(now or utc_now())
    return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{escape(page_title(title, site_title))}</title>
    <link rel="icon" href="/assets/favicon.svg" type="image/svg+xml" />
    <link rel="stylesheet" href="/assets/site.css" />
    <script src="/assets/site.js" defer></script>
  </head>
  <body>
    <header class="site-header">
      <a class="brand" href="/">{escape(site_title)}</a>
      <nav aria-label="Main">
        {_nav(current_path)}
      </nav>
      <button type="button" class="theme-toggle" data-theme-toggle>Theme: System</button>
    </header>
    <main>
{body}
    </main>
    <footer class="site-footer">
      <a href="/healthz">Health</a>
      <a href="/api/time">Time API</a>
      <span>UTC: <time datetime="{escape(stamp)}">{escape(stamp)}</time></span>
    </footer>
  </body>
</html>
"""


def render_page(
    title: str,
    body: str,
    *,
    settings: Settings,
    current_path: str,
    status_code: int = 200,
) -> HTMLResponse:
    return HTMLResponse(
        render_layout(
            title, body,
            current_path=current_path, site_title=settings.site_title,
        ),
        status_code=status_code,
    )
