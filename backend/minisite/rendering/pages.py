"""Page Fragments — body markup for each route, inserted into the layout.

Invariants:
    - Each builder returns pre-escaped HTML; callers pass raw values
    - Error fragments include diagnostics only when given a detail pair
"""

from html import escape

from minisite.core.domain_types import CsrfToken, Flash
from minisite.core.request_info import RequestInfo


def _dl(rows: list[tuple[str, str | None]], missing: str = "(none)") -> str:
    items = "\n".join(
        f"        <dt>{escape(label)}</dt><dd><code>"
        f"{escape(value) if value else escape(missing)}</code></dd>"
        for label, value in rows
    )
    return f'      <dl class="facts">\n{items}\n      </dl>'


def home_fragment() -> str:
    return """      <h1>It works</h1>
      <div class="box">
        <p>This service is running. A few places to look around:</p>
        <ul>
          <li><a href="/about">About</a>: runtime details</li>
          <li><a href="/api/time">Time API</a>: current time as JSON</li>
          <li><a href="/healthz">Health check</a>: plain-text probe</li>
          <li><a href="/request">Request</a>: what the server saw</li>
          <li><a href="/contact">Contact</a>: a CSRF-protected form</li>
        </ul>
      </div>"""


def about_fragment(runtime: str, server_software: str, interface: str) -> str:
    return "\n".join([
        "      <h1>About</h1>",
        '      <div class="box">',
        "        <p>A small server-rendered site with a shared layout and strict headers.</p>",
        _dl([
            ("Python", runtime),
            ("Server", server_software),
            ("Interface", interface),
        ], missing="unknown"),
        "      </div>",
    ])


def request_fragment(info: RequestInfo) -> str:
    header_rows = "\n".join(
        f"          <tr><th scope=\"row\">{escape(name)}</th>"
        f"<td><code>{escape(value)}</code></td></tr>"
        for name, value in info.headers.sorted_items()
    )
    return "\n".join([
        "      <h1>Request</h1>",
        '      <div class="box">',
        _dl([
            ("Method", info.method),
            ("Path", info.path),
            ("Query string", info.query_string),
            ("Remote address", info.remote_addr),
            ("X-Forwarded-For", info.forwarded_for),
        ]),
        "      </div>",
        "      <h2>Headers</h2>",
        '      <table class="headers">',
        "        <thead><tr><th scope=\"col\">Name</th><th scope=\"col\">Value</th></tr></thead>",
        "        <tbody>",
        header_rows,
        "        </tbody>",
        "      </table>",
    ])


def flash_fragment(flash: Flash | None) -> str:
    if flash is None:
        return ""
    return (
        f'      <p class="flash flash-{escape(flash.level.value)}" role="status">'
        f"{escape(flash.text)}</p>"
    )


def contact_fragment(csrf_token: CsrfToken, flash: Flash | None) -> str:
    parts = ["      <h1>Contact</h1>"]
    if flash is not None:
        parts.append(flash_fragment(flash))
    parts.append(f"""      <form class="box" method="post" action="/contact">
        <input type="hidden" name="csrf_token" value="{escape(csrf_token)}" />
        <label>Name <input type="text" name="name" maxlength="200" required /></label>
        <label>Message <textarea name="message" rows="5" maxlength="5000" required></textarea></label>
        <button type="submit">Send</button>
      </form>
      <p class="note">Messages are acknowledged but not stored or sent anywhere.</p>""")
    return "\n".join(parts)


def not_found_fragment(path: str) -> str:
    return f"""      <h1>Not found</h1>
      <div class="box">
        <p>No page at <code>{escape(path)}</code>.</p>
        <p><a href="/">Back home</a></p>
      </div>"""


def error_fragment(
    message: str, detail: tuple[str, str] | None = None,
) -> str:
    """Generic error body; detail is (type name, message) in debug mode only."""
    parts = [
        "      <h1>Something went wrong</h1>",
        '      <div class="box">',
        f"        <p>{escape(message)}</p>",
    ]
    if detail is not None:
        error_type, error_message = detail
        parts.append(
            f'        <pre class="debug"><strong>{escape(error_type)}</strong>: '
            f"{escape(error_message)}</pre>",
        )
    parts.append("      </div>")
    return "\n".join(parts)
