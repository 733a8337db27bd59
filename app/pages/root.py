"""Root landing page with API links."""

from html import escape


def render_root_page(app_name: str) -> str:
    """Return HTML for the root landing page."""
    name = escape(app_name)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <style>
        body {{ font-family: system-ui, sans-serif; max-width: 560px; margin: 3rem auto; padding: 0 1rem; }}
        a {{ color: #2563eb; }}
        code {{ background: #f3f4f6; padding: 0.1rem 0.3rem; }}
    </style>
</head>
<body>
    <h1>{name}</h1>
    <p>Opportunity discovery API: tags and session-aware endpoints.</p>
    <ul>
        <li><a href="/docs">Interactive API docs</a></li>
        <li><a href="/redoc">ReDoc</a></li>
        <li><code>GET /api/v1/health</code></li>
    </ul>
</body>
</html>
"""
