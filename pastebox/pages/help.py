"""Help page served at GET /: plain text for curl, HTML for browsers."""

from html import escape


def _expiry_line(expiration_secs: int | None) -> str:
    if expiration_secs is None:
        return "Pastes do not expire."
    return f"Pastes are deleted {expiration_secs} seconds after upload."


def render_help_text(base_url: str, expiration_secs: int | None) -> str:
    """Return the usage guide as plain text (for terminals)."""
    base = base_url.rstrip("/")
    return f"""\
pastebox: disposable file hosting

UPLOAD
    curl -F 'file=@notes.txt' {base}/

    Responds 201 with JSON {{"id", "url", "delete_key"}}. Only the first
    multipart field is stored; it must carry a file name and content type.

FETCH
    curl {base}/<id>/<file name>
    curl -L {base}/<id>          (redirects to the URL with the file name)

DELETE
    curl -X DELETE '{base}/<id>?delete_key=<delete_key>'

    The delete key is shown once, in the upload response.

EXPIRY
    {_expiry_line(expiration_secs)}
"""


def render_help_page(app_name: str, base_url: str, expiration_secs: int | None) -> str:
    """Return HTML for the help page."""
    body = escape(render_help_text(base_url, expiration_secs))
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(app_name)}</title>
    <style>
        body {{
            font-family: ui-monospace, 'JetBrains Mono', monospace;
            margin: 0;
            background: #000;
            color: #e0e0e0;
            padding: 2rem 1rem;
        }}
        pre {{
            max-width: 80ch;
            margin: 0 auto;
            white-space: pre-wrap;
            line-height: 1.5;
        }}
    </style>
</head>
<body>
    <pre>{body}</pre>
</body>
</html>
""".strip()
