from datetime import datetime, timezone
from typing import Any

import markdown


def utc_now_iso() -> str:
    """Current UTC time in ISO 8601 with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def markdown_to_html(text: str | None) -> str:
    """Render post content written in markdown to HTML."""
    if not text:
        return ""
    return markdown.markdown(text, extensions=["fenced_code", "tables", "nl2br"])


def numeric_id(value: Any) -> Any:
    """Digit-only ids become ints ("12" -> 12, "0" -> 0); empty values become None, others are kept."""
    if value is None or value == "":
        return None
    return int(value) if str(value).isdigit() else value


def sanitize_email(email: str | None) -> str:
    """Strip the "+tag" part of an address: john+work@x.com -> john@x.com."""
    if not email or "@" not in email:
        return ""
    local, _, domain = email.partition("@")
    local = local.split("+", 1)[0]
    return f"{local}@{domain}"


def print_summary(sent: int, failed: int, skipped: int = 0) -> None:
    """Print processing summary."""
    print(f"\n{'=' * 60}")
    print(f"[{datetime.now()}] Processing Complete!")
    print(f"{'=' * 60}")
    print(f"✓ Sent: {sent}")
    print(f"⊘ Skipped: {skipped}")
    print(f"✗ Failed: {failed}")
    print(f"{'=' * 60}\n")
