from __future__ import annotations

from pathlib import Path

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\xff\xfe"

README_TEMPLATE = '# Associations\n\n{{ partial("has_many", through=true) }}\n\nEnd.\n'

HAS_MANY_PARTIAL = """\
{% if through | default(false) %}
has_many :through variant
{% else %}
plain has_many variant
{% endif %}
{{ partial("footnote") }}
"""

FOOTNOTE_PARTIAL = "See the guides.\n"

PLAIN_NOTES = "Use <%= link_to post.title, post %> and {{ braces }} as-is.\r\n"


def write(path: Path, content: str | bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, str):
        content = content.encode("utf-8")
    path.write_bytes(content)
    return path


def snapshot(root: Path) -> dict[str, bytes]:
    """Relative path to content for every file under ``root``."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }
