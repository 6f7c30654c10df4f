"""Reader for stored Jest snapshot files.

A snapshot file is a sequence of statements of the form::

    exports[`<name>`] = `<serialized value>`;

Both parts are template literals in which backticks, backslashes and
``${`` are escaped with a backslash. The file is read as text; it is
never executed.
"""

from __future__ import annotations

import re

_EXPORT_RE = re.compile(
    r"^exports\[`((?:[^`\\]|\\.)*)`\]\s*=\s*`((?:[^`\\]|\\.)*)`;",
    re.MULTILINE | re.DOTALL,
)
_ESCAPE_RE = re.compile(r"\\([\\`$])")


def unescape_template(text: str) -> str:
    """Undo the template-literal escaping applied when snapshots are written."""
    return _ESCAPE_RE.sub(r"\1", text)


def parse_snapshot_file(content: str) -> dict[str, str]:
    """Return the mapping of snapshot name to raw serialized text.

    Entries keep their file order; a repeated name keeps the last value.
    """
    snapshots: dict[str, str] = {}
    for match in _EXPORT_RE.finditer(content):
        name = unescape_template(match.group(1))
        snapshots[name] = unescape_template(match.group(2))
    return snapshots
