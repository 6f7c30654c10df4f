"""Shared test helpers for snappydoo."""

PNG_BYTES = (
    b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01'
    b'\x00\x00\x00\x01\x08\x02\x00\x00\x00\x90wS\xde\x00\x00'
    b'\x00\x0cIDATx\x9cc\x00\x01\x00\x00\x05\x00\x01\r\n-'
    b'\xb4\x00\x00\x00\x00IEND\xaeB`\x82'
)

# A single message as the snapshot serializer prints it
BUTTON_SNAPSHOT = '\nObject {\n  "text": "hi",\n}\n'

# A message group with one attachment
ATTACHMENT_SNAPSHOT = (
    '\nObject {\n'
    '  "attachments": Array [\n'
    '    Object {\n'
    '      "color": "good",\n'
    '      "text": "Deployed",\n'
    '    },\n'
    '  ],\n'
    '}\n'
)


def make_snap_file(entries: dict[str, str]) -> str:
    """Build the text of a Jest snapshot file from name -> serialized value."""
    lines = ["// Jest Snapshot v1, https://goo.gl/fbAQLP", ""]
    for name, value in entries.items():
        lines.append(f"exports[`{name}`] = `{value}`;")
        lines.append("")
    return "\n".join(lines)
