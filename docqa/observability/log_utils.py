"""
Logging utilities.

Helper for previewing user text in log lines without dumping whole
documents or questions.

System role: Logging helper functions
"""


def preview(text: str, length: int = 50) -> str:
    """Short single-line preview of user text for log messages."""
    flat = " ".join(text.split())
    if len(flat) <= length:
        return flat
    return flat[:length] + "..."
