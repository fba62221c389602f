# Output formatters for CLI commands

import json

from ..classifier import Classification


def _content_type_text(classification: Classification) -> str:
    content_type = classification.content_type
    if isinstance(content_type, bytes):
        return content_type.decode("ascii", errors="replace")
    return content_type


def classification_to_dict(classification: Classification) -> dict:
    return {
        "content_type": _content_type_text(classification),
        "essence": classification.essence,
        "compressible": classification.compressible,
        "reason": classification.reason.value,
    }


def format_classifications_text(classifications: list[Classification]) -> str:
    """
    Format classifications as aligned plain text, one per line.

    Returns - Formatted text string
    """
    if not classifications:
        return "No media types given.\n"

    width = max(len(_content_type_text(c)) for c in classifications)
    output = []
    for c in classifications:
        verdict = "compressible" if c.compressible else "not compressible"
        output.append(f"{_content_type_text(c):<{width}}  {verdict} ({c.reason.value})")
    return "\n".join(output) + "\n"


def format_essences_text(essences: list[str]) -> str:
    if not essences:
        return "No media types found.\n"
    return "\n".join(essences) + "\n"


def format_info_text(info: dict) -> str:
    output = [f"{key.replace('_', ' ').capitalize()}: {value}" for key, value in info.items()]
    return "\n".join(output) + "\n"


def format_json(data) -> str:
    """
    Format data as JSON.

    Returns - JSON string
    """
    return json.dumps(data, indent=2, default=str) + "\n"
