from typing import Any, Dict

# Marker for "parameter not supplied"; None is a legitimate value to send.
unset = object()


def of(d: Dict[str, Any]) -> Dict[str, Any]:
    """Drop unset entries from a parameter dict."""
    return {k: v for k, v in d.items() if v is not unset}
