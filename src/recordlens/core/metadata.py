"""Typed access to record metadata values."""

from collections.abc import Mapping

from recordlens.core.models import MetadataValue

_VARIANT_TYPES = (str, int, float, bool)


def string_field(
    metadata: Mapping[str, object],
    key: str,
    default: str,
) -> str:
    """Read a string-typed metadata field.

    Args:
        metadata: Record metadata.
        key: Field name to read.
        default: Returned when the key is absent or holds a non-string
            variant (int, float, bool).

    Returns:
        The string value, or ``default``.

    Raises:
        TypeError: If the value is not one of the supported variants.
    """
    value = metadata.get(key)
    if value is None:
        return default
    if not isinstance(value, _VARIANT_TYPES):
        raise TypeError(
            f"Unsupported metadata value for {key!r}: {type(value).__name__}"
        )
    if isinstance(value, str):
        return value
    return default


__all__ = ["MetadataValue", "string_field"]
