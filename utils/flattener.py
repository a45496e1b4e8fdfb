"""Flattening of nested JSON objects into a single-level mapping."""


def flatten(value, prefix="", separator="_"):
    """Flatten a nested JSON object into a single-level dict.

    Keys of nested objects are joined onto their parent's key with ``separator``.
    Only objects (dicts) are descended into; lists are kept as leaf values, even
    when they contain objects, so array order and contents survive untouched.

    Two different paths can join to the same key, e.g. ``{"a_b": 1, "a": {"b": 2}}``.
    The entry reached later in the input's key order overwrites the earlier one
    and keeps the earlier key's position.

    Args:
        value: Parsed JSON object to flatten
        prefix: Key path of ``value`` within the enclosing object
        separator: String placed between joined keys

    Returns:
        dict: Flat mapping from joined key to scalar or list value
    """
    flattened = {}

    for key, item in value.items():
        new_key = f"{prefix}{separator}{key}" if prefix else key

        if isinstance(item, dict):
            flattened.update(flatten(item, new_key, separator))
        else:
            flattened[new_key] = item

    return flattened
