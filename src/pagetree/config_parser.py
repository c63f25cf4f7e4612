"""Parse configuration payloads into key/value mappings."""

from __future__ import annotations

import re

from pagetree.exceptions import InvalidConfiguration, MissingKeyValueDelimiter

CONFIG_ITEM_DELIMITER = ","
CONFIG_KEY_VALUE_DELIMITER = ":"

_ESCAPED_ITEM_DELIMITER = "\\" + CONFIG_ITEM_DELIMITER
_ITEM_SPLIT_RE = re.compile(r"(?<!\\)" + CONFIG_ITEM_DELIMITER)
_QUOTED_VALUE_RE = re.compile(r'^"(?P<value>.*)"$')


def parse_configuration_values(configuration: str | None) -> dict[str, str]:
    """Parse ``key:value, otherkey:othervalue`` into an ordered mapping.

    Items are separated by commas not preceded by a backslash; ``\\,`` keeps a
    literal comma inside a value. Each item is split on its first colon only,
    so values may contain colons (URLs). A value fully enclosed in double
    quotes is unwrapped; unquoted values are kept as they are, surrounding
    whitespace included. Duplicate keys are not rejected, the last one wins.

    Args:
        configuration: The raw configuration payload.

    Returns:
        The configuration values keyed by name, in document order.

    Raises:
        InvalidConfiguration: If the payload is missing or blank.
        MissingKeyValueDelimiter: If an item has no key/value delimiter.
    """
    if configuration is None or not configuration.strip():
        raise InvalidConfiguration("The configuration value should not be blank.")
    return _split_to_keys_and_values(_split_to_key_value_pairs(configuration))


def _split_to_key_value_pairs(configuration: str) -> list[str]:
    pairs = [
        item.replace(_ESCAPED_ITEM_DELIMITER, CONFIG_ITEM_DELIMITER)
        for item in _ITEM_SPLIT_RE.split(configuration)
    ]
    if not all(CONFIG_KEY_VALUE_DELIMITER in pair for pair in pairs):
        raise MissingKeyValueDelimiter(
            "There is at least one configuration entry that doesn't have a key or a value part.",
            configuration,
        )
    return pairs


def _split_to_keys_and_values(pairs: list[str]) -> dict[str, str]:
    values: dict[str, str] = {}
    for pair in pairs:
        key, raw_value = pair.lstrip().split(CONFIG_KEY_VALUE_DELIMITER, 1)
        values[key] = _parse_value(raw_value)
    return values


def _parse_value(value: str) -> str:
    match = _QUOTED_VALUE_RE.match(value)
    return match.group("value") if match else value
