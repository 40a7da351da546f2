import json
import re
from dataclasses import dataclass

import jsonschema
from jsonschema.exceptions import best_match

from iconfont_errors import (
    MalformedEntryError,
    ManifestParseError,
    MissingInputFileError,
    UnsupportedSchemaError,
)
from iconfont_names import to_camel_case

# Checked in order, first usable value wins
LABEL_KEYS = ("font_class", "name", "icon_name", "class")
CODE_POINT_KEYS = ("unicode_decimal", "unicode", "code", "codepoint")

HEX_PREFIXES = ("0x", "0X", "\\u", "U+")
NON_HEX_RE = re.compile(r'[^0-9a-fA-F]')
DECIMAL_RE = re.compile(r'^[0-9]+$')

GLYPH_ENTRY_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Icon font glyph entry",
    "type": "object",
    "allOf": [
        {
            "description": "At least one label key",
            "anyOf": [{"required": [key]} for key in LABEL_KEYS],
        },
        {
            "description": "At least one code point key",
            "anyOf": [{"required": [key]} for key in CODE_POINT_KEYS],
        },
    ],
}

_entry_validator = jsonschema.Draft7Validator(GLYPH_ENTRY_SCHEMA)


@dataclass(frozen=True)
class IconRecord:
    identifier: str
    original_label: str
    code_point: int


def parse_code_point(value):
    """
    Accepts a JSON integer, a hex string ('0xe600', '\\ue600', 'U+E600')
    or a decimal string ('58880').
    """
    if isinstance(value, bool):
        raise MalformedEntryError(f"code point must be a number or string, got {value!r}")

    if isinstance(value, int):
        code_point = value
    elif isinstance(value, str):
        text = value.strip()
        if text.startswith(HEX_PREFIXES):
            digits = NON_HEX_RE.sub('', text)
            if not digits:
                raise MalformedEntryError(f"invalid hex code point {value!r}")
            code_point = int(digits, 16)
        elif DECIMAL_RE.match(text):
            code_point = int(text, 10)
        else:
            raise MalformedEntryError(f"invalid code point {value!r}")
    else:
        raise MalformedEntryError(f"code point must be a number or string, got {value!r}")

    if code_point < 0:
        raise MalformedEntryError(f"negative code point {value!r}")
    return code_point


def get_label(item):
    for key in LABEL_KEYS:
        value = item.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def get_code_point_value(item):
    for key in CODE_POINT_KEYS:
        value = item.get(key)
        if value is not None:
            return value
    return None


def parse_glyph(item, allocator=None):
    """Turns one raw manifest entry into an IconRecord, or raises MalformedEntryError."""
    error = best_match(_entry_validator.iter_errors(item))
    if error is not None:
        raise MalformedEntryError(error.message)

    label = get_label(item)
    if label is None:
        raise MalformedEntryError(f"no non-empty label in any of {', '.join(LABEL_KEYS)}")

    raw_code = get_code_point_value(item)
    if raw_code is None:
        raise MalformedEntryError(f"no code point in any of {', '.join(CODE_POINT_KEYS)}")

    return IconRecord(
        identifier=to_camel_case(label, allocator),
        original_label=label,
        code_point=parse_code_point(raw_code),
    )


def select_glyphs(data):
    """
    Finds the glyph list. Supported layouts, tried in order:
      {"glyphs": [...]}   iconfont.cn export
      {"icons": [...]}
      [...]
    """
    if isinstance(data, dict):
        if isinstance(data.get("glyphs"), list):
            return data["glyphs"]
        if isinstance(data.get("icons"), list):
            return data["icons"]
    elif isinstance(data, list):
        return data
    raise UnsupportedSchemaError("unsupported schema: expected a 'glyphs' or 'icons' array, or a top-level array")


def parse_manifest(text, allocator=None):
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestParseError(f"invalid JSON: {e}") from e
    except RecursionError as e:
        raise ManifestParseError("invalid JSON: nested too deeply") from e

    glyphs = select_glyphs(data)

    icons = []
    for index, item in enumerate(glyphs):
        try:
            icons.append(parse_glyph(item, allocator))
        except MalformedEntryError as e:
            print(f"Warning: Skipping glyph #{index}: {e}")

    return icons


def load_manifest(path, allocator=None):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise ManifestParseError(f"{path} is not UTF-8 text: {e}") from e
    except OSError as e:
        raise MissingInputFileError(f"cannot read {path}: {e.strerror or e}") from e

    return parse_manifest(content, allocator)
