import re
from collections import OrderedDict

# Anything outside these becomes a word separator
INVALID_CHARS_RE = re.compile(r'[^A-Za-z0-9_\-]')
SEPARATOR_RE = re.compile(r'[-_]+')
IDENTIFIER_RE = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_]*$')

DEFAULT_NAME = "icon"


class FallbackNames:
    """
    Hands out unique placeholder identifiers for labels that cannot be
    normalized into a valid identifier. One instance per generation run.
    """

    def __init__(self, prefix="iconFallback"):
        self.prefix = prefix
        self.counter = 0

    def next_name(self):
        self.counter += 1
        return f"{self.prefix}{self.counter}"


_default_fallback = FallbackNames()


def split_by_camel_case(text):
    """
    Splits a fragment at lowercase -> uppercase boundaries.
    'AttentionLine' -> ['Attention', 'Line'], 'HTMLParser' -> ['HTMLParser']
    """
    if not text:
        return []

    parts = []
    current = []
    for i, char in enumerate(text):
        if i > 0 and char.isupper() and text[i - 1].islower():
            if current:
                parts.append("".join(current))
                current = []
        current.append(char)

    if current:
        parts.append("".join(current))
    return parts


def is_valid_identifier(name):
    return bool(IDENTIFIER_RE.match(name))


def to_camel_case(label, allocator=None):
    """
    Converts an arbitrary manifest label into a lowerCamel Dart identifier.

    'user-circle' -> 'userCircle', 'Icon A' -> 'iconA', '404' -> 'icon404', '' -> 'icon'
    """
    if not label:
        return DEFAULT_NAME

    cleaned = INVALID_CHARS_RE.sub('_', label)

    words = []
    for fragment in SEPARATOR_RE.split(cleaned):
        if not fragment:
            continue
        for piece in split_by_camel_case(fragment):
            words.append(piece.lower())

    out = []
    for i, word in enumerate(words):
        if i == 0:
            out.append(word)
        else:
            out.append(word[0].upper() + word[1:])
    result = "".join(out)

    if not result:
        result = DEFAULT_NAME

    if result[0].isdigit():
        result = DEFAULT_NAME + result

    if not is_valid_identifier(result):
        result = (allocator or _default_fallback).next_name()

    return result


def resolve_collisions(records):
    """
    Assigns a unique final identifier to every record.

    Records are grouped by their base identifier in input order. The first
    record of a group keeps the base name, the following ones become base2,
    base3, ... A suffixed name that is already taken by another group's base
    (e.g. 'icon-a' twice next to 'icon-a2') skips ahead to the next free number.

    Returns an ordered dict of final identifier -> record.
    """
    groups = OrderedDict()
    for record in records:
        groups.setdefault(record.identifier, []).append(record)

    taken = set(groups)
    resolved = OrderedDict()

    for base, members in groups.items():
        resolved[base] = members[0]

        suffix = 1
        for record in members[1:]:
            suffix += 1
            name = f"{base}{suffix}"
            while name in taken:
                suffix += 1
                name = f"{base}{suffix}"
            taken.add(name)
            resolved[name] = record

    return resolved


def sorted_constants(resolved):
    """(identifier, record) pairs in lexicographic identifier order."""
    return sorted(resolved.items(), key=lambda item: item[0])
