class IconFontError(RuntimeError):
    pass


class ManifestParseError(IconFontError):
    """The manifest could not be decoded or has no usable glyph list."""


class UnsupportedSchemaError(ManifestParseError):
    pass


class MalformedEntryError(IconFontError):
    """A single glyph entry is unusable. Reported and skipped, never fatal."""


class MissingInputFileError(IconFontError):
    pass


class WriteFailureError(IconFontError):
    pass
