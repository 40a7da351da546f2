GENERATOR_NAME = "generate_iconfont"

DART_ESCAPES = {
    '\\': '\\\\',
    "'": "\\'",
    '$': '\\$',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
    '\b': '\\b',
    '\f': '\\f',
}


def dart_string(text):
    """Single-quoted Dart string literal."""
    out = []
    for char in text:
        if char in DART_ESCAPES:
            out.append(DART_ESCAPES[char])
        elif ord(char) < 0x20:
            out.append(f"\\u{{{ord(char):x}}}")
        else:
            out.append(char)
    return "'" + "".join(out) + "'"


def comment_text(text):
    # Keep doc comments on a single line
    return text.replace('\\', '\\\\').replace('\r', '\\r').replace('\n', '\\n')


def hex_code(code_point):
    return f"0x{code_point:04x}"


def render_dart_code(constants, config):
    """
    Renders the Dart source for the icon class.

    constants: (identifier, IconRecord) pairs in the order they should appear,
    as returned by iconfont_names.sorted_constants().
    """
    class_name = config.class_name
    family = dart_string(config.font_family)

    lines = [
        "/// Auto-generated icon font constants. Do not edit by hand.",
        f"/// Generated by {GENERATOR_NAME}",
        f"/// Total icons: {len(constants)}",
        "",
        "import 'package:flutter/material.dart';",
        "",
        f"/// {class_name} icon font",
        f"/// Font family: {comment_text(config.font_family)}",
        f"class {class_name} {{",
        f"  {class_name}._();",
        "",
        "  /// Font family name",
        f"  static const String fontFamily = {family};",
        "",
    ]

    for identifier, icon in constants:
        lines.append(f"  /// {comment_text(icon.original_label)}")
        lines.append(f"  static const IconData {identifier} = IconData(")
        lines.append(f"    {hex_code(icon.code_point)},")
        lines.append(f"    fontFamily: {family},")
        lines.append("  );")
        lines.append("")

    if config.generate_extensions:
        lines.append("  /// All icons")
        lines.append("  static const List<IconData> allIcons = [")
        for identifier, _ in constants:
            lines.append(f"    {identifier},")
        lines.append("  ];")
        lines.append("")

        lines.append("  /// Looks up an icon by its original manifest name")
        lines.append("  static IconData? getByName(String name) {")
        lines.append("    switch (name) {")
        seen = set()
        for identifier, icon in constants:
            # Dart rejects duplicate case labels
            if icon.original_label in seen:
                continue
            seen.add(icon.original_label)
            lines.append(f"      case {dart_string(icon.original_label)}: return {identifier};")
        lines.append("      default: return null;")
        lines.append("    }")
        lines.append("  }")

    lines.append("}")

    if config.generate_extensions:
        lines.extend([
            "",
            "/// IconData helpers",
            f"extension {class_name}Extension on IconData {{",
            "  /// Wraps the icon in an Icon widget",
            "  Icon icon({",
            "    double? size,",
            "    Color? color,",
            "    String? semanticLabel,",
            "    TextDirection? textDirection,",
            "  }) {",
            "    return Icon(",
            "      this,",
            "      size: size,",
            "      color: color,",
            "      semanticLabel: semanticLabel,",
            "      textDirection: textDirection,",
            "    );",
            "  }",
            "}",
        ])

    return "\n".join(lines) + "\n"


def render_usage_example(config):
    class_name = config.class_name
    out = [
        "Usage:",
        "",
        "import 'package:flutter/material.dart';",
        "import 'generated/iconfont.dart';",
        "",
        "// Basic",
        f"Icon({class_name}.iconName)",
        "",
        "// Styled",
        "Icon(",
        f"  {class_name}.iconName,",
        "  size: 24,",
        "  color: Colors.blue,",
        ")",
        "",
    ]
    if config.generate_extensions:
        out.extend([
            "// Extension helper",
            f"{class_name}.iconName.icon(",
            "  size: 24,",
            "  color: Colors.red,",
            ")",
            "",
            "// Lookup by manifest name",
            f"final icon = {class_name}.getByName('icon-name');",
            "",
        ])
    out.extend([
        "Remember to declare the font in pubspec.yaml:",
        "",
        "flutter:",
        "  fonts:",
        f"    - family: {config.font_family}",
        "      fonts:",
        "        - asset: assets/fonts/iconfont.ttf",
    ])
    return "\n".join(out)
