#!/usr/bin/env python3
"""
Generates a Flutter icon font class from an iconfont.json manifest.

Reads the glyph list (iconfont.cn 'glyphs' export, an 'icons' object, or a
plain array), turns every glyph name into a lowerCamel constant and writes a
Dart file with one IconData per glyph.
"""
import os
import sys
import stat
import argparse
import tempfile
import traceback
from dataclasses import dataclass

from iconfont_errors import IconFontError, MissingInputFileError, WriteFailureError
from iconfont_manifest import load_manifest
from iconfont_names import FallbackNames, is_valid_identifier, resolve_collisions, sorted_constants
from iconfont_render import render_dart_code, render_usage_example

VERSION = "1.0.0"

DEFAULT_INPUT = "assets/fonts/iconfont.json"
DEFAULT_OUTPUT = "lib/generated/iconfont.dart"
DEFAULT_CLASS_NAME = "IconFont"
DEFAULT_FONT_FAMILY = "ComIcon"

STATUS_WRITTEN = "written"
STATUS_MISSING_INPUT = "missing_input"
STATUS_EMPTY = "empty"


@dataclass(frozen=True)
class GeneratorConfig:
    input_file: str = DEFAULT_INPUT
    output_file: str = DEFAULT_OUTPUT
    class_name: str = DEFAULT_CLASS_NAME
    font_family: str = DEFAULT_FONT_FAMILY
    generate_extensions: bool = False


@dataclass(frozen=True)
class GenerationResult:
    status: str
    output_path: str = None
    icon_count: int = 0


def check_project_root(cwd):
    if not os.path.exists(os.path.join(cwd, "pubspec.yaml")):
        print("Warning: Current directory is not a Flutter project root (no pubspec.yaml).")
        print("Hint: run this command from the directory containing pubspec.yaml")


def output_mode(path):
    if os.path.exists(path):
        return stat.S_IMODE(os.stat(path).st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_output(path, content):
    """Writes via a temp file in the target directory so a failure never leaves a partial file."""
    tmp_path = None
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=os.path.dirname(path) or ".", prefix=".iconfont-", suffix=".tmp"
        )
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(content)
        # mkstemp creates 0600; keep the existing file's mode or follow the umask
        os.chmod(tmp_path, output_mode(path))
        os.replace(tmp_path, path)
    except (OSError, ValueError) as e:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise WriteFailureError(f"cannot write {path}: {e}") from e


def generate(config, cwd=None):
    print("Generating Flutter icon font file...")

    cwd = cwd or os.getcwd()
    print(f"Working directory: {cwd}")
    check_project_root(cwd)

    input_path = os.path.join(cwd, config.input_file)
    output_path = os.path.join(cwd, config.output_file)

    print("Reading icon font manifest...")
    try:
        icons = load_manifest(input_path, FallbackNames())
    except MissingInputFileError as e:
        print(f"Error: Input file not found - {input_path} ({e})", file=sys.stderr)
        print("Hint: make sure iconfont.json exists at the given path", file=sys.stderr)
        return GenerationResult(STATUS_MISSING_INPUT)

    if not icons:
        print("Warning: No icon data found, nothing written.")
        return GenerationResult(STATUS_EMPTY)

    print("Generating icon constants...")
    constants = sorted_constants(resolve_collisions(icons))
    dart_code = render_dart_code(constants, config)

    write_output(output_path, dart_code)

    print(f" -> Generated {output_path}")
    print(f"Processed {len(constants)} icons.")
    print()
    print(render_usage_example(config))

    return GenerationResult(STATUS_WRITTEN, output_path, len(constants))


def class_name_arg(value):
    if not is_valid_identifier(value):
        raise argparse.ArgumentTypeError(f"'{value}' is not a valid Dart class name")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog="generate-iconfont",
        description="Generate a Flutter icon font Dart class from an iconfont.json manifest.",
        epilog=(
            "Supported JSON layouts: iconfont.cn export ('glyphs' array), "
            "an object with an 'icons' array, or a top-level array."
        ),
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-i", "--input", default=DEFAULT_INPUT,
                        help=f"Input JSON manifest (default: {DEFAULT_INPUT})")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT,
                        help=f"Output Dart file (default: {DEFAULT_OUTPUT})")
    parser.add_argument("-c", "--class-name", default=DEFAULT_CLASS_NAME, type=class_name_arg,
                        help=f"Generated class name (default: {DEFAULT_CLASS_NAME})")
    parser.add_argument("-f", "--font-family", default=DEFAULT_FONT_FAMILY,
                        help=f"Font family name (default: {DEFAULT_FONT_FAMILY})")
    parser.add_argument("--extensions", dest="extensions", action="store_true",
                        help="Also generate allIcons, getByName() and the IconData extension")
    parser.add_argument("--no-extensions", dest="extensions", action="store_false",
                        help="Do not generate helpers (default)")
    parser.set_defaults(extensions=False)
    return parser


def config_from_args(args):
    return GeneratorConfig(
        input_file=args.input,
        output_file=args.output,
        class_name=args.class_name,
        font_family=args.font_family,
        generate_extensions=args.extensions,
    )


def main(argv=None):
    args = build_parser().parse_args(argv)

    print(f"Flutter IconFont Generator v{VERSION}")
    print("=" * 50)

    try:
        result = generate(config_from_args(args))
    except IconFontError as e:
        print(f"Error: Generation failed: {e}", file=sys.stderr)
        if os.environ.get("DEBUG") == "true":
            traceback.print_exc()
        return 1

    if result.status == STATUS_MISSING_INPUT:
        return 1

    print("=" * 50)
    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
