#!/usr/bin/env python3
"""
tailorcss command line
----------------------
Scans HTML files for shorthand utility classes (pt30, w1200, mb30em, ...)
and writes or prints the matching CSS.

Typical usage:
    tailorcss templates/ --output assets/css/tailored.css --minify

Options can also be read from a JSON file; flags given on the command line
take precedence:
    tailorcss index.html --config tailor.json
"""

import argparse
import json
import sys

from .options import Options, load_options
from .tailor import generate_path_css


def build_parser():
    parser = argparse.ArgumentParser(description='Generate CSS from shorthand utility classes in HTML')
    parser.add_argument('paths', nargs='+', help='HTML files or directories to scan (recursively)')
    parser.add_argument('--output', help='CSS file to write, e.g. assets/css/tailored.css')
    parser.add_argument('--config', help='JSON file with generation options')
    parser.add_argument('--minify', action='store_true', default=None,
                        help='Use the minified CSS for output')
    parser.add_argument('--important', action='store_true', default=None,
                        help='Append !important to every generated value')
    parser.add_argument('--tab-spacing', type=int, help='Indent width of formatted CSS')
    parser.add_argument('--newline', help='Newline sequence used in formatted CSS')
    parser.add_argument('--json', action='store_true',
                        help='Print the generated rules as JSON instead of CSS')
    return parser


def options_from_args(args):
    """Layer the command line flags over the defaults or the config file"""
    options = load_options(args.config) if args.config else Options()

    overrides = {
        'output_path': args.output,
        'minify_output': args.minify,
        'set_important': args.important,
        'tab_spacing': args.tab_spacing,
        'new_line_char': args.newline,
    }
    return options.merge({k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        options = options_from_args(args)
        generated_css = generate_path_css(args.paths, options)
    except (TypeError, ValueError, OSError) as e:
        sys.exit(f"Error! {e}")

    if args.json:
        print(json.dumps(generated_css.object, indent=2))
    elif not options.output_path:
        print(generated_css.minified if options.minify_output else generated_css.formatted, end='')

    if options.output_path:
        if not generated_css.object:
            print("WARNING: no shorthand classes found in the given paths")
            return
        print("CSS generation complete!")
        print(f"Generated {len(generated_css.object)} unique rules")
        print(f"Output saved to {options.output_path}")


if __name__ == "__main__":
    main()
