"""
CSS Output Writer
-----------------
Persists generated CSS to the configured stylesheet path.
"""

import os


def check_output_path(output_path):
    """Make sure the output path names a .css file"""
    if not str(output_path).endswith('.css'):
        raise ValueError(
            "Full output path is required including css filename e.g. /assets/css/tailored.css"
        )


def write_output_file(css, options):
    """Write the minified or formatted CSS to options.output_path"""
    if css is None or not options.output_path:
        return None

    output_path = os.fspath(options.output_path)
    check_output_path(output_path)

    contents = css.minified if options.minify_output else css.formatted

    # Ensure output directory exists
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    # newline='' keeps the configured newline characters untouched
    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        f.write(contents)

    return output_path
