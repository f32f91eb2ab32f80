"""
Tailored CSS Generation
-----------------------
Entry points tying extraction, compilation and output together:

- generate_css:      CSS from an HTML string
- generate_path_css: CSS from HTML files at one or more paths
- LazySession:       collect HTML and paths over several calls, generate once
"""

from .compiler import GeneratedCss, compile_css
from .extractor import extract_attribute_values
from .options import resolve_options
from .sources import paths_to_html
from .writer import check_output_path, write_output_file


def generate_css(html_content, options=None):
    """Generate CSS from an HTML string"""
    options = resolve_options(options)
    if options.output_path:
        check_output_path(options.output_path)

    extracted_values = extract_attribute_values(html_content)
    if not extracted_values:
        return GeneratedCss()

    generated_css = compile_css(extracted_values, options)
    write_output_file(generated_css, options)

    return generated_css


def generate_path_css(paths, options=None):
    """Generate CSS for any HTML files at the provided path(s)"""
    if not paths:
        raise ValueError("path is required")

    html_content = paths_to_html(paths)

    return generate_css(html_content, options)


class LazySession:
    """Accumulates HTML and paths for a single generation pass"""

    def __init__(self):
        self._html = []
        self._paths = []

    def push_html(self, html_content):
        self._html.append(html_content)

    def push_path(self, path):
        self._paths.append(path)

    def is_empty(self):
        return not ''.join(self._html) and not self._paths

    def generate(self, options=None):
        """Generate CSS from everything pushed so far, then reset"""
        if self.is_empty():
            raise ValueError("No HTML or path given for lazy generation")

        paths, html = self._paths, self._html
        self._paths, self._html = [], []

        # HTML read from paths comes before the pushed markup
        html_content = paths_to_html(paths) + ''.join(html)

        return generate_css(html_content, options)
