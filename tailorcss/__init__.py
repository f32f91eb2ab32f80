"""Generate CSS from shorthand utility classes found in HTML."""

from .compiler import CssRule, GeneratedCss, compile_css
from .extractor import extract_attribute_values
from .options import Options, load_options
from .tailor import LazySession, generate_css, generate_path_css

__all__ = [
    'CssRule',
    'GeneratedCss',
    'LazySession',
    'Options',
    'compile_css',
    'extract_attribute_values',
    'generate_css',
    'generate_path_css',
    'load_options',
]
