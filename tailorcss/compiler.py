"""
Shorthand Compiler
------------------
Turns shorthand utility classes such as `pt30`, `w40p` or `fw600n` into CSS
rules. Every token is read as:

    <alias><magnitude><suffix>

- alias:     1-23 lowercase letters naming the CSS property (see PROPERTY_MAPPING)
- magnitude: 1-4 digits, copied into the value as-is
- suffix:    optional word characters naming the unit (see UNIT_MAPPING)

Tokens that do not fit this shape, or whose alias is unknown, are skipped.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Optional

from .options import Options

# Matched from the start of the token only; trailing characters after the
# suffix (e.g. `pt30-x`) are ignored but stay part of the selector.
SHORTHAND_REGEX = re.compile(
    r'(?P<alias>[a-z]{1,23})(?P<magnitude>[0-9]{1,4})(?P<suffix>\w*)',
    re.ASCII,
)

PROPERTY_MAPPING = MappingProxyType({
    't': 'top',
    'b': 'bottom',
    'l': 'left',
    'r': 'right',

    'w': 'width',
    'h': 'height',

    'p': 'padding',
    'm': 'margin',

    'br': 'border-radius',
    'fs': 'font-size',
    'fw': 'font-weight',
    'lh': 'line-height',

    'mt': 'margin-top',
    'mb': 'margin-bottom',
    'ml': 'margin-left',
    'mr': 'margin-right',

    'pt': 'padding-top',
    'pb': 'padding-bottom',
    'pl': 'padding-left',
    'pr': 'padding-right',
})

UNIT_MAPPING = MappingProxyType({
    'default': 'px',  # used when the suffix is empty or unknown
    'px': 'px',
    'pt': 'pt',
    'em': 'em',
    'p': '%',
    'vh': 'vh',
    'vw': 'vw',
    'vmin': 'vmin',
    'ex': 'ex',
    'cm': 'cm',
    'in': 'in',
    'mm': 'mm',
    'pc': 'pc',
    'n': '',  # unitless
})

IMPORTANT_SUFFIX = ' !important'


@dataclass(frozen=True)
class CssRule:
    selector: str
    property: str
    value: str

    def minified(self) -> str:
        return f"{self.selector}{{{self.property}:{self.value};}}"

    def formatted(self, new_line_char: str, indent: str) -> str:
        nl = new_line_char
        return f"{self.selector} {{{nl}{indent}{self.property}: {self.value};{nl}}}{nl}{nl}"


@dataclass(frozen=True)
class GeneratedCss:
    minified: str = ''
    formatted: str = ''
    object: Dict[str, dict] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'minified': self.minified,
            'formatted': self.formatted,
            'object': self.object,
        }


def get_unit(suffix):
    """Map a unit suffix to its CSS unit, defaulting to px"""
    suffix = (suffix or '').strip()
    return UNIT_MAPPING.get(suffix, UNIT_MAPPING['default'])


def get_mapped_css(token, set_important=False):
    """Get the CSS rule for a shorthand token, or None if it is not one"""
    match = SHORTHAND_REGEX.match(token)
    if match is None:
        return None

    css_property = PROPERTY_MAPPING.get(match.group('alias'))
    if css_property is None:
        return None

    value = match.group('magnitude') + get_unit(match.group('suffix'))
    if set_important:
        value += IMPORTANT_SUFFIX

    return CssRule(selector='.' + token, property=css_property, value=value)


def iter_tokens(attr_value):
    """Split a class attribute value into its tokens"""
    attr_value = re.sub(r'\s+', ' ', attr_value)
    return attr_value.split(' ')


def compile_css(extracted_values: List[str], options: Optional[Options] = None) -> GeneratedCss:
    """Generate the CSS from the extracted attribute values"""
    options = options or Options()
    indent = ' ' * options.tab_spacing

    minified = []
    formatted = []
    css_object = {}

    # Each value can carry several classes (e.g. `p10 mt40 container`)
    for attr_value in extracted_values:
        for token in iter_tokens(attr_value):
            rule = get_mapped_css(token, options.set_important)
            if rule is None:
                continue

            minified.append(rule.minified())
            formatted.append(rule.formatted(options.new_line_char, indent))

            # Keyed by selector, so a repeated token keeps only its last rule
            css_object[rule.selector] = {
                'properties': [
                    {
                        'property': rule.property,
                        'value': rule.value,
                    }
                ]
            }

    return GeneratedCss(
        minified=''.join(minified),
        formatted=''.join(formatted),
        object=css_object,
    )
