"""
Generation Options
------------------
Defaults and loading for the knobs that shape the generated CSS. Options can
be given with the camelCase names used in JSON config files or with their
Python attribute names.
"""

import json
from dataclasses import dataclass, fields, replace
from typing import Optional

# camelCase config key -> attribute name
OPTION_ALIASES = {
    'newLineChar': 'new_line_char',
    'tabSpacing': 'tab_spacing',
    'outputPath': 'output_path',
    'minifyOutput': 'minify_output',
    'setImportant': 'set_important',
}


@dataclass(frozen=True)
class Options:
    new_line_char: str = '\n'
    tab_spacing: int = 4
    output_path: Optional[str] = None
    minify_output: bool = False
    set_important: bool = False

    @classmethod
    def from_dict(cls, values: Optional[dict] = None) -> "Options":
        """Build options from a mapping, falling back to the defaults"""
        return cls().merge(values)

    def merge(self, values: Optional[dict] = None) -> "Options":
        """Return a copy with the given values layered on top"""
        known = {f.name for f in fields(self)}
        changes = {}

        for key, value in (values or {}).items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                print(f"WARNING: ignoring unknown option '{key}'")
                continue
            changes[name] = value

        return replace(self, **changes)


def resolve_options(options=None):
    """Accept an Options instance, a mapping, or None"""
    if isinstance(options, Options):
        return options
    return Options.from_dict(options)


def load_options(config_file):
    """Load options from a JSON file"""
    with open(config_file, 'r', encoding='utf-8') as f:
        values = json.load(f)

    if not isinstance(values, dict):
        raise ValueError(f"Options file {config_file} must contain a JSON object")

    return Options.from_dict(values)
