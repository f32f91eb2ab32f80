"""
Class Attribute Extractor
-------------------------
Pulls the raw values of every `class` attribute out of HTML markup, in the
order they first appear, dropping exact duplicates.
"""

import re

# class="..." | class='...' | class=unquoted
CLASS_ATTR_REGEX = re.compile(
    r'\bclass\b\s*=\s*(?:"(?P<double>[^"]*)"|\'(?P<single>[^\']*)\'|(?P<bare>[^"\'<>\s]+))'
)


def extract_attribute_values(markup):
    """Extract the class attribute values from the passed HTML content"""
    values = []
    seen = set()

    for match in CLASS_ATTR_REGEX.finditer(markup):
        # Only one of the alternatives participates in any given match
        value = next(
            group for group in match.group('double', 'single', 'bare') if group is not None
        )
        if value in seen:
            continue
        seen.add(value)
        values.append(value)

    return values
