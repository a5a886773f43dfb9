"""
Target language selection rule.
"""
from typing import Optional

from cliptrans.core.language import Language


def choose_target(source: Optional[Language], primary: Language,
                  secondary: Language, last: Language) -> Language:
    """Pick the translation target for a piece of text.

    - Text not (known to be) in the primary language goes to primary.
    - Primary-language text goes to the last used target, unless that is
      the primary language itself, in which case it goes to secondary.
    """
    if source is None or source != primary:
        return primary
    if last != primary:
        return last
    return secondary
