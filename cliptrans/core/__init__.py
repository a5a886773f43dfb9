"""
Core modules for ClipTrans.

PreferenceState and SelectionOrchestrator depend on the root config module
and are imported from their own modules.
"""
from cliptrans.core.language import Language, UnknownLanguageError
from cliptrans.core.last_selection import LastSelectionStore
from cliptrans.core.selector import choose_target

__all__ = ['Language', 'UnknownLanguageError', 'LastSelectionStore', 'choose_target']
