"""
ClipTrans - picks the translation target language for copied text.
"""
from cliptrans.constants import VERSION as __version__
