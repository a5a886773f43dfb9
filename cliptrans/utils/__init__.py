"""
Utility modules for ClipTrans.
"""
from cliptrans.utils.logging_setup import setup_logging
from cliptrans.utils.paths import get_config_dir
from cliptrans.utils.atomic import atomic_write_text

__all__ = ['setup_logging', 'get_config_dir', 'atomic_write_text']
