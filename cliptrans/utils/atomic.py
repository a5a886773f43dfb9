"""
Crash-safe file replacement.
"""
import os


def atomic_write_text(path: str, text: str) -> None:
    """Write text to path so readers never see a partially written file.

    The content goes to a sibling temp file which is flushed and fsynced
    before being renamed over the final path. OSErrors propagate.
    """
    temp_path = path + '.tmp'
    try:
        with open(temp_path, 'w', encoding='utf-8') as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())  # Force write to disk before the rename
        os.replace(temp_path, path)
    except OSError:
        try:
            os.remove(temp_path)
        except OSError:
            pass
        raise
