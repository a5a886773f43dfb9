"""
Unit tests for last_selection.py - Last-used target language persistence.
"""
import os
import sys
import json
import logging
import pytest
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import cliptrans.core.last_selection as last_selection_module
from cliptrans.core.errors import PathUnavailable, ReadFailed, WriteFailed
from cliptrans.core.language import Language
from cliptrans.core.last_selection import LastSelectionStore, parse_last_language


class TestParseLastLanguage:
    """Tests for the canonical and legacy parse chain."""

    def test_json_record(self):
        """Test the current JSON format."""
        assert parse_last_language('{"target_language": "PT"}') == Language.PORTUGUESE

    def test_json_record_with_name(self):
        """Test a JSON record holding a full name."""
        assert parse_last_language('{"target_language": "Portuguese"}') == Language.PORTUGUESE

    def test_legacy_bare_code(self):
        """Test the plain-text ISO code written by older versions."""
        assert parse_last_language("UK\n") == Language.UKRAINIAN
        assert parse_last_language("de") == Language.GERMAN

    def test_legacy_full_name(self):
        """Test a plain-text language name."""
        assert parse_last_language("Russian") == Language.RUSSIAN

    @pytest.mark.parametrize("contents", ["", "   ", "gibberish", '{"target_language": 3}',
                                          '{"other": "EN"}', "[1, 2]"])
    def test_unrecognised(self, contents):
        """Test that unrecognised content gives None."""
        assert parse_last_language(contents) is None


class TestLastSelectionLoad:
    """Tests for LastSelectionStore.load."""

    def test_first_run_returns_default_quietly(self, last_store, caplog):
        """Test that a missing file is not logged as a problem."""
        with caplog.at_level(logging.DEBUG):
            lang = last_store.load()

        assert lang == Language.ENGLISH
        assert last_store.issues == []
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_load_saved_language(self, last_store):
        """Test loading a previously saved language."""
        last_store.save(Language.PORTUGUESE)
        assert last_store.load() == Language.PORTUGUESE

    def test_load_legacy_file(self, last_store, temp_config_dir):
        """Test that last_language.txt from older versions is honoured."""
        with open(os.path.join(temp_config_dir, 'last_language.txt'), 'w', encoding='utf-8') as f:
            f.write("IT")

        assert last_store.load() == Language.ITALIAN

    def test_canonical_file_wins_over_legacy(self, last_store, temp_config_dir):
        """Test that the legacy file is only a fallback."""
        with open(os.path.join(temp_config_dir, 'last_language.txt'), 'w', encoding='utf-8') as f:
            f.write("IT")
        last_store.save(Language.GERMAN)

        assert last_store.load() == Language.GERMAN

    def test_legacy_content_in_canonical_file(self, last_store):
        """Test bare code content in the canonical file."""
        with open(last_store.path, 'w', encoding='utf-8') as f:
            f.write("Polish")

        assert last_store.load() == Language.POLISH

    def test_invalid_content_returns_default(self, last_store):
        """Test that unknown content falls back to the default."""
        with open(last_store.path, 'w', encoding='utf-8') as f:
            f.write("XX")

        assert last_store.load() == Language.ENGLISH

    def test_read_failure_returns_default(self, last_store):
        """Test that read errors other than absence are recorded."""
        last_store.save(Language.GERMAN)

        with patch('builtins.open', side_effect=PermissionError("denied")):
            lang = last_store.load()

        assert lang == Language.ENGLISH
        assert isinstance(last_store.issues[0], ReadFailed)

    def test_path_unavailable_returns_default(self):
        """Test that an undeterminable directory gives the default."""
        store = LastSelectionStore()
        with patch.object(last_selection_module, 'get_config_dir', return_value=None):
            lang = store.load()

        assert lang == Language.ENGLISH
        assert isinstance(store.issues[0], PathUnavailable)


class TestLastSelectionSave:
    """Tests for LastSelectionStore.save."""

    def test_save_writes_json_record(self, last_store):
        """Test the on-disk format."""
        last_store.save(Language.FRENCH)

        with open(last_store.path, 'r', encoding='utf-8') as f:
            assert json.load(f) == {"target_language": "FR"}
        assert not os.path.exists(last_store.path + '.tmp')

    def test_save_creates_directory(self, temp_config_dir):
        """Test that missing parent directories are created."""
        store = LastSelectionStore(os.path.join(temp_config_dir, 'a', 'b'))
        store.save(Language.SPANISH)

        assert store.load() == Language.SPANISH

    def test_save_propagates_errors(self, last_store):
        """Test that write errors surface as WriteFailed."""
        with patch.object(last_selection_module, 'atomic_write_text',
                          side_effect=OSError("read-only file system")):
            with pytest.raises(WriteFailed):
                last_store.save(Language.FRENCH)

    def test_save_without_directory_raises(self):
        """Test that save reports an undeterminable directory."""
        store = LastSelectionStore()
        with patch.object(last_selection_module, 'get_config_dir', return_value=None):
            with pytest.raises(WriteFailed):
                store.save(Language.FRENCH)
