"""Tests for atomic writes and backups in PydanticPersistence."""

from unittest.mock import patch

import pytest

from padsmith.exceptions import ConfigurationError
from padsmith.models import Button
from padsmith.utils import PydanticPersistence


class TestAtomicWrites:
    """Test that saves never leave partial files behind."""

    @pytest.mark.unit
    def test_no_temp_file_left(self, temp_dir, default_macropad):
        path = temp_dir / "mapping.json"
        PydanticPersistence.save_json(default_macropad, path)

        assert path.exists()
        assert not (temp_dir / "mapping.json.tmp").exists()

    @pytest.mark.unit
    def test_failed_replace_keeps_original(self, temp_dir, default_macropad, mapped_macropad):
        path = temp_dir / "mapping.json"
        PydanticPersistence.save_json(default_macropad, path)
        original = path.read_text(encoding="utf-8")

        with patch("pathlib.Path.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                PydanticPersistence.save_json(mapped_macropad, path)

        assert path.read_text(encoding="utf-8") == original
        assert not (temp_dir / "mapping.json.tmp").exists()

    @pytest.mark.unit
    def test_serialization_failure(self, temp_dir, default_macropad):
        path = temp_dir / "mapping.json"
        with patch.object(PydanticPersistence, "dumps", side_effect=ValueError("boom")):
            with pytest.raises(ConfigurationError):
                PydanticPersistence.save_json(default_macropad, path)
        assert not path.exists()

    @pytest.mark.unit
    def test_no_parents_without_flag(self, temp_dir, default_macropad):
        path = temp_dir / "missing" / "mapping.json"
        with pytest.raises(OSError):
            PydanticPersistence.save_json(default_macropad, path, create_parents=False)


class TestBackups:
    """Test the optional .bak copy."""

    @pytest.mark.unit
    def test_backup_holds_previous_content(self, temp_dir, default_macropad):
        path = temp_dir / "mapping.json"
        PydanticPersistence.save_json(default_macropad, path)
        previous = path.read_text(encoding="utf-8")

        default_macropad.layers[0].buttons[0][0] = Button(delay=0, mapping="enter")
        PydanticPersistence.save_json(default_macropad, path, backup=True)

        assert (temp_dir / "mapping.json.bak").read_text(encoding="utf-8") == previous
        assert "enter" in path.read_text(encoding="utf-8")

    @pytest.mark.unit
    def test_no_backup_for_new_file(self, temp_dir, default_macropad):
        path = temp_dir / "mapping.json"
        PydanticPersistence.save_json(default_macropad, path, backup=True)
        assert not (temp_dir / "mapping.json.bak").exists()

    @pytest.mark.unit
    def test_no_backup_by_default(self, temp_dir, default_macropad):
        path = temp_dir / "mapping.json"
        PydanticPersistence.save_json(default_macropad, path)
        PydanticPersistence.save_json(default_macropad, path)
        assert not (temp_dir / "mapping.json.bak").exists()


class TestLoad:
    """Test loading failures."""

    @pytest.mark.unit
    def test_missing_file(self, temp_dir):
        from padsmith.models import Macropad

        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(temp_dir / "nope.json", Macropad)
