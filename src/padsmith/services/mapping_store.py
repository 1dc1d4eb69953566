"""Mapping store: load, save and validate the macropad mapping file."""

import logging
import sys
from pathlib import Path

import click

from padsmith.devices import get_family
from padsmith.models import Macropad
from padsmith.utils import PydanticPersistence
from padsmith.validation import MappingValidator, ValidationReport

logger = logging.getLogger(__name__)

DEFAULT_MAPPING_FILE = "mapping.json"

# Geometry written when the mapping file does not exist yet
DEFAULT_ROWS = 2
DEFAULT_COLS = 3
DEFAULT_KNOBS = 1


class MappingStore:
    """
    Persists a Macropad to a single JSON file.

    The store keeps no mapping in memory: every call reads or writes the
    file, and callers own the Macropad values they get back.

    Usage Example:
        ```python
        store = MappingStore()
        macropad = store.read()                 # mapping.json next to the program
        macropad.get_button(0, 0, 0).mapping = "ctrl-c"
        store.save(macropad)
        report = store.validate(product_id=0x8840)
        ```
    """

    @staticmethod
    def config_path() -> Path:
        """Default mapping location: next to the running program."""
        program = Path(sys.argv[0]) if sys.argv and sys.argv[0] else Path.cwd() / "padsmith"
        return program.resolve().parent / DEFAULT_MAPPING_FILE

    @classmethod
    def resolve(cls, path: Path | str | None = None) -> Path:
        """Resolve a user-supplied path; None or the bare default name mean config_path()."""
        if path is None or str(path) == DEFAULT_MAPPING_FILE:
            return cls.config_path()
        return Path(path)

    def read(self, path: Path | str | None = None) -> Macropad:
        """
        Load a mapping, creating the factory default first if the file is missing.

        Raises:
            OSError: If the file cannot be read or the default cannot be written
            ConfigFileInvalidError: If the file is empty or not valid JSON
            ConfigValidationError: If the file does not have the Macropad shape
        """
        resolved = self.resolve(path)
        if not resolved.exists():
            logger.info(f"Mapping not found: {resolved}, creating default")
            default = Macropad.create_default(DEFAULT_ROWS, DEFAULT_COLS, DEFAULT_KNOBS)
            self.save(default, resolved)

        return PydanticPersistence.load_json(resolved, Macropad)

    def save(self, macropad: Macropad, path: Path | str | None = None) -> None:
        """
        Write a mapping, replacing the whole file.

        Raises:
            OSError: If the file cannot be written
            ConfigurationError: If the mapping cannot be serialized
        """
        resolved = self.resolve(path)
        PydanticPersistence.save_json(macropad, resolved)
        logger.info(f"Saved mapping to {resolved}")

    def dumps(self, macropad: Macropad) -> str:
        """Serialized mapping, exactly as ``save`` writes it."""
        return PydanticPersistence.dumps(macropad)

    def print(self, macropad: Macropad) -> None:
        """Write the serialized mapping to standard output."""
        click.echo(self.dumps(macropad))

    def validate(self, path: Path | str | None = None, product_id: int | None = None) -> ValidationReport:
        """
        Load a mapping and check it against the family of ``product_id``.

        The product id is resolved before the file is touched, so an unknown
        id fails without creating a default mapping.

        Raises:
            UnknownDeviceFamilyError: If product_id is not a known family
            OSError, ConfigurationError: If the file cannot be loaded
            MappingError: If the mapping cannot be programmed
        """
        family = get_family(product_id)
        macropad = self.read(path)
        return MappingValidator(family).validate(macropad)
