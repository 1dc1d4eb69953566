"""Pydantic model persistence to and from JSON files.

Stateless helpers shared by the mapping store and the CLI.

Error Handling:
    - Missing file: FileNotFoundError (callers decide whether to create a default)
    - Other I/O failures: OSError propagates unchanged
    - Bad JSON or wrong shape: converted by wrap_pydantic_error
    - Not UTF-8 or empty: ConfigFileInvalidError

Safety Features:
    - Atomic writes using temp file + rename
    - Optional .bak backup before overwriting
"""

import logging
import shutil
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from padsmith.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class PydanticPersistence:
    """
    Load and save pydantic models as pretty-printed JSON.

    Output is deterministic: fields appear in declaration order, one entry
    per line, and every list element is written out on its own.

    Thread-Safety:
        All methods are static and only touch their arguments.
    """

    @staticmethod
    def dumps(data: BaseModel, indent: int = 2) -> str:
        """Serialize a model to the on-disk JSON text."""
        return data.model_dump_json(indent=indent)

    @staticmethod
    def load_json(path: Path, model_type: type[T]) -> T:
        """
        Load and validate a pydantic model from a JSON file.

        Args:
            path: Path to the JSON file to load
            model_type: The model class to validate against

        Returns:
            Validated model instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
            ConfigFileInvalidError: If the file is empty, not UTF-8 or not valid JSON
            ConfigValidationError: If the JSON does not match the model
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            json_content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ConfigFileInvalidError(str(path), f"not valid UTF-8: {e}") from e
        if not json_content.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(json_content)
        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        create_parents: bool = True,
        backup: bool = False,
    ) -> None:
        """
        Save a pydantic model to a JSON file with an atomic write.

        Args:
            data: The model instance to save
            path: Destination file (overwritten if it exists)
            indent: JSON indentation level
            create_parents: Create parent directories if missing
            backup: Copy an existing file to ``<name>.bak`` first

        Raises:
            OSError: If the file cannot be written
            ConfigurationError: If serialization fails
        """
        try:
            json_content = PydanticPersistence.dumps(data, indent=indent)
        except Exception as e:
            logger.error(f"Failed to serialize {type(data).__name__}: {e}")
            raise ConfigurationError(
                user_message=f"Failed to save mapping to {path}",
                technical_message=f"Failed to serialize {type(data).__name__}: {e}",
            ) from e

        if create_parents:
            path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            backup_path = path.with_suffix(path.suffix + ".bak")
            shutil.copy2(path, backup_path)
            logger.debug(f"Created backup: {backup_path}")

        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_text(json_content, encoding="utf-8")
            temp_path.replace(path)
        except OSError as e:
            logger.error(f"OS error saving {type(data).__name__} to {path}: {e}")
            raise
        finally:
            if temp_path.exists():
                temp_path.unlink()

        logger.debug(f"Saved {type(data).__name__} to {path}")
