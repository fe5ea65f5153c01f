"""Base implementation for service file parsers."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class BaseServiceFileParser(ABC):
    """
    Abstract base class for service file parsers.

    Provides common functionality for file validation, error handling and
    reading, while keeping the format-specific parsing logic abstract.

    Subclasses must implement:
    - get_supported_extensions(): Define which file extensions are supported
    - _parse_content(): Parse the actual file content into a structured format

    Subclasses can optionally override:
    - validate_file(): Custom file validation logic
    - _handle_parse_error(): Custom error handling
    """

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize the parser.

        Args:
            encoding: Default file encoding to use when reading files
        """
        self.encoding = encoding
        self._logger = logger.getChild(self.__class__.__name__)

    @abstractmethod
    def get_supported_extensions(self) -> list[str]:
        """
        Returns a list of file extensions this parser supports.

        Returns:
            List of file extensions (e.g., ['.yml', '.json'])
        """
        pass

    @abstractmethod
    def _parse_content(self, content: str, file_path: Path) -> Any:
        """
        Parse the file content.

        Args:
            content: The raw file content as a string
            file_path: Path to the file being parsed (for context/error reporting)

        Returns:
            The parsed result
        """
        pass

    def parse(self, file_path: Path) -> Any:
        """
        Parses a single file.

        This method orchestrates the parsing process by:
        1. Validating the file
        2. Reading the file content
        3. Parsing the content using format-specific logic
        4. Handling any errors that occur

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not supported
        """
        self._logger.info(f"Parsing file: {file_path}")

        self.validate_file(file_path)

        try:
            content = self._read_file(file_path)
            result = self._parse_content(content, file_path)

            self._logger.debug(f"Successfully parsed {file_path}")
            return result

        except Exception as e:
            return self._handle_parse_error(e, file_path)

    def validate_file(self, file_path: Path) -> None:
        """
        Validate that the file exists and has a supported extension.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file extension is not supported
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if not file_path.is_file():
            raise ValueError(f"Path is not a file: {file_path}")

        supported_extensions = self.get_supported_extensions()
        if supported_extensions and file_path.suffix not in supported_extensions:
            raise ValueError(
                f"Unsupported file extension '{file_path.suffix}'. "
                f"Supported extensions: {supported_extensions}"
            )

    def _read_file(self, file_path: Path) -> str:
        try:
            return file_path.read_text(encoding=self.encoding)
        except UnicodeDecodeError:
            self._logger.error(
                f"Failed to decode file {file_path} with encoding {self.encoding}"
            )
            raise
        except OSError as e:
            self._logger.error(f"Failed to read file {file_path}: {e}")
            raise

    def _handle_parse_error(self, error: Exception, file_path: Path) -> Any:
        """
        Handle parsing errors.

        Re-raises the original exception by default.
        """
        self._logger.error(f"Failed to parse {file_path}: {error}")
        raise error
