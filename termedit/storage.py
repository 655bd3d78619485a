"""Reading and writing documents on disk.

Editing logic only talks to ``DocumentStorage``; ``FileStorage`` is the
whole-file implementation used by the editor.
"""

from abc import ABC, abstractmethod


class DocumentStorage(ABC):
    """Port through which documents are loaded and persisted."""

    @abstractmethod
    def read(self, path: str) -> str:
        """Return the full text stored at path.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """

    @abstractmethod
    def write(self, path: str, text: str) -> None:
        """Replace whatever is stored at path with text.

        Raises:
            OSError: If the file cannot be written.
        """


class FileStorage(DocumentStorage):
    """Plain UTF-8 files, overwritten in place on every save (not atomic)."""

    def read(self, path: str) -> str:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()

    def write(self, path: str, text: str) -> None:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
