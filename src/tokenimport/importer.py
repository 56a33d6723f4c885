"""
Import entry points and the caller-owned import session.

parse_document() turns one RawDocument into a CanonicalModel.
ImportSession holds what a UI would otherwise keep in globals: the queue of
files waiting to be imported, the model parsed from them and the chosen
target collection. Every caller owns its own session.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from tokenimport.backends.variable_store import VariableStore, apply_model
from tokenimport.csv_parser import parse_csv_string
from tokenimport.errors import ParseError, TokenImportError, UnsupportedFormatError
from tokenimport.json_parser import parse_json_string
from tokenimport.model import CanonicalModel, DocumentFormat, RawDocument


logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {
    ".json": DocumentFormat.JSON,
    ".csv": DocumentFormat.CSV,
}


def is_supported_filename(filename: str) -> bool:
    return any(filename.lower().endswith(ext) for ext in SUPPORTED_EXTENSIONS)


def format_for_filename(filename: str) -> DocumentFormat:
    """
    Map a file name to its DocumentFormat by extension.

    Raises:
        UnsupportedFormatError: For anything but .json or .csv
    """
    lowered = filename.lower()
    for extension, document_format in SUPPORTED_EXTENSIONS.items():
        if lowered.endswith(extension):
            return document_format
    raise UnsupportedFormatError(f"Unsupported file type: {filename} (expected JSON or CSV)")


def parse_document(document: RawDocument) -> CanonicalModel:
    """
    Parse a RawDocument with the parser for its format.

    Raises:
        ParseError: If a JSON document is malformed
    """
    if document.format == DocumentFormat.JSON:
        return parse_json_string(document.text)
    if document.format == DocumentFormat.CSV:
        return parse_csv_string(document.text)
    raise UnsupportedFormatError(f"Unsupported document format: {document.format}")


def document_from_file(filename: str, text: str) -> RawDocument:
    return RawDocument(text=text, format=format_for_filename(filename), name=filename)


@dataclass
class QueuedFile:
    """A file waiting in the session queue."""
    name: str
    text: str

    def to_document(self) -> RawDocument:
        return document_from_file(self.name, self.text)


@dataclass
class AddFilesResult:
    """Outcome of ImportSession.add_files()."""
    added: List[str] = field(default_factory=list)
    duplicates: List[str] = field(default_factory=list)
    rejected: List[str] = field(default_factory=list)


class ImportSession:
    """
    Queue of token files plus the model parsed from them.

    Properties:
        files: Queued files, in the order they were added
        model: Model parsed from the queue, or None when stale/empty
        collection_name:
            Preferred target collection; None means "use the parsed
            collection names". Only honoured for single-collection models.
    """

    def __init__(self, collection_name: Optional[str] = None):
        self.files: List[QueuedFile] = []
        self.model: Optional[CanonicalModel] = None
        self.collection_name = collection_name

    def add_files(self, files: Iterable[Tuple[str, str]]) -> AddFilesResult:
        """
        Queue (name, text) pairs.

        Unsupported names are rejected and names already queued are
        skipped as duplicates.

        Raises:
            UnsupportedFormatError: If none of the files is JSON or CSV
        """
        result = AddFilesResult()
        queued = {f.name for f in self.files}
        supported = []

        for name, text in files:
            if is_supported_filename(name):
                supported.append((name, text))
            else:
                result.rejected.append(name)

        if not supported:
            raise UnsupportedFormatError("Please select JSON or CSV files")

        for name, text in supported:
            if name in queued:
                result.duplicates.append(name)
                continue
            queued.add(name)
            self.files.append(QueuedFile(name=name, text=text))
            result.added.append(name)

        if result.duplicates:
            logger.info("%d duplicate file(s) skipped", len(result.duplicates))

        return result

    def remove_file(self, index: int) -> QueuedFile:
        """Remove a queued file; the parsed model becomes stale."""
        removed = self.files.pop(index)
        self.model = None
        return removed

    def clear(self) -> None:
        self.files = []
        self.model = None
        self.collection_name = None

    def parse_first(self) -> Optional[CanonicalModel]:
        """
        Parse the first queued file into self.model.

        Returns:
            The model, or None if the queue is empty

        Raises:
            ParseError: The model is reset to None before re-raising
        """
        if not self.files:
            self.model = None
            return None

        first = self.files[0]
        try:
            self.model = parse_document(first.to_document())
        except ParseError:
            self.model = None
            logger.debug("Failed to parse %s", first.name)
            raise
        return self.model

    def parse_all(self) -> CanonicalModel:
        """Parse every queued file and merge them; later files win."""
        merged = CanonicalModel()
        for queued in self.files:
            merged = merged.merge(parse_document(queued.to_document()))
        self.model = merged
        return merged

    def apply(self, store: VariableStore) -> int:
        """
        Write the parsed model into store.

        Parses the first file if nothing has been parsed yet.

        Returns:
            Number of values set

        Raises:
            TokenImportError: If there is nothing to import
        """
        if self.model is None:
            self.parse_first()
        if self.model is None:
            raise TokenImportError("No tokens to import")
        return apply_model(self.model, store, preferred_collection_name=self.collection_name)


__all__ = [
    "SUPPORTED_EXTENSIONS",
    "is_supported_filename",
    "format_for_filename",
    "parse_document",
    "document_from_file",
    "QueuedFile",
    "AddFilesResult",
    "ImportSession",
]
