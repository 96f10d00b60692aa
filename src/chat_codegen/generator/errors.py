"""Typed exceptions for the chat message generator.

Every failure that aborts a run derives from :class:`GeneratorError` so the
CLI can map the whole family to a single non-zero exit status while still
carrying structured context for logs and tests.

Design intent:
    - Entries that merely *look* wrong (non-object ``chatMessages`` items,
      non-string ``headerFiles`` items) are filtered out by the loaders and
      never reach this module.
    - Structural problems with a document, wrongly-typed option fields and
      missing nested fields raise typed exceptions and end the run.
"""

from __future__ import annotations


class GeneratorError(RuntimeError):
    """Base exception for fatal generator failures."""


class MalformedDocumentError(GeneratorError):
    """A document (or a required array inside it) has the wrong shape.

    Args:
        document: Which document failed (``"options"`` or ``"content"``).
        details:  Human-readable description of the problem.
        cause:    Optional underlying exception (e.g. a JSON syntax error).
    """

    def __init__(self, document: str, details: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"Could not parse {document} document - {details}.")
        self.document = document
        self.details = details
        self.cause = cause


class TypeMismatchError(GeneratorError):
    """A recognised options field is present with the wrong JSON type."""

    def __init__(self, field_name: str, expected_type: str) -> None:
        super().__init__(
            f'Could not parse options document - "{field_name}" value is not a {expected_type}.'
        )
        self.field_name = field_name
        self.expected_type = expected_type


class FieldAccessError(GeneratorError):
    """A required nested field is absent or has the wrong type.

    Raised for ``id``/``name`` on language entries and ``uniqueName``,
    ``comment`` and ``processed`` on message entries.
    """

    def __init__(self, field_name: str, details: str) -> None:
        super().__init__(f'Field "{field_name}" {details}.')
        self.field_name = field_name
        self.details = details


class UnknownLanguageError(GeneratorError):
    """A message variant names a language missing from the language table.

    Only raised when enum indexing is active; positional indexing never
    consults the table.
    """

    def __init__(self, language_id: str, unique_name: str) -> None:
        super().__init__(
            f'Message "{unique_name}" uses language "{language_id}" '
            "which is not declared in \"languages\"."
        )
        self.language_id = language_id
        self.unique_name = unique_name
