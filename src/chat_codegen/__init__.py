"""chat-codegen: compile chat message tables into C++ headers.

Reads a JSON options document and a JSON content document of multilingual
chat messages and writes a header of ``inline constexpr`` message objects.
See :mod:`chat_codegen.generator` for the pipeline and :mod:`chat_codegen.cli`
for the command-line entry point.

Version Management
------------------
``__version__`` is read from the installed package metadata at import time.
The single source of truth is the ``version`` field in ``pyproject.toml``.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

# ---------------------------------------------------------------------------
# Package version, read from pyproject.toml via importlib.metadata.
#
# Falls back to "0.0.0-dev" when the package is imported without being
# installed (e.g. straight from a source checkout).
# ---------------------------------------------------------------------------
try:
    __version__: str = version("chat-codegen")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
