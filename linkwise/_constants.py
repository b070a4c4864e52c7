"""Common literal values used across linkwise.

These constants keep the slug dialect's reserved characters, extensions, and
default filenames centralized so the path core, the renderer, and tests import
the same values without drifting. Intended for internal use within the
linkwise package.

Examples
--------
>>> from linkwise import _constants
>>> ".md" in _constants.MARKUP_EXTENSIONS
True
>>> _constants.INDEX_SEGMENT
'index'
"""

INDEX_SEGMENT = "index"
ESCAPED_INDEX_SEGMENT = "_index"
MARKUP_EXTENSIONS = (".md", ".html")
FOLDER_MARKERS = ("index", "index.md", "index.html")
FORBIDDEN_SLUG_CHARACTERS = (" ", "#", "?", "&")
PDF_EXTENSION = ".pdf"
DEFAULT_CONFIG_FILENAME = "linkwise.yaml"
DEFAULT_MANIFEST_SLUG = "plugin-manifest"
