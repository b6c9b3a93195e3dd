# Sphinx configuration for the quakeguard API reference.

import os
import sys

sys.path.insert(0, os.path.abspath(".."))

from quakeguard import __version__  # noqa: E402

project = "quakeguard"
author = "quakeguard contributors"
copyright = "2025, quakeguard contributors"
release = __version__
version = ".".join(__version__.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.mathjax",
]

exclude_patterns = ["_build"]
master_doc = "index"

try:
    import sphinx_rtd_theme  # noqa: F401
    html_theme = "sphinx_rtd_theme"
except ImportError:
    html_theme = "alabaster"
html_title = "quakeguard"

autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
    "show-inheritance": True,
}
# plotting helpers import matplotlib lazily; mock it for autodoc anyway
autodoc_mock_imports = ["matplotlib"]

napoleon_google_docstring = True
napoleon_numpy_docstring = False
