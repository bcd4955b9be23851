import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "urikit"
copyright = "2026, urikit developers"
author = "urikit developers"
import urikit

release = urikit.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "sphinx.ext.doctest",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = []

# MyST-Parser configuration
myst_heading_anchors = 3
myst_enable_extensions = ["colon_fence"]

# Intersphinx mapping for external references
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# Re-exports from the package root duplicate cross-references
suppress_warnings = ["ref.python"]

# Autodoc configuration
autodoc_default_options = {
    "imported-members": False,
    "show-inheritance": True,
}
autodoc_class_content = "both"
autodoc_member_order = "bysource"

html_theme = "furo"
html_title = "urikit"
