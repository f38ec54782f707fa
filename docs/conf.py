import os
import sys

# Add the project root (one level up from docs/) to sys.path
sys.path.insert(0, os.path.abspath(".."))

from cryptocom_exchange import get_version

# -- Project information -----------------------------------------------------

project = "cryptocom_exchange"
copyright = "2025, cryptocom-exchange contributors"
author = "cryptocom-exchange contributors"

release = get_version()
if "unknown" in release:
    raise RuntimeError(f"Unknown version {release=}")

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

# Napoleon settings
napoleon_google_docstring = True
napoleon_numpy_docstring = False

# Classes are re-exported from the package root
suppress_warnings = ["ref.python"]

## Templates
templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

## Http
html_theme = "sphinx_rtd_theme"
html_static_path = ["_static"]

# Rendering
autodoc_default_options = {
    "members": True,
    "undoc-members": True,
    "show-inheritance": True,
}
