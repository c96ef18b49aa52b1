import os
import sys

sys.path.insert(0, os.path.abspath(".."))

project = "shoal"
copyright = "2026, shoal contributors"
author = "shoal contributors"

release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
]

autodoc_member_order = "bysource"
autodoc_typehints = "description"
autodoc_class_signature = "separated"
add_module_names = True

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

templates_path = ["_templates"]
html_static_path = ["_static"]
html_theme = "furo"
html_theme_options = {
    "navigation_with_keys": True,
}

pygments_style = "native"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "aiohttp": ("https://docs.aiohttp.org/en/latest/", None),
}
