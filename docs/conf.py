# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys
sys.path.insert(0, os.path.abspath('../'))


project = 'scritto'
copyright = '2024, scritto developers'
author = 'scritto developers'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx_automodapi.automodapi',
    'sphinx.ext.napoleon',
    'sphinx_autodoc_typehints',
    'sphinx.ext.viewcode',
]

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

html_theme = 'sphinx_rtd_theme'
pygments_style = "friendly"

typehints_fully_qualified = False
typehints_document_rtype = True
autodoc_member_order = 'bysource'

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True
napoleon_use_param = True
napoleon_use_rtype = True

automodsumm_inherited_members = False
automodapi_inheritance_diagram = False
