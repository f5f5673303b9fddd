"""Top-level package for the Curriculum Importer.

Provides subpackages:
- curriculum_importer.core – immutable Track/Mission models and serialization
- curriculum_importer.common – slug and list helpers shared by the importer
- curriculum_importer.importer – track scanning, mission graph, resource store
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("curriculum-importer")
except PackageNotFoundError:
    # Running from a source checkout without installation
    __version__ = "0.0.0"

__all__: list[str] = ["__version__"]
