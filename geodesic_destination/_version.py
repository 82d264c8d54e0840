"""
Exposes the version of geodesic_destination

Installed copies report the distribution metadata; a source checkout falls back
to the VERSION file that setup.py also reads.
"""
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_DISTRIBUTION = 'geodesic-destination'
_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'


def _source_version() -> str:
    """Version of an uninstalled source tree, '0+unknown' if VERSION is missing"""
    if not _VERSION_FILE.is_file():
        return '0+unknown'

    return _VERSION_FILE.read_text(encoding='utf-8').strip()


try:
    __version__ = version(_DISTRIBUTION)
except PackageNotFoundError:
    __version__ = _source_version()

__all__ = ['__version__']
