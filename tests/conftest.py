"""Shared fixtures; makes the checkout importable as ``sapling``."""
import importlib.util
import os
import sys

import pytest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

try:
    import sapling  # noqa: F401
except ImportError:
    # Flat layout: the repository root is the package directory.
    _spec = importlib.util.spec_from_file_location(
        'sapling', os.path.join(ROOT, '__init__.py'),
        submodule_search_locations=[ROOT])
    _module = importlib.util.module_from_spec(_spec)
    sys.modules['sapling'] = _module
    _spec.loader.exec_module(_module)


@pytest.fixture(params=['cpu', 'cuda:0'])
def device(request):
    """Every placement; ``cuda:0`` uses host buffers when no GPU exists."""
    return request.param
