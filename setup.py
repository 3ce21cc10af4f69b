# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Sapling — Tensor Optimizer Engine                                   ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
Sapling build configuration.

Pure Python; NumPy is the only hard dependency.  GPU execution comes
from CuPy, installed through the ``cuda`` extra (pick the wheel that
matches the local toolkit if it is not CUDA 12).

Build
-----
    pip install -e .                          # editable install
    pip install -e .[dev]                     # + pytest
    pip install -e .[cuda]                    # + CuPy (CUDA 12.x)

Runtime environment variables:
    SAPLING_NO_CUDA         — set to 1 to ignore an installed CuPy
"""
import os

from setuptools import setup

# ── Package metadata ──
_readme = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'README.md')
try:
    with open(_readme, 'r', encoding='utf-8') as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = ''

setup(
    name='sapling',
    version='0.1.0',
    author='Pictofeed, LLC',
    author_email='engineering@pictofeed.io',
    description=(
        'Device-transparent tensors and per-parameter optimizers — '
        'NumPy + NVIDIA CUDA (CuPy)'
    ),
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='Proprietary',

    package_dir={
        'sapling': '.',
        'sapling.optim': 'optim',
        'sapling.cuda': 'cuda',
    },
    packages=[
        'sapling',
        'sapling.optim',
        'sapling.cuda',
    ],

    python_requires='>=3.10',
    install_requires=[
        'numpy>=1.24',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
        ],
        'cuda': [
            'cupy-cuda12x>=13.0',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: Other/Proprietary License',
        'Operating System :: POSIX :: Linux',
        'Operating System :: MacOS :: MacOS X',
        'Operating System :: Microsoft :: Windows',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Scientific/Engineering :: Artificial Intelligence',
    ],
    zip_safe=False,
)
