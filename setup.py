from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="tseries",
    version="0.1.0",
    description="Time-indexed value containers with policy-gated spline interpolation",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "scipy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "tseries=tseries.__main__:main",
        ],
    },
)
