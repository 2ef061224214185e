from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent


def _long_description() -> str:
    readme = ROOT / "README.md"
    if not readme.exists():
        return ""
    return readme.read_text(encoding="utf-8")


setup(
    name="ballotbox",
    version="0.1.0",
    description="Minimal registry-and-tally service: users, candidates, proposals and votes over HTTP",
    long_description=_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "fastapi>=0.100",
        "uvicorn>=0.23",
        "httpx>=0.24",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    entry_points={
        "console_scripts": [
            "ballotbox=ballotbox.__main__:main",
        ],
    },
)
