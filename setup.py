"""Setup configuration for icupa-core package."""

from setuptools import setup, find_packages
from pathlib import Path

# Read version from __version__.py
version = {}
with open("src/icupa_core/__version__.py") as fp:
    exec(fp.read(), version)

# Read README for long description
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

setup(
    name="icupa-core",
    version=version["__version__"],
    description="Entity use-case layer for the ICUPA multi-tenant travel and dine-in platform",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="ICUPA Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.115.0,<0.137",
        "uvicorn[standard]>=0.30.0",
        "asyncpg>=0.29.0",
        "redis>=5.0.1",
        "pydantic[email]>=2.0.0",
        "pydantic-settings>=2.0.0",
        "httpx>=0.24.0",
        "loguru>=0.7.0",
        "cryptography>=41.0.0",
        "prometheus-client>=0.19.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
            "pytest-mock>=3.11.0",
            "httpx>=0.24.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "icupa-api=icupa_core.api.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Framework :: FastAPI",
        "Framework :: AsyncIO",
    ],
    keywords="fastapi multi-tenant use-cases repository travel",
)
