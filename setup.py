from setuptools import find_packages, setup

setup(
    name="mdlinks",
    version="0.1.0",
    description="Find broken links in markdown documents",
    packages=find_packages(include=["mdlinks", "mdlinks.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI (0.26+ vendors its own click; code uses click directly)
        "click",  # CLI exceptions and context
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting
        "requests",  # URL reachability probes
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-requests",  # Type stubs
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "mdlinks=mdlinks.cli:main",
        ],
    },
)
