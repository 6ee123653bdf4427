from setuptools import find_packages, setup

setup(
    name="symlinker",
    version="0.1.0",
    description="Batch symbolic link creation with relative-path planning",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI
        "pydantic>=2",  # Configuration and output schemas
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "jinja2",  # Script rendering for executors
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "symlinkc=symlinker.cli:main",
        ],
    },
)
