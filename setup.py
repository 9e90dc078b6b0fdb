from setuptools import find_packages, setup

setup(
    name="vaultref",
    version="0.1.0",
    description="Keep image references in a markdown vault consistent across renames",
    packages=find_packages(include=["vaultref", "vaultref.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output models
        "typer<0.26",  # CLI (0.26+ vendors click; code imports click directly)
        "click",  # Typer context access in cli/_handle_stage_result.py
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "watchdog",  # File system monitoring
        "markdown-it-py",  # Structural hints (code sections)
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "vaultref=vaultref.cli:main",
        ],
    },
)
