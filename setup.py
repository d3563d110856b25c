"""
Review Score - Setup Configuration

Install in development mode: pip install -e .
"""

from setuptools import setup, find_packages

setup(
    name="review-score",
    version="0.1.0",
    description="Confidence-adjusted Wilson and ordinal scores for rating counts",
    author="Your Name",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24.0",
        "scipy>=1.10.0",
        "pydantic>=2.0.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "black>=23.7.0",
            "isort>=5.12.0",
            "flake8>=6.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "score=review_score.cli:main",
        ],
    },
)
