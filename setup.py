from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="git-mirror",
    version="1.0.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Discover repository mirrors from the project descriptions of a GitLab group",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/git-mirror",
    packages=find_packages(),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "python-gitlab>=5.3,<6.0",
        "requests>=2.31,<3.0",
        "python-dotenv>=1.0,<2.0",
        "pydantic>=2.0.0,<3.0.0",
        "PyYAML>=6.0,<7.0",
        "pandas>=2.0.0,<3.0.0",
    ],
    extras_require={
        "dev": [
            "black>=23.3.0",
            "isort>=5.12.0",
            "flake8>=6.0.0",
            "mypy>=1.3.0",
            "pre-commit>=3.3.2",
            "pytest>=7.3.1",
            "pytest-cov>=4.1.0",
            "bandit>=1.7.5",
            "sphinx>=6.2.1",
            "sphinx-rtd-theme>=1.2.2",
        ],
    },
    entry_points={
        "console_scripts": [
            "git-mirror=git_mirror.cli.main:main",
        ],
    },
)
