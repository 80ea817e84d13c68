from setuptools import setup, find_packages

# Read the README.md for the long description
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="dhtml-transpiler",
    version="0.1.0",
    packages=find_packages(where=".", include=["dhtml", "dhtml.*"]),
    package_dir={"": "."},
    install_requires=[
        "mcp[cli]>=1.9.0,<2",
        "pydantic>=2.0",
        "python-dotenv>=1.0.0",
        "starlette>=0.27",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "httpx>=0.28.1",
        ],
    },
    author="0kenx",
    author_email="",
    entry_points={
        "console_scripts": [
            "dhtml-transpiler=dhtml.cli:main",
            "dhtml-server=dhtml.server:main",
        ],
    },
    description="D.Ö.N.E.R: German HTML to HTML transpiler with an MCP server",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
)
