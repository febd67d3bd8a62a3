from setuptools import find_packages, setup


setup(
    name="hwhkit",
    version="0.1.0",
    description="Configuration driven web server builder with a fixed middleware stack",
    long_description=open("README.md", encoding="UTF8").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.11.0",
    license="MIT License",
    classifiers=[
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: Implementation :: CPython",
        "License :: OSI Approved :: MIT License",
        "Framework :: FastAPI",
        "Intended Audience :: Developers",
    ],
    install_requires=[
        "orjson~=3.10.18",
        "tomli-w>=1.0.0",
        "fastapi[standard]~=0.115.12",
        "starlette>=0.46.2",
        "pydantic>=2.7,<3.0",
        "jinja2>=3.1.4",
        "pyjwt~=2.10.1",
        "python-json-logger>=2.0.7",
        "uvicorn~=0.34.0",
    ],
    extras_require={
        "linters": ["ruff~=0.11.2", "mypy~=1.15.0"],
        "dev": [
            "ruff>=0.11.2",
            "httpx>=0.27.0",
            "pytest>=8.3.5,<9.0.0",
            "pytest_asyncio>=0.26.0,<1.0.0",
        ],
    },
    packages=find_packages(include=["hwhkit", "hwhkit.*"]),
    entry_points={
        "console_scripts": ["hwhkit=hwhkit.__main__:main"],
    },
)
