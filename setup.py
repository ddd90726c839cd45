from setuptools import setup, find_namespace_packages

setup(
    name="bookstudio_catalog",
    version="0.1.0",
    packages=find_namespace_packages(include=['api*', 'catalog*', 'cli*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "alembic",
        "fastapi",
        "pydantic>=2",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "bookstudio=cli.main:main",
        ],
    },
)
