# setup.py
from setuptools import find_packages, setup

setup(
    name="personnel-records",
    version="0.1.0",
    packages=find_packages(include=["personnel", "personnel.*"]),
    python_requires=">=3.11",
    install_requires=[
        "SQLAlchemy[asyncio]>=2.0",
        "asyncpg>=0.29",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "structlog>=24.1",
        "httpx>=0.27",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "aiosqlite>=0.20",
            "python-dotenv>=1.0",
        ],
    },
)
