from setuptools import setup, find_namespace_packages

setup(
    name="tienda_api",
    version="0.1.0",
    packages=find_namespace_packages(include=["app", "app.*"]),
    python_requires=">=3.9",
    install_requires=[
        "fastapi>=0.109.2",
        "uvicorn>=0.27.1",
        "sqlalchemy[asyncio]>=2.0.27",
        "asyncpg>=0.29.0",
        "python-dotenv>=1.0.1",
        "alembic>=1.13.1",
        "pydantic>=2.6.1",
        "pydantic-settings>=2.1.0",
        "strawberry-graphql[fastapi]>=0.220.0,<0.292.0",
        "graphql-core>=3.2.0,<3.3",
        "tzdata",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "httpx>=0.27",
        ],
    },
)
