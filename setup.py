from setuptools import find_packages, setup


setup(
    name="aiocrud",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "aiohttp>=3.10",  # HTTP-клиент, base_url с путем
        "pydantic>=2.0",  # Модели ответа и конфигурации запросов
        "pydantic-settings>=2.0",  # Настройки клиента из окружения
        "python-dotenv",  # Для работы с .env файлами
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.23",
        ],
    },
    description="Асинхронные CRUD-операции над REST-ресурсами",
)
