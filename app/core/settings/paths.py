"""
Пути проекта и выбор файла переменных окружения.

- Находит корень проекта по маркерным файлам (pyproject.toml, .git).
- Хранит пути к директориям приложения и фикстур справочников.
- Определяет, какой .env файл использовать (.env, .env.dev, .env.test или ENV_FILE).
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# ENVIRONMENT -> (файл окружения, тип окружения)
ENVIRONMENT_FILES = {
    "test": (Path(".env.test"), "test"),
    "development": (Path(".env.dev"), "development"),
    "production": (Path(".env"), "production"),
}


class PathSettings:
    """
    Централизованные пути проекта.

    Атрибуты класса:
        PROJECT_ROOT (Path): Корневая директория проекта.
        APP_DIR (Path): Пакет приложения (app).
        FIXTURES_DIR (Path): JSON-фикстуры справочников (типы клиентов, продавцы).
    """

    @staticmethod
    def find_project_root() -> Path:
        """
        Поднимается от текущей директории вверх, пока не найдёт маркерный файл.

        Returns:
            Path: Путь к корню проекта (или текущая директория, если маркер не найден).
        """
        current_dir = Path.cwd()
        markers = ["pyproject.toml", ".git"]

        for parent in [current_dir, *current_dir.parents]:
            if any((parent / marker).exists() for marker in markers):
                return parent

        logger.warning("Не удалось определить корень проекта, используем текущую директорию")
        return current_dir

    PROJECT_ROOT = find_project_root()

    APP_DIR = PROJECT_ROOT / "app"
    DATA_DIR = PROJECT_ROOT / "data"
    FIXTURES_DIR = DATA_DIR / "fixtures"

    @staticmethod
    def get_env_file_and_type() -> tuple[Path, str]:
        """
        Определяет файл переменных окружения и тип окружения.

        Порядок:
        - ENVIRONMENT (test/development/production) имеет приоритет;
        - затем явный путь из ENV_FILE;
        - затем .env.dev, если он есть в текущей директории;
        - иначе .env (production).

        Returns:
            tuple[Path, str]: Путь к .env файлу и тип окружения.
        """
        environment = os.getenv("ENVIRONMENT")
        env_file_path = os.getenv("ENV_FILE")

        if environment:
            env_path, env_type = ENVIRONMENT_FILES.get(environment.lower(), ENVIRONMENT_FILES["production"])
        elif env_file_path:
            env_path = Path(env_file_path)
            env_type = "test" if ".env.test" in str(env_path) else "custom"
        elif Path(".env.dev").exists():
            env_path, env_type = ENVIRONMENT_FILES["development"]
        else:
            env_path, env_type = ENVIRONMENT_FILES["production"]

        logger.info("Запуск в режиме: %s", env_type.upper())
        logger.info("Конфигурация: %s", env_path)

        return env_path, env_type
