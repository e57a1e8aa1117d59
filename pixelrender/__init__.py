"""
pixelrender
===========

Растеризация штрихкодов: BitMatrix -> упакованный буфер пикселей.

Этот пакет предоставляет:
    - Растеризацию булевой матрицы модулей в буфер 32-битных пикселей
      (порядок каналов A, B, G, R от старшего байта к младшему)
    - Резервирование полосы под подпись для одномерных штрихкодов
    - Форматирование подписи EAN-8/EAN-13 с контрольной цифрой
    - Построение BitMatrix из данных через python-barcode и qrcode
    - Экспорт буфера в изображение Pillow / PNG

Пример базового использования:
    >>> from pixelrender import BarcodeFormat, PixelBufferRenderer
    >>> from pixelrender.barcodegen import matrix_for
    >>>
    >>> matrix = matrix_for(BarcodeFormat.EAN_13, "400638133393", height=60)
    >>> buffer = PixelBufferRenderer().render(matrix, BarcodeFormat.EAN_13, "400638133393")
    >>> buffer.caption.text
    '4   006381   333931'
    >>> buffer.to_image().save("ean13.png")

Управление конфигурацией:
    >>> import os
    >>> os.environ['PIXELRENDER_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from pixelrender import load_config, PixelBufferRenderer
    >>> renderer = PixelBufferRenderer.from_config(load_config())

Версия: 0.1.0
Лицензия: MIT
Python: 3.9+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__description__ = "Bit matrix to packed ARGB pixel buffer renderer with barcode captions"
__license__ = "MIT"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

_LOGGER_NAMESPACE = "pixelrender"

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================


def _setup_logging() -> None:
    """
    Инициализировать логирование пакета.

    Настраивает логгер ``pixelrender`` с:
    - Консольным обработчиком (stderr) для WARNING и выше
    - Ротирующим файловым обработчиком, если задана переменная
      окружения PIXELRENDER_LOG_FILE

    Уровень логирования берётся из PIXELRENDER_LOG_LEVEL
    (DEBUG, INFO, WARNING, ERROR, CRITICAL; по умолчанию INFO).

    Идемпотентна - повторные вызовы не добавляют обработчиков.
    """
    log_level_str = os.environ.get("PIXELRENDER_LOG_LEVEL", "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(_LOGGER_NAMESPACE)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get("PIXELRENDER_LOG_FILE")
    if log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                "Не удалось инициализировать файловое логирование: %s. "
                "Используется только консоль.",
                e,
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён ``pixelrender``.

    Аргументы:
        module_name: Имя модуля, обычно ``__name__``.

    Возвращает:
        logging.Logger с именем 'pixelrender.<module_name>'.

    Пример:
        >>> get_logger("plugins.svg").name
        'pixelrender.plugins.svg'
        >>> get_logger("__main__").name
        'pixelrender.main'
    """
    if module_name == _LOGGER_NAMESPACE or module_name.startswith(_LOGGER_NAMESPACE + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{_LOGGER_NAMESPACE}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{_LOGGER_NAMESPACE}.{clean_name}")


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "foreground": "black",
    "background": "white",
    "font_family": "Arial",
    "font_size": 10.0,
    "font_stretch": "normal",
    "font_style": "normal",
    "font_weight": "normal",
    "log_level": "INFO",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить конфигурацию рендерера из JSON или вернуть значения по умолчанию.

    Ключи конфигурации:
        - foreground: str - Цвет модулей (имя CSS или #RRGGBB[AA])
        - background: str - Цвет фона
        - font_family: str - Семейство шрифта подписи
        - font_size: float - Размер шрифта подписи
        - font_stretch / font_style / font_weight: str - Начертание
        - log_level: str - Уровень логирования

    Аргументы:
        config_path: Путь к файлу. Если None, ищется 'pixelrender.json'
                     в текущем каталоге.

    Возвращает:
        Словарь со всеми ключами по умолчанию, переопределёнными
        пользовательскими значениями.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("pixelrender.json")

    config = _DEFAULT_CONFIG.copy()

    if not config_path.exists():
        logger.info(
            "Файл конфигурации %s не найден. Используется конфигурация по умолчанию.",
            config_path,
        )
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        if not isinstance(user_config, dict):
            raise ValueError(
                f"Файл конфигурации должен содержать JSON-объект, "
                f"получен {type(user_config).__name__}"
            )

        config.update(user_config)
        logger.info("Конфигурация загружена из %s", config_path)
        logger.debug("Конфигурация: %s", config)

    except json.JSONDecodeError as e:
        logger.warning(
            "Не удалось разобрать %s: недопустимый JSON в строке %d, столбце %d. "
            "Используется конфигурация по умолчанию.",
            config_path,
            e.lineno,
            e.colno,
        )
    except OSError as e:
        logger.warning(
            "Не удалось прочитать %s: %s. Используется конфигурация по умолчанию.",
            config_path,
            e,
        )
    except ValueError as e:
        logger.warning(
            "Недопустимый формат конфигурации: %s. Используется конфигурация по умолчанию.",
            e,
        )

    return config


def check_dependencies() -> Dict[str, bool]:
    """
    Проверить доступность сторонних зависимостей.

    Не генерирует исключений - возвращает словарь состояний.

    Проверяемые зависимости:
        - pillow: экспорт буфера в изображение
        - python-barcode: построение матриц 1D-штрихкодов
        - qrcode: построение матриц QR
    """
    dependencies: Dict[str, bool] = {}

    try:
        import PIL  # noqa: F401

        dependencies["pillow"] = True
    except ImportError:
        dependencies["pillow"] = False

    try:
        import barcode  # noqa: F401

        dependencies["python-barcode"] = True
    except ImportError:
        dependencies["python-barcode"] = False

    try:
        import qrcode  # noqa: F401

        dependencies["qrcode"] = True
    except ImportError:
        dependencies["qrcode"] = False

    return dependencies


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

# Импорты размещены после утилит, чтобы логирование было настроено первым.

from .exceptions import InvalidArgumentError, MatrixSourceError, RenderError  # noqa: E402
from .model.bit_matrix import BitMatrix  # noqa: E402
from .model.color import BLACK, TRANSPARENT, WHITE, Color  # noqa: E402
from .model.enums import (  # noqa: E402
    CAPTION_FORMATS,
    BarcodeFormat,
    FontStretch,
    FontStyle,
    FontWeight,
)
from .renderer.caption import CAPTION_HEIGHT, CaptionSpec, format_caption  # noqa: E402
from .renderer.checksum import (  # noqa: E402
    calculate_checksum_digit_modulo10,
    checksum_digit_modulo10,
    is_valid_modulo10,
)
from .renderer.pixel_buffer import PackedPixelBuffer  # noqa: E402
from .renderer.pixel_renderer import PixelBufferRenderer  # noqa: E402
from .renderer.protocols import BarcodeRenderer  # noqa: E402

__all__ = [
    # Метаданные версии
    "__version__",
    "__description__",
    "__license__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Утилиты
    "get_logger",
    "load_config",
    "check_dependencies",
    # Исключения
    "RenderError",
    "InvalidArgumentError",
    "MatrixSourceError",
    # Модель
    "BitMatrix",
    "Color",
    "BLACK",
    "WHITE",
    "TRANSPARENT",
    "BarcodeFormat",
    "CAPTION_FORMATS",
    "FontStretch",
    "FontStyle",
    "FontWeight",
    # Рендеринг
    "BarcodeRenderer",
    "PixelBufferRenderer",
    "PackedPixelBuffer",
    "CaptionSpec",
    "CAPTION_HEIGHT",
    "format_caption",
    "calculate_checksum_digit_modulo10",
    "checksum_digit_modulo10",
    "is_valid_modulo10",
]

# =============================================================================
# ИНИЦИАЛИЗАЦИЯ ПАКЕТА
# =============================================================================

_setup_logging()

_logger = get_logger(__name__)
_logger.debug("pixelrender v%s инициализирован", __version__)
