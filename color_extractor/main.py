"""Точка входа в приложение."""
from color_extractor.app import ColorExtractorApp
from color_extractor.config.logging import configure_logging
from color_extractor.config.settings import get_settings


def main() -> None:
    """Настраивает логирование, создаёт и запускает главное окно приложения."""
    settings = get_settings()
    configure_logging(settings)
    app = ColorExtractorApp(settings)
    app.mainloop()


if __name__ == "__main__":
    main()
