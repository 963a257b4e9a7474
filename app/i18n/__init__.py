from app.i18n.service import BASE_LOCALE, I18nService

__all__ = ["BASE_LOCALE", "I18nService"]
