"""Plain-text rendering of projected views for terminal sessions."""

from __future__ import annotations

from app.i18n import I18nService
from app.views.projector import BlankView, ErrorView, LoadingView, ResultView, View, WelcomeView


def capitalize_words(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def render_text(view: View, i18n: I18nService, *, locale: str | None = None) -> str:
    def _(key: str, **kwargs) -> str:
        return i18n.gettext(key, locale=locale, **kwargs)

    if isinstance(view, WelcomeView):
        return "\n".join([_("welcome.title"), _("welcome.body")])
    if isinstance(view, LoadingView):
        return _("loading.text")
    if isinstance(view, ErrorView):
        return "\n".join([_("error.heading"), view.message])
    if isinstance(view, ResultView):
        badges = " ".join(f"[{capitalize_words(name)}]" for name in view.types)
        return "\n".join(
            [
                capitalize_words(view.name),
                _("result.image", value=view.image.src),
                _("result.id", value=view.id),
                _("result.height", value=view.height),
                _("result.weight", value=view.weight),
                _("result.types", value=badges),
            ]
        )
    if isinstance(view, BlankView):
        return ""
    raise TypeError(f"Unsupported view: {view!r}")


__all__ = ["render_text", "capitalize_words"]
