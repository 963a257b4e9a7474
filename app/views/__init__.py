from app.views.projector import project
from app.views.render import render_text

__all__ = ["project", "render_text"]
