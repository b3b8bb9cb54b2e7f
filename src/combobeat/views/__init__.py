"""Views subsystem — View protocol, ViewManager, and the rhythm stage view."""

from combobeat.views.base import View, ViewAction, ViewContext, ViewManager

__all__ = ["View", "ViewAction", "ViewContext", "ViewManager"]
