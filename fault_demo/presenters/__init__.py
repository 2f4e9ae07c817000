"""Presenters for Fault Demo output."""

from .console_presenter import ConsolePresenter

__all__ = ["ConsolePresenter"]
