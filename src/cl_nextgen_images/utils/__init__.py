"""Utility collaborators."""

from .debugger import Debugger
from .url_convertor import PrefixUrlConvertor

__all__ = ["Debugger", "PrefixUrlConvertor"]
