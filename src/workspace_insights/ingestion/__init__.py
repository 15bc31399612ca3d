"""File loaders feeding the text analyzer."""

from .loaders import SUPPORTED_SUFFIXES, load_document

__all__ = ["SUPPORTED_SUFFIXES", "load_document"]
