from .reader import DocumentReadError, SUPPORTED_SUFFIXES, read_document

__all__ = ['DocumentReadError', 'SUPPORTED_SUFFIXES', 'read_document']
