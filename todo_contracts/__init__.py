"""Users and todos behind one large store contract or several small ones."""

__version__ = "1.0.0"
