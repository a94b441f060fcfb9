"""Itemflow: a layered HTTP request pipeline around an in-memory item store."""

__version__ = "0.1.0"
